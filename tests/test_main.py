import main


def sections(out):
    return [line.split(" ", 1)[1] for line in out.splitlines() if line.startswith(main.DELIM)]


def test_task1_output(capsys):
    assert main.main(["task1"]) == 0
    out = capsys.readouterr().out
    assert sections(out) == [
        "start-task1", "empty-list", "add_last", "print_list", "add_first", "remove_last",
    ]
    assert "empty=True size=0" in out
    assert "after-add: [a b c] size=3" in out
    assert "first=a last=c get1=b" in out
    assert "&-=-& print_list\na\nb\nc\n&-=-& add_first" in out
    assert "after-prepend: [3 2 1] size=3" in out
    assert "get0=3 get2=1" in out
    assert "removed=c b a" in out
    assert "after-remove: [] size=0" in out
    assert "again=None first=None last=None" in out


def test_task2_output(capsys):
    assert main.main(["task2"]) == 0
    out = capsys.readouterr().out
    assert "mid-insert: [a b c d] size=4" in out
    assert "after-add: [a b z q] size=4" in out
    assert "removed=b\nremoved=d\n" in out
    assert "after-remove: [a c] size=2\nlast=c" in out


def test_task3_output(capsys):
    assert main.main(["task3"]) == 0
    out = capsys.readouterr().out
    assert "remove-1=None remove5=None get-1=None" in out
    assert "after-misuse: [x] size=1\nfirst=x" in out
    assert (
        "first=None last=None remove_first=None remove_last=None "
        "get0=None remove0=None size=0"
    ) in out


def test_default_runs_every_task(capsys):
    assert main.main([]) == 0
    names = sections(capsys.readouterr().out)
    assert [n for n in names if n.startswith("start-")] == [
        "start-task1", "start-task2", "start-task3",
    ]
