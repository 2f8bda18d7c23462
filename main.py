import sys

from SinglyLinkedList import SinglyLinkedList

# section marker the grader splits output on
DELIM = "&-=-&"


def print_section(name: str):
    print(f"{DELIM} {name}")


def print_snapshot(lst: "SinglyLinkedList", label: str = ""):
    if label:
        print(f"{label}: ", end="")
    vs = lst.to_list()
    print(f"[{' '.join(map(str, vs))}] size={lst.size()}")


# ───────────────────────── tasks ─────────────────────────

def task1_endpoints():
    print_section("start-task1")

    lst = SinglyLinkedList()
    print_section("empty-list")
    print(f"empty={lst.is_empty()} size={lst.size()}")

    print_section("add_last")
    lst.add_last("a")
    lst.add_last("b")
    lst.add_last("c")
    print_snapshot(lst, "after-add")
    print(f"first={lst.first()} last={lst.last()} get1={lst.get(1)}")

    print_section("print_list")
    lst.print_list()

    print_section("add_first")
    nums = SinglyLinkedList()
    for i in (1, 2, 3):
        nums.add_first(i)  # [3 2 1]
    print_snapshot(nums, "after-prepend")
    print(f"get0={nums.get(0)} get2={nums.get(2)}")

    print_section("remove_last")
    out = [lst.remove_last() for _ in range(3)]
    print(f"removed={' '.join(out)}")
    print_snapshot(lst, "after-remove")
    print(f"again={lst.remove_last()} first={lst.first()} last={lst.last()}")


def task2_positional():
    print_section("start-task2")

    lst = SinglyLinkedList(["a", "b", "d"])
    print_snapshot(lst, "seed")

    print_section("insert")
    lst.insert("c", 2)              # [a b c d]
    print_snapshot(lst, "mid-insert")
    print(f"last={lst.last()}")

    print_section("clamp-insert")
    short = SinglyLinkedList(["a", "b"])
    short.insert("z", 99)           # [a b z]
    print(f"last={short.last()}")
    short.add_last("q")             # tail must point at z before this
    print_snapshot(short, "after-add")

    print_section("remove")
    print(f"removed={lst.remove(1)}")             # b
    print(f"removed={lst.remove(lst.size() - 1)}")  # d (tail)
    print_snapshot(lst, "after-remove")
    print(f"last={lst.last()}")


def task3_misuse():
    print_section("start-task3")

    lst = SinglyLinkedList(["x"])
    print_snapshot(lst, "seed")

    print_section("absorbed")
    lst.add_last(None)
    lst.add_first(None)
    lst.insert(None, 0)
    lst.insert("y", -1)
    print(f"remove-1={lst.remove(-1)} remove5={lst.remove(5)} get-1={lst.get(-1)}")
    print_snapshot(lst, "after-misuse")
    print(f"first={lst.first()}")

    print_section("empty-queries")
    empty = SinglyLinkedList()
    print(
        f"first={empty.first()} last={empty.last()} "
        f"remove_first={empty.remove_first()} remove_last={empty.remove_last()} "
        f"get0={empty.get(0)} remove0={empty.remove(0)} size={empty.size()}"
    )


# ───────────────────────── entry ─────────────────────────

def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    which = argv[0] if argv else ""
    if which == "task1":
        task1_endpoints(); return 0
    if which == "task2":
        task2_positional(); return 0
    if which == "task3":
        task3_misuse(); return 0
    # default: run all
    task1_endpoints()
    task2_positional()
    task3_misuse()
    return 0


if __name__ == "__main__":
    sys.exit(main())
