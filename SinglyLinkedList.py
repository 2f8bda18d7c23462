from __future__ import annotations
from typing import Generic, Iterable, Iterator, Optional, TextIO

from ListADT import E, List


class _Node(Generic[E]):
    __slots__ = ("_element", "next")

    def __init__(self, element: E, next: Optional["_Node[E]"] = None):
        self._element: E = element
        self.next: Optional["_Node[E]"] = next

    @property
    def element(self) -> E:
        return self._element


class SinglyLinkedList(List[E]):
    """Sequence backed by a forward-only chain of nodes.

    Endpoint insertion and head removal are O(1). Tail removal and all
    positional operations walk the chain from the head and are O(n).
    """

    def __init__(self, items: Optional[Iterable[E]] = None):
        self._head: Optional[_Node[E]] = None
        self._tail: Optional[_Node[E]] = None
        self._size: int = 0
        if items is not None:
            for element in items:
                self.add_last(element)

    # ---- basics ----
    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        n = self._head
        while n is not None:
            nxt = n.next
            n.next = None
            n = nxt
        self._head = self._tail = None
        self._size = 0

    # ---- access ----
    def first(self) -> Optional[E]:
        if self._head is None:
            return None
        return self._head.element

    def last(self) -> Optional[E]:
        if self._tail is None:
            return None
        return self._tail.element

    # ---- add/remove at the ends ----
    def add_last(self, element: Optional[E]) -> None:
        if element is None:
            return
        n = _Node(element)
        if self._size == 0:
            self._head = n
        else:
            self._tail.next = n
        self._tail = n
        self._size += 1

    def add_first(self, element: Optional[E]) -> None:
        if element is None:
            return
        n = _Node(element, self._head)
        if self._size == 0:
            self._tail = n
        self._head = n
        self._size += 1

    def remove_first(self) -> Optional[E]:
        if self._head is None:
            return None
        n = self._head
        self._head = n.next
        n.next = None
        if self._head is None:
            self._tail = None
        self._size -= 1
        return n.element

    def remove_last(self) -> Optional[E]:
        if self._size == 0:
            return None
        if self._size == 1:
            element = self._head.element
            self._head = self._tail = None
            self._size = 0
            return element
        # no back links: stop on the node before the tail
        prev = self._walk(self._size - 2)
        element = prev.next.element
        prev.next = None
        self._tail = prev
        self._size -= 1
        return element

    # ---- indexed ops ----
    def insert(self, element: Optional[E], index: int) -> None:
        if element is None or index < 0:
            return
        index = min(index, self._size)
        if index == 0:
            self.add_first(element)
            return
        prev = self._walk(index - 1)
        n = _Node(element, prev.next)
        prev.next = n
        if n.next is None:
            self._tail = n
        self._size += 1

    def remove(self, index: int) -> Optional[E]:
        if index < 0 or index >= self._size:
            return None
        if index == 0:
            return self.remove_first()
        prev = self._walk(index - 1)
        victim = prev.next
        prev.next = victim.next
        victim.next = None
        if prev.next is None:
            self._tail = prev
        self._size -= 1
        return victim.element

    def get(self, index: int) -> Optional[E]:
        if index < 0 or index >= self._size:
            return None
        return self._walk(index).element

    def _walk(self, steps: int) -> _Node[E]:
        n = self._head
        for _ in range(steps):
            n = n.next
        return n

    # ---- utils ----
    def print_list(self, out: Optional[TextIO] = None) -> None:
        for element in self:
            print(element, file=out)

    def to_list(self) -> list[E]:
        return list(self)

    def __iter__(self) -> Iterator[E]:
        n = self._head
        while n is not None:
            yield n.element
            n = n.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"SinglyLinkedList({self.to_list()!r})"
