from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

E = TypeVar("E")


class List(ABC, Generic[E]):
    """Positionally indexed sequence of elements of type E.

    ``None`` is the absent value: queries with no answer return it, and
    insertions that receive it do nothing. No operation raises on misuse.
    """

    # ---- endpoints ----
    @abstractmethod
    def first(self) -> Optional[E]:
        """First element, or None if the list is empty."""

    @abstractmethod
    def last(self) -> Optional[E]:
        """Last element, or None if the list is empty."""

    @abstractmethod
    def add_last(self, element: Optional[E]) -> None:
        """Append ``element``; ignored when it is None."""

    @abstractmethod
    def add_first(self, element: Optional[E]) -> None:
        """Prepend ``element``; ignored when it is None."""

    @abstractmethod
    def remove_first(self) -> Optional[E]:
        """Detach and return the first element, or None if empty."""

    @abstractmethod
    def remove_last(self) -> Optional[E]:
        """Detach and return the last element, or None if empty."""

    # ---- positional ----
    @abstractmethod
    def insert(self, element: Optional[E], index: int) -> None:
        """Insert ``element`` so that it ends up at ``index``.

        Ignored when ``element`` is None or ``index`` is negative. An index
        past the end is clamped to ``size()``, i.e. the element is appended.
        """

    @abstractmethod
    def remove(self, index: int) -> Optional[E]:
        """Detach and return the element at ``index``.

        Returns None without changing anything if ``index`` is out of range.
        """

    @abstractmethod
    def get(self, index: int) -> Optional[E]:
        """Element at ``index``, or None if ``index`` is out of range."""

    # ---- size ----
    @abstractmethod
    def size(self) -> int:
        """Number of stored elements."""

    @abstractmethod
    def is_empty(self) -> bool:
        """True when no elements are stored."""

    # ---- output ----
    @abstractmethod
    def print_list(self, out=None) -> None:
        """Write each element followed by a newline to ``out``.

        ``out`` is any writable text stream; defaults to standard output.
        """
