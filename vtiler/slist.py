"""A circular singly linked list with tracked front and back."""

from __future__ import annotations

import inspect
import os
from typing import Any, Callable, Iterator, Optional

__all__ = ["Element", "List", "slice_of_elements", "caller_file_line"]


class Element:
    """A list node carrying a value; ``next`` wraps from back to front."""

    __slots__ = ("value", "_next", "_list")

    def __init__(self, value: Any = None) -> None:
        self.value = value
        self._next: Optional[Element] = None
        self._list: Optional[List] = None

    @property
    def next(self) -> Optional[Element]:
        return self._next

    @property
    def list(self) -> Optional[List]:
        return self._list

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"Element({self.value!r})"


def slice_of_elements(*args: Any) -> list[Element]:
    """Wrap each value in a fresh element."""
    return [Element(value) for value in args]


def caller_file_line() -> str:
    """Return ``file:line`` of the site that called the caller of this function."""
    frame = inspect.currentframe()
    try:
        target = frame.f_back.f_back if frame and frame.f_back else None
        if target is None:
            return "n/a"
        return f"{os.path.basename(target.f_code.co_filename)}:{target.f_lineno}"
    finally:
        del frame


class List:
    """A circular singly linked list of :class:`Element` nodes."""

    def __init__(self) -> None:
        self._root: Optional[Element] = None
        self._end: Optional[Element] = None
        self._len = 0

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[Element]:
        if self._len == 0:
            return iter(())
        snapshot = []
        element = self._root
        while True:
            snapshot.append(element)
            if element is self._end:
                break
            element = element._next
        return iter(snapshot)

    def front(self) -> Optional[Element]:
        return self._root if self._len else None

    def back(self) -> Optional[Element]:
        return self._end if self._len else None

    def is_in_list(self, element: Element) -> bool:
        if element.list is not self:
            return False
        return self.get_before(element) is not None

    def get_before(self, mark: Element) -> Optional[Element]:
        """Return the element whose ``next`` is ``mark``, or None."""
        if mark.list is not self or self._len == 0:
            return None
        if mark is self._root:
            return self._end
        last = self._root
        element = self._root._next
        while element is not self._root:
            if element is mark:
                return last
            last = element
            element = element._next
        return None

    @staticmethod
    def _detach(element: Element) -> None:
        element._next = None
        element._list = None

    def _insert(self, element: Optional[Element], at: Optional[Element]) -> Optional[Element]:
        if element is None or at is None or not self.is_in_list(at):
            return element
        following = at._next
        at._next = element
        element._next = following
        element._list = self
        self._len += 1
        return element

    def _remove(self, element: Element) -> Element:
        if element is self._root:
            if element._next is self._root:
                self._root = None
                self._end = None
                self._len = 0
            else:
                self._root = element._next
                self._end._next = self._root
                self._len -= 1
            self._detach(element)
            return element

        previous = self.get_before(element)
        if previous is None:
            return element
        previous._next = element._next
        if element is self._end:
            self._end = previous
        self._len -= 1
        self._detach(element)
        return element

    def remove(self, element: Element) -> Element:
        """Detach the element if it belongs to this list; always returns it."""
        if element.list is self:
            self._remove(element)
        return element

    def _push_first(self, element: Element) -> Element:
        element._list = self
        element._next = element
        self._root = element
        self._end = element
        self._len = 1
        return element

    def push_front(self, element: Optional[Element]) -> Optional[Element]:
        if element is None:
            return None
        if self._len == 0:
            return self._push_first(element)
        if element.list is self:
            if element is self._root:
                return element
            self._remove(element)
        element._next = self._root
        element._list = self
        self._end._next = element
        self._root = element
        self._len += 1
        return element

    def push_back(self, element: Optional[Element]) -> Optional[Element]:
        if element is None:
            return None
        if self._len == 0:
            return self._push_first(element)
        if element.list is self:
            if element is self._end:
                return element
            self._remove(element)
        element._next = self._root
        element._list = self
        self._end._next = element
        self._end = element
        self._len += 1
        return element

    def insert_before(self, element: Optional[Element], mark: Element) -> Optional[Element]:
        """Insert before ``mark``; returns None when ``mark`` is not in this list."""
        if not self.is_in_list(mark):
            return None
        if mark is self._root:
            return self.push_front(element)
        previous = self.get_before(mark)
        if previous is None:
            return None
        return self._insert(element, previous)

    def insert_after(self, element: Optional[Element], mark: Element) -> Optional[Element]:
        """Insert after ``mark``; returns None when ``mark`` is not in this list."""
        if not self.is_in_list(mark):
            return None
        if mark is self._end:
            return self.push_back(element)
        return self._insert(element, mark)

    def find_elements_between(
        self,
        start: Optional[Element],
        end: Optional[Element],
        finder: Callable[[Element], bool],
    ) -> Optional[Element]:
        """Return the first element from ``start`` through ``end`` that ``finder`` accepts."""
        if self._len == 0:
            return None
        if start is None:
            start = self._root
        if end is None:
            end = self._end
        if start.list is not self or end.list is not self:
            return None
        element = start
        while True:
            if finder(element):
                return element
            if element is end:
                return None
            element = element._next

    def for_each(self, fn: Callable[[Element], bool]) -> None:
        """Call ``fn`` on each element until it returns a false value."""
        for element in self:
            if not fn(element):
                break

    def for_each_idx(self, fn: Callable[[int, Element], bool]) -> None:
        """Call ``fn`` with index and element until it returns a false value."""
        for index, element in enumerate(self):
            if not fn(index, element):
                break

    def clear(self) -> None:
        for element in list(self):
            self._detach(element)
        self._root = None
        self._end = None
        self._len = 0