"""A doubly linked list whose ends are joined through a hidden sentinel."""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterator, Optional

__all__ = ["Element", "List", "slice_of_elements"]

_log = logging.getLogger(__name__)


class Element:
    """A list node carrying a value.

    ``next`` and ``prev`` hide the sentinel: at either end of a list they
    are ``None``, and they are always ``None`` for a detached element.
    """

    __slots__ = ("value", "_next", "_prev", "_list")

    def __init__(self, value: Any = None) -> None:
        self.value = value
        self._next: Optional[Element] = None
        self._prev: Optional[Element] = None
        self._list: Optional[List] = None

    @property
    def next(self) -> Optional[Element]:
        following = self._next
        if self._list is not None and following is not self._list._root:
            return following
        return None

    @property
    def prev(self) -> Optional[Element]:
        previous = self._prev
        if self._list is not None and previous is not self._list._root:
            return previous
        return None

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


class List:
    """A doubly linked list of :class:`Element` nodes."""

    def __init__(self) -> None:
        self._root = Element()
        self._root._list = self
        self._len = 0

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[Element]:
        element = self.front()
        while element is not None:
            following = element.next
            yield element
            element = following

    def front(self) -> Optional[Element]:
        if self._len == 0:
            return None
        return self._root.next

    def back(self) -> Optional[Element]:
        if self._len == 0:
            return None
        return self._root.prev

    def _insert(self, element: Optional[Element], at: Element) -> Optional[Element]:
        if element is None:
            return None
        following = at.next
        if following is None:
            following = self._root
        at._next = element
        element._prev = at
        element._next = following
        following._prev = element
        element._list = self
        self._len += 1
        return element

    def _remove(self, element: Element) -> Element:
        previous = element.prev
        if previous is None and self._root.next is element:
            previous = self._root
        following = element.next
        if following is None and self._root.prev is element:
            following = self._root
        if previous is not None:
            previous._next = following
        if following is not None:
            following._prev = previous
        element._next = None
        element._prev = None
        element._list = None
        self._len -= 1
        return element

    def _last_or_root(self) -> Element:
        last = self._root.prev
        return self._root if last is None else last

    def remove(self, element: Element) -> Element:
        """Detach the element if it belongs to this list; always returns it."""
        if element.list is self:
            self._remove(element)
        return element

    def push_front(self, element: Optional[Element]) -> Optional[Element]:
        return self._insert(element, self._root)

    def push_back(self, element: Optional[Element]) -> Optional[Element]:
        return self._insert(element, self._last_or_root())

    def insert_before(self, element: Optional[Element], mark: Element) -> Optional[Element]:
        """Insert before ``mark``; returns None when ``mark`` is not in this list."""
        if mark.list is not self:
            _log.debug("mark does not belong to this list")
            return None
        previous = mark.prev
        if previous is None:
            previous = self._root
        return self._insert(element, previous)

    def insert_after(self, element: Optional[Element], mark: Element) -> Optional[Element]:
        """Insert after ``mark``; returns None when ``mark`` is not in this list."""
        if mark.list is not self:
            return None
        return self._insert(element, mark)

    def move_to_front(self, element: Element) -> None:
        if element.list is not self or self._root.next is element:
            return
        self._insert(self._remove(element), self._root)

    def move_to_back(self, element: Element) -> None:
        if element.list is not self or self._root.prev is element:
            return
        at = self._last_or_root()
        self._insert(self._remove(element), at)

    def move_before(self, element: Element, mark: Element) -> None:
        if element.list is not self or element is mark or mark.list is not self:
            return
        previous = mark.prev
        if previous is None:
            previous = self._root
        if previous is element:
            return
        self._insert(self._remove(element), previous)

    def move_after(self, element: Element, mark: Element) -> None:
        if element.list is not self or element is mark or mark.list is not self:
            return
        self._insert(self._remove(element), mark)

    def replace(self, element: Element, mark: Element) -> Optional[Element]:
        """Put ``element`` where ``mark`` is and return the detached ``mark``."""
        if mark.list is not self:
            return None
        following = mark.next
        self.remove(mark)
        if following is None:
            self.push_back(element)
        else:
            self.insert_before(element, following)
        return mark

    def find_element_forward(
        self,
        start: Optional[Element],
        end: Optional[Element],
        finder: Callable[[Element], bool],
    ) -> Optional[Element]:
        """Search forward from ``start`` to ``end``, wrapping past the back once."""
        if self._len == 0:
            return None
        if start is None:
            start = self.front()
        if end is None:
            end = self.back()
        if start.list is not self or end.list is not self:
            return None
        saw_end_of_list = False
        element: Optional[Element] = start
        while True:
            if element is None:
                if saw_end_of_list:
                    return None
                saw_end_of_list = True
                element = self.front()
            if finder(element):
                return element
            if element is end:
                return None
            element = element.next

    def find_element_backward(
        self,
        start: Optional[Element],
        end: Optional[Element],
        finder: Callable[[Element], bool],
    ) -> Optional[Element]:
        """Search backward from ``start`` down to ``end``."""
        if self._len == 0:
            return None
        if start is None:
            start = self.back()
        if end is None:
            end = self.front()
        if start.list is not self or end.list is not self:
            return None
        stop = end.prev
        element: Optional[Element] = start
        while element is not None and element is not stop:
            if finder(element):
                return element
            element = element.prev
        return None

    def is_sentinel(self, element: Element) -> bool:
        return element.list is self and element is self._root