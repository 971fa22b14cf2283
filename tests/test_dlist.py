import pytest

from vtiler.dlist import Element, List, slice_of_elements


def _check(lst, expected):
    assert len(lst) == len(expected)
    assert list(lst) == expected
    if not expected:
        assert lst.front() is None
        assert lst.back() is None
        return
    assert lst.front() is expected[0]
    assert lst.back() is expected[-1]
    for i, element in enumerate(expected):
        want_prev = expected[i - 1] if i > 0 else None
        want_next = expected[i + 1] if i < len(expected) - 1 else None
        assert element.prev is want_prev
        assert element.next is want_next


def _values(lst):
    return [element.value for element in lst]


def test_list_operations():
    e = slice_of_elements("a", 1, 2, 3, "banana")
    lst = List()
    _check(lst, [])

    lst.push_front(e[0])
    _check(lst, [e[0]])
    lst.move_to_front(e[0])
    _check(lst, [e[0]])
    lst.move_to_back(e[0])
    _check(lst, [e[0]])
    lst.remove(e[0])
    _check(lst, [])

    lst.push_front(e[2])
    lst.push_front(e[1])
    lst.push_back(e[3])
    lst.push_back(e[4])
    _check(lst, e[1:])

    lst.remove(e[2])
    _check(lst, [e[1], e[3], e[4]])

    lst.move_to_front(e[3])
    _check(lst, [e[3], e[1], e[4]])

    lst.move_to_front(e[1])
    lst.move_to_back(e[3])
    _check(lst, [e[1], e[4], e[3]])

    lst.move_to_front(e[3])
    _check(lst, [e[3], e[1], e[4]])
    lst.move_to_front(e[3])
    _check(lst, [e[3], e[1], e[4]])

    lst.move_to_back(e[3])
    _check(lst, [e[1], e[4], e[3]])
    lst.move_to_back(e[3])
    _check(lst, [e[1], e[4], e[3]])

    lst.insert_before(e[2], e[1])
    _check(lst, [e[2], e[1], e[4], e[3]])
    lst.remove(e[2])
    lst.insert_before(e[2], e[4])
    _check(lst, [e[1], e[2], e[4], e[3]])
    lst.remove(e[2])

    lst.insert_after(e[2], e[1])
    _check(lst, [e[1], e[2], e[4], e[3]])
    lst.remove(e[2])
    lst.insert_after(e[2], e[4])
    _check(lst, [e[1], e[4], e[2], e[3]])
    lst.remove(e[2])
    lst.insert_after(e[2], e[3])
    _check(lst, [e[1], e[4], e[3], e[2]])
    lst.remove(e[2])

    total = sum(el.value for el in lst if isinstance(el.value, int))
    assert total == 4

    for element in lst:
        lst.remove(element)
    _check(lst, [])


def test_remove():
    lst = List()
    e = slice_of_elements(1, 2)
    lst.push_back(e[0])
    lst.push_back(e[1])
    _check(lst, e)
    first = lst.front()
    lst.remove(first)
    _check(lst, [e[1]])
    lst.remove(first)
    _check(lst, [e[1]])


def test_remove_from_other_list_is_noop():
    e1 = slice_of_elements(1, 2, 8)
    l1 = List()
    l1.push_back(e1[0])
    l1.push_back(e1[1])

    e2 = slice_of_elements(3, 4)
    l2 = List()
    l2.push_back(e2[0])
    l2.push_back(e2[1])

    ef1 = l1.front()
    l2.remove(ef1)
    assert len(l2) == 2
    l1.insert_before(e1[2], ef1)
    assert len(l1) == 3
    assert _values(l1) == [8, 1, 2]


def test_removed_element_is_detached():
    lst = List()
    lst.push_back(Element(1))
    lst.push_back(Element(2))
    element = lst.front()
    lst.remove(element)
    assert element.value == 1
    assert element.next is None
    assert element.prev is None
    assert element.list is None


def test_move():
    lst = List()
    e1, e2, e3, e4 = Element(1), Element(2), Element(3), Element(4)
    for element in (e1, e2, e3, e4):
        lst.push_back(element)

    lst.move_after(e3, e3)
    _check(lst, [e1, e2, e3, e4])
    lst.move_before(e2, e2)
    _check(lst, [e1, e2, e3, e4])

    lst.move_after(e3, e2)
    _check(lst, [e1, e2, e3, e4])
    lst.move_before(e2, e3)
    _check(lst, [e1, e2, e3, e4])

    lst.move_before(e2, e4)
    _check(lst, [e1, e3, e2, e4])

    lst.move_before(e4, e1)
    _check(lst, [e4, e1, e3, e2])

    lst.move_after(e2, e4)
    _check(lst, [e4, e2, e1, e3])

    lst.move_after(e2, e1)
    _check(lst, [e4, e1, e2, e3])


def test_zero_list():
    l1 = List()
    l1.push_front(Element(1))
    assert _values(l1) == [1]
    assert l1.push_front(None) is None
    assert _values(l1) == [1]

    l2 = List()
    l2.push_back(Element(1))
    assert _values(l2) == [1]
    l2.push_back(None)
    assert _values(l2) == [1]


def test_insert_before_unknown_mark():
    lst = List()
    for value in (1, 2, 3):
        lst.push_back(Element(value))
    assert lst.insert_before(Element(4), Element()) is None
    assert _values(lst) == [1, 2, 3]


def test_insert_after_unknown_mark():
    lst = List()
    for value in (1, 2, 3):
        lst.push_back(Element(value))
    assert lst.insert_after(Element(4), Element()) is None
    assert _values(lst) == [1, 2, 3]


def test_move_unknown_mark():
    l1, l2 = List(), List()
    e1, e2 = Element(1), Element(2)
    l1.push_back(e1)
    l2.push_back(e2)

    l1.move_after(e1, e2)
    assert _values(l1) == [1]
    assert _values(l2) == [2]

    l1.move_before(e1, e2)
    assert _values(l1) == [1]
    assert _values(l2) == [2]


def _four():
    lst = List()
    elements = slice_of_elements(1, 2, 3, 4)
    for element in elements:
        lst.push_back(element)
    return lst, elements


def test_replace_in_middle():
    lst, e = _four()
    new = Element(9)
    assert lst.replace(new, e[1]) is e[1]
    assert _values(lst) == [1, 9, 3, 4]
    assert e[1].list is None
    _check(lst, [e[0], new, e[2], e[3]])


def test_replace_last():
    lst, e = _four()
    new = Element(9)
    assert lst.replace(new, e[3]) is e[3]
    _check(lst, [e[0], e[1], e[2], new])


def test_replace_unknown_mark():
    lst, _ = _four()
    assert lst.replace(Element(9), Element(5)) is None
    assert _values(lst) == [1, 2, 3, 4]


def test_find_element_forward_wraps_around():
    lst, e = _four()
    seen = []

    def record(element):
        seen.append(element.value)
        return False

    assert lst.find_element_forward(e[2], e[1], record) is None
    assert seen == [3, 4, 1, 2]
    assert lst.find_element_forward(e[2], e[1], lambda el: el.value == 1) is e[0]


def test_find_element_forward_defaults_to_whole_list():
    lst, e = _four()
    assert lst.find_element_forward(None, None, lambda el: el.value == 4) is e[3]
    assert lst.find_element_forward(None, None, lambda el: el.value == 7) is None


def test_find_element_backward():
    lst, e = _four()
    seen = []

    def record(element):
        seen.append(element.value)
        return False

    assert lst.find_element_backward(None, None, record) is None
    assert seen == [4, 3, 2, 1]
    seen.clear()
    assert lst.find_element_backward(e[2], e[1], record) is None
    assert seen == [3, 2]
    assert lst.find_element_backward(None, None, lambda el: el.value == 2) is e[1]


def test_find_on_empty_list():
    lst = List()
    assert lst.find_element_forward(None, None, lambda el: True) is None
    assert lst.find_element_backward(None, None, lambda el: True) is None


@pytest.mark.parametrize("foreign", [True, False])
def test_is_sentinel_false_for_elements(foreign):
    lst, e = _four()
    element = Element(0) if foreign else e[0]
    assert lst.is_sentinel(element) is False