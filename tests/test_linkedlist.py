from hypothesis import given, strategies as st

from libft.linkedlist import LinkedList, Node


def test_push_back_order():
    lst = LinkedList()
    lst.push_back("Hello")
    lst.push_back("World")
    assert list(lst) == ["Hello", "World"]
    assert lst.head.content == "Hello"
    assert lst.head.next.content == "World"


def test_push_front_order():
    lst = LinkedList()
    lst.push_front("World")
    lst.push_front("Hello")
    assert list(lst) == ["Hello", "World"]


def test_last_node():
    lst = LinkedList()
    lst.push_back("Hello")
    node = lst.push_back("World")
    assert lst.last() is node
    assert lst.last().content == "World"
    assert lst.last().next is None


def test_empty_list():
    lst = LinkedList()
    assert lst.last() is None
    assert len(lst) == 0
    assert list(lst) == []


def test_size():
    lst = LinkedList(["one", "two", "three"])
    assert len(lst) == 3


def test_push_front_returns_head():
    lst = LinkedList(["b"])
    node = lst.push_front("a")
    assert lst.head is node
    assert node.next.content == "b"


def test_node_defaults():
    node = Node("x")
    assert node.next is None
    assert node.content == "x"


@given(st.lists(st.integers()))
def test_push_back_preserves_order(items):
    lst = LinkedList()
    for item in items:
        lst.push_back(item)
    assert list(lst) == items
    assert len(lst) == len(items)


@given(st.lists(st.integers()))
def test_push_front_reverses_order(items):
    lst = LinkedList()
    for item in items:
        lst.push_front(item)
    assert list(lst) == items[::-1]
    if items:
        assert lst.last().content == items[0]