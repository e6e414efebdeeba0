import pytest

from libft.linkedlist import LinkedList, Node


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None


def test_init_keeps_order():
    lst = LinkedList([1, 2, 3])
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3


def test_init_from_generator():
    lst = LinkedList(x for x in "abc")
    assert list(lst) == ["a", "b", "c"]


def test_push_front():
    lst = LinkedList([2, 3])
    node = lst.push_front(1)
    assert isinstance(node, Node)
    assert node.content == 1
    assert node.next is not None and node.next.content == 2
    assert list(lst) == [1, 2, 3]


def test_push_front_on_empty():
    lst = LinkedList()
    lst.push_front("x")
    assert list(lst) == ["x"]
    assert lst.last().content == "x"


def test_push_back_on_empty_and_nonempty():
    lst = LinkedList()
    lst.push_back("a")
    lst.push_back("b")
    node = lst.push_back("c")
    assert list(lst) == ["a", "b", "c"]
    assert lst.last() is node
    assert node.next is None


def test_last_returns_final_node():
    lst = LinkedList([10, 20, 30])
    tail = lst.last()
    assert tail.content == 30
    assert tail.next is None


def test_len_counts_nodes():
    lst = LinkedList(range(7))
    assert len(lst) == 7
    lst.push_back(7)
    lst.push_front(-1)
    assert len(lst) == 9


def test_pop_front_returns_content_and_calls_delete():
    deleted = []
    lst = LinkedList(["a", "b"])
    assert lst.pop_front(deleted.append) == "a"
    assert deleted == ["a"]
    assert list(lst) == ["b"]


def test_pop_front_without_delete():
    lst = LinkedList([1])
    assert lst.pop_front() == 1
    assert len(lst) == 0


def test_pop_front_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().pop_front()


def test_clear_deletes_from_last_to_first():
    deleted = []
    lst = LinkedList([1, 2, 3])
    lst.clear(deleted.append)
    assert deleted == [3, 2, 1]
    assert list(lst) == []
    assert lst.last() is None


def test_clear_empty_is_harmless():
    deleted = []
    lst = LinkedList()
    lst.clear(deleted.append)
    assert deleted == []
    assert len(lst) == 0


def test_clear_without_delete():
    lst = LinkedList("xyz")
    lst.clear()
    assert len(lst) == 0


def test_for_each_visits_in_order():
    seen = []
    lst = LinkedList(["p", "q", "r"])
    lst.for_each(seen.append)
    assert seen == ["p", "q", "r"]


def test_map_builds_new_list():
    lst = LinkedList([1, 2, 3])
    mapped = lst.map(lambda x: x * 10)
    assert list(mapped) == [10, 20, 30]
    assert list(lst) == [1, 2, 3]
    assert mapped is not lst


def test_map_empty():
    mapped = LinkedList().map(str)
    assert list(mapped) == []


def test_map_failure_clears_partial_results():
    deleted = []

    def f(x):
        if x == 3:
            raise RuntimeError("boom")
        return x * 2

    lst = LinkedList([1, 2, 3, 4])
    with pytest.raises(RuntimeError):
        lst.map(f, deleted.append)
    assert deleted == [4, 2]
    assert list(lst) == [1, 2, 3, 4]


def test_iter_matches_len():
    lst = LinkedList(["a", "b", "c", "d"])
    assert len(list(lst)) == len(lst)