import pytest

from pushswap.libft.linked import (
    Node,
    lstadd_back,
    lstadd_front,
    lstclear,
    lstdelone,
    lstiter,
    lstlast,
    lstmap,
    lstnew,
    lstsize,
)


def build(values):
    head = None
    for value in values:
        head = lstadd_back(head, lstnew(value))
    return head


def contents(head):
    return [] if head is None else [node.content for node in head]


def test_lstnew_holds_content_alone():
    node = lstnew("abc")
    assert node.content == "abc"
    assert node.next is None


def test_iteration_covers_all_nodes():
    head = build([1, 2, 3])
    assert contents(head) == [1, 2, 3]


def test_add_front_makes_new_head():
    head = build([2, 3])
    new = lstnew(1)
    result = lstadd_front(head, new)
    assert result is new
    assert contents(result) == [1, 2, 3]


def test_add_front_none_keeps_head():
    head = build([5])
    assert lstadd_front(head, None) is head


def test_add_back_on_empty_list():
    node = lstnew(7)
    assert lstadd_back(None, node) is node


def test_add_back_appends():
    head = build(["a", "b"])
    result = lstadd_back(head, lstnew("c"))
    assert result is head
    assert contents(head) == ["a", "b", "c"]


@pytest.mark.parametrize("values", [[], [1], [1, 2, 3, 4, 5]])
def test_size_matches_values(values):
    assert lstsize(build(values)) == len(values)


def test_last_of_empty_is_none():
    assert lstlast(None) is None


def test_last_node():
    head = build([1, 2, 9])
    assert lstlast(head).content == 9
    assert lstlast(head).next is None


def test_delone_calls_delete_on_content():
    seen = []
    node = lstnew("x")
    lstdelone(node, seen.append)
    assert seen == ["x"]


def test_delone_without_delete_does_nothing():
    node = lstnew("x")
    lstdelone(node, None)
    assert node.content == "x"


def test_clear_deletes_every_content_in_order():
    seen = []
    lstclear(build([1, 2, 3]), seen.append)
    assert seen == [1, 2, 3]


def test_iter_visits_every_content():
    seen = []
    lstiter(build(["p", "q"]), seen.append)
    assert seen == ["p", "q"]


def test_iter_empty_list_calls_nothing():
    seen = []
    lstiter(None, seen.append)
    assert seen == []


def test_map_builds_new_list():
    head = build([1, 2, 3])
    mapped = lstmap(head, lambda v: v * 10, lambda v: None)
    assert contents(mapped) == [10, 20, 30]
    assert contents(head) == [1, 2, 3]
    assert all(a is not b for a, b in zip(head, mapped))


def test_map_failure_releases_partial_result():
    released = []
    head = build([1, 2, 3])
    result = lstmap(head, lambda v: None if v == 3 else v + 100, released.append)
    assert result is None
    assert released == [101, 102]


def test_map_requires_all_callables():
    head = build([1])
    assert lstmap(head, None, print) is None
    assert lstmap(head, str, None) is None


def test_node_iter_starts_at_node():
    head = build([1, 2, 3])
    second = head.next
    assert isinstance(second, Node)
    assert [n.content for n in second] == [2, 3]