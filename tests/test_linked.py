import pytest

from algobox.linked import LinkedList, ListNode, Stack, delete_duplicates


def _chain(values):
    head = None
    for value in reversed(values):
        head = ListNode(value, head)
    return head


def _values(head):
    out = []
    while head is not None:
        out.append(head.val)
        head = head.next
    return out


def test_add_puts_values_at_front():
    lst = LinkedList()
    lst.add(30)
    lst.add(20)
    lst.add(10)
    assert list(lst) == [10, 20, 30]


def test_reverse():
    lst = LinkedList([30, 20, 10])
    lst.reverse()
    assert list(lst) == [30, 20, 10]


def test_reverse_twice_restores():
    lst = LinkedList("abcde")
    before = list(lst)
    lst.reverse()
    lst.reverse()
    assert list(lst) == before


def test_reverse_empty():
    lst = LinkedList()
    lst.reverse()
    assert list(lst) == []


def test_delete_duplicates():
    values = [1, 1, 2, 3, 3, 3, 4]
    assert _values(delete_duplicates(_chain(values))) == sorted(set(values))


def test_delete_duplicates_empty():
    assert delete_duplicates(None) is None


def test_stack_sequence():
    s = Stack()
    s.push(1)
    assert s.pop() == 1
    s.push(2)
    s.push(4)
    assert s.peek() == 4
    s.replace_top(s.peek() - 1)
    assert s.peek() == 3
    assert len(s) == 2


def test_stack_lifo_order():
    s = Stack()
    for item in "xyz":
        s.push(item)
    assert [s.pop() for _ in range(3)] == ["z", "y", "x"]
    assert len(s) == 0


@pytest.mark.parametrize("op", ["pop", "peek"])
def test_empty_stack_raises(op):
    with pytest.raises(IndexError):
        getattr(Stack(), op)()


def test_replace_top_empty_raises():
    with pytest.raises(IndexError):
        Stack().replace_top(5)