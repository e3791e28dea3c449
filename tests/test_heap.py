import random

import pytest

from algobox.heap import Heap, TernaryHeap


def _raw(values):
    heap = Heap()
    heap._items = list(values)
    return heap


def test_parent():
    assert Heap.parent(3) == 1
    assert Heap.parent(4) == 1


def test_left_and_right():
    assert Heap.left(3) == 7
    assert Heap.right(3) == 8


@pytest.mark.parametrize(
    "start, index, expected",
    [
        ([1, 2, 3], 0, [1, 2, 3]),
        ([1, 2, 3], 1, [2, 1, 3]),
        ([1, 2, 1, 3, 4], 4, [4, 1, 1, 3, 2]),
        ([3, 2, 1, 3, 4], 1, [3, 2, 1, 3, 4]),
    ],
)
def test_shift_up(start, index, expected):
    heap = _raw(start)
    heap.shift_up(index)
    assert list(heap) == expected


@pytest.mark.parametrize(
    "start, index, expected",
    [
        ([1, 2, 3], 1, [1, 2, 3]),
        ([1, 2, 3], 0, [3, 2, 1]),
        ([1, 2], 0, [2, 1]),
        ([1, 3, 2, 4, 5, 1, 0, 0, 0], 0, [3, 5, 2, 4, 1, 1, 0, 0, 0]),
    ],
)
def test_shift_down(start, index, expected):
    heap = _raw(start)
    heap.shift_down(index)
    assert list(heap) == expected


def test_pops_in_descending_order_after_add():
    heap = Heap([4, 2, 1, 3])
    heap.add(5)
    drained = []
    while len(heap):
        drained.append(heap.top())
        heap.pop()
    assert drained == [5, 4, 3, 2, 1]


def test_heap_property_after_build():
    values = [random.Random(7).randint(-50, 50) for _ in range(40)]
    heap = Heap(values)
    stored = list(heap)
    for index in range(1, len(stored)):
        assert stored[Heap.parent(index)] >= stored[index]


def test_pop_returns_elements_sorted():
    rng = random.Random(3)
    values = [rng.randint(0, 100) for _ in range(30)]
    heap = Heap(values)
    assert [heap.pop() for _ in range(len(values))] == sorted(values, reverse=True)
    assert len(heap) == 0


def test_empty_heap_errors():
    heap = Heap()
    with pytest.raises(IndexError):
        heap.top()
    with pytest.raises(IndexError):
        heap.pop()


def test_equality_compares_storage():
    assert Heap([1, 2, 3]) == Heap([1, 2, 3])
    assert not Heap([1, 2, 3]) == Heap([1, 2])


def test_ternary_pop_order():
    rng = random.Random(11)
    values = [rng.randint(-20, 20) for _ in range(25)]
    heap = TernaryHeap(values)
    assert len(heap) == len(values)
    assert [heap.pop_max() for _ in range(len(values))] == sorted(values, reverse=True)
    assert len(heap) == 0


def test_ternary_heapify_moves_largest_to_root():
    heap = TernaryHeap()
    heap._items = [1, 5, 3, 4]
    heap.heapify(0)
    assert heap.pop_max() == 5
    assert heap.pop_max() == 4


def test_ternary_empty_raises():
    with pytest.raises(IndexError):
        TernaryHeap().pop_max()