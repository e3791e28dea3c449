import pytest

from algobox.inversions import count_inversions, main


def test_sorted_has_no_inversions():
    assert count_inversions(range(50)) == 0


def test_empty_and_single():
    assert count_inversions([]) == 0
    assert count_inversions([3]) == 0


@pytest.mark.parametrize("n", [2, 5, 8, 13])
def test_reversed_has_all_pairs(n):
    assert count_inversions(range(n, 0, -1)) == n * (n - 1) // 2


def test_equal_elements_are_not_inversions():
    assert count_inversions([4, 4, 4, 4]) == 0


def test_adjacent_swap_counts_one():
    values = list(range(10))
    values[3], values[4] = values[4], values[3]
    assert count_inversions(values) == 1


def test_input_not_mutated():
    values = [3, 1, 2]
    count_inversions(values)
    assert values == [3, 1, 2]


def test_main_writes_count(tmp_path):
    src = tmp_path / "in.txt"
    dst = tmp_path / "out.txt"
    src.write_text("5\n2 4 1 3 5\n")
    assert main([str(src), str(dst)]) == 0
    assert dst.read_text() == "3"


def test_main_needs_two_arguments():
    assert main(["only-one"]) == 1


def test_main_missing_input(tmp_path):
    assert main([str(tmp_path / "absent.txt"), str(tmp_path / "out.txt")]) == 2