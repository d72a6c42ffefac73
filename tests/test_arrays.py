import pytest

from algolab.arrays import (
    diagonal_sums,
    fibonacci_upto,
    find_in_matrix,
    lcs_length,
    linear_search,
    reverse_number,
)


def test_linear_search_finds_first_occurrence():
    values = [4, 9, 7, 9, 1]
    index = linear_search(values, 9)
    assert values[index] == 9
    assert 9 not in values[:index]


def test_linear_search_absent():
    assert linear_search([1, 2, 3], 42) is None


def test_find_in_matrix_all_positions():
    matrix = [[1, 2, 1], [3, 1, 4], [5, 6, 1]]
    positions = find_in_matrix(matrix, 1)
    assert len(positions) == sum(row.count(1) for row in matrix)
    assert all(matrix[r][c] == 1 for r, c in positions)
    assert positions == sorted(positions)


def test_find_in_matrix_absent():
    assert find_in_matrix([[1, 2], [3, 4]], 9) == []


def test_diagonal_sums_example():
    assert diagonal_sums([[1, 2, 3], [4, 5, 6], [7, 8, 9]]) == (15, 15)


def test_diagonal_sums_single_element():
    assert diagonal_sums([[7]]) == (7, 7)


def test_diagonal_sums_rejects_non_square():
    with pytest.raises(ValueError):
        diagonal_sums([[1, 2, 3], [4, 5, 6]])


def test_reverse_number_example():
    assert reverse_number(1234) == 4321


@pytest.mark.parametrize("n", [1, 7, 12, 907, 123456789])
def test_reverse_number_round_trip(n):
    assert reverse_number(reverse_number(n)) == n


def test_reverse_number_drops_trailing_zeros():
    assert reverse_number(1200) == reverse_number(12)
    assert reverse_number(0) == 0


def test_reverse_number_keeps_sign():
    assert reverse_number(-123) == -reverse_number(123)


@pytest.mark.parametrize("limit", [2, 10, 100, 1000])
def test_fibonacci_upto_invariants(limit):
    seq = list(fibonacci_upto(limit))
    assert seq[:2] == [0, 1]
    assert all(x < limit for x in seq)
    for a, b, c in zip(seq, seq[1:], seq[2:]):
        assert c == a + b
    assert seq[-1] + seq[-2] >= limit


def test_fibonacci_small_limits():
    assert list(fibonacci_upto(0)) == []
    assert list(fibonacci_upto(1)) == [0]


def test_lcs_example():
    assert lcs_length("AGGTAB", "GXTXAYB") == 4


def test_lcs_properties():
    assert lcs_length("", "ABC") == 0
    assert lcs_length("HELLO", "HELLO") == len("HELLO")
    assert lcs_length("ABCBDAB", "BDCABA") == lcs_length("BDCABA", "ABCBDAB")
    assert lcs_length("ABC", "XYZ") == 0