"""Tests for PathSumSolver."""

import itertools

import pytest

from triangle_solver.exceptions import EmptyTriangle, InvalidTriangle
from triangle_solver.path_sum_solver import PathSumSolver
from triangle_solver.triangle import Triangle


def _brute_force_minimum(rows: list[list[int]]) -> int:
    """Enumerate every path by its sequence of left/right steps."""
    best = None
    for steps in itertools.product((0, 1), repeat=len(rows) - 1):
        index = 0
        total = rows[0][0]
        for row, step in zip(rows[1:], steps):
            index += step
            total += row[index]
        if best is None or total < best:
            best = total
    return best


@pytest.fixture
def solver():
    return PathSumSolver()


class TestKnownTriangles:
    def test_single_row(self, solver):
        assert solver.minimum_path_sum(Triangle([[5]])) == 5

    def test_two_rows_picks_smaller_child(self, solver):
        assert solver.minimum_path_sum(Triangle([[2], [3, 4]])) == 5

    def test_classic_example(self, solver):
        triangle = Triangle([[3], [7, 4], [2, 4, 6], [8, 5, 9, 3]])
        # 3 -> 4 -> 4 -> 5 and 3 -> 4 -> 6 -> 3 both total 16
        assert solver.minimum_path_sum(triangle) == 16

    def test_four_row_example(self, solver):
        triangle = Triangle([[2], [3, 4], [6, 5, 7], [4, 1, 8, 3]])
        assert solver.minimum_path_sum(triangle) == 11

    def test_greedy_trap(self, solver):
        # Greedy takes 1 then is forced into 100; optimum goes through 2
        triangle = Triangle([[0], [2, 1], [1, 100, 100]])
        assert solver.minimum_path_sum(triangle) == 3

    def test_all_negative(self, solver):
        triangle = Triangle([[-1], [-2, -3], [-4, -5, -6]])
        assert solver.minimum_path_sum(triangle) == -10

    def test_zeros(self, solver):
        assert solver.minimum_path_sum(Triangle([[0], [0, 0], [0, 0, 0]])) == 0

    def test_large_values_stay_exact(self, solver):
        big = 10**30
        triangle = Triangle([[big], [big + 1, big + 2], [1, -big, 3]])
        assert solver.minimum_path_sum(triangle) == big + 1


class TestAgainstBruteForce:
    @pytest.mark.parametrize(
        "rows",
        [
            [[1], [1, 1]],
            [[7], [-3, 8], [4, 0, -2]],
            [[5], [9, 6], [4, 6, 8], [0, 7, 1, 5]],
            [[-5], [3, -9], [8, -2, 4], [1, 1, -7, 3], [6, -4, 2, 0, -1]],
            [[10], [2, 9], [8, 1, 3], [5, 6, 7, 4], [2, 9, 1, 8, 3], [7, 3, 5, 2, 6, 4]],
        ],
    )
    def test_matches_enumeration(self, solver, rows):
        assert solver.minimum_path_sum(Triangle(rows)) == _brute_force_minimum(rows)


class TestPurity:
    def test_repeated_calls_are_identical(self, solver):
        triangle = Triangle([[3], [7, 4], [2, 4, 6], [8, 5, 9, 3]])
        first = solver.minimum_path_sum(triangle)
        second = solver.minimum_path_sum(triangle)
        assert first == second == 16

    def test_triangle_is_not_mutated(self, solver):
        triangle = Triangle([[3], [7, 4], [2, 4, 6]])
        solver.minimum_path_sum(triangle)
        assert triangle.rows == ((3,), (7, 4), (2, 4, 6))


class TestPlainRows:
    def test_accepts_nested_lists(self, solver):
        assert solver.minimum_path_sum([[2], [3, 4]]) == 5

    def test_revalidates_nested_lists(self, solver):
        with pytest.raises(InvalidTriangle):
            solver.minimum_path_sum([[2], [3]])


class TestEmptyTriangle:
    def test_empty_raises_by_default(self, solver):
        with pytest.raises(EmptyTriangle):
            solver.minimum_path_sum(Triangle.empty())

    def test_empty_result_is_returned_when_configured(self):
        assert PathSumSolver(empty_result=0).minimum_path_sum(Triangle.empty()) == 0
