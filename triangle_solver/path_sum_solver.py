"""
Path Sum Solver

Reduces a triangle to its minimum apex-to-base path sum with bottom-up
dynamic programming. Each step moves from index k to index k or k+1 of
the next row.
"""

import logging
from collections.abc import Sequence

from .exceptions import EmptyTriangle
from .triangle import Triangle

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


class PathSumSolver:
    """Computes minimum path sums over validated triangles."""

    def __init__(self, empty_result: int | None = None):
        """
        Args:
            empty_result: Value returned for a triangle with zero rows.
                          None raises EmptyTriangle instead.
        """
        self._empty_result = empty_result

    def minimum_path_sum(self, triangle: Triangle | Sequence[Sequence[int]]) -> int:
        """
        Compute the minimum sum over all apex-to-base paths.

        Args:
            triangle: A Triangle, or nested rows which are validated first.

        Returns:
            The exact minimum path sum.

        Raises:
            InvalidTriangle: If plain rows break the row-length invariant.
            EmptyTriangle: If the triangle has no rows and no empty_result is set.
        """
        if not isinstance(triangle, Triangle):
            triangle = Triangle(triangle)

        if triangle.is_empty:
            if self._empty_result is None:
                raise EmptyTriangle("Minimum path sum is undefined for a triangle with no rows")
            return self._empty_result

        # working[k] holds the best sum from row r, index k down to the base
        working = list(triangle.last_row)
        for row_index in range(len(triangle) - 2, -1, -1):
            row = triangle[row_index]
            for k in range(row_index + 1):
                working[k] = row[k] + min(working[k], working[k + 1])

        result = working[0]
        logger.debug(
            "Reduced %d rows (%d entries) to minimum path sum %d",
            len(triangle),
            triangle.entry_count,
            result,
        )
        return result
