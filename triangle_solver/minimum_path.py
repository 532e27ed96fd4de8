"""
Minimum Path Sum

Single-query surface: construct with a triangle source, ask for the
minimum path sum.
"""

import logging

import boto3

from .path_sum_solver import PathSumSolver
from .settings import SolverSettings
from .triangle import Triangle
from .triangle_loader import TriangleLoader, TriangleSource

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


class MinimumPathSum:
    """Loads a triangle once from its source and reports its minimum path sum."""

    def __init__(
        self,
        source: TriangleSource,
        settings: SolverSettings | None = None,
        session: boto3.Session | None = None,
    ):
        self._source = source
        self._settings = settings or SolverSettings()
        self._loader = TriangleLoader(settings=self._settings, session=session)
        self._solver = PathSumSolver(empty_result=self._settings.empty_result)
        self._triangle: Triangle | None = None

    @property
    def triangle(self) -> Triangle:
        """The loaded triangle. The source is read on first access only."""
        if self._triangle is None:
            self._triangle = self._loader.load(self._source)
        return self._triangle

    def minimum_path_sum(self) -> int:
        result = self._solver.minimum_path_sum(self.triangle)
        logger.info("Minimum path sum for %s: %d", self._source, result)
        return result


def minimum_path_sum(source: TriangleSource, settings: SolverSettings | None = None) -> int:
    """Load the triangle at source and return its minimum path sum."""
    return MinimumPathSum(source, settings=settings).minimum_path_sum()
