from .exceptions import (
    EmptySource,
    EmptyTriangle,
    InvalidTriangle,
    MalformedRow,
    SourceUnavailable,
    TriangleError,
)
from .minimum_path import MinimumPathSum, minimum_path_sum
from .path_sum_solver import PathSumSolver
from .settings import SolverSettings
from .triangle import Triangle
from .triangle_loader import TriangleLoader

__all__ = [
    "EmptySource",
    "EmptyTriangle",
    "InvalidTriangle",
    "MalformedRow",
    "MinimumPathSum",
    "PathSumSolver",
    "SolverSettings",
    "SourceUnavailable",
    "Triangle",
    "TriangleError",
    "TriangleLoader",
    "minimum_path_sum",
]
