"""
Triangle Errors

Distinct failure kinds raised while loading or solving a triangle.
"""


class TriangleError(Exception):
    """Base class for every triangle loading or solving failure."""


class SourceUnavailable(TriangleError):
    """The triangle source could not be opened or read."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Cannot read triangle source {source}: {reason}")


class MalformedRow(TriangleError, ValueError):
    """A source line does not form a valid triangle row."""

    def __init__(self, message: str, line_number: int, row_index: int, line: str = ""):
        self.line_number = line_number
        self.row_index = row_index
        self.line = line
        super().__init__(f"Line {line_number} (row {row_index}): {message}")


class EmptySource(TriangleError):
    """The source contained no rows."""

    def __init__(self, source: str):
        self.source = source
        super().__init__(f"Triangle source {source} contains no rows")


class EmptyTriangle(TriangleError):
    """A minimum path sum was requested over a triangle with zero rows."""


class InvalidTriangle(TriangleError, ValueError):
    """Rows do not satisfy the row i has i+1 entries invariant."""
