"""
Triangle

Immutable row-major triangle of integers where row i holds exactly i+1 values.
"""

from collections.abc import Iterable, Iterator, Sequence

from .exceptions import InvalidTriangle

Row = tuple[int, ...]


class Triangle:
    """Validated, read-only triangle of integers."""

    __slots__ = ("_rows",)

    def __init__(self, rows: Iterable[Sequence[int]] = ()):
        """
        Args:
            rows: Row-major values. Row i must contain exactly i+1 integers.

        Raises:
            InvalidTriangle: If a row has the wrong length or a non-integer value.
        """
        validated: list[Row] = []
        for index, row in enumerate(rows):
            row = tuple(row)
            if len(row) != index + 1:
                raise InvalidTriangle(
                    f"Row {index} has {len(row)} entries, expected {index + 1}"
                )
            for value in row:
                # bool is an int subclass but never a meaningful entry
                if not isinstance(value, int) or isinstance(value, bool):
                    raise InvalidTriangle(f"Row {index} contains non-integer value {value!r}")
            validated.append(row)
        self._rows: tuple[Row, ...] = tuple(validated)

    @classmethod
    def empty(cls) -> "Triangle":
        """Return a triangle with zero rows."""
        return cls(())

    @property
    def rows(self) -> tuple[Row, ...]:
        return self._rows

    @property
    def last_row(self) -> Row:
        """The base row. Empty tuple for an empty triangle."""
        return self._rows[-1] if self._rows else ()

    @property
    def is_empty(self) -> bool:
        return not self._rows

    @property
    def entry_count(self) -> int:
        """Total number of values, n(n+1)/2 for n rows."""
        n = len(self._rows)
        return n * (n + 1) // 2

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self._rows)

    def __getitem__(self, index: int) -> Row:
        return self._rows[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Triangle):
            return self._rows == other._rows
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._rows)

    def __repr__(self) -> str:
        return f"Triangle(rows={len(self._rows)})"
