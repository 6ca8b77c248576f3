"""Exceptions raised while building a :class:`Grid`."""

from __future__ import annotations

from typing import Any, Optional


class GridError(ValueError):
    """Base class for grid construction failures."""


class EmptyInputError(GridError):
    """Raised when the input holds no rows at all."""

    def __init__(self, message: str = "Grid cannot be empty") -> None:
        super().__init__(message)


class ShapeError(GridError):
    """Raised when a row's length differs from the first row.

    Also raised for whole-grid size or dimension mismatches, in which case
    ``row`` is ``None`` and ``message`` describes the problem.
    """

    def __init__(
        self,
        row: Optional[int] = None,
        expected: Optional[int] = None,
        actual: Optional[int] = None,
        message: Optional[str] = None,
    ) -> None:
        self.row = row
        self.expected = expected
        self.actual = actual
        if message is None:
            message = f"Row {row} has {actual} elements, expected {expected}"
        super().__init__(message)


class ParseError(GridError):
    """Raised when a token cannot be converted to the element type."""

    def __init__(self, row: int, column: int, token: Any, element_type: Any) -> None:
        self.row = row
        self.column = column
        self.token = token
        self.element_type = element_type
        type_name = getattr(element_type, "__name__", repr(element_type))
        super().__init__(
            f"Cannot parse {token!r} as {type_name} at row {row}, column {column}"
        )


__all__ = ["GridError", "EmptyInputError", "ShapeError", "ParseError"]
