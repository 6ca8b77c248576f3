"""Row-major numeric grid with directional adjacency lookup."""

from __future__ import annotations

from dataclasses import dataclass
from typing import (
    Any,
    Callable,
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    Sequence,
    Tuple,
    TypeVar,
)

import numpy as np

from .adjacency import adjacent_indices, elements_at, neighbor_indices
from .direction import Direction
from .errors import EmptyInputError, ParseError, ShapeError
from ..utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Grid(Generic[T]):
    """Rectangular grid stored as a flat row-major tuple.

    The element at ``(row, col)`` lives at linear index ``row * width + col``.
    Grids are immutable once built.
    """

    width: int
    height: int
    elements: Tuple[T, ...]

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise EmptyInputError()
        if not isinstance(self.elements, tuple):
            object.__setattr__(self, "elements", tuple(self.elements))
        expected = self.width * self.height
        if len(self.elements) != expected:
            raise ShapeError(
                expected=expected,
                actual=len(self.elements),
                message=(
                    f"Grid of {self.width}x{self.height} needs {expected} "
                    f"elements, got {len(self.elements)}"
                ),
            )

    # Construction --------------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[T]]) -> "Grid[T]":
        """Build a grid from nested row sequences."""
        rows = [list(r) for r in rows]
        if not rows or not rows[0]:
            raise EmptyInputError()
        width = len(rows[0])
        elements: List[T] = []
        for number, row in enumerate(rows):
            if len(row) != width:
                raise ShapeError(row=number, expected=width, actual=len(row))
            elements.extend(row)
        return cls(width, len(rows), tuple(elements))

    @classmethod
    def from_array(cls, arr: Any) -> "Grid[Any]":
        """Build a grid from a 2D ``np.ndarray`` (or anything ``np.asarray`` accepts)."""
        arr = np.asarray(arr)
        if arr.ndim != 2:
            raise ShapeError(
                expected=2,
                actual=arr.ndim,
                message=f"Expected a 2D array, got {arr.ndim} dimensions",
            )
        if arr.size == 0:
            raise EmptyInputError()
        height, width = arr.shape
        return cls(width, height, tuple(arr.ravel().tolist()))

    # Accessors -----------------------------------------------------------

    def __len__(self) -> int:
        return len(self.elements)

    def __getitem__(self, index: int) -> T:
        if not 0 <= index < len(self.elements):
            raise IndexError(f"Grid index {index} out of range")
        return self.elements[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self.elements)

    def shape(self) -> Tuple[int, int]:
        """Return the grid shape as (height, width)."""
        return self.height, self.width

    def index_of(self, row: int, col: int) -> Optional[int]:
        """Return the linear index of ``row``, ``col`` or ``None`` if out of bounds."""
        if 0 <= row < self.height and 0 <= col < self.width:
            return row * self.width + col
        return None

    def position(self, index: int) -> Optional[Tuple[int, int]]:
        """Return ``(row, col)`` for ``index`` or ``None`` if out of bounds."""
        if 0 <= index < len(self.elements):
            return divmod(index, self.width)
        return None

    def get(self, row: int, col: int, default: Any | None = None) -> Any:
        """Return the value at ``row``, ``col`` or ``default`` if out of bounds."""
        index = self.index_of(row, col)
        if index is None:
            return default
        return self.elements[index]

    def enumerate(self) -> Iterator[Tuple[int, T]]:
        """Yield ``(index, value)`` pairs in row-major order."""
        return enumerate(self.elements)

    def cells(self) -> Iterator[Tuple[int, int, T]]:
        """Yield ``(row, col, value)`` triples in row-major order."""
        for index, value in enumerate(self.elements):
            row, col = divmod(index, self.width)
            yield row, col, value

    def rows(self) -> List[List[T]]:
        """Return the grid as a list of row lists."""
        w = self.width
        return [list(self.elements[r * w : (r + 1) * w]) for r in range(self.height)]

    def to_array(self, dtype: Any | None = None) -> np.ndarray:
        """Return the grid as a ``(height, width)`` array."""
        return np.array(self.elements, dtype=dtype).reshape(self.height, self.width)

    def to_text(self, pad: int = 0) -> str:
        """Serialize the grid, see :func:`format_grid`."""
        return format_grid(self, pad=pad)

    # Adjacency -----------------------------------------------------------

    def adjacent_indices(
        self, start: int, run_length: int, direction: Direction
    ) -> Optional[List[int]]:
        """Return the indices of the run of ``run_length`` cells from ``start``.

        The start cell is included. ``None`` when the run leaves the grid.
        """
        return adjacent_indices(self, start, run_length, direction)

    def neighbor_indices(
        self, start: int, count: int, direction: Direction
    ) -> Optional[List[int]]:
        """Return the ``count`` indices after ``start``; ``None`` when out of bounds."""
        return neighbor_indices(self, start, count, direction)

    def elements_at(self, indices: Iterable[int]) -> Optional[List[T]]:
        """Return the values at ``indices``; ``None`` if any index is invalid."""
        return elements_at(self, indices)

    def __repr__(self) -> str:
        return f"Grid(shape={self.shape()})"


def parse_grid(text: str, element_type: Callable[[str], T] = int) -> Grid[T]:
    """Parse line-delimited rows of whitespace-separated tokens into a :class:`Grid`.

    Blank lines are skipped. Every token is converted with ``element_type``.

    Raises
    ------
    EmptyInputError
        If ``text`` holds no tokens.
    ShapeError
        If a row has a different number of tokens than the first row.
    ParseError
        If a token cannot be converted with ``element_type``.
    """
    width: Optional[int] = None
    height = 0
    elements: List[T] = []
    for tokens in (line.split() for line in text.splitlines()):
        if not tokens:
            continue
        if width is None:
            width = len(tokens)
        elif len(tokens) != width:
            raise ShapeError(row=height, expected=width, actual=len(tokens))
        for col, token in enumerate(tokens):
            try:
                elements.append(element_type(token))
            except (TypeError, ValueError, ArithmeticError) as exc:
                raise ParseError(height, col, token, element_type) from exc
        height += 1

    if width is None:
        raise EmptyInputError("Grid input contains no rows")

    logger.debug("Parsed %dx%d grid", height, width)
    return Grid(width, height, tuple(elements))


def format_grid(grid: Grid[Any], pad: int = 0) -> str:
    """Return ``grid`` as text: one line per row, values separated by spaces.

    ``pad`` zero-fills each value to at least that many characters, which lets
    inputs such as ``08 02 22`` round-trip token for token.
    """
    lines = []
    for row in grid.rows():
        tokens = (str(v).zfill(pad) if pad else str(v) for v in row)
        lines.append(" ".join(tokens))
    return "\n".join(lines) + "\n"


__all__ = ["Grid", "parse_grid", "format_grid"]
