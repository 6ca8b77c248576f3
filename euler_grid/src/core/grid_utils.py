"""Run iteration and product reduction over a :class:`Grid`."""

from __future__ import annotations

import math
from typing import Any, Iterable, Iterator, List, Optional, Tuple

from .direction import Direction, FORWARD_DIRECTIONS
from .grid import Grid
from ..utils.logger import get_logger

logger = get_logger(__name__)


def iter_runs(
    grid: Grid[Any],
    run_length: int,
    directions: Iterable[Direction] = FORWARD_DIRECTIONS,
) -> Iterator[Tuple[int, Direction, List[Any]]]:
    """Yield ``(start, direction, values)`` for every in-bounds run.

    Every cell is tried against every direction; runs that leave the grid are
    skipped.
    """
    directions = tuple(directions)
    for start, _ in grid.enumerate():
        for direction in directions:
            indices = grid.adjacent_indices(start, run_length, direction)
            if indices is None:
                continue
            values = grid.elements_at(indices)
            if values is None:
                continue
            yield start, direction, values


def max_run_product(
    grid: Grid[Any],
    run_length: int,
    directions: Iterable[Direction] = FORWARD_DIRECTIONS,
) -> Optional[Any]:
    """Return the largest product of ``run_length`` adjacent values.

    ``None`` when no run of that length fits in the grid.
    """
    directions = tuple(directions)
    best: Optional[Any] = None
    evaluated = 0
    for _, _, values in iter_runs(grid, run_length, directions):
        evaluated += 1
        product = math.prod(values)
        if best is None or product > best:
            best = product
    attempted = len(grid) * len(directions)
    logger.debug(
        "Evaluated %d runs of length %d, skipped %d out of bounds",
        evaluated,
        run_length,
        attempted - evaluated,
    )
    return best


__all__ = ["iter_runs", "max_run_product"]
