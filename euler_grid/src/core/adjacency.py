"""Directional adjacency resolution and indexed batch lookup.

A *run* is ``run_length`` consecutive cells starting at a linear index and
stepping in one :class:`Direction`. ``run_length`` counts the start cell, so a
run of length 1 is just ``[start]``. Runs that would leave the grid, in either
the row or the column, are reported as ``None`` rather than raised: cells near
the edges routinely have no run in some directions.

These helpers only rely on a grid exposing ``width``, ``height`` and
``elements`` so :mod:`.grid` can delegate to them without an import cycle.
"""

from __future__ import annotations

import operator
from typing import Any, Iterable, List, Optional

from .direction import Direction


def resolve_run(
    width: int,
    height: int,
    start: int,
    run_length: int,
    direction: Direction,
) -> Optional[List[int]]:
    """Return the linear indices of a run on a ``width`` x ``height`` grid.

    Returns ``None`` when ``start`` is not a valid index or when any step of the
    run falls outside ``[0, height)`` x ``[0, width)``.
    """
    if run_length < 1:
        raise ValueError(f"run_length must be at least 1, got {run_length}")
    if not 0 <= start < width * height:
        return None

    row, col = divmod(start, width)
    dr, dc = direction.delta
    # Steps are monotonic, so the last cell is the only one that can leave.
    last_row = row + (run_length - 1) * dr
    last_col = col + (run_length - 1) * dc
    if not (0 <= last_row < height and 0 <= last_col < width):
        return None

    step = dr * width + dc
    return [start + k * step for k in range(run_length)]


def adjacent_indices(
    grid: Any, start: int, run_length: int, direction: Direction
) -> Optional[List[int]]:
    """Return ``run_length`` indices from ``start`` towards ``direction`` or ``None``."""
    return resolve_run(grid.width, grid.height, start, run_length, direction)


def neighbor_indices(
    grid: Any, start: int, count: int, direction: Direction
) -> Optional[List[int]]:
    """Return the ``count`` indices beyond ``start`` towards ``direction``.

    Unlike :func:`adjacent_indices` the start cell is excluded.
    """
    if count < 1:
        raise ValueError(f"count must be at least 1, got {count}")
    run = resolve_run(grid.width, grid.height, start, count + 1, direction)
    if run is None:
        return None
    return run[1:]


def elements_at(grid: Any, indices: Iterable[int]) -> Optional[List[Any]]:
    """Return the elements stored at ``indices`` in the given order.

    If any index lies outside ``[0, width * height)`` the whole batch is
    rejected and ``None`` is returned. Negative and non-integer indices are
    out of range.
    """
    elements = grid.elements
    size = len(elements)
    values: List[Any] = []
    for index in indices:
        try:
            index = operator.index(index)
        except TypeError:
            return None
        if not 0 <= index < size:
            return None
        values.append(elements[index])
    return values


def count_runs(width: int, height: int, run_length: int, direction: Direction) -> int:
    """Return how many start cells have an in-bounds run of ``run_length``."""
    if run_length < 1:
        raise ValueError(f"run_length must be at least 1, got {run_length}")
    span = run_length - 1
    rows = max(0, height - span * abs(direction.row_delta))
    cols = max(0, width - span * abs(direction.col_delta))
    return rows * cols


__all__ = [
    "resolve_run",
    "adjacent_indices",
    "neighbor_indices",
    "elements_at",
    "count_runs",
]
