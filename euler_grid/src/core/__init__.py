"""Core grid data structures and adjacency lookup."""

from .errors import EmptyInputError, GridError, ParseError, ShapeError
from .direction import Direction, FORWARD_DIRECTIONS
from .adjacency import adjacent_indices, count_runs, elements_at, neighbor_indices
from .grid import Grid, format_grid, parse_grid
from .grid_utils import iter_runs, max_run_product

__all__ = [
    "Grid",
    "parse_grid",
    "format_grid",
    "Direction",
    "FORWARD_DIRECTIONS",
    "adjacent_indices",
    "neighbor_indices",
    "elements_at",
    "count_runs",
    "iter_runs",
    "max_run_product",
    "GridError",
    "EmptyInputError",
    "ShapeError",
    "ParseError",
]
