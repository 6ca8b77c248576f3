"""Resource helpers for loading grids from text files."""

from .resource import GridDataset, from_file, load_grid, resource_path

__all__ = [
    "GridDataset",
    "from_file",
    "load_grid",
    "resource_path",
]
