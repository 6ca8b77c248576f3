"""Loading of named text resources and the grids stored in them."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Iterable, Iterator, Tuple

from euler_grid.src.core.grid import Grid, parse_grid
from euler_grid.src.utils import config_loader
from euler_grid.src.utils.logger import get_logger

logger = get_logger(__name__)


def resource_path(name: str, root: str | Path | None = None) -> Path:
    """Return the path of resource ``name`` under ``root``.

    ``root`` defaults to the configured resource directory. Names without a
    suffix get the configured ``RESOURCE_SUFFIX``.
    """
    base = Path(root) if root is not None else config_loader.RESOURCE_DIR
    path = base / name
    if not path.suffix:
        path = path.with_suffix(config_loader.RESOURCE_SUFFIX)
    return path


def from_file(name: str, root: str | Path | None = None) -> str:
    """Return the text of resource ``name``.

    Raises ``FileNotFoundError`` if the resource does not exist; other read
    failures propagate as ``OSError``.
    """
    path = resource_path(name, root)
    if not path.is_file():
        raise FileNotFoundError(f"Resource {name!r} not found at {path}")
    with open(path, "r", encoding="utf-8") as f:
        text = f.read()
    logger.debug("Loaded resource %s (%d bytes)", path, len(text))
    return text


def load_grid(
    name: str,
    element_type: Callable[[str], Any] = int,
    root: str | Path | None = None,
) -> Grid[Any]:
    """Load resource ``name`` and parse it into a :class:`Grid`."""
    return parse_grid(from_file(name, root), element_type)


class GridDataset(Iterable[Tuple[str, Grid[Any]]]):
    """Iterate over every grid resource contained in a directory.

    Grids are keyed by their file name without the suffix, so
    ``dataset["p011"]`` reads ``p011.txt``.
    """

    def __init__(
        self,
        root: str | Path | None = None,
        element_type: Callable[[str], Any] = int,
    ):
        self.root = Path(root) if root is not None else config_loader.RESOURCE_DIR
        self.element_type = element_type

    def names(self) -> list[str]:
        return [p.stem for p in sorted(self.root.glob(f"*{config_loader.RESOURCE_SUFFIX}"))]

    def __iter__(self) -> Iterator[Tuple[str, Grid[Any]]]:
        for name in self.names():
            yield name, load_grid(name, self.element_type, self.root)

    def __getitem__(self, name: str) -> Grid[Any]:
        """Return the grid stored under ``name``."""
        if not resource_path(name, self.root).is_file():
            raise KeyError(name)
        return load_grid(name, self.element_type, self.root)


__all__ = ["resource_path", "from_file", "load_grid", "GridDataset"]
