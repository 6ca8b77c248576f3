"""Compass directions used for adjacency traversal."""

from __future__ import annotations

import re
from enum import Enum
from typing import Tuple


class Direction(Enum):
    """Eight compass directions, each mapped to a ``(row_delta, col_delta)`` step.

    Rows grow downwards and columns grow to the right, so ``DOWN_RIGHT`` moves
    one row down and one column right.
    """

    UP = (-1, 0)
    UP_RIGHT = (-1, 1)
    RIGHT = (0, 1)
    DOWN_RIGHT = (1, 1)
    DOWN = (1, 0)
    DOWN_LEFT = (1, -1)
    LEFT = (0, -1)
    UP_LEFT = (-1, -1)

    @property
    def row_delta(self) -> int:
        return self.value[0]

    @property
    def col_delta(self) -> int:
        return self.value[1]

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value

    def opposite(self) -> "Direction":
        """Return the direction pointing the other way."""
        return Direction((-self.row_delta, -self.col_delta))

    @classmethod
    def from_name(cls, name: str) -> "Direction":
        """Look up a direction by ``DownRight``, ``down_right`` or ``DOWN_RIGHT``."""
        # CamelCase -> Camel_Case, then fold separators into single underscores
        key = re.sub(r"(?<=[a-z0-9])(?=[A-Z])", "_", name.strip())
        key = re.sub(r"[\s_-]+", "_", key).strip("_").upper()
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown direction: {name!r}") from None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.name


# One direction per line orientation; walking these from every cell visits each
# straight run of cells exactly once.
FORWARD_DIRECTIONS: Tuple[Direction, ...] = (
    Direction.RIGHT,
    Direction.DOWN_RIGHT,
    Direction.DOWN,
    Direction.DOWN_LEFT,
)


__all__ = ["Direction", "FORWARD_DIRECTIONS"]
