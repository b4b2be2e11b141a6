"""Bounds class for resolved widget geometry."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Self

import numpy as np
from numpy.typing import NDArray


@dataclass
class Bounds:
    """Axis-aligned bounding box of a widget in layout units.

    Stored as integer edges [left, top, right, bottom], as produced by the
    constraint solver. Y grows downwards.
    """

    edges: NDArray[np.int64] = field(
        default_factory=lambda: np.zeros(4, dtype=np.int64)
    )

    def __post_init__(self) -> None:
        self.edges = np.asarray(self.edges, dtype=np.int64)
        if self.edges.shape != (4,):
            raise ValueError(
                f"Bounds need exactly 4 edges [left, top, right, bottom], got shape {self.edges.shape}"
            )

    @classmethod
    def from_rect(cls, x: int, y: int, width: int, height: int) -> Self:
        """Create Bounds from a position and a size."""
        return cls(np.array([x, y, x + width, y + height], dtype=np.int64))

    @property
    def left(self) -> int:
        return int(self.edges[0])

    @property
    def top(self) -> int:
        return int(self.edges[1])

    @property
    def right(self) -> int:
        return int(self.edges[2])

    @property
    def bottom(self) -> int:
        return int(self.edges[3])

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top

    def to_box(self, dx: int = 0, dy: int = 0) -> dict[str, int]:
        """Convert to the {left, top, right, bottom} mapping used in JSON output.

        Offsets are added as Python ints, never as int64.

        Args:
            dx: Horizontal offset added to left and right
            dy: Vertical offset added to top and bottom

        Returns:
            Translated edges as plain ints
        """
        return {
            "left": self.left + dx,
            "top": self.top + dy,
            "right": self.right + dx,
            "bottom": self.bottom + dy,
        }

    def copy(self) -> Bounds:
        """Create a deep copy of these bounds."""
        return Bounds(self.edges.copy())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bounds):
            return NotImplemented
        return bool(np.array_equal(self.edges, other.edges))

    def __repr__(self) -> str:
        return f"Bounds({self.left}, {self.top}, {self.right}, {self.bottom})"
