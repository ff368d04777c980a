"""
Axis-aligned square regions used for spatial partitioning.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from ..types import Vector2


@dataclass(frozen=True)
class Quadrant:
    """
    Closed square region ``[cx - s/2, cx + s/2] x [cy - s/2, cy + s/2]``.

    All four edges are inclusive, so a point on a split line belongs to more
    than one sub-quadrant. North is +y, east is +x.

    Attributes:
        center: Center of the square
        side_length: Width (and height) of the square
    """

    center: Vector2
    side_length: float

    def contains(self, point: Vector2) -> bool:
        """Check if ``point`` lies within this region (edges included)."""
        half = self.side_length / 2
        return (
            self.center.x - half <= point.x <= self.center.x + half
            and self.center.y - half <= point.y <= self.center.y + half
        )

    def _child(self, east: bool, north: bool) -> Quadrant:
        offset = self.side_length / 4
        cx = self.center.x + (offset if east else -offset)
        cy = self.center.y + (offset if north else -offset)
        return Quadrant(Vector2(cx, cy), offset * 2)

    def nw(self) -> Quadrant:
        """North-west sub-quadrant."""
        return self._child(east=False, north=True)

    def ne(self) -> Quadrant:
        """North-east sub-quadrant."""
        return self._child(east=True, north=True)

    def sw(self) -> Quadrant:
        """South-west sub-quadrant."""
        return self._child(east=False, north=False)

    def se(self) -> Quadrant:
        """South-east sub-quadrant."""
        return self._child(east=True, north=False)

    def subdivide(self) -> Tuple[Quadrant, Quadrant, Quadrant, Quadrant]:
        """The four sub-quadrants in tie-break order: NW, NE, SW, SE."""
        return self.nw(), self.ne(), self.sw(), self.se()

    @classmethod
    def from_bounds(cls, min_x: float, min_y: float, max_x: float, max_y: float) -> Quadrant:
        """Smallest square sharing the center of, and enclosing, a bounding box."""
        center = Vector2((min_x + max_x) / 2, (min_y + max_y) / 2)
        # Use max dimension to ensure square region
        return cls(center, max(max_x - min_x, max_y - min_y))


__all__ = ["Quadrant"]
