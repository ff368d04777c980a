"""
Common types for the n-body tracker.

This module provides the fundamental types used across the package:
- Vector2: Immutable 2D vector with arithmetic operators
- Track: Recorded positions of one body over time
- EventType: Tracker lifecycle events
- Event: Event payload for callbacks
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, List, Optional, TypedDict


@dataclass(frozen=True)
class Vector2:
    """
    Immutable 2D vector.

    Supports ``+``, ``-``, unary ``-``, scalar ``*`` and scalar ``/``.
    Since instances are frozen, ``a += b`` rebinds ``a`` to a new vector.
    """

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __mul__(self, scalar: float) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector2:
        return Vector2(self.x / scalar, self.y / scalar)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def norm(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    def distance_to(self, other: Vector2) -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def __repr__(self) -> str:
        return f"Vector2({self.x!r}, {self.y!r})"


ZERO = Vector2(0.0, 0.0)


Track = List[Vector2]
"""Positions of one body, one entry per recorded step (initial position first)."""


class EventType(IntEnum):
    """
    Tracker lifecycle events.

    - start: Initial position recorded, stepping is about to begin
    - step: Fired once per simulation step, after the position is recorded
    - end: All steps are done
    """

    start = 0
    step = 1
    end = 2


class Event(TypedDict, total=False):
    """Event payload passed to event listeners."""

    type: EventType
    step: int
    time: float
    body: Optional[str]


__all__ = [
    "Vector2",
    "ZERO",
    "Track",
    "EventType",
    "Event",
]
