"""
Point masses and their pairwise gravitational interaction.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Optional

from .types import ZERO, Vector2
from .validation import validate_mass

if TYPE_CHECKING:
    from .spatial.quadrant import Quadrant

# Gravitational constant (m^3 kg^-1 s^-2)
G = 6.67e-11


@dataclass
class Body:
    """
    A simulated point mass.

    Attributes:
        mass: Mass in kg (must be positive)
        position: Position in m
        velocity: Velocity in m/s
        name: Optional name used for lookups
        force: Force accumulated during the current step, in N
    """

    mass: float
    position: Vector2
    velocity: Vector2 = ZERO
    name: Optional[str] = None
    force: Vector2 = field(default=ZERO, repr=False)

    def __post_init__(self) -> None:
        self.mass = validate_mass(self.mass)

    def distance_to(self, other: Body) -> float:
        """Euclidean distance between the two positions."""
        return math.hypot(self.position.x - other.position.x, self.position.y - other.position.y)

    def apply_force_from(self, other: Body, gravitational_constant: float = G) -> None:
        """
        Add the gravitational pull of ``other`` to the accumulated force.

        Coincident bodies (including a body and itself) exert no force.
        """
        r = self.distance_to(other)
        if r == 0:
            return
        magnitude = gravitational_constant * (self.mass / r) * (other.mass / r)
        self.force += (other.position - self.position) * magnitude / r

    def reset_force(self) -> None:
        """Clear the accumulated force."""
        self.force = ZERO

    def combined_with(self, other: Body, anonymous: bool = False) -> Body:
        """
        Create a synthetic body at the center of mass of ``self`` and ``other``.

        Mass is the sum; position and velocity are mass-weighted averages.
        The name is inherited from ``self`` unless ``anonymous`` is set.
        """
        mass = self.mass + other.mass
        position = (self.position * self.mass + other.position * other.mass) / mass
        velocity = (self.velocity * self.mass + other.velocity * other.mass) / mass
        return Body(
            mass=mass,
            position=position,
            velocity=velocity,
            name=None if anonymous else self.name,
        )

    def is_inside(self, quadrant: Quadrant) -> bool:
        """True if the body's position lies in the (closed) quadrant."""
        return quadrant.contains(self.position)

    def copy(self) -> Body:
        """Independent copy with the same state."""
        return replace(self)


__all__ = ["G", "Body"]
