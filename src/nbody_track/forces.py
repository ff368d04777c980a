"""
Force accumulation strategies.

- exact: every ordered pair of bodies, O(n^2)
- barnes_hut: quadtree approximation, O(n log n)

Both accumulate into ``Body.force`` through ``Body.apply_force_from`` so they
share the same numeric semantics; with theta = 0 the Barnes-Hut strategy
visits every body individually and matches the exact one up to summation
order.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Sequence, Union

from .body import G, Body
from .spatial.quadtree import THETA, BarnesHutTree
from .validation import ValidationError


class ForceMethod(str, Enum):
    """Force evaluation strategy."""

    exact = "exact"
    barnes_hut = "barnes_hut"

    @classmethod
    def parse(cls, value: Union[str, ForceMethod]) -> ForceMethod:
        """Accept enum members, values and dashed spellings ("barnes-hut")."""
        if isinstance(value, ForceMethod):
            return value
        try:
            return cls(str(value).strip().lower().replace("-", "_"))
        except ValueError:
            choices = ", ".join(m.value for m in cls)
            raise ValidationError(
                f"Unknown force method {value!r} (expected one of: {choices})"
            ) from None


def accumulate_exact(
    bodies: Sequence[Body],
    universe_size: float,
    theta: float = THETA,
    gravitational_constant: float = G,
) -> None:
    """
    Accumulate exact pairwise forces.

    Every ordered pair (a, b) is visited in sequence order, including a == b
    which the zero-distance guard turns into a no-op. ``universe_size`` and
    ``theta`` are accepted for signature compatibility and ignored.
    """
    for first in bodies:
        for second in bodies:
            first.apply_force_from(second, gravitational_constant)


def accumulate_barnes_hut(
    bodies: Sequence[Body],
    universe_size: float,
    theta: float = THETA,
    gravitational_constant: float = G,
) -> BarnesHutTree:
    """
    Accumulate Barnes-Hut forces.

    A fresh tree rooted at a square of side ``universe_size`` centered on the
    origin is built from all bodies, then queried once per body.

    Returns:
        The tree used for this step (for inspection; it is not reused)
    """
    tree = BarnesHutTree(universe_size, theta=theta, gravitational_constant=gravitational_constant)
    for body in bodies:
        tree.insert(body)
    for body in bodies:
        tree.query_force(body)
    return tree


ForceAccumulator = Callable[[Sequence[Body], float, float, float], object]

ACCUMULATORS: Dict[ForceMethod, ForceAccumulator] = {
    ForceMethod.exact: accumulate_exact,
    ForceMethod.barnes_hut: accumulate_barnes_hut,
}


__all__ = [
    "ForceMethod",
    "ForceAccumulator",
    "ACCUMULATORS",
    "accumulate_exact",
    "accumulate_barnes_hut",
]
