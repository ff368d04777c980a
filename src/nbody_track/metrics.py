"""
Physical diagnostics for body sets and tracks.

Provides quantitative measures to check a simulation:
- Energy: kinetic, potential and total energy of a body set
- Momentum: total linear momentum and angular momentum about the origin
- Center of mass of a body set
- Track deviation: how far two tracks of the same body drift apart

All functions work on plain body sequences or tracks from any force method.
"""

from __future__ import annotations

from typing import Any, Dict, Sequence

import numpy as np
from scipy.spatial.distance import pdist

from .body import G, Body
from .types import Track, Vector2


def _positions(bodies: Sequence[Body]) -> np.ndarray:
    return np.array([(b.position.x, b.position.y) for b in bodies], dtype=np.float64).reshape(-1, 2)


def _velocities(bodies: Sequence[Body]) -> np.ndarray:
    return np.array([(b.velocity.x, b.velocity.y) for b in bodies], dtype=np.float64).reshape(-1, 2)


def _masses(bodies: Sequence[Body]) -> np.ndarray:
    return np.array([b.mass for b in bodies], dtype=np.float64)


def kinetic_energy(bodies: Sequence[Body]) -> float:
    """
    Total kinetic energy, sum of m v^2 / 2.

    Args:
        bodies: Body set

    Returns:
        Kinetic energy in J
    """
    if not bodies:
        return 0.0
    speeds_sq = np.sum(_velocities(bodies) ** 2, axis=1)
    return float(0.5 * np.dot(_masses(bodies), speeds_sq))


def potential_energy(bodies: Sequence[Body], gravitational_constant: float = G) -> float:
    """
    Total gravitational potential energy, -G sum_{i<j} m_i m_j / r_ij.

    Coincident pairs are skipped, matching the zero-distance policy of the
    force evaluation.

    Args:
        bodies: Body set
        gravitational_constant: G

    Returns:
        Potential energy in J (<= 0)

    Time Complexity: O(n^2)
    """
    n = len(bodies)
    if n < 2:
        return 0.0

    distances = pdist(_positions(bodies))
    masses = _masses(bodies)
    # pdist's condensed order matches the upper triangle in row-major order
    i, j = np.triu_indices(n, k=1)
    mask = distances > 0
    pair_masses = masses[i[mask]] * masses[j[mask]]
    return float(-gravitational_constant * np.sum(pair_masses / distances[mask]))


def total_energy(bodies: Sequence[Body], gravitational_constant: float = G) -> float:
    """Kinetic plus potential energy."""
    return kinetic_energy(bodies) + potential_energy(bodies, gravitational_constant)


def total_momentum(bodies: Sequence[Body]) -> Vector2:
    """Total linear momentum, sum of m v."""
    if not bodies:
        return Vector2(0.0, 0.0)
    px, py = _masses(bodies) @ _velocities(bodies)
    return Vector2(float(px), float(py))


def angular_momentum(bodies: Sequence[Body]) -> float:
    """Total angular momentum about the origin (z component of sum r x m v)."""
    if not bodies:
        return 0.0
    r = _positions(bodies)
    v = _velocities(bodies)
    cross = r[:, 0] * v[:, 1] - r[:, 1] * v[:, 0]
    return float(np.dot(_masses(bodies), cross))


def center_of_mass(bodies: Sequence[Body]) -> Vector2:
    """
    Mass-weighted average position.

    Raises:
        ValueError: If bodies is empty
    """
    if not bodies:
        raise ValueError("Center of mass of an empty body set is undefined")
    masses = _masses(bodies)
    cx, cy = masses @ _positions(bodies) / masses.sum()
    return Vector2(float(cx), float(cy))


def track_to_array(track: Track) -> np.ndarray:
    """Convert a track to an (n, 2) float array."""
    return np.array([(p.x, p.y) for p in track], dtype=np.float64).reshape(-1, 2)


def track_deviation(first: Track, second: Track) -> np.ndarray:
    """
    Distance between two tracks at every recorded step.

    Args:
        first: Track of a body
        second: Track of the same body under different settings

    Returns:
        Array of Euclidean distances, one per step

    Raises:
        ValueError: If the tracks have different lengths
    """
    if len(first) != len(second):
        raise ValueError(f"Tracks differ in length: {len(first)} vs {len(second)}")
    diff = track_to_array(first) - track_to_array(second)
    return np.hypot(diff[:, 0], diff[:, 1])


def system_summary(bodies: Sequence[Body], gravitational_constant: float = G) -> Dict[str, Any]:
    """
    Compute all diagnostics for a body set.

    Args:
        bodies: Body set
        gravitational_constant: G

    Returns:
        Dictionary with body_count, total_mass, kinetic_energy,
        potential_energy, total_energy, momentum, angular_momentum and
        center_of_mass (None for an empty set)
    """
    kinetic = kinetic_energy(bodies)
    potential = potential_energy(bodies, gravitational_constant)
    return {
        "body_count": len(bodies),
        "total_mass": float(_masses(bodies).sum()),
        "kinetic_energy": kinetic,
        "potential_energy": potential,
        "total_energy": kinetic + potential,
        "momentum": total_momentum(bodies),
        "angular_momentum": angular_momentum(bodies),
        "center_of_mass": center_of_mass(bodies) if bodies else None,
    }


__all__ = [
    "kinetic_energy",
    "potential_energy",
    "total_energy",
    "total_momentum",
    "angular_momentum",
    "center_of_mass",
    "track_to_array",
    "track_deviation",
    "system_summary",
]
