"""
Time integration of body motion.
"""

from __future__ import annotations

from .body import Body


def integrate(body: Body, dt: float) -> None:
    """
    Advance ``body`` by ``dt`` seconds with semi-implicit (symplectic) Euler.

    The velocity is updated from the accumulated force first, and the
    position then moves with the *new* velocity. Swapping the two updates
    gives explicit Euler, which drifts in energy over long runs.
    """
    acceleration = body.force / body.mass
    body.velocity += acceleration * dt
    body.position += body.velocity * dt


__all__ = ["integrate"]
