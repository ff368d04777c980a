"""
Input validation utilities for the n-body tracker.

Provides centralized validation functions for masses, universe size, step
parameters and the Barnes-Hut theta. Raises descriptive exceptions on
invalid input.
"""

from __future__ import annotations

import math
from typing import Any


class ValidationError(ValueError):
    """Base exception for simulation validation errors."""

    pass


class InvalidBodyError(ValidationError):
    """Raised when a body is malformed (e.g. non-positive mass)."""

    pass


class InvalidUniverseSizeError(ValidationError):
    """Raised when the universe side length is invalid."""

    pass


class InvalidStepError(ValidationError):
    """Raised when step count or step size is invalid."""

    pass


class InvalidThetaError(ValidationError):
    """Raised when the Barnes-Hut theta is invalid."""

    pass


class UniverseFormatError(ValidationError):
    """Raised when a universe description cannot be parsed."""

    pass


class BodyNotFoundError(ValidationError, LookupError):
    """Raised when no loaded body matches the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No body named {name!r}")
        self.name = name


def validate_mass(mass: Any) -> float:
    """
    Validate a body mass.

    Args:
        mass: Mass value

    Returns:
        Mass as float

    Raises:
        InvalidBodyError: If mass is not a finite positive number
    """
    try:
        value = float(mass)
    except (TypeError, ValueError) as exc:
        raise InvalidBodyError(f"Body mass must be a number, got {mass!r}") from exc

    if not math.isfinite(value) or value <= 0:
        raise InvalidBodyError(f"Body mass must be positive and finite, got {value}")
    return value


def validate_universe_size(size: Any) -> float:
    """
    Validate the universe (root quadrant) side length.

    Args:
        size: Side length

    Returns:
        Side length as float

    Raises:
        InvalidUniverseSizeError: If size is not a finite positive number
    """
    try:
        value = float(size)
    except (TypeError, ValueError) as exc:
        raise InvalidUniverseSizeError(f"Universe size must be a number, got {size!r}") from exc

    if not math.isfinite(value) or value <= 0:
        raise InvalidUniverseSizeError(f"Universe size must be positive, got {value}")
    return value


def validate_steps(total_steps: Any, step_size: Any) -> tuple[int, int]:
    """
    Validate step parameters for a tracking run.

    Args:
        total_steps: Simulated duration (integer >= 0)
        step_size: Duration of one step (integer > 0)

    Returns:
        Validated (total_steps, step_size) tuple

    Raises:
        InvalidStepError: If either value is not an integer or out of range
    """
    for label, value in (("total_steps", total_steps), ("step_size", step_size)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidStepError(f"{label} must be an integer, got {value!r}")

    if total_steps < 0:
        raise InvalidStepError(f"total_steps must be >= 0, got {total_steps}")
    if step_size <= 0:
        raise InvalidStepError(f"step_size must be > 0, got {step_size}")
    return total_steps, step_size


def validate_theta(theta: Any) -> float:
    """
    Validate the Barnes-Hut accuracy parameter.

    Args:
        theta: Size/distance threshold (0 = exact traversal)

    Returns:
        Theta as float

    Raises:
        InvalidThetaError: If theta is negative or not a number
    """
    try:
        value = float(theta)
    except (TypeError, ValueError) as exc:
        raise InvalidThetaError(f"theta must be a number, got {theta!r}") from exc

    if math.isnan(value) or value < 0:
        raise InvalidThetaError(f"theta must be >= 0, got {value}")
    return value


__all__ = [
    "ValidationError",
    "InvalidBodyError",
    "InvalidUniverseSizeError",
    "InvalidStepError",
    "InvalidThetaError",
    "UniverseFormatError",
    "BodyNotFoundError",
    "validate_mass",
    "validate_universe_size",
    "validate_steps",
    "validate_theta",
]
