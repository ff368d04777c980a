"""
nbody-track: 2D gravitational n-body simulation with Barnes-Hut forces.

This package simulates a set of point masses and records the trajectory
of a named body.

Main components:
- types: Vector2 arithmetic, tracks and lifecycle events
- body: Point masses and Newtonian pairwise attraction
- spatial: Quadrant geometry and the Barnes-Hut quadtree
- forces: Exact and Barnes-Hut force accumulation strategies
- tracker: PositionTracker driving the step loop
- universe: Universe file format
- metrics: Energy, momentum and track diagnostics
"""

__version__ = "0.1.0"

from .body import G, Body
from .forces import ForceMethod, accumulate_barnes_hut, accumulate_exact
from .integrator import integrate

# Diagnostics
from .metrics import (
    angular_momentum,
    center_of_mass,
    kinetic_energy,
    potential_energy,
    system_summary,
    total_energy,
    total_momentum,
    track_deviation,
)

# Spatial data structures
from .spatial import THETA, BarnesHutTree, Quadrant, QuadTreeNode, UniverseBoundsWarning
from .tracker import PositionTracker
from .types import Event, EventType, Track, Vector2
from .universe import Universe, format_body, format_track, load_universe, parse_universe

# Validation utilities
from .validation import (
    BodyNotFoundError,
    InvalidBodyError,
    InvalidStepError,
    InvalidThetaError,
    InvalidUniverseSizeError,
    UniverseFormatError,
    ValidationError,
)

__all__ = [
    # Version
    "__version__",
    # Shared types
    "Vector2",
    "Track",
    "EventType",
    "Event",
    # Physics
    "G",
    "Body",
    "integrate",
    # Spatial data structures
    "Quadrant",
    "BarnesHutTree",
    "QuadTreeNode",
    "UniverseBoundsWarning",
    "THETA",
    # Force evaluation
    "ForceMethod",
    "accumulate_exact",
    "accumulate_barnes_hut",
    # Tracking
    "PositionTracker",
    # Universe files
    "Universe",
    "parse_universe",
    "load_universe",
    "format_body",
    "format_track",
    # Metrics
    "kinetic_energy",
    "potential_energy",
    "total_energy",
    "total_momentum",
    "angular_momentum",
    "center_of_mass",
    "track_deviation",
    "system_summary",
    # Validation
    "ValidationError",
    "BodyNotFoundError",
    "InvalidBodyError",
    "InvalidStepError",
    "InvalidThetaError",
    "InvalidUniverseSizeError",
    "UniverseFormatError",
]
