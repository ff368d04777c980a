"""
Export functionality for tracks.

This module provides functions to export tracks to various formats:
- SVG: Scalable Vector Graphics for web and print
- CSV: One row per recorded step
- JSON: All tracks keyed by body name

Example usage:
    from nbody_track import PositionTracker
    from nbody_track.export import to_csv, to_json, to_svg

    tracker = PositionTracker.from_file("planets.txt")
    tracks = {name: tracker.track(name, 86400 * 365, 3600) for name in ("Earth", "Mars")}

    # Export to SVG
    with open("orbits.svg", "w") as f:
        f.write(to_svg(tracks))

    # Export to CSV
    with open("earth.csv", "w") as f:
        f.write(to_csv(tracks["Earth"]))
"""

from .svg import to_svg
from .tabular import to_csv, to_json

__all__ = [
    "to_svg",
    "to_csv",
    "to_json",
]
