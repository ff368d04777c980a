"""
CSV and JSON export for tracks.
"""

from __future__ import annotations

import csv
import io
import json
from typing import Mapping, Optional

from ..types import Track


def to_csv(
    track: Track,
    *,
    name: Optional[str] = None,
    header: bool = True,
    first_step: int = 0,
) -> str:
    """
    Export a track as CSV with columns ``step,x,y``.

    Args:
        track: Track to export
        name: If given, a leading ``body`` column holding this name is added
        header: Whether to write the header row (default True)
        first_step: Step number of the first position (default 0)

    Returns:
        CSV text
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    prefix: list[object] = [] if name is None else [name]
    if header:
        writer.writerow((["body"] if name is not None else []) + ["step", "x", "y"])
    for step, position in enumerate(track, start=first_step):
        writer.writerow(prefix + [step, repr(position.x), repr(position.y)])
    return buffer.getvalue()


def to_json(tracks: Mapping[str, Track], *, indent: Optional[int] = None) -> str:
    """
    Export tracks as JSON: ``{"name": [[x, y], ...], ...}``.

    Args:
        tracks: Mapping of body name to track
        indent: JSON indentation (default compact)

    Returns:
        JSON text
    """
    data = {name: [[p.x, p.y] for p in track] for name, track in tracks.items()}
    return json.dumps(data, indent=indent)


__all__ = ["to_csv", "to_json"]
