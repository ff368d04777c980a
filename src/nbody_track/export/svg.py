"""
SVG export for tracks.

Draws each track as a polyline with markers at the start and end
positions. The y axis is flipped so north (+y) points up.
"""

from __future__ import annotations

from typing import Mapping, Optional, Sequence
from xml.sax.saxutils import escape

from ..types import Track

DEFAULT_COLORS = ("#4a90d9", "#d94a4a", "#4ad97a", "#d9a84a", "#9b4ad9", "#4ad9d4")


def to_svg(
    tracks: Mapping[str, Track],
    *,
    width: float = 600.0,
    height: float = 600.0,
    padding: float = 40.0,
    colors: Sequence[str] = DEFAULT_COLORS,
    line_width: float = 1.5,
    marker_radius: float = 4.0,
    show_labels: bool = True,
    label_color: str = "#000000",
    font_size: float = 12.0,
    font_family: str = "sans-serif",
    background: Optional[str] = None,
) -> str:
    """
    Export tracks to SVG format.

    All tracks share one scale (equal on both axes) fitted into the
    drawing area.

    Args:
        tracks: Mapping of body name to track
        width: SVG width (default 600)
        height: SVG height (default 600)
        padding: Padding around the drawing (default 40)
        colors: Colors cycled over the tracks
        line_width: Width of track polylines (default 1.5)
        marker_radius: Radius of the start/end markers (default 4)
        show_labels: Whether to label each track's final position
        label_color: Color for labels (default black)
        font_size: Font size for labels (default 12)
        font_family: Font family for labels (default sans-serif)
        background: Background color (default None for transparent)

    Returns:
        SVG string representation of the tracks
    """
    points = [p for track in tracks.values() for p in track]

    svg_parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{width:.1f}" height="{height:.1f}" '
        f'viewBox="0 0 {width:.1f} {height:.1f}">'
    ]
    if background:
        svg_parts.append(f'  <rect width="100%" height="100%" fill="{escape(background)}"/>')

    if not points:
        svg_parts.append("</svg>")
        return "\n".join(svg_parts)

    min_x = min(p.x for p in points)
    max_x = max(p.x for p in points)
    min_y = min(p.y for p in points)
    max_y = max(p.y for p in points)

    span = max(max_x - min_x, max_y - min_y)
    drawable = min(width, height) - 2 * padding
    scale = drawable / span if span > 0 else 1.0
    # Center the drawing in the canvas
    offset_x = width / 2 - (min_x + max_x) / 2 * scale
    offset_y = height / 2 + (min_y + max_y) / 2 * scale

    def project(x: float, y: float) -> tuple[float, float]:
        return offset_x + x * scale, offset_y - y * scale

    svg_parts.append('  <g class="tracks">')
    for i, (name, track) in enumerate(tracks.items()):
        if not track:
            continue
        color = escape(colors[i % len(colors)])
        coords = " ".join("{:.2f},{:.2f}".format(*project(p.x, p.y)) for p in track)
        svg_parts.append(
            f'    <polyline points="{coords}" fill="none" '
            f'stroke="{color}" stroke-width="{line_width}">'
            f"<title>{escape(name)}</title></polyline>"
        )
        sx, sy = project(track[0].x, track[0].y)
        ex, ey = project(track[-1].x, track[-1].y)
        svg_parts.append(
            f'    <circle cx="{sx:.2f}" cy="{sy:.2f}" r="{marker_radius}" '
            f'fill="none" stroke="{color}"/>'
        )
        svg_parts.append(
            f'    <circle cx="{ex:.2f}" cy="{ey:.2f}" r="{marker_radius}" fill="{color}"/>'
        )
    svg_parts.append("  </g>")

    if show_labels:
        svg_parts.append('  <g class="labels">')
        for name, track in tracks.items():
            if not track:
                continue
            ex, ey = project(track[-1].x, track[-1].y)
            svg_parts.append(
                f'    <text x="{ex + marker_radius + 2:.2f}" y="{ey:.2f}" '
                f'font-family="{escape(font_family)}" font-size="{font_size}" '
                f'fill="{escape(label_color)}">{escape(name)}</text>'
            )
        svg_parts.append("  </g>")

    svg_parts.append("</svg>")
    return "\n".join(svg_parts)


__all__ = ["to_svg"]
