"""
Command-line driver.

Usage:
    nbody-track FILE BODY [BODY ...] [--steps N] [--step-size S]
                [--method {exact,barnes-hut}] [--theta T] [--full]
                [--format {text,csv,json}]

Examples:
    nbody-track planets.txt Earth Mars --steps 100 --step-size 1
    nbody-track planets.txt Earth --steps 31557600 --step-size 3600 --full --format csv
    python -m nbody_track planets.txt Sun --method exact
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from . import __version__
from .export import to_csv, to_json
from .forces import ForceMethod
from .spatial.quadtree import THETA
from .tracker import PositionTracker
from .types import Track
from .universe import format_track, format_vector
from .validation import BodyNotFoundError, ValidationError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nbody-track",
        description="Simulate a gravitating body set and report body trajectories.",
    )
    parser.add_argument(
        "universe", help="Universe file (size, then 'x y vx vy mass name' records)"
    )
    parser.add_argument("bodies", nargs="+", metavar="BODY", help="Name of a body to track")
    parser.add_argument(
        "--steps", type=int, default=100, help="Simulated duration in seconds (default: 100)"
    )
    parser.add_argument(
        "--step-size", type=int, default=1, help="Duration of one step in seconds (default: 1)"
    )
    parser.add_argument(
        "--method",
        choices=["exact", "barnes-hut"],
        default="barnes-hut",
        help="Force evaluation method (default: barnes-hut)",
    )
    parser.add_argument(
        "--theta", type=float, default=THETA, help=f"Barnes-Hut accuracy (default: {THETA})"
    )
    parser.add_argument(
        "--full", action="store_true", help="Print every recorded position, not just the last"
    )
    parser.add_argument(
        "--format", choices=["text", "csv", "json"], default="text", help="Output format"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def render(tracks: dict[str, Track], fmt: str, full: bool) -> str:
    """Render tracks (all positions, or only the last one) in the given format."""
    if fmt == "csv":
        chunks = []
        for i, (name, track) in enumerate(tracks.items()):
            first = 0 if full else len(track) - 1
            chunks.append(to_csv(track[first:], name=name, header=(i == 0), first_step=first))
        return "".join(chunks)

    if not full:
        tracks = {name: track[-1:] for name, track in tracks.items()}

    if fmt == "json":
        return to_json(tracks) + "\n"

    if not full:
        return "".join(f"{name}\t{format_vector(track[0])}\n" for name, track in tracks.items())
    return "".join(f"# {name}\n{format_track(track)}" for name, track in tracks.items())


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the driver; returns the process exit status."""
    args = build_parser().parse_args(argv)

    try:
        tracker = PositionTracker.from_file(
            args.universe, method=ForceMethod.parse(args.method), theta=args.theta
        )
        tracks = {name: tracker.track(name, args.steps, args.step_size) for name in args.bodies}
    except BodyNotFoundError as exc:
        known = ", ".join(b.name for b in tracker.initial_bodies if b.name) or "none"
        print(f"error: {exc} (known bodies: {known})", file=sys.stderr)
        return 1
    except (ValidationError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    sys.stdout.write(render(tracks, args.format, args.full))
    return 0


if __name__ == "__main__":
    sys.exit(main())
