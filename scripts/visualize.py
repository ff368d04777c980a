#!/usr/bin/env python3
"""
Visualization script for body tracks.

Generates orbit plots for the sample universe into ./build/

Usage:
    uv run python scripts/visualize.py [UNIVERSE] [--days N] [--step-size S]
"""

import argparse
from pathlib import Path

import matplotlib.pyplot as plt

from nbody_track import PositionTracker, track_deviation
from nbody_track.export import to_svg

# Output directory
BUILD_DIR = Path(__file__).parent.parent / "build"

DEFAULT_UNIVERSE = Path(__file__).parent.parent / "tests" / "data" / "planets.txt"

DAY = 86400


def ensure_build_dir():
    """Create build directory if it doesn't exist."""
    BUILD_DIR.mkdir(exist_ok=True)


def visualize(tracks, title="Tracks", ax=None):
    """Draw tracks on an axis, marking the final positions."""
    for name, track in tracks.items():
        xs = [p.x for p in track]
        ys = [p.y for p in track]
        ax.plot(xs, ys, linewidth=1, label=name)
        ax.scatter(xs[-1:], ys[-1:], s=30, zorder=5, edgecolors="white", linewidth=1)

    ax.set_title(title, fontsize=12, fontweight="bold")
    ax.set_aspect("equal")
    ax.legend(loc="upper right", fontsize=8)


def save_tracks(tracks, title, filename):
    """Save a single track plot."""
    fig, ax = plt.subplots(figsize=(8, 8))
    visualize(tracks, title, ax=ax)
    plt.tight_layout()

    filepath = BUILD_DIR / filename
    fig.savefig(filepath, dpi=150, bbox_inches="tight", facecolor="white")
    plt.close(fig)
    print(f"  Saved: {filepath}")


def save_deviation(exact, approximate, filename):
    """Plot how far the Barnes-Hut tracks drift from the exact ones."""
    fig, ax = plt.subplots(figsize=(8, 5))
    for name in exact:
        deviation = track_deviation(exact[name], approximate[name])
        ax.plot(range(len(deviation)), deviation, linewidth=1, label=name)

    ax.set_title("Barnes-Hut vs exact", fontsize=12, fontweight="bold")
    ax.set_xlabel("step")
    ax.set_ylabel("deviation (m)")
    ax.legend(loc="upper left", fontsize=8)
    plt.tight_layout()

    filepath = BUILD_DIR / filename
    fig.savefig(filepath, dpi=150, bbox_inches="tight", facecolor="white")
    plt.close(fig)
    print(f"  Saved: {filepath}")


def main():
    parser = argparse.ArgumentParser(description="Plot body tracks")
    parser.add_argument("universe", nargs="?", default=str(DEFAULT_UNIVERSE), help="Universe file")
    parser.add_argument("--days", type=int, default=365, help="Simulated days")
    parser.add_argument("--step-size", type=int, default=3600, help="Step size in seconds")
    args = parser.parse_args()

    ensure_build_dir()

    exact = PositionTracker.from_file(args.universe, method="exact")
    fast = PositionTracker.from_file(args.universe, method="barnes_hut")
    names = [b.name for b in exact.initial_bodies if b.name]

    total = args.days * DAY
    print(f"Tracking {len(names)} bodies over {args.days} days...")
    exact_tracks = {name: exact.track(name, total, args.step_size) for name in names}
    fast_tracks = {name: fast.track(name, total, args.step_size) for name in names}

    save_tracks(exact_tracks, "Exact", "tracks_exact.png")
    save_tracks(fast_tracks, "Barnes-Hut", "tracks_barnes_hut.png")
    save_deviation(exact_tracks, fast_tracks, "deviation.png")

    svg_path = BUILD_DIR / "tracks.svg"
    svg_path.write_text(to_svg(fast_tracks, background="#ffffff"), encoding="utf-8")
    print(f"  Saved: {svg_path}")

    print(f"\nAll images saved to {BUILD_DIR}/")


if __name__ == "__main__":
    main()
