#!/usr/bin/env python3
"""
Benchmark exact and Barnes-Hut force evaluation on random universes.

Usage:
    uv run python scripts/benchmark_trackers.py [--sizes N,...] [--steps N] [--theta T]

Examples:
    uv run python scripts/benchmark_trackers.py
    uv run python scripts/benchmark_trackers.py --sizes 100,500,2000 --steps 5
    uv run python scripts/benchmark_trackers.py --theta 1.0 --output results.json
"""

from __future__ import annotations

import argparse
import json
import math
import random
import time
from typing import Any

from nbody_track import G, Body, PositionTracker, Vector2, track_deviation

UNIVERSE_SIZE = 1.0e12


def random_universe(n: int, seed: int = 42) -> list[Body]:
    """A heavy central body plus n - 1 light bodies on circular-ish orbits."""
    rng = random.Random(seed)
    bodies = [Body(1.989e30, Vector2(0.0, 0.0), name="center")]
    for i in range(1, n):
        radius = rng.uniform(0.05, 0.4) * UNIVERSE_SIZE
        angle = rng.uniform(0.0, 2 * math.pi)
        position = Vector2(radius * math.cos(angle), radius * math.sin(angle))
        speed = (G * 1.989e30 / radius) ** 0.5
        velocity = Vector2(-speed * math.sin(angle), speed * math.cos(angle))
        bodies.append(Body(rng.uniform(1e22, 1e25), position, velocity, name=f"b{i}"))
    return bodies


def benchmark_tracker(
    bodies: list[Body],
    method: str,
    steps: int,
    **kwargs: Any,
) -> dict[str, Any]:
    """
    Benchmark a single force method.

    Returns:
        Dict with timing and the recorded track
    """
    tracker = PositionTracker(bodies, UNIVERSE_SIZE, method=method, **kwargs)

    start = time.perf_counter()
    track = tracker.track("b1", steps * 3600, 3600)
    elapsed = time.perf_counter() - start

    return {
        "time_seconds": elapsed,
        "num_bodies": len(bodies),
        "track": track,
    }


def run_benchmarks(
    sizes: list[int],
    steps: int = 10,
    theta: float = 0.5,
) -> list[dict]:
    """Run both methods on universes of the given sizes."""
    results = []

    print(f"\nBenchmarking exact vs Barnes-Hut (theta={theta}), {steps} steps each")
    print("=" * 72)
    print(f"{'Bodies':>8s}{'Exact':>12s}{'Barnes-Hut':>12s}{'Speedup':>10s}{'Max dev (m)':>16s}")
    print("-" * 72)

    for n in sizes:
        bodies = random_universe(n)

        exact = benchmark_tracker(bodies, "exact", steps)
        fast = benchmark_tracker(bodies, "barnes_hut", steps, theta=theta)
        deviation = float(track_deviation(exact["track"], fast["track"]).max())
        speedup = exact["time_seconds"] / fast["time_seconds"] if fast["time_seconds"] else 0.0

        print(
            f"{n:>8d}{exact['time_seconds']:>12.4f}{fast['time_seconds']:>12.4f}"
            f"{speedup:>10.2f}{deviation:>16.6g}"
        )

        results.append({
            "num_bodies": n,
            "steps": steps,
            "theta": theta,
            "exact_seconds": exact["time_seconds"],
            "barnes_hut_seconds": fast["time_seconds"],
            "max_deviation": deviation,
        })

    return results


def main():
    parser = argparse.ArgumentParser(description="Benchmark force evaluation methods")
    parser.add_argument("--sizes", default="50,200,800", help="Comma-separated body counts")
    parser.add_argument("--steps", type=int, default=10, help="Steps per run")
    parser.add_argument("--theta", type=float, default=0.5, help="Barnes-Hut theta")
    parser.add_argument("--output", help="Output JSON file for results")

    args = parser.parse_args()

    sizes = [int(s) for s in args.sizes.split(",")]
    results = run_benchmarks(sizes=sizes, steps=args.steps, theta=args.theta)

    if args.output and results:
        with open(args.output, "w") as f:
            json.dump(results, f, indent=2)
        print(f"\nResults saved to {args.output}")


if __name__ == "__main__":
    main()
