"""
Reading and writing universe descriptions.

A universe file is whitespace separated text. The first token is the side
length of the square universe (centered on the origin); it is followed by
one record per body::

    x y vx vy mass name

Lines starting with ``#`` are comments. Example::

    # side length
    5.0e11
    1.4960e+11  0.0  0.0  2.9800e+04  5.9740e+24  Earth
    0.0         0.0  0.0  0.0         1.9890e+30  Sun
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Sequence, Union

from .body import Body
from .types import Vector2
from .validation import (
    InvalidBodyError,
    InvalidUniverseSizeError,
    UniverseFormatError,
    validate_universe_size,
)

FIELDS_PER_BODY = 6


@dataclass
class Universe:
    """Universe side length and initial bodies, in file order."""

    size: float
    bodies: List[Body] = field(default_factory=list)


def _tokens(text: str) -> List[str]:
    tokens: List[str] = []
    for line in text.splitlines():
        stripped = line.strip()
        if stripped.startswith("#"):
            continue
        tokens.extend(stripped.split())
    return tokens


def _number(token: str, what: str, record: int) -> float:
    try:
        return float(token)
    except ValueError:
        raise UniverseFormatError(
            f"Body {record}: {what} must be a number, got {token!r}"
        ) from None


def parse_universe(text: str) -> Universe:
    """
    Parse a universe description.

    Args:
        text: Universe text (size followed by body records)

    Returns:
        Parsed Universe

    Raises:
        UniverseFormatError: If the text is empty, a record is incomplete or
            a field is not a number
        InvalidUniverseSizeError: If the side length is not positive
        InvalidBodyError: If a body mass is not positive
    """
    tokens = _tokens(text)
    if not tokens:
        raise UniverseFormatError("Universe description is empty")

    try:
        size = validate_universe_size(tokens[0])
    except InvalidUniverseSizeError as exc:
        raise InvalidUniverseSizeError(f"Invalid universe header: {exc}") from exc

    records = tokens[1:]
    if len(records) % FIELDS_PER_BODY:
        complete = len(records) // FIELDS_PER_BODY
        raise UniverseFormatError(
            f"Body {complete}: incomplete record, expected {FIELDS_PER_BODY} fields "
            f"(x y vx vy mass name), got {len(records) % FIELDS_PER_BODY}"
        )

    bodies: List[Body] = []
    for i in range(0, len(records), FIELDS_PER_BODY):
        record = i // FIELDS_PER_BODY
        x, y, vx, vy, mass = (
            _number(token, label, record)
            for token, label in zip(records[i : i + 5], ("x", "y", "vx", "vy", "mass"))
        )
        name = records[i + 5]
        try:
            bodies.append(Body(mass, Vector2(x, y), Vector2(vx, vy), name=name))
        except InvalidBodyError as exc:
            raise InvalidBodyError(f"Body {record} ({name}): {exc}") from exc

    return Universe(size, bodies)


def load_universe(path: Union[str, Path]) -> Universe:
    """Read and parse a universe file."""
    return parse_universe(Path(path).read_text(encoding="utf-8"))


def format_vector(vector: Vector2) -> str:
    """Format a vector as ``"x y"``."""
    return f"{vector.x!r} {vector.y!r}"


def format_body(body: Body) -> str:
    """Format a body as a universe record ``"x y vx vy mass name"``."""
    name = body.name if body.name is not None else "-"
    return f"{format_vector(body.position)} {format_vector(body.velocity)} {body.mass!r} {name}"


def format_universe(universe: Universe) -> str:
    """Format a universe in the text format accepted by parse_universe()."""
    lines = [repr(universe.size)]
    lines.extend(format_body(body) for body in universe.bodies)
    return "\n".join(lines) + "\n"


def format_track(track: Iterable[Vector2]) -> str:
    """Format a track, one ``"x y"`` line per position."""
    return "".join(format_vector(position) + "\n" for position in track)


def save_universe(universe: Universe, path: Union[str, Path]) -> None:
    """Write a universe file."""
    Path(path).write_text(format_universe(universe), encoding="utf-8")


def universe_from_bodies(bodies: Sequence[Body], size: float) -> Universe:
    """Bundle copies of ``bodies`` with a side length."""
    return Universe(validate_universe_size(size), [body.copy() for body in bodies])


__all__ = [
    "Universe",
    "parse_universe",
    "load_universe",
    "save_universe",
    "universe_from_bodies",
    "format_vector",
    "format_body",
    "format_universe",
    "format_track",
]
