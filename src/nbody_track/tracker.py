"""
Position tracking over a simulated body set.

PositionTracker owns the bodies of a universe, advances them in discrete
steps and records the trajectory of one named body. The force evaluation
strategy (exact pairwise or Barnes-Hut) is selected by configuration.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, Mapping, Optional, Sequence, Union

if TYPE_CHECKING:
    from typing_extensions import Self

from .body import G, Body
from .forces import ACCUMULATORS, ForceMethod
from .integrator import integrate
from .spatial.quadtree import THETA
from .types import Event, EventType, Track, Vector2
from .validation import (
    BodyNotFoundError,
    InvalidBodyError,
    validate_steps,
    validate_theta,
    validate_universe_size,
)

BodyLike = Union[Body, Mapping[str, Any]]
"""Input type for bodies: Body objects or dicts with mass/position/velocity/name."""


class PositionTracker:
    """
    Track the position of one body in a gravitating body set.

    Each call to track() restarts from the initial bodies, so identical calls
    return bit-identical tracks. Bodies are always visited in load order.

    Example:
        tracker = PositionTracker(
            bodies=[
                Body(1.989e30, Vector2(0, 0), name="Sun"),
                Body(5.974e24, Vector2(1.496e11, 0), Vector2(0, 29800), name="Earth"),
            ],
            universe_size=5e11,
            method="barnes_hut",
        )
        track = tracker.track("Earth", total_steps=86400, step_size=3600)

        for position in track:
            print(position.x, position.y)
    """

    def __init__(
        self,
        bodies: Sequence[BodyLike],
        universe_size: float,
        *,
        method: Union[str, ForceMethod] = ForceMethod.barnes_hut,
        theta: float = THETA,
        gravitational_constant: float = G,
        on_start: Optional[Callable[[Optional[Event]], None]] = None,
        on_step: Optional[Callable[[Optional[Event]], None]] = None,
        on_end: Optional[Callable[[Optional[Event]], None]] = None,
    ) -> None:
        """
        Initialize tracker with configuration.

        Args:
            bodies: Initial bodies (Body objects or dicts). They are copied;
                the caller's objects are never mutated.
            universe_size: Side length of the square, centered on the origin,
                that must contain every body for the whole run (Barnes-Hut)
            method: "exact" or "barnes_hut"
            theta: Barnes-Hut accuracy (0 = exact, 0.5 = balanced)
            gravitational_constant: G used for every force evaluation
            on_start: Callback for start event
            on_step: Callback for step event
            on_end: Callback for end event
        """
        self._initial_bodies: list[Body] = []
        self._bodies: list[Body] = []
        self._universe_size: float = 1.0
        self._method: ForceMethod = ForceMethod.barnes_hut
        self._theta: float = THETA
        self._gravitational_constant: float = G
        self._events: dict[EventType, Callable[[Optional[Event]], None]] = {}

        # Set initial values via properties (triggers validation)
        self.initial_bodies = bodies
        self.universe_size = universe_size
        self.method = method
        self.theta = theta
        self.gravitational_constant = gravitational_constant

        if on_start:
            self._events[EventType.start] = on_start
        if on_step:
            self._events[EventType.step] = on_step
        if on_end:
            self._events[EventType.end] = on_end

    @classmethod
    def from_file(cls, path: Union[str, Path], **kwargs: Any) -> PositionTracker:
        """
        Build a tracker from a universe file.

        Args:
            path: File in the universe text format
            **kwargs: Tracker options (method, theta, ...)
        """
        from .universe import load_universe

        universe = load_universe(path)
        return cls(universe.bodies, universe.size, **kwargs)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def initial_bodies(self) -> list[Body]:
        """Get the initial bodies (never mutated by track())."""
        return self._initial_bodies

    @initial_bodies.setter
    def initial_bodies(self, value: Sequence[BodyLike]) -> None:
        """Set initial bodies from Body objects or dicts."""
        self._initial_bodies = [_to_body(item) for item in value]
        self._bodies = [body.copy() for body in self._initial_bodies]

    @property
    def bodies(self) -> list[Body]:
        """Get the bodies in their state at the end of the last track() call."""
        return self._bodies

    @property
    def universe_size(self) -> float:
        """Get the side length of the root quadrant."""
        return self._universe_size

    @universe_size.setter
    def universe_size(self, value: float) -> None:
        """
        Set the side length of the root quadrant.

        Raises:
            InvalidUniverseSizeError: If value is not positive.
        """
        self._universe_size = validate_universe_size(value)

    @property
    def method(self) -> ForceMethod:
        """Get the force evaluation strategy."""
        return self._method

    @method.setter
    def method(self, value: Union[str, ForceMethod]) -> None:
        """Set the force evaluation strategy ("exact" or "barnes_hut")."""
        self._method = ForceMethod.parse(value)

    @property
    def use_barnes_hut(self) -> bool:
        """Get whether Barnes-Hut approximation is enabled."""
        return self._method is ForceMethod.barnes_hut

    @use_barnes_hut.setter
    def use_barnes_hut(self, value: bool) -> None:
        """Enable/disable Barnes-Hut approximation."""
        self._method = ForceMethod.barnes_hut if value else ForceMethod.exact

    @property
    def theta(self) -> float:
        """Get Barnes-Hut theta parameter (accuracy)."""
        return self._theta

    @theta.setter
    def theta(self, value: float) -> None:
        """
        Set Barnes-Hut theta parameter.

        Raises:
            InvalidThetaError: If value is negative.
        """
        self._theta = validate_theta(value)

    @property
    def gravitational_constant(self) -> float:
        """Get the gravitational constant."""
        return self._gravitational_constant

    @gravitational_constant.setter
    def gravitational_constant(self, value: float) -> None:
        """Set the gravitational constant."""
        self._gravitational_constant = float(value)

    # -------------------------------------------------------------------------
    # Event System
    # -------------------------------------------------------------------------

    def on(self, event: EventType | str, callback: Callable[[Optional[Event]], None]) -> Self:
        """
        Subscribe to a tracker event.

        Args:
            event: Event type (EventType enum or string name)
            callback: Function to call when event fires

        Returns:
            self (for chaining)
        """
        if isinstance(event, str):
            event = EventType[event]
        self._events[event] = callback
        return self

    def trigger(self, event: Event) -> None:
        """
        Trigger an event, calling the registered callback.

        Args:
            event: Event payload with type and optional data
        """
        event_type = event.get("type")
        if event_type is not None and event_type in self._events:
            self._events[event_type](event)

    # -------------------------------------------------------------------------
    # Tracking
    # -------------------------------------------------------------------------

    def find_body(self, name: str) -> int:
        """
        Index of the first initial body called ``name``.

        Raises:
            BodyNotFoundError: If no body has that name.
        """
        for index, body in enumerate(self._initial_bodies):
            if body.name == name:
                return index
        raise BodyNotFoundError(name)

    def track(self, body_name: str, total_steps: int, step_size: int) -> Track:
        """
        Simulate the universe and record one body's positions.

        The run covers ``total_steps`` time units in steps of ``step_size``,
        i.e. ``ceil(total_steps / step_size)`` steps of duration
        ``step_size`` each.

        Args:
            body_name: Name of the body to track
            total_steps: Simulated duration (>= 0)
            step_size: Duration of one step (> 0)

        Returns:
            Positions of the tracked body, initial position first

        Raises:
            BodyNotFoundError: If no body is called ``body_name``.
            InvalidStepError: If the step parameters are invalid.
        """
        total_steps, step_size = validate_steps(total_steps, step_size)
        index = self.find_body(body_name)

        bodies = [body.copy() for body in self._initial_bodies]
        self._bodies = bodies
        tracked = bodies[index]
        accumulate = ACCUMULATORS[self._method]
        dt = float(step_size)

        result: Track = [tracked.position]
        self.trigger({"type": EventType.start, "step": 0, "time": 0.0, "body": body_name})

        for step, elapsed in enumerate(range(0, total_steps, step_size), start=1):
            accumulate(bodies, self._universe_size, self._theta, self._gravitational_constant)
            for body in bodies:
                integrate(body, dt)
                body.reset_force()
            result.append(tracked.position)
            self.trigger(
                {"type": EventType.step, "step": step, "time": elapsed + dt, "body": body_name}
            )

        steps = len(result) - 1
        self.trigger({"type": EventType.end, "step": steps, "time": steps * dt, "body": body_name})
        return result


def _to_body(data: BodyLike) -> Body:
    """Normalize a Body or dict into an independent Body."""
    if isinstance(data, Body):
        return data.copy()
    if isinstance(data, Mapping):
        if "mass" not in data or "position" not in data:
            raise InvalidBodyError(f"Body dict needs 'mass' and 'position', got {dict(data)!r}")
        return Body(
            mass=data["mass"],
            position=Vector2(*data["position"]),
            velocity=Vector2(*data.get("velocity", (0.0, 0.0))),
            name=data.get("name"),
        )
    raise InvalidBodyError(f"Cannot build a body from {data!r}")


__all__ = ["BodyLike", "PositionTracker"]
