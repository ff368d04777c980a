"""
Quadtree implementation for Barnes-Hut force approximation.

The quadtree recursively subdivides 2D space into quadrants,
enabling O(n log n) approximate n-body force calculations.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union

from ..body import G, Body
from ..types import ZERO, Vector2
from ..validation import validate_theta, validate_universe_size
from .quadrant import Quadrant

# Default Barnes-Hut threshold
THETA = 0.5

# Depth at which bodies that still share a leaf are merged instead of split.
MAX_DEPTH = 64


class UniverseBoundsWarning(UserWarning):
    """Warning raised when a body lies outside the tree's root quadrant."""

    pass


@dataclass
class QuadTreeNode:
    """
    A node in the quadtree.

    Attributes:
        quadrant: Region covered by this node
        body: Body stored directly if this is an occupied leaf
        aggregate: Synthetic body carrying total mass and center of mass
        members: Simulated bodies represented by an occupied leaf. Normally
            just ``body``; several when coincident bodies had to be merged.
        children: Four child nodes [NW, NE, SW, SE] if internal
    """

    quadrant: Quadrant
    body: Optional[Body] = None
    aggregate: Optional[Body] = None
    members: Tuple[Body, ...] = ()
    children: Optional[List[QuadTreeNode]] = None

    def is_leaf(self) -> bool:
        """True if this node has no children."""
        return self.children is None

    def is_empty(self) -> bool:
        """True if this node contains no bodies."""
        return self.body is None and self.children is None

    @property
    def total_mass(self) -> float:
        """Total mass of the bodies in this subtree."""
        return self.aggregate.mass if self.aggregate is not None else 0.0

    @property
    def center_of_mass(self) -> Vector2:
        """Center of mass of this subtree (quadrant center when empty)."""
        if self.aggregate is None:
            return self.quadrant.center
        return self.aggregate.position

    def subdivide(self) -> None:
        """Create four empty children, one per sub-quadrant."""
        self.children = [QuadTreeNode(q) for q in self.quadrant.subdivide()]

    def child_for(self, position: Vector2, avoid: Optional[QuadTreeNode] = None) -> QuadTreeNode:
        """
        Pick the child receiving a body at ``position``.

        The first child in NW, NE, SW, SE order whose quadrant contains the
        position wins. If that child is ``avoid`` and another child also
        contains the position, the next one is used instead. Positions no
        child contains (rounding at the outer edge) go to SE.
        """
        assert self.children is not None
        candidates = [child for child in self.children if child.quadrant.contains(position)]
        if not candidates:
            return self.children[3]
        if avoid is not None and candidates[0] is avoid and len(candidates) > 1:
            return candidates[1]
        return candidates[0]


class BarnesHutTree:
    """
    Barnes-Hut quadtree for approximate gravitational forces.

    Internal nodes cache the total mass and center of mass of their subtree,
    updated incrementally as bodies are inserted. For distant clusters the
    force query treats the cluster as a single body at its center of mass,
    reducing complexity from O(n^2) to O(n log n).

    Usage:
        tree = BarnesHutTree(universe_size=5e11)
        for body in bodies:
            tree.insert(body)
        for body in bodies:
            tree.query_force(body)

    The theta parameter controls the accuracy/speed tradeoff:
    - theta = 0: Exact calculation (no approximation)
    - theta = 0.5: Good balance (recommended)
    - theta = 1.0+: Fast but less accurate
    """

    def __init__(
        self,
        universe_size: Union[float, Quadrant],
        theta: float = THETA,
        gravitational_constant: float = G,
    ):
        """
        Initialize an empty tree.

        Args:
            universe_size: Side length of the root square centered on the
                origin, or an explicit root Quadrant
            theta: Barnes-Hut threshold (0 = exact, higher = more approximation)
            gravitational_constant: G used for every force evaluation
        """
        if isinstance(universe_size, Quadrant):
            quadrant = universe_size
        else:
            quadrant = Quadrant(ZERO, validate_universe_size(universe_size))

        self.root = QuadTreeNode(quadrant)
        self.theta = validate_theta(theta)
        self.gravitational_constant = float(gravitational_constant)
        self.body_count = 0
        self.outside: List[Body] = []

    @property
    def total_mass(self) -> float:
        return self.root.total_mass

    @property
    def center_of_mass(self) -> Vector2:
        return self.root.center_of_mass

    # -------------------------------------------------------------------------
    # Insertion
    # -------------------------------------------------------------------------

    def insert(self, body: Body) -> None:
        """
        Insert a body into the quadtree.

        Bodies outside the root quadrant are not inserted; they are recorded
        in ``outside`` and a UniverseBoundsWarning is issued.
        """
        if not body.is_inside(self.root.quadrant):
            quadrant = self.root.quadrant
            warnings.warn(
                f"Body {body.name or '<unnamed>'} at ({body.position.x}, {body.position.y}) "
                f"lies outside the universe (side {quadrant.side_length} centered on "
                f"({quadrant.center.x}, {quadrant.center.y})) and is ignored by the tree. "
                "Use a larger universe size.",
                UniverseBoundsWarning,
                stacklevel=2,
            )
            self.outside.append(body)
            return

        self._insert_into(self.root, body, 0)
        self.body_count += 1

    def _insert_into(self, node: QuadTreeNode, body: Body, depth: int) -> None:
        """Recursively insert body into subtree rooted at node."""
        if node.is_empty():
            # Empty node becomes a leaf with this body
            node.body = body
            node.aggregate = body
            node.members = (body,)
            return

        if node.is_leaf():
            assert node.aggregate is not None
            if depth >= MAX_DEPTH or node.members[0].position == body.position:
                # Inseparable bodies share one synthetic leaf body
                node.aggregate = node.aggregate.combined_with(body, anonymous=True)
                node.body = node.aggregate
                node.members += (body,)
                return
            self._split_leaf(node, body, depth)

        assert node.aggregate is not None
        node.aggregate = node.aggregate.combined_with(body, anonymous=True)
        self._insert_into(node.child_for(body.position), body, depth + 1)

    def _split_leaf(self, node: QuadTreeNode, arriving: Body, depth: int) -> None:
        """Turn an occupied leaf into an internal node, pushing its bodies down."""
        residents = node.members
        node.body = None
        node.members = ()
        node.subdivide()

        # Resolve the arriving body first so a resident on a shared edge is
        # not pushed into the same child by tie-break order alone.
        target = node.child_for(arriving.position)
        for resident in residents:
            child = node.child_for(resident.position, avoid=target)
            self._insert_into(child, resident, depth + 1)

    # -------------------------------------------------------------------------
    # Force query
    # -------------------------------------------------------------------------

    def query_force(self, body: Body) -> None:
        """
        Accumulate the approximate gravitational force on ``body``.

        Uses the Barnes-Hut criterion: if a cluster is sufficiently far away
        (size/distance < theta), treat it as a single mass at its center of
        mass. The result is added to ``body.force``.
        """
        self._query_force(self.root, body)

    def _query_force(self, node: QuadTreeNode, body: Body) -> None:
        """Recursively add the force contribution of node."""
        if node.is_empty():
            return

        if node.is_leaf():
            # Skip self-interaction (same body)
            if any(member is body for member in node.members):
                return
            assert node.body is not None
            body.apply_force_from(node.body, self.gravitational_constant)
            return

        assert node.aggregate is not None and node.children is not None
        dist = body.distance_to(node.aggregate)

        # Barnes-Hut criterion: s/d < theta. A body sitting exactly on the
        # center of mass gets nothing from the aggregate and descends instead.
        if dist != 0 and node.quadrant.side_length / dist < self.theta:
            body.apply_force_from(node.aggregate, self.gravitational_constant)
            return

        for child in node.children:
            self._query_force(child, body)

    # -------------------------------------------------------------------------
    # Introspection
    # -------------------------------------------------------------------------

    def depth(self) -> int:
        """Number of levels below the root (0 for a root leaf)."""
        return self._depth(self.root)

    def _depth(self, node: QuadTreeNode) -> int:
        if node.children is None:
            return 0
        return 1 + max(self._depth(child) for child in node.children)

    def node_count(self) -> int:
        """Total number of nodes, including empty leaves."""
        count = 0
        stack = [self.root]
        while stack:
            node = stack.pop()
            count += 1
            if node.children is not None:
                stack.extend(node.children)
        return count

    @classmethod
    def from_bodies(
        cls,
        bodies: Iterable[Body],
        universe_size: Optional[float] = None,
        padding: float = 0.0,
        theta: float = THETA,
        gravitational_constant: float = G,
    ) -> BarnesHutTree:
        """
        Build a tree containing ``bodies``.

        Args:
            bodies: Bodies to insert, in order
            universe_size: Side of the root square centered on the origin.
                If None, the square is fitted to the bodies' bounding box.
            padding: Padding around the bounding box (fitted root only)
            theta: Barnes-Hut threshold
            gravitational_constant: G used for force evaluation

        Returns:
            BarnesHutTree with all bodies inserted
        """
        bodies = list(bodies)
        root: Union[float, Quadrant]

        if universe_size is not None:
            root = universe_size
        elif not bodies:
            root = 1.0
        else:
            min_x = min(b.position.x for b in bodies) - padding
            min_y = min(b.position.y for b in bodies) - padding
            max_x = max(b.position.x for b in bodies) + padding
            max_y = max(b.position.y for b in bodies) + padding
            fitted = Quadrant.from_bounds(min_x, min_y, max_x, max_y)
            # Enlarged so rounding never excludes the extreme bodies; a single
            # point at the origin gets a unit square.
            center = fitted.center
            margin = 1e-9 * max(fitted.side_length, abs(center.x), abs(center.y))
            root = Quadrant(center, (fitted.side_length + margin) or 1.0)

        tree = cls(root, theta=theta, gravitational_constant=gravitational_constant)
        for body in bodies:
            tree.insert(body)
        return tree


__all__ = ["THETA", "MAX_DEPTH", "UniverseBoundsWarning", "QuadTreeNode", "BarnesHutTree"]
