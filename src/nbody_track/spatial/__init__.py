"""
Spatial data structures for efficient force calculations.

Provides the quadrant geometry and the quadtree used for Barnes-Hut
O(n log n) force approximation.
"""

from .quadrant import Quadrant
from .quadtree import MAX_DEPTH, THETA, BarnesHutTree, QuadTreeNode, UniverseBoundsWarning

__all__ = [
    "Quadrant",
    "BarnesHutTree",
    "QuadTreeNode",
    "UniverseBoundsWarning",
    "THETA",
    "MAX_DEPTH",
]
