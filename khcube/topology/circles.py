"""
khcube/topology/circles.py

Circle tracing for a single resolution.

Resolving crossing i with choice 0 joins positions {0,1} and {2,3}; choice 1
joins {0,3} and {1,2}. The circles of a resolution are the connected
components of the graph on edge labels whose edges are these strand
pairings. A circle is the sorted tuple of its labels, so equal label sets
compare, hash and order identically across resolutions.
"""

from __future__ import annotations

from typing import FrozenSet, Iterable, Tuple

from networkx.utils import UnionFind

from khcube.algebra.gf2 import label_mask
from khcube.diagram.planar import Crossing, PlanarDiagram

Circle = Tuple[int, ...]


def strand_pairings(crossing: Crossing, choice: int) -> Tuple[Tuple[int, int], Tuple[int, int]]:
    """The two strand segments of a crossing under the given local choice."""
    a, b, c, d = crossing
    if choice:
        return (a, d), (b, c)
    return (a, b), (c, d)


def resolution_circles(diagram: PlanarDiagram, resolution: int) -> FrozenSet[Circle]:
    """
    Trace the circles of a resolution.

    Args:
        diagram: Crossing diagram
        resolution: Bitmask, bit i is the choice at crossing i

    Returns:
        Set of circles; every label of the diagram lies in exactly one.
    """
    components = UnionFind()
    for i, crossing in enumerate(diagram.crossings):
        for a, b in strand_pairings(crossing, (resolution >> i) & 1):
            components.union(a, b)
    return frozenset(tuple(sorted(group)) for group in components.to_sets())


def circle_mask(circle: Iterable[int]) -> int:
    """GF(2) vector of a circle: bit (x - 1) per label x."""
    return label_mask(circle)
