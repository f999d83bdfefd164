"""
khcube/topology/cube.py

The cube of resolutions and its basis addressing.

Every resolution r of an n-crossing diagram is traced once. Its circles are
enumerated in sorted order; in the reduced theory the circle through the
marked label is set aside and only the remaining "free" circles get a bit.
A local state is a bitmask over the free circles, so resolution r spans

    local_dim(r) = 2 ** len(free_circles(r))

basis elements. Resolutions of equal degree (popcount) are laid out in
increasing order, each starting at the cumulative dimension of the ones
before it. Global index of (r, state) in its degree = offset[r] + state.

All tables are built once by ResolutionCube.build and never mutated.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Iterator, Optional, Tuple

from khcube.diagram.planar import PlanarDiagram
from khcube.topology.circles import Circle, resolution_circles

log = logging.getLogger(__name__)


def popcount(x: int) -> int:
    return bin(x).count("1")


class Surgery(Enum):
    """Local change of the circle set along a cube edge."""
    MERGE = "merge"
    SPLIT = "split"
    TRIVIAL = "trivial"


@dataclass(frozen=True)
class CubeEdge:
    """
    Edge of the cube: one crossing switched from choice 0 to choice 1.

    Attributes:
        source: Resolution with bit `crossing` unset
        target: source with bit `crossing` set
        crossing: Index of the switched crossing
        vanished: Circles of source missing from target, in circle order
        appeared: Circles of target missing from source, in circle order
    """
    source: int
    target: int
    crossing: int
    vanished: Tuple[Circle, ...]
    appeared: Tuple[Circle, ...]

    @property
    def degree(self) -> int:
        return popcount(self.source)

    @property
    def surgery(self) -> Surgery:
        if len(self.vanished) == 2:
            return Surgery.MERGE
        if len(self.vanished) == 1:
            return Surgery.SPLIT
        return Surgery.TRIVIAL


@dataclass(frozen=True)
class ResolutionCube:
    """
    Circle data and basis addressing for all 2^n resolutions.

    Attributes:
        n: Number of crossings
        circles: Per resolution, its circles in sorted order
        free_circles: Per resolution, the circles that carry a state bit
        marked: Per resolution, the marked circle (reduced theory) or None
        bit_of: Per resolution, free circle -> bit position
        rank: Per resolution, zero-based position among same-degree resolutions
        offset: Per resolution, first global basis index within its degree
        degree_dims: Total basis dimension of each degree 0..n
        reduced: Whether the marked circle was set aside
    """
    n: int
    circles: Tuple[Tuple[Circle, ...], ...]
    free_circles: Tuple[Tuple[Circle, ...], ...]
    marked: Tuple[Optional[Circle], ...]
    bit_of: Tuple[Dict[Circle, int], ...]
    rank: Tuple[int, ...]
    offset: Tuple[int, ...]
    degree_dims: Tuple[int, ...]
    reduced: bool = False

    @staticmethod
    def build(diagram: PlanarDiagram, reduced: bool = False, marked_label: int = 1) -> "ResolutionCube":
        """
        Trace every resolution and lay out the basis.

        Args:
            diagram: Crossing diagram
            reduced: Set aside the circle through marked_label
            marked_label: Edge label of the marked strand

        Raises:
            ValueError: if reduced and no circle contains marked_label
        """
        n = diagram.size()
        if reduced and marked_label not in diagram.labels():
            raise ValueError(f"marked label {marked_label} does not occur in the diagram")

        circles = []
        free_circles = []
        marked = []
        bit_of = []
        rank = []
        offset = []
        count = [0] * (n + 1)
        dims = [0] * (n + 1)

        for r in range(1 << n):
            ordered = tuple(sorted(resolution_circles(diagram, r)))
            m = None
            if reduced:
                m = next(c for c in ordered if marked_label in c)
            free = tuple(c for c in ordered if c != m)

            k = popcount(r)
            circles.append(ordered)
            free_circles.append(free)
            marked.append(m)
            bit_of.append({c: i for i, c in enumerate(free)})
            rank.append(count[k])
            offset.append(dims[k])
            count[k] += 1
            dims[k] += 1 << len(free)

        log.debug("cube of %d crossings: degree dimensions %s", n, dims)
        return ResolutionCube(
            n=n,
            circles=tuple(circles),
            free_circles=tuple(free_circles),
            marked=tuple(marked),
            bit_of=tuple(bit_of),
            rank=tuple(rank),
            offset=tuple(offset),
            degree_dims=tuple(dims),
            reduced=reduced,
        )

    def __len__(self) -> int:
        return len(self.circles)

    def degree(self, resolution: int) -> int:
        return popcount(resolution)

    def local_dim(self, resolution: int) -> int:
        """Number of basis elements of one resolution."""
        return 1 << len(self.free_circles[resolution])

    def circle_set(self, resolution: int) -> FrozenSet[Circle]:
        return frozenset(self.circles[resolution])

    def resolutions_of_degree(self, k: int) -> Iterator[int]:
        """Resolutions of weight k in layout order."""
        for r in range(len(self.circles)):
            if popcount(r) == k:
                yield r

    def edge(self, source: int, crossing: int) -> CubeEdge:
        """Cube edge switching `crossing` on in `source`."""
        if source >> crossing & 1:
            raise ValueError(f"crossing {crossing} is already set in resolution {source}")
        target = source | (1 << crossing)
        old = self.circle_set(source)
        new = self.circle_set(target)
        return CubeEdge(
            source=source,
            target=target,
            crossing=crossing,
            vanished=tuple(c for c in self.circles[source] if c not in new),
            appeared=tuple(c for c in self.circles[target] if c not in old),
        )

    def edges(self) -> Iterator[CubeEdge]:
        """Every cube edge, by source resolution then crossing."""
        for r in range(len(self.circles)):
            for j in range(self.n):
                if r >> j & 1:
                    continue
                edge = self.edge(r, j)
                if edge.surgery is Surgery.TRIVIAL:
                    log.debug(
                        "resolution %d -> %d leaves the circles unchanged (%d vanished, %d appeared)",
                        edge.source, edge.target, len(edge.vanished), len(edge.appeared),
                    )
                yield edge

    def carried_state(self, edge: CubeEdge, state: int) -> int:
        """
        Target state bits of the circles present on both ends of an edge.

        Bits of vanished circles, and the absent bit of the marked circle,
        are dropped; every other free circle keeps its label.
        """
        vanished = set(edge.vanished)
        target_bits = self.bit_of[edge.target]
        out = 0
        for i, circle in enumerate(self.free_circles[edge.source]):
            if state >> i & 1 and circle not in vanished:
                out |= 1 << target_bits[circle]
        return out

    def global_index(self, resolution: int, state: int) -> int:
        return self.offset[resolution] + state

    def __repr__(self) -> str:
        return f"ResolutionCube(n={self.n}, reduced={self.reduced}, dims={list(self.degree_dims)})"
