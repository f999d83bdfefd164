"""
khcube/diagram/planar.py

Planar diagram (PD) model.

A diagram is an ordered sequence of 4-valent crossings. Each crossing lists
the labels of its four incident edges in cyclic order. Labels are small
positive integers; a well-formed diagram uses every label exactly twice.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

Crossing = Tuple[int, int, int, int]


@dataclass(frozen=True)
class PlanarDiagram:
    """
    Crossing diagram in planar diagram notation.

    Attributes:
        crossings: Ordered crossings, each a 4-tuple of edge labels
    """
    crossings: Tuple[Crossing, ...] = ()

    def __post_init__(self):
        canonical = []
        for i, crossing in enumerate(self.crossings):
            labels = tuple(int(x) for x in crossing)
            if len(labels) != 4:
                raise ValueError(f"crossing {i} has {len(labels)} edges, expected 4")
            canonical.append(labels)
        object.__setattr__(self, "crossings", tuple(canonical))

    @classmethod
    def from_pd_code(cls, pd_code: Iterable[Sequence[int]]) -> "PlanarDiagram":
        """Build a diagram from a list of 4-element label lists."""
        return cls(tuple(tuple(c) for c in pd_code))

    @classmethod
    def from_flat(cls, labels: Sequence[int]) -> "PlanarDiagram":
        """Build a diagram from a flat label stream read four at a time."""
        if len(labels) % 4:
            raise ValueError(f"{len(labels)} labels do not split into crossings of four")
        return cls(tuple(tuple(labels[i:i + 4]) for i in range(0, len(labels), 4)))

    def size(self) -> int:
        """Number of crossings."""
        return len(self.crossings)

    def __len__(self) -> int:
        return len(self.crossings)

    def labels(self) -> Tuple[int, ...]:
        """Sorted edge labels used by the diagram."""
        return tuple(sorted({x for c in self.crossings for x in c}))

    def to_pd_code(self):
        return [list(c) for c in self.crossings]

    def __repr__(self) -> str:
        return f"PlanarDiagram(crossings={len(self.crossings)}, labels={len(self.labels())})"
