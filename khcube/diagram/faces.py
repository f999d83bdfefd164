"""
khcube/diagram/faces.py

Face data for the annular theory.

The faces are the bounded regions of the diagram complement, each given by
the labels of the edges on its boundary. The first face is special: it holds
the puncture of the annulus.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

from khcube.algebra.gf2 import label_mask


@dataclass(frozen=True)
class AnnularFaces:
    """
    Ordered face boundaries, puncture face first.

    Attributes:
        faces: One tuple of edge labels per face
    """
    faces: Tuple[Tuple[int, ...], ...]

    def __post_init__(self):
        faces = tuple(tuple(int(x) for x in f) for f in self.faces)
        if not faces:
            raise ValueError("annular faces need at least the puncture face")
        object.__setattr__(self, "faces", faces)

    @classmethod
    def from_lists(cls, faces: Iterable[Sequence[int]]) -> "AnnularFaces":
        return cls(tuple(tuple(f) for f in faces))

    @property
    def special(self) -> Tuple[int, ...]:
        """Boundary of the face containing the puncture."""
        return self.faces[0]

    def special_mask(self) -> int:
        return label_mask(self.faces[0])

    def other_masks(self) -> Tuple[int, ...]:
        """Bitmasks of every face except the puncture face, in input order."""
        return tuple(label_mask(f) for f in self.faces[1:])

    def __len__(self) -> int:
        return len(self.faces)
