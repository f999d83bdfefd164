"""
khcube/differential/annular.py

Annular refinement of the differential.

A circle is essential ("punctured") when it separates the puncture face
from the unbounded region. Over GF(2) a circle's edge mask is the sum of
the face boundaries it encloses, so with

    basis_1 = span(all faces except the puncture face)
    basis_2 = basis_1 + puncture face

a circle is essential iff its mask is in basis_2 but not in basis_1. A mask
outside basis_2 means the faces do not describe the diagram.

Both bases are complete before the first query; the classifier is read-only
afterwards.
"""

from __future__ import annotations

import logging
from typing import Dict, List

import numpy as np

from khcube.algebra.frobenius import annular_merge, annular_split
from khcube.algebra.gf2 import LinearBasis
from khcube.core.errors import FaceBasisError
from khcube.diagram.faces import AnnularFaces
from khcube.diagram.planar import PlanarDiagram
from khcube.differential.assemble import assemble_maps
from khcube.topology.circles import Circle, circle_mask
from khcube.topology.cube import CubeEdge, ResolutionCube, Surgery

log = logging.getLogger(__name__)


class PunctureClassifier:
    """Decides which circles go around the puncture."""

    def __init__(self, faces: AnnularFaces):
        self.faces = faces
        self.inner = LinearBasis(faces.other_masks())
        self.closure = self.inner.copy()
        self.closure.insert(faces.special_mask())
        self._cache: Dict[Circle, bool] = {}
        log.debug(
            "face bases: %d faces, rank without puncture %d, with puncture %d",
            len(faces), self.inner.rank, self.closure.rank,
        )

    def contains_puncture(self, circle: Circle) -> bool:
        """
        Raises:
            FaceBasisError: if the circle is not a sum of faces
        """
        hit = self._cache.get(circle)
        if hit is not None:
            return hit
        mask = circle_mask(circle)
        if self.closure.is_independent(mask):
            raise FaceBasisError(circle)
        punctured = self.inner.is_independent(mask)
        self._cache[circle] = punctured
        return punctured

    __call__ = contains_puncture


def make_annular_rule(classifier: PunctureClassifier):
    """Edge rule of the annular theory bound to a classifier."""

    def rule(cube: ResolutionCube, edge: CubeEdge, state: int) -> List[int]:
        src_bits = cube.bit_of[edge.source]
        dst_bits = cube.bit_of[edge.target]
        carried = cube.carried_state(edge, state)

        if edge.surgery is Surgery.MERGE:
            c1, c2 = edge.vanished
            labels = annular_merge(
                state >> src_bits[c1] & 1, classifier(c1),
                state >> src_bits[c2] & 1, classifier(c2),
            )
            new_bit = dst_bits[edge.appeared[0]]
            return [carried | (label << new_bit) for label in labels]

        if edge.surgery is Surgery.SPLIT:
            (source,) = edge.vanished
            r1, r2 = edge.appeared
            pairs = annular_split(
                state >> src_bits[source] & 1,
                classifier(source),
                (classifier(r1), classifier(r2)),
            )
            b1, b2 = dst_bits[r1], dst_bits[r2]
            return [carried | (x << b1) | (y << b2) for x, y in pairs]

        return []

    return rule


def annular_maps(diagram: PlanarDiagram, faces: AnnularFaces) -> List[np.ndarray]:
    """
    Annular differentials over the unreduced basis.

    Raises:
        FaceBasisError: face list inconsistent with the diagram
        InvalidSurgeryError: impossible puncture configuration in a split
    """
    cube = ResolutionCube.build(diagram)
    classifier = PunctureClassifier(faces)
    return assemble_maps(cube, make_annular_rule(classifier))
