"""
khcube/differential/subcomplex.py

Restriction of the annular complex to one annular grading.

The annular grading of a basis element is the number of essential circles
labelled PLUS minus the number labelled MINUS. The annular differential
preserves it, so each grading spans a subcomplex; projecting onto it is a
pure sub-selection of rows and columns.
"""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from khcube.diagram.faces import AnnularFaces
from khcube.diagram.planar import PlanarDiagram
from khcube.differential.annular import PunctureClassifier, make_annular_rule
from khcube.differential.assemble import assemble_maps
from khcube.topology.cube import ResolutionCube


def resolution_gradings(cube: ResolutionCube, resolution: int, classifier: PunctureClassifier) -> np.ndarray:
    """Annular grading of every local state of one resolution."""
    essential = [i for i, c in enumerate(cube.free_circles[resolution]) if classifier(c)]
    states = np.arange(cube.local_dim(resolution), dtype=np.int64)
    grading = np.zeros_like(states)
    for i in essential:
        grading += 2 * ((states >> i) & 1) - 1
    return grading


def basis_gradings(cube: ResolutionCube, classifier: PunctureClassifier) -> List[np.ndarray]:
    """Per degree 0..n, the annular grading of each basis element in index order."""
    out = []
    for k in range(cube.n + 1):
        parts = [resolution_gradings(cube, r, classifier) for r in cube.resolutions_of_degree(k)]
        out.append(np.concatenate(parts) if parts else np.zeros(0, dtype=np.int64))
    return out


def project_subcomplex(
    maps: Sequence[np.ndarray],
    gradings: Sequence[np.ndarray],
    grading: int,
) -> List[np.ndarray]:
    """
    Restrict each map to the basis elements of the given grading.

    Args:
        maps: Differentials of degrees 0..n-1
        gradings: Basis gradings of degrees 0..n
        grading: Annular grading to keep

    Returns:
        Restricted matrices; kept elements are renumbered 0..k-1 per degree
        in their original order.
    """
    keep = [np.flatnonzero(g == grading) for g in gradings]
    return [M[np.ix_(keep[k], keep[k + 1])] for k, M in enumerate(maps)]


def annular_subcomplex(diagram: PlanarDiagram, faces: AnnularFaces, grading: int) -> List[np.ndarray]:
    """Annular differentials restricted to one annular grading."""
    cube = ResolutionCube.build(diagram)
    classifier = PunctureClassifier(faces)
    maps = assemble_maps(cube, make_annular_rule(classifier))
    return project_subcomplex(maps, basis_gradings(cube, classifier), grading)
