"""
khcube/differential/assemble.py

Assembly of differential matrices from a local rule.

A rule looks at one cube edge and one local state of its source resolution
and returns the local states of the target resolution that appear in the
image. The assembler walks every edge and every source state and sets the
corresponding entries of the degree matrix.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List

import numpy as np

from khcube.topology.cube import CubeEdge, ResolutionCube, Surgery

log = logging.getLogger(__name__)

EdgeRule = Callable[[ResolutionCube, CubeEdge, int], Iterable[int]]


def empty_maps(cube: ResolutionCube) -> List[np.ndarray]:
    """Zero matrices of shape (dim_k, dim_{k+1}) for k = 0..n-1."""
    dims = cube.degree_dims
    return [np.zeros((dims[k], dims[k + 1]), dtype=np.uint8) for k in range(cube.n)]


def assemble_maps(cube: ResolutionCube, rule: EdgeRule) -> List[np.ndarray]:
    """
    Build the differential of every degree.

    Args:
        cube: Resolution cube with basis addressing
        rule: rule(cube, edge, state) -> target states

    Returns:
        List of n uint8 matrices; maps[k][row, col] = 1 iff the image of
        degree-k basis element `row` contains degree-(k+1) element `col`.
    """
    maps = empty_maps(cube)
    trivial = 0
    for edge in cube.edges():
        if edge.surgery is Surgery.TRIVIAL:
            trivial += 1
            continue
        M = maps[edge.degree]
        row0 = cube.offset[edge.source]
        col0 = cube.offset[edge.target]
        for state in range(cube.local_dim(edge.source)):
            for target_state in rule(cube, edge, state):
                M[row0 + state, col0 + target_state] = 1
    if trivial:
        log.debug("%d cube edges without a merge or split contributed no entries", trivial)
    return maps
