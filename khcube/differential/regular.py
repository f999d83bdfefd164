"""
khcube/differential/regular.py

Differential of the unreduced theory.
"""

from __future__ import annotations

from typing import List

import numpy as np

from khcube.algebra.frobenius import merge, split
from khcube.diagram.planar import PlanarDiagram
from khcube.differential.assemble import assemble_maps
from khcube.topology.cube import CubeEdge, ResolutionCube, Surgery


def regular_rule(cube: ResolutionCube, edge: CubeEdge, state: int) -> List[int]:
    """Target states of one source state under merge or split."""
    src_bits = cube.bit_of[edge.source]
    dst_bits = cube.bit_of[edge.target]
    carried = cube.carried_state(edge, state)

    if edge.surgery is Surgery.MERGE:
        a, b = (state >> src_bits[c] & 1 for c in edge.vanished)
        new_bit = dst_bits[edge.appeared[0]]
        return [carried | (label << new_bit) for label in merge(a, b)]

    if edge.surgery is Surgery.SPLIT:
        label = state >> src_bits[edge.vanished[0]] & 1
        first, second = (dst_bits[c] for c in edge.appeared)
        return [carried | (x << first) | (y << second) for x, y in split(label)]

    return []


def regular_maps(diagram: PlanarDiagram) -> List[np.ndarray]:
    """
    Unreduced differentials, one matrix per degree 0..n-1.

    Complexity O(n * 4^n) in the worst case.
    """
    cube = ResolutionCube.build(diagram)
    return assemble_maps(cube, regular_rule)
