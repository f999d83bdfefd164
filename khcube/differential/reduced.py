"""
khcube/differential/reduced.py

Differential of the reduced theory.

The circle through the marked label has no state bit. Edges that do not
touch it behave as in the unreduced theory. When it vanishes:

  - merge: the marked circle swallows its partner, one term, no new bit;
  - split: the new marked circle takes no bit and the other new circle
    takes both labels, two terms.
"""

from __future__ import annotations

from typing import List

import numpy as np

from khcube.algebra.frobenius import MINUS, PLUS
from khcube.diagram.planar import PlanarDiagram
from khcube.differential.assemble import assemble_maps
from khcube.differential.regular import regular_rule
from khcube.topology.cube import CubeEdge, ResolutionCube, Surgery


def reduced_rule(cube: ResolutionCube, edge: CubeEdge, state: int) -> List[int]:
    marked = cube.marked[edge.source]
    if marked not in edge.vanished:
        return regular_rule(cube, edge, state)

    carried = cube.carried_state(edge, state)
    if edge.surgery is Surgery.MERGE:
        return [carried]

    if edge.surgery is Surgery.SPLIT:
        new_marked = cube.marked[edge.target]
        (free,) = (c for c in edge.appeared if c != new_marked)
        bit = cube.bit_of[edge.target][free]
        return [carried | (MINUS << bit), carried | (PLUS << bit)]

    return []


def reduced_maps(diagram: PlanarDiagram, marked_label: int = 1) -> List[np.ndarray]:
    """Reduced differentials; local dimensions are halved."""
    cube = ResolutionCube.build(diagram, reduced=True, marked_label=marked_label)
    return assemble_maps(cube, reduced_rule)
