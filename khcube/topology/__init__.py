"""
Topology module: circle tracing and the cube of resolutions.
"""

from khcube.topology.circles import Circle, strand_pairings, resolution_circles, circle_mask
from khcube.topology.cube import Surgery, CubeEdge, ResolutionCube, popcount

__all__ = [
    "Circle",
    "strand_pairings",
    "resolution_circles",
    "circle_mask",
    "Surgery",
    "CubeEdge",
    "ResolutionCube",
    "popcount",
]
