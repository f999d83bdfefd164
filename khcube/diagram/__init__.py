"""
Diagram module: crossing diagrams and annular face data.
"""

from khcube.diagram.planar import Crossing, PlanarDiagram
from khcube.diagram.faces import AnnularFaces

__all__ = [
    "Crossing",
    "PlanarDiagram",
    "AnnularFaces",
]
