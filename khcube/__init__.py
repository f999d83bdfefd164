"""
khcube: Khovanov cube of resolutions over GF(2)

Differential maps of the cube of resolutions of a crossing diagram, in the
unreduced, reduced and annular theories.

Key components:
- diagram: Planar diagram model and annular face lists
- topology: Circle tracing and cube of resolutions addressing
- algebra: GF(2) linear algebra and Frobenius merge/split rules
- differential: Assembly of the three variants, annular subcomplexes
- core: Errors and configuration
"""

__version__ = "1.0.0"

from khcube.core.errors import KhovanovError, ConfigError, FaceBasisError, InvalidSurgeryError
from khcube.core.config import ComplexConfig
from khcube.diagram.planar import PlanarDiagram
from khcube.diagram.faces import AnnularFaces
from khcube.topology.circles import resolution_circles
from khcube.topology.cube import ResolutionCube
from khcube.algebra.gf2 import LinearBasis, gf2_matmul, is_chain_complex
from khcube.maps import (
    ComplexResult,
    build_complex,
    differential_maps,
    regular_differential_maps,
    reduced_differential_maps,
    annular_differential_maps,
    annular_subcomplex_maps,
)

__all__ = [
    # Errors and configuration
    "KhovanovError",
    "ConfigError",
    "FaceBasisError",
    "InvalidSurgeryError",
    "ComplexConfig",
    # Diagrams
    "PlanarDiagram",
    "AnnularFaces",
    # Cube
    "resolution_circles",
    "ResolutionCube",
    # GF(2)
    "LinearBasis",
    "gf2_matmul",
    "is_chain_complex",
    # Maps
    "ComplexResult",
    "build_complex",
    "differential_maps",
    "regular_differential_maps",
    "reduced_differential_maps",
    "annular_differential_maps",
    "annular_subcomplex_maps",
]
