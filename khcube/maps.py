"""
khcube/maps.py

Entry points: differential maps of a crossing diagram.

This is the main entry point of the package. Each function returns the
list of differentials d_0 .. d_{n-1}; d_k is a 0/1 uint8 matrix whose rows
index the degree-k basis and whose columns index the degree-(k+1) basis.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np

from khcube.core.config import ComplexConfig
from khcube.core.errors import ConfigError
from khcube.diagram.faces import AnnularFaces
from khcube.diagram.planar import PlanarDiagram
from khcube.differential.annular import annular_maps
from khcube.differential.reduced import reduced_maps
from khcube.differential.regular import regular_maps
from khcube.differential.subcomplex import annular_subcomplex

log = logging.getLogger(__name__)

FacesLike = Union[AnnularFaces, Sequence[Sequence[int]]]


@dataclass
class ComplexResult:
    """Differentials together with the dimension of every degree."""
    maps: List[np.ndarray]
    dimensions: Tuple[int, ...]
    config: ComplexConfig

    @property
    def num_crossings(self) -> int:
        return len(self.maps)


def _as_faces(faces: FacesLike) -> AnnularFaces:
    if isinstance(faces, AnnularFaces):
        return faces
    return AnnularFaces.from_lists(faces)


def regular_differential_maps(diagram: PlanarDiagram) -> List[np.ndarray]:
    """Unreduced Khovanov differentials over GF(2)."""
    if diagram.size() == 0:
        return []
    return regular_maps(diagram)


def reduced_differential_maps(diagram: PlanarDiagram, marked_label: int = 1) -> List[np.ndarray]:
    """Reduced differentials with the strand through marked_label fixed."""
    if diagram.size() == 0:
        return []
    return reduced_maps(diagram, marked_label=marked_label)


def annular_differential_maps(diagram: PlanarDiagram, faces: FacesLike) -> List[np.ndarray]:
    """
    Annular differentials.

    Args:
        diagram: Crossing diagram
        faces: Bounded faces of the diagram, the puncture face first
    """
    if diagram.size() == 0:
        return []
    return annular_maps(diagram, _as_faces(faces))


def annular_subcomplex_maps(diagram: PlanarDiagram, faces: FacesLike, grading: int) -> List[np.ndarray]:
    """Annular differentials restricted to one annular grading."""
    if diagram.size() == 0:
        return []
    return annular_subcomplex(diagram, _as_faces(faces), grading)


def build_complex(
    diagram: PlanarDiagram,
    config: Optional[ComplexConfig] = None,
    faces: Optional[FacesLike] = None,
) -> ComplexResult:
    """
    Assemble the complex selected by a configuration.

    Args:
        diagram: Crossing diagram
        config: Variant selection (default: unreduced)
        faces: Face list, required for the annular variants

    Returns:
        ComplexResult with maps and per-degree dimensions

    Example:
        >>> hopf = PlanarDiagram.from_pd_code([[1, 2, 3, 4], [3, 4, 1, 2]])
        >>> build_complex(hopf).dimensions
        (4, 4, 4)
    """
    if config is None:
        config = ComplexConfig()
    if config.annular and faces is None:
        raise ConfigError("the annular complex needs a face list")

    log.debug("building %s complex for %r", config.variant, diagram)
    if config.annular and config.grading is not None:
        maps = annular_subcomplex_maps(diagram, faces, config.grading)
    elif config.annular:
        maps = annular_differential_maps(diagram, faces)
    elif config.reduced:
        maps = reduced_differential_maps(diagram, marked_label=config.marked_label)
    else:
        maps = regular_differential_maps(diagram)

    if maps:
        dims = tuple(M.shape[0] for M in maps) + (maps[-1].shape[1],)
    else:
        dims = ()
    return ComplexResult(maps=maps, dimensions=dims, config=config)


def differential_maps(
    diagram: PlanarDiagram,
    *,
    reduced: bool = False,
    faces: Optional[FacesLike] = None,
    grading: Optional[int] = None,
) -> List[np.ndarray]:
    """
    Differentials of the selected theory.

    Passing faces selects the annular theory; grading additionally restricts
    it to one annular grading.
    """
    config = ComplexConfig(reduced=reduced, annular=faces is not None, grading=grading)
    return build_complex(diagram, config, faces).maps
