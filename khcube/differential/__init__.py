"""
Differential module: assembly of the three variants and the annular
subcomplex projection.
"""

from khcube.differential.assemble import assemble_maps, empty_maps
from khcube.differential.regular import regular_rule, regular_maps
from khcube.differential.reduced import reduced_rule, reduced_maps
from khcube.differential.annular import PunctureClassifier, make_annular_rule, annular_maps
from khcube.differential.subcomplex import (
    resolution_gradings,
    basis_gradings,
    project_subcomplex,
    annular_subcomplex,
)

__all__ = [
    "assemble_maps",
    "empty_maps",
    "regular_rule",
    "regular_maps",
    "reduced_rule",
    "reduced_maps",
    "PunctureClassifier",
    "make_annular_rule",
    "annular_maps",
    "resolution_gradings",
    "basis_gradings",
    "project_subcomplex",
    "annular_subcomplex",
]
