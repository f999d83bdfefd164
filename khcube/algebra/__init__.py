"""
Algebra module: GF(2) linear algebra and Frobenius merge/split rules.
"""

from khcube.algebra.gf2 import (
    LinearBasis,
    label_mask,
    gf2_matmul,
    is_chain_complex,
)
from khcube.algebra.frobenius import (
    MINUS,
    PLUS,
    merge,
    split,
    annular_merge,
    annular_split,
)

__all__ = [
    "LinearBasis",
    "label_mask",
    "gf2_matmul",
    "is_chain_complex",
    "MINUS",
    "PLUS",
    "merge",
    "split",
    "annular_merge",
    "annular_split",
]
