"""
khcube/algebra/gf2.py

Linear algebra over GF(2).

Vectors are Python ints used as bitmasks; an edge label x is bit x-1.
LinearBasis keeps one vector per pivot, the pivot being the lowest set bit,
so reduction only ever clears bits from the bottom up.

Matrix products go through scipy.sparse, then get reduced mod 2.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence

import numpy as np
import scipy.sparse as sp


def label_mask(labels: Iterable[int]) -> int:
    """Bitmask with bit (x - 1) set for every label x."""
    mask = 0
    for x in set(labels):
        mask |= 1 << (int(x) - 1)
    return mask


class LinearBasis:
    """
    Incrementally built basis of a subspace of GF(2)^N.

    Insertion never removes vectors; queries are only meaningful once all
    vectors have been inserted.
    """

    def __init__(self, vectors: Iterable[int] = ()):
        self._rows: Dict[int, int] = {}
        for v in vectors:
            self.insert(v)

    def reduce(self, mask: int) -> int:
        """Residue of mask after eliminating every pivot it hits."""
        while mask:
            pivot = (mask & -mask).bit_length() - 1
            row = self._rows.get(pivot)
            if row is None:
                return mask
            mask ^= row
        return 0

    def insert(self, mask: int) -> bool:
        """Insert a vector. Returns True if the span grew."""
        residue = self.reduce(mask)
        if not residue:
            return False
        self._rows[(residue & -residue).bit_length() - 1] = residue
        return True

    def is_independent(self, mask: int) -> bool:
        """True iff mask is not in the span."""
        return self.reduce(mask) != 0

    def __contains__(self, mask: int) -> bool:
        return self.reduce(mask) == 0

    def copy(self) -> "LinearBasis":
        other = LinearBasis()
        other._rows = dict(self._rows)
        return other

    @property
    def rank(self) -> int:
        return len(self._rows)

    def vectors(self) -> List[int]:
        """Basis vectors ordered by pivot."""
        return [self._rows[p] for p in sorted(self._rows)]

    def __repr__(self) -> str:
        return f"LinearBasis(rank={self.rank})"


def gf2_matmul(A: np.ndarray, B: np.ndarray) -> np.ndarray:
    """
    Product of two 0/1 matrices over GF(2).

    Returns a dense uint8 array of shape (A.rows, B.cols).
    """
    if A.shape[1] != B.shape[0]:
        raise ValueError(f"gf2_matmul shape mismatch: {A.shape} x {B.shape}")
    C = sp.csr_matrix(A, dtype=np.int64) @ sp.csr_matrix(B, dtype=np.int64)
    C = sp.csr_matrix(C)
    if C.nnz:
        C.data %= 2
        C.eliminate_zeros()
    return C.toarray().astype(np.uint8)


def is_chain_complex(maps: Sequence[np.ndarray]) -> bool:
    """Check that every pair of consecutive maps composes to zero over GF(2)."""
    for k in range(len(maps) - 1):
        if gf2_matmul(maps[k], maps[k + 1]).any():
            return False
    return True
