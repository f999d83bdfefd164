"""
khcube/algebra/frobenius.py

Merge and split rules of the Frobenius algebra attached to each circle.

Each circle carries a label, MINUS (0) or PLUS (1). A rule maps the labels of
the circles that disappear to the list of label assignments of the circles
that appear. Coefficients live in GF(2), so a term is either present or not.

In this basis MINUS is the unit and PLUS squares to it:

    merge:  --  ->  -        split:  +  ->  -- + ++
            -+  ->  +                -  ->  +- + -+
            ++  ->  -

Annular rules additionally depend on whether each circle goes around the
puncture ("essential") or not ("trivial").
"""

from __future__ import annotations

from typing import List, Tuple

from khcube.core.errors import InvalidSurgeryError

MINUS = 0
PLUS = 1

Pair = Tuple[int, int]


def merge(first: int, second: int) -> List[int]:
    """Labels of the merged circle: one term, XOR of the inputs."""
    return [first ^ second]


def split(label: int) -> List[Pair]:
    """Label pairs of the two new circles: always two terms."""
    if label == PLUS:
        return [(MINUS, MINUS), (PLUS, PLUS)]
    return [(PLUS, MINUS), (MINUS, PLUS)]


def annular_merge(first: int, first_punctured: bool, second: int, second_punctured: bool) -> List[int]:
    """
    Merge rule of the annular theory.

    Two essential circles merge into a trivial one: equal labels give no
    term, different labels give the sum of both trivial labels. An essential
    circle absorbs a trivial one and keeps its own label.
    """
    if first_punctured and second_punctured:
        if first == second:
            return []
        return [MINUS, PLUS]
    if not first_punctured and not second_punctured:
        return merge(first, second)
    return [first if first_punctured else second]


def annular_split(label: int, punctured: bool, results_punctured: Tuple[bool, bool]) -> List[Pair]:
    """
    Split rule of the annular theory.

    Args:
        label: Label of the splitting circle
        punctured: Whether the splitting circle is essential
        results_punctured: Essential flags of the two new circles, in order

    Raises:
        InvalidSurgeryError: for flag combinations no annular diagram has
    """
    first, second = results_punctured
    if not punctured and not first and not second:
        return split(label)
    if punctured and first != second:
        if first:
            return [(label, MINUS), (label, PLUS)]
        return [(MINUS, label), (PLUS, label)]
    if not punctured and first and second:
        return [(PLUS, MINUS), (MINUS, PLUS)]
    raise InvalidSurgeryError(punctured, results_punctured)
