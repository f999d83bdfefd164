"""
khcube/core/errors.py

Exception hierarchy.

Every failure raised by the package derives from KhovanovError so that a
caller working through many diagrams can decide per diagram whether a
topology violation is fatal.
"""

from __future__ import annotations

from typing import Tuple


class KhovanovError(Exception):
    """Base class for all khcube errors."""


class ConfigError(KhovanovError, ValueError):
    """Inconsistent combination of complex options."""


class FaceBasisError(KhovanovError, ValueError):
    """
    A circle does not lie in the span of the supplied faces.

    Circles always bound regions of the diagram complement, so this means the
    face list does not describe the diagram.
    """

    def __init__(self, circle: Tuple[int, ...]):
        self.circle = tuple(circle)
        super().__init__(
            f"circle {self.circle} is not a sum of the supplied faces; "
            "check the crossings and the face list"
        )


class InvalidSurgeryError(KhovanovError, RuntimeError):
    """
    Puncture flags of an annular split that no planar diagram can produce.

    Attributes:
        source: Whether the splitting circle is punctured
        results: Puncture flags of the two new circles
    """

    def __init__(self, source: bool, results: Tuple[bool, bool]):
        self.source = source
        self.results = tuple(results)
        super().__init__(
            f"invalid annular split: source punctured={source}, "
            f"results punctured={self.results}"
        )
