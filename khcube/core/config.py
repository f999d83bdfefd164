"""
khcube/core/config.py

Options selecting which chain complex is assembled.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from khcube.core.errors import ConfigError


@dataclass(frozen=True)
class ComplexConfig:
    """
    Configuration of the cube of resolutions.

    Attributes:
        reduced: Force the circle through the marked label to a fixed label
        annular: Distinguish circles around the puncture face
        grading: Restrict the annular complex to this annular grading
        marked_label: Edge label of the marked strand (reduced theory)
    """
    reduced: bool = False
    annular: bool = False
    grading: Optional[int] = None
    marked_label: int = 1

    def __post_init__(self):
        if self.reduced and self.annular:
            raise ConfigError("annular refinement is only defined for the unreduced theory")
        if self.grading is not None and not self.annular:
            raise ConfigError("an annular grading requires annular=True")
        if self.marked_label < 1:
            raise ConfigError(f"marked label must be positive, got {self.marked_label}")

    @property
    def variant(self) -> str:
        """Short name of the selected complex."""
        if self.annular:
            return "annular" if self.grading is None else f"annular[{self.grading}]"
        return "reduced" if self.reduced else "regular"
