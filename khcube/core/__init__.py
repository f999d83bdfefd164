"""
Core module: errors and configuration.
"""

from khcube.core.errors import (
    KhovanovError,
    ConfigError,
    FaceBasisError,
    InvalidSurgeryError,
)
from khcube.core.config import ComplexConfig

__all__ = [
    "KhovanovError",
    "ConfigError",
    "FaceBasisError",
    "InvalidSurgeryError",
    "ComplexConfig",
]
