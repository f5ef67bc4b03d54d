"""Models for WMO header parsing."""

from .config import Config
from .wmo import WMOModel

__all__ = [
    "Config",
    "WMOModel",
]
