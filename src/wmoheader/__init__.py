"""wmoheader - parsing and validation of WMO abbreviated header lines."""

from .errors import (
    AlreadySetError,
    HeaderTypeMismatchError,
    InvalidHeaderError,
    InvalidTimeError,
    ReadOnlyFieldError,
    WmoHeaderError,
)
from .grammar import PRODUCT, AddendumKind, compose_header, is_valid
from .header import WmoHeader, same_product
from .models import WMOModel
from .scanner import find_header, iter_headers
from .utils import resolve_ddhhmm

__version__ = "1.1.3"

__all__ = [
    "PRODUCT",
    "AddendumKind",
    "AlreadySetError",
    "HeaderTypeMismatchError",
    "InvalidHeaderError",
    "InvalidTimeError",
    "ReadOnlyFieldError",
    "WMOModel",
    "WmoHeader",
    "WmoHeaderError",
    "compose_header",
    "find_header",
    "is_valid",
    "iter_headers",
    "resolve_ddhhmm",
    "same_product",
]
