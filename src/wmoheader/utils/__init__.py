"""Utility functions and classes for the application."""

from .logging_config import LoggingConfig
from .wmo_time import resolve_ddhhmm

__all__ = [
    "LoggingConfig",
    "resolve_ddhhmm",
]
