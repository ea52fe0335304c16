"""
Shared utilities for the modinfo package.
"""

from .exceptions import ModInfoException, FormatError, ConfigurationError

__all__ = [
    "ModInfoException",
    "FormatError",
    "ConfigurationError"
]
