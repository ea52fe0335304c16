"""
modinfo package.

Decodes and encodes the build-info text that records the module dependency
graph embedded in a compiled program.
"""

__version__ = "0.1.0"

from .models import BuildInfo, Module, DEVEL_VERSION
from .codec import decode, encode
from .locator import BlobLocator, read_build_info, static_locator, strip_framing
from .utils.exceptions import ModInfoException, FormatError, ConfigurationError

__all__ = [
    "BuildInfo",
    "Module",
    "DEVEL_VERSION",
    "decode",
    "encode",
    "BlobLocator",
    "read_build_info",
    "static_locator",
    "strip_framing",
    "ModInfoException",
    "FormatError",
    "ConfigurationError"
]
