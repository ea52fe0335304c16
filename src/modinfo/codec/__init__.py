"""
Build-info codec package.

Provides the decoder and encoder for the line-oriented build-info text format.
"""

from .decoder import decode
from .encoder import encode

__all__ = [
    "decode",
    "encode"
]
