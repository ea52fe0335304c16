"""
Build-info text encoder, the inverse of the decoder.
"""

import logging
from typing import List

from ..models import BuildInfo, Module

logger = logging.getLogger(__name__)


def _format_module(parts: List[str], keyword: str, module: Module) -> None:
    parts.append(f"{keyword}\t{module.path}\t{module.effective_version}")
    if module.replace is None:
        parts.append(f"\t{module.checksum}")
    else:
        parts.append("\n")
        _format_module(parts, "=>", module.replace)
    parts.append("\n")


def encode(info: BuildInfo) -> bytes:
    """
    Serialize a BuildInfo to build-info text.

    Empty versions are written as "(devel)"; the stored value is left alone.
    A module with a replacement has no checksum column on its own line.
    """
    parts: List[str] = []
    if info.main_path:
        parts.append(f"path\t{info.main_path}\n")
    if info.main.path:
        _format_module(parts, "mod", info.main)
    for dep in info.deps:
        _format_module(parts, "dep", dep)

    logger.debug(f"Encoded build info with {len(info.deps)} dependencies")
    return "".join(parts).encode("utf-8", "surrogateescape")
