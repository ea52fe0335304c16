"""
Reading build info from a host-provided embedded string.

The host owns the mechanism that finds the embedded string inside a
compiled artifact; it is passed in here as a locator callable. The
embedded string carries 16 framing bytes on each side of the payload.
"""

import logging
from typing import Callable, Optional

from .codec.decoder import decode
from .models import BuildInfo

logger = logging.getLogger(__name__)

FRAMING_WIDTH = 16

BlobLocator = Callable[[], Optional[bytes]]


def strip_framing(blob: Optional[bytes]) -> Optional[bytes]:
    """
    Remove the framing markers around an embedded build-info payload.

    Args:
        blob: Embedded string as returned by the host, or None

    Returns:
        The payload, or None when the blob is missing or too short to hold one
    """
    if blob is None or len(blob) < 2 * FRAMING_WIDTH:
        return None
    return bytes(blob[FRAMING_WIDTH:len(blob) - FRAMING_WIDTH])


def static_locator(blob: Optional[bytes]) -> BlobLocator:
    """Build a locator that always returns the given blob"""
    return lambda: blob


def read_build_info(locator: BlobLocator) -> Optional[BuildInfo]:
    """
    Read and decode the build info exposed by a host locator.

    Args:
        locator: Host capability returning the embedded string, or None

    Returns:
        Decoded BuildInfo, or None when no build info is embedded

    Raises:
        FormatError: If an embedded payload is present but malformed
    """
    blob = locator()
    payload = strip_framing(blob)
    if payload is None:
        size = "no" if blob is None else f"{len(blob)}-byte"
        logger.debug(f"No embedded build info ({size} blob)")
        return None
    return decode(payload)
