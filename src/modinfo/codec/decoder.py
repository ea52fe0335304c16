"""
Build-info text decoder.

Turns the tab-separated, newline-terminated text embedded in a compiled
program into a BuildInfo. Lines are classified by their keyword prefix;
a replacement line attaches to the module introduced on the line right
before it.
"""

import logging
from typing import List, Optional, Union

from ..models import BuildInfo, Module
from ..utils.exceptions import FormatError

logger = logging.getLogger(__name__)

PATH_LINE = b"path\t"
MOD_LINE = b"mod\t"
DEP_LINE = b"dep\t"
REPLACE_LINE = b"=>\t"

# Attachment target for a replacement line: the main module or a dep index
_MAIN = "main"
_Target = Optional[Union[str, int]]


def _text(field: bytes) -> str:
    return field.decode("utf-8", "surrogateescape")


def _read_module_line(columns: List[bytes], line_num: int) -> Module:
    if len(columns) not in (2, 3):
        raise FormatError(line_num, f"expected 2 or 3 columns; got {len(columns)}")
    checksum = _text(columns[2]) if len(columns) == 3 else ""
    return Module(path=_text(columns[0]), version=_text(columns[1]), checksum=checksum)


def _read_replacement(columns: List[bytes], line_num: int) -> Module:
    if len(columns) != 3:
        raise FormatError(line_num, f"expected 3 columns for replacement; got {len(columns)}")
    return Module(path=_text(columns[0]), version=_text(columns[1]), checksum=_text(columns[2]))


def decode(data: bytes) -> BuildInfo:
    """
    Parse build-info text into a BuildInfo.

    A trailing line without a newline terminator is ignored. Lines with an
    unknown keyword are skipped but still counted for error positions.

    Args:
        data: Raw build-info text

    Returns:
        The decoded BuildInfo

    Raises:
        FormatError: On the first malformed line; nothing is returned in that case
        TypeError: If data is not a bytes-like object
    """
    if isinstance(data, str):
        raise TypeError("build info must be bytes, not str")
    data = bytes(data)

    main_path = ""
    main = Module()
    deps: List[Module] = []
    target: _Target = None
    line_num = 1

    try:
        while data:
            line, newline, data = data.partition(b"\n")
            if not newline:
                break

            if line.startswith(PATH_LINE):
                main_path = _text(line[len(PATH_LINE):])
            elif line.startswith(MOD_LINE):
                main = _read_module_line(line[len(MOD_LINE):].split(b"\t"), line_num)
                target = _MAIN
            elif line.startswith(DEP_LINE):
                deps.append(_read_module_line(line[len(DEP_LINE):].split(b"\t"), line_num))
                target = len(deps) - 1
            elif line.startswith(REPLACE_LINE):
                replacement = _read_replacement(line[len(REPLACE_LINE):].split(b"\t"), line_num)
                if target is None:
                    raise FormatError(line_num, "replacement with no module on previous line")
                if target == _MAIN:
                    main = main.model_copy(update={"replace": replacement})
                else:
                    deps[target] = deps[target].model_copy(update={"replace": replacement})
                target = None

            line_num += 1
    except FormatError as e:
        logger.debug(f"Rejected build info at line {e.line}: {e.cause}")
        raise

    info = BuildInfo(main_path=main_path, main=main, deps=deps)
    logger.debug(f"Decoded build info for {main_path or '<unknown>'} with {len(deps)} dependencies")
    return info
