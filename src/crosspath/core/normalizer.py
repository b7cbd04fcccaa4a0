"""
Path normalization for crosspath.

Collapses '.' and '..' segments and serializes a ParsedPath back to a
canonical string in the configured separator style.
"""

import logging
from typing import List

from .models import ParsedPath, PlatformStyle
from .parser import parse
from ..utils.path_utils import PathUtils

# Set up module logger
logger = logging.getLogger(__name__)

CURRENT_DIR = '.'
PARENT_DIR = '..'


def normalize(path: ParsedPath) -> ParsedPath:
    """
    Collapse '.' and '..' segments.

    '..' removes the previous segment. With nothing left to remove it is
    dropped for absolute paths (a path cannot climb above its root) and
    kept for relative ones. An empty relative result becomes '.'.

    Args:
        path: Parsed path to normalize.

    Returns:
        A new ParsedPath without a trailing separator.
    """
    stack: List[str] = []

    for segment in path.segments:
        if segment == CURRENT_DIR:
            continue
        if segment == PARENT_DIR:
            if stack and stack[-1] != PARENT_DIR:
                stack.pop()
            elif path.is_absolute:
                logger.debug(f"Discarding '..' above root {path.root_prefix!r}")
            else:
                stack.append(segment)
            continue
        stack.append(segment)

    if not stack and not path.is_absolute:
        stack.append(CURRENT_DIR)

    return path.with_segments(tuple(stack))


def to_string(path: ParsedPath, style: PlatformStyle) -> str:
    """
    Serialize a parsed path: root prefix verbatim, then segments.

    Under Windows style a relative path starting with a drive-looking
    segment is written as ``.\\c:x`` so it still parses as relative.
    """
    body = PathUtils.join_segments(path.segments, style.separator)
    if path.is_absolute:
        return path.root_prefix + body
    if style is PlatformStyle.WINDOWS and path.segments and PathUtils.looks_like_drive(path.segments[0]):
        return CURRENT_DIR + style.separator + body
    return body


def normalize_string(raw: str, style: PlatformStyle) -> str:
    """Parse, normalize and serialize a raw path string."""
    return to_string(normalize(parse(raw, style)), style)
