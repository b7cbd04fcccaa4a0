"""
Joining and resolving path sequences.

join_paths glues parts together and normalizes the result without ever
consulting the current directory. resolve_paths anchors parts into one
absolute path, scanning right to left so that a later absolute part
overrides everything before it.
"""

import logging
from typing import Callable, List, Sequence

from .models import ParsedPath, PlatformStyle
from .normalizer import normalize, to_string
from .parser import parse
from ..utils.path_utils import PathUtils

logger = logging.getLogger(__name__)


def concatenate(parts: Sequence[str], sep: str) -> str:
    """
    Concatenate raw parts with exactly one separator between them.

    Empty parts are skipped. Leading separators of every part after the
    first are dropped so separators never double up (a doubled leading
    pair would read as a UNC prefix).
    """
    raw = ''
    for part in parts:
        if raw:
            part = PathUtils.strip_leading_separators(part)
        if not part:
            continue
        if raw and not PathUtils.ends_with_separator(raw):
            raw += sep
        raw += part
    return raw


def join_paths(parts: Sequence[str], style: PlatformStyle) -> str:
    """
    Join path parts and normalize the result.

    Args:
        parts: Raw path strings, already validated.
        style: Grammar and separator to use.

    Returns:
        Normalized joined path; '.' when every part is empty.
    """
    raw = concatenate(parts, style.separator)
    return to_string(normalize(parse(raw, style)), style)


def anchor(parts: Sequence[str], style: PlatformStyle, cwd: str) -> ParsedPath:
    """
    Anchor parts into one normalized absolute ParsedPath.

    Args:
        parts: Raw path strings, already validated.
        style: Grammar and separator to use.
        cwd: Current-directory snapshot used when no part is absolute.
    """
    collected: List[str] = []
    anchored = False

    for part in reversed(parts):
        if not part:
            continue
        collected.append(part)
        if parse(part, style).is_absolute:
            logger.debug(f"Stopping at absolute part {part!r}")
            anchored = True
            break

    if not anchored:
        logger.debug(f"Anchoring to current directory {cwd!r}")
        collected.append(cwd)

    parsed = parse(concatenate(list(reversed(collected)), style.separator), style)
    if not parsed.is_absolute:
        logger.debug(f"Current directory {cwd!r} is not absolute, anchoring at root")
        parsed = ParsedPath(root_prefix=style.separator, segments=parsed.segments)

    return normalize(parsed)


def resolve_paths(
    parts: Sequence[str],
    style: PlatformStyle,
    current_directory: Callable[[], str],
) -> str:
    """
    Resolve parts into an absolute, normalized path string.

    The current directory is read exactly once, at the start of the call.

    Args:
        parts: Raw path strings, already validated.
        style: Grammar and separator to use.
        current_directory: Zero-argument provider of the current directory.

    Returns:
        Absolute normalized path.
    """
    cwd = current_directory()
    return to_string(anchor(parts, style, cwd), style)
