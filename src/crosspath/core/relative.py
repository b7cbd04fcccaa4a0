"""
Relative route computation between two paths.

Both ends are anchored against one current-directory snapshot. Paths on
different roots (for example different drive letters) have no relative
route, so the anchored destination is returned as-is.
"""

import logging
from typing import Callable, List

from .models import ParsedPath, PlatformStyle
from .normalizer import CURRENT_DIR, PARENT_DIR, to_string
from .resolver import anchor

logger = logging.getLogger(__name__)


def _comparable(value: str, style: PlatformStyle) -> str:
    # Windows names are case-insensitive
    return value.lower() if style is PlatformStyle.WINDOWS else value


def relative_path(
    from_path: str,
    to_path: str,
    style: PlatformStyle,
    current_directory: Callable[[], str],
) -> str:
    """
    Compute the relative path leading from ``from_path`` to ``to_path``.

    Args:
        from_path: Starting path, anchored if relative.
        to_path: Destination path, anchored if relative.
        style: Grammar and separator to use.
        current_directory: Zero-argument provider of the current directory.

    Returns:
        '..' segments followed by the remaining destination segments, '.'
        for identical paths, or the anchored destination when the roots
        differ.
    """
    cwd = current_directory()
    source = anchor([from_path], style, cwd)
    target = anchor([to_path], style, cwd)

    if _comparable(source.root_prefix, style) != _comparable(target.root_prefix, style):
        logger.debug(f"No route between roots {source.root_prefix!r} and {target.root_prefix!r}")
        return to_string(target, style)

    common = 0
    for left, right in zip(source.segments, target.segments):
        if _comparable(left, style) != _comparable(right, style):
            break
        common += 1

    route: List[str] = [PARENT_DIR] * (len(source.segments) - common)
    route.extend(target.segments[common:])

    if not route:
        return CURRENT_DIR
    return to_string(ParsedPath(root_prefix=None, segments=tuple(route)), style)
