"""
Path parsing for crosspath.

Turns a raw path string into a ParsedPath under either grammar. Both
'/' and '\\' are accepted as separators regardless of style, so paths
written on another platform still parse. Parsing never fails.
"""

from typing import Optional, Tuple

from .models import ParsedPath, PlatformStyle
from ..utils.path_utils import PathUtils


def _split_unc(raw: str, sep: str) -> Optional[Tuple[str, str]]:
    """
    Detect a UNC prefix (``\\\\host\\share``).

    Returns:
        Tuple of (root_prefix, remainder) or None when raw is not UNC.
    """
    if len(raw) < 3 or not (PathUtils.is_separator(raw[0]) and PathUtils.is_separator(raw[1])):
        return None
    if PathUtils.is_separator(raw[2]):
        # Three or more leading separators is a plain rooted path
        return None

    parts = PathUtils.split_segments(raw[2:])
    host = parts[0]
    share = parts[1] if len(parts) > 1 else ''
    remainder = '/'.join(parts[2:])

    if share:
        return f"{sep}{sep}{host}{sep}{share}{sep}", remainder
    return f"{sep}{sep}{host}{sep}", remainder


def _split_root(raw: str, style: PlatformStyle) -> Tuple[Optional[str], str]:
    """Separate the root prefix from the rest of the path."""
    sep = style.separator

    if style is PlatformStyle.WINDOWS:
        unc = _split_unc(raw, sep)
        if unc is not None:
            return unc
        if PathUtils.looks_like_drive(raw):
            return f"{raw[:2]}{sep}", raw[2:]

    if raw and PathUtils.is_separator(raw[0]):
        return sep, raw[1:]

    return None, raw


def parse(raw: str, style: PlatformStyle) -> ParsedPath:
    """
    Parse a raw path string.

    Args:
        raw: Path string, possibly empty or mixed-separator.
        style: Grammar deciding what counts as a root prefix.

    Returns:
        ParsedPath with the root prefix written in the style's separator.
        Segments keep '.' and '..' verbatim.
    """
    root_prefix, rest = _split_root(raw, style)
    segments = tuple(PathUtils.split_segments(rest))
    trailing = bool(segments) and PathUtils.ends_with_separator(raw)

    return ParsedPath(
        root_prefix=root_prefix,
        segments=segments,
        has_trailing_separator=trailing,
    )
