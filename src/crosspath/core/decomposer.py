"""
Path decomposition: dirname, basename, extname and is_absolute.

These work on the parsed form directly. None of them collapse '.' or
'..', so ``dirname('a/./b')`` is ``'a/.'``.
"""

from typing import Optional

from .models import PlatformStyle
from .normalizer import CURRENT_DIR, to_string
from .parser import parse


def dirname(raw: str, style: PlatformStyle) -> str:
    """
    Parent portion of a path.

    The last segment is dropped even when the path names a directory.
    A path with zero or one segment yields its root prefix, or '.' when
    relative.
    """
    parsed = parse(raw, style)
    if len(parsed.segments) <= 1:
        return parsed.root_prefix if parsed.is_absolute else CURRENT_DIR
    return to_string(parsed.with_segments(parsed.segments[:-1]), style)


def basename(raw: str, style: PlatformStyle, suffix: Optional[str] = None) -> str:
    """
    Final segment of a path, optionally without a literal suffix.

    The suffix is matched literally against the end of the segment, it is
    not treated as an extension: ``basename('notes-old', '-old')`` gives
    ``'notes'``. A suffix equal to the whole segment leaves ``''``.
    """
    name = parse(raw, style).last_segment
    if suffix and name.endswith(suffix):
        name = name[:-len(suffix)]
    return name


def extname(raw: str, style: PlatformStyle) -> str:
    """
    Extension of the final segment, from its last '.' to the end.

    A trailing dot gives '.'. No dot, a dot only at the start
    (``.gitignore``) or a segment made only of dots gives ''.
    """
    name = parse(raw, style).last_segment
    if not name.strip('.'):
        return ''
    index = name.rfind('.')
    if index <= 0:
        return ''
    return name[index:]


def is_absolute(raw: str, style: PlatformStyle) -> bool:
    """Whether the path has a root prefix; no normalization is needed."""
    return parse(raw, style).is_absolute
