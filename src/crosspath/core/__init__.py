"""Core components for crosspath."""

from .models import Config, ParsedPath, PlatformStyle
from .exceptions import CrossPathError, InvalidArgument
from .parser import parse
from .normalizer import normalize, normalize_string, to_string

__all__ = [
    "Config",
    "ParsedPath",
    "PlatformStyle",
    "CrossPathError",
    "InvalidArgument",
    "parse",
    "normalize",
    "normalize_string",
    "to_string",
]
