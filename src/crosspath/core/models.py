"""
Core data models for crosspath.

This module contains the parsed path representation, the platform style
switch and the configuration that selects the grammar and the
current-directory provider.
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional, Tuple, Union
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class PlatformStyle(Enum):
    """Path grammars understood by the engine."""
    POSIX = "posix"
    WINDOWS = "windows"

    @property
    def separator(self) -> str:
        """Preferred separator used when serializing paths."""
        return '\\' if self is PlatformStyle.WINDOWS else '/'

    @classmethod
    def from_name(cls, name: Union[str, "PlatformStyle"]) -> "PlatformStyle":
        """
        Look up a style by name.

        Accepts ``posix``/``windows`` (case-insensitive) and the aliases
        ``win32`` and ``nt``.

        Raises:
            ValueError: If the name is not a known style.
        """
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower()
        if key in ('win32', 'nt'):
            key = 'windows'
        try:
            return cls(key)
        except ValueError:
            raise ValueError(
                f"Unknown platform style: {name!r} (expected 'posix' or 'windows')"
            ) from None

    @classmethod
    def host_default(cls) -> "PlatformStyle":
        """Style of the running interpreter's operating system."""
        return cls.WINDOWS if os.name == 'nt' else cls.POSIX


def _default_platform_style() -> PlatformStyle:
    configured = os.getenv('CROSSPATH_PLATFORM_STYLE', '')
    if configured:
        return PlatformStyle.from_name(configured)
    return PlatformStyle.host_default()


@dataclass
class Config:
    """Configuration settings for a path module."""

    platform_style: PlatformStyle = field(default_factory=_default_platform_style)

    # Zero-argument callable returning the directory relative paths anchor to
    current_directory_provider: Callable[[], str] = os.getcwd

    log_level: str = field(default_factory=lambda: os.getenv('CROSSPATH_LOG_LEVEL', 'WARNING'))

    def __post_init__(self):
        """Coerce a style given by name."""
        self.platform_style = PlatformStyle.from_name(self.platform_style)

    @property
    def separator(self) -> str:
        """Separator of the configured style."""
        return self.platform_style.separator


@dataclass(frozen=True)
class ParsedPath:
    """
    Structured form of one path string.

    Created by the parser, transformed into new instances by the
    normalizer and never mutated. ``root_prefix`` already carries the
    separator of the style it was parsed under.
    """

    root_prefix: Optional[str]
    segments: Tuple[str, ...] = ()
    has_trailing_separator: bool = False

    @property
    def is_absolute(self) -> bool:
        """True iff the path has a root prefix."""
        return self.root_prefix is not None

    @property
    def last_segment(self) -> str:
        """Final component, or an empty string when there is none."""
        return self.segments[-1] if self.segments else ""

    def with_segments(self, segments: Tuple[str, ...]) -> "ParsedPath":
        """Copy of this path with new segments and no trailing separator."""
        return ParsedPath(root_prefix=self.root_prefix, segments=tuple(segments))
