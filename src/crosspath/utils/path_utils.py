"""Separator utilities shared by both path grammars."""

from typing import List, Sequence


SEPARATORS = ('/', '\\')


class PathUtils:
    """Utilities for separator handling in mixed-separator path strings."""

    @staticmethod
    def looks_like_drive(raw: str) -> bool:
        """Check whether a string starts with a drive letter (``c:``)."""
        return len(raw) >= 2 and raw[1] == ':' and raw[0].isascii() and raw[0].isalpha()

    @staticmethod
    def is_separator(char: str) -> bool:
        """Check whether a single character is a path separator."""
        return char in SEPARATORS

    @staticmethod
    def split_segments(raw: str) -> List[str]:
        """
        Split a raw path on both separators.

        Args:
            raw: Path string with potentially mixed separators

        Returns:
            Non-empty path components, left to right
        """
        return [part for part in raw.replace('\\', '/').split('/') if part]

    @staticmethod
    def strip_leading_separators(raw: str) -> str:
        """Remove every leading '/' or '\\' from a path string."""
        return raw.lstrip('/\\')

    @staticmethod
    def ends_with_separator(raw: str) -> bool:
        """Check whether a path string ends with either separator."""
        return bool(raw) and raw[-1] in SEPARATORS

    @staticmethod
    def join_segments(segments: Sequence[str], sep: str) -> str:
        """
        Join path components with the given separator.

        Args:
            segments: List of path components
            sep: Separator to place between components

        Returns:
            Joined path
        """
        return sep.join(segments)
