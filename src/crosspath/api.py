"""
Public path module for crosspath.

PathModule exposes the path operations under fixed names, in the same
vein as Node's ``path`` module. Every call validates its arguments before
touching the engine; a bad call raises InvalidArgument and returns
nothing.
"""

from typing import Any, Optional, Sequence

from .core.decomposer import basename, dirname, extname, is_absolute
from .core.exceptions import InvalidArgument
from .core.models import Config, PlatformStyle
from .core.normalizer import normalize_string
from .core.relative import relative_path
from .core.resolver import join_paths, resolve_paths


def _all_strings(args: Sequence[Any]) -> bool:
    return all(isinstance(arg, str) for arg in args)


class PathModule:
    """
    Path operations bound to one platform style and one current-directory
    provider.

    Example:
        >>> win = PathModule(Config(platform_style="windows"))
        >>> win.normalize('c:/foo\\\\bar/.././baz/.')
        'c:\\\\foo\\\\baz'
    """

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config()

    def __repr__(self) -> str:
        return f"PathModule(platform_style={self.style.value!r})"

    @property
    def style(self) -> PlatformStyle:
        return self.config.platform_style

    @property
    def sep(self) -> str:
        """Preferred separator of this module's platform style."""
        return self.config.separator

    def normalize(self, *args: Any) -> str:
        """Remove '.' and '..' and use the preferred separator."""
        if len(args) != 1 or not _all_strings(args):
            raise InvalidArgument('normalize', "path.normalize requires 1 string parameter of file path.")
        return normalize_string(args[0], self.style)

    def resolve(self, *args: Any) -> str:
        """
        Resolve a sequence of paths to one absolute path.

        Later absolute arguments override earlier ones; when none is
        absolute the current directory is prepended.
        """
        if not args:
            raise InvalidArgument('resolve', "path.resolve requires at least one string parameters.")
        if not _all_strings(args):
            raise InvalidArgument('resolve', "path.resolve doesn't accept non-string argument.")
        return resolve_paths(args, self.style, self.config.current_directory_provider)

    def join(self, *args: Any) -> str:
        """Join a sequence of paths into one normalized path."""
        if not args or not isinstance(args[0], str):
            raise InvalidArgument('join', "path.join requires at least one string parameters.")
        if not _all_strings(args):
            raise InvalidArgument('join', "path.join doesn't accept non-string argument.")
        return join_paths(args, self.style)

    def dirname(self, *args: Any) -> str:
        if len(args) != 1 or not _all_strings(args):
            raise InvalidArgument('dirname', "path.dirname requires 1 string parameter of file path.")
        return dirname(args[0], self.style)

    def basename(self, *args: Any) -> str:
        """Last portion of a path, with an optional literal suffix removed."""
        if len(args) not in (1, 2):
            raise InvalidArgument(
                'basename',
                "path.basename takes 1 required argument of file path and 1 optional argument of extension",
            )
        if not isinstance(args[0], str):
            raise InvalidArgument('basename', "path.basename requires a string parameter of file path.")
        suffix = None
        if len(args) == 2:
            if not isinstance(args[1], str):
                raise InvalidArgument(
                    'basename', "path.basename requires a string as 2nd parameter of extension."
                )
            suffix = args[1]
        return basename(args[0], self.style, suffix)

    def extname(self, *args: Any) -> str:
        if len(args) != 1 or not _all_strings(args):
            raise InvalidArgument('extname', "path.extname requires 1 string parameter of file path.")
        return extname(args[0], self.style)

    def is_absolute(self, *args: Any) -> bool:
        if len(args) != 1 or not _all_strings(args):
            raise InvalidArgument('is_absolute', "path.isAbsolute requires 1 string parameter of file path.")
        return is_absolute(args[0], self.style)

    def relative(self, *args: Any) -> str:
        """Relative path from the first argument to the second."""
        if len(args) != 2 or not _all_strings(args):
            raise InvalidArgument('relative', "path.relative requires 2 arguments of string type.")
        return relative_path(args[0], args[1], self.style, self.config.current_directory_provider)


def for_style(style, current_directory_provider=None) -> PathModule:
    """
    Build a PathModule for a named style.

    Args:
        style: 'posix', 'windows' or a PlatformStyle.
        current_directory_provider: Optional replacement for os.getcwd.
    """
    config = Config(platform_style=PlatformStyle.from_name(style))
    if current_directory_provider is not None:
        config.current_directory_provider = current_directory_provider
    return PathModule(config)
