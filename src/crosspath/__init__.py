"""crosspath - cross-platform path manipulation for POSIX and Windows grammars."""

__version__ = "1.0.0"

from .api import PathModule, for_style
from .core.exceptions import CrossPathError, InvalidArgument
from .core.models import Config, ParsedPath, PlatformStyle

# Ready-made modules, in the manner of Node's path.posix / path.win32 / path
posix = PathModule(Config(platform_style=PlatformStyle.POSIX))
windows = PathModule(Config(platform_style=PlatformStyle.WINDOWS))
path = PathModule()

sep = path.sep

__all__ = [
    "PathModule",
    "for_style",
    "Config",
    "ParsedPath",
    "PlatformStyle",
    "CrossPathError",
    "InvalidArgument",
    "posix",
    "windows",
    "path",
    "sep",
]
