"""Command-line interface for crosspath."""
import sys
import logging

import click

from .api import PathModule
from .core.exceptions import CrossPathError
from .core.models import Config, PlatformStyle
from .utils.console import ConsoleManager


def setup_logging(debug: bool, level: str = 'WARNING') -> None:
    """
    Configure logging based on debug flag.

    Raises:
        ValueError: If level is not a known logging level name.
    """
    if not debug and not isinstance(logging.getLevelName(level.upper()), int):
        raise ValueError(f"Unknown level: {level!r}")
    logging.basicConfig(
        level=logging.DEBUG if debug else level.upper(),
        format='[%(levelname)s] %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


def _run(ctx: click.Context, operation: str, *args) -> None:
    """Call one PathModule operation and print its result."""
    module: PathModule = ctx.obj['module']
    console = ConsoleManager(theme=ctx.obj['theme'])
    try:
        result = getattr(module, operation)(*args)
    except CrossPathError as e:
        ConsoleManager(theme=ctx.obj['theme'], file=sys.stderr).print_error(str(e))
        sys.exit(1)

    if isinstance(result, bool):
        result = 'true' if result else 'false'
    console.print_result(result)


@click.group()
@click.option('--style', '-s', type=click.Choice(['posix', 'windows']), default=None,
              help='Path grammar (default: CROSSPATH_PLATFORM_STYLE or the host platform)')
@click.option('--theme', '-t', type=click.Choice(['manhattan', 'green']), default='manhattan',
              help='Terminal color theme')
@click.option('--debug', is_flag=True, help='Log engine decisions to stderr')
@click.version_option(package_name='crosspath')
@click.pass_context
def main(ctx: click.Context, style: str, theme: str, debug: bool) -> None:
    """
    Manipulate POSIX and Windows path strings.

    Examples:

        crosspath normalize a/./b/../c

        crosspath --style windows relative 'c:\\foo' 'd:\\bar'

        crosspath join /foo bar baz/asdf quux ..
    """
    config = Config() if style is None else Config(platform_style=PlatformStyle.from_name(style))
    try:
        setup_logging(debug, config.log_level)
    except ValueError as e:
        ConsoleManager(theme=theme, file=sys.stderr).print_error(f"Invalid CROSSPATH_LOG_LEVEL: {e}")
        sys.exit(1)

    ctx.ensure_object(dict)
    ctx.obj['module'] = PathModule(config)
    ctx.obj['theme'] = theme


@main.command()
@click.argument('path')
@click.pass_context
def normalize(ctx: click.Context, path: str) -> None:
    """Collapse '.' and '..' and use the preferred separator."""
    _run(ctx, 'normalize', path)


@main.command()
@click.argument('paths', nargs=-1, required=True)
@click.pass_context
def resolve(ctx: click.Context, paths) -> None:
    """Resolve PATHS into one absolute path."""
    _run(ctx, 'resolve', *paths)


@main.command()
@click.argument('paths', nargs=-1, required=True)
@click.pass_context
def join(ctx: click.Context, paths) -> None:
    """Join PATHS into one normalized path."""
    _run(ctx, 'join', *paths)


@main.command()
@click.argument('path')
@click.pass_context
def dirname(ctx: click.Context, path: str) -> None:
    """Print the parent portion of PATH."""
    _run(ctx, 'dirname', path)


@main.command()
@click.argument('path')
@click.argument('suffix', required=False)
@click.pass_context
def basename(ctx: click.Context, path: str, suffix: str) -> None:
    """Print the last portion of PATH, without SUFFIX when given."""
    if suffix is None:
        _run(ctx, 'basename', path)
    else:
        _run(ctx, 'basename', path, suffix)


@main.command()
@click.argument('path')
@click.pass_context
def extname(ctx: click.Context, path: str) -> None:
    """Print the extension of PATH."""
    _run(ctx, 'extname', path)


@main.command('is-absolute')
@click.argument('path')
@click.pass_context
def is_absolute(ctx: click.Context, path: str) -> None:
    """Print 'true' when PATH is absolute, else 'false'."""
    _run(ctx, 'is_absolute', path)


@main.command()
@click.argument('from_path', metavar='FROM')
@click.argument('to_path', metavar='TO')
@click.pass_context
def relative(ctx: click.Context, from_path: str, to_path: str) -> None:
    """Print the relative path from FROM to TO."""
    _run(ctx, 'relative', from_path, to_path)


@main.command()
@click.pass_context
def sep(ctx: click.Context) -> None:
    """Print the preferred separator."""
    ConsoleManager(theme=ctx.obj['theme']).print_result(ctx.obj['module'].sep)


if __name__ == '__main__':
    main()
