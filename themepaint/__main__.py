"""Entry point for themepaint.

Resolves a theme expression against a built-in theme and prints the paint::

    python -m themepaint "linear-gradient(45deg, var(--accent), #242424)" --theme dark
"""

import argparse
import sys
import traceback
from dataclasses import replace
from importlib.metadata import PackageNotFoundError, version

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from themepaint.expr.colors import RGBA
from themepaint.expr.parser import ThemeExpressionError
from themepaint.logger import enable_stderr, get_logger
from themepaint.paint import GradientPaint, Paint, SolidPaint, resolve, resolve_strict
from themepaint.settings import Settings, load_settings, save_settings
from themepaint.themes import DARK_THEME_NAME, LIGHT_THEME_NAME, THEME_LABELS, get_preset, select_theme

logger = get_logger(__name__)

EXIT_PARSE_ERROR = 2


def get_version() -> str:
    """Get the installed package version.

    Returns:
        Version string, or "unknown" when the package metadata is missing.
    """
    try:
        return version("themepaint")
    except PackageNotFoundError:
        return "unknown"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Arguments to parse; defaults to ``sys.argv[1:]``.

    Returns:
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        prog="themepaint",
        description="Resolve a theme color or gradient expression against a theme.",
    )
    parser.add_argument("expression", help='Theme expression, e.g. "var(--accent)" or "linear-gradient(red, blue)"')
    parser.add_argument("--theme", choices=sorted(THEME_LABELS), help="Built-in theme to resolve against")
    parser.add_argument(
        "--follow-system",
        action="store_true",
        default=None,
        help="Pick the light or dark theme from --appearance",
    )
    parser.add_argument(
        "--appearance",
        choices=(LIGHT_THEME_NAME, DARK_THEME_NAME),
        default=LIGHT_THEME_NAME,
        help="System appearance used with --follow-system",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Fail on invalid expressions instead of falling back to black",
    )
    parser.add_argument("--save", action="store_true", help="Store --theme/--follow-system/--strict as defaults")
    parser.add_argument("-v", "--verbose", action="store_true", help="Print debug log messages to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {get_version()}")
    return parser.parse_args(argv)


def merge_settings(settings: Settings, args: argparse.Namespace) -> Settings:
    """Overlay command line flags on stored settings.

    Args:
        settings: Settings loaded from disk.
        args: Parsed command line arguments.

    Returns:
        Settings with any explicitly given flags applied.
    """
    overrides: dict[str, object] = {}
    if args.theme is not None:
        overrides["theme"] = args.theme
    if args.follow_system is not None:
        overrides["follow_system_appearance"] = args.follow_system
    if args.strict is not None:
        overrides["strict"] = args.strict
    return replace(settings, **overrides)


def _swatch(color: RGBA) -> Text:
    return Text("      ", style=f"on {color.hex[:7]}")


def render_paint(paint: Paint, console: Console) -> None:
    """Print a paint with color swatches.

    Args:
        paint: Resolved paint.
        console: Rich console to print to.
    """
    table = Table(title=paint.describe(), show_header=True)
    table.add_column("#", justify="right")
    table.add_column("Swatch")
    table.add_column("RGBA")

    if isinstance(paint, SolidPaint):
        colors: tuple[RGBA, ...] = (paint.color,)
    elif isinstance(paint, GradientPaint):
        colors = paint.colors
    else:
        msg = f"Unsupported paint: {paint!r}"
        raise TypeError(msg)

    for index, color in enumerate(colors):
        channels = ", ".join(f"{channel:.3f}" for channel in color.as_tuple())
        table.add_row(str(index), _swatch(color), f"({channels})")
    console.print(table)


def main(argv: list[str] | None = None, console: Console | None = None) -> int:
    """Resolve the expression given on the command line.

    Args:
        argv: Command line arguments; defaults to ``sys.argv[1:]``.
        console: Rich console for output.

    Returns:
        Process exit code.
    """
    args = parse_args(argv)
    console = console or Console()

    settings = merge_settings(load_settings(), args)
    enable_stderr("DEBUG" if args.verbose else settings.log_level)
    if args.save:
        save_settings(settings)

    configured = replace(get_preset(settings.theme), follow_system_appearance=settings.follow_system_appearance)
    record = select_theme(configured, system_dark=args.appearance == DARK_THEME_NAME)
    theme_name = args.appearance if settings.follow_system_appearance else settings.theme
    snapshot = record.snapshot(theme_name)
    logger.info(f"Resolving {args.expression!r} against theme {theme_name!r}")

    if settings.strict:
        try:
            paint = resolve_strict(args.expression, snapshot)
        except ThemeExpressionError as exc:
            console.print(f"[bold red]error:[/bold red] {escape(str(exc))}")
            return EXIT_PARSE_ERROR
    else:
        paint = resolve(args.expression, snapshot)

    render_paint(paint, console)
    return 0


def run() -> None:
    """Run the command line with standard Python tracebacks."""
    try:
        exit_code = main()
    except Exception:
        traceback.print_exc()
        sys.exit(1)
    else:
        sys.exit(exit_code)


if __name__ == "__main__":
    run()
