# lettercli/cli.py
"""
lettercli command-line entry point.

Renders the positional text (or piped stdin) as a big-letter banner, or
starts the interactive session when asked to or when there is nothing to
render on a terminal.

Configuration precedence is option > environment variable > default. The
environment may also come from a ``.env`` file, loaded in :func:`main`.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

import click
from dotenv import load_dotenv
from rich.console import Console

from . import __version__, glyphs
from .animate import print_animated
from .constants import (
    ANIMATE_MODES,
    APP_NAME,
    CLEAR_SCREEN,
    DEFAULT_ANIMATE_MODE,
    DEFAULT_FONT,
    DEFAULT_GRADIENT_MODE,
    DEFAULT_LAYOUT,
    DEFAULT_SHADOW_X,
    DEFAULT_SHADOW_Y,
    DEFAULT_SPEED,
)
from .interactive import run_interactive
from .log_manager import get_logger, level_from_env
from .presets import list_preset_names
from .render import render
from .state import StyleState, normalize_gradient_mode

__all__ = ["cli", "main"]

_EPILOG = """\b
Examples:
  lettercli cdx --gradient mind --shadow --center --animate line --speed fast
  echo "cdx" | lettercli --gradient retro
  lettercli "你好" --gradient vice --center
  lettercli -i -g mind -s -c
"""


def _read_piped_stdin() -> Optional[str]:
    """Return piped stdin, or None when stdin is a terminal."""
    stream = click.get_text_stream("stdin")
    if stream.isatty():
        return None
    return stream.read()


def _stdout_is_tty() -> bool:
    return click.get_text_stream("stdout").isatty()


@click.command(
    name=APP_NAME,
    context_settings={"help_option_names": ["-h", "--help"]},
    epilog=_EPILOG,
)
@click.argument("text", nargs=-1)
@click.option("-i", "--interactive", is_flag=True, help="Interactive input loop (default when no text on a TTY).")
@click.option("-f", "--font", default=DEFAULT_FONT, envvar="LETTERCLI_FONT", show_default=True,
              help="FIGlet font.")
@click.option("-H", "--h-layout", default=DEFAULT_LAYOUT, show_default=True,
              help="FIGlet horizontal layout (letter spacing).")
@click.option("-V", "--v-layout", default=DEFAULT_LAYOUT, show_default=True,
              help="FIGlet vertical layout (line spacing).")
@click.option("-g", "--gradient", default=None, envvar="LETTERCLI_GRADIENT",
              help=f"Gradient preset or color list c1,c2 (presets: {', '.join(list_preset_names())}).")
@click.option("-m", "--gradient-mode", default=DEFAULT_GRADIENT_MODE, envvar="LETTERCLI_GRADIENT_MODE",
              show_default=True, help="Gradient direction: h|horizontal or v|vertical.")
@click.option("-s", "--shadow/--no-shadow", default=False, help="Drop shadow.")
@click.option("-x", "--shadow-x", type=int, default=DEFAULT_SHADOW_X, show_default=True,
              help="Shadow offset to the right.")
@click.option("-y", "--shadow-y", type=int, default=DEFAULT_SHADOW_Y, show_default=True,
              help="Shadow offset downward.")
@click.option("-c", "--center/--no-center", default=None,
              help="Center horizontally (default: on when stdout is a terminal).")
@click.option("-C", "--clear", "clear_screen", is_flag=True, help="Clear the screen before rendering.")
@click.option("-a", "--animate", type=click.Choice(ANIMATE_MODES, case_sensitive=False),
              default=DEFAULT_ANIMATE_MODE, envvar="LETTERCLI_ANIMATE", show_default=True,
              help="Animation mode.")
@click.option("-p", "--speed", default=DEFAULT_SPEED, envvar="LETTERCLI_SPEED", show_default=True,
              help="Animation speed: slow|medium|fast or milliseconds.")
@click.option("--color/--no-color", default=None, help="Force styled output on or off.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging on stderr.")
@click.option("--log-file", type=click.Path(dir_okay=False), default=None, envvar="LETTERCLI_LOG_FILE",
              help="Also write log records to this file.")
@click.option("--list-presets", is_flag=True, help="List gradient presets and exit.")
@click.option("--list-fonts", is_flag=True, help="List installed fonts and exit.")
@click.version_option(__version__, "--version", prog_name=APP_NAME)
@click.pass_context
def cli(
    ctx: click.Context,
    text: Tuple[str, ...],
    interactive: bool,
    font: str,
    h_layout: str,
    v_layout: str,
    gradient: Optional[str],
    gradient_mode: str,
    shadow: bool,
    shadow_x: int,
    shadow_y: int,
    center: Optional[bool],
    clear_screen: bool,
    animate: str,
    speed: str,
    color: Optional[bool],
    verbose: bool,
    log_file: Optional[str],
    list_presets: bool,
    list_fonts: bool,
) -> None:
    """Render TEXT as big letters with optional gradient, shadow and animation."""
    logger = get_logger(
        APP_NAME,
        level=logging.DEBUG if verbose else level_from_env(),
        log_to_file=log_file,
    )

    if list_presets:
        click.echo("\n".join(list_preset_names()))
        return
    if list_fonts:
        click.echo("\n".join(glyphs.list_fonts()))
        return

    is_tty = _stdout_is_tty()
    content = " ".join(text)
    if not content and not interactive:
        piped = _read_piped_stdin()
        content = piped.rstrip() if piped else ""

    style = StyleState(
        font=font,
        horizontal_layout=h_layout,
        vertical_layout=v_layout,
        gradient=gradient,
        gradient_mode=normalize_gradient_mode(gradient_mode),
        shadow=shadow,
        shadow_x=shadow_x,
        shadow_y=shadow_y,
        center=is_tty if center is None else center,
        columns=Console().width,
        animate_mode=animate.lower(),
        speed=speed,
    )
    logger.debug("style: %s", style)

    if interactive or (not content and is_tty):
        run_interactive(style)
        return

    if not content:
        click.echo(ctx.get_help())
        ctx.exit(1)

    output = render(content, style)
    if clear_screen:
        click.echo(CLEAR_SCREEN, nl=False, color=True)
    print_animated(output, style.animate_mode, style.speed, color=color)


def main() -> None:
    """Console-script entry point."""
    load_dotenv()
    cli()


if __name__ == "__main__":  # pragma: no cover
    main()
