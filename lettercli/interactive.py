# lettercli/interactive.py
"""
Interactive banner session.

Responsibilities
----------------
- Show a header and the current style line.
- Read input with a prompt_toolkit session (history + completion).
- Route ``:``-prefixed input to style commands; render anything else as a
  banner with the current style snapshot and play it back.

Commands
--------
``:q``/``:quit``/``:exit``, ``:help``, ``:clear``, ``:style``, ``:s`` (toggle
shadow), ``:c`` (toggle center), ``:g <spec>``, ``:m <h|v>``, ``:f <font>``,
``:h <layout>``, ``:v <layout>``, ``:a <mode>``, ``:p <speed>``, ``:x <n>``,
``:y <n>``. Command names are case-insensitive.

The style snapshot is immutable; every command produces a new one.
"""

from __future__ import annotations

import logging
import re
from dataclasses import replace
from typing import Callable, Dict, NamedTuple, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.formatted_text import HTML
from prompt_toolkit.history import InMemoryHistory
from rich.console import Console
from rich.text import Text

from .animate import print_animated
from .completers import CommandCompleter
from .constants import (
    ANIMATE_MODES,
    APP_NAME,
    GRADIENT_MODES,
    HEADER_GRADIENT,
    PROMPT_HTML,
    SPEED_PRESETS_MS,
)
from .glyphs import HORIZONTAL_LAYOUTS, GlyphEngine, list_fonts
from .presets import build_colorizer, list_preset_names
from .render import render
from .state import StyleState, normalize_gradient_mode

__all__ = [
    "Command",
    "parse_command",
    "apply_command",
    "style_line",
    "help_text",
    "run_interactive",
]

logger = logging.getLogger("lettercli")

_QUIT = frozenset({"q", "quit", "exit"})
_INT_RE = re.compile(r"^[+-]?\d+$")


class Command(NamedTuple):
    name: str
    args: str


def parse_command(line: Optional[str]) -> Optional[Command]:
    """Split ``:name arg words`` into a command; None for non-command input."""
    trimmed = (line or "").strip()
    if not trimmed.startswith(":"):
        return None
    parts = trimmed[1:].strip().split()
    if not parts:
        return Command("", "")
    return Command(parts[0].lower(), " ".join(parts[1:]))


def _set_int(field: str) -> Callable[[StyleState, str], StyleState]:
    def setter(state: StyleState, args: str) -> StyleState:
        if not _INT_RE.match(args.strip()):
            return state
        return replace(state, **{field: int(args)})

    return setter


def _set_text(field: str) -> Callable[[StyleState, str], StyleState]:
    def setter(state: StyleState, args: str) -> StyleState:
        return replace(state, **{field: args}) if args else state

    return setter


_SETTERS: Dict[str, Callable[[StyleState, str], StyleState]] = {
    "s": lambda state, _args: replace(state, shadow=not state.shadow),
    "c": lambda state, _args: replace(state, center=not state.center),
    "g": lambda state, args: replace(state, gradient=args or None),
    "m": lambda state, args: replace(state, gradient_mode=normalize_gradient_mode(args)),
    "f": _set_text("font"),
    "h": _set_text("horizontal_layout"),
    "v": _set_text("vertical_layout"),
    "a": _set_text("animate_mode"),
    "p": _set_text("speed"),
    "x": _set_int("shadow_x"),
    "y": _set_int("shadow_y"),
}


def apply_command(state: StyleState, command: Command) -> Optional[StyleState]:
    """Return the snapshot after a style command, or None if it is not one."""
    setter = _SETTERS.get(command.name)
    if setter is None:
        return None
    return setter(state, command.args)


# =============================================================================
# Rendering helpers
# =============================================================================

def style_line(state: StyleState) -> Text:
    """One-line summary of the current style."""
    gradient_value = state.gradient or "none"
    shadow_value = f"on(x={state.shadow_x},y={state.shadow_y})" if state.shadow else "off"
    pairs = [
        ("font", state.font),
        ("layout", f"{state.horizontal_layout}/{state.vertical_layout}"),
        ("gradient", f"{gradient_value}({state.gradient_mode})"),
        ("shadow", shadow_value),
        ("center", "on" if state.center else "off"),
        ("animate", state.animate_mode),
        ("speed", str(state.speed)),
    ]
    line = Text()
    for index, (key, value) in enumerate(pairs):
        if index:
            line.append("  ")
        line.append(key, style="dim")
        line.append("=")
        line.append(value, style="white")
    return line


def _header() -> Text:
    colorizer = build_colorizer(HEADER_GRADIENT)
    title = Text.from_ansi(colorizer.colorize(APP_NAME)) if colorizer else Text(APP_NAME)
    header = Text()
    header.append_text(title)
    header.append(" interactive", style="dim")
    header.append("\nEnter renders; :help lists commands; :q quits\n", style="dim")
    return header


def help_text() -> Text:
    """Help listing for the interactive commands."""
    text = Text()
    text.append("Commands (start with ':'):\n", style="dim")
    text.append(
        "  :q / :quit / :exit           quit\n"
        "  :help                        show this help\n"
        "  :clear                       clear the screen\n"
        "  :style                       show the current style\n"
    )
    text.append("\nToggles:\n", style="dim")
    text.append(
        "  :s                           toggle shadow\n"
        "  :c                           toggle center\n"
    )
    text.append("\nSettings:\n", style="dim")
    text.append(
        "  :g <preset|c1,c2|none>       gradient (e.g. :g mind or :g blue,purple)\n"
        "  :m <h|v>                     gradient mode (horizontal/vertical)\n"
        "  :f <font>                    FIGlet font (e.g. :f Slant)\n"
        "  :h <layout>                  horizontal layout (e.g. :h full)\n"
        "  :v <layout>                  vertical layout (e.g. :v default)\n"
        "  :a <none|line|char>          animation mode\n"
        "  :p <slow|medium|fast|ms>     animation speed\n"
        "  :x <n>                       shadow x offset\n"
        "  :y <n>                       shadow y offset\n"
    )
    return text


def _redraw(console: Console, state: StyleState) -> None:
    console.clear()
    console.print(_header())
    console.print(style_line(state))
    console.print("")


def _build_completer() -> CommandCompleter:
    commands = ["q", "quit", "exit", "help", "clear", "style", *_SETTERS]
    arguments = {
        "g": lambda: ["none", *list_preset_names()],
        "m": lambda: list(GRADIENT_MODES),
        "a": lambda: list(ANIMATE_MODES),
        "p": lambda: list(SPEED_PRESETS_MS),
        "f": list_fonts,
        "h": lambda: list(HORIZONTAL_LAYOUTS),
        "v": lambda: list(HORIZONTAL_LAYOUTS),
    }
    return CommandCompleter(commands, arguments)


# =============================================================================
# Main loop
# =============================================================================

def run_interactive(
    state: StyleState,
    *,
    console: Optional[Console] = None,
    glyph_engine: Optional[GlyphEngine] = None,
) -> StyleState:
    """Run the interactive loop until quit/EOF; return the final style."""
    console = console or Console()
    session = PromptSession(completer=_build_completer(), history=InMemoryHistory())
    prompt = HTML(PROMPT_HTML)

    _redraw(console, state)

    while True:
        try:
            line = session.prompt(prompt)
        except (EOFError, KeyboardInterrupt):
            break

        trimmed = (line or "").strip()
        if not trimmed:
            continue

        command = parse_command(trimmed)
        if command is not None:
            if command.name in _QUIT:
                break
            if command.name == "help":
                console.print(help_text())
                continue
            if command.name == "clear":
                _redraw(console, state)
                continue
            if command.name == "style":
                console.print(style_line(state))
                continue
            updated = apply_command(state, command)
            if updated is None:
                console.print(Text(f"Unknown command: {trimmed}", style="red"))
                continue
            state = updated
            logger.debug("style updated: %s", state)
            console.print(style_line(state))
            continue

        snapshot = replace(state, columns=console.width or state.columns)
        rendered = render(trimmed, snapshot, glyph_engine=glyph_engine)

        _redraw(console, state)
        print_animated(rendered, state.animate_mode, state.speed, stream=console.file)
        console.print("")
        console.print(Text("Tip: type :help for interactive commands", style="dim"))

    return state
