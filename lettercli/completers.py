# lettercli/completers.py
"""
Prompt-toolkit completer for the interactive session.

Public API
----------
- CommandCompleter: fuzzy completion of ``:`` command names before the first
  space, and of the command's argument values after it.

Notes
-----
- Plain input (anything not starting with ``:``) gets no completions; it is
  banner text, not a command.
- Argument vocabularies are supplied as callables so expensive lists (the
  installed font names) are only built when first completed.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Sequence

from prompt_toolkit.completion import Completer, Completion, FuzzyWordCompleter, WordCompleter
from prompt_toolkit.document import Document

__all__ = ["CommandCompleter"]

ValueSource = Callable[[], Sequence[str]]


class CommandCompleter(Completer):
    """Command+argument completer for ``:``-prefixed interactive commands.

    Parameters
    ----------
    commands : Iterable[str]
        Command names without the leading ``:``.
    arguments : dict[str, Callable[[], Sequence[str]]] | None
        Per-command providers of argument values.
    """

    __slots__ = ("command_completer", "_arguments", "_cache")

    def __init__(
        self,
        commands: Iterable[str],
        arguments: Optional[Dict[str, ValueSource]] = None,
    ) -> None:
        self.command_completer = FuzzyWordCompleter([f":{name}" for name in commands], WORD=True)
        self._arguments: Dict[str, ValueSource] = dict(arguments or {})
        self._cache: Dict[str, WordCompleter] = {}

    def _argument_completer(self, command: str) -> Optional[WordCompleter]:
        if command in self._cache:
            return self._cache[command]
        source = self._arguments.get(command)
        if source is None:
            return None
        values: List[str] = list(source())
        completer = WordCompleter(values, ignore_case=True, sentence=True)
        self._cache[command] = completer
        return completer

    def get_completions(  # type: ignore[override]
        self, document: Document, complete_event: Any
    ) -> Iterator[Completion]:
        buf = document.text_before_cursor
        if not buf.startswith(":"):
            return
        first_space = buf.find(" ")

        if first_space == -1:
            yield from self.command_completer.get_completions(document, complete_event)
            return

        command = buf[1:first_space].strip().lower()
        completer = self._argument_completer(command)
        if completer is None:
            return
        fragment = buf[first_space + 1 :].lstrip()
        frag_doc = Document(text=fragment, cursor_position=len(fragment))
        yield from completer.get_completions(frag_doc, complete_event)
