"""Token-oriented reading of interactive console input.

Input is consumed one whitespace-separated token at a time. Tokens left on
the current line stay queued for the next read, so ``3 5`` answers two
prompts in a row. A blank line yields an empty token.
"""

from __future__ import annotations

import sys
from collections import deque
from typing import Deque, Optional, Protocol, TextIO

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory
from rich.console import Console
from rich.text import Text


class LineSource(Protocol):
    """Something that shows a prompt and returns one line of input."""

    def read_line(self, prompt: str) -> str:
        """Return the next line without its newline; raise EOFError at end of input."""
        ...


class StreamLineSource:
    """Reads lines from a text stream, writing prompts through a rich console.

    With ``echo`` on, each line read is written back after its prompt so a
    piped session reads like a typed one.
    """

    def __init__(self, console: Console, stream: Optional[TextIO] = None, echo: bool = True):
        self.console = console
        self.stream = stream if stream is not None else sys.stdin
        self.echo = echo

    def read_line(self, prompt: str) -> str:
        if prompt:
            self.console.print(Text(prompt), end="")
        line = self.stream.readline()
        if line == "":
            if prompt:
                self.console.print()
            raise EOFError("end of input")
        line = line.rstrip("\r\n")
        if self.echo:
            self.console.print(Text(line))
        return line


class PromptToolkitLineSource:
    """Reads lines from the terminal with a prompt_toolkit session."""

    def __init__(self, session: Optional[PromptSession] = None):
        # In-memory only: entered data is never persisted across runs
        self.session = session or PromptSession(history=InMemoryHistory())

    def read_line(self, prompt: str) -> str:
        return self.session.prompt(prompt)


def create_line_source(console: Console, stream: Optional[TextIO] = None) -> LineSource:
    """Pick prompt_toolkit for an interactive terminal, plain reads otherwise."""
    stream = stream if stream is not None else sys.stdin
    if stream is sys.stdin and stream.isatty() and console.is_terminal:
        return PromptToolkitLineSource()
    return StreamLineSource(console, stream)


class TokenReader:
    """Hands out input tokens, pulling new lines from a LineSource on demand."""

    def __init__(self, source: LineSource, console: Console):
        self.source = source
        self.console = console
        self._pending: Deque[str] = deque()

    @property
    def has_pending(self) -> bool:
        return bool(self._pending)

    def next_token(self, prompt: str) -> str:
        """Show ``prompt`` and return the next token.

        When the current line still holds tokens, the prompt is echoed
        together with the token it consumes instead of reading a new line.
        """
        if self._pending:
            token = self._pending.popleft()
            self.console.print(Text(f"{prompt}{token}"))
            return token

        tokens = self.source.read_line(prompt).split()
        if not tokens:
            return ""
        self._pending.extend(tokens[1:])
        return tokens[0]

    def discard_line(self) -> None:
        """Drop whatever is left of the current input line."""
        self._pending.clear()

    def wait_for_line(self, prompt: str) -> str:
        """Discard queued tokens and block for one full line."""
        self.discard_line()
        return self.source.read_line(prompt)
