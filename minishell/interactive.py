"""Detecting unfinished command lines and reading their continuation."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Callable, Optional

from minishell.heredoc import HeredocList, count_heredoc
from minishell.lexer import SPACE, is_quote

LineReader = Callable[[str], Optional[str]]

QUOTE_PROMPT = "quote> "
PIPE_PROMPT = "pipe> "


class ContinuationMode(enum.Enum):
    """Why a command line needs more input."""

    QUOTE = "quote"
    HEREDOC = "heredoc"
    PIPE = "pipe"


def is_quote_open(text: str) -> bool:
    """Whether ``text`` holds a quote that is never closed."""
    pos = 0
    while pos < len(text):
        char = text[pos]
        if is_quote(char):
            close = text.find(char, pos + 1)
            if close == -1:
                return True
            pos = close
        pos += 1
    return False


def ends_with_pipe(text: str) -> bool:
    """Whether the last character before trailing spaces is ``|``."""
    return text.rstrip(SPACE).endswith("|")


def heredoc_remains(text: str, heredocs: HeredocList) -> bool:
    """Whether ``text`` opens more or fewer here-documents than are recorded."""
    return len(heredocs) != count_heredoc(text)


def continuation_mode(text: str, heredocs: HeredocList) -> ContinuationMode | None:
    """Return why ``text`` is unfinished, or ``None`` if it is complete.

    An open quote takes precedence over a pending here-document, which
    takes precedence over a trailing pipe.
    """
    if is_quote_open(text):
        return ContinuationMode.QUOTE
    if heredoc_remains(text, heredocs):
        return ContinuationMode.HEREDOC
    if ends_with_pipe(text):
        return ContinuationMode.PIPE
    return None


@dataclass
class PendingInput:
    """A command line being read, together with its history entry."""

    input: str
    history: Optional[str] = None
    heredocs: HeredocList = field(default_factory=HeredocList)
    interactive: bool = False
    num_heredoc: int = 0

    def __post_init__(self) -> None:
        if self.history is None:
            self.history = self.input

    def is_interactive(self) -> bool:
        """Whether the line still needs more input."""
        self.num_heredoc = count_heredoc(self.input)
        return continuation_mode(self.input, self.heredocs) is not None

    def handle_interactive(self, read_line: LineReader) -> ContinuationMode | None:
        """Read one continuation line if the input needs one.

        An open quote continues on a new line, a trailing pipe continues
        after a space. A pending here-document reads nothing. Returns the
        mode that was handled. Raises :class:`EOFError` when ``read_line``
        reports end of input.
        """
        self.interactive = True
        mode = continuation_mode(self.input, self.heredocs)
        if mode is ContinuationMode.QUOTE:
            separator, prompt = "\n", QUOTE_PROMPT
        elif mode is ContinuationMode.PIPE:
            separator, prompt = " ", PIPE_PROMPT
        else:
            return mode
        self.input += separator
        self.history = f"{self.history}{separator}"
        added = read_line(prompt)
        if added is None:
            raise EOFError("end of input while reading a continuation line")
        self.input += added
        self.history += added
        return mode