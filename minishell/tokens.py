"""Token kinds and token records produced by the lexer."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable


class TokenType(enum.Enum):
    """Kinds of lexical tokens."""

    WORD = enum.auto()
    PIPE = enum.auto()
    RED_IN = enum.auto()
    RED_OUT = enum.auto()
    APPEND = enum.auto()
    HEREDOC = enum.auto()
    ENV_VAR = enum.auto()
    EOF = enum.auto()


_TYPE_NAMES = {
    TokenType.WORD: "WORD",
    TokenType.PIPE: "PIPE",
    TokenType.RED_IN: "REDIRECT_IN",
    TokenType.RED_OUT: "REDIRECT_OUT",
    TokenType.APPEND: "APPEND",
    TokenType.HEREDOC: "HEREDOC",
    TokenType.ENV_VAR: "ENV_VAR",
    TokenType.EOF: "EOF",
}


@dataclass(frozen=True)
class Token:
    """A single token: its kind and its text."""

    type: TokenType
    value: str


def type_name(token_type: object) -> str:
    """Return the display name of a token type, or ``UNKNOWN``."""
    return _TYPE_NAMES.get(token_type, "UNKNOWN")  # type: ignore[arg-type]


def format_tokens(tokens: Iterable[Token]) -> str:
    """Render tokens one per line, showing empty values as ``""``."""
    lines = []
    for token in tokens:
        value = token.value if token.value else '""'
        lines.append(f"Type: {type_name(token.type):<12} | Value: {value}")
    return "\n".join(lines)


def display_tokens(tokens: Iterable[Token]) -> None:
    """Print tokens in the format of :func:`format_tokens`."""
    text = format_tokens(tokens)
    if text:
        print(text)