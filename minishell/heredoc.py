"""Here-document records and detection of ``<<`` in command lines."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from minishell.lexer import is_operator


@dataclass
class Heredoc:
    """A pending here-document: its limiter and the name of its file."""

    limiter: str
    file_name: str


@dataclass
class HeredocList:
    """Here-documents in the order they were added."""

    _items: list[Heredoc] = field(default_factory=list)

    def add(self, limiter: str) -> Heredoc:
        """Append a here-document named after its position and return it."""
        heredoc = Heredoc(limiter=limiter, file_name=str(len(self._items)))
        self._items.append(heredoc)
        return heredoc

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Heredoc]:
        return iter(self._items)


def _at(text: str, pos: int) -> str:
    return text[pos] if 0 <= pos < len(text) else ""


def is_heredoc(text: str, pos: int) -> int | None:
    """If a ``<<`` starts at ``pos``, return the index after it.

    Returns ``None`` when there is no ``<<`` there or when it is followed
    directly by another operator.
    """
    if _at(text, pos) != "<" or _at(text, pos + 1) != "<":
        return None
    if is_operator(_at(text, pos + 2)):
        return None
    return pos + 2


def count_heredoc(text: str) -> int:
    """Count the ``<<`` operators in ``text`` that open a here-document."""
    count = 0
    pos = 0
    while pos + 1 < len(text):
        if text[pos] == "<" and text[pos + 1] == "<":
            if not is_operator(_at(text, pos + 2)):
                count += 1
            pos += 2
        pos += 1
    return count