"""Splitting a command line into words and operators."""

from __future__ import annotations

from minishell.tokens import Token, TokenType

OPERATORS = "<>|"
QUOTES = "'\""
SPACE = " "


class LexError(ValueError):
    """Raised when the input holds an invalid sequence of operators."""


def is_operator(char: str) -> bool:
    """Whether ``char`` is one of ``<``, ``>`` or ``|``."""
    return len(char) == 1 and char in OPERATORS


def is_quote(char: str) -> bool:
    """Whether ``char`` is a single or double quote."""
    return len(char) == 1 and char in QUOTES


def _at(text: str, pos: int) -> str:
    return text[pos] if 0 <= pos < len(text) else ""


def _is_alnum(char: str) -> bool:
    return char.isascii() and char.isalnum()


def _default_end(text: str, pos: int) -> int:
    end = pos
    while end < len(text):
        char = text[end]
        if is_operator(char) or is_quote(char) or char == SPACE:
            break
        end += 1
    return end


def _quoted_segment(text: str, pos: int) -> tuple[str, int]:
    quote = text[pos]
    close = text.find(quote, pos + 1)
    if close == -1:
        return text[pos + 1:], len(text)
    return text[pos + 1:close], close + 1


def _read_word(text: str, pos: int, prefix: str, quoted: bool) -> tuple[str, int]:
    parts = [prefix]
    while True:
        if quoted:
            segment, end = _quoted_segment(text, pos)
            parts.append(segment)
            following = _at(text, end)
            if is_quote(following):
                quoted = True
            elif _is_alnum(following):
                quoted = False
            else:
                break
        else:
            end = _default_end(text, pos)
            parts.append(text[pos:end])
            if not is_quote(_at(text, end)):
                break
            quoted = True
        pos = end
    return "".join(parts), end


def read_default(text: str, pos: int, prefix: str = "") -> tuple[str, int]:
    """Read an unquoted word starting at ``pos``.

    Reading stops at a space, an operator or the end of the text; a quote
    directly after the word continues it. Returns the word (after
    ``prefix``) and the index just past what was consumed.
    """
    return _read_word(text, pos, prefix, quoted=False)


def read_quoted(text: str, pos: int, prefix: str = "") -> tuple[str, int]:
    """Read a quoted word whose opening quote is at ``pos``.

    The quotes are dropped. A quote or an ASCII letter or digit right after
    the closing quote continues the word. Returns the word (after
    ``prefix``) and the index just past what was consumed.
    """
    if not is_quote(_at(text, pos)):
        raise ValueError(f"no quote at position {pos}")
    return _read_word(text, pos, prefix, quoted=True)


def read_operator(text: str, pos: int) -> tuple[Token, int]:
    """Read the operator at ``pos``; return its token and the next index."""
    char = _at(text, pos)
    following = _at(text, pos + 1)
    if char == "|":
        if is_operator(following):
            raise LexError(f"unexpected operator after '|' at position {pos}")
        return Token(TokenType.PIPE, "|"), pos + 1
    if char == "<":
        double, double_type, opposite = "<<", TokenType.HEREDOC, ">"
        single_type = TokenType.RED_IN
    elif char == ">":
        double, double_type, opposite = ">>", TokenType.APPEND, "<"
        single_type = TokenType.RED_OUT
    else:
        raise ValueError(f"no operator at position {pos}")
    if following == char:
        if is_operator(_at(text, pos + 2)):
            raise LexError(f"unexpected operator after '{double}' at position {pos}")
        return Token(double_type, double), pos + 2
    if following in (opposite, "|"):
        raise LexError(f"unexpected operator after '{char}' at position {pos}")
    return Token(single_type, char), pos + 1


def tokenise(text: str) -> list[Token]:
    """Split a command line into word and operator tokens."""
    tokens: list[Token] = []
    pos = 0
    while pos < len(text):
        char = text[pos]
        if char == SPACE:
            pos += 1
        elif is_operator(char):
            token, pos = read_operator(text, pos)
            tokens.append(token)
        elif is_quote(char):
            word, pos = read_quoted(text, pos)
            tokens.append(Token(TokenType.WORD, word))
        else:
            word, pos = read_default(text, pos)
            tokens.append(Token(TokenType.WORD, word))
    return tokens