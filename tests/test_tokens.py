import pytest

from minishell.tokens import (
    Token,
    TokenType,
    display_tokens,
    format_tokens,
    type_name,
)


@pytest.mark.parametrize(
    "token_type, name",
    [
        (TokenType.WORD, "WORD"),
        (TokenType.PIPE, "PIPE"),
        (TokenType.RED_IN, "REDIRECT_IN"),
        (TokenType.RED_OUT, "REDIRECT_OUT"),
        (TokenType.APPEND, "APPEND"),
        (TokenType.HEREDOC, "HEREDOC"),
        (TokenType.ENV_VAR, "ENV_VAR"),
        (TokenType.EOF, "EOF"),
    ],
)
def test_type_name(token_type, name):
    assert type_name(token_type) == name


def test_type_name_unknown():
    assert type_name(object()) == "UNKNOWN"


def test_format_single_token():
    out = format_tokens([Token(TokenType.WORD, "ls")])
    assert out == "Type: WORD         | Value: ls"


def test_format_empty_value_is_quoted():
    out = format_tokens([Token(TokenType.WORD, "")])
    assert out.endswith('| Value: ""')


def test_format_one_line_per_token():
    tokens = [
        Token(TokenType.WORD, "cat"),
        Token(TokenType.PIPE, "|"),
        Token(TokenType.HEREDOC, "<<"),
    ]
    lines = format_tokens(tokens).split("\n")
    assert len(lines) == len(tokens)
    for line, token in zip(lines, tokens):
        assert line.startswith("Type: " + type_name(token.type))
        assert line.endswith("Value: " + token.value)


def test_format_name_column_is_padded():
    lines = format_tokens(
        [Token(TokenType.PIPE, "|"), Token(TokenType.RED_OUT, ">")]
    ).split("\n")
    assert lines[0].index("|") == lines[1].index("|")


def test_format_empty_sequence():
    assert format_tokens([]) == ""


def test_display_tokens_prints(capsys):
    tokens = [Token(TokenType.APPEND, ">>"), Token(TokenType.WORD, "out")]
    display_tokens(tokens)
    assert capsys.readouterr().out == format_tokens(tokens) + "\n"


def test_tokens_compare_by_value():
    assert Token(TokenType.WORD, "a") == Token(TokenType.WORD, "a")
    assert Token(TokenType.WORD, "a") != Token(TokenType.PIPE, "a")