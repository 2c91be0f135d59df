# minishell

Building blocks for the front end of a small shell: a tokeniser for command
lines, checks that tell whether a line is still unfinished, a helper that
reads continuation lines, and tracking of `<<` heredocs.

## Installing

```
pip install .
```

## Tokenising

`minishell.lexer.tokenise` splits a command line into words and operators:

```python
from minishell.lexer import tokenise
from minishell.tokens import format_tokens

tokens = tokenise('ls -l | grep "mini"shell > out.txt')
print(format_tokens(tokens))
```

Spaces separate words. Quotes are removed, and a quoted part joins the word
right before it; after a closing quote, another quote or an ASCII letter or
digit continues the same word. The operators `|`, `<`, `>`, `<<` and `>>`
become tokens of their own kinds (`TokenType.PIPE`, `RED_IN`, `RED_OUT`,
`HEREDOC`, `APPEND`). Malformed operator sequences such as `||`, `<>`, `>|`
or `<<<` raise `LexError`.

The lower-level readers `read_default`, `read_quoted` and `read_operator`
each take the text and a start index and return what they read together
with the index just past it. `is_operator` and `is_quote` classify single
characters.

`minishell.tokens` holds `TokenType`, the frozen `Token` record,
`type_name` (a display name such as `REDIRECT_IN`, or `UNKNOWN`),
`format_tokens` and `display_tokens`, which print one token per line.

## Unfinished input

`minishell.interactive` decides whether a line needs more input:

- `is_quote_open(text)`: a single or double quote is never closed;
- `ends_with_pipe(text)`: the last character before trailing spaces is `|`;
- `heredoc_remains(text, heredocs)`: the number of `<<` heredocs opened in
  the text differs from the number recorded in a `HeredocList`;
- `continuation_mode(text, heredocs)`: returns `ContinuationMode.QUOTE`,
  `HEREDOC` or `PIPE` (in that order of precedence), or `None`.

`PendingInput` keeps a line and its history entry. `is_interactive()` tells
whether it is unfinished, and `handle_interactive(read_line)` reads one more
line through the callable you pass: for an open quote it adds a newline and
asks with the prompt `quote> `, for a trailing pipe it adds a space and asks
with `pipe> `. A pending heredoc reads nothing. If `read_line` returns
`None`, `EOFError` is raised.

```python
from minishell.interactive import PendingInput

pending = PendingInput('echo "hello')
lines = iter(['world"'])
while pending.is_interactive():
    pending.handle_interactive(lambda prompt: next(lines, None))
print(pending.input)  # echo "hello\nworld"
```

## Heredocs

`minishell.heredoc.count_heredoc` counts the `<<` operators in a line that
open a heredoc (those not followed directly by another operator), and
`is_heredoc(text, pos)` returns the index after a `<<` at `pos`, or `None`.
`HeredocList.add(limiter)` records a heredoc whose `file_name` is its
position in the list.

## What it does not do

The package is a library only. It has no command to run, no prompt loop, no
history or signal handling, and it does not execute commands, run
redirections, or collect heredoc bodies; tokens are produced but nothing
acts on them.

## Tests

```
pip install .[test]
pytest
```