"""Shell front-end pieces: tokens, tokenising, heredoc tracking and line continuation."""

__version__ = "0.1.0"

__all__ = ["heredoc", "interactive", "lexer", "tokens"]