"""
minilex

A small lexical scanner that converts source text into classified tokens
for a downstream parser.

Architecture:
    minilex/
    ├── lexer/           # Tokens, diagnostics and the scanner
    └── cli.py           # Driver that prints scanned tokens

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Lexer, Token, Tag, LexerError, EndOfInput

__all__ = [
    "Lexer",
    "Token",
    "Tag",
    "LexerError",
    "EndOfInput",

    # Version info
    "__version__",
    "__license__",
]
