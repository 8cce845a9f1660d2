"""
minilex Lexer Package

A byte-oriented scanner for a small, closed token alphabet: braces, plus and
minus, comparison and logical operators, reserved words, alphabetic
identifiers, integer and real literals.

Key Features:
- One byte of lookahead; two-character operators never consume speculatively
- Reserved-word table owned by each scanner instance
- Line and column tracking for every token
- End of input reported as an exception carrying its location
"""

from .tokens import Token, Tag, SourceLocation, RESERVED_WORDS
from .lexer import ByteReader, Lexer, tokenize_string
from .errors import LexerError, EndOfInput, ReadError

__all__ = [
    "ByteReader",
    "Lexer",
    "Token",
    "Tag",
    "SourceLocation",
    "RESERVED_WORDS",
    "LexerError",
    "EndOfInput",
    "ReadError",
    "tokenize_string",
]
