"""
Token definitions for the minilex scanner.

The token alphabet is fixed and closed:
- Punctuation ({ } + -)
- Comparison and logical operators, each with a single-character fallback
- Reserved words
- Identifiers and numeric literals (integer and real)
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any, Dict, Tuple


class Tag(Enum):
    """
    Discriminant of a scanned token.

    Grouped by category; the set is closed and never extended at runtime.
    """

    # ========================================================================
    # Special Tokens
    # ========================================================================
    EOF = auto()                    # End of input / unrecognized byte
    ERROR = auto()                  # Reserved; read failures raise ReadError instead

    # ========================================================================
    # Identifiers and Literals
    # ========================================================================
    ID = auto()                     # alpha, beta
    NUM = auto()                    # 42
    REAL = auto()                   # 100.34

    # ========================================================================
    # Keywords
    # ========================================================================
    IF = auto()                     # if
    ELSE = auto()                   # else
    WHILE = auto()                  # while
    DO = auto()                     # do
    BREAK = auto()                  # break
    TRUE = auto()                   # true
    FALSE = auto()                  # false

    # ========================================================================
    # Punctuation
    # ========================================================================
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }
    PLUS = auto()                   # +
    MINUS = auto()                  # -

    # ========================================================================
    # Two-character operators
    # ========================================================================
    AND = auto()                    # &&
    OR = auto()                     # ||
    EQ = auto()                     # ==
    NE = auto()                     # !=
    LE = auto()                     # <=
    GE = auto()                     # >=

    # ========================================================================
    # Single-character operators
    # ========================================================================
    AND_OPERATOR = auto()           # &
    OR_OPERATOR = auto()            # |
    ASSIGN_OPERATOR = auto()        # =
    NEGATE_OPERATOR = auto()        # !
    LESS_OPERATOR = auto()          # <
    GREATER_OPERATOR = auto()       # >


@dataclass(frozen=True)
class SourceLocation:
    """
    Position of a token's first byte in the source.
    """
    filename: str
    line: int
    column: int
    offset: int  # Byte offset from start of input

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    A scanned token.

    ``value`` carries the spelling for identifiers, an ``int`` for NUM and
    a ``float`` for REAL; it is None for every other tag.
    """
    tag: Tag
    lexeme: str                     # Raw text from source
    value: Any
    location: SourceLocation

    def __str__(self) -> str:
        if self.tag is Tag.ID:
            return f"ID({self.value!r})"
        if self.tag in (Tag.NUM, Tag.REAL):
            return f"{self.tag.name}({self.value!r})"
        if self.lexeme:
            return f"{self.tag.name}({self.lexeme!r})"
        return self.tag.name

    def __repr__(self) -> str:
        return (f"Token({self.tag.name}, {self.lexeme!r}, "
                f"{self.value!r}, {self.location!r})")

    @property
    def is_literal(self) -> bool:
        return self.tag in (Tag.NUM, Tag.REAL)

    @property
    def is_keyword(self) -> bool:
        return self.tag in KEYWORD_TAGS

    @property
    def is_operator(self) -> bool:
        return self.tag in OPERATOR_TAGS

    @property
    def is_identifier(self) -> bool:
        return self.tag is Tag.ID


# Fixed (spelling, tag) pairs; each scanner builds its own table from these
RESERVED_WORDS: Tuple[Tuple[str, Tag], ...] = (
    ("if", Tag.IF),
    ("else", Tag.ELSE),
    ("while", Tag.WHILE),
    ("do", Tag.DO),
    ("break", Tag.BREAK),
    ("true", Tag.TRUE),
    ("false", Tag.FALSE),
)

KEYWORD_TAGS = frozenset(tag for _, tag in RESERVED_WORDS)

# Bytes that map to a tag with no lookahead
PUNCTUATION: Dict[int, Tag] = {
    ord("{"): Tag.LEFT_BRACE,
    ord("}"): Tag.RIGHT_BRACE,
    ord("+"): Tag.PLUS,
    ord("-"): Tag.MINUS,
}

# first byte -> (second byte, two-character tag, single-character tag)
TWO_CHAR_OPERATORS: Dict[int, Tuple[int, Tag, Tag]] = {
    ord("&"): (ord("&"), Tag.AND, Tag.AND_OPERATOR),
    ord("|"): (ord("|"), Tag.OR, Tag.OR_OPERATOR),
    ord("="): (ord("="), Tag.EQ, Tag.ASSIGN_OPERATOR),
    ord("!"): (ord("="), Tag.NE, Tag.NEGATE_OPERATOR),
    ord("<"): (ord("="), Tag.LE, Tag.LESS_OPERATOR),
    ord(">"): (ord("="), Tag.GE, Tag.GREATER_OPERATOR),
}

OPERATOR_TAGS = frozenset(
    [Tag.PLUS, Tag.MINUS]
    + [double for _, double, _ in TWO_CHAR_OPERATORS.values()]
    + [single for _, _, single in TWO_CHAR_OPERATORS.values()]
)
