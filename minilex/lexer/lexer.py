"""
minilex scanner - turns source text into tokens one call at a time.

The scanner works on the UTF-8 bytes of the source and keeps exactly one
byte of lookahead. Two-character operators peek at the following byte and
only consume it when it completes the operator.
"""

import logging
import string
from types import MappingProxyType
from typing import Callable, Iterator, List, Optional, Union

from .tokens import (
    Token, Tag, SourceLocation, RESERVED_WORDS, PUNCTUATION, TWO_CHAR_OPERATORS
)
from .errors import (
    EndOfInput, create_end_of_input, create_invalid_character_error,
    create_read_error
)

logger = logging.getLogger(__name__)

_SPACE = ord(" ")
_TAB = ord("\t")
_NEWLINE = ord("\n")
_DOT = ord(".")
_ZERO = ord("0")

_DIGITS = frozenset(string.digits.encode("ascii"))
_LETTERS = frozenset(string.ascii_letters.encode("ascii"))


def _display_byte(byte: int) -> str:
    """ASCII bytes as themselves, anything else in \\xNN form."""
    if byte < 0x80:
        return chr(byte)
    return f"\\x{byte:02x}"


class ByteReader:
    """
    Cursor over an in-memory byte string.

    ``read_byte`` consumes, ``peek_byte`` does not. Exhaustion is reported by
    raising ``EndOfInput``; ``locate`` maps the failing offset to a location.
    """

    def __init__(self, data: bytes, locate: Callable[[int], SourceLocation]):
        self._data = data
        self._pos = 0
        self._locate = locate

    @property
    def position(self) -> int:
        """Number of bytes consumed so far."""
        return self._pos

    def read_byte(self) -> int:
        if self._pos >= len(self._data):
            raise create_end_of_input(self._locate(self._pos))
        byte = self._data[self._pos]
        self._pos += 1
        return byte

    def peek_byte(self) -> Optional[int]:
        if self._pos >= len(self._data):
            return None
        return self._data[self._pos]

    def text(self, start: int, end: int) -> str:
        return self._data[start:end].decode("utf-8", errors="replace")


class Lexer:
    """
    Scanner for a small, fixed token alphabet.

    Each call to ``scan`` skips blanks and newlines, classifies the next
    token and returns it. ``EndOfInput`` is raised once the source is
    exhausted; that is the normal end of the stream.

    A byte that starts no token produces an EOF token and is consumed. Pass
    ``strict=True`` to get a ``LexerError`` for it instead.
    """

    def __init__(self, source: Union[str, bytes], filename: str = "<string>",
                 strict: bool = False):
        """
        Args:
            source: Complete source text
            filename: Name used in token locations and diagnostics
            strict: Raise on unrecognized characters instead of emitting EOF
        """
        self.filename = filename
        self.strict = strict
        self._line = 1
        self._column = 0                # column of the lookahead byte
        self._peek: Optional[int] = None
        self._retained = False          # lookahead not yet classified
        self._key_words = self._reserve()
        self._reader = ByteReader(self._encode(source), self._next_location)

        logger.debug("lexer created for %s (%d reserved words, strict=%s)",
                     filename, len(self._key_words), strict)

    def _reserve(self):
        return MappingProxyType({spelling: tag for spelling, tag in RESERVED_WORDS})

    def _encode(self, source: Union[str, bytes]) -> bytes:
        if isinstance(source, (bytes, bytearray)):
            return bytes(source)
        if not isinstance(source, str):
            raise TypeError(f"source must be str or bytes, not {type(source).__name__}")
        try:
            return source.encode("utf-8")
        except UnicodeEncodeError as e:
            raise create_read_error(e.reason, self._char_location(source, e.start)) from e

    def _char_location(self, source: str, index: int) -> SourceLocation:
        """Location of the character at ``index``, with a UTF-8 byte offset."""
        before = source[:index]
        offset = len(before.encode("utf-8", errors="surrogatepass"))
        line = before.count("\n") + 1
        column = index - (before.rfind("\n") + 1) + 1
        return SourceLocation(self.filename, line, column, offset)

    @property
    def line(self) -> int:
        """
        Current line: 1 + newlines skipped so far.

        A newline that ends a number or word stays in the lookahead and is
        only counted by the next ``scan``, so after scanning ``"a\\n"`` the
        line is still 1.
        """
        return self._line

    @property
    def peek(self) -> Optional[int]:
        """The lookahead byte, or None before the first read and at end."""
        return self._peek

    @property
    def reserved_words(self):
        """Read-only view of this scanner's keyword table."""
        return self._key_words

    def scan(self) -> Token:
        """
        Scan the next token.

        Raises:
            EndOfInput: The source is exhausted
            LexerError: In strict mode, on a byte that starts no token
        """
        self._skip_whitespace()

        start = SourceLocation(self.filename, self._line, self._column,
                               self._reader.position - 1)
        first = self._peek

        if first in PUNCTUATION:
            return self._emit(PUNCTUATION[first], chr(first), None, start)

        if first in TWO_CHAR_OPERATORS:
            second, double, single = TWO_CHAR_OPERATORS[first]
            if self._read_character(second):
                return self._emit(double, chr(first) + chr(second), None, start)
            return self._emit(single, chr(first), None, start)

        if first in _DIGITS:
            return self._scan_number(start)

        if first in _LETTERS:
            return self._scan_word(start)

        if self.strict:
            raise create_invalid_character_error(first, start)

        logger.debug("unrecognized byte 0x%02X at %s, emitting EOF", first, start)
        return self._emit(Tag.EOF, _display_byte(first), None, start)

    def tokenize(self) -> List[Token]:
        """
        Scan until the stream ends.

        Returns:
            Tokens in order, always terminated by a single EOF token
        """
        tokens: List[Token] = []
        while True:
            try:
                token = self.scan()
            except EndOfInput as end:
                tokens.append(Token(Tag.EOF, "", None, end.location))
                break
            tokens.append(token)
            if token.tag is Tag.EOF:
                break
        return tokens

    def __iter__(self) -> Iterator[Token]:
        while True:
            try:
                token = self.scan()
            except EndOfInput:
                return
            yield token
            if token.tag is Tag.EOF:
                return

    def _skip_whitespace(self):
        while True:
            if self._retained:
                self._retained = False
            else:
                self._readch()

            if self._peek == _SPACE or self._peek == _TAB:
                continue
            if self._peek == _NEWLINE:
                self._line += 1
                continue
            break

    def _scan_number(self, start: SourceLocation) -> Token:
        value = 0
        while True:
            value = 10 * value + (self._peek - _ZERO)
            if not self._try_readch() or self._peek not in _DIGITS:
                break

        if self._peek != _DOT:
            self._retain()
            return self._emit(Tag.NUM, self._lexeme(start), value, start)

        real = float(value)
        divisor = 10.0
        while self._try_readch() and self._peek in _DIGITS:
            real += (self._peek - _ZERO) / divisor
            divisor *= 10

        self._retain()
        return self._emit(Tag.REAL, self._lexeme(start), real, start)

    def _scan_word(self, start: SourceLocation) -> Token:
        while self._try_readch() and self._peek in _LETTERS:
            pass

        self._retain()
        spelling = self._lexeme(start)
        tag = self._key_words.get(spelling)
        if tag is not None:
            return self._emit(tag, spelling, None, start)
        return self._emit(Tag.ID, spelling, spelling, start)

    def _read_character(self, expected: int) -> bool:
        """Consume the next byte only if it equals ``expected``."""
        if self._reader.peek_byte() != expected:
            return False
        self._readch()
        return True

    def _readch(self):
        byte = self._reader.read_byte()
        self._column = 1 if self._peek == _NEWLINE else self._column + 1
        self._peek = byte

    def _try_readch(self) -> bool:
        """Read the next byte; at end of input clear the lookahead instead."""
        try:
            self._readch()
        except EndOfInput:
            self._peek = None
            return False
        return True

    def _retain(self):
        # the byte that ended a literal is classified by the next scan
        self._retained = self._peek is not None

    def _lexeme(self, start: SourceLocation) -> str:
        end = self._reader.position - (1 if self._retained else 0)
        return self._reader.text(start.offset, end)

    def _next_location(self, offset: int) -> SourceLocation:
        column = 1 if self._peek == _NEWLINE else self._column + 1
        return SourceLocation(self.filename, self._line, column, offset)

    def _emit(self, tag: Tag, lexeme: str, value, location: SourceLocation) -> Token:
        token = Token(tag, lexeme, value, location)
        logger.debug("scanned %s at %s", token, location)
        return token


def tokenize_string(source: Union[str, bytes], filename: str = "<string>",
                    strict: bool = False) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Returns:
        List of tokens ending in EOF

    Raises:
        LexerError: In strict mode, on an unrecognized character
    """
    return Lexer(source, filename, strict=strict).tokenize()
