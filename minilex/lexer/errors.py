"""
Error handling for the minilex scanner.

End of input is reported through the same exception hierarchy as real
failures so that every outcome carries a source location, but callers are
expected to treat ``EndOfInput`` as the normal end of the token stream.
"""

from typing import Optional, List
from dataclasses import dataclass
from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """A scanner diagnostic with its location."""
    message: str
    location: SourceLocation
    severity: str  # "error", "info"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        result = f"{self.severity.upper()}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Exception raised when the scanner cannot produce a token.

    Contains detailed diagnostic information for error reporting.
    """

    severity = "error"

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity=self.severity,
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


class EndOfInput(LexerError):
    """Raised by the byte reader once the source is exhausted."""

    severity = "info"


class ReadError(LexerError):
    """Raised when the underlying source cannot be read as bytes."""


ERROR_CODES = {
    "L000": "End of input",
    "L001": "Invalid character",
    "L011": "Unreadable source",
}


def create_end_of_input(location: SourceLocation) -> EndOfInput:
    """Create the end-of-stream signal."""
    return EndOfInput(
        message="End of input",
        location=location,
        code="L000",
    )


def create_invalid_character_error(byte: int, location: SourceLocation) -> LexerError:
    """Create an error for a byte that starts no token."""
    char = chr(byte)
    if byte < 0x80 and char.isprintable():
        help_text = f"The character '{char}' does not start any token."
        shown = repr(char)
    else:
        help_text = f"Non-printable or non-ASCII byte (0x{byte:02X}) is not allowed."
        shown = f"byte 0x{byte:02X}"

    return LexerError(
        message=f"Invalid character: {shown}",
        location=location,
        code="L001",
        help_text=help_text,
        suggestions=["Remove the character", "Scan without strict mode to treat it as end of input"]
    )


def create_read_error(reason: str, location: SourceLocation) -> ReadError:
    """Create an error for a source that cannot be turned into bytes."""
    return ReadError(
        message=f"Cannot read source: {reason}",
        location=location,
        code="L011",
        help_text="Source text must be a str encodable as UTF-8, or bytes.",
    )
