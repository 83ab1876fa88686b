"""
Error handling for the minilang lexer.

The tokenizer itself never raises: an unrecognized character comes back as
an ERROR token. Callers that want a hard failure (tokenize_string,
tokenize_file, the command line) turn that token into a LexerError with a
diagnostic pointing at the offending offset.

Author: xwest
"""

from typing import Optional
from dataclasses import dataclass


@dataclass
class Diagnostic:
    """A lexer diagnostic (error, warning, info)."""
    message: str
    filename: str
    offset: int
    severity: str  # "error", "warning", "info"
    code: Optional[str] = None
    help_text: Optional[str] = None

    @property
    def location(self) -> str:
        return f"{self.filename}@{self.offset}"

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        return result


class LexerError(Exception):
    """
    Exception raised when a strict caller meets an ERROR token.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        filename: str,
        offset: int,
        code: Optional[str] = None,
        help_text: Optional[str] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            filename=filename,
            offset=offset,
            severity="error",
            code=code,
            help_text=help_text
        )

    @property
    def offset(self) -> int:
        return self.diagnostic.offset

    def __str__(self) -> str:
        return str(self.diagnostic)


# Error codes for categorization
ERROR_CODES = {
    "L001": "Invalid character",
}


def create_invalid_character_error(char: str, filename: str, offset: int) -> LexerError:
    """Create an error for a character that starts no valid token."""
    if char.isprintable():
        help_text = f"The character '{char}' is not valid in minilang source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return LexerError(
        message=f"Invalid character: {char!r}",
        filename=filename,
        offset=offset,
        code="L001",
        help_text=help_text
    )
