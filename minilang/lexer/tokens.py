"""
Token definitions for the minilang lexer.

This module defines every token type a minilang program can contain:
- Keywords (if, do, while, then, print)
- Arithmetic and relational operators
- Integer literals and identifiers
- Punctuation and delimiters

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional, Union


class TokenType(Enum):
    """
    Enumeration of all token types in minilang.

    The set is closed: the tokenizer never produces anything outside it.
    """

    # ========================================================================
    # Special Tokens
    # ========================================================================
    NIL = auto()                    # Placeholder before any token is read
    END_OF_INPUT = auto()           # End of input (repeats forever)

    # ========================================================================
    # Keywords
    # ========================================================================
    IF = auto()                     # if
    WHILE = auto()                  # while
    DO = auto()                     # do
    THEN = auto()                   # then
    PRINT = auto()                  # print

    # ========================================================================
    # Operators
    # ========================================================================

    # Arithmetic operators
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    DIVIDE = auto()                 # /
    MULTIPLY = auto()               # *

    # Assignment / comparison
    EQUAL = auto()                  # =
    NOT_EQUAL = auto()              # <>
    GREATER = auto()                # >
    LESS = auto()                   # <
    LESS_OR_EQUAL = auto()          # <=
    GREATER_OR_EQUAL = auto()       # >=

    # ========================================================================
    # Punctuation and Delimiters
    # ========================================================================
    COLON = auto()                  # :
    COMMA = auto()                  # ,
    SEMICOLON = auto()              # ;
    LBRACE = auto()                 # {
    RBRACE = auto()                 # }
    LPAREN = auto()                 # (
    RPAREN = auto()                 # )
    DOT = auto()                    # .

    # ========================================================================
    # Literals and Identifiers
    # ========================================================================
    NUMBER = auto()                 # 42
    IDENTIFIER = auto()             # x, counter2

    # ========================================================================
    # Error Token
    # ========================================================================
    ERROR = auto()                  # Character that starts no valid token


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in a minilang program.

    ``text`` is the exact slice of source that was matched; it is empty
    for END_OF_INPUT, ERROR and the NIL placeholder.
    """
    kind: TokenType
    text: str = ""

    def __str__(self) -> str:
        return f"{self.kind.name}({self.text!r})"

    @classmethod
    def nil(cls) -> "Token":
        """The placeholder token held by a lexer that has not read anything yet."""
        return cls(TokenType.NIL, "")

    @property
    def value(self) -> Optional[Union[int, str]]:
        """Semantic value: an int for NUMBER, the name for IDENTIFIER."""
        if self.kind == TokenType.NUMBER:
            return _digits_to_int(self.text)
        if self.kind == TokenType.IDENTIFIER:
            return self.text
        return None

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a keyword."""
        return self.kind in KEYWORD_TYPES

    @property
    def is_operator(self) -> bool:
        """Check if this token is an arithmetic or relational operator."""
        return self.kind in OPERATOR_TYPES

    @property
    def is_terminal(self) -> bool:
        return self.kind == TokenType.END_OF_INPUT

    @property
    def is_error(self) -> bool:
        return self.kind == TokenType.ERROR


# Longest digit run handed to int() at once; stays under the interpreter's
# integer string conversion limit (sys.set_int_max_str_digits)
_INT_CHUNK_DIGITS = 1000


def _digits_to_int(digits: str) -> int:
    """Convert a run of decimal digits of any length to an int."""
    value = 0
    for start in range(0, len(digits), _INT_CHUNK_DIGITS):
        chunk = digits[start:start + _INT_CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


# Lookup tables used by the lexer

# Reserved words, matched against a fully scanned identifier
KEYWORDS = {
    "if": TokenType.IF,
    "do": TokenType.DO,
    "while": TokenType.WHILE,
    "then": TokenType.THEN,
    "print": TokenType.PRINT,
}

# Characters that always form a token on their own
SINGLE_CHAR_TOKENS = {
    ".": TokenType.DOT,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "/": TokenType.DIVIDE,
    "*": TokenType.MULTIPLY,
    "=": TokenType.EQUAL,
    ":": TokenType.COLON,
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
}

# Two-character relational operators, keyed by (first, second) character
COMPOUND_OPERATORS = {
    ("<", "="): TokenType.LESS_OR_EQUAL,
    ("<", ">"): TokenType.NOT_EQUAL,
    (">", "="): TokenType.GREATER_OR_EQUAL,
}

# Fallback when the second character does not complete a compound operator
RELATIONAL_FALLBACK = {
    "<": TokenType.LESS,
    ">": TokenType.GREATER,
}

KEYWORD_TYPES = frozenset(KEYWORDS.values())

OPERATOR_TYPES = frozenset({
    TokenType.PLUS, TokenType.MINUS, TokenType.DIVIDE, TokenType.MULTIPLY,
    TokenType.EQUAL, TokenType.NOT_EQUAL, TokenType.GREATER, TokenType.LESS,
    TokenType.LESS_OR_EQUAL, TokenType.GREATER_OR_EQUAL,
})
