"""
minilang Lexer - turns program text into tokens

Hand-written scanner, one character at a time. Callers pull tokens with
next_token() and can hand the last one back with push_back() when they
need a single token of lookahead.

xwest
"""

import logging
from typing import Iterator, List, Tuple

from .tokens import (
    Token, TokenType, KEYWORDS, SINGLE_CHAR_TOKENS, COMPOUND_OPERATORS,
    RELATIONAL_FALLBACK
)
from .errors import create_invalid_character_error

logger = logging.getLogger(__name__)

DECIMAL_DIGITS = frozenset("0123456789")

# str.isspace() also accepts the information separators U+001C..U+001F, which
# are not Unicode White_Space
INFORMATION_SEPARATORS = frozenset("\x1c\x1d\x1e\x1f")


class Tokenizer:
    """
    minilang lexical analyzer.

    Owns the source text and a cursor (``pos``) that only ever moves
    forward. Exactly one token can be pushed back for re-reading.

    A Tokenizer is not safe to share between threads: the peek-then-consume
    and pushback protocol assumes a single owner reading sequentially.

    Example:
        "one two three"
        next_token() => IDENTIFIER('one')
        next_token() => IDENTIFIER('two')
        push_back()
        next_token() => IDENTIFIER('two')
        next_token() => IDENTIFIER('three')
    """

    def __init__(self, source: str, filename: str = "<string>"):
        """
        Initialize the lexer with source code.

        Args:
            source: Complete program text
            filename: Name of source file for error reporting
        """
        self.source = source
        self.filename = filename
        self.pos = 0
        self.last_token = Token.nil()
        self.pending_replay = False
        logger.debug("Tokenizer created for %s (%d characters)", filename, len(source))

    def next_token(self) -> Token:
        """
        Return the next token in the source.

        If push_back() was called since the last read, the cached token is
        returned again and the cursor does not move.
        """
        if self.pending_replay:
            self.pending_replay = False
            return self.last_token

        self.pos = self._skip_whitespace(self.pos)
        if self.pos >= len(self.source):
            if self.last_token.kind != TokenType.END_OF_INPUT:
                logger.debug("%s: end of input at offset %d", self.filename, self.pos)
            self.last_token = Token(TokenType.END_OF_INPUT, "")
            return self.last_token

        char = self.source[self.pos]
        self.pos += 1

        if char in SINGLE_CHAR_TOKENS:
            token = Token(SINGLE_CHAR_TOKENS[char], char)
        elif char in RELATIONAL_FALLBACK:
            token = self._scan_relational(char)
        elif char in DECIMAL_DIGITS:
            # Step back so the scanner sees the first digit too
            self.pos, token = self._scan_number(self.pos - 1)
        elif char.isalpha():
            self.pos, token = self._scan_identifier_or_keyword(self.pos - 1)
        else:
            logger.debug("%s: unrecognized character %r at offset %d",
                         self.filename, char, self.pos - 1)
            token = Token(TokenType.ERROR, "")

        self.last_token = token
        return token

    def push_back(self):
        """
        Make the next call of next_token() return the token it returned last.

        Calling this twice in a row is the same as calling it once.
        """
        self.pending_replay = True

    @property
    def at_end(self) -> bool:
        """True when nothing but whitespace is left after the cursor."""
        return self._skip_whitespace(self.pos) >= len(self.source)

    def __iter__(self) -> Iterator[Token]:
        """
        Yield tokens up to and including END_OF_INPUT.

        ERROR tokens are yielded too; scanning resumes after the bad character.
        """
        while True:
            token = self.next_token()
            yield token
            if token.kind == TokenType.END_OF_INPUT:
                return

    def _skip_whitespace(self, index: int) -> int:
        """Return the index of the first non-space character at or after index."""
        while index < len(self.source) and _is_whitespace(self.source[index]):
            index += 1
        return index

    def _peek(self) -> str:
        """Character under the cursor, or '' past the end of input."""
        if self.pos < len(self.source):
            return self.source[self.pos]
        return ''

    def _scan_relational(self, char: str) -> Token:
        """Resolve '<' or '>' into a one- or two-character operator."""
        next_char = self._peek()
        compound = COMPOUND_OPERATORS.get((char, next_char))
        if compound is not None:
            self.pos += 1
            return Token(compound, char + next_char)
        return Token(RELATIONAL_FALLBACK[char], char)

    def _scan_number(self, start: int) -> Tuple[int, Token]:
        """
        Starting at start, build a NUMBER token from consecutive digits.

        Returns the index of the first non-digit character and the token.
        """
        end = start + 1
        while end < len(self.source) and self.source[end] in DECIMAL_DIGITS:
            end += 1
        return end, Token(TokenType.NUMBER, self.source[start:end])

    def _scan_identifier_or_keyword(self, start: int) -> Tuple[int, Token]:
        """
        Starting at start, build an IDENTIFIER or keyword token.

        The whole word is scanned before the keyword table is consulted, so
        'printer' is an identifier and not PRINT followed by 'er'.

        Returns the index of the first character after the word and the token.
        """
        if not self.source[start].isalpha():
            return start + 1, Token(TokenType.ERROR, "")

        end = start + 1
        while end < len(self.source) and self.source[end].isalnum():
            end += 1

        lexeme = self.source[start:end]
        token_type = KEYWORDS.get(lexeme, TokenType.IDENTIFIER)
        return end, Token(token_type, lexeme)


def _is_whitespace(char: str) -> bool:
    """Unicode White_Space: str.isspace() minus the information separators."""
    return char.isspace() and char not in INFORMATION_SEPARATORS


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        List of tokens ending with END_OF_INPUT

    Raises:
        LexerError: At the first unrecognized character
    """
    lexer = Tokenizer(source, filename)
    tokens = []

    for token in lexer:
        if token.kind == TokenType.ERROR:
            # The cursor has already stepped over the bad character
            offset = lexer.pos - 1
            raise create_invalid_character_error(source[offset], filename, offset)
        tokens.append(token)

    return tokens


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Args:
        filepath: Path to source file

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing fails
        OSError: If file cannot be read
        UnicodeDecodeError: If the file is not valid UTF-8
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize_string(source, filepath)
