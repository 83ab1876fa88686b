"""
minilang Lexer Package

Implements a from-scratch lexical analyzer (tokenizer) for minilang, a small
imperative language with if/do/while/then/print statements, integer
arithmetic and relational operators.

Key Features:
- Pull-based API: next_token() hands out one token per call
- One token of pushback via push_back()
- Unrecognized characters become ERROR tokens instead of exceptions
- END_OF_INPUT repeats forever once the input is exhausted

Author: xwest
"""

from .tokens import Token, TokenType, KEYWORDS
from .lexer import Tokenizer, tokenize_string, tokenize_file
from .errors import Diagnostic, LexerError

__all__ = [
    "Tokenizer",
    "Token",
    "TokenType",
    "KEYWORDS",
    "Diagnostic",
    "LexerError",
    "tokenize_string",
    "tokenize_file",
]
