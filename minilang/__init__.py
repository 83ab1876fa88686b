"""
minilang Package

Front end for minilang, a small imperative teaching language. Only the
lexical stage exists so far: a parser is expected to consume the flat token
stream produced here.

Architecture:
    minilang/
    ├── lexer/           # Tokenization and lexical analysis
    └── cli.py           # minilang-lex command line driver

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__license__ = "MIT"

from .lexer import Tokenizer, Token, TokenType, LexerError

__all__ = [
    # Core classes
    "Tokenizer",
    "Token",
    "TokenType",
    "LexerError",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
