#!/usr/bin/env python3
"""
minilang-lex: print the tokens of a minilang program.

Reads a program file, runs the tokenizer over it and prints every token
until the end of input. By default the scan stops at the first
unrecognized character; --keep-going reports it and carries on.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .lexer import Token, TokenType, Tokenizer
from .lexer.errors import create_invalid_character_error

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_LEX_ERROR = 1
EXIT_READ_ERROR = 2
EXIT_INTERRUPTED = 130


def scan_tokens(lexer: Tokenizer, keep_going: bool = False) -> List[Token]:
    """
    Pull tokens from lexer until END_OF_INPUT, or the first ERROR token.

    The terminating token is included. Every ERROR token is reported on
    stderr as a diagnostic.
    """
    tokens = []
    while True:
        token = lexer.next_token()
        tokens.append(token)

        if token.kind == TokenType.ERROR:
            offset = lexer.pos - 1
            error = create_invalid_character_error(lexer.source[offset], lexer.filename, offset)
            sys.stderr.write(str(error))
            if not keep_going:
                break
        elif token.kind == TokenType.END_OF_INPUT:
            break

    return tokens


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the minilang-lex command."""

    parser = argparse.ArgumentParser(
        prog="minilang-lex",
        description="Tokenize a minilang program and print its tokens",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    minilang-lex code.txt                  # One token per line
    minilang-lex code.txt --json           # JSON array of tokens
    minilang-lex code.txt --keep-going     # Report bad characters and continue
        """
    )

    parser.add_argument('path',
                        help='Program file to tokenize (UTF-8)')
    parser.add_argument('--json', action='store_true',
                        help='Output tokens as a JSON array')
    parser.add_argument('--keep-going', action='store_true',
                        help='Continue scanning after an unrecognized character')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Enable debug logging')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    logger.info("Reading in program file %s", args.path)
    try:
        with open(args.path, 'r', encoding='utf-8') as f:
            source = f.read()
    except (OSError, UnicodeDecodeError) as e:
        sys.stderr.write(f"Failed to read in code file {args.path}: {e}\n")
        return EXIT_READ_ERROR

    try:
        tokens = scan_tokens(Tokenizer(source, args.path), keep_going=args.keep_going)
    except KeyboardInterrupt:
        sys.stderr.write("\nTokenization interrupted by user\n")
        return EXIT_INTERRUPTED

    if args.json:
        print(json.dumps([{"kind": t.kind.name, "text": t.text} for t in tokens], indent=2))
    else:
        for token in tokens:
            print(token)

    had_errors = any(t.kind == TokenType.ERROR for t in tokens)
    logger.info("Program file tokens read: %d tokens", len(tokens))
    return EXIT_LEX_ERROR if had_errors else EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
