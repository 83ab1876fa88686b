#!/usr/bin/env python3
"""
Tokenizer Throughput Test Suite
===============================

Scans generated programs of increasing size and checks that tokenizing
stays linear and within a generous time budget.
"""

import pytest
import time
import sys
import os
from dataclasses import dataclass

# Add project root for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))

from minilang.lexer.lexer import Tokenizer
from minilang.lexer.tokens import TokenType


STATEMENT = "while counter1 >= 10 do { total = total + counter1 * 3; print (total / 2) };\n"
TOKENS_PER_STATEMENT = 22


@dataclass
class ThroughputTarget:
    """Time budget for a program of a given number of statements"""
    statements: int
    max_time_ms: float


def make_program(statements: int) -> str:
    return STATEMENT * statements


class TestTokenizerThroughput:
    """
    Throughput checks for the tokenizer.
    """

    TARGETS = [
        ThroughputTarget(100, 250.0),
        ThroughputTarget(1000, 2500.0),
        ThroughputTarget(5000, 12500.0),
    ]

    @pytest.mark.performance
    @pytest.mark.parametrize("target", TARGETS)
    def test_scan_within_budget(self, target):
        source = make_program(target.statements)

        start = time.perf_counter()
        tokens = list(Tokenizer(source))
        elapsed_ms = (time.perf_counter() - start) * 1000

        assert len(tokens) == target.statements * TOKENS_PER_STATEMENT + 1
        assert tokens[-1].kind == TokenType.END_OF_INPUT
        assert elapsed_ms < target.max_time_ms, (
            f"{target.statements} statements took {elapsed_ms:.1f}ms "
            f"(budget {target.max_time_ms}ms)"
        )

    @pytest.mark.performance
    def test_scan_time_grows_linearly(self):
        """Ten times the input should not cost a hundred times the time."""
        def measure(statements):
            source = make_program(statements)
            start = time.perf_counter()
            for _ in Tokenizer(source):
                pass
            return time.perf_counter() - start

        small = min(measure(200) for _ in range(3))
        large = min(measure(2000) for _ in range(3))

        assert large < small * 40

    def test_long_whitespace_run(self):
        source = " " * 200_000 + "x"
        lexer = Tokenizer(source)
        assert lexer.next_token().text == "x"
        assert lexer.next_token().kind == TokenType.END_OF_INPUT
