"""
Tests for the minilang-lex command line driver.

Author: xwest
"""

import unittest
import io
import json
import sys
import os
import tempfile
from contextlib import redirect_stdout, redirect_stderr

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from minilang.cli import main, scan_tokens, EXIT_OK, EXIT_LEX_ERROR, EXIT_READ_ERROR
from minilang.lexer.lexer import Tokenizer
from minilang.lexer.tokens import TokenType


class TestCommandLine(unittest.TestCase):

    def setUp(self):
        """Set up a scratch directory for program files."""
        self._tmp = tempfile.TemporaryDirectory()
        self.tmpdir = self._tmp.name

    def tearDown(self):
        self._tmp.cleanup()

    def _write(self, name: str, text: str) -> str:
        path = os.path.join(self.tmpdir, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
        return path

    def _run(self, *argv: str):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            status = main(list(argv))
        return status, out.getvalue(), err.getvalue()

    def test_prints_one_token_per_line(self):
        path = self._write("code.txt", "if x<=10 then print x;")
        status, out, err = self._run(path)

        self.assertEqual(status, EXIT_OK)
        self.assertEqual(err, "")
        self.assertEqual(out.splitlines(), [
            "IF('if')",
            "IDENTIFIER('x')",
            "LESS_OR_EQUAL('<=')",
            "NUMBER('10')",
            "THEN('then')",
            "PRINT('print')",
            "IDENTIFIER('x')",
            "SEMICOLON(';')",
            "END_OF_INPUT('')",
        ])

    def test_json_output(self):
        path = self._write("code.txt", "print 7")
        status, out, _ = self._run(path, "--json")

        self.assertEqual(status, EXIT_OK)
        self.assertEqual(json.loads(out), [
            {"kind": "PRINT", "text": "print"},
            {"kind": "NUMBER", "text": "7"},
            {"kind": "END_OF_INPUT", "text": ""},
        ])

    def test_stops_at_first_error(self):
        path = self._write("bad.txt", "x @ y")
        status, out, err = self._run(path)

        self.assertEqual(status, EXIT_LEX_ERROR)
        self.assertEqual(out.splitlines(), ["IDENTIFIER('x')", "ERROR('')"])
        self.assertIn("Invalid character: '@'", err)
        self.assertIn(f"{path}@2", err)

    def test_keep_going_reports_every_error(self):
        path = self._write("bad.txt", "x @ y $")
        status, out, err = self._run(path, "--keep-going")

        self.assertEqual(status, EXIT_LEX_ERROR)
        self.assertEqual(out.splitlines(), [
            "IDENTIFIER('x')", "ERROR('')", "IDENTIFIER('y')", "ERROR('')", "END_OF_INPUT('')",
        ])
        self.assertEqual(err.count("Invalid character"), 2)

    def test_unreadable_file(self):
        status, out, err = self._run(os.path.join(self.tmpdir, "missing.txt"))

        self.assertEqual(status, EXIT_READ_ERROR)
        self.assertEqual(out, "")
        self.assertIn("Failed to read in code file", err)


class TestScanTokens(unittest.TestCase):

    def test_includes_terminal_token(self):
        with redirect_stderr(io.StringIO()):
            tokens = scan_tokens(Tokenizer("a b"))
        self.assertEqual([t.kind for t in tokens],
                         [TokenType.IDENTIFIER, TokenType.IDENTIFIER, TokenType.END_OF_INPUT])


if __name__ == '__main__':
    unittest.main()
