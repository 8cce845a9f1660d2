"""
Tests for scanner diagnostics and the exception hierarchy.
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from minilex.lexer.tokens import SourceLocation
from minilex.lexer.errors import (
    ERROR_CODES, EndOfInput, LexerError, ReadError, create_end_of_input,
    create_invalid_character_error, create_read_error
)


class TestDiagnostics(unittest.TestCase):

    def setUp(self):
        self.location = SourceLocation("demo.src", 3, 7, 40)

    def test_invalid_character_error(self):
        error = create_invalid_character_error(ord(";"), self.location)
        self.assertIsInstance(error, LexerError)
        self.assertEqual(error.code, "L001")
        self.assertEqual(error.location, self.location)

        text = str(error)
        self.assertIn("ERROR: Invalid character: ';'", text)
        self.assertIn("--> demo.src:3:7", text)
        self.assertIn("help:", text)

    def test_invalid_non_ascii_byte(self):
        error = create_invalid_character_error(0xC3, self.location)
        self.assertIn("0xC3", error.diagnostic.help_text)

    def test_end_of_input_is_informational(self):
        end = create_end_of_input(self.location)
        self.assertIsInstance(end, LexerError)
        self.assertEqual(end.diagnostic.severity, "info")
        self.assertEqual(end.code, "L000")
        self.assertTrue(str(end).startswith("INFO: End of input"))

    def test_read_error(self):
        error = create_read_error("surrogates not allowed", self.location)
        self.assertIsInstance(error, ReadError)
        self.assertNotIsInstance(error, EndOfInput)
        self.assertEqual(error.diagnostic.severity, "error")
        self.assertIn("surrogates not allowed", error.diagnostic.message)

    def test_codes_are_documented(self):
        for code in ("L000", "L001", "L011"):
            self.assertIn(code, ERROR_CODES)


if __name__ == '__main__':
    unittest.main()
