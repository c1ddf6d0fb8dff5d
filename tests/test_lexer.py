"""
Test suite for the Lingvo lexer.

Tests cover:
- Token kinds, lexemes and source positions
- Number and string literals, escape sequences
- Reserved words versus identifiers
- Comments, whitespace and two-character operators
- Unknown characters and unterminated strings (warnings, no exceptions)
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from lingvo.lexer import Lexer, Token, TokenType, SourceLocation, tokenize
from lingvo.lexer.tokens import RESERVED_WORDS, KEYWORDS


def kinds(source):
    return [token.type for token in tokenize(source)]


class TestLexerBasics(unittest.TestCase):
    """Token kinds and positions."""

    def test_empty_source_yields_only_eof(self):
        tokens = tokenize("")
        self.assertEqual(len(tokens), 1)
        self.assertEqual(tokens[0], Token(TokenType.EOF, "", 1, 0))

    def test_whitespace_and_comments_produce_no_tokens(self):
        tokens = tokenize("  \t\n// a comment\n   // another")
        self.assertEqual([t.type for t in tokens], [TokenType.EOF])

    def test_variable_declaration(self):
        self.assertEqual(kinds("entjera x = 5;"), [
            TokenType.ENTJERA, TokenType.IDENTIFIER, TokenType.ASSIGN,
            TokenType.NUMBER, TokenType.SEMICOLON, TokenType.EOF,
        ])

    def test_positions_are_one_based_lines_zero_based_columns(self):
        tokens = tokenize("entjera x;\n  reveni x;")
        records = [t.as_record() for t in tokens]
        self.assertEqual(records, [
            ("ENTJERA", "entjera", 1, 0),
            ("IDENTIFIER", "x", 1, 8),
            ("SEMICOLON", ";", 1, 9),
            ("REVENI", "reveni", 2, 2),
            ("IDENTIFIER", "x", 2, 9),
            ("SEMICOLON", ";", 2, 10),
            ("EOF", "", 2, 11),
        ])

    def test_comment_runs_to_end_of_line(self):
        tokens = tokenize("x // y z\ny")
        self.assertEqual([t.as_record() for t in tokens], [
            ("IDENTIFIER", "x", 1, 0),
            ("IDENTIFIER", "y", 2, 0),
            ("EOF", "", 2, 1),
        ])

    def test_single_slash_is_divide(self):
        self.assertEqual(kinds("a / b"), [
            TokenType.IDENTIFIER, TokenType.DIVIDE, TokenType.IDENTIFIER, TokenType.EOF,
        ])

    def test_punctuation(self):
        self.assertEqual(kinds("(){};,@."), [
            TokenType.LEFT_PAREN, TokenType.RIGHT_PAREN,
            TokenType.LEFT_BRACE, TokenType.RIGHT_BRACE,
            TokenType.SEMICOLON, TokenType.COMMA, TokenType.AT, TokenType.DOT,
            TokenType.EOF,
        ])

    def test_arithmetic_operators(self):
        self.assertEqual(kinds("+ - * /"), [
            TokenType.PLUS, TokenType.MINUS, TokenType.MULTIPLY, TokenType.DIVIDE,
            TokenType.EOF,
        ])


class TestOperators(unittest.TestCase):
    """Two-character operator merging."""

    def test_two_character_operators(self):
        tokens = tokenize("== != <= >=")
        self.assertEqual([(t.type, t.text) for t in tokens[:-1]], [
            (TokenType.EQUAL, "=="),
            (TokenType.NOT_EQUAL, "!="),
            (TokenType.LESS_EQUAL, "<="),
            (TokenType.GREATER_EQUAL, ">="),
        ])

    def test_single_character_fallbacks(self):
        self.assertEqual(kinds("= < >"), [
            TokenType.ASSIGN, TokenType.LESS_THAN, TokenType.GREATER_THAN, TokenType.EOF,
        ])

    def test_operators_without_spaces(self):
        self.assertEqual(kinds("a<=b"), [
            TokenType.IDENTIFIER, TokenType.LESS_EQUAL, TokenType.IDENTIFIER, TokenType.EOF,
        ])

    def test_triple_equals_splits(self):
        self.assertEqual(kinds("==="), [TokenType.EQUAL, TokenType.ASSIGN, TokenType.EOF])


class TestNumberLiterals(unittest.TestCase):

    def test_integer(self):
        token = tokenize("42")[0]
        self.assertEqual((token.type, token.text), (TokenType.NUMBER, "42"))

    def test_real(self):
        token = tokenize("3.14")[0]
        self.assertEqual((token.type, token.text), (TokenType.NUMBER, "3.14"))

    def test_trailing_dot_is_part_of_number(self):
        tokens = tokenize("3.")
        self.assertEqual(tokens[0].as_record(), ("NUMBER", "3.", 1, 0))
        self.assertEqual(tokens[1].type, TokenType.EOF)

    def test_second_dot_ends_literal(self):
        tokens = tokenize("1.2.3")
        self.assertEqual([(t.type, t.text) for t in tokens[:-1]], [
            (TokenType.NUMBER, "1.2"),
            (TokenType.DOT, "."),
            (TokenType.NUMBER, "3"),
        ])

    def test_leading_dot_is_member_access(self):
        self.assertEqual(kinds(".5"), [TokenType.DOT, TokenType.NUMBER, TokenType.EOF])

    def test_number_then_identifier(self):
        tokens = tokenize("12abc")
        self.assertEqual([(t.type, t.text) for t in tokens[:-1]], [
            (TokenType.NUMBER, "12"),
            (TokenType.IDENTIFIER, "abc"),
        ])


class TestStringLiterals(unittest.TestCase):

    def test_simple_string(self):
        token = tokenize('"saluton"')[0]
        self.assertEqual(token.as_record(), ("STRING", "saluton", 1, 0))

    def test_newline_escape_is_decoded(self):
        token = tokenize('"a\\nb"')[0]
        self.assertEqual(token.text, "a\nb")

    def test_known_escapes(self):
        token = tokenize('"\\t\\\\\\""')[0]
        self.assertEqual(token.text, '\t\\"')

    def test_unknown_escape_drops_backslash(self):
        token = tokenize('"\\q"')[0]
        self.assertEqual(token.text, "q")

    def test_unterminated_string_runs_to_end(self):
        tokens = tokenize('"abc')
        self.assertEqual(tokens[0].as_record(), ("STRING", "abc", 1, 0))
        self.assertEqual(tokens[1].as_record(), ("EOF", "", 1, 4))

    def test_trailing_backslash_is_dropped(self):
        tokens = tokenize('"abc\\')
        self.assertEqual(tokens[0].text, "abc")
        self.assertEqual(tokens[1].type, TokenType.EOF)

    def test_multiline_string_advances_line(self):
        tokens = tokenize('"a\nb" x')
        self.assertEqual(tokens[0].text, "a\nb")
        self.assertEqual(tokens[1].as_record(), ("IDENTIFIER", "x", 2, 3))

    def test_comment_marker_inside_string(self):
        tokens = tokenize('"a // b"')
        self.assertEqual(tokens[0].text, "a // b")
        self.assertEqual(len(tokens), 2)


class TestKeywords(unittest.TestCase):

    def test_function_keyword(self):
        self.assertEqual(tokenize("funkcio")[0].type, TokenType.FUNKCIO)

    def test_keyword_prefix_is_identifier(self):
        token = tokenize("funkcion")[0]
        self.assertEqual((token.type, token.text), (TokenType.IDENTIFIER, "funkcion"))

    def test_every_reserved_word(self):
        for word, token_type in RESERVED_WORDS.items():
            with self.subTest(word=word):
                self.assertEqual(tokenize(word)[0].type, token_type)

    def test_keywords_are_case_sensitive(self):
        self.assertEqual(tokenize("Funkcio")[0].type, TokenType.IDENTIFIER)

    def test_identifier_with_underscore_and_digits(self):
        token = tokenize("_nomo2")[0]
        self.assertEqual((token.type, token.text), (TokenType.IDENTIFIER, "_nomo2"))

    def test_keyword_classification(self):
        self.assertTrue(tokenize("entjera")[0].is_type_keyword)
        self.assertTrue(tokenize("entjera")[0].is_keyword)
        self.assertFalse(tokenize("se")[0].is_type_keyword)
        self.assertTrue(tokenize("vero")[0].is_literal)
        self.assertTrue(tokenize("x")[0].is_identifier)

    def test_tables_are_read_only(self):
        with self.assertRaises(TypeError):
            KEYWORDS["kaj"] = TokenType.IDENTIFIER


class TestLexicalAnomalies(unittest.TestCase):
    """The lexer never raises; anomalies become tokens plus warnings."""

    def test_lone_bang_is_unknown(self):
        tokens = tokenize("a ! b")
        self.assertEqual(tokens[1].as_record(), ("UNKNOWN", "!", 1, 2))

    def test_unknown_character(self):
        tokens = tokenize("x $ y")
        self.assertEqual(tokens[1].type, TokenType.UNKNOWN)
        self.assertEqual(tokens[1].text, "$")
        self.assertEqual(tokens[2].type, TokenType.IDENTIFIER)

    def test_non_ascii_letter_is_unknown(self):
        tokens = tokenize("ĉ")
        self.assertEqual(tokens[0].type, TokenType.UNKNOWN)

    def test_warnings_recorded(self):
        lexer = Lexer('! "open', "demo.lingvo")
        tokens = lexer.tokenize()
        self.assertEqual([t.type for t in tokens],
                         [TokenType.UNKNOWN, TokenType.STRING, TokenType.EOF])
        self.assertTrue(lexer.has_warnings())

        diagnostics = lexer.get_diagnostics()
        self.assertEqual([d.code for d in diagnostics], ["L001", "L002"])
        self.assertEqual(diagnostics[0].location, SourceLocation("demo.lingvo", 1, 0))
        self.assertEqual(diagnostics[1].location, SourceLocation("demo.lingvo", 1, 2))
        self.assertIn("Unknown character", str(diagnostics[0]))

    def test_clean_source_has_no_warnings(self):
        lexer = Lexer("entjera x = 1;")
        lexer.tokenize()
        self.assertFalse(lexer.has_warnings())
        self.assertEqual(lexer.get_diagnostics(), [])


class TestTokenization(unittest.TestCase):

    def test_tokenizing_twice_is_identical(self):
        source = 'funkcio f(entjera n) entjera { reveni n * 2; } // fino\n"s"'
        self.assertEqual(tokenize(source), tokenize(source))

    def test_lexer_instance_can_rerun(self):
        lexer = Lexer("se (a) { b; }")
        first = lexer.tokenize()
        second = lexer.tokenize()
        self.assertEqual(first, second)

    def test_token_display(self):
        token = Token(TokenType.IDENTIFIER, "x", 3, 7)
        self.assertEqual(str(token), 'Token(l:0003, c:0007,    IDENTIFIER, "x")')

    def test_token_location(self):
        token = Token(TokenType.NUMBER, "1", 2, 5)
        self.assertEqual(str(token.location("a.lingvo")), "a.lingvo:2:5")

    def test_golden_records(self):
        source = "se (x != 0) {\n  x = x - 1;\n}"
        expected = [
            ("SE", "se", 1, 0),
            ("LEFT_PAREN", "(", 1, 3),
            ("IDENTIFIER", "x", 1, 4),
            ("NOT_EQUAL", "!=", 1, 6),
            ("NUMBER", "0", 1, 9),
            ("RIGHT_PAREN", ")", 1, 10),
            ("LEFT_BRACE", "{", 1, 12),
            ("IDENTIFIER", "x", 2, 2),
            ("ASSIGN", "=", 2, 4),
            ("IDENTIFIER", "x", 2, 6),
            ("MINUS", "-", 2, 8),
            ("NUMBER", "1", 2, 10),
            ("SEMICOLON", ";", 2, 11),
            ("RIGHT_BRACE", "}", 3, 0),
            ("EOF", "", 3, 1),
        ]
        self.assertEqual([t.as_record() for t in tokenize(source)], expected)


if __name__ == '__main__':
    unittest.main()
