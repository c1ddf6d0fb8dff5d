"""
Lingvo Lexer - turns source text into a flat token stream.

The lexer is total: it never raises on any input. Characters that start no
token come out as UNKNOWN tokens and an unterminated string ends at end of
input. Both cases are also recorded as warnings. Detecting the actual syntax
error is left to the parser.
"""

import logging
import string
from typing import List

from .tokens import (
    Token, TokenType, SourceLocation, RESERVED_WORDS, SINGLE_CHAR_TOKENS,
    TWO_CHAR_OPERATORS, ESCAPE_SEQUENCES
)
from .errors import (
    LexerWarning, create_unknown_character_warning,
    create_unterminated_string_warning
)

logger = logging.getLogger(__name__)

# ASCII only, matching the C locale classification
WHITESPACE = frozenset(" \t\n\r\v\f")
DIGITS = frozenset(string.digits)
IDENTIFIER_START = frozenset(string.ascii_letters + "_")
IDENTIFIER_CONTINUE = frozenset(string.ascii_letters + string.digits + "_")


class Lexer:
    """
    Lingvo lexical analyzer.

    Converts source code text into a list of tokens terminated by an EOF
    token. Lines are 1-based, columns 0-based.
    """

    def __init__(self, source: str, filename: str = "<string>"):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            filename: Name of source file for diagnostics
        """
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.column = 0
        self.tokens: List[Token] = []
        self.warnings: List[LexerWarning] = []

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source code.

        Calling this again restarts from the beginning and yields an
        identical list.

        Returns:
            List of tokens including the EOF token
        """
        self.pos = 0
        self.line = 1
        self.column = 0
        self.tokens = []
        self.warnings = []

        while self.pos < len(self.source):
            if self._skip_whitespace():
                continue
            if self._skip_comment():
                continue

            self.tokens.append(self._next_token())

        self.tokens.append(Token(TokenType.EOF, "", self.line, self.column))

        logger.debug("Tokenized %s: %d tokens, %d warnings",
                     self.filename, len(self.tokens), len(self.warnings))
        return self.tokens

    def _next_token(self) -> Token:
        """Scan exactly one token starting at the cursor."""
        current_char = self._current()

        if current_char in DIGITS:
            return self._tokenize_number()

        if current_char == '"':
            return self._tokenize_string()

        if current_char in IDENTIFIER_START:
            return self._tokenize_identifier_or_keyword()

        return self._tokenize_operator()

    def _tokenize_number(self) -> Token:
        """Tokenize a number: digits with at most one decimal point."""
        line, column = self.line, self.column
        start_pos = self.pos
        seen_dot = False

        while self._current() in DIGITS or self._current() == '.':
            if self._current() == '.':
                # A second '.' ends the literal
                if seen_dot:
                    break
                seen_dot = True
            self._advance()

        return Token(TokenType.NUMBER, self.source[start_pos:self.pos], line, column)

    def _tokenize_string(self) -> Token:
        """Tokenize a string literal, resolving escape sequences."""
        line, column = self.line, self.column
        self._advance()  # Skip opening quote

        value_parts = []

        while self.pos < len(self.source) and self._current() != '"':
            if self._current() == '\\':
                self._advance()  # Skip backslash
                if self.pos >= len(self.source):
                    break
                escape_char = self._current()
                value_parts.append(ESCAPE_SEQUENCES.get(escape_char, escape_char))
            else:
                value_parts.append(self._current())
            self._advance()

        if self._current() == '"':
            self._advance()  # Skip closing quote
        else:
            warning = create_unterminated_string_warning(self._location(line, column))
            self.warnings.append(warning)
            logger.debug("Unterminated string starting at %s", warning.location)

        return Token(TokenType.STRING, ''.join(value_parts), line, column)

    def _tokenize_identifier_or_keyword(self) -> Token:
        """Tokenize an identifier or reserved word."""
        line, column = self.line, self.column
        start_pos = self.pos

        while self._current() in IDENTIFIER_CONTINUE:
            self._advance()

        lexeme = self.source[start_pos:self.pos]
        token_type = RESERVED_WORDS.get(lexeme, TokenType.IDENTIFIER)

        return Token(token_type, lexeme, line, column)

    def _tokenize_operator(self) -> Token:
        """Tokenize an operator or punctuation, merging two-character operators."""
        line, column = self.line, self.column

        two_chars = self.source[self.pos:self.pos + 2]
        if two_chars in TWO_CHAR_OPERATORS:
            self._advance_by(2)
            return Token(TWO_CHAR_OPERATORS[two_chars], two_chars, line, column)

        char = self._current()
        self._advance()

        token_type = SINGLE_CHAR_TOKENS.get(char)
        if token_type is None:
            warning = create_unknown_character_warning(char, self._location(line, column))
            self.warnings.append(warning)
            logger.debug("Unknown character %r at %s", char, warning.location)
            token_type = TokenType.UNKNOWN

        return Token(token_type, char, line, column)

    def _skip_whitespace(self) -> bool:
        """Skip whitespace. Returns True if anything was skipped."""
        skipped = False
        while self._current() in WHITESPACE:
            skipped = True
            self._advance()
        return skipped

    def _skip_comment(self) -> bool:
        """Skip a // line comment up to the newline. Returns True if one was skipped."""
        if not (self._current() == '/' and self._peek() == '/'):
            return False
        while self.pos < len(self.source) and self._current() != '\n':
            self._advance()
        return True

    def _current(self) -> str:
        """Character at the cursor, or '' at end of input."""
        if self.pos < len(self.source):
            return self.source[self.pos]
        return ''

    def _peek(self, offset: int = 1) -> str:
        """Peek at character ahead without advancing."""
        peek_pos = self.pos + offset
        if peek_pos < len(self.source):
            return self.source[peek_pos]
        return ''

    def _advance(self):
        """Advance position by one character, updating line/column."""
        if self.pos < len(self.source):
            if self.source[self.pos] == '\n':
                self.line += 1
                self.column = 0
            else:
                self.column += 1
            self.pos += 1

    def _advance_by(self, count: int):
        """Advance position by multiple characters."""
        for _ in range(count):
            self._advance()

    def _location(self, line: int, column: int) -> SourceLocation:
        return SourceLocation(self.filename, line, column)

    def has_warnings(self) -> bool:
        """Check if the lexer recorded any anomalies."""
        return len(self.warnings) > 0

    def get_diagnostics(self) -> List[LexerWarning]:
        """Get all diagnostics recorded by the last tokenize() call."""
        return list(self.warnings)


def tokenize(source: str) -> List[Token]:
    """
    Tokenize a source string.

    Never raises; see Lexer for how anomalies are represented.
    """
    return Lexer(source).tokenize()


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for diagnostics

    Returns:
        List of tokens
    """
    lexer = Lexer(source, filename)
    return lexer.tokenize()


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Args:
        filepath: Path to source file

    Returns:
        List of tokens

    Raises:
        IOError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize_string(source, filepath)
