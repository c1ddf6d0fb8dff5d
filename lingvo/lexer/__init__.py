"""
Lingvo Lexer Package

Implements the lexical scanner for the Lingvo language. Scanning is total:
unknown characters and unterminated strings are tokenized and recorded as
warnings instead of raising.
"""

from .tokens import Token, TokenType, SourceLocation
from .lexer import Lexer, tokenize, tokenize_string, tokenize_file
from .errors import Diagnostic, LexerWarning

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "SourceLocation",
    "Diagnostic",
    "LexerWarning",
    "tokenize",
    "tokenize_string",
    "tokenize_file",
]
