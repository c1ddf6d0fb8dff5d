"""
Lingvo Front End Package

Scanner and parser for Lingvo, a small statically typed language with
Esperanto keywords.

Architecture:
    lingvo/
    ├── lexer/           # Tokenization and lexical diagnostics
    ├── parser/          # Syntax analysis and AST generation
    ├── printer.py       # Indented AST dump
    └── cli.py           # Command line front end

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType, tokenize
from .parser import Parser, ParseError, ParseResult, try_parse, parse_string, parse_file
from .printer import dump

__all__ = [
    # Core classes
    "Lexer",
    "Parser",
    "Token",
    "TokenType",
    "ParseError",
    "ParseResult",

    # Functions
    "tokenize",
    "try_parse",
    "parse_string",
    "parse_file",
    "dump",

    # Version info
    "__version__",
    "__license__",
]
