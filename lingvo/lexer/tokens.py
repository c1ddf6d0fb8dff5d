"""
Token definitions for the Lingvo lexer.

This module defines all token types supported by Lingvo:
- Literals (numbers, strings) and identifiers
- Keywords and built-in type keywords (Esperanto words)
- Operators and punctuation
- End-of-input and unknown-character markers

The reserved word and operator tables are built once at import time and
are read-only afterwards.
"""

from enum import Enum, auto
from dataclasses import dataclass
from types import MappingProxyType
from typing import Tuple


class TokenType(Enum):
    """
    Enumeration of all token types in Lingvo.

    Organized by category for clarity.
    """

    # ========================================================================
    # Literals
    # ========================================================================
    NUMBER = auto()                 # 42, 3.14, 3.
    STRING = auto()                 # "hello\n"
    IDENTIFIER = auto()             # variable_name

    # ========================================================================
    # Keywords
    # ========================================================================
    FUNKCIO = auto()                # funkcio (function declaration)
    KLASO = auto()                  # klaso (class declaration)
    SE = auto()                     # se (if)
    ALIE = auto()                   # alie (else)
    DUM = auto()                    # dum (while)
    REVENI = auto()                 # reveni (return)
    TIU = auto()                    # tiu (self reference)
    VERO = auto()                   # vero (true)
    MALVERO = auto()                # malvero (false)

    # ========================================================================
    # Type keywords
    # ========================================================================
    ENTJERA = auto()                # entjera (integer)
    REALA = auto()                  # reala (real)
    TEKSTA = auto()                 # teksta (text)
    BULEA = auto()                  # bulea (boolean)
    FUNKCIA = auto()                # funkcia (function type)

    # ========================================================================
    # Operators
    # ========================================================================
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    MULTIPLY = auto()               # *
    DIVIDE = auto()                 # /
    ASSIGN = auto()                 # =
    EQUAL = auto()                  # ==
    NOT_EQUAL = auto()              # !=
    LESS_THAN = auto()              # <
    GREATER_THAN = auto()           # >
    LESS_EQUAL = auto()             # <=
    GREATER_EQUAL = auto()          # >=

    # ========================================================================
    # Punctuation and Delimiters
    # ========================================================================
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }
    SEMICOLON = auto()              # ;
    COMMA = auto()                  # ,
    AT = auto()                     # @ (inline function)
    DOT = auto()                    # . (member access)

    # ========================================================================
    # Special Tokens
    # ========================================================================
    EOF = auto()                    # End of input
    UNKNOWN = auto()                # Unrecognized character, e.g. a lone !


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Lines are 1-based, columns are 0-based.
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the Lingvo language.

    `text` is the exact lexeme, except for strings where it holds the
    decoded value (escape sequences resolved).
    """
    type: TokenType
    text: str
    line: int
    column: int

    def __str__(self) -> str:
        return (f"Token(l:{self.line:04}, c:{self.column:04}, "
                f"{self.type.name:>13}, \"{self.text}\")")

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.text!r}, {self.line}, {self.column})"

    def as_record(self) -> Tuple[str, str, int, int]:
        """Return the token as a (kind, text, line, column) record."""
        return (self.type.name, self.text, self.line, self.column)

    def location(self, filename: str = "<string>") -> SourceLocation:
        """Source location of the token's first character."""
        return SourceLocation(filename, self.line, self.column)

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.type in {
            TokenType.NUMBER, TokenType.STRING,
            TokenType.VERO, TokenType.MALVERO,
        }

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a reserved word (including type keywords)."""
        return self.type in RESERVED_TYPES

    @property
    def is_type_keyword(self) -> bool:
        """Check if this token names a built-in type."""
        return self.type in TYPE_KEYWORDS.values()

    @property
    def is_identifier(self) -> bool:
        """Check if this token is an identifier."""
        return self.type == TokenType.IDENTIFIER


# Lookup tables used by the lexer for keyword/operator recognition

KEYWORDS = MappingProxyType({
    "funkcio": TokenType.FUNKCIO,
    "klaso": TokenType.KLASO,
    "se": TokenType.SE,
    "alie": TokenType.ALIE,
    "dum": TokenType.DUM,
    "reveni": TokenType.REVENI,
    "tiu": TokenType.TIU,
    "vero": TokenType.VERO,
    "malvero": TokenType.MALVERO,
})

TYPE_KEYWORDS = MappingProxyType({
    "entjera": TokenType.ENTJERA,
    "reala": TokenType.REALA,
    "teksta": TokenType.TEKSTA,
    "bulea": TokenType.BULEA,
    "funkcia": TokenType.FUNKCIA,
})

# All reserved words combined
RESERVED_WORDS = MappingProxyType({**KEYWORDS, **TYPE_KEYWORDS})

RESERVED_TYPES = frozenset(RESERVED_WORDS.values())

SINGLE_CHAR_TOKENS = MappingProxyType({
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MULTIPLY,
    "/": TokenType.DIVIDE,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ";": TokenType.SEMICOLON,
    ",": TokenType.COMMA,
    "@": TokenType.AT,
    ".": TokenType.DOT,
    "=": TokenType.ASSIGN,
    "<": TokenType.LESS_THAN,
    ">": TokenType.GREATER_THAN,
})

# Two-character operators, checked before the single-character table
TWO_CHAR_OPERATORS = MappingProxyType({
    "==": TokenType.EQUAL,
    "!=": TokenType.NOT_EQUAL,
    "<=": TokenType.LESS_EQUAL,
    ">=": TokenType.GREATER_EQUAL,
})

# String escape sequences; any other escaped character stands for itself
ESCAPE_SEQUENCES = MappingProxyType({
    "n": "\n",
    "t": "\t",
    "\\": "\\",
    '"': '"',
})
