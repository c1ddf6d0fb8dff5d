"""
Error handling for the Lingvo parser.

The parser stops at the first syntax error. A ParseError records the
message, the offending token and the cursor position so the caller can
report exactly where parsing gave up.
"""

from enum import Enum
from typing import Optional, List

from ..lexer.tokens import Token, TokenType, SourceLocation
from ..lexer.errors import Diagnostic


class ParseErrorKind(Enum):
    """Categories of syntax errors, valued by their diagnostic code."""
    EXPECTED_TOKEN = "P001"     # an expected token was not found
    UNEXPECTED_TOKEN = "P002"   # no expression form starts with this token
    UNKNOWN_TYPE = "P003"       # a type keyword was required
    NESTING_TOO_DEEP = "P004"   # nesting exceeded the interpreter stack


class ParseError(Exception):
    """
    Exception raised when the parser encounters a syntax error.

    Attributes:
        message: Human-readable message, ending in "at line N"
        kind: Error category
        token: The token the parser was looking at
        position: Index of that token in the token list
        diagnostic: Full diagnostic with help text and suggestions
    """

    def __init__(
        self,
        message: str,
        kind: ParseErrorKind,
        token: Token,
        position: int,
        filename: str = "<string>",
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.token = token
        self.position = position
        self.diagnostic = Diagnostic(
            message=message,
            location=token.location(filename),
            severity="error",
            code=kind.value,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def line(self) -> int:
        return self.token.line

    @property
    def code(self) -> str:
        return self.kind.value

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    def __str__(self) -> str:
        return str(self.diagnostic)


class SyntaxErrorHints:
    """Suggestions attached to syntax errors."""

    MISSING_TOKEN_SUGGESTIONS = {
        TokenType.SEMICOLON: ["Add a semicolon ';' to end the statement"],
        TokenType.RIGHT_PAREN: ["Add a closing parenthesis ')'"],
        TokenType.LEFT_PAREN: ["Add an opening parenthesis '('"],
        TokenType.RIGHT_BRACE: ["Add a closing brace '}'"],
        TokenType.LEFT_BRACE: ["Add an opening brace '{' to start a block"],
        TokenType.IDENTIFIER: ["Add a name here"],
    }

    @staticmethod
    def suggest_missing_token(expected: TokenType, found: Token) -> List[str]:
        """Suggest what token might be missing."""
        suggestions = list(SyntaxErrorHints.MISSING_TOKEN_SUGGESTIONS.get(expected, []))

        if found.type == TokenType.UNKNOWN and found.text == "!":
            suggestions.append("Use '!=' for not equal")
        elif found.type == TokenType.ASSIGN and expected == TokenType.SEMICOLON:
            suggestions.append("Only a plain variable can be assigned to")

        return suggestions


# Helper functions for creating common parser errors

def create_expected_token_error(expected: TokenType, message: str, found: Token,
                                position: int, filename: str = "<string>") -> ParseError:
    """Create an error for a token that was required but not found."""
    return ParseError(
        message=f"{message} at line {found.line}",
        kind=ParseErrorKind.EXPECTED_TOKEN,
        token=found,
        position=position,
        filename=filename,
        help_text=f"Expected {expected.name}, found {found.type.name}.",
        suggestions=SyntaxErrorHints.suggest_missing_token(expected, found)
    )


def create_unexpected_token_error(found: Token, position: int,
                                  filename: str = "<string>") -> ParseError:
    """Create an error for a token that cannot start an expression."""
    if found.type == TokenType.EOF:
        help_text = "The input ended where an expression was expected."
    else:
        help_text = f"'{found.text}' ({found.type.name}) cannot start an expression."

    return ParseError(
        message=f"Unexpected token in expression at line {found.line}",
        kind=ParseErrorKind.UNEXPECTED_TOKEN,
        token=found,
        position=position,
        filename=filename,
        help_text=help_text,
        suggestions=SyntaxErrorHints.suggest_missing_token(TokenType.UNKNOWN, found)
    )


def create_unknown_type_error(found: Token, position: int,
                              filename: str = "<string>") -> ParseError:
    """Create an error for a missing type keyword."""
    return ParseError(
        message=f"Expected type at line {found.line}",
        kind=ParseErrorKind.UNKNOWN_TYPE,
        token=found,
        position=position,
        filename=filename,
        help_text=f"'{found.text}' is not a type.",
        suggestions=["Use one of: entjera, reala, teksta, bulea, funkcia"]
    )


def create_nesting_error(found: Token, position: int,
                         filename: str = "<string>") -> ParseError:
    """Create an error for input nested deeper than the parser can recurse."""
    return ParseError(
        message=f"Nesting too deep at line {found.line}",
        kind=ParseErrorKind.NESTING_TOO_DEEP,
        token=found,
        position=position,
        filename=filename,
        help_text="Parentheses, blocks or function literals are nested too deeply.",
        suggestions=["Split the expression using intermediate variables"]
    )
