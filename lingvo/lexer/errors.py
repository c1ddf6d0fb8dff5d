"""
Diagnostics for the Lingvo lexer.

The lexer never fails: unrecognized characters become UNKNOWN tokens and an
unterminated string simply ends at end of input. Both anomalies are recorded
as warnings so callers can surface them before the parser trips over them.
"""

from typing import Optional, List
from dataclasses import dataclass
from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """Base class for diagnostics (errors, warnings, info)."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning", "info", "hint"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerWarning:
    """
    Represents a lexical anomaly that doesn't stop tokenization.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="warning",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def message(self) -> str:
        return self.diagnostic.message

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    def __str__(self) -> str:
        return str(self.diagnostic)

    def __repr__(self) -> str:
        return f"LexerWarning({self.code}, {self.message!r}, {self.location})"


WARNING_CODES = {
    "L001": "Unknown character",
    "L002": "Unterminated string literal",
}


def create_unknown_character_warning(char: str, location: SourceLocation) -> LexerWarning:
    """Create a warning for a character that starts no token."""
    if char == "!":
        help_text = "'!' is only valid as part of '!='."
        suggestions = ["Use '!=' for not equal"]
    elif char.isprintable():
        help_text = f"The character '{char}' is not valid in Lingvo source code."
        suggestions = []
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."
        suggestions = []

    return LexerWarning(
        message=f"Unknown character: '{char}'",
        location=location,
        code="L001",
        help_text=help_text,
        suggestions=suggestions
    )


def create_unterminated_string_warning(location: SourceLocation) -> LexerWarning:
    """Create a warning for a string literal closed by end of input."""
    return LexerWarning(
        message="Unterminated string literal",
        location=location,
        code="L002",
        help_text="The string runs to the end of the input.",
        suggestions=["Add a closing '\"' quote", "Check for unescaped quotes in the string"]
    )
