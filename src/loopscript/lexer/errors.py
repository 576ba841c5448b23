"""
LoopScript Lexer Errors
=======================

Every lexical error is fatal: the scanner raises at the point of detection
and the scan is abandoned. Each error records where the failing token
started and the partial lexeme scanned so far.

Exception Hierarchy
-------------------
LexerError (base for all lexical errors)
├── UnexpectedCharacterError - character starts no valid token
├── UnterminatedStringError - end of input before closing '"'
├── UnterminatedCharError - missing closing "'" or no character at all
└── MalformedNumericLiteralError - number immediately followed by a letter

Example:
    demo.ls:3:9: error: character in number literal near '3'
        var a = 3abc;
                ^
    hint: separate the number from the name that follows it
"""

from enum import Enum
from typing import Optional

from loopscript.errors import LoopScriptError, SourceLocation


class ErrorKind(Enum):
    """Tag identifying which lexical rule failed."""

    UNEXPECTED_CHARACTER = "unexpected character"
    UNTERMINATED_STRING = "unterminated string"
    UNTERMINATED_CHAR = "unterminated char"
    MALFORMED_NUMERIC_LITERAL = "malformed numeric literal"


# =============================================================================
# Base Lexer Exception
# =============================================================================

class LexerError(LoopScriptError):
    """
    Base exception for lexical errors.

    Attributes:
        message: The error description
        location: Start of the token being scanned when the error occurred
        near: Source text from the token start up to the failure point
        hint: A suggestion for fixing the error
        source_line: The full source line containing the token start
    """

    kind: Optional[ErrorKind] = None

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        near: str = "",
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.near = near
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    @property
    def line(self) -> Optional[int]:
        return self.location.line if self.location else None

    @property
    def column(self) -> Optional[int]:
        return self.location.column if self.location else None

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

            demo.ls:1:5: error: unexpected '!' near '!'
                x = !y;
                    ^
        """
        parts = []

        description = f"{self.message} near '{_escape(self.near)}'"
        if self.location:
            parts.append(f"{self.location}: error: {description}")
        else:
            parts.append(f"error: {description}")

        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


def _escape(text: str) -> str:
    return text.replace("\n", "\\n").replace("\0", "\\0")


# =============================================================================
# Specific Lexer Errors
# =============================================================================

class UnexpectedCharacterError(LexerError):
    """
    A character that cannot start any token.

    LoopScript has no standalone '!', so a '!' not followed by '=' also
    ends up here, as does a '.' left behind by a number such as "3.".
    """

    kind = ErrorKind.UNEXPECTED_CHARACTER


class UnterminatedStringError(LexerError):
    """
    String literal with no closing double quote before end of input.

    Example:
        print "hello;
    """

    kind = ErrorKind.UNTERMINATED_STRING

    def __init__(
        self,
        location: Optional[SourceLocation] = None,
        near: str = "",
        source_line: Optional[str] = None,
    ):
        super().__init__(
            "unterminated string literal",
            location=location,
            near=near,
            hint="add closing '\"' to complete the string",
            source_line=source_line,
        )


class UnterminatedCharError(LexerError):
    """Character literal missing its character or its closing quote."""

    kind = ErrorKind.UNTERMINATED_CHAR

    def __init__(
        self,
        location: Optional[SourceLocation] = None,
        near: str = "",
        source_line: Optional[str] = None,
    ):
        super().__init__(
            "unterminated char literal",
            location=location,
            near=near,
            hint="char literals hold exactly one character, e.g. 'a'",
            source_line=source_line,
        )


class MalformedNumericLiteralError(LexerError):
    """
    Numeric literal immediately followed by a letter.

    Example:
        var n: int = 3abc;
    """

    kind = ErrorKind.MALFORMED_NUMERIC_LITERAL

    def __init__(
        self,
        location: Optional[SourceLocation] = None,
        near: str = "",
        source_line: Optional[str] = None,
        message: str = "character in number literal",
        hint: str = "separate the number from the name that follows it",
    ):
        super().__init__(
            message,
            location=location,
            near=near,
            hint=hint,
            source_line=source_line,
        )
