"""
LoopScript Error Hierarchy
==========================

This module defines the root of the exception hierarchy for LoopScript
tooling. Every exception raised by the package inherits from
LoopScriptError, so callers can catch all LoopScript errors with a single
except clause.

Exception Hierarchy
-------------------
LoopScriptError (base)
└── LexerError (loopscript.lexer.errors)
    ├── UnexpectedCharacterError - character starts no valid token
    ├── UnterminatedStringError - missing closing double quote
    ├── UnterminatedCharError - missing closing single quote
    └── MalformedNumericLiteralError - letter glued to a number

Error messages follow this format:
    filename:line:column: error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass


# =============================================================================
# Base Exception Class
# =============================================================================

class LoopScriptError(Exception):
    """
    Base exception for all LoopScript errors.

        try:
            tokens = tokenize(source)
        except LoopScriptError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    A position in source text, used for diagnostics.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"
