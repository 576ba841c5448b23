"""
LoopScript - Lexical Analysis for a Small Scripting Language
============================================================

LoopScript is a small imperative scripting language with typed variable
declarations, counted loops and functions:

    var total: int = 0;
    loop i = 1 to 10 {
        total = total + i;
    }
    print total;

This package provides the scanner that turns LoopScript source into the
token list consumed by a parser.

Quick Start
-----------
    >>> from loopscript import tokenize
    >>> tokens = tokenize('var name: string = "Ada";')
    >>> tokens[-2].type.name, tokens[-3].literal
    ('SEMICOLON', 'Ada')
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from loopscript.errors import LoopScriptError, SourceLocation
from loopscript.lexer import (
    Cursor,
    ErrorKind,
    KEYWORDS,
    LexerError,
    MalformedNumericLiteralError,
    Scanner,
    ScannerOptions,
    ScanResult,
    Token,
    TokenType,
    UnexpectedCharacterError,
    UnterminatedCharError,
    UnterminatedStringError,
    scan,
    tokenize,
)

__all__ = [
    "__version__",
    # Scanner
    "Scanner",
    "ScannerOptions",
    "ScanResult",
    "Cursor",
    "Token",
    "TokenType",
    "KEYWORDS",
    "tokenize",
    "scan",
    # Exception hierarchy
    "LoopScriptError",
    "SourceLocation",
    "ErrorKind",
    "LexerError",
    "UnexpectedCharacterError",
    "UnterminatedStringError",
    "UnterminatedCharError",
    "MalformedNumericLiteralError",
]
