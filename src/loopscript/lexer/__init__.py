"""
LoopScript Lexer
================

Turns LoopScript source text into a token list for the parser.

Pipeline
--------
    Source text → Cursor → Scanner → list[Token] (ends with EOF)

Usage
-----
>>> from loopscript.lexer import tokenize
>>> [t.type.name for t in tokenize("print x;")]
['PRINT', 'IDENTIFIER', 'SEMICOLON', 'EOF']

Errors never yield a partial list. Use scan() to get a ScanResult
instead of an exception:

>>> from loopscript.lexer import scan
>>> result = scan("3abc")
>>> result.ok, result.error.kind.name
(False, 'MALFORMED_NUMERIC_LITERAL')
"""

from loopscript.lexer.cursor import Cursor
from loopscript.lexer.errors import (
    ErrorKind,
    LexerError,
    UnexpectedCharacterError,
    UnterminatedStringError,
    UnterminatedCharError,
    MalformedNumericLiteralError,
)
from loopscript.lexer.scanner import (
    Scanner,
    ScannerOptions,
    ScanResult,
    tokenize,
    scan,
)
from loopscript.lexer.tokens import Token, TokenType, KEYWORDS

__all__ = [
    # Main API
    "Scanner",
    "ScannerOptions",
    "ScanResult",
    "tokenize",
    "scan",
    # Components
    "Cursor",
    "Token",
    "TokenType",
    "KEYWORDS",
    # Errors
    "ErrorKind",
    "LexerError",
    "UnexpectedCharacterError",
    "UnterminatedStringError",
    "UnterminatedCharError",
    "MalformedNumericLiteralError",
]
