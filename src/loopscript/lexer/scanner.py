"""
LoopScript Scanner
==================

Converts LoopScript source text into a list of tokens for the parser.

The scanner checkpoints its Cursor before every token, consumes one
character and dispatches on it. Whitespace produces no token; every other
accepted character produces exactly one. The list always ends with a
single EOF token whose lexeme is "\\0".

Lexical errors are fatal. The first one aborts the scan and no partial
token list is returned.

Number Formats
--------------
| Format  | Example | Token     | Value |
|---------|---------|-----------|-------|
| Integer | 42      | INT_LIT   | 42    |
| Float   | 3.14    | FLOAT_LIT | 3.14  |

A '.' is part of a number only when a digit follows it, so "3." scans as
INT_LIT 3 followed by an error on the lone '.'.

Strings and Characters
----------------------
- "text" may span lines; the value is the raw text between the quotes.
- 'c' holds exactly one raw character.
- There are no escape sequences.

Example Usage
-------------
>>> from loopscript.lexer import tokenize
>>> for token in tokenize('var x: int = 10;'):
...     print(repr(token))
Token(VAR, 'var', 1:1-3)
Token(IDENTIFIER, 'x', 1:5-5)
Token(TYPE_COLON, ':', 1:6-6)
Token(INT, 'int', 1:8-10)
Token(ASSIGN, '=', 1:12-12)
Token(INT_LIT, 10, 1:14-15)
Token(SEMICOLON, ';', 1:16-16)
Token(EOF, 1:17-17)
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from loopscript.errors import SourceLocation
from loopscript.lexer.cursor import Cursor, NUL
from loopscript.lexer.errors import (
    LexerError,
    UnexpectedCharacterError,
    UnterminatedStringError,
    UnterminatedCharError,
    MalformedNumericLiteralError,
)
from loopscript.lexer.tokens import (
    BOOLEAN_LITERALS,
    EOF_LEXEME,
    EQUALS_SUFFIX_TOKENS,
    KEYWORDS,
    LOGICAL_OPERATORS,
    SINGLE_CHAR_TOKENS,
    LiteralValue,
    Token,
    TokenType,
)

logger = logging.getLogger(__name__)

WHITESPACE = " \r\t\n"


# =============================================================================
# Configuration and Results
# =============================================================================

@dataclass
class ScannerOptions:
    """
    Scanner configuration options.

    Attributes:
        filename: Source name used in error locations and log messages
        line_number: Line number of the first source line, for fragments
                     cut out of a larger file
    """
    filename: str = "<input>"
    line_number: int = 1


@dataclass
class ScanResult:
    """
    Outcome of scan(): either the full token list or the error that
    stopped scanning. Exactly one of the two is populated.
    """
    tokens: list[Token] = field(default_factory=list)
    error: Optional[LexerError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


# =============================================================================
# Scanner Implementation
# =============================================================================

class Scanner:
    """
    Tokenizes LoopScript source code.

    Usage:
        scanner = Scanner(source_text, ScannerOptions(filename="demo.ls"))
        tokens = scanner.scan_tokens()

    A Scanner is not safe to share between threads. Each call to
    scan_tokens() rescans the whole source from a fresh Cursor.
    """

    def __init__(self, source: str, options: Optional[ScannerOptions] = None):
        self.source = source
        self.options = options or ScannerOptions()
        self._cursor: Optional[Cursor] = None
        self._tokens: list[Token] = []

    def scan_tokens(self) -> list[Token]:
        """
        Scan the whole source.

        Returns:
            Tokens in source order, terminated by one EOF token

        Raises:
            LexerError: On the first lexical error
        """
        self._cursor = Cursor(self.source, self.options.line_number)
        self._tokens = []

        logger.debug(f"Scanning {self.options.filename} ({len(self.source)} chars)")

        cursor = self._cursor
        while not cursor.is_at_end():
            cursor.begin_token()
            self._scan_token()

        self._tokens.append(Token(
            type=TokenType.EOF,
            lexeme=EOF_LEXEME,
            literal=None,
            line=cursor.line,
            column_start=cursor.column,
            column_end=cursor.column,
        ))

        logger.debug(f"Scanned {len(self._tokens)} tokens from {self.options.filename}")
        return self._tokens

    # =========================================================================
    # Dispatch
    # =========================================================================

    def _scan_token(self) -> None:
        char = self._cursor.advance()

        if char in SINGLE_CHAR_TOKENS:
            self._add(SINGLE_CHAR_TOKENS[char])
        elif char in EQUALS_SUFFIX_TOKENS:
            plain, with_equals = EQUALS_SUFFIX_TOKENS[char]
            self._add(with_equals if self._cursor.match("=") else plain)
        elif char == "!":
            if not self._cursor.match("="):
                raise self._unexpected("unexpected '!'")
            self._add(TokenType.NEQ)
        elif char in WHITESPACE:
            pass
        elif char == '"':
            self._scan_string()
        elif char == "'":
            self._scan_char()
        elif char.isdecimal():
            self._scan_number()
        elif _is_ident_start(char):
            self._scan_identifier()
        else:
            raise self._unexpected("unexpected character")

    # =========================================================================
    # Literal and Identifier Rules
    # =========================================================================

    def _scan_number(self) -> None:
        """
        Scan an integer or float literal; the first digit is consumed.

        The fractional part is taken only when the '.' is followed by a
        digit. A letter directly after the number is an error.
        """
        cursor = self._cursor
        is_float = False

        while cursor.peek().isdecimal():
            cursor.advance()

        if cursor.peek() == "." and cursor.peek_next().isdecimal():
            is_float = True
            cursor.advance()  # consume '.'
            while cursor.peek().isdecimal():
                cursor.advance()

        if cursor.peek().isalpha():
            raise self._fail(MalformedNumericLiteralError(
                self._start_location(),
                near=cursor.near_text(),
                source_line=cursor.current_line_text(),
            ))

        text = cursor.lexeme()
        if is_float:
            self._add_literal(TokenType.FLOAT_LIT, float(text))
        else:
            try:
                value = int(text)
            except ValueError as e:
                # Digit run longer than the interpreter's int conversion limit
                raise self._fail(MalformedNumericLiteralError(
                    self._start_location(),
                    near=cursor.near_text(),
                    source_line=cursor.current_line_text(),
                    message=f"integer literal too long ({len(text)} digits)",
                    hint="use a shorter integer literal",
                )) from e
            self._add_literal(TokenType.INT_LIT, value)

    def _scan_string(self) -> None:
        """Scan a double-quoted string; the opening quote is consumed."""
        cursor = self._cursor

        while cursor.peek() != '"' and not cursor.is_at_end():
            cursor.advance()

        if cursor.is_at_end():
            raise self._fail(UnterminatedStringError(
                self._start_location(),
                near=cursor.near_text(),
                source_line=cursor.current_line_text(),
            ))

        cursor.advance()  # consume closing "

        value = self.source[cursor.start_position + 1:cursor.position - 1]
        self._add_literal(TokenType.STRING_LIT, value)

    def _scan_char(self) -> None:
        """Scan a single-quoted character; the opening quote is consumed."""
        cursor = self._cursor

        if cursor.is_at_end() or cursor.peek_next() == NUL:
            raise self._unterminated_char()

        value = cursor.advance()
        if cursor.peek() != "'":
            raise self._unterminated_char()
        cursor.advance()  # consume closing '

        self._add_literal(TokenType.CHAR_LIT, value)

    def _scan_identifier(self) -> None:
        """
        Scan an identifier, then classify it.

        Checked in order: boolean literals, word operators (and/or/not),
        keywords. Anything else is a plain IDENTIFIER.
        """
        cursor = self._cursor
        while _is_ident_part(cursor.peek()):
            cursor.advance()

        text = cursor.lexeme()

        if text in BOOLEAN_LITERALS:
            self._add_literal(TokenType.BOOL_LIT, BOOLEAN_LITERALS[text])
        elif text in LOGICAL_OPERATORS:
            self._add(LOGICAL_OPERATORS[text])
        else:
            self._add(KEYWORDS.get(text, TokenType.IDENTIFIER))

    # =========================================================================
    # Token Creation
    # =========================================================================

    def _add(self, token_type: TokenType) -> None:
        self._add_literal(token_type, None)

    def _add_literal(self, token_type: TokenType, literal: Optional[LiteralValue]) -> None:
        cursor = self._cursor
        self._tokens.append(Token(
            type=token_type,
            lexeme=cursor.lexeme(),
            literal=literal,
            line=cursor.start_line,
            column_start=cursor.start_column,
            column_end=cursor.column - 1,
        ))

    # =========================================================================
    # Error Helpers
    # =========================================================================

    def _start_location(self) -> SourceLocation:
        return SourceLocation(
            self.options.filename,
            self._cursor.start_line,
            self._cursor.start_column,
        )

    def _fail(self, error: LexerError) -> LexerError:
        logger.debug(f"Scan of {self.options.filename} aborted: {error.message} at {error.location}")
        return error

    def _unexpected(self, message: str) -> LexerError:
        return self._fail(UnexpectedCharacterError(
            message,
            self._start_location(),
            near=self._cursor.near_text(),
            source_line=self._cursor.current_line_text(),
        ))

    def _unterminated_char(self) -> LexerError:
        return self._fail(UnterminatedCharError(
            self._start_location(),
            near=self._cursor.near_text(),
            source_line=self._cursor.current_line_text(),
        ))


# =============================================================================
# Character Classes
# =============================================================================

def _is_ident_start(char: str) -> bool:
    return char.isalpha() or char == "_"


def _is_ident_part(char: str) -> bool:
    return _is_ident_start(char) or char.isdecimal()


# =============================================================================
# Convenience Functions
# =============================================================================

def tokenize(source: str, filename: str = "<input>") -> list[Token]:
    """
    Scan source text into tokens.

    Raises:
        LexerError: On the first lexical error
    """
    return Scanner(source, ScannerOptions(filename=filename)).scan_tokens()


def scan(source: str, options: Optional[ScannerOptions] = None) -> ScanResult:
    """
    Scan source text without raising.

    Returns:
        ScanResult with the tokens, or with the error that stopped the scan
    """
    try:
        tokens = Scanner(source, options).scan_tokens()
    except LexerError as e:
        return ScanResult(error=e)
    return ScanResult(tokens=tokens)
