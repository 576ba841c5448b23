"""
LoopScript Token Definitions
============================

Token kinds, keyword tables and the immutable Token record produced by
the scanner.

Token Categories
----------------
- Type keywords: int, float, bool, char, string, array
- Statement keywords: var, if, else, loop, to, while, print, input, fun, return
- Logical operators (spelled as words): and, or, not
- Literals: 42, 3.14, true/false, 'c', "text"
- Operators: = == != < <= > >= + - * / %
- Delimiters: { } ( ) [ ] ; , :
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Union

from loopscript.errors import SourceLocation


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """Closed set of LoopScript token kinds."""

    # === Type Keywords ===
    INT = auto()            # int
    FLOAT = auto()          # float
    BOOL = auto()           # bool
    CHAR = auto()           # char
    STRING = auto()         # string
    ARRAY = auto()          # array

    # === Statement Keywords ===
    VAR = auto()            # var
    IF = auto()             # if
    ELSE = auto()           # else
    LOOP = auto()           # loop
    TO = auto()             # to
    WHILE = auto()          # while
    PRINT = auto()          # print
    INPUT = auto()          # input
    FUN = auto()            # fun
    RETURN = auto()         # return

    # === Brackets and Blocks ===
    LBRACE = auto()         # {
    RBRACE = auto()         # }
    LPAREN = auto()         # (
    RPAREN = auto()         # )
    LBRACKET = auto()       # [
    RBRACKET = auto()       # ]

    # === Separators ===
    SEMICOLON = auto()      # ;
    COMMA = auto()          # ,

    # === Assignment and Type Annotation ===
    ASSIGN = auto()         # =
    TYPE_COLON = auto()     # :

    # === Arithmetic Operators ===
    ADD = auto()            # +
    SUBTRACT = auto()       # -
    MULTIPLY = auto()       # *
    DIVIDE = auto()         # /
    MODULO = auto()         # %

    # === Relational Operators ===
    EQ = auto()             # ==
    NEQ = auto()            # !=
    LT = auto()             # <
    LE = auto()             # <=
    GT = auto()             # >
    GE = auto()             # >=

    # === Logical Operators ===
    AND = auto()            # and
    OR = auto()             # or
    NOT = auto()            # not

    # === Literals and Identifiers ===
    IDENTIFIER = auto()
    INT_LIT = auto()
    FLOAT_LIT = auto()
    BOOL_LIT = auto()
    CHAR_LIT = auto()
    STRING_LIT = auto()

    # === Structural ===
    NEWLINE = auto()        # reserved, never emitted by the scanner
    EOF = auto()


# =============================================================================
# Lookup Tables
# =============================================================================

KEYWORDS: dict[str, TokenType] = {
    # Type names
    "int": TokenType.INT,
    "float": TokenType.FLOAT,
    "bool": TokenType.BOOL,
    "char": TokenType.CHAR,
    "string": TokenType.STRING,
    "array": TokenType.ARRAY,

    # Declarations and control flow
    "var": TokenType.VAR,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "loop": TokenType.LOOP,
    "to": TokenType.TO,
    "while": TokenType.WHILE,

    # I/O
    "print": TokenType.PRINT,
    "input": TokenType.INPUT,

    # Functions
    "fun": TokenType.FUN,
    "return": TokenType.RETURN,
}

BOOLEAN_LITERALS: dict[str, bool] = {
    "true": True,
    "false": False,
}

LOGICAL_OPERATORS: dict[str, TokenType] = {
    "and": TokenType.AND,
    "or": TokenType.OR,
    "not": TokenType.NOT,
}

SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
    ";": TokenType.SEMICOLON,
    ",": TokenType.COMMA,
    ":": TokenType.TYPE_COLON,
    "+": TokenType.ADD,
    "-": TokenType.SUBTRACT,
    "*": TokenType.MULTIPLY,
    "/": TokenType.DIVIDE,
    "%": TokenType.MODULO,
}

# Operators whose meaning changes when followed by '='
# char -> (type without '=', type with '=')
EQUALS_SUFFIX_TOKENS: dict[str, tuple[TokenType, TokenType]] = {
    "=": (TokenType.ASSIGN, TokenType.EQ),
    "<": (TokenType.LT, TokenType.LE),
    ">": (TokenType.GT, TokenType.GE),
}

LITERAL_TYPES = frozenset({
    TokenType.INT_LIT,
    TokenType.FLOAT_LIT,
    TokenType.BOOL_LIT,
    TokenType.CHAR_LIT,
    TokenType.STRING_LIT,
})

TYPE_KEYWORDS = frozenset({
    TokenType.INT,
    TokenType.FLOAT,
    TokenType.BOOL,
    TokenType.CHAR,
    TokenType.STRING,
    TokenType.ARRAY,
})

KEYWORD_TYPES = frozenset(KEYWORDS.values()) | frozenset(LOGICAL_OPERATORS.values())

EOF_LEXEME = "\0"

LiteralValue = Union[int, float, bool, str]


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single classified lexeme.

    Attributes:
        type: The TokenType classification
        lexeme: Exact source slice ("\\0" for the end-of-input token)
        literal: Decoded value for literal tokens, None otherwise
        line: Line number of the first character (1-indexed)
        column_start: Column of the first character (1-indexed)
        column_end: Column of the last character (inclusive)
    """
    type: TokenType
    lexeme: str
    literal: Optional[LiteralValue]
    line: int
    column_start: int
    column_end: int

    def __str__(self) -> str:
        text = f"{self.type.name} '{self.lexeme}' at line: {self.line}, column: {self.column_start}"
        return text.replace("\n", "\\n").replace("\0", "\\0")

    def __repr__(self) -> str:
        """Format token for debugging output."""
        span = f"{self.line}:{self.column_start}-{self.column_end}"
        if self.literal is not None:
            return f"Token({self.type.name}, {self.literal!r}, {span})"
        if self.type == TokenType.EOF:
            return f"Token(EOF, {span})"
        return f"Token({self.type.name}, {self.lexeme!r}, {span})"

    def location(self, filename: str = "<input>") -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(filename, self.line, self.column_start)

    def is_literal(self) -> bool:
        return self.type in LITERAL_TYPES

    def is_type_keyword(self) -> bool:
        """Return True if this token names a data type (int, float, ...)."""
        return self.type in TYPE_KEYWORDS

    def is_keyword(self) -> bool:
        return self.type in KEYWORD_TYPES
