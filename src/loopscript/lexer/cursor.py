"""
Source Cursor
=============

A position tracker over an immutable source string. The scanner drives a
single Cursor: it checkpoints with begin_token() before each token, then
consumes characters with advance()/match() and looks ahead with peek()
and peek_next().

Line and column numbers are 1-indexed. A newline is reported at the
column it occupies on its own line; the line counter moves forward only
after the newline has been consumed.
"""

# Returned by peek()/peek_next() when looking past the end of source
NUL = "\0"


class Cursor:
    """
    Stateful cursor with a token-start checkpoint.

    Attributes:
        source: The text being scanned (never modified)
    """

    def __init__(self, source: str, line_number: int = 1):
        self.source = source

        # Current position
        self._pos = 0
        self._line = line_number
        self._column = 1

        # Checkpoint taken at the start of the current token
        self._start_pos = 0
        self._start_line = line_number
        self._start_column = 1

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def is_at_end(self) -> bool:
        return self._pos == len(self.source)

    def advance(self) -> str:
        """
        Consume and return the current character.

        Raises:
            IndexError: If the cursor is already at the end of source
        """
        if self.is_at_end():
            raise IndexError("advance() called at end of source")

        char = self.source[self._pos]
        self._pos += 1
        self._column += 1

        if char == "\n":
            self._line += 1
            self._column = 1

        return char

    def peek(self) -> str:
        """Look at the current character, or NUL at end."""
        if self.is_at_end():
            return NUL
        return self.source[self._pos]

    def peek_next(self) -> str:
        """Look one character past the current one, or NUL if out of bounds."""
        if self._pos + 1 >= len(self.source):
            return NUL
        return self.source[self._pos + 1]

    def match(self, expected: str) -> bool:
        """
        Consume the current character if it equals expected.

        Returns:
            True if matched and consumed, False otherwise (cursor unchanged)
        """
        if self.is_at_end() or self.source[self._pos] != expected:
            return False
        self.advance()
        return True

    # =========================================================================
    # Checkpoint
    # =========================================================================

    def begin_token(self) -> None:
        self._start_pos = self._pos
        self._start_line = self._line
        self._start_column = self._column

    def lexeme(self) -> str:
        """Text from the checkpoint up to the current position."""
        return self.source[self._start_pos:self._pos]

    def near_text(self) -> str:
        """Like lexeme(), with the end clipped to the source length."""
        end = min(self._pos, len(self.source))
        return self.source[self._start_pos:end]

    def current_line_text(self) -> str:
        """The full source line containing the checkpoint, for error context."""
        line_start = self.source.rfind("\n", 0, self._start_pos) + 1
        line_end = self.source.find("\n", self._start_pos)
        if line_end == -1:
            line_end = len(self.source)
        return self.source[line_start:line_end]

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def position(self) -> int:
        return self._pos

    @property
    def line(self) -> int:
        return self._line

    @property
    def column(self) -> int:
        return self._column

    @property
    def start_position(self) -> int:
        return self._start_pos

    @property
    def start_line(self) -> int:
        return self._start_line

    @property
    def start_column(self) -> int:
        return self._start_column
