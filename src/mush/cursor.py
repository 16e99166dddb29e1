"""Incremental UTF-8 decoding over a seekable byte stream."""

from __future__ import annotations

from typing import BinaryIO

from mush.errors import EncodingError, InvalidEncoding
from mush.tokens import Position

# Longest UTF-8 encoding of a scalar value
MAX_SEQUENCE_BYTES = 4


class Cursor:
    """Decode one character at a time while tracking offset, line and column.

    Every read seeks to an explicit byte offset first, so lookahead never
    needs the stream to support peeking: reading ahead without committing
    leaves the cursor where it was.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self.offset = 0
        self.line = 1
        self.column = 0
        self.line_start = 0

    def rewind(self) -> None:
        self._stream.seek(0)
        self.offset = 0
        self.line = 1
        self.column = 0
        self.line_start = 0

    def position(self) -> Position:
        return Position(self.line, self.column, self.offset)

    # ------------------------------------------------------------------
    # Decoding
    # ------------------------------------------------------------------

    def peek_is_exhausted(self, at: int | None = None) -> bool:
        """Return True if no byte is available at ``at`` (default: current offset)."""
        self._stream.seek(self.offset if at is None else at)
        return self._stream.read(1) == b""

    def advance(self, at: int, column: int | None = None) -> tuple[str, int]:
        """Decode the character starting at byte ``at``.

        Returns the character and the offset just past it. Bytes are added
        one at a time until the prefix decodes; four bytes without a valid
        character, or the stream ending mid-sequence, raise EncodingError
        reported at ``column`` (default: the next column on the line).
        """
        self._stream.seek(at)
        buf = b""
        for _ in range(MAX_SEQUENCE_BYTES):
            byte = self._stream.read(1)
            if not byte:
                break
            buf += byte
            try:
                ch = buf.decode("utf-8")
            except UnicodeDecodeError:
                continue
            return ch, at + len(buf)
        if column is None:
            column = self.column + 1
        raise EncodingError(InvalidEncoding(Position(self.line, column, at), self.line_text()))

    def read(self) -> tuple[str, Position]:
        """Consume the character at the current offset.

        Returns it with its position: the column after counting it, and the
        byte offset where it starts.
        """
        start = self.offset
        ch, self.offset = self.advance(start)
        self.column += 1
        return ch, Position(self.line, self.column, start)

    def peek(self) -> str:
        """The character at the current offset, or "" at end of input."""
        if self.peek_is_exhausted():
            return ""
        return self.advance(self.offset)[0]

    def peek_next(self) -> str:
        """The character after the current one, or "" at end of input."""
        if self.peek_is_exhausted():
            return ""
        _, after = self.advance(self.offset)
        if self.peek_is_exhausted(after):
            return ""
        return self.advance(after, self.column + 2)[0]

    # ------------------------------------------------------------------
    # Line bookkeeping
    # ------------------------------------------------------------------

    def newline(self) -> None:
        """Record that a newline was just consumed."""
        self.line += 1
        self.column = 0
        self.line_start = self.offset

    def line_text(self) -> str:
        """Snapshot of the current line, without its line terminator."""
        self._stream.seek(self.line_start)
        raw = self._stream.readline()
        return raw.decode("utf-8", errors="replace").rstrip("\r\n")

