"""Mush scanner: converts a byte stream into tokens and lexical faults."""

from __future__ import annotations

import io
import logging
from os import PathLike
from typing import BinaryIO

from mush.cursor import Cursor
from mush.errors import LexicalFault, UnknownCharacter, UnterminatedString
from mush.tokens import (
    EQUAL_SUFFIXED,
    RESERVED_WORDS,
    SINGLE_CHAR_TOKENS,
    KeywordKind,
    KeywordToken,
    LexemeKind,
    LexemeToken,
    Position,
    Token,
    is_digit,
    is_ident_char,
    is_ident_start,
)

logger = logging.getLogger(__name__)


class Scanner:
    """Tokenize a seekable binary stream of Mush source.

    Lexical faults (unknown characters, unterminated strings) are recorded
    and scanning resumes with the next character. Decode and I/O failures
    raise out of ``scan_tokens``.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self._cursor = Cursor(stream)
        self._tokens: list[Token] = []
        self._faults: list[LexicalFault] = []

    @property
    def tokens(self) -> list[Token]:
        return self._tokens

    @property
    def faults(self) -> list[LexicalFault]:
        return self._faults

    def has_faults(self) -> bool:
        return bool(self._faults)

    def scan_tokens(self) -> list[Token]:
        """Scan the whole stream and return the tokens, ending with EOF."""
        self._cursor.rewind()
        self._tokens = []
        self._faults = []

        while not self._cursor.peek_is_exhausted():
            self._scan_token()

        self._add_keyword(KeywordKind.EOF, self._cursor.position())
        logger.debug(
            "scanned %d lines: %d tokens, %d faults",
            self._cursor.line,
            len(self._tokens),
            len(self._faults),
        )
        return self._tokens

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _scan_token(self) -> None:
        ch, start = self._cursor.read()

        if ch in SINGLE_CHAR_TOKENS:
            self._add_keyword(SINGLE_CHAR_TOKENS[ch], start)
            return

        if ch in EQUAL_SUFFIXED:
            single, double = EQUAL_SUFFIXED[ch]
            self._add_keyword(double if self._match("=") else single, start)
            return

        if ch == "/":
            if self._match("/"):
                self._skip_comment()
            else:
                self._add_keyword(KeywordKind.SLASH, start)
            return

        if ch == '"':
            self._scan_string(start)
            return

        if is_digit(ch):
            self._scan_number(ch, start)
            return

        if is_ident_start(ch):
            self._scan_identifier(ch, start)
            return

        if ch in " \t\r":
            return

        if ch == "\n":
            self._add_keyword(KeywordKind.NEWLINE, start)
            self._cursor.newline()
            return

        self._faults.append(UnknownCharacter(ch, start, self._cursor.line_text()))

    def _match(self, expected: str) -> bool:
        """Consume the next character only if it is ``expected``."""
        if self._cursor.peek() != expected:
            return False
        self._cursor.read()
        return True

    # ------------------------------------------------------------------
    # Multi-character tokens
    # ------------------------------------------------------------------

    def _skip_comment(self) -> None:
        # The terminating newline is left for the main loop
        while self._cursor.peek() not in ("", "\n"):
            self._cursor.read()

    def _scan_string(self, start: Position) -> None:
        chars = []
        while True:
            ch = self._cursor.peek()
            if ch in ("", "\n"):
                # A CRLF terminator leaves its \r behind
                partial = "".join(chars).removesuffix("\r")
                self._faults.append(UnterminatedString(partial, start, self._cursor.line_text()))
                return
            self._cursor.read()
            if ch == '"':
                self._add_lexeme(LexemeKind.STRING, "".join(chars), start)
                return
            chars.append(ch)

    def _scan_number(self, first: str, start: Position) -> None:
        digits = [first]
        kind = LexemeKind.INTEGER
        self._read_digits(digits)

        # A dot only belongs to the number when a digit follows it
        if self._cursor.peek() == "." and is_digit(self._cursor.peek_next()):
            kind = LexemeKind.FLOAT
            digits.append(self._cursor.read()[0])
            self._read_digits(digits)

        self._add_lexeme(kind, "".join(digits), start)

    def _read_digits(self, digits: list[str]) -> None:
        while is_digit(self._cursor.peek()):
            digits.append(self._cursor.read()[0])

    def _scan_identifier(self, first: str, start: Position) -> None:
        chars = [first]
        while is_ident_char(self._cursor.peek()):
            chars.append(self._cursor.read()[0])
        text = "".join(chars)

        if text in RESERVED_WORDS:
            self._add_keyword(RESERVED_WORDS[text], start)
        else:
            self._add_lexeme(LexemeKind.IDENTIFIER, text, start)

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def _add_keyword(self, kind: KeywordKind, position: Position) -> None:
        self._tokens.append(KeywordToken(kind, position))

    def _add_lexeme(self, kind: LexemeKind, text: str, position: Position) -> None:
        self._tokens.append(LexemeToken(kind, text, position))


def _stream(source: str | bytes) -> BinaryIO:
    if isinstance(source, str):
        source = source.encode("utf-8")
    return io.BytesIO(source)


def scan(source: str | bytes) -> tuple[list[Token], list[LexicalFault]]:
    """Scan in-memory source and return (tokens, faults)."""
    scanner = Scanner(_stream(source))
    scanner.scan_tokens()
    return scanner.tokens, scanner.faults


def tokenize(source: str | bytes) -> list[Token]:
    """Convenience function: scan source and return only the tokens."""
    return Scanner(_stream(source)).scan_tokens()


def scan_file(path: str | PathLike[str]) -> tuple[list[Token], list[LexicalFault]]:
    """Scan a file on disk. Raises OSError if it cannot be opened or read."""
    with open(path, "rb") as f:
        scanner = Scanner(f)
        scanner.scan_tokens()
    logger.debug("scanned %s", path)
    return scanner.tokens, scanner.faults
