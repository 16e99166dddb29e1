"""Token kinds, data structures, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class KeywordKind(Enum):
    """Tokens fully identified by their kind. The value is the fixed lexeme."""

    # Single character
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    LEFT_CURL = "{"
    RIGHT_CURL = "}"
    COMMA = ","
    DOT = "."
    MINUS = "-"
    PLUS = "+"
    SEMICOLON = ";"
    NEWLINE = "\n"
    SLASH = "/"
    STAR = "*"

    # Comparison
    BANG = "!"
    BANG_EQUAL = "!="
    EQUAL = "="
    EQUAL_EQUAL = "=="
    GREATER = ">"
    GREATER_EQUAL = ">="
    LESS = "<"
    LESS_EQUAL = "<="

    # Reserved words
    AND = "and"
    FN = "fn"
    FOR = "for"
    IF = "if"
    NONE = "None"
    OR = "or"
    RETURN = "return"
    TRUE = "True"
    FALSE = "False"
    LET = "let"
    WHILE = "while"

    EOF = ""


class LexemeKind(Enum):
    """Tokens that carry the source text they were read from."""

    IDENTIFIER = auto()
    STRING = auto()  # text between the quotes
    INTEGER = auto()
    FLOAT = auto()


@dataclass(frozen=True, slots=True)
class Position:
    """Source position: 1-based line, per-line character count, byte offset.

    The column is 0 at the start of a line and counts decoded characters, so
    a token's column is that of its first character (1 for the first one).
    """

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class KeywordToken:
    kind: KeywordKind
    position: Position

    @property
    def lexeme(self) -> str:
        return self.kind.value


@dataclass(frozen=True, slots=True)
class LexemeToken:
    kind: LexemeKind
    text: str
    position: Position

    @property
    def lexeme(self) -> str:
        return self.text


Token = KeywordToken | LexemeToken

# Single-character tokens that never need lookahead
SINGLE_CHAR_TOKENS: dict[str, KeywordKind] = {
    kind.value: kind
    for kind in (
        KeywordKind.LEFT_PAREN,
        KeywordKind.RIGHT_PAREN,
        KeywordKind.LEFT_CURL,
        KeywordKind.RIGHT_CURL,
        KeywordKind.COMMA,
        KeywordKind.DOT,
        KeywordKind.MINUS,
        KeywordKind.PLUS,
        KeywordKind.SEMICOLON,
        KeywordKind.STAR,
    )
}

# Operators that become two-character tokens when followed by "="
EQUAL_SUFFIXED: dict[str, tuple[KeywordKind, KeywordKind]] = {
    "!": (KeywordKind.BANG, KeywordKind.BANG_EQUAL),
    "=": (KeywordKind.EQUAL, KeywordKind.EQUAL_EQUAL),
    ">": (KeywordKind.GREATER, KeywordKind.GREATER_EQUAL),
    "<": (KeywordKind.LESS, KeywordKind.LESS_EQUAL),
}

RESERVED_WORDS: dict[str, KeywordKind] = {
    kind.value: kind
    for kind in (
        KeywordKind.AND,
        KeywordKind.FN,
        KeywordKind.FOR,
        KeywordKind.IF,
        KeywordKind.NONE,
        KeywordKind.OR,
        KeywordKind.RETURN,
        KeywordKind.TRUE,
        KeywordKind.FALSE,
        KeywordKind.LET,
        KeywordKind.WHILE,
    )
}


def is_digit(ch: str) -> bool:
    """Return True if ch is an ASCII decimal digit."""
    return ch != "" and ch in "0123456789"


def is_ident_start(ch: str) -> bool:
    """Return True if ch can start an identifier."""
    return ch == "_" or ch.isalpha()


def is_ident_char(ch: str) -> bool:
    """Return True if ch can continue an identifier."""
    return ch == "_" or ch.isalpha() or is_digit(ch)
