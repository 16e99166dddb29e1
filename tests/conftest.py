"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from mush.errors import LexicalFault
from mush.lexer import scan
from mush.tokens import KeywordKind, LexemeKind, Token


@pytest.fixture
def lex():
    """Return a helper that scans source and returns tokens (excluding EOF)."""

    def _lex(source: str | bytes) -> list[Token]:
        tokens, _ = scan(source)
        # Strip trailing EOF for convenience
        return [t for t in tokens if t.kind != KeywordKind.EOF]

    return _lex


@pytest.fixture
def scan_source():
    """Return a helper that scans source and returns (tokens, faults)."""

    def _scan(source: str | bytes) -> tuple[list[Token], list[LexicalFault]]:
        return scan(source)

    return _scan


def assert_kinds(tokens: list[Token], expected: list[KeywordKind | LexemeKind]) -> None:
    """Assert that the token kinds match the expected list."""
    actual = [t.kind for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_lexemes(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token lexemes match the expected list."""
    actual = [t.lexeme for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"
