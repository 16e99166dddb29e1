"""--debug token dump to stderr."""

from __future__ import annotations

import sys
from typing import TextIO

from mush.tokens import KeywordToken, Token


def dump_tokens(tokens: list[Token], *, file: TextIO | None = None) -> None:
    """Print one human-readable line per token to *file* (default: stderr)."""
    if file is None:
        file = sys.stderr
    for token in tokens:
        file.write(f"{_format_token(token)}\n")


def _format_token(token: Token) -> str:
    pos = token.position
    where = f"{pos.line}:{pos.column}"
    if isinstance(token, KeywordToken):
        return f"{where:<8}{token.kind.name}"
    return f"{where:<8}{token.kind.name} {token.text!r}"
