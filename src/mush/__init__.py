"""Mush scripting language: lexical front end."""

from __future__ import annotations

__version__ = "0.1.0"


def check(source: str | bytes, filename: str = "input.mush") -> list[str]:
    """Scan Mush source and return one formatted report per lexical fault."""
    from mush.errors import render_fault
    from mush.lexer import scan

    _, faults = scan(source)
    return [render_fault(fault, filename) for fault in faults]
