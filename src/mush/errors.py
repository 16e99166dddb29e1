"""Lexical faults, the fatal decode error, and their formatted reports."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike

from mush.diagnostics import CaretLine, DiagnosticBuilder, Severity
from mush.tokens import Position


@dataclass(frozen=True, slots=True)
class UnknownCharacter:
    """A character that starts no token. Scanning continues after it."""

    character: str
    position: Position
    line_text: str


@dataclass(frozen=True, slots=True)
class UnterminatedString:
    """A string literal cut off by a newline or the end of input.

    ``position`` is the opening quote.
    """

    partial_text: str
    position: Position
    line_text: str


@dataclass(frozen=True, slots=True)
class InvalidEncoding:
    """Bytes at ``position`` that do not decode as UTF-8."""

    position: Position
    line_text: str


LexicalFault = UnknownCharacter | UnterminatedString | InvalidEncoding

_FAULT_IDS: dict[type, str] = {
    UnknownCharacter: "E0001",
    UnterminatedString: "E0002",
    InvalidEncoding: "E0003",
}


def fault_id(fault: LexicalFault) -> str:
    """Return the stable identifier of the fault's variant."""
    return _FAULT_IDS[type(fault)]


def fault_severity(fault: LexicalFault) -> Severity:
    return Severity.ERROR


def fault_message(fault: LexicalFault) -> str:
    if isinstance(fault, UnknownCharacter):
        return f"unknown character {fault.character!r}"
    if isinstance(fault, UnterminatedString):
        return "unterminated string literal"
    return "invalid UTF-8 sequence"


def _caret_label(fault: LexicalFault) -> str:
    if isinstance(fault, UnknownCharacter):
        return "not valid here"
    if isinstance(fault, UnterminatedString):
        return "string starts here"
    return "cannot decode"


def _help(fault: LexicalFault) -> str | None:
    if isinstance(fault, UnterminatedString):
        return "add a closing '\"' before the end of the line"
    if isinstance(fault, InvalidEncoding):
        return "save the file as UTF-8"
    return None


def render_fault(
    fault: LexicalFault,
    filename: str | PathLike[str] | None = None,
    color: bool = False,
) -> str:
    """Format one fault as a source-anchored report."""
    pos = fault.position
    builder = DiagnosticBuilder(color=color).set_header(
        fault_severity(fault), fault_id(fault), fault_message(fault)
    )
    if filename is not None:
        builder.set_file_path(filename, pos.line, pos.column)
    builder.add_source_line(CaretLine(pos.line, fault.line_text, pos.column, _caret_label(fault)))
    help_text = _help(fault)
    if help_text is not None:
        builder.set_footer(help_text, Severity.HELP)
    return builder.build()


class EncodingError(Exception):
    """Raised when the source stops decoding as UTF-8. Aborts the scan."""

    def __init__(self, fault: InvalidEncoding) -> None:
        self.fault = fault
        self.position = fault.position
        self.message = fault_message(fault)
        super().__init__(
            f"{self.message} at line {self.position.line}, byte offset {self.position.offset}"
        )

    def format(self, filename: str | PathLike[str] | None = None, color: bool = False) -> str:
        return render_fault(self.fault, filename, color)
