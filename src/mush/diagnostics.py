"""Source-anchored diagnostic reports: header, file banner, annotated lines."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from os import PathLike

_RESET = "\x1b[0m"
_BOLD = "\x1b[1m"
_RED = "\x1b[31m"
_YELLOW = "\x1b[33m"
_BLUE = "\x1b[34m"
_CYAN = "\x1b[36m"


class Severity(Enum):
    ERROR = ("error", _RED)
    WARNING = ("warning", _YELLOW)
    HELP = ("help", _BLUE)

    @property
    def label(self) -> str:
        return self.value[0]

    @property
    def color(self) -> str:
        return self.value[1]


@dataclass(frozen=True, slots=True)
class ContextLine:
    """A plain source line shown for context."""

    line_number: int
    text: str


@dataclass(frozen=True, slots=True)
class ArrowLine:
    """A source line with a trailing ``<-- message`` annotation."""

    line_number: int
    text: str
    message: str


@dataclass(frozen=True, slots=True)
class CaretLine:
    """A source line followed by a ``^`` under a 1-based column."""

    line_number: int
    text: str
    column: int
    message: str = ""


SourceLine = ContextLine | ArrowLine | CaretLine


class DiagnosticBuilder:
    """Accumulate the parts of one report and render it as text.

    The builder only produces a string; callers decide where it goes.
    Every setter returns the builder so calls can be chained::

        text = (
            DiagnosticBuilder()
            .set_header(Severity.ERROR, "E0001", "unknown character '$'")
            .set_file_path("main.mush", 1, 5)
            .add_source_line(CaretLine(1, "let $ = 1", 5, "unknown character"))
            .build()
        )
    """

    def __init__(self, color: bool = False) -> None:
        self._color = color
        self._header: tuple[Severity, str, str] | None = None
        self._file_path: str | None = None
        self._location: tuple[int, int] | None = None
        self._lines: list[SourceLine] = []
        self._footer: tuple[Severity | None, str] | None = None

    def set_header(self, severity: Severity, id: str, message: str) -> DiagnosticBuilder:
        self._header = (severity, id, message)
        return self

    def set_file_path(
        self,
        path: str | PathLike[str],
        line: int | None = None,
        column: int | None = None,
    ) -> DiagnosticBuilder:
        self._file_path = str(path)
        self._location = (line, column) if line is not None and column is not None else None
        return self

    def add_source_line(self, entry: SourceLine) -> DiagnosticBuilder:
        self._lines.append(entry)
        return self

    def set_footer(self, message: str, severity: Severity | None = None) -> DiagnosticBuilder:
        self._footer = (severity, message)
        return self

    def build(self) -> str:
        """Render the report. Does not modify the builder."""
        if self._header is None:
            raise ValueError("diagnostic header must be set before build()")

        severity, id, message = self._header
        entries = sorted(self._lines, key=lambda entry: entry.line_number)
        width = gutter_width(entries)

        out = [
            f"{self._paint(f'{severity.label}[{id}]', severity.color, _BOLD)}: "
            f"{self._paint(message, _BOLD)}"
        ]

        if self._file_path is not None:
            target = self._file_path
            if self._location is not None:
                target += f":{self._location[0]}:{self._location[1]}"
            out.append(f"{' ' * width}{self._paint('-->', _CYAN)} {target}")

        if entries:
            out.append(self._gutter("", width).rstrip())
            for entry in entries:
                out.extend(self._render_entry(entry, width, severity))

        if self._footer is not None:
            footer_severity, footer_message = self._footer
            if footer_severity is None:
                out.append(footer_message)
            else:
                label = self._paint(footer_severity.label, footer_severity.color, _BOLD)
                out.append(f"{label}: {footer_message}")

        return "\n".join(out)

    # ------------------------------------------------------------------
    # Rendering helpers
    # ------------------------------------------------------------------

    def _paint(self, text: str, *styles: str) -> str:
        if not self._color:
            return text
        return f"{''.join(styles)}{text}{_RESET}"

    def _gutter(self, number: str, width: int) -> str:
        return self._paint(f"{number:>{width}} |", _CYAN) + " "

    def _render_entry(self, entry: SourceLine, width: int, severity: Severity) -> list[str]:
        prefix = self._gutter(str(entry.line_number), width)
        if isinstance(entry, ContextLine):
            return [f"{prefix}{entry.text}"]
        if isinstance(entry, ArrowLine):
            arrow = self._paint("<--", _YELLOW)
            return [f"{prefix}{entry.text} {arrow} {entry.message}"]
        pad = " " * max(0, entry.column - 1)
        caret = self._paint("^", severity.color, _BOLD)
        pointer = f"{self._gutter('', width)}{pad}{caret}"
        if entry.message:
            pointer += f" {entry.message}"
        return [f"{prefix}{entry.text}", pointer]


def gutter_width(entries: list[SourceLine]) -> int:
    """Width of the line-number field shared by every entry of one report."""
    if not entries:
        return 1
    return len(str(max(entry.line_number for entry in entries)))
