"""Diagnostics shared by every stage, and their one-line rendering."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"
    NOTE = "note"


# ANSI color codes
_COLORS = {
    Severity.ERROR: "\033[1;31m",    # bold red
    Severity.WARNING: "\033[1;33m",  # bold yellow
    Severity.NOTE: "\033[1;36m",     # bold cyan
}
_BOLD = "\033[1m"
_BLUE = "\033[1;34m"
_RESET = "\033[0m"


@dataclass
class Diagnostic:
    """A single diagnostic raised by one stage of the pipeline.

    ``stage`` names the producer ("Lex", "Parse", "Check", "Config") and
    becomes the first word of the rendered line.
    """

    severity: Severity
    code: str
    stage: str
    message: str
    line: int | None
    filename: str = "<stdin>"
    notes: list[str] = field(default_factory=list)

    @property
    def location(self) -> str:
        return f" at line {self.line}" if self.line is not None else ""

    def __str__(self) -> str:
        return f"{self.stage} {self.severity.value}: {self.message}{self.location}"


class DiagnosticRenderer:
    """Renders diagnostics as ``<Stage> error: <message> at line <n>``.

    The uncolored form is a stable contract for tools that grep it.
    """

    def __init__(self, *, color: bool = True) -> None:
        self.color = color

    def _c(self, code: str) -> str:
        return code if self.color else ""

    def render(self, diag: Diagnostic) -> str:
        color = _COLORS[diag.severity]
        lines = [
            f"{self._c(color)}{diag.stage} {diag.severity.value}{self._c(_RESET)}"
            f"{self._c(_BOLD)}: {diag.message}{self._c(_RESET)}"
            f"{diag.location}"
        ]
        for note in diag.notes:
            lines.append(f"  {self._c(_BLUE)}={self._c(_RESET)} note: {note}")
        return "\n".join(lines)

    def render_all(self, diagnostics: list[Diagnostic]) -> str:
        return "\n".join(self.render(d) for d in diagnostics)


class CompileError(Exception):
    """Batch error carrying the diagnostics of one or more stages."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        messages = [d.message for d in diagnostics]
        super().__init__(f"{len(diagnostics)} error(s): {'; '.join(messages)}")
