"""Loading of ``project.zom`` project configuration files.

The format is line-oriented::

    # My project
    ## Project Info
    - name: demo
    - version: 0.1.0

    ## Dependencies
    - tensors: 1.2
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from putlang.errors import CompileError, Diagnostic, Severity

CONFIG_FILENAME = "project.zom"

# Section header -> ProjectConfig attribute
_SECTIONS: dict[str, str] = {
    "Project Info": "project_info",
    "Dependencies": "dependencies",
    "Build Settings": "build_settings",
    "Runtime Settings": "runtime_settings",
    "Custom Settings": "custom_settings",
}


class ConfigError(CompileError):
    """A project.zom file contained malformed lines."""


@dataclass
class ProjectConfig:
    project_info: dict[str, str] = field(default_factory=dict)
    dependencies: dict[str, str] = field(default_factory=dict)
    build_settings: dict[str, str] = field(default_factory=dict)
    runtime_settings: dict[str, str] = field(default_factory=dict)
    custom_settings: dict[str, str] = field(default_factory=dict)
    extra_sections: dict[str, dict[str, str]] = field(default_factory=dict)

    @property
    def name(self) -> str:
        return self.project_info.get("name", "Unknown")

    @property
    def version(self) -> str:
        return self.project_info.get("version", "0.0.0")

    def section(self, title: str) -> dict[str, str]:
        """Return the entries of a section by its header title."""
        if title in _SECTIONS:
            return getattr(self, _SECTIONS[title])
        return self.extra_sections.setdefault(title, {})


def find_config(start_path: Path | None = None) -> Path:
    """Walk up directories to find project.zom. Raises FileNotFoundError."""
    path = (start_path or Path.cwd()).resolve()
    if path.is_file():
        path = path.parent
    while True:
        candidate = path / CONFIG_FILENAME
        if candidate.exists():
            return candidate
        parent = path.parent
        if parent == path:
            raise FileNotFoundError(f"No {CONFIG_FILENAME} found in any parent directory")
        path = parent


def parse_config(text: str, filename: str = CONFIG_FILENAME) -> ProjectConfig:
    """Parse project.zom text. Raises ConfigError listing every malformed line."""
    config = ProjectConfig()
    diagnostics: list[Diagnostic] = []
    current: dict[str, str] | None = None

    def malformed(message: str, line_num: int) -> None:
        diagnostics.append(
            Diagnostic(
                severity=Severity.ERROR,
                code="E400",
                stage="Config",
                message=message,
                line=line_num,
                filename=filename,
            )
        )

    for line_num, line in enumerate(text.splitlines(), start=1):
        trimmed = line.strip()
        if not trimmed:
            continue
        if trimmed.startswith("##"):
            title = trimmed[2:].strip()
            if not title:
                malformed("section header without a title", line_num)
                current = None
                continue
            current = config.section(title)
        elif trimmed.startswith("#"):
            continue  # document title
        elif trimmed.startswith("-"):
            key, sep, value = trimmed[1:].partition(":")
            key = key.strip()
            if not sep or not key:
                malformed(f"expected '- key: value', got {trimmed!r}", line_num)
            elif current is None:
                malformed(f"entry {key!r} appears before any section", line_num)
            else:
                current[key] = value.strip()
        else:
            malformed(f"unrecognized line {trimmed!r}", line_num)

    if diagnostics:
        raise ConfigError(diagnostics)
    return config


def load_config(path: Path) -> ProjectConfig:
    """Parse a project.zom file into a ProjectConfig."""
    return parse_config(Path(path).read_text(encoding="utf-8"), str(path))
