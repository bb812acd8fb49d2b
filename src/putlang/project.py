"""Project scaffolding for `putlang new`."""

from __future__ import annotations

from pathlib import Path

_PROJECT_ZOM_TEMPLATE = """\
# {name}

## Project Info
- name: {name}
- version: 0.1.0

## Dependencies

## Build Settings
- entry: src/main.put

## Runtime Settings

## Custom Settings
"""

_MAIN_PUT_TEMPLATE = """\
var x = (42 + 5) * 2 - 3 / 1.5;
"""

_GITIGNORE = """\
__pycache__/
.putlang/
"""


def scaffold(name: str, parent: Path | None = None) -> Path:
    """Create a new PUT project directory. Returns the project path."""
    base = parent or Path.cwd()
    project_dir = base / name

    if project_dir.exists():
        raise FileExistsError(f"Directory '{name}' already exists")

    src_dir = project_dir / "src"
    src_dir.mkdir(parents=True)

    (project_dir / "project.zom").write_text(_PROJECT_ZOM_TEMPLATE.format(name=name))
    (src_dir / "main.put").write_text(_MAIN_PUT_TEMPLATE)
    (project_dir / ".gitignore").write_text(_GITIGNORE)

    return project_dir
