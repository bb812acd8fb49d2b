"""PUT language CLI."""

from __future__ import annotations

from pathlib import Path

import click

from putlang import __version__
from putlang.ast_nodes import Program
from putlang.checker import Checker
from putlang.config import ConfigError, find_config, load_config
from putlang.errors import Diagnostic, DiagnosticRenderer
from putlang.lexer import Lexer
from putlang.parser import Parser
from putlang.printer import format_tree
from putlang.project import scaffold
from putlang.tokens import Token

DEMO_SOURCE = "var x = (42 + 5) * 2 - 3 / 1.5;"


def _report(diagnostics: list[Diagnostic], color: bool) -> None:
    renderer = DiagnosticRenderer(color=color)
    for diag in diagnostics:
        click.echo(renderer.render(diag), err=True)


def _parse_source(
    source: str, filename: str, color: bool,
) -> tuple[list[Token], Program, bool]:
    """Lex and parse source, reporting diagnostics. Returns (tokens, program, ok)."""
    lexer = Lexer(source, filename)
    tokens = lexer.lex()
    parser = Parser(tokens, filename)
    program = parser.parse()
    _report(lexer.diagnostics + parser.diagnostics, color)
    return tokens, program, not (lexer.has_errors() or parser.has_errors())


def _format_token(tok: Token) -> str:
    return f"{tok.kind.name} {tok.lexeme!r} line {tok.line}"


def _echo_tree(program: Program) -> None:
    if not program.statements:
        click.echo("Failed to parse any statements.")
    else:
        click.echo(format_tree(program))


_color_option = click.option(
    "--color/--no-color", default=True, help="Colorize diagnostics.",
)


@click.group()
@click.version_option(__version__, prog_name="putlang")
def main() -> None:
    """The PUT language front end."""


@main.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@_color_option
def tokens(file: str, color: bool) -> None:
    """Print the tokens of a PUT source file."""
    lexer = Lexer(Path(file).read_text(encoding="utf-8"), file)
    for tok in lexer.lex():
        click.echo(_format_token(tok))
    _report(lexer.diagnostics, color)
    if lexer.has_errors():
        raise SystemExit(1)


@main.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@_color_option
def parse(file: str, color: bool) -> None:
    """Print the syntax tree of a PUT source file."""
    _, program, ok = _parse_source(Path(file).read_text(encoding="utf-8"), file, color)
    _echo_tree(program)
    if not ok:
        raise SystemExit(1)


@main.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@_color_option
def check(file: str, color: bool) -> None:
    """Parse and type-check a PUT source file."""
    _, program, ok = _parse_source(Path(file).read_text(encoding="utf-8"), file, color)
    if not ok:
        raise SystemExit(1)

    checker = Checker(file)
    symbols = checker.check(program)
    _report(checker.diagnostics, color)
    if checker.has_errors():
        raise SystemExit(1)

    for name, data_type in symbols.items():
        click.echo(f"{name}: {data_type.value}")
    click.echo(f"checked {file}: {len(program.statements)} statement(s), no errors")


@main.command()
@click.argument("path", default=".", type=click.Path(exists=True))
@_color_option
def config(path: str, color: bool) -> None:
    """Show the project.zom configuration governing PATH."""
    try:
        config_path = find_config(Path(path))
        cfg = load_config(config_path)
    except FileNotFoundError:
        click.echo("error: no project.zom found", err=True)
        raise SystemExit(1)
    except ConfigError as e:
        _report(e.diagnostics, color)
        raise SystemExit(1)

    click.echo(f"project: {cfg.name}")
    click.echo(f"version: {cfg.version}")
    for basket, version in cfg.dependencies.items():
        click.echo(f"basket: {basket} (version {version})")
    for title, entries in (
        ("build", cfg.build_settings),
        ("runtime", cfg.runtime_settings),
        ("custom", cfg.custom_settings),
    ):
        for key, value in entries.items():
            click.echo(f"{title}.{key}: {value}")


@main.command()
@click.argument("name")
def new(name: str) -> None:
    """Create a new PUT project."""
    try:
        project_dir = scaffold(name)
        click.echo(f"created project '{name}' at {project_dir}")
    except FileExistsError as e:
        click.echo(f"error: {e}", err=True)
        raise SystemExit(1)


@main.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
def highlight(file: str) -> None:
    """Print a PUT source file with syntax highlighting."""
    from pygments import highlight as pygmentize
    from pygments.formatters import TerminalFormatter

    from putlang.highlight import PutLexer

    source = Path(file).read_text(encoding="utf-8")
    click.echo(pygmentize(source, PutLexer(), TerminalFormatter()), nl=False)


@main.command()
@_color_option
def demo(color: bool) -> None:
    """Parse a sample program and exercise tensor arithmetic."""
    from putlang.tensor import Tensor

    click.echo(f"Source: {DEMO_SOURCE}")
    toks, program, _ = _parse_source(DEMO_SOURCE, "<demo>", color)
    click.echo("Tokens:")
    for tok in toks:
        click.echo(f"  {_format_token(tok)}")
    click.echo("\nAST Structure:")
    _echo_tree(program)

    click.echo("\nDemonstrating Tensor Operations:")
    t1 = Tensor([1.0, 2.0, 3.0, 4.0], [2, 2])
    t2 = Tensor([5.0, 6.0, 7.0, 8.0], [2, 2])
    click.echo(f"t1 = {t1}")
    click.echo(f"t2 = {t2}")
    click.echo(f"t1 + t2 = {t1 + t2}")
    click.echo(f"t1 - t2 = {t1 - t2}")
    click.echo(f"t1 * t2 (element-wise) = {t1 * t2}")
    click.echo(f"t1 @ t2 (matrix multiplication) = {t1.matmul(t2)}")
    click.echo(f"t1 transposed = {t1.transpose()}")
    click.echo(f"exp(t1) = {t1.exp()}")
    click.echo(f"log(t1) = {t1.log()}")
    click.echo(f"Mean of t1 = {t1.mean()}")
    click.echo(f"Variance of t1 = {t1.variance()}")
    click.echo(f"Standard deviation of t1 = {t1.std_dev()}")
