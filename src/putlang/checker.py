"""Type checker stub for the PUT language.

Walks the whole tree and records declared variables. No inference is done:
every declared variable keeps the ``Integer`` type the parser tagged it with.
A bare top-level variable statement such as ``y`` parses to the same node as
``var y;``, so it is recorded as a declaration too.
The only rule enforced is that assignments target a variable.
"""

from __future__ import annotations

from putlang.ast_nodes import (
    Assignment,
    BinaryOperation,
    DataType,
    If,
    Node,
    Number,
    Parenthesis,
    Program,
    Variable,
    While,
)
from putlang.errors import Diagnostic, Severity
from putlang.visitor import NodeVisitor, children


class Checker(NodeVisitor[None]):
    """Walks a Program and builds a name -> type table."""

    def __init__(self, filename: str = "<stdin>") -> None:
        self.filename = filename
        self.symbols: dict[str, DataType] = {}
        self.diagnostics: list[Diagnostic] = []
        self._statement = 0

    def check(self, program: Program) -> dict[str, DataType]:
        self.visit(program)
        return self.symbols

    def has_errors(self) -> bool:
        return any(d.severity == Severity.ERROR for d in self.diagnostics)

    def _declare(self, stmt: Node) -> None:
        # The two shapes a `var` declaration parses to
        match stmt:
            case Variable(name=name, data_type=data_type):
                self.symbols.setdefault(name, data_type)
            case Assignment(target=Variable(name=name, data_type=data_type)):
                self.symbols[name] = data_type

    def _error(self, code: str, message: str) -> None:
        # AST nodes carry no line numbers
        self.diagnostics.append(
            Diagnostic(
                severity=Severity.ERROR,
                code=code,
                stage="Check",
                message=message,
                line=None,
                filename=self.filename,
                notes=[f"in top-level statement {self._statement}"],
            )
        )

    # ── Visitors ─────────────────────────────────────────────────

    def visit_program(self, node: Program) -> None:
        for index, stmt in enumerate(node.statements, start=1):
            self._statement = index
            self._declare(stmt)
            self.visit(stmt)

    def visit_variable(self, node: Variable) -> None:
        pass

    def visit_number(self, node: Number) -> None:
        pass

    def visit_assignment(self, node: Assignment) -> None:
        match node.target:
            case Variable():
                pass
            case _:
                self._error("E300", "invalid assignment target")
        self._walk(node)

    def visit_binary_operation(self, node: BinaryOperation) -> None:
        self._walk(node)

    def visit_parenthesis(self, node: Parenthesis) -> None:
        self._walk(node)

    def visit_if(self, node: If) -> None:
        self._walk(node)

    def visit_while(self, node: While) -> None:
        self._walk(node)

    def _walk(self, node: Node) -> None:
        for child in children(node):
            self.visit(child)
