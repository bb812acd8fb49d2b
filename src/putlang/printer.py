"""Indented debug dump of a parsed PUT program.

One line per node, two spaces per depth level. The format is relied on by
snapshot tests and the ``putlang parse`` command, so keep it stable:

    AssignmentNode
      VariableNode: x
      NumberNode: 42
"""

from __future__ import annotations

from putlang.ast_nodes import (
    Assignment,
    BinaryOperation,
    If,
    Node,
    Number,
    Parenthesis,
    Program,
    Variable,
    While,
)
from putlang.visitor import NodeVisitor, children


class TreePrinter(NodeVisitor[list[str]]):
    """Format a Program (or a single node) as indented text."""

    def __init__(self, indent: str = "  ") -> None:
        self.indent = indent

    def format(self, node: Program | Node) -> str:
        return "\n".join(self.visit(node))

    def visit_program(self, node: Program) -> list[str]:
        lines: list[str] = []
        for stmt in node.statements:
            lines.extend(self.visit(stmt))
        return lines

    def visit_variable(self, node: Variable) -> list[str]:
        return [f"VariableNode: {node.name}"]

    def visit_number(self, node: Number) -> list[str]:
        return [f"NumberNode: {node.literal}"]

    def visit_assignment(self, node: Assignment) -> list[str]:
        return self._with_children("AssignmentNode", node)

    def visit_binary_operation(self, node: BinaryOperation) -> list[str]:
        return self._with_children(f"BinaryOperationNode: {node.operator.value}", node)

    def visit_parenthesis(self, node: Parenthesis) -> list[str]:
        return self._with_children("ParenthesisNode", node)

    def visit_if(self, node: If) -> list[str]:
        return self._with_children("IfNode", node)

    def visit_while(self, node: While) -> list[str]:
        return self._with_children("WhileNode", node)

    def _with_children(self, header: str, node: Node) -> list[str]:
        lines = [header]
        for child in children(node):
            lines.extend(self.indent + line for line in self.visit(child))
        return lines


def format_tree(program: Program) -> str:
    return TreePrinter().format(program)
