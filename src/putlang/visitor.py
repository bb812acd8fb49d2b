"""Read-only traversal over the closed set of AST node types."""

from __future__ import annotations

from typing import Generic, TypeVar

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

T = TypeVar("T")


class NodeVisitor(Generic[T]):
    """Dispatches each node type to its ``visit_*`` method.

    All dispatch goes through the single ``match`` in :meth:`visit`, so a new
    node type only needs a new case there and a new method here.
    """

    def visit(self, node: Program | Node) -> T:
        match node:
            case Program():
                return self.visit_program(node)
            case Variable():
                return self.visit_variable(node)
            case Number():
                return self.visit_number(node)
            case Assignment():
                return self.visit_assignment(node)
            case BinaryOperation():
                return self.visit_binary_operation(node)
            case Parenthesis():
                return self.visit_parenthesis(node)
            case If():
                return self.visit_if(node)
            case While():
                return self.visit_while(node)
            case _:
                raise TypeError(f"not an AST node: {node!r}")

    def visit_program(self, node: Program) -> T:
        raise NotImplementedError

    def visit_variable(self, node: Variable) -> T:
        raise NotImplementedError

    def visit_number(self, node: Number) -> T:
        raise NotImplementedError

    def visit_assignment(self, node: Assignment) -> T:
        raise NotImplementedError

    def visit_binary_operation(self, node: BinaryOperation) -> T:
        raise NotImplementedError

    def visit_parenthesis(self, node: Parenthesis) -> T:
        raise NotImplementedError

    def visit_if(self, node: If) -> T:
        raise NotImplementedError

    def visit_while(self, node: While) -> T:
        raise NotImplementedError


def children(node: Node) -> list[Node]:
    """Return the direct children of a node in field order."""
    match node:
        case Variable() | Number():
            return []
        case Assignment(target=target, value=value):
            return [target, value]
        case BinaryOperation(left=left, right=right):
            return [left, right]
        case Parenthesis(inner=inner):
            return [inner]
        case If(condition=cond, then_branch=then, else_branch=None):
            return [cond, then]
        case If(condition=cond, then_branch=then, else_branch=other):
            return [cond, then, other]
        case While(condition=cond, body=body):
            return [cond, body]
        case _:
            raise TypeError(f"not an AST node: {node!r}")
