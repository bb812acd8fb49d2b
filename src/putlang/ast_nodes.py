"""AST node definitions for the PUT language."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class DataType(Enum):
    INTEGER = "Integer"
    FLOAT = "Float"


class BinaryOperator(Enum):
    ADD = "Add"
    SUBTRACT = "Subtract"
    MULTIPLY = "Multiply"
    DIVIDE = "Divide"


# ── Expressions ──────────────────────────────────────────────────


@dataclass(frozen=True)
class Variable:
    name: str
    data_type: DataType = DataType.INTEGER


@dataclass(frozen=True)
class Number:
    literal: str  # verbatim source text
    data_type: DataType


@dataclass(frozen=True)
class BinaryOperation:
    left: Node
    operator: BinaryOperator
    right: Node


@dataclass(frozen=True)
class Parenthesis:
    inner: Node


# ── Statements ───────────────────────────────────────────────────


@dataclass(frozen=True)
class Assignment:
    target: Node
    value: Node


@dataclass(frozen=True)
class If:
    condition: Node
    then_branch: Node
    else_branch: Node | None = None


@dataclass(frozen=True)
class While:
    condition: Node
    body: Node


Node = Union[Variable, Number, Assignment, BinaryOperation, Parenthesis, If, While]


@dataclass(frozen=True)
class Program:
    statements: tuple[Node, ...] = ()
