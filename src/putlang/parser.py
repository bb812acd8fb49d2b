"""Parser for the PUT language.

Transforms a token list into an AST by recursive descent. Addition and
multiplication are two left-folding precedence levels over ``primary``.

Parsing stops at the first statement that fails: the returned Program holds
only the statements parsed before it, and the failure is recorded in
``Parser.diagnostics``.
"""

from __future__ import annotations

from typing import Callable, TypeVar

from putlang.ast_nodes import (
    Assignment,
    BinaryOperation,
    BinaryOperator,
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
from putlang.tokens import Token, TokenKind

_ADDITIVE: dict[TokenKind, BinaryOperator] = {
    TokenKind.PLUS: BinaryOperator.ADD,
    TokenKind.MINUS: BinaryOperator.SUBTRACT,
}

_MULTIPLICATIVE: dict[TokenKind, BinaryOperator] = {
    TokenKind.STAR: BinaryOperator.MULTIPLY,
    TokenKind.SLASH: BinaryOperator.DIVIDE,
}

# Combined depth of parentheses and if/while bodies
MAX_NESTING = 64


N = TypeVar("N")


class _ParseError(Exception):
    """Aborts the statement being parsed; the diagnostic is already recorded."""


class Parser:
    """Parses a list of tokens into a PUT Program."""

    def __init__(self, tokens: list[Token], filename: str = "<stdin>") -> None:
        if not tokens or tokens[-1].kind != TokenKind.EOF:
            raise ValueError("token list must end with an EOF token")
        self.tokens = tokens
        self.pos = 0
        self.filename = filename
        self.diagnostics: list[Diagnostic] = []
        self._depth = 0

    # ── Token access ─────────────────────────────────────────────

    def _peek(self) -> Token:
        return self.tokens[self.pos]

    def _previous(self) -> Token:
        return self.tokens[self.pos - 1]

    def _is_at_end(self) -> bool:
        return self._peek().kind == TokenKind.EOF

    def _check(self, kind: TokenKind) -> bool:
        if self._is_at_end():
            return False
        return self._peek().kind == kind

    def _advance(self) -> Token:
        if not self._is_at_end():
            self.pos += 1
        return self._previous()

    def _match(self, *kinds: TokenKind) -> bool:
        for kind in kinds:
            if self._check(kind):
                self._advance()
                return True
        return False

    def _consume(self, kind: TokenKind, message: str) -> Token:
        if self._check(kind):
            return self._advance()
        raise self._error(message, self._peek())

    def _error(self, message: str, tok: Token) -> _ParseError:
        self.diagnostics.append(
            Diagnostic(
                severity=Severity.ERROR,
                code="E200",
                stage="Parse",
                message=message,
                line=tok.line,
                filename=self.filename,
            )
        )
        return _ParseError(message)

    def has_errors(self) -> bool:
        return any(d.severity == Severity.ERROR for d in self.diagnostics)

    def _nested(self, parse: Callable[[], N], message: str) -> N:
        if self._depth >= MAX_NESTING:
            raise self._error(message, self._peek())
        self._depth += 1
        try:
            return parse()
        finally:
            self._depth -= 1

    # ── Top-level parsing ────────────────────────────────────────

    def parse(self) -> Program:
        """Parse statements until EOF or the first error."""
        statements: list[Node] = []
        while not self._is_at_end():
            try:
                statements.append(self._parse_statement())
            except _ParseError:
                break
        return Program(statements=tuple(statements))

    # ── Statements ───────────────────────────────────────────────

    def _parse_statement(self) -> Node:
        if self._match(TokenKind.IF):
            return self._nested(self._parse_if_statement, "Statement nested too deeply.")
        if self._match(TokenKind.WHILE):
            return self._nested(self._parse_while_statement, "Statement nested too deeply.")
        if self._match(TokenKind.VAR):
            return self._parse_variable_declaration()
        return self._parse_expression()

    def _parse_if_statement(self) -> If:
        self._consume(TokenKind.LEFT_PAREN, "Expect '(' after 'if'.")
        condition = self._parse_expression()
        self._consume(TokenKind.RIGHT_PAREN, "Expect ')' after if condition.")

        then_branch = self._parse_statement()
        else_branch = None
        if self._match(TokenKind.ELSE):
            else_branch = self._parse_statement()

        return If(condition, then_branch, else_branch)

    def _parse_while_statement(self) -> While:
        self._consume(TokenKind.LEFT_PAREN, "Expect '(' after 'while'.")
        condition = self._parse_expression()
        self._consume(TokenKind.RIGHT_PAREN, "Expect ')' after while condition.")
        return While(condition, self._parse_statement())

    def _parse_variable_declaration(self) -> Variable | Assignment:
        name = self._consume(TokenKind.IDENTIFIER, "Expect variable name.").lexeme

        # No inference: every declared variable is tagged Integer
        initializer = None
        if self._match(TokenKind.ASSIGN):
            initializer = self._parse_expression()

        self._consume(TokenKind.SEMICOLON, "Expect ';' after variable declaration.")

        if initializer is None:
            return Variable(name, DataType.INTEGER)
        return Assignment(Variable(name, DataType.INTEGER), initializer)

    # ── Expressions ──────────────────────────────────────────────

    def _parse_expression(self) -> Node:
        return self._parse_addition()

    def _parse_addition(self) -> Node:
        expr = self._parse_multiplication()
        while self._match(*_ADDITIVE):
            operator = _ADDITIVE[self._previous().kind]
            right = self._parse_multiplication()
            expr = BinaryOperation(expr, operator, right)
        return expr

    def _parse_multiplication(self) -> Node:
        expr = self._parse_primary()
        while self._match(*_MULTIPLICATIVE):
            operator = _MULTIPLICATIVE[self._previous().kind]
            right = self._parse_primary()
            expr = BinaryOperation(expr, operator, right)
        return expr

    def _parse_primary(self) -> Node:
        if self._match(TokenKind.NUMBER):
            literal = self._previous().lexeme
            data_type = DataType.FLOAT if '.' in literal else DataType.INTEGER
            return Number(literal, data_type)
        if self._match(TokenKind.IDENTIFIER):
            return Variable(self._previous().lexeme, DataType.INTEGER)
        if self._match(TokenKind.LEFT_PAREN):
            inner = self._nested(self._parse_expression, "Expression nested too deeply.")
            self._consume(TokenKind.RIGHT_PAREN, "Expect ')' after expression.")
            return Parenthesis(inner)

        tok = self._peek()
        raise self._error(f"Unexpected token {tok.kind.name} ({tok.lexeme!r}).", tok)
