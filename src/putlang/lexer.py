"""Lexer for the PUT language.

Produces a flat token list from source text in one forward pass. Unknown
characters are reported as diagnostics and skipped, so the token list is
always terminated by a single EOF token.
"""

from __future__ import annotations

from putlang.errors import Diagnostic, Severity
from putlang.tokens import KEYWORDS, SINGLE_CHAR_TOKENS, Token, TokenKind

_WHITESPACE = frozenset(" \t\r\n")


def _is_digit(ch: str) -> bool:
    return '0' <= ch <= '9'


class Lexer:
    """Tokenizes PUT source code."""

    def __init__(self, source: str, filename: str = "<stdin>") -> None:
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.tokens: list[Token] = []
        self.diagnostics: list[Diagnostic] = []

    def lex(self) -> list[Token]:
        """Tokenize the entire source and return the token list."""
        while self.pos < len(self.source):
            ch = self.source[self.pos]
            if ch in _WHITESPACE:
                self._advance()
            elif _is_digit(ch):
                self._lex_number()
            elif ch.isalpha() or ch == '_':
                self._lex_identifier()
            elif ch in SINGLE_CHAR_TOKENS:
                self._advance()
                self._emit(SINGLE_CHAR_TOKENS[ch], ch, self.line)
            else:
                self._error(f"unexpected character {ch!r}", self.line)
                self._advance()

        self._emit(TokenKind.EOF, "", self.line)
        return self.tokens

    def has_errors(self) -> bool:
        return any(d.severity == Severity.ERROR for d in self.diagnostics)

    # ── Helpers ───────────────────────────────────────────────────

    def _peek(self, offset: int = 0) -> str:
        idx = self.pos + offset
        if idx < len(self.source):
            return self.source[idx]
        return '\0'

    def _advance(self) -> str:
        ch = self.source[self.pos]
        self.pos += 1
        if ch == '\n':
            self.line += 1
        return ch

    def _emit(self, kind: TokenKind, lexeme: str, line: int) -> Token:
        tok = Token(kind, lexeme, line)
        self.tokens.append(tok)
        return tok

    def _error(self, message: str, line: int) -> None:
        self.diagnostics.append(
            Diagnostic(
                severity=Severity.ERROR,
                code="E100",
                stage="Lex",
                message=message,
                line=line,
                filename=self.filename,
            )
        )

    # ── Numbers ──────────────────────────────────────────────────

    def _lex_number(self) -> None:
        start_line = self.line
        text = []
        while self.pos < len(self.source) and _is_digit(self.source[self.pos]):
            text.append(self._advance())

        # A single fractional part; the dot needs a digit after it
        if self._peek() == '.' and _is_digit(self._peek(1)):
            text.append(self._advance())
            while self.pos < len(self.source) and _is_digit(self.source[self.pos]):
                text.append(self._advance())

        self._emit(TokenKind.NUMBER, ''.join(text), start_line)

    # ── Identifiers and keywords ─────────────────────────────────

    def _lex_identifier(self) -> None:
        start_line = self.line
        text = []
        while self.pos < len(self.source) and self._is_ident_char():
            text.append(self._advance())
        word = ''.join(text)

        # Check keywords first
        kind = KEYWORDS.get(word, TokenKind.IDENTIFIER)
        self._emit(kind, word, start_line)

    def _is_ident_char(self) -> bool:
        ch = self.source[self.pos]
        return ch.isalnum() or ch == '_'
