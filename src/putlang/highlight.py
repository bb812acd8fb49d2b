"""Pygments lexer for the PUT language."""

from pygments.lexer import RegexLexer, words
from pygments.token import (
    Error,
    Keyword,
    Name,
    Number,
    Operator,
    Punctuation,
    Text,
)


class PutLexer(RegexLexer):
    """Pygments lexer for the PUT language."""

    name = "PUT"
    aliases = ["put", "putlang"]
    filenames = ["*.put"]
    mimetypes = ["text/x-put"]

    tokens = {
        "root": [
            # Whitespace
            (r"\s+", Text),
            # Numbers
            (r"[0-9]+\.[0-9]+", Number.Float),
            (r"[0-9]+", Number.Integer),
            # Declaration keyword
            (words(("var",), prefix=r"\b", suffix=r"\b"), Keyword.Declaration),
            # Control keywords
            (words(("if", "else", "while"), prefix=r"\b", suffix=r"\b"), Keyword),
            # Identifiers
            (r"[^\W\d]\w*", Name),
            # Operators
            (r"[+\-*/=]", Operator),
            # Punctuation
            (r"[();]", Punctuation),
            # Anything else is a lexical error in PUT
            (r".", Error),
        ],
    }
