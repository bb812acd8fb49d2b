"""The PUT language front end: lexer, parser and syntax tree."""

__version__ = "0.1.0"
