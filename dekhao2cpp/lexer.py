"""Tokenizer for dekhao source, built on ply.lex.

The rules below are function rules, so ply tries them in the order they are
defined here: strings, punctuation, words, then any other single character.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

import ply.lex as lex


class NoInputError(Exception):
    """Raised when there is no source line to tokenize at all.

    An empty line is still input (it yields an end-of-line marker); this is
    only for sources that contain no lines, so callers can tell "empty file"
    apart from "file with nothing recognizable in it".
    """


EOL = "EOL"

tokens = (
    "STRING",
    "LPAREN",
    "RPAREN",
    "PLUS",
    "MINUS",
    "TIMES",
    "DIVIDE",
    "COMMA",
    "WORD",
    "OTHER",
)

t_ignore = " \t\r\f\v"


# Unterminated strings run to the end of the line.
def t_STRING(t):
    r'"[^"]*"?'
    return t


def t_LPAREN(t):
    r"\("
    return t


def t_RPAREN(t):
    r"\)"
    return t


def t_PLUS(t):
    r"\+"
    return t


def t_MINUS(t):
    r"-"
    return t


def t_TIMES(t):
    r"\*"
    return t


def t_DIVIDE(t):
    r"/"
    return t


def t_COMMA(t):
    r","
    return t


def t_WORD(t):
    r"\w+"
    return t


def t_OTHER(t):
    r"."
    return t


def t_error(t):
    # t_OTHER matches every character, so this only fires if the rules change.
    raise SyntaxError(f"Illegal character {t.value[0]!r} at position {t.lexpos}")


@dataclass(frozen=True)
class Token:
    kind: str
    value: str
    line: int
    col: int

    def is_word_like(self) -> bool:
        return self.kind in ("WORD", "STRING")


def tokenize_line(line: str, lineno: int = 1) -> list[Token]:
    """Tokenize one source line and terminate it with an EOL token."""
    lx = lexer.clone()
    lx.input(line)
    result = [Token(t.type, t.value, lineno, t.lexpos + 1) for t in iter(lx.token, None)]
    result.append(Token(EOL, "\n", lineno, len(line) + 1))
    return result


def tokenize_lines(lines: Iterable[str]) -> list[Token]:
    result: list[Token] = []
    count = 0
    for count, line in enumerate(lines, start=1):
        result.extend(tokenize_line(line, count))
    if count == 0:
        raise NoInputError("no source lines")
    return result


def tokenize_source(src: str) -> list[Token]:
    """Split ``src`` on ``\\n`` only and tokenize the lines.

    A trailing newline does not start another line, so ``""`` has no lines and
    ``"a\\n"`` has one. ``\\r`` before the newline is dropped.
    """
    lines = src.split("\n")
    if lines[-1] == "":
        lines.pop()
    return tokenize_lines(line.rstrip("\r") for line in lines)


def format_tokens(toks: Iterable[Token]) -> str:
    """Render tokens the way the CLI dumps them: ``[value]`` per token, one row per line."""
    parts = []
    for tok in toks:
        if tok.kind == EOL:
            parts.append("\n")
        else:
            parts.append(f"[{tok.value}] ")
    return "".join(parts)


lexer = lex.lex(reflags=int(re.VERBOSE | re.DOTALL))
