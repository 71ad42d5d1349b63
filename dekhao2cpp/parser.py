"""Line-oriented statement recognizer for dekhao.

Only two statement shapes exist::

    dekhao(arg1, arg2, ...)
    integer|float|string name [te] expression

Anything else on a line is skipped. Expressions are never parsed; their
tokens are re-joined into a string and handed to the code generator as is.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Union

from .lexer import EOL, Token

logger = logging.getLogger(__name__)

PRINT_KEYWORD = "dekhao"
CONNECTOR = "te"


class VarType(Enum):
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"


TYPE_KEYWORDS = {vt.value: vt for vt in VarType}


@dataclass(frozen=True)
class PrintStatement:
    args: tuple[str, ...]
    line: int


@dataclass(frozen=True)
class DeclarationStatement:
    vtype: VarType
    name: str
    expr: str
    line: int


Statement = Union[PrintStatement, DeclarationStatement]


@dataclass(frozen=True)
class Skipped:
    """A line that produced no statement."""

    line: int
    reason: str


def join_tokens(toks: Iterable[Token]) -> str:
    """Join token values, putting one space between two word-like tokens only.

    ``x + 1`` becomes ``x+1`` while ``return x`` keeps its space so the words
    do not merge.
    """
    parts: list[str] = []
    prev = None
    for tok in toks:
        if prev is not None and prev.is_word_like() and tok.is_word_like():
            parts.append(" ")
        parts.append(tok.value)
        prev = tok
    return "".join(parts)


class Parser:
    def __init__(self, toks: Iterable[Token]):
        self.tokens = list(toks)
        self.i = 0
        self.skipped: list[Skipped] = []

    def at_end(self) -> bool:
        return self.i >= len(self.tokens)

    def at_eol(self) -> bool:
        return self.at_end() or self.tokens[self.i].kind == EOL

    def cur(self) -> Token:
        return self.tokens[self.i]

    def eat(self) -> Token:
        t = self.tokens[self.i]
        self.i += 1
        return t

    def skip_line(self):
        while not self.at_eol():
            self.i += 1

    def skip_eols(self):
        while not self.at_end() and self.tokens[self.i].kind == EOL:
            self.i += 1

    def parse(self) -> list[Statement]:
        statements: list[Statement] = []
        self.skip_eols()
        while not self.at_end():
            result = self.parse_line()
            if isinstance(result, Skipped):
                logger.debug("line %d skipped: %s", result.line, result.reason)
                self.skipped.append(result)
            else:
                statements.append(result)
            self.skip_line()
            self.skip_eols()
        return statements

    def parse_line(self) -> Statement | Skipped:
        t = self.cur()
        if t.kind == "WORD" and t.value == PRINT_KEYWORD:
            return self.parse_print()
        if t.kind == "WORD" and t.value in TYPE_KEYWORDS:
            return self.parse_declaration()
        return Skipped(t.line, f"unrecognized statement starting with {t.value!r}")

    def parse_print(self) -> PrintStatement | Skipped:
        line = self.eat().line
        if self.at_eol() or self.cur().kind != "LPAREN":
            return Skipped(line, f"expected '(' after {PRINT_KEYWORD}")
        self.eat()

        args: list[str] = []
        current: list[Token] = []
        depth = 0

        def flush():
            text = join_tokens(current)
            if text:
                args.append(text)
            current.clear()

        while not self.at_eol():
            t = self.eat()
            if t.kind == "LPAREN":
                depth += 1
                current.append(t)
            elif t.kind == "RPAREN":
                if depth == 0:
                    flush()
                    return PrintStatement(tuple(args), line)
                depth -= 1
                current.append(t)
            elif t.kind == "COMMA" and depth == 0:
                flush()
            else:
                current.append(t)
        return Skipped(line, "unclosed argument list")

    def parse_declaration(self) -> DeclarationStatement | Skipped:
        kw = self.eat()
        # numbers are WORD tokens too; a name must not start with a digit
        if self.at_eol() or self.cur().kind != "WORD" or not self.cur().value.isidentifier():
            return Skipped(kw.line, f"expected identifier after {kw.value!r}")
        name = self.eat().value
        if not self.at_eol() and self.cur().kind == "WORD" and self.cur().value == CONNECTOR:
            self.eat()

        expr: list[Token] = []
        while not self.at_eol():
            t = self.eat()
            # a stray connector inside the initializer is dropped
            if t.kind == "WORD" and t.value == CONNECTOR:
                continue
            expr.append(t)
        if not expr:
            return Skipped(kw.line, f"missing initializer for {name!r}")
        return DeclarationStatement(TYPE_KEYWORDS[kw.value], name, join_tokens(expr), kw.line)


def parse_tokens(toks: Iterable[Token]) -> list[Statement]:
    return Parser(toks).parse()
