"""dekhao -> C++ translator."""

from __future__ import annotations

import logging

from .codegen import Feature, GeneratedProgram, generate_cpp, to_cpp
from .lexer import NoInputError, Token, format_tokens, tokenize_line, tokenize_lines, tokenize_source
from .parser import DeclarationStatement, Parser, PrintStatement, Skipped, VarType, parse_tokens

logger = logging.getLogger(__name__)

__all__ = [
    "DeclarationStatement",
    "Feature",
    "GeneratedProgram",
    "NoInputError",
    "Parser",
    "PrintStatement",
    "Skipped",
    "Token",
    "VarType",
    "format_tokens",
    "generate_cpp",
    "parse_tokens",
    "to_cpp",
    "tokenize_line",
    "tokenize_lines",
    "tokenize_source",
    "transpile",
]


def transpile(src: str) -> GeneratedProgram:
    """Run the whole pipeline on source text.

    Raises ``NoInputError`` if ``src`` has no lines.
    """
    statements = parse_tokens(tokenize_source(src))
    logger.debug("recognized %d statement(s)", len(statements))
    return generate_cpp(statements)
