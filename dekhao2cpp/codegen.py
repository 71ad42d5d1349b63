from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from .emitters.declaration import generate_declaration_cpp
from .emitters.print_stmt import generate_print_cpp
from .parser import DeclarationStatement, PrintStatement, Statement, VarType

CPP_TYPES = {
    VarType.INTEGER: "int",
    VarType.FLOAT: "float",
    VarType.STRING: "std::string",
}


class Feature(Enum):
    STRING = "string"
    # no header needed for float yet; tracked so callers can see it was used
    FLOAT = "float"


FEATURES_BY_TYPE = {
    VarType.STRING: Feature.STRING,
    VarType.FLOAT: Feature.FLOAT,
}


@dataclass(frozen=True)
class GeneratedProgram:
    lines: tuple[str, ...]
    features: frozenset[Feature]

    def render(self) -> str:
        """Generate the complete C++ program around the statement lines."""
        header = "#include <iostream>\n"
        if Feature.STRING in self.features:
            header += "#include <string>\n"
        header += "using namespace std;\n\n"
        body = "".join(f"    {line}\n" for line in self.lines)
        return header + "int main() {\n" + body + "    return 0;\n}\n"


def generate_statement(stmt: Statement) -> str:
    if isinstance(stmt, PrintStatement):
        return generate_print_cpp(stmt)
    if isinstance(stmt, DeclarationStatement):
        return generate_declaration_cpp(stmt, CPP_TYPES[stmt.vtype])
    raise TypeError(f"not a statement: {stmt!r}")


def required_features(statements: Iterable[Statement]) -> frozenset[Feature]:
    return frozenset(
        FEATURES_BY_TYPE[stmt.vtype]
        for stmt in statements
        if isinstance(stmt, DeclarationStatement) and stmt.vtype in FEATURES_BY_TYPE
    )


def generate_cpp(statements: Iterable[Statement]) -> GeneratedProgram:
    statements = list(statements)
    lines = tuple(generate_statement(stmt) for stmt in statements)
    return GeneratedProgram(lines, required_features(statements))


def to_cpp(statements: Iterable[Statement]) -> str:
    return generate_cpp(statements).render()
