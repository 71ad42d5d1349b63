"""Helpers for generating C++ code for typed declarations."""


def generate_declaration_cpp(stmt, cpp_type):
    """Generate a C++ declaration with initializer.

    stmt: DeclarationStatement node
    cpp_type: C++ type name looked up from the statement's type tag
    """
    return f"{cpp_type} {stmt.name} = {stmt.expr};"
