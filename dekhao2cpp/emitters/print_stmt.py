"""Helpers for generating C++ code for dekhao(...) statements."""


def generate_print_cpp(stmt):
    """Generate one ``std::cout`` chain for a print statement.

    stmt: PrintStatement whose ``args`` are already-joined expression strings
    """
    cpp = "std::cout"
    for arg in stmt.args:
        cpp += f" << {arg}"
    return cpp + " << std::endl;"
