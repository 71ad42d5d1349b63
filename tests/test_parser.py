import pytest

from dekhao2cpp.lexer import tokenize_line, tokenize_source
from dekhao2cpp.parser import (
    DeclarationStatement,
    Parser,
    PrintStatement,
    Skipped,
    VarType,
    join_tokens,
    parse_tokens,
)


def parse(src):
    return parse_tokens(tokenize_source(src))


def test_integer_declaration():
    assert parse("integer x te 5 + 3") == [DeclarationStatement(VarType.INTEGER, "x", "5+3", 1)]


def test_print_statement():
    assert parse('dekhao("Hello", x)') == [PrintStatement(('"Hello"', "x"), 1)]


def test_string_declaration():
    assert parse('string s te "abc"') == [DeclarationStatement(VarType.STRING, "s", '"abc"', 1)]


def test_unrecognized_line_is_skipped():
    parser = Parser(tokenize_source("foo bar baz"))
    assert parser.parse() == []
    assert [s.line for s in parser.skipped] == [1]


def test_connector_is_optional():
    assert parse("float f 2.5") == [DeclarationStatement(VarType.FLOAT, "f", "2.5", 1)]


def test_stray_connector_in_initializer_is_dropped():
    assert parse("integer y te a te b") == [DeclarationStatement(VarType.INTEGER, "y", "a b", 1)]


def test_word_like_tokens_keep_one_space():
    assert parse('dekhao(a b, "x" y, a+b)') == [PrintStatement(("a b", '"x" y', "a+b"), 1)]


def test_nested_parentheses_stay_in_one_argument():
    assert parse("dekhao(f(a, b), (x + 1) * 2)") == [PrintStatement(("f(a,b)", "(x+1)*2"), 1)]


def test_empty_arguments_are_dropped():
    assert parse("dekhao()") == [PrintStatement((), 1)]
    assert parse("dekhao(a,,b,)") == [PrintStatement(("a", "b"), 1)]


def test_tokens_after_closing_paren_are_discarded():
    assert parse("dekhao(x) junk here") == [PrintStatement(("x",), 1)]


@pytest.mark.parametrize(
    "src",
    [
        'dekhao "no parens"',
        "dekhao",
        "dekhao(x, y",
        "integer",
        "integer 5",
        "integer 5 te 3",
        "integer 2x te 1",
        "integer + x",
        "integer x",
        "integer x te",
        "integer x te te",
        '"dekhao"(x)',
    ],
)
def test_malformed_lines_produce_nothing(src):
    parser = Parser(tokenize_source(src))
    assert parser.parse() == []
    assert len(parser.skipped) == 1


def test_unclosed_print_does_not_swallow_next_line():
    assert parse("dekhao(x\ninteger y te 1") == [DeclarationStatement(VarType.INTEGER, "y", "1", 2)]


def test_parse_line_reports_skip_reason():
    parser = Parser(tokenize_line("dekhao x"))
    result = parser.parse_line()
    assert isinstance(result, Skipped)
    assert result.line == 1
    assert "(" in result.reason


def test_statements_follow_source_order():
    src = "\n".join([
        "dekhao(1)",
        "",
        "foo",
        "integer a te 1",
        "string b te \"x\"",
        "",
        "",
        "dekhao(a, b)",
    ])
    statements = parse(src)
    lines = [s.line for s in statements]
    assert lines == [1, 4, 5, 8]
    assert lines == sorted(lines)


def test_join_tokens():
    tokens = tokenize_line('return x + "a" "b" (y)')[:-1]
    assert join_tokens(tokens) == 'return x+"a" "b"(y)'


def test_statements_are_immutable():
    stmt = parse("integer x te 1")[0]
    with pytest.raises(AttributeError):
        stmt.name = "y"
