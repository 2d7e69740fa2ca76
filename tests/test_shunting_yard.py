import pytest

from core import ExpressionSyntaxError, tokenize, to_rpn


def _rpn(expr: str) -> list:
    return [t.name for t in to_rpn(tokenize(expr))]


def test_precedence() -> None:
    assert _rpn("1+2*3") == ["1.0", "2.0", "3.0", "*", "+"]


def test_left_associativity() -> None:
    assert _rpn("8-3-2") == ["8.0", "3.0", "-", "2.0", "-"]
    assert _rpn("8/4/2") == ["8.0", "4.0", "/", "2.0", "/"]


def test_power_is_right_associative() -> None:
    assert _rpn("3^3^2") == ["3.0", "3.0", "2.0", "^", "^"]


def test_parentheses_are_dropped() -> None:
    assert _rpn("(1+2)*3") == ["1.0", "2.0", "+", "3.0", "*"]


@pytest.mark.parametrize(
    ("expr", "expected"),
    [
        ("-3", ["3.0", "u-"]),
        ("(-3)", ["3.0", "u-"]),
        ("2*-3", ["2.0", "3.0", "u-", "*"]),
        ("2^-3", ["2.0", "3.0", "u-", "^"]),
        ("3 + -2", ["3.0", "2.0", "u-", "+"]),
        ("--3", ["3.0", "u-", "u-"]),
        ("5-2", ["5.0", "2.0", "-"]),
        ("x-1", ["x", "1.0", "-"]),
        (")-1", None),
    ],
)
def test_unary_minus_classification(expr: str, expected) -> None:
    if expected is None:
        with pytest.raises(ExpressionSyntaxError):
            _rpn(expr)
    else:
        assert _rpn(expr) == expected


def test_unary_minus_binds_tighter_than_power() -> None:
    assert _rpn("-2^2") == ["2.0", "u-", "2.0", "^"]


def test_constants_and_variable_pass_through() -> None:
    assert _rpn("pi*x+e") == ["pi", "x", "*", "e", "+"]


@pytest.mark.parametrize("expr", ["(1+2", "1+2)", "((1)", ")("])
def test_mismatched_parentheses(expr: str) -> None:
    with pytest.raises(ExpressionSyntaxError, match="mismatched parentheses"):
        _rpn(expr)


def test_dangling_operator_is_left_for_the_evaluator() -> None:
    assert _rpn("2+") == ["2.0", "+"]
