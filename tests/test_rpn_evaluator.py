import math

import numpy as np
import pytest

from core import EvalError, RPNEvaluator, Token, TokenType, OperatorKind, TOKEN_DEFINITIONS
from core.token_system import number, operator


def test_binary_operand_order() -> None:
    rpn = (number(10), number(4), operator(OperatorKind.SUB))
    assert RPNEvaluator.evaluate(rpn) == 6.0


def test_constants() -> None:
    assert RPNEvaluator.evaluate((TOKEN_DEFINITIONS["pi"],)) == math.pi
    assert RPNEvaluator.evaluate((TOKEN_DEFINITIONS["e"],)) == math.e


def test_variable_binding() -> None:
    rpn = (TOKEN_DEFINITIONS["x"], number(2), operator(OperatorKind.MUL))
    assert RPNEvaluator.evaluate(rpn, {"x": 3.5}) == 7.0


def test_unbound_variable_is_nan() -> None:
    rpn = (TOKEN_DEFINITIONS["x"], number(1), operator(OperatorKind.ADD))
    assert math.isnan(RPNEvaluator.evaluate(rpn))
    assert math.isnan(RPNEvaluator.evaluate(rpn, {}))


def test_division_by_zero_is_nan() -> None:
    rpn = (number(5), number(0), operator(OperatorKind.DIV))
    assert math.isnan(RPNEvaluator.evaluate(rpn))


@pytest.mark.parametrize(
    ("a", "b", "check"),
    [
        (-8, 0.5, math.isnan),
        (0, -1, lambda v: v == math.inf),
        (10, 400, lambda v: v == math.inf),
        (2, -3, lambda v: v == 0.125),
    ],
)
def test_power_domain(a, b, check) -> None:
    rpn = (number(a), number(b), operator(OperatorKind.POW))
    assert check(RPNEvaluator.evaluate(rpn))


def test_result_is_plain_float() -> None:
    result = RPNEvaluator.evaluate((number(1), number(2), operator(OperatorKind.ADD)))
    assert type(result) is float


def test_stack_underflow_binary() -> None:
    with pytest.raises(EvalError, match="stack underflow"):
        RPNEvaluator.evaluate((number(2), operator(OperatorKind.ADD)))


def test_stack_underflow_unary() -> None:
    with pytest.raises(EvalError, match="stack underflow"):
        RPNEvaluator.evaluate((operator(OperatorKind.NEG),))


@pytest.mark.parametrize("rpn", [(), (number(1), number(2))])
def test_malformed_expression(rpn) -> None:
    with pytest.raises(EvalError, match="malformed expression"):
        RPNEvaluator.evaluate(rpn)


def test_unknown_token() -> None:
    with pytest.raises(EvalError, match="unknown token"):
        RPNEvaluator.evaluate((number(1), Token(TokenType.LEFT_PAREN)))


def test_array_scope_evaluates_elementwise() -> None:
    xs = np.array([-1.0, 0.0, 2.0])
    rpn = (number(1), TOKEN_DEFINITIONS["x"], operator(OperatorKind.DIV))
    result = RPNEvaluator.evaluate(rpn, {"x": xs})
    assert result.shape == (3,)
    assert result[0] == -1.0
    assert math.isnan(result[1])
    assert result[2] == 0.5


def test_array_scope_broadcasts_constant_result() -> None:
    xs = np.linspace(0, 1, 4)
    result = RPNEvaluator.evaluate((number(7),), {"x": xs})
    assert result.tolist() == [7.0] * 4


def test_evaluation_is_repeatable() -> None:
    rpn = (TOKEN_DEFINITIONS["x"], number(2), operator(OperatorKind.POW))
    assert RPNEvaluator.evaluate(rpn, {"x": 3}) == RPNEvaluator.evaluate(rpn, {"x": 3}) == 9.0
