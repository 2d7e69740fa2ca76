import math

import pytest

from core import LexError, TokenType, OperatorKind, tokenize


def _kinds(tokens):
    return [t.type for t in tokens]


def test_numbers_and_operators() -> None:
    tokens = tokenize("2*(3.5+.25)")
    assert _kinds(tokens) == [
        TokenType.NUMBER, TokenType.OPERATOR, TokenType.LEFT_PAREN,
        TokenType.NUMBER, TokenType.OPERATOR, TokenType.NUMBER, TokenType.RIGHT_PAREN,
    ]
    assert tokens[0].value == 2.0
    assert tokens[3].value == 3.5
    assert tokens[5].value == 0.25
    assert tokens[1].value == OperatorKind.MUL


def test_identifiers() -> None:
    tokens = tokenize("pi*e^x")
    assert tokens[0].type == TokenType.CONSTANT and tokens[0].value == "pi"
    assert tokens[2].type == TokenType.CONSTANT and tokens[2].value == "e"
    assert tokens[4].type == TokenType.VARIABLE


def test_whitespace_is_skipped() -> None:
    assert tokenize("  1 +\t2  ") == tokenize("1+2")


def test_minus_is_never_unary_in_tokenizer() -> None:
    tokens = tokenize("-3")
    assert tokens[0].value == OperatorKind.SUB


def test_empty_input_has_no_tokens() -> None:
    assert tokenize("   ") == []


def test_double_dot_splits_into_two_numbers() -> None:
    tokens = tokenize("1.2.3")
    assert [t.value for t in tokens] == [1.2, 0.3]


def test_unknown_character() -> None:
    with pytest.raises(LexError) as exc_info:
        tokenize("2+a")
    assert exc_info.value.char == "a"
    assert exc_info.value.position == 2


def test_unknown_character_after_whitespace_reports_its_own_position() -> None:
    with pytest.raises(LexError) as exc_info:
        tokenize("1 + $")
    assert exc_info.value.char == "$"
    assert exc_info.value.position == 4


@pytest.mark.parametrize("expr", ["sin(x)", "X", "2%3", "2,5"])
def test_rejected_inputs(expr: str) -> None:
    with pytest.raises(LexError):
        tokenize(expr)


def test_tokens_are_immutable() -> None:
    token = tokenize("1")[0]
    with pytest.raises(AttributeError):
        token.value = 2
    assert not math.isnan(token.value)
