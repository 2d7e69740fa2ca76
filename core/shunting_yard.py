"""中缀转后缀 - shunting-yard算法"""
import logging

from core.errors import ExpressionSyntaxError
from core.token_system import (
    TokenType, OperatorKind, PRECEDENCE, RIGHT_ASSOCIATIVE, operator
)

logger = logging.getLogger(__name__)

# 出现在这些Token之后的 '-' 是一元负号
_UNARY_CONTEXT = frozenset({
    OperatorKind.ADD, OperatorKind.SUB, OperatorKind.MUL,
    OperatorKind.DIV, OperatorKind.POW,
})


def _is_unary_minus(prev_token):
    """根据原始的前一个Token判断 '-' 是否为一元负号"""
    if prev_token is None:
        return True
    if prev_token.type == TokenType.LEFT_PAREN:
        return True
    return prev_token.type == TokenType.OPERATOR and prev_token.value in _UNARY_CONTEXT


def _should_pop(incoming, top):
    if top.type == TokenType.LEFT_PAREN:
        return False
    p_in = PRECEDENCE[incoming]
    p_top = PRECEDENCE[top.value]
    if incoming in RIGHT_ASSOCIATIVE:
        return p_in < p_top
    return p_in <= p_top


def to_rpn(tokens):
    """
    把中缀Token序列转换为后缀(RPN)序列
    Args:
        tokens: tokenize() 的输出
    Returns:
        后缀顺序的Token元组
    Raises:
        ExpressionSyntaxError: 括号不匹配
    """
    output = []
    ops = []
    prev_token = None

    for token in tokens:
        if token.type in (TokenType.NUMBER, TokenType.CONSTANT, TokenType.VARIABLE):
            output.append(token)

        elif token.type == TokenType.LEFT_PAREN:
            ops.append(token)

        elif token.type == TokenType.RIGHT_PAREN:
            while ops and ops[-1].type != TokenType.LEFT_PAREN:
                output.append(ops.pop())
            if not ops:
                raise ExpressionSyntaxError("mismatched parentheses")
            ops.pop()  # 丢弃 '('

        elif token.type == TokenType.OPERATOR:
            kind = token.value
            if kind == OperatorKind.SUB and _is_unary_minus(prev_token):
                kind = OperatorKind.NEG
            while ops and _should_pop(kind, ops[-1]):
                output.append(ops.pop())
            ops.append(operator(kind))

        else:
            raise ExpressionSyntaxError(f"unexpected token {token!r}")

        # 记录原始Token，而不是改写后的一元负号
        prev_token = token

    while ops:
        top = ops.pop()
        if top.type in (TokenType.LEFT_PAREN, TokenType.RIGHT_PAREN):
            raise ExpressionSyntaxError("mismatched parentheses")
        output.append(top)

    logger.debug(f"RPN: {' '.join(t.name for t in output)}")
    return tuple(output)
