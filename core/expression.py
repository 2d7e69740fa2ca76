"""表达式入口 - tokenize → to_rpn → evaluate"""
import logging

from core.tokenizer import tokenize
from core.shunting_yard import to_rpn
from core.rpn_evaluator import RPNEvaluator

logger = logging.getLogger(__name__)


def parse_expression(expr):
    """把中缀表达式解析为RPN序列"""
    return to_rpn(tokenize(expr))


def evaluate_expression(expr, scope=None):
    """
    求值一个中缀表达式
    Args:
        expr: 表达式字符串，例如 '2*(3+4)^2'
        scope: 可选的 {'x': value}
    Returns:
        float（除零、未绑定x等情况为NaN）
    """
    rpn = parse_expression(expr)
    return RPNEvaluator.evaluate(rpn, scope)
