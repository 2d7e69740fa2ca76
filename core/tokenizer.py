"""词法分析器 - 把表达式字符串切分为Token序列"""
import re
import logging

from core.errors import LexError
from core.token_system import TOKEN_DEFINITIONS, number

logger = logging.getLogger(__name__)

# 匹配优先级：数字 > pi / e / x > 单字符操作符和括号
_TOKEN_PATTERN = re.compile(r"([0-9]*\.?[0-9]+)|(pi|e|x|[-+*/^()])")
_WHITESPACE = re.compile(r"\s*")


def tokenize(expr):
    """
    从左到右扫描表达式
    Args:
        expr: 输入字符串
    Returns:
        Token列表（保持输入顺序）
    Raises:
        LexError: 出现无法识别的字符
    """
    tokens = []
    pos = _WHITESPACE.match(expr).end()

    while pos < len(expr):
        match = _TOKEN_PATTERN.match(expr, pos)
        if not match:
            raise LexError(expr[pos], pos)

        literal, symbol = match.groups()
        if literal is not None:
            tokens.append(number(literal))
        else:
            tokens.append(TOKEN_DEFINITIONS[symbol])

        pos = _WHITESPACE.match(expr, match.end()).end()

    logger.debug(f"Tokenized {expr!r} into {len(tokens)} tokens")
    return tokens
