"""core/token_system.py"""
from enum import Enum
import math


class TokenType(Enum):
    NUMBER = "number"  # 数字字面量
    CONSTANT = "constant"  # pi / e
    VARIABLE = "variable"  # x
    OPERATOR = "operator"  # 操作符
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"


class OperatorKind(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    POW = "^"
    NEG = "u-"  # 一元负号，只由转换器生成


class Token:
    """不可变的词法单元，不携带位置信息"""

    __slots__ = ('_type', '_value')

    def __init__(self, token_type, value=None):
        object.__setattr__(self, '_type', token_type)
        object.__setattr__(self, '_value', value)

    def __setattr__(self, name, value):
        raise AttributeError("Token is immutable")

    @property
    def type(self):
        return self._type

    @property
    def value(self):
        return self._value

    @property
    def name(self):
        """用于日志和调试的文本形式"""
        if self._type == TokenType.OPERATOR:
            return self._value.value
        if self._type == TokenType.NUMBER:
            return repr(self._value)
        if self._type in (TokenType.LEFT_PAREN, TokenType.RIGHT_PAREN):
            return self._type.value
        return self._value

    def is_operator(self, *kinds):
        if self._type != TokenType.OPERATOR:
            return False
        return not kinds or self._value in kinds

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self._type == other._type and self._value == other._value

    def __hash__(self):
        return hash((self._type, self._value))

    def __repr__(self):
        return f"Token({self._type.name}, {self.name})"


def number(value):
    return Token(TokenType.NUMBER, float(value))


def operator(kind):
    return OPERATOR_TOKENS[kind]


# 常量与变量
CONSTANT_VALUES = {
    'pi': math.pi,
    'e': math.e,
}
VARIABLE_NAME = 'x'

# 固定Token定义
TOKEN_DEFINITIONS = {
    'pi': Token(TokenType.CONSTANT, 'pi'),
    'e': Token(TokenType.CONSTANT, 'e'),
    'x': Token(TokenType.VARIABLE, VARIABLE_NAME),
    '(': Token(TokenType.LEFT_PAREN),
    ')': Token(TokenType.RIGHT_PAREN),
    '+': Token(TokenType.OPERATOR, OperatorKind.ADD),
    '-': Token(TokenType.OPERATOR, OperatorKind.SUB),
    '*': Token(TokenType.OPERATOR, OperatorKind.MUL),
    '/': Token(TokenType.OPERATOR, OperatorKind.DIV),
    '^': Token(TokenType.OPERATOR, OperatorKind.POW),
}

OPERATOR_TOKENS = {kind: Token(TokenType.OPERATOR, kind) for kind in OperatorKind}

# 优先级：一元负号最高
PRECEDENCE = {
    OperatorKind.NEG: 4,
    OperatorKind.POW: 3,
    OperatorKind.MUL: 2,
    OperatorKind.DIV: 2,
    OperatorKind.ADD: 1,
    OperatorKind.SUB: 1,
}

RIGHT_ASSOCIATIVE = frozenset({OperatorKind.POW, OperatorKind.NEG})

# 操作数个数
ARITY = {kind: (1 if kind == OperatorKind.NEG else 2) for kind in OperatorKind}
