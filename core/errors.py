"""core/errors.py - 表达式求值的错误类型"""


class CalcError(Exception):
    """所有表达式错误的基类"""


class LexError(CalcError):
    """词法错误：输入中出现无法识别的字符"""

    def __init__(self, char, position):
        self.char = char
        self.position = position
        super().__init__(f"Unexpected character: {char!r} at position {position}")


class ExpressionSyntaxError(CalcError):
    """语法错误：括号不匹配"""


class EvalError(CalcError):
    """RPN求值错误：栈下溢、结果栈深度不为1、或未知Token"""
