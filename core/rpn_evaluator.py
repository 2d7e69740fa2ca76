"""RPN表达式求值器 - 调用统一的Operators类"""
import numpy as np
import logging

from core.errors import EvalError
from core.token_system import TokenType, CONSTANT_VALUES, VARIABLE_NAME, ARITY
from core.operators import Operators, OPERATOR_FUNCTIONS

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def _lookup_variable(scope):
        """未绑定的x求值为NaN，不报错"""
        if scope is None or scope.get(VARIABLE_NAME) is None:
            return np.float64(np.nan)
        return Operators.as_float(scope[VARIABLE_NAME])

    @staticmethod
    def evaluate(rpn, scope=None):
        """
        评估RPN表达式
        Args:
            rpn: 后缀顺序的Token序列
            scope: 可选的变量绑定 {'x': float 或 np.ndarray}
        Returns:
            float；当x绑定为数组时返回同形状的np.ndarray
        Raises:
            EvalError: 栈下溢、结果栈深度不为1、或未知Token
        """
        stack = []

        for token in rpn:
            if token.type == TokenType.NUMBER:
                stack.append(np.float64(token.value))

            elif token.type == TokenType.CONSTANT:
                stack.append(np.float64(CONSTANT_VALUES[token.value]))

            elif token.type == TokenType.VARIABLE:
                stack.append(RPNEvaluator._lookup_variable(scope))

            elif token.type == TokenType.OPERATOR:
                kind = token.value
                arity = ARITY[kind]
                if len(stack) < arity:
                    logger.debug(f"Insufficient operands for {token.name}")
                    raise EvalError("stack underflow")

                # ================== 一元操作符处理 ==================
                if arity == 1:
                    operand = stack.pop()
                    stack.append(OPERATOR_FUNCTIONS[kind](operand))

                # ================== 二元操作符处理 ==================
                else:
                    operand2 = stack.pop()
                    operand1 = stack.pop()
                    stack.append(OPERATOR_FUNCTIONS[kind](operand1, operand2))

            else:
                logger.error(f"Unknown token in RPN: {token!r}")
                raise EvalError("unknown token")

        if len(stack) != 1:
            logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
            raise EvalError("malformed expression")

        return RPNEvaluator._finalize(stack[0], scope)

    @staticmethod
    def _finalize(result, scope):
        """标量返回float；数组作用域下把常数结果广播成数组"""
        x = None if scope is None else scope.get(VARIABLE_NAME)
        if isinstance(x, np.ndarray):
            return np.broadcast_to(np.asarray(result, dtype=np.float64), x.shape).copy()
        return float(result)
