"""core/operators.py"""
import numpy as np
import logging

from core.token_system import OperatorKind

logger = logging.getLogger(__name__)


class Operators:
    """所有操作符的静态方法集合，标量和numpy数组通用"""

    @staticmethod
    def as_float(operand):
        """统一转换为float64（标量或数组）"""
        if isinstance(operand, np.ndarray):
            return operand.astype(np.float64, copy=False)
        return np.float64(operand)

    @staticmethod
    def safe_divide(x, y, default_value=np.nan):
        """除数为0时返回default_value，而不是抛错"""
        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            result = np.where(y == 0, default_value, np.divide(x, y))
        return result if result.ndim else np.float64(result)

    # 一元操作符====================

    @staticmethod
    def neg(operand):
        """一元负号"""
        return np.negative(operand)

    # 二元操作符========================================

    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return np.add(operand1, operand2)

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return np.subtract(operand1, operand2)

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return np.multiply(operand1, operand2)

    @staticmethod
    def div(operand1, operand2):
        """除法：除以0得到NaN"""
        return Operators.safe_divide(operand1, operand2)

    @staticmethod
    def pow(operand1, operand2):
        """
        实数幂运算 a^b
        负指数取倒数；负底数配分数指数得NaN；溢出得inf
        """
        with np.errstate(all='ignore'):
            return np.power(operand1, operand2)


# 操作符到实现的映射
OPERATOR_FUNCTIONS = {
    OperatorKind.NEG: Operators.neg,
    OperatorKind.ADD: Operators.add,
    OperatorKind.SUB: Operators.sub,
    OperatorKind.MUL: Operators.mul,
    OperatorKind.DIV: Operators.div,
    OperatorKind.POW: Operators.pow,
}
