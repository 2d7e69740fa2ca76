"""核心模块 - Token系统、词法分析、中缀转后缀和RPN评估器"""
from .errors import CalcError, LexError, ExpressionSyntaxError, EvalError
from .token_system import (
    TokenType, OperatorKind, Token, TOKEN_DEFINITIONS,
    PRECEDENCE, RIGHT_ASSOCIATIVE
)
from .tokenizer import tokenize
from .shunting_yard import to_rpn
from .rpn_evaluator import RPNEvaluator
from .operators import Operators
from .expression import parse_expression, evaluate_expression

__all__ = [
    'CalcError', 'LexError', 'ExpressionSyntaxError', 'EvalError',
    'TokenType', 'OperatorKind', 'Token', 'TOKEN_DEFINITIONS',
    'PRECEDENCE', 'RIGHT_ASSOCIATIVE',
    'tokenize', 'to_rpn', 'RPNEvaluator', 'Operators',
    'parse_expression', 'evaluate_expression'
]
