"""核心模块 - Token系统、中缀转后缀、RPN评估器和操作符"""
from .errors import ExpressionError, InvalidToken, MalformedExpression
from .token_system import (
    TokenType, Token, TOKEN_DEFINITIONS, is_operand, is_operator,
    is_delimiter, make_operand, make_operator, make_delimiter
)
from .stack import SimpleStack
from .operators import Operators
from .converter import InfixConverter
from .rpn_evaluator import RPNEvaluator
from .expression import Expression, InfixExpression, PostfixExpression

__all__ = [
    'ExpressionError', 'InvalidToken', 'MalformedExpression',
    'TokenType', 'Token', 'TOKEN_DEFINITIONS', 'is_operand', 'is_operator',
    'is_delimiter', 'make_operand', 'make_operator', 'make_delimiter',
    'SimpleStack', 'Operators', 'InfixConverter', 'RPNEvaluator',
    'Expression', 'InfixExpression', 'PostfixExpression'
]
