"""rpn/errors.py"""


class ExpressionError(Exception):
    """表达式相关错误的基类"""


class InvalidToken(ExpressionError, ValueError):
    """Token构造失败：内容不是合法的操作数、操作符或分隔符"""


class MalformedExpression(ExpressionError):
    """后缀表达式无法规约为单一结果（操作数不足或栈中残留多个值）"""
