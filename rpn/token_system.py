"""rpn/token_system.py"""
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import numpy as np

from config.config import OPERATOR_CONFIG, DELIMITER_CONFIG, OPERAND_CONFIG
from rpn.errors import InvalidToken

LEFT_PARENTHESIS = DELIMITER_CONFIG["left"]
RIGHT_PARENTHESIS = DELIMITER_CONFIG["right"]

_OPERAND_PATTERN = re.compile(OPERAND_CONFIG["pattern"], re.ASCII)


class TokenType(Enum):
    OPERAND = "operand"  # 操作数
    OPERATOR = "operator"  # 操作符
    DELIMITER = "delimiter"  # 括号


@dataclass(frozen=True)
class Token:
    """表达式中的一个元素

    type决定哪些字段有意义：
    - OPERAND: value为float64数值，name为其规范字符串
    - OPERATOR: name为符号，priority为优先级（加减1，乘除2）
    - DELIMITER: name为'('或')'
    """
    type: TokenType
    name: str
    value: Optional[float] = None
    priority: int = 0

    def __str__(self):
        return self.name


def is_operand(content):
    """带可选正负号的十进制数，如 3、-2、+0.5"""
    if not isinstance(content, str):
        return False
    return _OPERAND_PATTERN.fullmatch(content) is not None


def is_operator(content):
    if not isinstance(content, str):
        return False
    return content in OPERATOR_CONFIG


def is_delimiter(content):
    if not isinstance(content, str):
        return False
    return content in (LEFT_PARENTHESIS, RIGHT_PARENTHESIS)


def format_operand(value):
    """
    数值的规范字符串：有限值用不带指数的最短十进制表示，能被is_operand重新解析
    （3.0 -> '3'，1e-05 -> '0.00001'，-0.0 -> '-0'）；inf/nan使用float的repr
    """
    value = float(value)
    if np.isfinite(value):
        return np.format_float_positional(value, trim='-')
    return repr(value)


def make_operand(content):
    """由字符串或数值创建操作数Token"""
    if isinstance(content, bool):
        raise InvalidToken(f"{content!r} is not a legal operand")
    if isinstance(content, (int, float, np.number)):
        value = float(content)
    elif is_operand(content):
        value = float(content)
    else:
        raise InvalidToken(f"{content!r} is not a legal operand")
    return Token(TokenType.OPERAND, format_operand(value), value=value)


def make_operator(content):
    if not is_operator(content):
        raise InvalidToken(f"operator {content!r} is illegal")
    return TOKEN_DEFINITIONS[content]


def make_delimiter(content):
    if not is_delimiter(content):
        raise InvalidToken(f"delimiter {content!r} is illegal")
    return TOKEN_DEFINITIONS[content]


# Token定义字典：操作符和括号是共享的不可变常量
TOKEN_DEFINITIONS = {
    # 分隔符
    LEFT_PARENTHESIS: Token(TokenType.DELIMITER, LEFT_PARENTHESIS),
    RIGHT_PARENTHESIS: Token(TokenType.DELIMITER, RIGHT_PARENTHESIS),

    # 二元操作符
    **{symbol: Token(TokenType.OPERATOR, symbol, priority=params["priority"])
       for symbol, params in OPERATOR_CONFIG.items()},
}


def classify(content):
    """
    按 分隔符 -> 操作符 -> 操作数 的顺序把字符串归类为Token
    Returns:
        Token，无法识别时返回None
    """
    if is_delimiter(content):
        return TOKEN_DEFINITIONS[content]
    if is_operator(content):
        return TOKEN_DEFINITIONS[content]
    try:
        return make_operand(content)
    except InvalidToken:
        return None
