"""rpn/expression.py"""
import logging

import numpy as np

from rpn.converter import InfixConverter
from rpn.errors import InvalidToken
from rpn.rpn_evaluator import RPNEvaluator
from rpn.token_system import Token, classify, make_operand

logger = logging.getLogger(__name__)


class Expression:
    """有序、只追加的Token序列"""

    def __init__(self, items=None):
        self._tokens = []
        if items is not None:
            for item in items:
                self.append(item)

    def append(self, item):
        """
        追加一个Token
        Args:
            item: Token、数值或待归类的字符串
        Returns:
            是否追加成功。无法识别的字符串返回False且序列不变
        Raises:
            InvalidToken: item类型无法转换为Token
        """
        if item is None:
            return False

        if isinstance(item, Token):
            token = item
        elif isinstance(item, str):
            token = classify(item)
            if token is None:
                logger.debug(f"Rejected token text: {item!r}")
                return False
        elif isinstance(item, (int, float, np.number)) and not isinstance(item, bool):
            token = make_operand(item)
        else:
            raise InvalidToken(f"cannot append {type(item).__name__} to an expression")

        self._tokens.append(token)
        return True

    def clear(self):
        self._tokens.clear()

    @property
    def tokens(self):
        return tuple(self._tokens)

    def to_string(self):
        return ' '.join(token.name for token in self._tokens)

    def evaluate(self):
        raise NotImplementedError

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"{self.__class__.__name__}({self.to_string()!r})"

    def __len__(self):
        return len(self._tokens)

    def __iter__(self):
        return iter(self._tokens)


class PostfixExpression(Expression):
    """后缀（逆波兰）表达式"""

    def evaluate(self):
        return RPNEvaluator.evaluate(self._tokens)


class InfixExpression(Expression):
    """中缀表达式，求值时先转换为后缀"""

    def to_postfix(self):
        postfix = PostfixExpression()
        for token in InfixConverter.convert(self._tokens):
            postfix.append(token)
        return postfix

    def evaluate(self):
        return self.to_postfix().evaluate()
