"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

from config.config import OPERATOR_CONFIG
from rpn.errors import MalformedExpression
from rpn.operators import Operators
from rpn.stack import SimpleStack
from rpn.token_system import TokenType

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def evaluate(token_sequence):
        """
        评估后缀表达式
        Args:
            token_sequence: 后缀Token序列
        Returns:
            float结果
        Raises:
            MalformedExpression: 操作数不足，或结束时栈中不是恰好一个值
        """
        stack = SimpleStack()

        for token in token_sequence:
            if token.type == TokenType.OPERAND:
                stack.push(token.value)

            elif token.type == TokenType.OPERATOR:
                # 先出栈的是右操作数
                operand2 = stack.pop()
                operand1 = stack.pop()
                if operand1 is None or operand2 is None:
                    logger.debug(f"Insufficient operands for {token.name}")
                    raise MalformedExpression(f"insufficient operands for operator '{token.name}'")

                op_method = getattr(Operators, OPERATOR_CONFIG[token.name]["method"])
                stack.push(op_method(operand1, operand2))

            else:
                # 未闭合的括号在转换阶段被原样输出，这里跳过
                logger.debug(f"Skipping stray delimiter '{token.name}'")

        if stack.size() != 1:
            logger.debug(f"Stack has {stack.size()} elements after evaluation, expected 1")
            raise MalformedExpression(
                f"expression left {stack.size()} values on the stack, expected 1"
            )
        return stack.pop()
