"""中缀 -> 后缀转换（调度场算法）"""
import logging

from rpn.stack import SimpleStack
from rpn.token_system import TokenType, LEFT_PARENTHESIS, RIGHT_PARENTHESIS

logger = logging.getLogger(__name__)


class InfixConverter:
    """把中缀Token序列转换为后缀（逆波兰）Token序列"""

    @staticmethod
    def convert(token_sequence):
        """
        调度场算法
        Args:
            token_sequence: 中缀Token序列
        Returns:
            后缀Token列表。括号不配对时不报错：多余的')'被忽略，
            未闭合的'('最后会原样弹出到输出中，由求值阶段处理
        """
        output = []
        # 只存放操作符和括号
        op_stack = SimpleStack()

        for token in token_sequence:
            if token.type == TokenType.OPERAND:
                output.append(token)

            elif token.type == TokenType.DELIMITER:
                if token.name == LEFT_PARENTHESIS:
                    op_stack.push(token)
                elif token.name == RIGHT_PARENTHESIS:
                    while not op_stack.is_empty() and op_stack.peek().name != LEFT_PARENTHESIS:
                        output.append(op_stack.pop())
                    if op_stack.is_empty():
                        logger.debug("Unmatched ')' ignored during conversion")
                    else:
                        op_stack.pop()  # 丢弃'('

            elif token.type == TokenType.OPERATOR:
                # 优先级>=当前操作符的先出栈，保证同级从左到右结合
                while (not op_stack.is_empty()
                       and op_stack.peek().type == TokenType.OPERATOR
                       and op_stack.peek().priority >= token.priority):
                    output.append(op_stack.pop())
                op_stack.push(token)

        while not op_stack.is_empty():
            output.append(op_stack.pop())

        logger.debug(f"Converted to postfix: {' '.join(t.name for t in output)}")
        return output
