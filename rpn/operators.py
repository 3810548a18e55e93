"""rpn/operators.py"""
import numpy as np


class Operators:
    """所有二元算术操作符的静态方法集合

    统一在float64上计算，并忽略浮点异常：除零得到±inf，0÷0得到nan，
    溢出得到inf，与IEEE-754一致，不抛出异常。
    """

    @staticmethod
    def add(operand1, operand2):
        with np.errstate(all='ignore'):
            return float(np.add(np.float64(operand1), np.float64(operand2)))

    @staticmethod
    def sub(operand1, operand2):
        with np.errstate(all='ignore'):
            return float(np.subtract(np.float64(operand1), np.float64(operand2)))

    @staticmethod
    def mul(operand1, operand2):
        with np.errstate(all='ignore'):
            return float(np.multiply(np.float64(operand1), np.float64(operand2)))

    @staticmethod
    def div(operand1, operand2):
        """除法：分母为0时返回inf/nan"""
        with np.errstate(all='ignore'):
            return float(np.divide(np.float64(operand1), np.float64(operand2)))
