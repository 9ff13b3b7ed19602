"""core/operators.py"""
import numpy as np

from core.token_system import OperatorKind


class Operators:
    """所有操作符的静态方法集合，按IEEE-754双精度语义计算"""

    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        with np.errstate(all='ignore'):
            return float(np.float64(operand1) + np.float64(operand2))

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符"""
        with np.errstate(all='ignore'):
            return float(np.float64(operand1) - np.float64(operand2))

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符"""
        with np.errstate(all='ignore'):
            return float(np.float64(operand1) * np.float64(operand2))

    @staticmethod
    def div(operand1, operand2):
        """除法操作符：除零得到 ±inf 或 nan，不报错"""
        with np.errstate(all='ignore'):
            return float(np.divide(np.float64(operand1), np.float64(operand2)))

    @staticmethod
    def mod(operand1, operand2):
        """
        浮点取余，符号与Python的 % 一致（跟随除数）
        模零得到 nan
        """
        with np.errstate(all='ignore'):
            return float(np.mod(np.float64(operand1), np.float64(operand2)))

    @staticmethod
    def apply(kind, operand1, operand2):
        """按操作符类型分派"""
        op_method = _DISPATCH[kind]
        return op_method(operand1, operand2)


_DISPATCH = {
    OperatorKind.ADDITION: Operators.add,
    OperatorKind.SUBTRACTION: Operators.sub,
    OperatorKind.MULTIPLICATION: Operators.mul,
    OperatorKind.DIVISION: Operators.div,
    OperatorKind.MODULO: Operators.mod,
}
