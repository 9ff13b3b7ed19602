"""core/errors.py - 求值错误类型"""


class EvaluationError(Exception):
    """所有求值错误的基类"""

    kind = "EvaluationError"

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message


class ParseError(EvaluationError):
    """token既不是操作符也不是合法数字"""

    kind = "ParseError"

    def __init__(self, token):
        super().__init__(f'cannot parse operand "{token}"')
        self.token = token


class InsufficientOperands(EvaluationError):
    """操作符前栈中不足两个操作数"""

    kind = "InsufficientOperands"

    def __init__(self, symbol=None, position=None):
        super().__init__("insufficient operands before operator")
        self.symbol = symbol
        self.position = position


class UnbalancedExpression(EvaluationError):
    """求值结束后栈中不是恰好一个值（空表达式或缺少操作符）"""

    kind = "UnbalancedExpression"

    def __init__(self, stack_size=0):
        super().__init__("remaining untreated operands, probably missing operator")
        self.stack_size = stack_size
