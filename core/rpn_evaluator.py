"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

from core.errors import EvaluationError
from core.token_system import TokenType, tokenize, RPNValidator
from core.operators import Operators

logger = logging.getLogger(__name__)


class EvaluationResult:
    """一次求值的结果：value 与 error 恰好有一个被设置"""

    __slots__ = ('expression', 'value', 'error')

    def __init__(self, expression, value=None, error=None):
        if (value is None) == (error is None):
            raise ValueError("exactly one of value and error must be set")
        object.__setattr__(self, 'expression', expression)
        object.__setattr__(self, 'value', value)
        object.__setattr__(self, 'error', error)

    def __setattr__(self, name, value):
        raise AttributeError("EvaluationResult is immutable")

    @property
    def ok(self):
        return self.error is None

    def unwrap(self):
        """返回数值；失败时抛出对应的错误"""
        if self.error is not None:
            raise self.error
        return self.value

    def __repr__(self):
        if self.ok:
            return f"EvaluationResult(value={self.value!r})"
        return f"EvaluationResult(error={self.error.kind}: {self.error.message!r})"


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def evaluate_tokens(token_sequence):
        """
        评估Token序列，栈形状检查与 RPNValidator 共用
        Args:
            token_sequence: Token序列
        Returns:
            浮点结果
        Raises:
            InsufficientOperands: 操作符前栈中少于两个值
            UnbalancedExpression: 结束时栈中不是恰好一个值
        """
        stack = []

        for position, token in enumerate(token_sequence):
            if token.type == TokenType.OPERAND:
                stack.append(token.value)
                continue

            RPNValidator.require_operands(len(stack), token, position)
            operand2 = stack.pop()
            operand1 = stack.pop()
            stack.append(Operators.apply(token.operator, operand1, operand2))

        RPNValidator.require_balanced(len(stack))
        return stack[0]

    @staticmethod
    def evaluate(expression):
        """
        词法分析并求值，错误以结果值返回而不是抛出
        Args:
            expression: RPN表达式字符串
        Returns:
            EvaluationResult
        """
        try:
            value = RPNEvaluator.evaluate_tokens(tokenize(expression))
        except EvaluationError as e:
            logger.debug(f"Evaluation of {expression!r} failed: {e.kind}: {e.message}")
            return EvaluationResult(expression, error=e)
        return EvaluationResult(expression, value=value)


def evaluate(expression):
    """模块级入口，等价于 RPNEvaluator.evaluate"""
    return RPNEvaluator.evaluate(expression)
