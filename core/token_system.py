"""core/token_system.py"""
from enum import Enum
import logging
import re

from core.errors import ParseError, InsufficientOperands, UnbalancedExpression

logger = logging.getLogger(__name__)


class TokenType(Enum):
    OPERAND = "operand"  # 操作数
    OPERATOR = "operator"  # 操作符


class OperatorKind(Enum):
    ADDITION = "+"
    SUBTRACTION = "-"
    MULTIPLICATION = "*"
    DIVISION = "/"
    MODULO = "%"

    @property
    def symbol(self):
        return self.value


class Token:
    """不可变的token：操作数(value)或操作符(operator)"""

    __slots__ = ('type', 'text', 'value', 'operator')

    def __init__(self, token_type, text, value=None, operator=None):
        object.__setattr__(self, 'type', token_type)
        object.__setattr__(self, 'text', text)
        object.__setattr__(self, 'value', value)
        object.__setattr__(self, 'operator', operator)

    def __setattr__(self, name, value):
        raise AttributeError("Token is immutable")

    @classmethod
    def operand(cls, value, text=None):
        value = float(value)
        return cls(TokenType.OPERAND, text if text is not None else repr(value), value=value)

    @classmethod
    def operator_of(cls, kind):
        return cls(TokenType.OPERATOR, kind.symbol, operator=kind)

    @property
    def is_operator(self):
        return self.type == TokenType.OPERATOR

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return (self.type, self.value, self.operator) == (other.type, other.value, other.operator)

    def __hash__(self):
        return hash((self.type, self.value, self.operator))

    def __repr__(self):
        if self.is_operator:
            return f"Token(OPERATOR, {self.operator.symbol!r})"
        return f"Token(OPERAND, {self.value!r})"


# 操作符符号表（唯一的操作符注册处）
OPERATOR_DEFINITIONS = {kind.symbol: kind for kind in OperatorKind}

# ASCII十进制字面量（可带符号、小数、指数），以及 inf/infinity/nan
_NUMBER_PATTERN = re.compile(
    r'[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf|infinity|nan)',
    re.ASCII | re.IGNORECASE
)


def classify(text):
    """将单个token文本分类为操作符或操作数"""
    kind = OPERATOR_DEFINITIONS.get(text)
    if kind is not None:
        return Token.operator_of(kind)
    if not _NUMBER_PATTERN.fullmatch(text):
        raise ParseError(text)
    return Token(TokenType.OPERAND, text, value=float(text))


def tokenize(expression):
    """
    按空白切分表达式并逐个分类
    Args:
        expression: RPN表达式字符串
    Returns:
        Token列表
    Raises:
        ParseError: 遇到无法解析的token
    """
    tokens = [classify(text) for text in expression.split()]
    logger.debug(f"Tokenized {len(tokens)} tokens from {expression!r}")
    return tokens


class RPNValidator:
    @staticmethod
    def require_operands(depth, token, position):
        """操作符前栈深度必须至少为2"""
        if depth < 2:
            logger.debug(f"Insufficient operands for {token.operator.symbol} at token {position}")
            raise InsufficientOperands(token.operator.symbol, position)

    @staticmethod
    def require_balanced(depth):
        """全部token处理完后栈中必须恰好剩一个值"""
        if depth != 1:
            logger.debug(f"Stack has {depth} elements after evaluation, expected 1")
            raise UnbalancedExpression(depth)

    @staticmethod
    def check_stack(token_sequence):
        """
        模拟栈，但只跟踪深度（不关心数值）。
        在求值会失败的同一位置抛出相同的错误。
        """
        depth = 0
        for position, tk in enumerate(token_sequence):
            if tk.type == TokenType.OPERAND:
                depth += 1
                continue
            RPNValidator.require_operands(depth, tk, position)
            depth -= 1
        RPNValidator.require_balanced(depth)
        return depth

    @staticmethod
    def is_valid(expression):
        """表达式能否被完整求值（词法和栈形状都合法）"""
        try:
            RPNValidator.check_stack(tokenize(expression))
        except (ParseError, InsufficientOperands, UnbalancedExpression) as e:
            logger.debug(f"Invalid expression {expression!r}: {e}")
            return False
        return True
