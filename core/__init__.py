"""核心模块 - Token系统、RPN评估器和操作符"""
from .errors import (
    EvaluationError, ParseError, InsufficientOperands, UnbalancedExpression
)
from .token_system import (
    TokenType, OperatorKind, Token, OPERATOR_DEFINITIONS,
    classify, tokenize, RPNValidator
)
from .rpn_evaluator import RPNEvaluator, EvaluationResult, evaluate
from .operators import Operators

__all__ = [
    'EvaluationError', 'ParseError', 'InsufficientOperands', 'UnbalancedExpression',
    'TokenType', 'OperatorKind', 'Token', 'OPERATOR_DEFINITIONS',
    'classify', 'tokenize', 'RPNValidator',
    'RPNEvaluator', 'EvaluationResult', 'evaluate', 'Operators'
]
