import math

import pytest

from core import (
    evaluate, tokenize, RPNEvaluator, EvaluationResult,
    ParseError, InsufficientOperands, UnbalancedExpression
)


def test_adds():
    assert evaluate("1 2 +").unwrap() == 3.0


def test_subtracts():
    assert evaluate("1 2 -").unwrap() == -1.0


def test_multiplies():
    assert evaluate("6 7 *").unwrap() == 42.0


def test_divides():
    assert evaluate("1 2 /").unwrap() == 0.5


def test_modulo():
    assert evaluate("7 3 %").unwrap() == 1.0
    assert evaluate("7.5 2 %").unwrap() == 1.5


def test_modulo_follows_divisor_sign():
    assert evaluate("-7 3 %").unwrap() == 2.0
    assert evaluate("7 -3 %").unwrap() == -2.0


@pytest.mark.parametrize("a,b", [(3.5, 2.0), (-4.25, 1.5), (1e10, 3.0), (0.1, 0.2)])
def test_matches_native_float_operations(a, b):
    assert evaluate(f"{a!r} {b!r} +").unwrap() == a + b
    assert evaluate(f"{a!r} {b!r} -").unwrap() == a - b
    assert evaluate(f"{a!r} {b!r} *").unwrap() == a * b
    assert evaluate(f"{a!r} {b!r} /").unwrap() == a / b
    assert evaluate(f"{a!r} {b!r} %").unwrap() == pytest.approx(a % b)


def test_nested_expression():
    assert evaluate("1 2 + 8 * 5 1 - / 4 3 % - 2 /").unwrap() == 2.5
    # ((1+2) * 8 / (5-1) - 1) / 2
    assert evaluate("1 2 + 8 * 5 1 - / 1 - 2 /").unwrap() == 2.5


def test_many_operands_reduce_to_one():
    assert evaluate("1 2 3 4 + + +").unwrap() == 10.0
    assert evaluate("42").unwrap() == 42.0


def test_allows_multiple_whitespaces():
    assert evaluate("1  2 +\t3 -").unwrap() == 0.0
    assert evaluate("  1\n2\n+  ").unwrap() == 3.0


def test_division_by_zero_follows_float_semantics():
    assert evaluate("1 0 /").unwrap() == math.inf
    assert evaluate("-1 0 /").unwrap() == -math.inf
    assert math.isnan(evaluate("0 0 /").unwrap())
    assert math.isnan(evaluate("1 0 %").unwrap())


def test_unsupported_token_is_parse_error():
    result = evaluate("1 2 t")
    assert not result.ok
    assert isinstance(result.error, ParseError)
    assert result.error.token == "t"
    assert result.error.message == 'cannot parse operand "t"'


def test_insufficient_operands():
    result = evaluate("1 +")
    assert isinstance(result.error, InsufficientOperands)
    assert result.error.message == "insufficient operands before operator"
    assert result.error.symbol == "+"
    assert result.error.position == 1


def test_operator_first_fails_immediately():
    result = evaluate("+ 1 2")
    assert isinstance(result.error, InsufficientOperands)
    assert result.error.position == 0


def test_missing_operator_is_unbalanced():
    result = evaluate("1 2 3 +")
    assert isinstance(result.error, UnbalancedExpression)
    assert result.error.message == "remaining untreated operands, probably missing operator"
    assert result.error.stack_size == 2


@pytest.mark.parametrize("expression", ["", "   ", "\t\n"])
def test_empty_expression_is_unbalanced(expression):
    result = evaluate(expression)
    assert isinstance(result.error, UnbalancedExpression)
    assert result.error.stack_size == 0


def test_parse_error_reported_before_stack_errors():
    result = evaluate("1 + t")
    assert isinstance(result.error, ParseError)
    assert result.error.token == "t"


def test_evaluate_is_idempotent():
    expression = "1 2 + 8 * 5 1 - / 4 3 % - 2 /"
    results = [evaluate(expression).unwrap() for _ in range(3)]
    assert results == [2.5, 2.5, 2.5]


def test_unwrap_raises_carried_error():
    result = evaluate("1 +")
    with pytest.raises(InsufficientOperands):
        result.unwrap()


def test_evaluate_tokens_raises_directly():
    assert RPNEvaluator.evaluate_tokens(tokenize("2 3 *")) == 6.0
    with pytest.raises(UnbalancedExpression):
        RPNEvaluator.evaluate_tokens(tokenize("2 3"))


def test_result_requires_exactly_one_of_value_and_error():
    with pytest.raises(ValueError):
        EvaluationResult("1")
    with pytest.raises(ValueError):
        EvaluationResult("1", value=1.0, error=ParseError("x"))


def test_results_are_immutable():
    result = evaluate("1 2 +")
    with pytest.raises(AttributeError):
        result.value = 99.0
    failed = evaluate("1 +")
    with pytest.raises(AttributeError):
        failed.error = None
    assert result.value == 3.0
    assert not failed.ok


def test_digit_group_underscores_are_rejected():
    result = evaluate("1_000 1 +")
    assert isinstance(result.error, ParseError)
    assert result.error.token == "1_000"
