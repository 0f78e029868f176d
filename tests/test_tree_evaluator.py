from __future__ import annotations

import math

import pytest

from adapters.evaluator.tree_evaluator import RecursiveTreeEvaluator
from adapters.postfix_parser import ArithmeticPostfixParser, IntervalPostfixParser
from contracts import (
    EMPTY_INTERVAL,
    MIN_INT,
    Domain,
    EvalError,
    EvalErrorKind,
    ExprTree,
    Interval,
    NumberLeaf,
    OperatorNode,
)


def _arith(text: str) -> ExprTree:
    return ArithmeticPostfixParser().parse(text)


def _interval(text: str) -> ExprTree:
    return IntervalPostfixParser().parse(text)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1 2 +", 3.0),
        ("3 2 -", 1.0),
        ("3 2 *", 6.0),
        ("6 2 /", 3.0),
        ("1 2 + 3 *", 9.0),
        ("1 2 3 * +", 7.0),
        ("1 2 + 3 4 + *", 21.0),
        ("-10 -2 /", 5.0),
        ("1 1 + 1 + 1 + 1 + 1 + 1 + 1 + 1 + 1 +", 10.0),
    ],
)
def test_arithmetic_evaluation(text, expected):
    assert RecursiveTreeEvaluator().evaluate(_arith(text)) == expected


def test_arithmetic_evaluation_with_fractions():
    evaluator = RecursiveTreeEvaluator()

    assert evaluator.evaluate(_arith("1 4 6 - 5 + /")) == pytest.approx(1 / 3)
    assert evaluator.evaluate(_arith("1.2 5.4 + 1.2 5.4 + -4.5 * -")) == pytest.approx(36.3)


def test_division_by_zero_fails_at_evaluation_time():
    tree = _arith("5 0 /")

    with pytest.raises(EvalError) as exc_info:
        RecursiveTreeEvaluator().eval_tree(tree)

    assert exc_info.value.kind == EvalErrorKind.DIVISION_BY_ZERO
    assert exc_info.value.left == 5.0
    assert exc_info.value.right == 0.0


def test_division_by_computed_zero_fails():
    with pytest.raises(EvalError):
        RecursiveTreeEvaluator().evaluate(_arith("10 5 5 - /"))


def test_division_by_negative_zero_fails():
    with pytest.raises(ArithmeticError):
        RecursiveTreeEvaluator().evaluate(_arith("1 -0.0 /"))


def test_overflow_produces_infinity_not_an_error():
    value = RecursiveTreeEvaluator().evaluate(_arith("1e308 10 *"))

    assert math.isinf(value)


def test_eval_tree_records_steps_bottom_up():
    result = RecursiveTreeEvaluator().eval_tree(_arith("1 2 + 3 *"))

    assert result.domain == Domain.ARITHMETIC
    assert result.value == 9.0
    assert result.display == "9.0"
    assert result.steps == ["1.0 + 2.0 = 3.0", "3.0 * 3.0 = 9.0"]


def test_eval_tree_of_single_leaf_has_no_steps():
    result = RecursiveTreeEvaluator().eval_tree(_arith("42"))

    assert result.value == 42.0
    assert result.steps == []


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1,4 2,5 U", Interval(start=1, end=5)),
        ("1,4 2,5 I", Interval(start=2, end=4)),
        ("1,3 4,6 U", Interval(start=1, end=6)),
        ("1,4 4,7 I", Interval(start=4, end=4)),
        ("1,10 3,7 I", Interval(start=3, end=7)),
        ("-5,-2 -3,1 I", Interval(start=-3, end=-2)),
        ("-4,4 2,5 U -1,4 I", Interval(start=-1, end=4)),
        ("3,7 2,6 4,10 I U", Interval(start=3, end=7)),
        ("1,5 2,6 I 3,7 4,8 I U", Interval(start=2, end=7)),
    ],
)
def test_interval_evaluation(text, expected):
    assert RecursiveTreeEvaluator().evaluate(_interval(text)) == expected


@pytest.mark.parametrize("text", ["1,3 5,7 I", "0,0 1,1 I", "1,2 3,4 5,6 U I"])
def test_empty_intersection_is_a_value(text):
    value = RecursiveTreeEvaluator().evaluate(_interval(text))

    assert value == EMPTY_INTERVAL
    assert value == Interval(start=MIN_INT, end=MIN_INT)
    assert value.is_empty


def test_interval_steps_use_canonical_form():
    result = RecursiveTreeEvaluator().eval_tree(_interval("1,4 2,5 I"))

    assert result.domain == Domain.INTERVAL
    assert result.display == "2,4"
    assert result.steps == ["1,4 I 2,5 = 2,4"]


def test_repeated_evaluation_is_deterministic():
    tree = _arith("1 4 6 - 5 + /")
    evaluator = RecursiveTreeEvaluator()

    first = evaluator.eval_tree(tree)
    second = evaluator.eval_tree(tree)

    assert first == second
    assert evaluator.evaluate(tree) == first.value


def test_unknown_node_type_raises_type_error():
    tree = ExprTree.model_construct(domain=Domain.ARITHMETIC, root="bogus")

    with pytest.raises(TypeError):
        RecursiveTreeEvaluator().evaluate(tree)


def test_hand_built_tree_evaluates():
    tree = ExprTree(
        domain=Domain.ARITHMETIC,
        root=OperatorNode(op="*", left=NumberLeaf(value=2.5), right=NumberLeaf(value=4.5)),
    )

    assert RecursiveTreeEvaluator().evaluate(tree) == 11.25
