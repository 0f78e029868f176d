from __future__ import annotations

from adapters.evaluator.tree_evaluator import RecursiveTreeEvaluator
from adapters.postfix_parser import ArithmeticPostfixParser, IntervalPostfixParser
from adapters.renderer.text_renderer import TextRenderer
from ports.evaluator import TreeEvaluator
from ports.expression_parser import ExpressionParser
from ports.renderer import TreeRenderer


def test_parsers_implement_expression_parser_port():
    assert isinstance(ArithmeticPostfixParser(), ExpressionParser)
    assert isinstance(IntervalPostfixParser(), ExpressionParser)


def test_evaluator_implements_tree_evaluator_port():
    assert isinstance(RecursiveTreeEvaluator(), TreeEvaluator)


def test_renderer_implements_tree_renderer_port():
    assert isinstance(TextRenderer(), TreeRenderer)
