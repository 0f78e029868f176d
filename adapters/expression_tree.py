"""
expression_tree.py — Wygodne uchwyty drzew wyrażeń.

    tree = ArithmeticTree("1 2 +")
    tree.evaluate()     # 3.0
    tree.infix()        # "( 1.0 + 2.0 )"
    tree.prefix()       # "( + 1.0 2.0 )"
    tree.ascii_tree()   # "+\n|\n|\n|___1.0\n|\n|___2.0"

Konstruktor parsuje od razu (ParseError przy błędzie); evaluate() może
rzucić EvalError. Uchwyt niczego nie cache'uje, każde wywołanie liczy od nowa.
"""
from __future__ import annotations

from adapters.evaluator.tree_evaluator import RecursiveTreeEvaluator
from adapters.postfix_parser import (
    ArithmeticPostfixParser,
    IntervalPostfixParser,
    PostfixParser,
)
from adapters.renderer.text_renderer import TextRenderer
from adapters.tree_metrics import height, tree_stats
from contracts import Domain, ExprTree, Interval, Operand, TreeStats

_PARSERS: dict[Domain, PostfixParser] = {
    Domain.ARITHMETIC: ArithmeticPostfixParser(),
    Domain.INTERVAL: IntervalPostfixParser(),
}
_EVALUATOR = RecursiveTreeEvaluator()
_RENDERER = TextRenderer()


def get_parser(domain: Domain | str) -> PostfixParser:
    return _PARSERS[Domain(domain)]


def parse_expression(domain: Domain | str, text: str) -> ExprTree:
    """Parsuje tekst postfiksowy w danej dziedzinie. Rzuca ParseError."""
    return get_parser(domain).parse(text)


class PostfixTree:
    """Uchwyt ExprTree z operacjami evaluate / infix / prefix / ascii_tree."""

    domain: Domain

    def __init__(self, text: str) -> None:
        self._tree = parse_expression(self.domain, text)

    @property
    def tree(self) -> ExprTree:
        return self._tree

    def evaluate(self) -> Operand:
        return _EVALUATOR.evaluate(self._tree)

    def infix(self) -> str:
        return _RENDERER.infix(self._tree)

    def prefix(self) -> str:
        return _RENDERER.prefix(self._tree)

    def ascii_tree(self) -> str:
        return _RENDERER.ascii_tree(self._tree)

    # Nazwy z oryginalnego interfejsu
    scheme_expression = prefix
    text_tree = ascii_tree

    def height(self) -> int:
        return height(self._tree.root)

    def stats(self) -> TreeStats:
        return tree_stats(self._tree)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._tree.source_text!r})"


class ArithmeticTree(PostfixTree):
    domain = Domain.ARITHMETIC

    def evaluate(self) -> float:
        return super().evaluate()  # type: ignore[return-value]


class IntervalTree(PostfixTree):
    domain = Domain.INTERVAL

    def evaluate(self) -> Interval:
        return super().evaluate()  # type: ignore[return-value]
