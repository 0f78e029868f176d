"""
Adapter: RecursiveTreeEvaluator
Implementuje port TreeEvaluator: rekurencyjne przejście ExprTree od liści w górę.

Tablica operatorów obejmuje obie dziedziny:
  + - * /  — zwykła arytmetyka IEEE-754; dzielenie przez 0.0 → EvalError
  U        — przedział obejmujący oba argumenty (także rozłączne)
  I        — przecięcie; puste przecięcie → EMPTY_INTERVAL (wartość, nie błąd)

Drzewo jest niemutowalne, więc wielokrotna ewaluacja daje identyczny wynik.
"""
from __future__ import annotations

import logging
from typing import Callable

from adapters.renderer.text_renderer import format_operand
from contracts import (
    EMPTY_INTERVAL,
    EvalError,
    EvalErrorKind,
    EvalResult,
    ExprTree,
    Interval,
    IntervalLeaf,
    NumberLeaf,
    Operand,
    OperatorNode,
    TreeNode,
)

logger = logging.getLogger("rpntree.evaluator")


def _safe_div(a: float, b: float) -> float:
    if b == 0.0:
        raise EvalError(
            EvalErrorKind.DIVISION_BY_ZERO,
            f"Division by zero: {format_operand(a)} / {format_operand(b)}",
            left=a,
            right=b,
        )
    return a / b


def _union(a: Interval, b: Interval) -> Interval:
    return Interval(start=min(a.start, b.start), end=max(a.end, b.end))


def _intersect(a: Interval, b: Interval) -> Interval:
    start = max(a.start, b.start)
    end = min(a.end, b.end)
    if start > end:
        return EMPTY_INTERVAL
    return Interval(start=start, end=end)


# Mapowanie symboli operatorów na operacje
_OP_FUNCS: dict[str, Callable[[Operand, Operand], Operand]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _safe_div,
    "U": _union,
    "I": _intersect,
}


class RecursiveTreeEvaluator:
    """Ewaluator drzew wyrażeń obu dziedzin."""

    # -- TreeEvaluator protocol --------------------------------------------

    def eval_tree(self, tree: ExprTree) -> EvalResult:
        """Oblicza wartość drzewa; zwraca EvalResult z krokami obliczeń."""
        try:
            value, steps = self._eval(tree.root)
        except EvalError as exc:
            logger.debug("Evaluation failed (%s): %s", exc.kind.value, exc.message)
            raise
        return EvalResult(
            domain=tree.domain,
            value=value,
            display=format_operand(value),
            steps=steps,
        )

    def evaluate(self, tree: ExprTree) -> Operand:
        """Sama wartość, bez kroków."""
        return self._value(tree.root)

    # -- Prywatne ----------------------------------------------------------

    def _value(self, node: TreeNode) -> Operand:
        if isinstance(node, (NumberLeaf, IntervalLeaf)):
            return node.value
        if isinstance(node, OperatorNode):
            fn = self._op_func(node.op)
            return fn(self._value(node.left), self._value(node.right))
        raise TypeError(f"Nieznany typ węzła drzewa: {type(node)}")

    def _eval(self, node: TreeNode) -> tuple[Operand, list[str]]:
        """Zwraca (wartość, lista kroków)."""

        if isinstance(node, (NumberLeaf, IntervalLeaf)):
            return node.value, []

        if isinstance(node, OperatorNode):
            left_val, left_steps = self._eval(node.left)
            right_val, right_steps = self._eval(node.right)

            result = self._op_func(node.op)(left_val, right_val)
            step = (
                f"{format_operand(left_val)} {node.op} "
                f"{format_operand(right_val)} = {format_operand(result)}"
            )
            return result, left_steps + right_steps + [step]

        raise TypeError(f"Nieznany typ węzła drzewa: {type(node)}")

    @staticmethod
    def _op_func(op: str) -> Callable[[Operand, Operand], Operand]:
        fn = _OP_FUNCS.get(op)
        if fn is None:
            raise ValueError(f"Nieznany operator: {op!r}")
        return fn
