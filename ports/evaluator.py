"""
Port: TreeEvaluator
Odpowiedzialność: deterministyczne obliczanie wartości drzewa wyrażenia.
"""
from typing import Protocol, runtime_checkable

from contracts import EvalResult, ExprTree


@runtime_checkable
class TreeEvaluator(Protocol):
    def eval_tree(self, tree: ExprTree) -> EvalResult:
        """
        Recursively reduces the tree to a single operand.
        Returns EvalResult with:
          - value: float (arithmetic) or Interval (interval domain)
          - display: canonical string form of the value
          - steps: list of human-readable computation steps, bottom-up
        Raises EvalError(DIVISION_BY_ZERO) when a right divisor is exactly 0.0.
        An empty intersection is a value (EMPTY_INTERVAL), never an error.
        """
        ...
