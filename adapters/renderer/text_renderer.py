"""
Adapter: TextRenderer
Implementuje port TreeRenderer: trzy niezależne rekurencyjne przejścia drzewa.

infix()      — "( left op right )", pełne nawiasowanie w każdym węźle
prefix()     — "( op left right )" (styl Scheme)
ascii_tree() — diagram:
    /
    |
    |
    |___1.0
    |
    |___+
        |
        ...
  lewe poddrzewo wcięte o "|   ", prawe o cztery spacje.

Każdy renderer woła format_operand() dla liści; brak wspólnego cache.
"""
from __future__ import annotations

import math

from contracts import (
    ExprTree,
    Interval,
    IntervalLeaf,
    NumberLeaf,
    Operand,
    OperatorNode,
    RenderedTree,
    TreeNode,
)


def format_operand(value: Operand) -> str:
    """
    Kanoniczna postać operandu.
    Liczba całkowita (skończona) → jedna cyfra po kropce: "3.0".
    Pozostałe liczby → najkrótsza reprezentacja round-trip (repr).
    Przedział → "start,end".
    """
    if isinstance(value, Interval):
        return str(value)
    if math.isfinite(value) and value == math.floor(value):
        return f"{value:.1f}"
    return repr(value)


def _leaf_text(node: TreeNode) -> str:
    if isinstance(node, (NumberLeaf, IntervalLeaf)):
        return format_operand(node.value)
    raise TypeError(f"Nieznany typ liścia: {type(node)}")


class TextRenderer:
    """Renderuje ExprTree do postaci tekstowych."""

    # -- TreeRenderer protocol ---------------------------------------------

    def infix(self, tree: ExprTree) -> str:
        return self._infix(tree.root)

    def prefix(self, tree: ExprTree) -> str:
        return self._prefix(tree.root)

    def ascii_tree(self, tree: ExprTree) -> str:
        return self._ascii(tree.root, "")

    def render(self, tree: ExprTree) -> RenderedTree:
        return RenderedTree(
            infix=self.infix(tree),
            prefix=self.prefix(tree),
            ascii_tree=self.ascii_tree(tree),
        )

    # -- Prywatne ----------------------------------------------------------

    def _infix(self, node: TreeNode) -> str:
        if isinstance(node, OperatorNode):
            return f"( {self._infix(node.left)} {node.op} {self._infix(node.right)} )"
        return _leaf_text(node)

    def _prefix(self, node: TreeNode) -> str:
        if isinstance(node, OperatorNode):
            return f"( {node.op} {self._prefix(node.left)} {self._prefix(node.right)} )"
        return _leaf_text(node)

    def _ascii(self, node: TreeNode, indent: str) -> str:
        if not isinstance(node, OperatorNode):
            return _leaf_text(node)

        parts = [node.op, "\n"]
        # dwie linie łącznika pod operatorem
        parts += [indent, "|\n", indent, "|\n"]

        parts += [indent, "|___"]
        left = self._ascii(node.left, indent + "|   ")
        parts.append(left)
        if not left.endswith("\n"):
            parts.append("\n")

        parts += [indent, "|\n"]

        # prawe dziecko: bez pionowej kreski w kontynuacji
        parts += [indent, "|___"]
        parts.append(self._ascii(node.right, indent + "    "))
        return "".join(parts)
