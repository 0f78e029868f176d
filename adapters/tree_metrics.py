"""
tree_metrics.py — Miary strukturalne drzewa wyrażenia.

height()          — liść ma wysokość 1, węzeł: 1 + max(lewe, prawe)
count_leaves()    — liczba operandów
count_operators() — liczba węzłów wewnętrznych
Dla poprawnego drzewa zawsze: leaves == operators + 1.
"""
from __future__ import annotations

from contracts import ExprTree, OperatorNode, TreeNode, TreeStats


def height(node: TreeNode) -> int:
    if isinstance(node, OperatorNode):
        return 1 + max(height(node.left), height(node.right))
    return 1


def count_leaves(node: TreeNode) -> int:
    if isinstance(node, OperatorNode):
        return count_leaves(node.left) + count_leaves(node.right)
    return 1


def count_operators(node: TreeNode) -> int:
    if isinstance(node, OperatorNode):
        return 1 + count_operators(node.left) + count_operators(node.right)
    return 0


def tree_stats(tree: ExprTree) -> TreeStats:
    return TreeStats(
        height=height(tree.root),
        leaf_count=count_leaves(tree.root),
        operator_count=count_operators(tree.root),
    )
