from __future__ import annotations

import pytest

from adapters.postfix_parser import ArithmeticPostfixParser
from adapters.tree_metrics import count_leaves, count_operators, height, tree_stats


@pytest.mark.parametrize(
    "text, operators",
    [
        ("42", 0),
        ("1 2 +", 1),
        ("1 2 + 3 4 + *", 3),
        ("1 1 + 1 + 1 + 1 + 1 +", 5),
    ],
)
def test_k_operators_give_k_plus_one_leaves(text, operators):
    root = ArithmeticPostfixParser().parse(text).root

    assert count_operators(root) == operators
    assert count_leaves(root) == operators + 1


def test_height_counts_leaf_as_one():
    parser = ArithmeticPostfixParser()

    assert height(parser.parse("7").root) == 1
    assert height(parser.parse("1 2 +").root) == 2
    assert height(parser.parse("1 4 6 - 5 + /").root) == 4


def test_tree_stats():
    stats = tree_stats(ArithmeticPostfixParser().parse("1 2 + 3 4 + *"))

    assert stats.height == 3
    assert stats.leaf_count == 4
    assert stats.operator_count == 3
