from __future__ import annotations

import pytest

from adapters.postfix_parser import ArithmeticPostfixParser, IntervalPostfixParser
from adapters.renderer.text_renderer import TextRenderer, format_operand
from contracts import EMPTY_INTERVAL, Interval


@pytest.mark.parametrize(
    "value, expected",
    [
        (3.0, "3.0"),
        (-0.0, "-0.0"),
        (1000000.0, "1000000.0"),
        (2.5, "2.5"),
        (1 / 3, "0.3333333333333333"),
        (1e-05, "1e-05"),
        (float("inf"), "inf"),
        (float("nan"), "nan"),
        (Interval(start=-3, end=1), "-3,1"),
        (EMPTY_INTERVAL, "-2147483648,-2147483648"),
    ],
)
def test_format_operand(value, expected):
    assert format_operand(value) == expected


def test_simple_addition_renders_all_three_forms():
    tree = ArithmeticPostfixParser().parse("1 2 +")
    renderer = TextRenderer()

    assert renderer.infix(tree) == "( 1.0 + 2.0 )"
    assert renderer.prefix(tree) == "( + 1.0 2.0 )"
    assert renderer.ascii_tree(tree) == "+\n|\n|\n|___1.0\n|\n|___2.0"


def test_leaf_renders_without_decoration():
    tree = ArithmeticPostfixParser().parse("42")
    renderer = TextRenderer()

    assert renderer.infix(tree) == "42.0"
    assert renderer.prefix(tree) == "42.0"
    assert renderer.ascii_tree(tree) == "42.0"


@pytest.mark.parametrize(
    "text, infix, prefix",
    [
        ("1 2 + 3 *", "( ( 1.0 + 2.0 ) * 3.0 )", "( * ( + 1.0 2.0 ) 3.0 )"),
        ("1 2 3 * +", "( 1.0 + ( 2.0 * 3.0 ) )", "( + 1.0 ( * 2.0 3.0 ) )"),
        ("1 4 6 - 5 + /", "( 1.0 / ( ( 4.0 - 6.0 ) + 5.0 ) )", "( / 1.0 ( + ( - 4.0 6.0 ) 5.0 ) )"),
        ("3 -2 +", "( 3.0 + -2.0 )", "( + 3.0 -2.0 )"),
        ("2.5 4.5 *", "( 2.5 * 4.5 )", "( * 2.5 4.5 )"),
    ],
)
def test_infix_and_prefix_are_fully_parenthesized(text, infix, prefix):
    tree = ArithmeticPostfixParser().parse(text)
    renderer = TextRenderer()

    assert renderer.infix(tree) == infix
    assert renderer.prefix(tree) == prefix


def test_ascii_tree_indents_right_subtree_with_spaces():
    tree = ArithmeticPostfixParser().parse("1 4 6 - 5 + /")
    expected = (
        "/\n"
        "|\n"
        "|\n"
        "|___1.0\n"
        "|\n"
        "|___+\n"
        "    |\n"
        "    |\n"
        "    |___-\n"
        "    |   |\n"
        "    |   |\n"
        "    |   |___4.0\n"
        "    |   |\n"
        "    |   |___6.0\n"
        "    |\n"
        "    |___5.0"
    )

    assert TextRenderer().ascii_tree(tree) == expected


def test_ascii_tree_keeps_bar_for_left_subtree():
    tree = ArithmeticPostfixParser().parse("1 2 + 3 *")
    expected = (
        "*\n"
        "|\n"
        "|\n"
        "|___+\n"
        "|   |\n"
        "|   |\n"
        "|   |___1.0\n"
        "|   |\n"
        "|   |___2.0\n"
        "|\n"
        "|___3.0"
    )

    assert TextRenderer().ascii_tree(tree) == expected


def test_interval_ascii_tree():
    tree = IntervalPostfixParser().parse("1,2 3,4 5,6 U I")
    expected = (
        "I\n"
        "|\n"
        "|\n"
        "|___1,2\n"
        "|\n"
        "|___U\n"
        "    |\n"
        "    |\n"
        "    |___3,4\n"
        "    |\n"
        "    |___5,6"
    )

    assert TextRenderer().ascii_tree(tree) == expected


def test_render_returns_all_forms_and_is_repeatable():
    tree = IntervalPostfixParser().parse("-1,4 2,5 U")
    renderer = TextRenderer()

    first = renderer.render(tree)
    second = renderer.render(tree)

    assert first == second
    assert first.infix == "( -1,4 U 2,5 )"
    assert first.prefix == "( U -1,4 2,5 )"
    assert not first.ascii_tree.endswith("\n")


def test_non_integer_operand_renders_identically_in_every_form():
    tree = ArithmeticPostfixParser().parse("0.1 7 +")
    renderer = TextRenderer()

    for text in (renderer.infix(tree), renderer.prefix(tree), renderer.ascii_tree(tree)):
        assert "0.1" in text
        assert "7.0" in text
