"""
Adapter: ArithmeticPostfixParser
Implementuje port ExpressionParser dla liczb rzeczywistych (+ - * /).

Literał liczbowy: opcjonalny znak, część całkowita i/lub ułamkowa,
opcjonalny wykładnik ("-17.5", ".5", "1e2"). NaN/Infinity odrzucane.
"""
from __future__ import annotations

import math
import re

from contracts import (
    ARITHMETIC_OPERATORS,
    Domain,
    NumberLeaf,
    ParseError,
    ParseErrorKind,
)

from .base import PostfixParser

_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


class ArithmeticPostfixParser(PostfixParser):
    """Parser RPN nad liczbami zmiennoprzecinkowymi."""

    domain = Domain.ARITHMETIC
    operators = frozenset(ARITHMETIC_OPERATORS)

    def _make_leaf(self, token: str, position: int) -> NumberLeaf:
        if not _NUMBER_RE.fullmatch(token):
            raise ParseError(
                ParseErrorKind.INVALID_TOKEN,
                f"Invalid token at position {position}: {token!r}",
                token=token,
                position=position,
            )
        value = float(token)
        if not math.isfinite(value):
            raise ParseError(
                ParseErrorKind.INVALID_TOKEN,
                f"Number out of range at position {position}: {token!r}",
                token=token,
                position=position,
            )
        return NumberLeaf(value=value)
