"""
Adapter: IntervalPostfixParser
Implementuje port ExpressionParser dla przedziałów całkowitych (U, I).

Literał przedziału: "start,end"
  - dokładnie jeden przecinek
  - obie części niepuste
  - obie części całkowite (dozwolony znak: "-3,1"), w zakresie int32
  - start <= end, inaczej INVALID_INTERVAL (osobno od błędów formatu)
"""
from __future__ import annotations

import re

from pydantic import ValidationError

from contracts import (
    INTERVAL_OPERATORS,
    MAX_INT,
    MIN_INT,
    Domain,
    Interval,
    IntervalLeaf,
    ParseError,
    ParseErrorKind,
)

from .base import PostfixParser

_BOUND_RE = re.compile(r"[+-]?\d+", re.ASCII)


class IntervalPostfixParser(PostfixParser):
    """Parser RPN nad przedziałami [start, end]."""

    domain = Domain.INTERVAL
    operators = frozenset(INTERVAL_OPERATORS)

    def _make_leaf(self, token: str, position: int) -> IntervalLeaf:
        start, end = self._parse_bounds(token, position)
        try:
            interval = Interval(start=start, end=end)
        except ValidationError as exc:
            raise ParseError(
                ParseErrorKind.INVALID_INTERVAL,
                f"Invalid interval at position {position}: {token!r} (start > end)",
                token=token,
                position=position,
            ) from exc
        return IntervalLeaf(value=interval)

    # -- Prywatne ----------------------------------------------------------

    def _parse_bounds(self, token: str, position: int) -> tuple[int, int]:
        start_str, sep, end_str = token.partition(",")
        if not sep:
            raise self._format_error(token, position, "missing comma")
        if "," in end_str:
            raise self._format_error(token, position, "more than one comma")

        if not start_str or not end_str:
            raise self._format_error(token, position, "empty bound")

        if not (_BOUND_RE.fullmatch(start_str) and _BOUND_RE.fullmatch(end_str)):
            raise self._format_error(token, position, "bounds must be integers")

        start, end = int(start_str), int(end_str)
        if not (MIN_INT <= start <= MAX_INT and MIN_INT <= end <= MAX_INT):
            raise self._format_error(token, position, "bound out of 32-bit range")
        return start, end

    @staticmethod
    def _format_error(token: str, position: int, reason: str) -> ParseError:
        return ParseError(
            ParseErrorKind.INVALID_OPERAND,
            f"Invalid interval format at position {position}: {token!r} ({reason})",
            token=token,
            position=position,
        )
