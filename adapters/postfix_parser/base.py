"""
Adapter bazowy: PostfixParser
Maszyna stosowa shift-reduce budująca drzewo z notacji postfiksowej.

Algorytm (tokeny od lewej do prawej, jeden stos węzłów):
  operator  → zdejmij right, potem left; wstaw OperatorNode(op, left, right)
  inny      → literał operandu dziedziny; wstaw liść
Na końcu na stosie musi zostać dokładnie jeden węzeł.

Podklasy podają: domain, operators, _make_leaf().
"""
from __future__ import annotations

import logging
import re

from contracts import (
    Domain,
    ExprTree,
    OperatorNode,
    ParseError,
    ParseErrorKind,
    ParseOutcome,
    TreeNode,
)

logger = logging.getLogger("rpntree.parser")

# Tylko białe znaki ASCII; NBSP i separatory Unicode zostają częścią tokenu
_ASCII_WS = " \t\n\r\f\v"
_WS_RE = re.compile(r"\s+", re.ASCII)


def tokenize(text: str) -> list[str]:
    """Dzieli przycięty tekst na tokeny po ciągach białych znaków."""
    stripped = text.strip(_ASCII_WS)
    if not stripped:
        return []
    return _WS_RE.split(stripped)


class PostfixParser:
    """Wspólny parser RPN; literały operandów interpretują podklasy."""

    domain: Domain
    operators: frozenset[str] = frozenset()

    # -- ExpressionParser protocol -----------------------------------------

    def parse(self, text: str | None) -> ExprTree:
        if text is None or not text.strip(_ASCII_WS):
            raise ParseError(
                ParseErrorKind.EMPTY_EXPRESSION,
                "Expression cannot be null or empty",
            )

        tokens = tokenize(text)
        stack: list[TreeNode] = []

        for position, token in enumerate(tokens):
            if token in self.operators:
                if len(stack) < 2:
                    raise ParseError(
                        ParseErrorKind.INSUFFICIENT_OPERANDS,
                        f"Insufficient operands for operator {token!r} "
                        f"at position {position}: need 2, have {len(stack)}",
                        token=token,
                        position=position,
                        remaining=len(stack),
                    )
                # Kolejność: najpierw prawy (bliżej operatora), potem lewy
                right = stack.pop()
                left = stack.pop()
                stack.append(OperatorNode(op=token, left=left, right=right))  # type: ignore[arg-type]
            else:
                stack.append(self._make_leaf(token, position))

        if not stack:
            raise ParseError(ParseErrorKind.NO_RESULT, "Invalid expression: no result")
        if len(stack) > 1:
            raise ParseError(
                ParseErrorKind.TOO_MANY_OPERANDS,
                f"Invalid expression: too many operands "
                f"({len(stack)} subtrees left, expected 1)",
                remaining=len(stack),
            )

        logger.debug("Parsed %d %s tokens", len(tokens), self.domain.value)
        return ExprTree(domain=self.domain, root=stack[0], source_text=text.strip(_ASCII_WS))

    def try_parse(self, text: str | None) -> ParseOutcome:
        try:
            return ParseOutcome(ok=True, tree=self.parse(text))
        except ParseError as exc:
            logger.debug("Parse failed (%s): %s", exc.kind.value, exc.message)
            return ParseOutcome(ok=False, issue=exc.to_issue())

    # -- Dla podklas -------------------------------------------------------

    def _make_leaf(self, token: str, position: int) -> TreeNode:
        raise NotImplementedError
