"""
Port: ExpressionParser
Odpowiedzialność: budowa drzewa wyrażenia z notacji postfiksowej (RPN).
"""
from typing import Protocol, runtime_checkable

from contracts import Domain, ExprTree, ParseOutcome


@runtime_checkable
class ExpressionParser(Protocol):
    domain: Domain

    def parse(self, text: str) -> ExprTree:
        """
        Parses a whitespace-separated postfix expression into an ExprTree.

        Tokens are processed left to right on a single stack:
          - operator token: pops right, then left, pushes OperatorNode
          - any other token: parsed as a domain operand literal, pushed as a leaf
        Exactly one node must remain on the stack at the end.

        Raises ParseError (with ParseErrorKind) on any structural or
        literal failure. No partial tree is ever returned.
        """
        ...

    def try_parse(self, text: str) -> ParseOutcome:
        """
        Same as parse(), but never raises.
        Returns ParseOutcome(ok=True, tree=...) or ParseOutcome(ok=False, issue=...).
        """
        ...
