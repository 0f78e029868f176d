"""
Port: TreeRenderer
Odpowiedzialność: tekstowe reprezentacje drzewa (infix, prefix, diagram ASCII).
"""
from typing import Protocol, runtime_checkable

from contracts import ExprTree, RenderedTree


@runtime_checkable
class TreeRenderer(Protocol):
    def infix(self, tree: ExprTree) -> str:
        """Fully parenthesized infix form, e.g. "( 1.0 + 2.0 )"."""
        ...

    def prefix(self, tree: ExprTree) -> str:
        """Scheme-style prefix form, e.g. "( + 1.0 2.0 )"."""
        ...

    def ascii_tree(self, tree: ExprTree) -> str:
        """
        ASCII diagram, e.g. for "1 2 +":
            +
            |
            |
            |___1.0
            |
            |___2.0
        No trailing newline after the root.
        """
        ...

    def render(self, tree: ExprTree) -> RenderedTree:
        """All three forms at once."""
        ...
