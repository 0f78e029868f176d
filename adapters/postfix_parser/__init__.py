"""
Adaptery ExpressionParser dla notacji postfiksowej.

Wspólna maszyna stosowa (base.PostfixParser) + parsery literałów per dziedzina:
  ArithmeticPostfixParser — liczby zmiennoprzecinkowe, operatory + - * /
  IntervalPostfixParser   — przedziały "start,end", operatory U I
"""
from .arithmetic_parser import ArithmeticPostfixParser
from .base import PostfixParser, tokenize
from .interval_parser import IntervalPostfixParser

__all__ = [
    "ArithmeticPostfixParser",
    "IntervalPostfixParser",
    "PostfixParser",
    "tokenize",
]
