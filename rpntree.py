#!/usr/bin/env python3
"""
rpntree.py — CLI narzędzie rpntree.

Działa całkowicie lokalnie: parsuje wyrażenie postfiksowe (RPN),
buduje drzewo i wypisuje wynik lub wybraną postać tekstową.

Konfiguracja: zmienne środowiskowe z prefiksem RPNTREE_
lub plik .env (np. RPNTREE_DEFAULT_DOMAIN=interval).

Podkomendy:
    eval    — oblicz wartość wyrażenia
    infix   — postać infiksowa z pełnym nawiasowaniem
    prefix  — postać prefiksowa (styl Scheme)
    tree    — diagram ASCII drzewa
    steps   — kroki obliczeń od liści do korzenia
    show    — wszystko naraz (tabela)

Użycie:
    python rpntree.py eval --text "1 2 +"
    python rpntree.py tree --text "1 4 6 - 5 + /"
    python rpntree.py show -d interval --text "1,4 2,5 I"
    echo "3,7 2,6 4,10 I U" | python rpntree.py eval -d interval
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Any

from rich import box
from rich.console import Console
from rich.table import Table

from adapters.evaluator.tree_evaluator import RecursiveTreeEvaluator
from adapters.expression_tree import parse_expression
from adapters.renderer.text_renderer import TextRenderer
from adapters.tree_metrics import tree_stats
from config import Settings
from contracts import Domain, EvalError, ExprTree, Interval, ParseError

EXIT_PARSE_ERROR = 1
EXIT_EVAL_ERROR = 2


# -- helpers ---------------------------------------------------------------

_CONSOLE: Console | None = None


def _console() -> Console:
    global _CONSOLE
    if _CONSOLE is None:
        _CONSOLE = Console(highlight=False)
    return _CONSOLE


def _safe_terminal_text(value: Any) -> str:
    s = str(value)
    encoding = sys.stdout.encoding or "utf-8"
    try:
        s.encode(encoding)
        return s
    except UnicodeEncodeError:
        return s.encode(encoding, errors="replace").decode(encoding, errors="replace")


def _print_kv_table(title: str, rows: list[tuple[str, Any]]) -> None:
    table = Table(title=title, box=box.ASCII, show_header=False, pad_edge=False)
    table.add_column("Key", no_wrap=True, style="bold cyan")
    table.add_column("Value")
    for key, value in rows:
        table.add_row(_safe_terminal_text(key), _safe_terminal_text(value))
    _console().print(table)


def _read_text(args: argparse.Namespace) -> str:
    # Puste --text trafia do parsera (empty_expression), bez czytania stdin
    text = getattr(args, "text", None)
    if text is None:
        text = sys.stdin.read().strip()
    return text


def _parse_or_exit(args: argparse.Namespace) -> ExprTree:
    text = _read_text(args)
    try:
        return parse_expression(args.domain, text)
    except ParseError as exc:
        print(f"Błąd parsowania [{exc.kind.value}]: {exc.message}", file=sys.stderr)
        sys.exit(EXIT_PARSE_ERROR)


def _display_value(value: Any, display: str) -> str:
    if isinstance(value, Interval) and value.is_empty:
        return f"{display} (puste przecięcie)"
    return display


# -- podkomendy ------------------------------------------------------------

def _eval(args: argparse.Namespace) -> None:
    tree = _parse_or_exit(args)
    try:
        result = RecursiveTreeEvaluator().eval_tree(tree)
    except EvalError as exc:
        print(f"Błąd obliczeń [{exc.kind.value}]: {exc.message}", file=sys.stderr)
        sys.exit(EXIT_EVAL_ERROR)
    print(result.display)


def _steps(args: argparse.Namespace) -> None:
    tree = _parse_or_exit(args)
    try:
        result = RecursiveTreeEvaluator().eval_tree(tree)
    except EvalError as exc:
        print(f"Błąd obliczeń [{exc.kind.value}]: {exc.message}", file=sys.stderr)
        sys.exit(EXIT_EVAL_ERROR)
    if not result.steps:
        print(f"  (brak operatorów) = {result.display}")
    for i, step in enumerate(result.steps, 1):
        print(f"  [{i}] {step}")


def _render(args: argparse.Namespace) -> None:
    tree = _parse_or_exit(args)
    renderer = TextRenderer()
    forms = {
        "infix": renderer.infix,
        "prefix": renderer.prefix,
        "tree": renderer.ascii_tree,
    }
    print(forms[args.command](tree))


def _show(args: argparse.Namespace) -> None:
    tree = _parse_or_exit(args)
    rendered = TextRenderer().render(tree)
    stats = tree_stats(tree)

    try:
        result = RecursiveTreeEvaluator().eval_tree(tree)
        value = _display_value(result.value, result.display)
    except EvalError as exc:
        value = f"BŁĄD: {exc.message}"

    _print_kv_table(
        f"Wyrażenie ({tree.domain.value})",
        [
            ("postfix", tree.source_text),
            ("wartość", value),
            ("infix", rendered.infix),
            ("prefix", rendered.prefix),
            ("wysokość", stats.height),
            ("liście", stats.leaf_count),
            ("operatory", stats.operator_count),
        ],
    )
    print(rendered.ascii_tree)


# -- main ------------------------------------------------------------------

def main(argv: list[str] | None = None) -> None:
    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())

    parser = argparse.ArgumentParser(
        prog="rpntree",
        description="rpntree — drzewa wyrażeń z notacji postfiksowej (RPN)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    helps = {
        "eval": "Oblicz wartość wyrażenia",
        "infix": "Postać infiksowa z pełnym nawiasowaniem",
        "prefix": "Postać prefiksowa (styl Scheme)",
        "tree": "Diagram ASCII drzewa",
        "steps": "Kroki obliczeń",
        "show": "Wartość, wszystkie postacie i miary drzewa",
    }
    for name, help_text in helps.items():
        p = sub.add_parser(name, help=help_text)
        p.add_argument("--text", "-t", help="Wyrażenie postfiksowe (lub stdin)")
        p.add_argument("--domain", "-d", default=settings.default_domain.value,
                       choices=[d.value for d in Domain])

    args = parser.parse_args(argv)

    commands = {
        "eval":   _eval,
        "infix":  _render,
        "prefix": _render,
        "tree":   _render,
        "steps":  _steps,
        "show":   _show,
    }
    commands[args.command](args)


if __name__ == "__main__":
    main()
