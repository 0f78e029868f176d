"""
Wspólne kroki routerów: limit długości i wybór parsera po dziedzinie.
"""
from __future__ import annotations

from fastapi import HTTPException

from api.schemas import ExpressionRequest
from config import Settings
from contracts import ExprTree
from ports.expression_parser import ExpressionParser


def parse_request(
    body: ExpressionRequest,
    parsers: dict[str, ExpressionParser],
    settings: Settings,
) -> ExprTree:
    """Rzuca HTTPException(413) dla zbyt długiego tekstu, ParseError dla błędów składni."""
    if len(body.text) > settings.max_expression_length:
        raise HTTPException(
            status_code=413,
            detail=f"Expression longer than {settings.max_expression_length} characters",
        )
    domain = body.domain or settings.default_domain
    return parsers[domain.value].parse(body.text)
