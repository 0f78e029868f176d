"""
Router: POST /evaluate

Parsuje wyrażenie w wybranej dziedzinie i zwraca wartość z krokami obliczeń.
ParseError i EvalError obsługiwane globalnie w api/main.py (HTTP 422).
"""
from __future__ import annotations

import math

from fastapi import APIRouter, Depends

from api.dependencies import get_evaluator, get_parsers, get_settings
from api.routers._common import parse_request
from api.schemas import EvaluateResponse, ExpressionRequest, ParseErrorResponse
from config import Settings
from contracts import Interval
from ports.evaluator import TreeEvaluator
from ports.expression_parser import ExpressionParser

router = APIRouter(prefix="/evaluate", tags=["evaluate"])


@router.post("", response_model=EvaluateResponse, responses={422: {"model": ParseErrorResponse}})
async def evaluate(
    body: ExpressionRequest,
    parsers: dict[str, ExpressionParser] = Depends(get_parsers),
    evaluator: TreeEvaluator = Depends(get_evaluator),
    settings: Settings = Depends(get_settings),
) -> EvaluateResponse:
    tree = parse_request(body, parsers, settings)
    result = evaluator.eval_tree(tree)

    value = result.value
    if isinstance(value, float) and not math.isfinite(value):
        value = None  # JSON nie ma inf/nan; zostaje pole display
    return EvaluateResponse(
        domain=result.domain,
        value=value,
        display=result.display,
        is_empty=isinstance(result.value, Interval) and result.value.is_empty,
        steps=result.steps,
    )
