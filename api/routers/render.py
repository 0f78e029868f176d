"""
Router: POST /render

Zwraca wszystkie trzy postacie tekstowe drzewa (infix, prefix, ASCII)
oraz jego miary strukturalne. Nie ewaluuje wyrażenia, więc "5 0 /" renderuje się poprawnie.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from adapters.tree_metrics import tree_stats
from api.dependencies import get_parsers, get_renderer, get_settings
from api.routers._common import parse_request
from api.schemas import ExpressionRequest, ParseErrorResponse, RenderResponse
from config import Settings
from ports.expression_parser import ExpressionParser
from ports.renderer import TreeRenderer

router = APIRouter(prefix="/render", tags=["render"])


@router.post("", response_model=RenderResponse, responses={422: {"model": ParseErrorResponse}})
async def render(
    body: ExpressionRequest,
    parsers: dict[str, ExpressionParser] = Depends(get_parsers),
    renderer: TreeRenderer = Depends(get_renderer),
    settings: Settings = Depends(get_settings),
) -> RenderResponse:
    tree = parse_request(body, parsers, settings)
    rendered = renderer.render(tree)
    return RenderResponse(
        domain=tree.domain,
        infix=rendered.infix,
        prefix=rendered.prefix,
        ascii_tree=rendered.ascii_tree,
        stats=tree_stats(tree),
    )
