"""
schemas.py — Request/Response modele FastAPI.
Oddzielone od contracts.py żeby API mogło ewoluować niezależnie.
"""
from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, Field

from contracts import Domain, Interval, ParseErrorKind, TreeStats


# ─────────────────────────── wspólne ─────────────────────────────

class ExpressionRequest(BaseModel):
    text: str = Field(..., description="Wyrażenie postfiksowe, np. '1 2 +'")
    domain: Optional[Domain] = None   # None → Settings.default_domain


# ─────────────────────────── /evaluate ───────────────────────────

class EvaluateResponse(BaseModel):
    domain: Domain
    value: Optional[Union[float, Interval]]   # inf/nan serializowane jako null
    display: str
    is_empty: bool = False                    # puste przecięcie przedziałów
    steps: list[str]


# ─────────────────────────── /render ─────────────────────────────

class RenderResponse(BaseModel):
    domain: Domain
    infix: str
    prefix: str
    ascii_tree: str
    stats: TreeStats


# ─────────────────────────── błędy ───────────────────────────────

class ParseErrorResponse(BaseModel):
    detail: str
    kind: ParseErrorKind
    token: Optional[str] = None
    position: Optional[int] = None


# ─────────────────────────── /health ─────────────────────────────

class HealthResponse(BaseModel):
    status: str
    version: str
    domains: list[Domain]
