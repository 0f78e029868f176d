"""
dependencies.py — FastAPI Dependency Injection.
Każda zależność zwraca odpowiedni adapter przez Request.app.state.
"""
from __future__ import annotations

from fastapi import Request

from config import Settings
from ports.evaluator import TreeEvaluator
from ports.expression_parser import ExpressionParser
from ports.renderer import TreeRenderer


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_parsers(request: Request) -> dict[str, ExpressionParser]:
    return request.app.state.parsers


def get_evaluator(request: Request) -> TreeEvaluator:
    return request.app.state.evaluator


def get_renderer(request: Request) -> TreeRenderer:
    return request.app.state.renderer
