"""
api/main.py — punkt wejścia FastAPI.

Lifespan:
  - Inicjalizuje adaptery (parsery per dziedzina, Evaluator, Renderer)
  - Adaptery współdzielone między żądaniami (brak stanu)

Błędy:
  ParseError → 422 z polem "kind" (np. "too_many_operands")
  EvalError  → 422 z polem "kind" ("division_by_zero")
  RecursionError → 422 z polem "kind" ("expression_too_deep")
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from adapters.evaluator.tree_evaluator import RecursiveTreeEvaluator
from adapters.postfix_parser import ArithmeticPostfixParser, IntervalPostfixParser
from adapters.renderer.text_renderer import TextRenderer
from api.routers import evaluate, render
from api.schemas import HealthResponse
from config import Settings
from contracts import Domain, EvalError, ParseError

logger = logging.getLogger("rpntree.api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Adaptery nie mają stanu, jedna instancja na aplikację
    app.state.parsers = {
        Domain.ARITHMETIC.value: ArithmeticPostfixParser(),
        Domain.INTERVAL.value: IntervalPostfixParser(),
    }
    app.state.evaluator = RecursiveTreeEvaluator()
    app.state.renderer = TextRenderer()

    logger.info("rpntree API ready (domains: %s).", ", ".join(app.state.parsers))
    yield
    logger.info("Shutting down.")


def create_app() -> FastAPI:
    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Routers
    app.include_router(evaluate.router)
    app.include_router(render.router)

    # Health
    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health():
        return HealthResponse(
            status="ok",
            version=settings.app_version,
            domains=list(Domain),
        )

    # Globalne handlery błędów
    @app.exception_handler(ParseError)
    async def parse_error_handler(request: Request, exc: ParseError):
        return JSONResponse(
            status_code=422,
            content={
                "detail": exc.message,
                "kind": exc.kind.value,
                "token": exc.token,
                "position": exc.position,
            },
        )

    @app.exception_handler(EvalError)
    async def eval_error_handler(request: Request, exc: EvalError):
        return JSONResponse(
            status_code=422,
            content={"detail": exc.message, "kind": exc.kind.value},
        )

    # Ewaluacja i renderowanie są rekurencyjne; limit długości nie ogranicza głębokości
    @app.exception_handler(RecursionError)
    async def recursion_error_handler(request: Request, exc: RecursionError):
        logger.warning("Expression tree too deep for %s", request.url.path)
        return JSONResponse(
            status_code=422,
            content={
                "detail": "Expression tree is nested too deeply to process",
                "kind": "expression_too_deep",
            },
        )

    return app


app = create_app()
