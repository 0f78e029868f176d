"""
contracts.py — Jedyne źródło prawdy dla wszystkich typów danych w rpntree.
Wszystkie moduły importują WYŁĄCZNIE stąd. Nie modyfikować bez versioning.
"""
from __future__ import annotations

from enum import Enum
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic_core import PydanticCustomError

CONTRACTS_VERSION = "1.0.0"

MIN_INT = -(2 ** 31)
MAX_INT = 2 ** 31 - 1


# ─────────────────────────── Domeny i operatory ──────────────────────────

class Domain(str, Enum):
    ARITHMETIC = "arithmetic"   # liczby zmiennoprzecinkowe, + - * /
    INTERVAL = "interval"       # przedziały całkowite, U I


ARITHMETIC_OPERATORS: tuple[str, ...] = ("+", "-", "*", "/")
INTERVAL_OPERATORS: tuple[str, ...] = ("U", "I")

OPERATORS_BY_DOMAIN: dict[Domain, tuple[str, ...]] = {
    Domain.ARITHMETIC: ARITHMETIC_OPERATORS,
    Domain.INTERVAL: INTERVAL_OPERATORS,
}


# ─────────────────────────── Operand: Interval ───────────────────────────

class Interval(BaseModel):
    """Domknięty przedział [start, end]; start <= end sprawdzane przy konstrukcji."""
    model_config = ConfigDict(frozen=True)

    start: int = Field(ge=MIN_INT, le=MAX_INT)
    end: int = Field(ge=MIN_INT, le=MAX_INT)

    @model_validator(mode="after")
    def _check_order(self) -> "Interval":
        if self.start > self.end:
            raise PydanticCustomError(
                "invalid_interval",
                "Invalid interval: start {start} is greater than end {end}",
                {"start": self.start, "end": self.end},
            )
        return self

    @property
    def is_empty(self) -> bool:
        """True tylko dla sentinela pustego przecięcia."""
        return self.start == MIN_INT and self.end == MIN_INT

    def __str__(self) -> str:
        return f"{self.start},{self.end}"


# Wynik przecięcia rozłącznych przedziałów (zwracany, nie rzucany)
EMPTY_INTERVAL = Interval(start=MIN_INT, end=MIN_INT)

Operand = Union[float, Interval]


# ─────────────────────────── Drzewo wyrażenia ────────────────────────────

class NumberLeaf(BaseModel):
    model_config = ConfigDict(frozen=True)

    node_type: Literal["number"] = "number"
    value: float = Field(allow_inf_nan=False)


class IntervalLeaf(BaseModel):
    model_config = ConfigDict(frozen=True)

    node_type: Literal["interval"] = "interval"
    value: Interval


class OperatorNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    node_type: Literal["operator"] = "operator"
    op: Literal["+", "-", "*", "/", "U", "I"]
    left: "TreeNode"
    right: "TreeNode"


TreeNode = Union[NumberLeaf, IntervalLeaf, OperatorNode]
OperatorNode.model_rebuild()


class ExprTree(BaseModel):
    """Uchwyt drzewa: właściciel korzenia. Budowany raz, nigdy nie mutowany."""
    model_config = ConfigDict(frozen=True)

    domain: Domain
    root: TreeNode
    source_text: str = ""


# ─────────────────────────── Błędy ───────────────────────────────────────

class ParseErrorKind(str, Enum):
    EMPTY_EXPRESSION = "empty_expression"
    INVALID_TOKEN = "invalid_token"              # np. "1 a +"
    INVALID_OPERAND = "invalid_operand"          # zły format "start,end"
    INVALID_INTERVAL = "invalid_interval"        # start > end
    INSUFFICIENT_OPERANDS = "insufficient_operands"
    TOO_MANY_OPERANDS = "too_many_operands"
    NO_RESULT = "no_result"


class EvalErrorKind(str, Enum):
    DIVISION_BY_ZERO = "division_by_zero"


class ParseError(ValueError):
    """Błąd budowy drzewa. Parsowanie jest atomowe: brak częściowego drzewa."""

    def __init__(
        self,
        kind: ParseErrorKind,
        message: str,
        *,
        token: Optional[str] = None,
        position: Optional[int] = None,
        remaining: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.token = token
        self.position = position
        self.remaining = remaining

    def to_issue(self) -> "ParseIssue":
        return ParseIssue(
            kind=self.kind,
            message=self.message,
            token=self.token,
            position=self.position,
            remaining=self.remaining,
        )


class EvalError(ArithmeticError):
    """Błąd ewaluacji poprawnego drzewa (tylko dziedzina arytmetyczna)."""

    def __init__(
        self,
        kind: EvalErrorKind,
        message: str,
        *,
        left: Optional[float] = None,
        right: Optional[float] = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.left = left
        self.right = right


# ─────────────────────────── ExpressionParser ────────────────────────────

class ParseIssue(BaseModel):
    kind: ParseErrorKind
    message: str
    token: Optional[str] = None
    position: Optional[int] = None    # indeks tokenu (od 0)
    remaining: Optional[int] = None   # rozmiar stosu przy błędzie arności


class ParseOutcome(BaseModel):
    """Jawny typ wyniku: albo drzewo, albo opis błędu."""
    ok: bool
    tree: Optional[ExprTree] = None
    issue: Optional[ParseIssue] = None


# ─────────────────────────── Evaluator ───────────────────────────────────

class EvalResult(BaseModel):
    domain: Domain
    value: Operand
    display: str                                    # postać kanoniczna wyniku
    steps: list[str] = Field(default_factory=list)  # czytelne kroki


# ─────────────────────────── Renderer / metryki ──────────────────────────

class RenderedTree(BaseModel):
    infix: str
    prefix: str
    ascii_tree: str


class TreeStats(BaseModel):
    height: int           # liść ma wysokość 1
    leaf_count: int
    operator_count: int
