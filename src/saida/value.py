"""Semantic domain produced by evaluation.

Types share this representation: a type is an ordinary value that lives in
some universe.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from saida.syntax import Expr, Identifier

if TYPE_CHECKING:
    from saida.env import Env


@dataclass(frozen=True)
class NVar:
    """Free variable that evaluation cannot look through."""

    name: Identifier


@dataclass(frozen=True)
class NApp:
    """Application whose head is stuck."""

    head: Neutral
    arg: Value


type Neutral = NVar | NApp


@dataclass(frozen=True)
class VFun:
    """Evaluated function type."""

    dom: Value
    cod: Value


@dataclass(frozen=True)
class VLam:
    """Closure pairing an unevaluated body with the environment it was built in.

    Args:
        name: Bound identifier.
        body: Body expression, evaluated only once ``name`` is supplied.
        env: Environment captured when the abstraction was evaluated.
    """

    name: Identifier
    body: Expr
    env: Env


@dataclass(frozen=True)
class VNeutral:
    """A stuck computation."""

    neutral: Neutral


@dataclass(frozen=True)
class VU:
    """Evaluated universe."""

    level: int = 0

    def __post_init__(self) -> None:
        if self.level < 0:
            raise ValueError("Universe level must be non-negative")


type Value = VFun | VLam | VNeutral | VU

type Type = Value


__all__ = [
    "NVar",
    "NApp",
    "Neutral",
    "VFun",
    "VLam",
    "VNeutral",
    "VU",
    "Value",
    "Type",
]
