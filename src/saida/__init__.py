"""Normalization by evaluation and bidirectional checking for a small lambda calculus."""

from saida.env import Context, Env
from saida.errors import (
    CannotInferType,
    NotAFunction,
    TypeCheckError,
    TypeMismatch,
    UniverseLevelError,
    UnknownIdentifier,
)
from saida.eval import apply, evaluate
from saida.pretty import pretty
from saida.quote import freshen, normalize, quote
from saida.syntax import App, Expr, Fun, Lam, Sub, U, Var, alpha_eq, free_names
from saida.typing import check, infer, type_equal
from saida.value import NApp, NVar, VFun, VLam, VNeutral, VU

__all__ = [
    "App",
    "CannotInferType",
    "Context",
    "Env",
    "Expr",
    "Fun",
    "Lam",
    "NApp",
    "NVar",
    "NotAFunction",
    "Sub",
    "TypeCheckError",
    "TypeMismatch",
    "U",
    "UniverseLevelError",
    "UnknownIdentifier",
    "VFun",
    "VLam",
    "VNeutral",
    "VU",
    "Var",
    "alpha_eq",
    "apply",
    "check",
    "evaluate",
    "free_names",
    "freshen",
    "infer",
    "normalize",
    "pretty",
    "quote",
    "type_equal",
]
