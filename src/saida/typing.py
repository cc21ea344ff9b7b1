"""Bidirectional type checking.

``infer`` synthesizes a type for variables, applications and lets. Universes,
function types and abstractions are checkable only: ``check`` handles them
against an expected type and falls back to inference plus a type-equality
test everywhere else. Types are values, and two types are equal when their
normal forms are alpha equivalent.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from saida.env import Context
from saida.errors import (
    CannotInferType,
    NotAFunction,
    TypeMismatch,
    UniverseLevelError,
    UnknownIdentifier,
)
from saida.quote import quote
from saida.syntax import App, Expr, Fun, Identifier, Lam, Sub, U, Var
from saida.value import Type, VFun, VU

logger = logging.getLogger(__name__)

type ContextLike = Context | Mapping[Identifier, Type] | None


def type_equal(left: Type, right: Type, cx: ContextLike = None) -> bool:
    """Return ``True`` when ``left`` and ``right`` have the same normal form."""

    names = Context.of(cx).names()
    return quote(left, names) == quote(right, names)


def _infer(expr: Expr, cx: Context) -> Type:
    match expr:
        case Var(name):
            ty = cx.lookup(name)
            if ty is None:
                raise UnknownIdentifier(name)
            return ty
        case App((U() | Fun()) as head, _):
            # A type literal lives in a universe, never in a function type.
            raise NotAFunction(head)
        case App(func, arg):
            func_ty = _infer(func, cx)
            if not isinstance(func_ty, VFun):
                raise NotAFunction(func, quote(func_ty, cx.names()))
            _check(arg, func_ty.dom, cx)
            return func_ty.cod
        case Sub(name, value, body):
            return _infer(body, cx.extend(name, _infer(value, cx)))
    raise CannotInferType(expr)


def _check(expr: Expr, expected: Type, cx: Context) -> None:
    match expr, expected:
        case Fun(dom, cod), VU():
            # Both sides live in the same universe as the function type.
            _check(dom, expected, cx)
            _check(cod, expected, cx)
        case Lam(name, body), VFun(dom, cod):
            _check(body, cod, cx.extend(name, dom))
        case Sub(name, value, body), _:
            _check(body, expected, cx.extend(name, _infer(value, cx)))
        case U(level), VU(expected_level):
            if not level < expected_level:
                raise UniverseLevelError(level, expected_level)
        case _:
            inferred = _infer(expr, cx)
            if not type_equal(inferred, expected, cx):
                names = cx.names()
                expected_nf = quote(expected, names)
                inferred_nf = quote(inferred, names)
                logger.debug(
                    "type mismatch for %s: expected %s, inferred %s",
                    expr,
                    expected_nf,
                    inferred_nf,
                )
                raise TypeMismatch(expr, expected_nf, inferred_nf)


def infer(expr: Expr, cx: ContextLike = None) -> Type:
    """Infer the type of ``expr`` under ``cx``.

    Raises:
        UnknownIdentifier: A variable has no type in ``cx``.
        NotAFunction: An application's head is not of function type.
        CannotInferType: ``expr`` is a universe, function type or abstraction.
    """

    return _infer(expr, Context.of(cx))


def check(expr: Expr, expected: Type, cx: ContextLike = None) -> None:
    """Check that ``expr`` has type ``expected`` under ``cx``, raising otherwise.

    Raises:
        UniverseLevelError: A universe is checked against one not above it.
        TypeMismatch: The inferred type differs from ``expected``.
        TypeCheckError: Any failure raised while inferring a subterm.
    """

    return _check(expr, expected, Context.of(cx))


__all__ = ["type_equal", "infer", "check"]
