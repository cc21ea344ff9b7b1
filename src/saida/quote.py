"""Read-back of values into normal-form syntax (normalization by evaluation)."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Set

from saida.env import Env
from saida.eval import evaluate
from saida.syntax import App, Expr, Fun, Identifier, Lam, U, Var, free_names
from saida.value import NApp, Neutral, NVar, Value, VFun, VLam, VNeutral, VU

FRESH_SUFFIX = "'"


def freshen(name: Identifier, in_scope: Set[Identifier]) -> Identifier:
    """Return ``name`` primed until it no longer clashes with ``in_scope``."""

    while name in in_scope:
        name += FRESH_SUFFIX
    return name


def _neutral_names(neutral: Neutral) -> frozenset[Identifier]:
    match neutral:
        case NVar(name):
            return frozenset({name})
        case NApp(head, arg):
            return _neutral_names(head) | value_free_names(arg)
    raise TypeError(f"Unexpected neutral: {neutral!r}")


def _scope_names(names: Iterable[Identifier], env: Env) -> frozenset[Identifier]:
    """Names that ``names`` resolve to once looked up in ``env``."""

    result: set[Identifier] = set()
    for name in names:
        bound = env.lookup(name)
        if bound is None:
            result.add(name)
        else:
            result |= value_free_names(bound)
    return frozenset(result)


def value_free_names(value: Value) -> frozenset[Identifier]:
    """Return the identifiers that can occur free in the quotation of ``value``."""

    match value:
        case VFun(dom, cod):
            return value_free_names(dom) | value_free_names(cod)
        case VLam(name, body, env):
            return _scope_names(free_names(body) - {name}, env)
        case VNeutral(neutral):
            return _neutral_names(neutral)
        case VU():
            return frozenset()
    raise TypeError(f"Unexpected value: {value!r}")


def _quote_neutral(neutral: Neutral, in_scope: frozenset[Identifier]) -> Expr:
    match neutral:
        case NVar(name):
            return Var(name)
        case NApp(head, arg):
            return App(_quote_neutral(head, in_scope), _quote(arg, in_scope))
    raise TypeError(f"Unexpected neutral: {neutral!r}")


def _quote(value: Value, in_scope: frozenset[Identifier]) -> Expr:
    match value:
        case VFun(dom, cod):
            return Fun(_quote(dom, in_scope), _quote(cod, in_scope))
        case VLam(name, body, env):
            # Avoid the caller's names and anything free in the closure, so
            # the new binder captures neither.
            fresh = freshen(name, in_scope | value_free_names(value))
            opened = evaluate(body, env.extend(name, VNeutral(NVar(fresh))))
            return Lam(fresh, _quote(opened, in_scope | {fresh}))
        case VNeutral(neutral):
            return _quote_neutral(neutral, in_scope)
        case VU(level):
            return U(level)
    raise TypeError(f"Unexpected value in quote: {value!r}")


def quote(value: Value, in_scope: Iterable[Identifier] = ()) -> Expr:
    """Read ``value`` back into a normal-form expression.

    Args:
        value: Result of evaluation.
        in_scope: Identifiers already in scope at the point the result will be
            used. Binders invented during read-back never clash with them.
    """

    return _quote(value, frozenset(in_scope))


def normalize(
    expr: Expr,
    env: Env | Mapping[Identifier, Value] | None = None,
    in_scope: Iterable[Identifier] | None = None,
) -> Expr:
    """Normalize ``expr`` by evaluating it and quoting the result.

    When ``in_scope`` is omitted, the names free in ``expr`` (after looking
    them up in ``env``) are kept in scope so that no binder captures them.
    """

    env = Env.of(env)
    if in_scope is None:
        in_scope = _scope_names(free_names(expr), env)
    return quote(evaluate(expr, env), in_scope)


__all__ = ["FRESH_SUFFIX", "freshen", "value_free_names", "quote", "normalize"]
