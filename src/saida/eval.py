"""Evaluation of expressions into the semantic domain."""

from __future__ import annotations

from collections.abc import Mapping

from saida.env import Env
from saida.syntax import App, Expr, Fun, Identifier, Lam, Sub, U, Var
from saida.value import NApp, NVar, Value, VFun, VLam, VNeutral, VU


def apply(func: Value, arg: Value) -> Value:
    """Apply an evaluated function to an evaluated argument.

    Closures run their body in the captured environment extended with the
    argument. Stuck heads stay stuck and grow an application spine.
    """

    match func:
        case VLam(name, body, env):
            return _eval(body, env.extend(name, arg))
        case VNeutral(neutral):
            return VNeutral(NApp(neutral, arg))
    raise TypeError(f"Application of non-function value:\n  func = {func!r}")


def _eval(expr: Expr, env: Env) -> Value:
    match expr:
        case App(func, arg):
            # Call-by-value: the argument is evaluated in the caller's scope.
            return apply(_eval(func, env), _eval(arg, env))
        case Fun(dom, cod):
            return VFun(_eval(dom, env), _eval(cod, env))
        case Lam(name, body):
            return VLam(name, body, env)
        case Sub(name, value, body):
            return _eval(body, env.extend(name, _eval(value, env)))
        case U(level):
            return VU(level)
        case Var(name):
            found = env.lookup(name)
            if found is None:
                return VNeutral(NVar(name))
            return found
    raise TypeError(f"Unexpected expression in evaluate: {expr!r}")


def evaluate(
    expr: Expr, env: Env | Mapping[Identifier, Value] | None = None
) -> Value:
    """Evaluate ``expr`` under ``env``; unbound identifiers become neutrals."""

    return _eval(expr, Env.of(env))


__all__ = ["apply", "evaluate"]
