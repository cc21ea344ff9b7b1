"""Expression syntax for the universe-stratified lambda calculus.

Binders are named rather than de Bruijn indexed. Equality on expressions is
alpha equivalence, computed on demand by walking both trees in lock-step.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

type Identifier = str


class Expr:
    """Base class for all expressions.

    ``==`` compares up to consistent renaming of bound identifiers, and
    ``hash`` agrees with it.
    """

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Expr):
            return NotImplemented
        return alpha_eq(self, other)

    def __hash__(self) -> int:
        return hash(_nameless(self, {}, 0))

    def __str__(self) -> str:
        # Deferred import avoids a cycle with the printer.
        from saida.pretty import pretty

        return pretty(self)


@dataclass(frozen=True, eq=False)
class App(Expr):
    """Application of ``func`` to ``arg``."""

    func: Expr
    arg: Expr


@dataclass(frozen=True, eq=False)
class Fun(Expr):
    """Non-dependent function type ``dom -> cod``."""

    dom: Expr
    cod: Expr


@dataclass(frozen=True, eq=False)
class Lam(Expr):
    """Abstraction binding ``name`` in ``body``."""

    name: Identifier
    body: Expr


@dataclass(frozen=True, eq=False)
class Sub(Expr):
    """
    let name := value; body

    Eager and non-recursive: ``name`` is in scope in ``body`` only.
    """

    name: Identifier
    value: Expr
    body: Expr


@dataclass(frozen=True, eq=False)
class U(Expr):
    """The universe at ``level``."""

    level: int = 0

    def __post_init__(self) -> None:
        if self.level < 0:
            raise ValueError("Universe level must be non-negative")


@dataclass(frozen=True, eq=False)
class Var(Expr):
    """Reference to a bound or free identifier."""

    name: Identifier


def alpha_eq(
    left: Expr,
    right: Expr,
    depth: int = 0,
    left_binders: Mapping[Identifier, int] | None = None,
    right_binders: Mapping[Identifier, int] | None = None,
) -> bool:
    """Return ``True`` when ``left`` and ``right`` agree up to bound renaming.

    Each side keeps its own map from bound name to the depth of its binder.
    Two variables are equal when both are free and spelled the same, or when
    both are bound at the same depth. Differently shaped nodes are unequal.
    """

    xs = left_binders or {}
    ys = right_binders or {}
    match left, right:
        case App(f1, a1), App(f2, a2):
            return alpha_eq(f1, f2, depth, xs, ys) and alpha_eq(a1, a2, depth, xs, ys)
        case Fun(d1, c1), Fun(d2, c2):
            return alpha_eq(d1, d2, depth, xs, ys) and alpha_eq(c1, c2, depth, xs, ys)
        case Lam(x, b1), Lam(y, b2):
            return alpha_eq(b1, b2, depth + 1, {**xs, x: depth}, {**ys, y: depth})
        case Sub(x, v1, b1), Sub(y, v2, b2):
            return alpha_eq(v1, v2, depth, xs, ys) and alpha_eq(
                b1, b2, depth + 1, {**xs, x: depth}, {**ys, y: depth}
            )
        case U(i), U(j):
            return i == j
        case Var(x), Var(y):
            match xs.get(x), ys.get(y):
                case None, None:
                    return x == y
                case int(j), int(k):
                    return j == k
                case _:
                    return False
        case _:
            return False


def _nameless(expr: Expr, binders: dict[Identifier, int], depth: int) -> tuple:
    """Binder-name-free key of ``expr``; alpha-equivalent terms share a key."""

    match expr:
        case App(func, arg):
            return (
                "app",
                _nameless(func, binders, depth),
                _nameless(arg, binders, depth),
            )
        case Fun(dom, cod):
            return (
                "fun",
                _nameless(dom, binders, depth),
                _nameless(cod, binders, depth),
            )
        case Lam(name, body):
            return ("lam", _nameless(body, {**binders, name: depth}, depth + 1))
        case Sub(name, value, body):
            return (
                "sub",
                _nameless(value, binders, depth),
                _nameless(body, {**binders, name: depth}, depth + 1),
            )
        case U(level):
            return ("u", level)
        case Var(name):
            if name in binders:
                return ("bound", binders[name])
            return ("free", name)
    raise TypeError(f"Unexpected expression: {expr!r}")


def free_names(expr: Expr) -> frozenset[Identifier]:
    """Return the identifiers occurring free in ``expr``."""

    match expr:
        case App(a, b) | Fun(a, b):
            return free_names(a) | free_names(b)
        case Lam(name, body):
            return free_names(body) - {name}
        case Sub(name, value, body):
            return free_names(value) | (free_names(body) - {name})
        case U():
            return frozenset()
        case Var(name):
            return frozenset({name})
    raise TypeError(f"Unexpected expression: {expr!r}")


__all__ = [
    "Identifier",
    "Expr",
    "App",
    "Fun",
    "Lam",
    "Sub",
    "U",
    "Var",
    "alpha_eq",
    "free_names",
]
