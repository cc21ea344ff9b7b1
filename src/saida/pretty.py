"""Pretty-printing utilities for expressions."""

from __future__ import annotations

from saida.syntax import App, Expr, Fun, Lam, Sub, U, Var

ATOM_PREC = 3
APP_PREC = 2
FUN_PREC = 1
LAM_PREC = 0


def _maybe_paren(
    text: str, child_prec: int, parent_prec: int, *, allow_equal: bool
) -> str:
    if child_prec < parent_prec or (child_prec == parent_prec and not allow_equal):
        return f"({text})"
    return text


def pretty(expr: Expr) -> str:
    """Return a human-friendly string for ``expr``.

    Application associates to the left and ``->`` to the right; binders
    extend as far right as possible.
    """

    def fmt(e: Expr) -> tuple[str, int]:
        match e:
            case Var(name):
                return name, ATOM_PREC

            case U(level):
                return f"U{level}", ATOM_PREC

            case App(f, a):
                func_text, func_prec = fmt(f)
                arg_text, arg_prec = fmt(a)
                func_disp = _maybe_paren(
                    func_text, func_prec, APP_PREC, allow_equal=True
                )
                arg_disp = _maybe_paren(arg_text, arg_prec, APP_PREC, allow_equal=False)
                return f"{func_disp} {arg_disp}", APP_PREC

            case Fun(dom, cod):
                dom_text, dom_prec = fmt(dom)
                cod_text, cod_prec = fmt(cod)
                dom_disp = _maybe_paren(dom_text, dom_prec, FUN_PREC, allow_equal=False)
                cod_disp = _maybe_paren(cod_text, cod_prec, FUN_PREC, allow_equal=True)
                return f"{dom_disp} -> {cod_disp}", FUN_PREC

            case Lam(name, body):
                body_text, _ = fmt(body)
                return f"\\{name}. {body_text}", LAM_PREC

            case Sub(name, value, body):
                value_text, _ = fmt(value)
                body_text, _ = fmt(body)
                return f"let {name} := {value_text}; {body_text}", LAM_PREC

        raise TypeError(f"Cannot pretty-print unknown expression: {e!r}")

    return fmt(expr)[0]


__all__ = ["pretty"]
