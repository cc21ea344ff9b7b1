from saida.env import Env
from saida.errors import TypeMismatch
from saida.pretty import pretty
from saida.syntax import App, Fun, Lam, Sub, U, Var
from saida.value import VU


def test_pretty_atoms() -> None:
    assert pretty(Var("x")) == "x"
    assert pretty(U(0)) == "U0"
    assert str(U(12)) == "U12"


def test_pretty_application_is_left_associative() -> None:
    assert pretty(App(App(Var("f"), Var("a")), Var("b"))) == "f a b"
    assert pretty(App(Var("f"), App(Var("g"), Var("a")))) == "f (g a)"


def test_pretty_function_type_is_right_associative() -> None:
    assert pretty(Fun(U(0), Fun(U(0), U(1)))) == "U0 -> U0 -> U1"
    assert pretty(Fun(Fun(U(0), U(0)), U(1))) == "(U0 -> U0) -> U1"
    assert pretty(Fun(App(Var("F"), Var("a")), Var("B"))) == "F a -> B"


def test_pretty_binders() -> None:
    assert pretty(Lam("x", Lam("y", Var("x")))) == "\\x. \\y. x"
    assert pretty(App(Lam("x", Var("x")), Var("y"))) == "(\\x. x) y"
    assert pretty(Sub("x", U(0), App(Var("f"), Var("x")))) == "let x := U0; f x"
    assert pretty(Fun(Lam("x", Var("x")), U(0))) == "(\\x. x) -> U0"


def test_str_of_error_uses_pretty_terms() -> None:
    err = TypeMismatch(App(Var("f"), Var("a")), Fun(Var("A"), Var("B")), U(0))
    assert str(err) == (
        "Type mismatch:\n  term = f a\n  expected = A -> B\n  inferred = U0"
    )


def test_str_of_env() -> None:
    assert str(Env()) == "Env{}"
    assert "x: VU(level=1)" in str(Env.of({"x": VU(1)}))
