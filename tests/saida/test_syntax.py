import pytest

from saida.syntax import App, Fun, Lam, Sub, U, Var, alpha_eq, free_names


def test_alpha_eq_free_vars_compare_by_name() -> None:
    assert Var("x") == Var("x")
    assert Var("x") != Var("y")


def test_alpha_eq_ignores_binder_names() -> None:
    assert Lam("x", Var("x")) == Lam("y", Var("y"))
    assert Lam("x", Lam("y", App(Var("x"), Var("y")))) == Lam(
        "a", Lam("b", App(Var("a"), Var("b")))
    )


def test_alpha_eq_distinguishes_binding_structure() -> None:
    # \x. \y. x versus \x. \y. y
    assert Lam("x", Lam("y", Var("x"))) != Lam("x", Lam("y", Var("y")))
    # Same name, shadowed versus outer binder.
    assert Lam("x", Lam("x", Var("x"))) == Lam("a", Lam("b", Var("b")))
    assert Lam("x", Lam("x", Var("x"))) != Lam("a", Lam("b", Var("a")))


def test_alpha_eq_bound_never_equals_free() -> None:
    assert Lam("x", Var("x")) != Lam("y", Var("x"))
    assert Lam("y", Var("x")) != Lam("x", Var("x"))
    assert Lam("y", Var("x")) == Lam("z", Var("x"))


def test_alpha_eq_consistent_renaming_throughout() -> None:
    original = Sub(
        "f",
        Lam("x", App(Var("x"), Var("free"))),
        Lam("y", App(Var("f"), Fun(Var("y"), U(0)))),
    )
    renamed = Sub(
        "g",
        Lam("a", App(Var("a"), Var("free"))),
        Lam("b", App(Var("g"), Fun(Var("b"), U(0)))),
    )
    assert original == renamed
    assert hash(original) == hash(renamed)


def test_alpha_eq_structural_cases() -> None:
    assert Fun(U(0), U(1)) == Fun(U(0), U(1))
    assert Fun(U(0), U(1)) != Fun(U(1), U(0))
    assert U(3) == U(3)
    assert U(3) != U(4)
    assert App(Var("f"), Var("a")) != App(Var("f"), Var("b"))


@pytest.mark.parametrize(
    "left, right",
    [
        (App(Var("f"), Var("a")), Var("f")),
        (Lam("x", Var("x")), Var("x")),
        (Fun(U(0), U(0)), U(0)),
        (Sub("x", U(0), Var("x")), U(0)),
    ],
)
def test_alpha_eq_mismatched_shapes_are_unequal(left, right) -> None:
    assert not alpha_eq(left, right)
    assert left != right


def test_expr_is_not_equal_to_other_types() -> None:
    assert Var("x") != "x"


def test_universe_level_must_be_non_negative() -> None:
    with pytest.raises(ValueError, match="non-negative"):
        U(-1)


def test_expr_is_hashable_up_to_alpha() -> None:
    seen = {Lam("x", Var("x")), Lam("y", Var("y")), Lam("y", Var("x"))}
    assert len(seen) == 2


def test_free_names() -> None:
    assert free_names(Var("x")) == {"x"}
    assert free_names(Lam("x", App(Var("x"), Var("y")))) == {"y"}
    assert free_names(Sub("x", Var("x"), Var("x"))) == {"x"}
    assert free_names(Sub("x", Var("a"), App(Var("x"), Var("b")))) == {"a", "b"}
    assert free_names(Fun(U(0), U(1))) == frozenset()
