"""Type checking error types."""

from __future__ import annotations

from dataclasses import dataclass

from saida.syntax import Expr, Identifier


class TypeCheckError(TypeError):
    """Base class for failures reported by ``check`` and ``infer``."""


@dataclass
class UnknownIdentifier(TypeCheckError):
    name: Identifier

    def __str__(self) -> str:
        return f"Unknown identifier: {self.name}"


@dataclass
class NotAFunction(TypeCheckError):
    func: Expr
    func_ty: Expr | None = None

    def __str__(self) -> str:
        if self.func_ty is None:
            return f"Application of non-function:\n  function = {self.func}"
        return (
            "Application of non-function:\n"
            f"  function = {self.func}\n"
            f"  inferred = {self.func_ty}"
        )


@dataclass
class CannotInferType(TypeCheckError):
    """The term is checkable only; supply an expected type instead."""

    expr: Expr

    def __str__(self) -> str:
        return f"Cannot infer type:\n  term = {self.expr}"


@dataclass
class TypeMismatch(TypeCheckError):
    expr: Expr
    expected: Expr
    inferred: Expr

    def __str__(self) -> str:
        return (
            "Type mismatch:\n"
            f"  term = {self.expr}\n"
            f"  expected = {self.expected}\n"
            f"  inferred = {self.inferred}"
        )


@dataclass
class UniverseLevelError(TypeCheckError):
    level: int
    expected_level: int

    def __str__(self) -> str:
        return (
            "Universe level mismatch:\n"
            f"  term = U{self.level}\n"
            f"  expected = U{self.expected_level}"
        )


__all__ = [
    "TypeCheckError",
    "UnknownIdentifier",
    "NotAFunction",
    "CannotInferType",
    "TypeMismatch",
    "UniverseLevelError",
]
