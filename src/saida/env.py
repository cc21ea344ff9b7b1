from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType

from saida.syntax import Identifier
from saida.value import Value


@dataclass(frozen=True)
class Env:
    """
    Immutable mapping from identifiers to values.

    Used both as the runtime environment of evaluation and as the typing
    context of the checker, where the values are types.

    Extension discipline:
        `extend(x, v)` returns a new environment and leaves the receiver
        untouched, so a closure that captured an environment keeps seeing the
        bindings it was created under. Rebinding a name shadows the old entry.
    """

    bindings: MappingProxyType[Identifier, Value] = field(
        default_factory=lambda: MappingProxyType({})
    )

    # ---- extending the environment ----
    def extend(self, name: Identifier, value: Value) -> Env:
        """Return a copy of this environment with ``name`` bound to ``value``."""
        return replace(self, bindings=MappingProxyType({**self.bindings, name: value}))

    # ---- lookup ----
    def lookup(self, name: Identifier) -> Value | None:
        return self.bindings.get(name)

    def names(self) -> frozenset[Identifier]:
        """Identifiers bound in this environment."""
        return frozenset(self.bindings)

    def __contains__(self, name: object) -> bool:
        return name in self.bindings

    @staticmethod
    def of(entries: Env | Mapping[Identifier, Value] | None = None) -> Env:
        """Coerce an environment, a plain mapping, or ``None`` into an ``Env``."""
        if isinstance(entries, Env):
            return entries
        return Env(MappingProxyType(dict(entries or {})))

    def __str__(self) -> str:
        if not self.bindings:
            return "Env{}"
        return f"Env(\n{"".join(f"  {k}: {v}\n" for k, v in self.bindings.items())})"


# The checker's typing context has the same shape: identifiers to types.
Context = Env


__all__ = ["Env", "Context"]
