"""Static description of one remote procedure: local name, wire method, parameter shape, result decoder."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable


def identity(value: Any) -> Any:
    return value


@dataclass(frozen=True)
class Param:
    """
    One positional JSON-RPC parameter.
    kinds: accepted Python types (empty accepts anything). check: extra predicate on the value.
    """

    name: str
    optional: bool = False
    kinds: tuple[type, ...] = ()
    check: Callable[[Any], bool] | None = None
    hint: str = ""

    def accepts(self, value: Any) -> bool:
        if self.kinds and not isinstance(value, self.kinds):
            return False
        if self.check is not None and not self.check(value):
            return False
        return True

    def describe(self) -> str:
        if self.hint:
            return self.hint
        if self.kinds:
            return " | ".join(k.__name__ for k in self.kinds)
        return "any"


def required(name: str, *kinds: type, check: Callable[[Any], bool] | None = None, hint: str = "") -> Param:
    return Param(name, optional=False, kinds=kinds, check=check, hint=hint)


def optional(name: str, *kinds: type, check: Callable[[Any], bool] | None = None, hint: str = "") -> Param:
    return Param(name, optional=True, kinds=kinds, check=check, hint=hint)


@dataclass(frozen=True)
class RpcCallDefinition:
    """Immutable once declared; shared by every namespace copied from the same base."""

    name: str
    method: str
    params: tuple[Param, ...] = ()
    result_decoder: Callable[[Any], Any] = field(default=identity, compare=False)
    doc: str | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        seen_optional = False
        names: set[str] = set()
        for p in self.params:
            if p.name in names:
                raise ValueError(f"{self.method}: parameter {p.name!r} declared twice")
            names.add(p.name)
            if p.optional:
                seen_optional = True
            elif seen_optional:
                raise ValueError(f"{self.method}: required parameter {p.name!r} follows an optional one")

    @property
    def max_args(self) -> int:
        return len(self.params)

    def signature(self) -> str:
        parts = [f"{p.name}?" if p.optional else p.name for p in self.params]
        return f"{self.name}({', '.join(parts)}) -> {self.method}"


@dataclass(frozen=True)
class NotAvailable:
    """
    Result of resolving a name that cannot be called.
    suppressed=True: defined or inherited, then disabled for this backend. False: never defined.
    """

    namespace: str
    name: str
    suppressed: bool = False

    def __bool__(self) -> bool:
        return False
