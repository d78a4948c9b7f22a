"""
Namespace registry: which RPC operations each namespace exposes.
A narrowed namespace is built by copying a base table and suppressing names; suppression always wins.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Iterator

from aurora_rpc.rpc.definition import NotAvailable, Param, RpcCallDefinition, identity
from aurora_rpc.rpc.errors import DuplicateDefinition


@dataclass
class NamespaceTable:
    """Call definitions of one namespace plus the names disabled for this backend."""

    name: str
    definitions: dict[str, RpcCallDefinition] = field(default_factory=dict)
    suppressed: set[str] = field(default_factory=set)

    def resolve(self, name: str) -> RpcCallDefinition | NotAvailable:
        if name in self.suppressed:
            return NotAvailable(self.name, name, suppressed=True)
        definition = self.definitions.get(name)
        if definition is None:
            return NotAvailable(self.name, name, suppressed=False)
        return definition

    def available(self) -> list[str]:
        return sorted(n for n in self.definitions if n not in self.suppressed)

    def __iter__(self) -> Iterator[RpcCallDefinition]:
        for name in self.available():
            yield self.definitions[name]


class RpcRegistry:
    """
    Namespace name -> NamespaceTable.
    define() / suppress() build tables, resolve() answers with a definition or NotAvailable (never raises).
    """

    def __init__(self) -> None:
        self._tables: dict[str, NamespaceTable] = {}

    def table(self, namespace: str) -> NamespaceTable:
        """Table for namespace, created empty on first use."""
        if namespace not in self._tables:
            self._tables[namespace] = NamespaceTable(namespace)
        return self._tables[namespace]

    def namespaces(self) -> list[str]:
        return list(self._tables)

    def __contains__(self, namespace: object) -> bool:
        return namespace in self._tables

    def define(
        self,
        namespace: str,
        name: str,
        method: str,
        params: Iterable[Param] = (),
        result_decoder: Callable[[Any], Any] | None = None,
        doc: str | None = None,
    ) -> RpcCallDefinition:
        """Declare namespace.name as the wire method. DuplicateDefinition if the name is taken in this namespace."""
        table = self.table(namespace)
        if name in table.definitions:
            raise DuplicateDefinition(namespace, name)
        definition = RpcCallDefinition(
            name=name,
            method=method,
            params=tuple(params),
            result_decoder=result_decoder or identity,
            doc=doc,
        )
        table.definitions[name] = definition
        return definition

    def suppress(self, namespace: str, name: str) -> None:
        """Mark name unavailable in namespace, whether it is defined, inherited or not. Idempotent."""
        self.table(namespace).suppressed.add(name)

    def resolve(self, namespace: str, name: str) -> RpcCallDefinition | NotAvailable:
        table = self._tables.get(namespace)
        if table is None:
            return NotAvailable(namespace, name, suppressed=False)
        return table.resolve(name)

    def available(self, namespace: str) -> list[str]:
        table = self._tables.get(namespace)
        return table.available() if table is not None else []

    def extend(self, namespace: str, base: NamespaceTable) -> NamespaceTable:
        """
        Copy every definition and suppression of base into namespace.
        Definitions are immutable and shared; the base table itself is not touched.
        """
        table = self.table(namespace)
        for name, definition in base.definitions.items():
            if name in table.definitions:
                raise DuplicateDefinition(namespace, name)
            table.definitions[name] = definition
        table.suppressed |= base.suppressed
        return table
