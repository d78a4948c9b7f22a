"""
NamespaceModule — building block declaring one namespace of RPC methods.
Configure via .method(...) and .suppress(...); register with plugin.register(module).
Namespace — the live accessor the plugin builds at attach time with the shared transport.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Awaitable, Callable

from aurora_rpc.core.module import Module
from aurora_rpc.rpc import dispatch
from aurora_rpc.rpc.definition import NotAvailable, Param, RpcCallDefinition
from aurora_rpc.rpc.protocol import RpcTransport
from aurora_rpc.rpc.registry import NamespaceTable, RpcRegistry

if TYPE_CHECKING:
    from aurora_rpc.core.app import Plugin


class Namespace:
    """
    Transport-bound view of one NamespaceTable.
    Every public attribute is a coroutine function; suppressed or unknown names
    are still returned and raise MethodNotSupported when awaited.
    """

    def __init__(self, table: NamespaceTable, transport: RpcTransport) -> None:
        self._table = table
        self._transport = transport

    @property
    def name(self) -> str:
        return self._table.name

    @property
    def transport(self) -> RpcTransport:
        return self._transport

    def resolve(self, name: str) -> RpcCallDefinition | NotAvailable:
        return self._table.resolve(name)

    def is_available(self, name: str) -> bool:
        return isinstance(self._table.resolve(name), RpcCallDefinition)

    def available(self) -> list[str]:
        return self._table.available()

    async def request(self, name: str, *args: Any, **kwargs: Any) -> Any:
        """Call a method by local name (eth.request("call", tx) is eth.call(tx))."""
        return await dispatch.call(
            self._transport, self._table.resolve(name), args, kwargs, owner=self.name
        )

    def __getattr__(self, name: str) -> Callable[..., Awaitable[Any]]:
        if name.startswith("_"):
            raise AttributeError(name)
        definition = self._table.resolve(name)

        async def method(*args: Any, **kwargs: Any) -> Any:
            return await dispatch.call(self._transport, definition, args, kwargs, owner=self.name)

        method.__name__ = name
        method.__qualname__ = f"{self.name}.{name}"
        if isinstance(definition, RpcCallDefinition):
            method.__doc__ = definition.doc or definition.signature()
        return method

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self.available()))

    def __repr__(self) -> str:
        return f"<Namespace {self.name!r} methods={len(self.available())}>"


class NamespaceModule(Module):
    """
    Namespace as object: .method(...) declares operations, .suppress(...) disables inherited ones.
    base: another NamespaceModule whose operations are copied first (capability narrowing, not subclassing).
    """

    def __init__(self, name: str, base: NamespaceModule | None = None) -> None:
        self.name = name
        self.base = base
        self._methods: list[tuple[str, str, tuple[Param, ...], Callable[[Any], Any] | None, str | None]] = []
        self._suppressed: list[str] = []

    def method(
        self,
        name: str,
        wire_method: str,
        *params: Param,
        result_decoder: Callable[[Any], Any] | None = None,
        doc: str | None = None,
    ) -> NamespaceModule:
        self._methods.append((name, wire_method, params, result_decoder, doc))
        return self

    def suppress(self, *names: str) -> NamespaceModule:
        self._suppressed.extend(names)
        return self

    def build(self, registry: RpcRegistry | None = None, namespace: str | None = None) -> NamespaceTable:
        """Define this module's table in registry (a private one by default) and return it."""
        registry = registry if registry is not None else RpcRegistry()
        namespace = namespace or self.name
        if self.base is not None:
            registry.extend(namespace, self.base.build())
        for name, wire_method, params, decoder, doc in self._methods:
            registry.define(namespace, name, wire_method, params, result_decoder=decoder, doc=doc)
        for name in self._suppressed:
            registry.suppress(namespace, name)
        return registry.table(namespace)

    def register_into(self, plugin: Plugin) -> None:
        if self.name in plugin.children:
            raise ValueError(f"{plugin.name}.{self.name} is already a nested plugin")
        self.build(plugin.registry)
