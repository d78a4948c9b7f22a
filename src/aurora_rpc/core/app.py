"""Plugin — composition root. Composed from namespace modules via plugin.register(module), bound to one transport via attach()."""
from __future__ import annotations

from typing import Any

from loguru import logger

from aurora_rpc.core.container import Container
from aurora_rpc.core.module import Module
from aurora_rpc.rpc.errors import NotInitialized
from aurora_rpc.rpc.namespace import Namespace
from aurora_rpc.rpc.protocol import RpcTransport
from aurora_rpc.rpc.registry import RpcRegistry
from aurora_rpc.rpc.transport import Web3ProviderTransport


class Plugin:
    """
    Composition root. Namespaces are declared by modules (register), and built
    with the shared transport injected when the plugin is attached (attach / link).
    A plugin is itself a module: registering it in another plugin nests it there.
    """

    def __init__(self, name: str, transport: RpcTransport | None = None, config: Any = None) -> None:
        self.name = name
        self._registry = RpcRegistry()
        self._container = Container()
        self._children: dict[str, Plugin] = {}
        self._namespaces: dict[str, Namespace] = {}
        self._transport: RpcTransport | None = None
        if config is not None:
            self._container.register_instance(type(config), config)
            self._container.register_instance("config", config)
        if transport is not None:
            self.attach(transport)

    @property
    def registry(self) -> RpcRegistry:
        return self._registry

    @property
    def container(self) -> Container:
        """DI container: holds the transport (under RpcTransport) and config."""
        return self._container

    @property
    def transport(self) -> RpcTransport | None:
        return self._transport

    @property
    def children(self) -> dict[str, Plugin]:
        """Nested plugins by name."""
        return dict(self._children)

    @property
    def is_attached(self) -> bool:
        return self._transport is not None

    def register(self, module: Module) -> Plugin:
        """Register a module (NamespaceModule, nested Plugin, ...). Returns self for chaining."""
        module.register_into(self)
        if self._transport is not None:
            self._bind(self._transport)
        return self

    def add_child(self, child: Plugin) -> None:
        """Expose child as self.<child.name>; it follows this plugin's transport."""
        if child is self:
            raise ValueError("A plugin cannot be nested in itself")
        if child.name in self._children or child.name in self._registry:
            raise ValueError(f"{self.name}.{child.name} is already registered")
        self._children[child.name] = child

    def register_into(self, plugin: Plugin) -> None:
        plugin.add_child(self)

    def attach(self, transport: RpcTransport) -> Plugin:
        """Bind every namespace (and nested plugin) to transport. Attaching again starts a new session."""
        if transport is None:
            raise ValueError("transport is required")
        if self._transport is not None and self._transport is not transport:
            logger.warning(f"Plugin {self.name!r} re-attached to a new transport")
        self._transport = transport
        self._container.register_instance(RpcTransport, transport)
        self._bind(transport)
        logger.info(f"Plugin {self.name!r} attached: {', '.join(self.namespaces())}")
        return self

    def _bind(self, transport: RpcTransport) -> None:
        bound: dict[str, Namespace] = {}
        for name in self._registry.namespaces():
            existing = self._namespaces.get(name)
            if existing is not None and existing.transport is transport:
                bound[name] = existing
            else:
                bound[name] = self._container.build(Namespace, table=self._registry.table(name))
        self._namespaces = bound
        for child in self._children.values():
            if child.transport is not transport:
                child.attach(transport)

    def link(self, host: Any) -> Plugin:
        """
        Attach to a host client's transport and expose this plugin as host.<name>.
        host: an RpcTransport itself, or an object with a .provider (e.g. web3.AsyncWeb3).
        """
        if isinstance(host, RpcTransport):
            transport: RpcTransport = host
        else:
            transport = Web3ProviderTransport(host.provider)
            setattr(host, self.name, self)
        self.attach(transport)
        logger.info(f"Plugin {self.name!r} linked to {type(host).__name__}")
        return self

    def namespaces(self) -> list[str]:
        return [*self._registry.namespaces(), *self._children]

    def namespace(self, name: str) -> Namespace | Plugin:
        """Live transport-bound accessor; the same object on every call while the transport is unchanged."""
        if name in self._children:
            return self._children[name]
        if name not in self._registry:
            raise KeyError(f"{self.name} has no namespace {name!r}")
        if self._transport is None:
            raise NotInitialized(f"{self.name}.{name}")
        return self._namespaces[name]

    def __getattr__(self, name: str) -> Namespace | Plugin:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self.namespace(name)
        except KeyError:
            raise AttributeError(f"{type(self).__name__!s} {self.name!r} has no namespace {name!r}") from None

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self.namespaces()))

    def __repr__(self) -> str:
        state = "attached" if self.is_attached else "detached"
        return f"<{type(self).__name__} {self.name!r} {state} namespaces={self.namespaces()}>"
