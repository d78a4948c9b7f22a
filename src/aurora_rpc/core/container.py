"""Minimal DI container: the plugin registers the shared transport and config here, namespaces are built from it."""
from __future__ import annotations

import inspect
import typing
from typing import Any, Callable, TypeVar

T = TypeVar("T")

Key = type[Any] | str


def _init_hints(cls: type[Any]) -> dict[str, Any]:
    """Annotations of cls.__init__ with string (postponed) annotations evaluated."""
    try:
        return typing.get_type_hints(cls.__init__)
    except (NameError, TypeError):
        return dict(getattr(cls.__init__, "__annotations__", {}))


class Container:
    """
    Register by type (or string key) and resolve via factory.
    One container per plugin; the transport is registered under the RpcTransport protocol.
    """

    def __init__(self) -> None:
        self._factories: dict[Key, Callable[[], Any]] = {}
        self._instances: dict[Key, Any] = {}
        self._singleton_keys: set[Key] = set()

    def register(self, key: Key, factory: Callable[[], T], singleton: bool = True) -> None:
        """Register a factory for a type or string key. Replaces any previous registration."""
        self._factories[key] = factory
        self._instances.pop(key, None)
        if singleton:
            self._singleton_keys.add(key)
        else:
            self._singleton_keys.discard(key)

    def register_instance(self, key: Key, instance: Any) -> None:
        """Register a ready-made instance."""
        self._factories[key] = lambda: instance
        self._instances[key] = instance
        self._singleton_keys.add(key)

    def register_class(self, cls: type[T], singleton: bool = True) -> None:
        """Register a class: on resolve an instance is created with dependencies from the container."""
        self.register(cls, lambda: self.build(cls), singleton=singleton)

    def has(self, key: Key) -> bool:
        return key in self._factories

    def resolve(self, key: Key) -> Any:
        """Resolve an instance by type or key. KeyError when nothing is registered."""
        if key not in self._factories:
            raise KeyError(f"No registration for {key!r}")
        if key in self._instances:
            return self._instances[key]
        instance = self._factories[key]()
        if key in self._singleton_keys:
            self._instances[key] = instance
        return instance

    def build(self, cls: type[T], **explicit: Any) -> T:
        """
        Create cls, taking explicit keyword arguments first and resolving the
        remaining annotated __init__ parameters from the container.
        """
        hints = _init_hints(cls)
        kwargs: dict[str, Any] = dict(explicit)
        for name, param in inspect.signature(cls).parameters.items():
            if name in kwargs or param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
                continue
            ann = hints.get(name, param.annotation)
            if ann is inspect.Parameter.empty or not self.has(ann):
                if param.default is inspect.Parameter.empty:
                    raise KeyError(f"Cannot resolve parameter {name!r} of {cls.__name__}")
                continue
            kwargs[name] = self.resolve(ann)
        return cls(**kwargs)
