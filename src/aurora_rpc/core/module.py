"""Module protocol: any object with register_into(plugin) can be registered in a plugin."""
from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from aurora_rpc.core.app import Plugin


@runtime_checkable
class Module(Protocol):
    """Building block: configured externally, attached via plugin.register(module)."""

    def register_into(self, plugin: Plugin) -> None:
        """Attach the module to the plugin: namespace tables, nested plugins, DI entries."""
        ...
