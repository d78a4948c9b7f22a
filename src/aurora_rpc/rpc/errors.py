"""Errors raised by the registry, the dispatch layer and the bundled transports."""
from __future__ import annotations

from typing import Any


class AuroraRpcError(Exception):
    """Base class for every error raised by aurora_rpc."""


class DuplicateDefinition(AuroraRpcError):
    """A local method name was declared twice in one namespace."""

    def __init__(self, namespace: str, name: str) -> None:
        self.namespace = namespace
        self.name = name
        super().__init__(f"{namespace}.{name} is already defined")


class MethodNotSupported(AuroraRpcError):
    """The method is suppressed for this backend or was never defined. Nothing was sent."""

    def __init__(self, namespace: str, name: str, suppressed: bool = False) -> None:
        self.namespace = namespace
        self.name = name
        self.suppressed = suppressed
        reason = "is not supported by this node" if suppressed else "is not defined"
        super().__init__(f"{namespace}.{name} {reason}")


class InvalidArguments(AuroraRpcError, TypeError):
    """Arguments do not match the call definition. Nothing was sent."""

    def __init__(self, method: str, reason: str) -> None:
        self.method = method
        self.reason = reason
        super().__init__(f"{method}: {reason}")


class NotInitialized(AuroraRpcError, AttributeError):
    """
    A namespace was used before its plugin was attached to a transport.
    Also an AttributeError, so hasattr(plugin, "eth") is False until attach.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"{name} is not attached to a transport; call attach() or link() first")


class TransportFailure(AuroraRpcError):
    """
    The transport could not deliver the request or the node answered with an error.
    code/message/data are the JSON-RPC error object fields when the node reported one.
    """

    def __init__(self, message: str, code: int | None = None, data: Any = None) -> None:
        self.message = message
        self.code = code
        self.data = data
        text = f"[{code}] {message}" if code is not None else message
        super().__init__(text)
