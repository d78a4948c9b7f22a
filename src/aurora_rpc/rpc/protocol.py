"""Transport protocol: send one JSON-RPC request, get its result. Owned by the caller, shared by namespaces."""
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class RpcTransport(Protocol):
    """
    Sends (method, params) and returns the result value, or raises.
    Retries, timeouts and connection handling are the transport's own business.
    """

    async def send(self, method: str, params: list[Any]) -> Any:
        ...
