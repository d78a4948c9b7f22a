"""Pytest fixtures: stub transports that record what would have gone over the wire."""

from typing import Any

import pytest
from loguru import logger

SHA3_OF_0XAB = "0x468fc9c005382579139846222b7b0aebc9182ba073b2455938a86d9753bfb078"


class StubTransport:
    """Records every (method, params) and answers from a canned map. Exceptions in the map are raised."""

    def __init__(self, results: dict[str, Any] | None = None, default: Any = None) -> None:
        self.requests: list[tuple[str, list[Any]]] = []
        self.results = dict(results or {})
        self.default = default

    async def send(self, method: str, params: list[Any]) -> Any:
        self.requests.append((method, list(params)))
        value = self.results.get(method, self.default)
        if isinstance(value, BaseException):
            raise value
        return value

    @property
    def methods(self) -> list[str]:
        return [m for m, _ in self.requests]


@pytest.fixture
def transport() -> StubTransport:
    return StubTransport(
        {
            "web3_clientVersion": "Aurora-Relayer/v0.0.0",
            "web3_sha3": SHA3_OF_0XAB,
            "net_version": "1313161554",
            "net_listening": True,
            "net_peerCount": "0x0",
            "eth_chainId": "0x4e454152",
            "eth_blockNumber": "0x65a8db5",
            "eth_syncing": False,
            "eth_newBlockFilter": "0x1",
            "eth_uninstallFilter": True,
            "txpool_status": {"pending": "0x0", "queued": "0x0"},
        }
    )


@pytest.fixture
def log_messages():
    """Debug-level loguru messages emitted while the test runs."""
    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
