"""
Transports out of the box: JSON-RPC 2.0 over HTTP (httpx) and an adapter for web3.py-style async providers.
Both raise TransportFailure with the node's error object preserved.
"""
from __future__ import annotations

import itertools
from typing import Any

import httpx
from loguru import logger

from aurora_rpc.core.config import RpcConfig
from aurora_rpc.rpc.errors import TransportFailure


def unwrap_response(method: str, data: Any) -> Any:
    """Return the result of a JSON-RPC response object or raise TransportFailure for an error / malformed reply."""
    if not isinstance(data, dict):
        raise TransportFailure(f"{method}: malformed response {data!r}")
    error = data.get("error")
    if error is not None:
        if isinstance(error, dict):
            raise TransportFailure(
                str(error.get("message", error)),
                code=error.get("code"),
                data=error.get("data"),
            )
        raise TransportFailure(str(error))
    if "result" not in data:
        raise TransportFailure(f"{method}: response has neither result nor error")
    return data["result"]


class JsonRpcHttpTransport:
    """
    POST {"jsonrpc": "2.0", "id", "method", "params"} to url.
    client: shared httpx.AsyncClient (caller closes it); without one a client is opened per request.
    """

    def __init__(
        self,
        url: str,
        timeout: float = 30.0,
        headers: dict[str, str] | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self.headers = dict(headers or {})
        self._client = client
        self._ids = itertools.count(1)

    @classmethod
    def from_config(cls, config: RpcConfig, client: httpx.AsyncClient | None = None) -> JsonRpcHttpTransport:
        return cls(config.url, timeout=config.timeout, headers=config.headers, client=client)

    def build_request(self, method: str, params: list[Any]) -> dict[str, Any]:
        return {"jsonrpc": "2.0", "id": next(self._ids), "method": method, "params": list(params)}

    async def send(self, method: str, params: list[Any]) -> Any:
        body = self.build_request(method, params)
        try:
            if self._client is not None:
                response = await self._client.post(self.url, json=body, headers=self.headers, timeout=self.timeout)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.post(self.url, json=body, headers=self.headers)
        except httpx.HTTPError as e:
            logger.debug(f"{method} (id={body['id']}) failed: {e}")
            raise TransportFailure(f"{method}: {e}") from e
        try:
            data = response.json()
        except ValueError as e:
            if response.status_code >= 400:
                raise TransportFailure(f"{method}: HTTP {response.status_code}", data=response.text) from e
            raise TransportFailure(f"{method}: response is not JSON", data=response.text) from e
        if response.status_code >= 400:
            # gateways may still carry the node's error object on a non-2xx reply
            if isinstance(data, dict) and data.get("error") is not None:
                return unwrap_response(method, data)
            raise TransportFailure(f"{method}: HTTP {response.status_code}", data=response.text)
        if isinstance(data, dict) and data.get("id") not in (None, body["id"]):
            raise TransportFailure(f"{method}: response id {data.get('id')!r} does not match {body['id']}")
        return unwrap_response(method, data)

    def __repr__(self) -> str:
        return f"JsonRpcHttpTransport({self.url!r})"


class Web3ProviderTransport:
    """
    Adapter for a host client's provider: anything with async make_request(method, params)
    returning a JSON-RPC response dict (web3.py AsyncHTTPProvider, AsyncIPCProvider, ...).
    """

    def __init__(self, provider: Any) -> None:
        self.provider = provider

    async def send(self, method: str, params: list[Any]) -> Any:
        response = await self.provider.make_request(method, params)
        return unwrap_response(method, response)

    def __repr__(self) -> str:
        return f"Web3ProviderTransport({self.provider!r})"
