"""
Dispatch façade: run one call definition against a transport.
Validation happens before anything is sent; exactly one transport request per call; transport errors pass through untouched.
"""
from __future__ import annotations

from typing import Any, Mapping, Sequence

from loguru import logger

from aurora_rpc.rpc.definition import NotAvailable, RpcCallDefinition
from aurora_rpc.rpc.errors import InvalidArguments, MethodNotSupported, NotInitialized
from aurora_rpc.rpc.protocol import RpcTransport


def bind_arguments(
    definition: RpcCallDefinition,
    args: Sequence[Any] = (),
    kwargs: Mapping[str, Any] | None = None,
) -> list[Any]:
    """
    Map positional and keyword arguments onto the declared parameter order.
    Omitted trailing optionals are not sent. Raises InvalidArguments on any mismatch.
    """
    params = definition.params
    method = definition.method
    if len(args) > definition.max_args:
        raise InvalidArguments(
            method, f"takes at most {definition.max_args} argument(s), got {len(args)}"
        )
    values: dict[int, Any] = dict(enumerate(args))
    for key, value in (kwargs or {}).items():
        index = next((i for i, p in enumerate(params) if p.name == key), None)
        if index is None:
            raise InvalidArguments(method, f"unexpected argument {key!r}")
        if index in values:
            raise InvalidArguments(method, f"got multiple values for {key!r}")
        values[index] = value

    bound: list[Any] = []
    for i, param in enumerate(params):
        if i not in values:
            if not param.optional:
                raise InvalidArguments(method, f"missing required argument {param.name!r}")
            # an optional may only be skipped when nothing after it is given
            if any(j > i for j in values):
                raise InvalidArguments(method, f"{param.name!r} must be given before later arguments")
            break
        value = values[i]
        if not param.accepts(value):
            raise InvalidArguments(method, f"{param.name!r} expects {param.describe()}, got {value!r}")
        bound.append(value)
    return bound


async def call(
    transport: RpcTransport | None,
    definition: RpcCallDefinition | NotAvailable,
    args: Sequence[Any] = (),
    kwargs: Mapping[str, Any] | None = None,
    *,
    owner: str = "namespace",
) -> Any:
    """Send definition.method with bound args through transport and return the decoded result."""
    if transport is None:
        raise NotInitialized(owner)
    if isinstance(definition, NotAvailable):
        logger.debug(f"Rejected {definition.namespace}.{definition.name}: not available")
        raise MethodNotSupported(definition.namespace, definition.name, definition.suppressed)
    try:
        params = bind_arguments(definition, args, kwargs)
    except InvalidArguments as e:
        logger.debug(f"Rejected {definition.method}: {e.reason}")
        raise
    logger.debug(f"Sending {definition.method} with {len(params)} param(s)")
    result = await transport.send(definition.method, params)
    return definition.result_decoder(result)
