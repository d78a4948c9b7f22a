import asyncio

import pytest

from conftest import StubTransport

from aurora_rpc.rpc import (
    InvalidArguments,
    MethodNotSupported,
    NotAvailable,
    NotInitialized,
    RpcCallDefinition,
    TransportFailure,
    bind_arguments,
    call,
    optional,
    required,
)

GET_BALANCE = RpcCallDefinition(
    name="get_balance",
    method="eth_getBalance",
    params=(required("address", str), optional("block_identifier", str, int)),
)


def test_bind_arguments_positional_and_keyword_keep_declared_order() -> None:
    assert bind_arguments(GET_BALANCE, ("0xabc",)) == ["0xabc"]
    assert bind_arguments(GET_BALANCE, ("0xabc", "latest")) == ["0xabc", "latest"]
    assert bind_arguments(GET_BALANCE, (), {"block_identifier": 5, "address": "0xabc"}) == ["0xabc", 5]


@pytest.mark.parametrize(
    "args, kwargs, reason",
    [
        ((), {}, "missing required argument 'address'"),
        (("0xabc", "latest", "extra"), {}, "at most 2"),
        (("0xabc",), {"address": "0xdef"}, "multiple values"),
        (("0xabc",), {"nonsense": 1}, "unexpected argument"),
        ((123,), {}, "'address' expects str"),
        (("0xabc", 1.5), {}, "'block_identifier' expects"),
    ],
)
def test_bind_arguments_rejects_mismatches(args, kwargs, reason) -> None:
    with pytest.raises(InvalidArguments, match=reason):
        bind_arguments(GET_BALANCE, args, kwargs)


def test_bind_arguments_rejects_gap_before_later_optional() -> None:
    definition = RpcCallDefinition("f", "x_f", (optional("a"), optional("b")))
    with pytest.raises(InvalidArguments, match="'a' must be given"):
        bind_arguments(definition, (), {"b": 1})


def test_invalid_arguments_is_a_type_error() -> None:
    with pytest.raises(TypeError):
        bind_arguments(GET_BALANCE, ())


@pytest.mark.asyncio
async def test_call_sends_exactly_one_request_with_wire_method_and_params() -> None:
    transport = StubTransport(default="0x10")
    result = await call(transport, GET_BALANCE, ("0xabc", "latest"))

    assert result == "0x10"
    assert transport.requests == [("eth_getBalance", ["0xabc", "latest"])]


@pytest.mark.asyncio
async def test_call_validation_failure_sends_nothing() -> None:
    transport = StubTransport(default="0x10")
    with pytest.raises(InvalidArguments):
        await call(transport, GET_BALANCE, ())
    assert transport.requests == []


@pytest.mark.asyncio
async def test_every_rejected_call_leaves_a_debug_record(log_messages) -> None:
    transport = StubTransport(default="0x10")
    with pytest.raises(InvalidArguments):
        await call(transport, GET_BALANCE, ())
    with pytest.raises(MethodNotSupported):
        await call(transport, NotAvailable("eth", "get_work", suppressed=True))

    rejected = [m for m in log_messages if m.startswith("Rejected")]
    assert rejected == [
        "Rejected eth_getBalance: missing required argument 'address'",
        "Rejected eth.get_work: not available",
    ]
    assert transport.requests == []


@pytest.mark.asyncio
async def test_call_not_available_raises_without_touching_transport() -> None:
    transport = StubTransport(default="0x10")
    with pytest.raises(MethodNotSupported) as exc:
        await call(transport, NotAvailable("eth", "get_work", suppressed=True))
    assert exc.value.suppressed is True
    assert "not supported" in str(exc.value)

    with pytest.raises(MethodNotSupported, match="is not defined"):
        await call(transport, NotAvailable("eth", "typo"))
    assert transport.requests == []


@pytest.mark.asyncio
async def test_call_without_transport_raises_not_initialized() -> None:
    with pytest.raises(NotInitialized):
        await call(None, GET_BALANCE, ("0xabc",), owner="eth")


@pytest.mark.asyncio
async def test_transport_errors_propagate_unchanged() -> None:
    failure = TransportFailure("execution reverted", code=3, data="0x08c379a0")
    transport = StubTransport({"eth_getBalance": failure})

    with pytest.raises(TransportFailure) as exc:
        await call(transport, GET_BALANCE, ("0xabc",))
    assert exc.value is failure
    assert exc.value.code == 3
    assert exc.value.data == "0x08c379a0"

    other = ConnectionResetError("peer went away")
    transport.results["eth_getBalance"] = other
    with pytest.raises(ConnectionResetError) as exc2:
        await call(transport, GET_BALANCE, ("0xabc",))
    assert exc2.value is other
    assert len(transport.requests) == 2


@pytest.mark.asyncio
async def test_result_decoder_is_identity_by_default_and_applied_when_given() -> None:
    transport = StubTransport(default="0xAbC")
    assert await call(transport, GET_BALANCE, ("0xabc",)) == "0xAbC"

    decoded = RpcCallDefinition("peer_count", "net_peerCount", result_decoder=lambda v: int(v, 16))
    assert await call(transport, decoded) == 0xABC


class ReverseOrderTransport:
    """Holds every request until all have arrived, then answers them last-in first-out."""

    def __init__(self, expected: int) -> None:
        self.expected = expected
        self.gates: dict[str, asyncio.Event] = {}
        self.completed: list[str] = []
        self.all_arrived = asyncio.Event()

    async def send(self, method, params):
        key = params[0]
        gate = asyncio.Event()
        self.gates[key] = gate
        if len(self.gates) == self.expected:
            self.all_arrived.set()
        await gate.wait()
        self.completed.append(key)
        return f"result-for-{key}"


@pytest.mark.asyncio
async def test_concurrent_calls_each_get_their_own_result() -> None:
    sha3 = RpcCallDefinition("sha3", "web3_sha3", (required("data", str),))
    inputs = [f"0x{i:02x}" for i in range(8)]
    transport = ReverseOrderTransport(len(inputs))

    tasks = [asyncio.create_task(call(transport, sha3, (value,))) for value in inputs]
    await transport.all_arrived.wait()
    for value in reversed(inputs):
        transport.gates[value].set()
        await asyncio.sleep(0)
    results = await asyncio.gather(*tasks)

    assert transport.completed == list(reversed(inputs))
    assert results == [f"result-for-{value}" for value in inputs]
