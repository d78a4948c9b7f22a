from aurora_rpc.rpc.definition import NotAvailable, Param, RpcCallDefinition, optional, required
from aurora_rpc.rpc.errors import (
    AuroraRpcError,
    DuplicateDefinition,
    InvalidArguments,
    MethodNotSupported,
    NotInitialized,
    TransportFailure,
)
from aurora_rpc.rpc.protocol import RpcTransport
from aurora_rpc.rpc.registry import NamespaceTable, RpcRegistry
from aurora_rpc.rpc.dispatch import bind_arguments, call
from aurora_rpc.rpc.namespace import Namespace, NamespaceModule
from aurora_rpc.rpc.transport import JsonRpcHttpTransport, Web3ProviderTransport

__all__ = [
    "AuroraRpcError",
    "DuplicateDefinition",
    "InvalidArguments",
    "JsonRpcHttpTransport",
    "MethodNotSupported",
    "Namespace",
    "NamespaceModule",
    "NamespaceTable",
    "NotAvailable",
    "NotInitialized",
    "Param",
    "RpcCallDefinition",
    "RpcRegistry",
    "RpcTransport",
    "TransportFailure",
    "Web3ProviderTransport",
    "bind_arguments",
    "call",
    "optional",
    "required",
]
