"""
aurora-rpc — Aurora EVM JSON-RPC namespaces for Ethereum clients.
Namespaces are declared by module objects and composed into a plugin via plugin.register(module).
"""
from aurora_rpc.core import Config, Container, Module, Plugin, RpcConfig
from aurora_rpc.rpc import (
    AuroraRpcError,
    DuplicateDefinition,
    InvalidArguments,
    JsonRpcHttpTransport,
    MethodNotSupported,
    Namespace,
    NamespaceModule,
    NotAvailable,
    NotInitialized,
    RpcRegistry,
    RpcTransport,
    TransportFailure,
    Web3ProviderTransport,
)
from aurora_rpc.plugin import AuroraPlugin

__all__ = [
    "AuroraPlugin",
    "AuroraRpcError",
    "Config",
    "Container",
    "DuplicateDefinition",
    "InvalidArguments",
    "JsonRpcHttpTransport",
    "MethodNotSupported",
    "Module",
    "Namespace",
    "NamespaceModule",
    "NotAvailable",
    "NotInitialized",
    "Plugin",
    "RpcConfig",
    "RpcRegistry",
    "RpcTransport",
    "TransportFailure",
    "Web3ProviderTransport",
]
