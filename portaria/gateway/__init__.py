from .base import (
    CollectionGateway,
    QueryBuilder,
    Query,
    GatewayError,
    GatewayReadError,
    GatewayWriteError
)

__all__ = [
    "CollectionGateway",
    "QueryBuilder",
    "Query",
    "GatewayError",
    "GatewayReadError",
    "GatewayWriteError"
]
