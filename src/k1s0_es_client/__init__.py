"""k1s0 search engine REST client library."""

from .client import Client
from .config import ClientConfig, load_config
from .exceptions import (
    ConfigError,
    ConfigErrorCodes,
    DecodeShapeError,
    EncodingError,
    EngineError,
    EsError,
    EsErrorCodes,
    TransportError,
)
from .models import (
    AnalyzeResult,
    AnalyzeToken,
    BulkItemResult,
    BulkResult,
    DeleteByQueryResult,
    DeleteResult,
    GetResult,
    IndexResult,
    RefreshResult,
    SearchHit,
    SearchHits,
    SearchResult,
    ShardCounts,
)
from .operations import Action, ActionType, OpType, encode_actions
from .query import Filter, Operator, Query, ZeroTermsQuery
from .units import Duration, DurationUnit

__all__ = [
    "Action",
    "ActionType",
    "AnalyzeResult",
    "AnalyzeToken",
    "BulkItemResult",
    "BulkResult",
    "Client",
    "ClientConfig",
    "ConfigError",
    "ConfigErrorCodes",
    "DecodeShapeError",
    "DeleteByQueryResult",
    "DeleteResult",
    "Duration",
    "DurationUnit",
    "EncodingError",
    "EngineError",
    "EsError",
    "EsErrorCodes",
    "Filter",
    "GetResult",
    "IndexResult",
    "OpType",
    "Operator",
    "Query",
    "RefreshResult",
    "SearchHit",
    "SearchHits",
    "SearchResult",
    "ShardCounts",
    "TransportError",
    "ZeroTermsQuery",
    "encode_actions",
    "load_config",
]
