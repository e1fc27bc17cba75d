"""Operation builders, one per API."""

from .analyze import AnalyzeOperation
from .bulk import Action, ActionType, BulkOperation, encode_actions
from .delete import DeleteByQueryOperation, DeleteOperation
from .get import GetOperation
from .index import IndexOperation, OpType
from .refresh import RefreshOperation
from .search import SearchQueryOperation, SearchURIOperation

__all__ = [
    "Action",
    "ActionType",
    "AnalyzeOperation",
    "BulkOperation",
    "DeleteByQueryOperation",
    "DeleteOperation",
    "GetOperation",
    "IndexOperation",
    "OpType",
    "RefreshOperation",
    "SearchQueryOperation",
    "SearchURIOperation",
    "encode_actions",
]
