"""Delete and delete-by-query APIs."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..decoding import require_body
from ..models import DeleteByQueryResult, DeleteResult
from ..query import Query
from ._base import Operation, format_query, scoped_path

if TYPE_CHECKING:
    from ..client import Client


class DeleteOperation(Operation[DeleteResult]):
    """Delete a document by id. Deleting a missing id is not an error."""

    def __init__(self, client: Client, index: str, doc_type: str, id: str) -> None:
        super().__init__(client)
        self._index = index
        self._doc_type = doc_type
        self._id = id

    def with_version(self, version: int) -> DeleteOperation:
        return self._set_param("version", version)

    def with_routing(self, routing: str) -> DeleteOperation:
        return self._set_param("routing", routing)

    def with_parent(self, parent: str) -> DeleteOperation:
        return self._set_param("parent", parent)

    def with_refresh(self, refresh: bool) -> DeleteOperation:
        return self._set_param("refresh", refresh)

    def _send(self) -> DeleteResult:
        path = f"/{self._index}/{self._doc_type}/{self._id}{format_query(self._params)}"
        status, body = self._client.execute("DELETE", path, not_found_ok=True)
        if status == 404 and not (isinstance(body, dict) and "found" in body):
            return DeleteResult(
                found=False, index=self._index, doc_type=self._doc_type, id=self._id
            )
        return DeleteResult.from_dict(require_body(body, "delete"))


class DeleteByQueryOperation(Operation[DeleteByQueryResult]):
    """Delete every document matching a query.

    Without ``with_indexes`` the query runs against all indexes.
    """

    def __init__(self, client: Client, query: Query) -> None:
        super().__init__(client)
        self._query = query
        self._indexes: list[str] = []
        self._doc_types: list[str] = []

    def with_indexes(self, indexes: list[str]) -> DeleteByQueryOperation:
        self._ensure_configurable()
        self._indexes = list(indexes)
        return self

    def with_doc_types(self, doc_types: list[str]) -> DeleteByQueryOperation:
        self._ensure_configurable()
        self._doc_types = list(doc_types)
        return self

    def with_routing(self, routing: str) -> DeleteByQueryOperation:
        return self._set_param("routing", routing)

    def _send(self) -> DeleteByQueryResult:
        path = scoped_path(self._indexes, self._doc_types, "_query") + format_query(self._params)
        status, body = self._client.execute(
            "DELETE", path, {"query": self._query.to_dict()}, not_found_ok=True
        )
        if status == 404:
            return DeleteByQueryResult.not_found()
        return DeleteByQueryResult.from_dict(require_body(body, "delete_by_query"))
