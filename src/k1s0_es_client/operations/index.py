"""Index API."""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Any

from ..decoding import require_body
from ..encoding import to_document
from ..exceptions import EsError, EsErrorCodes
from ..models import IndexResult
from ..units import TimeValue, format_time
from ._base import Operation, format_query

if TYPE_CHECKING:
    from ..client import Client


class OpType(StrEnum):
    """``index`` overwrites or creates, ``create`` fails if the id exists."""

    INDEX = "index"
    CREATE = "create"


class IndexOperation(Operation[IndexResult]):
    """Index a document.

    With an id the request is a PUT to ``/{index}/{type}/{id}``; without
    one it is a POST to ``/{index}/{type}`` and the engine assigns the id.
    """

    def __init__(self, client: Client, index: str, doc_type: str) -> None:
        super().__init__(client)
        self._index = index
        self._doc_type = doc_type
        self._id: str | None = None
        self._doc: dict[str, Any] | None = None

    def with_doc(self, doc: Any) -> IndexOperation:
        self._ensure_configurable()
        self._doc = to_document(doc)
        return self

    def with_id(self, id: str) -> IndexOperation:
        self._ensure_configurable()
        self._id = id
        return self

    def with_ttl(self, ttl: TimeValue) -> IndexOperation:
        return self._set_param("ttl", format_time(ttl))

    def with_op_type(self, op_type: OpType) -> IndexOperation:
        return self._set_param("op_type", OpType(op_type).value)

    def with_version(self, version: int) -> IndexOperation:
        return self._set_param("version", version)

    def with_routing(self, routing: str) -> IndexOperation:
        return self._set_param("routing", routing)

    def with_parent(self, parent: str) -> IndexOperation:
        return self._set_param("parent", parent)

    def with_timestamp(self, timestamp: str) -> IndexOperation:
        return self._set_param("timestamp", timestamp)

    def with_refresh(self, refresh: bool) -> IndexOperation:
        return self._set_param("refresh", refresh)

    def with_timeout(self, timeout: TimeValue) -> IndexOperation:
        return self._set_param("timeout", format_time(timeout))

    def _send(self) -> IndexResult:
        if self._doc is None:
            raise EsError(
                code=EsErrorCodes.INVALID_STATE,
                message="Index operation requires a document",
            )
        query = format_query(self._params)
        if self._id is None:
            method, path = "POST", f"/{self._index}/{self._doc_type}{query}"
        else:
            method, path = "PUT", f"/{self._index}/{self._doc_type}/{self._id}{query}"
        _, body = self._client.execute(method, path, self._doc)
        return IndexResult.from_dict(require_body(body, "index"))
