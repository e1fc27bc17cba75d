"""Get API."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..decoding import require_body
from ..models import GetResult
from ._base import ALL_TYPES, Operation, format_query

if TYPE_CHECKING:
    from ..client import Client


class GetOperation(Operation[GetResult]):
    """Fetch a document by id. A missing document is ``found=False``."""

    def __init__(self, client: Client, index: str, id: str) -> None:
        super().__init__(client)
        self._index = index
        self._id = id
        self._doc_type: str | None = None

    def with_doc_type(self, doc_type: str) -> GetOperation:
        self._ensure_configurable()
        self._doc_type = doc_type
        return self

    def with_fields(self, fields: list[str]) -> GetOperation:
        return self._set_param("fields", list(fields))

    def with_routing(self, routing: str) -> GetOperation:
        return self._set_param("routing", routing)

    def with_preference(self, preference: str) -> GetOperation:
        return self._set_param("preference", preference)

    def with_realtime(self, realtime: bool) -> GetOperation:
        return self._set_param("realtime", realtime)

    def with_refresh(self, refresh: bool) -> GetOperation:
        return self._set_param("refresh", refresh)

    def _send(self) -> GetResult:
        doc_type = self._doc_type or ALL_TYPES
        path = f"/{self._index}/{doc_type}/{self._id}{format_query(self._params)}"
        status, body = self._client.execute("GET", path, not_found_ok=True)
        # a missing index answers 404 with an error object (or nothing) instead of found=false
        if status == 404 and not (isinstance(body, dict) and "found" in body):
            return GetResult(found=False, index=self._index, doc_type=self._doc_type, id=self._id)
        return GetResult.from_dict(require_body(body, "get"))
