"""Search APIs: URI query string and query DSL body."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..decoding import require_body
from ..models import SearchResult
from ..query import Operator, Query
from ..units import TimeValue, format_time
from ._base import Operation, format_query, scoped_path

if TYPE_CHECKING:
    from ..client import Client


class SearchURIOperation(Operation[SearchResult]):
    """Search with the simplified query-string syntax (GET, ``q=``)."""

    def __init__(self, client: Client) -> None:
        super().__init__(client)
        self._indexes: list[str] = []
        self._doc_types: list[str] = []

    def with_indexes(self, indexes: list[str]) -> SearchURIOperation:
        self._ensure_configurable()
        self._indexes = list(indexes)
        return self

    def with_doc_types(self, doc_types: list[str]) -> SearchURIOperation:
        self._ensure_configurable()
        self._doc_types = list(doc_types)
        return self

    def with_query(self, query: str) -> SearchURIOperation:
        return self._set_param("q", query)

    def with_df(self, default_field: str) -> SearchURIOperation:
        return self._set_param("df", default_field)

    def with_analyzer(self, analyzer: str) -> SearchURIOperation:
        return self._set_param("analyzer", analyzer)

    def with_default_operator(self, operator: Operator) -> SearchURIOperation:
        return self._set_param("default_operator", Operator(operator).value.upper())

    def with_fields(self, fields: list[str]) -> SearchURIOperation:
        return self._set_param("fields", list(fields))

    def with_sort(self, sort: list[str]) -> SearchURIOperation:
        return self._set_param("sort", list(sort))

    def with_from(self, from_: int) -> SearchURIOperation:
        return self._set_param("from", from_)

    def with_size(self, size: int) -> SearchURIOperation:
        return self._set_param("size", size)

    def with_timeout(self, timeout: TimeValue) -> SearchURIOperation:
        return self._set_param("timeout", format_time(timeout))

    def _send(self) -> SearchResult:
        path = scoped_path(self._indexes, self._doc_types, "_search") + format_query(self._params)
        _, body = self._client.execute("GET", path)
        return SearchResult.from_dict(require_body(body, "search"))


class SearchQueryOperation(Operation[SearchResult]):
    """Search with a query DSL tree sent as the POST body."""

    def __init__(self, client: Client) -> None:
        super().__init__(client)
        self._indexes: list[str] = []
        self._doc_types: list[str] = []
        self._body: dict[str, Any] = {}

    def _set_body(self, key: str, value: Any) -> SearchQueryOperation:
        self._ensure_configurable()
        self._body[key] = value
        return self

    def with_indexes(self, indexes: list[str]) -> SearchQueryOperation:
        self._ensure_configurable()
        self._indexes = list(indexes)
        return self

    def with_doc_types(self, doc_types: list[str]) -> SearchQueryOperation:
        self._ensure_configurable()
        self._doc_types = list(doc_types)
        return self

    def with_query(self, query: Query) -> SearchQueryOperation:
        return self._set_body("query", query.to_dict())

    def with_from(self, from_: int) -> SearchQueryOperation:
        return self._set_body("from", from_)

    def with_size(self, size: int) -> SearchQueryOperation:
        return self._set_body("size", size)

    def with_fields(self, fields: list[str]) -> SearchQueryOperation:
        return self._set_body("fields", list(fields))

    def with_sort(self, sort: list[str | dict[str, Any]]) -> SearchQueryOperation:
        return self._set_body("sort", list(sort))

    def with_timeout(self, timeout: TimeValue) -> SearchQueryOperation:
        return self._set_body("timeout", format_time(timeout))

    def with_min_score(self, min_score: float) -> SearchQueryOperation:
        return self._set_body("min_score", min_score)

    def request_body(self) -> dict[str, Any]:
        return dict(self._body)

    def _send(self) -> SearchResult:
        path = scoped_path(self._indexes, self._doc_types, "_search")
        _, body = self._client.execute("POST", path, self._body)
        return SearchResult.from_dict(require_body(body, "search"))
