"""Client core: connection settings, HTTP round trips and status policy."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from typing import Any

import httpx

from .config import ClientConfig
from .decoding import require, require_body
from .encoding import encode_json
from .exceptions import EncodingError, EngineError, TransportError
from .operations.analyze import AnalyzeOperation
from .operations.bulk import Action, BulkOperation
from .operations.delete import DeleteByQueryOperation, DeleteOperation
from .operations.get import GetOperation
from .operations.index import IndexOperation
from .operations.refresh import RefreshOperation
from .operations.search import SearchQueryOperation, SearchURIOperation
from .query import Query

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"

SUCCESS_STATUSES = frozenset({200, 201})
NOT_FOUND = 404


def classify_response(
    resp: httpx.Response, *, not_found_ok: bool = False
) -> tuple[int, Any | None]:
    """Map an HTTP response to ``(status, decoded JSON or None)``.

    200 and 201 are accepted. 404 is accepted only with ``not_found_ok``,
    for APIs where a missing document is a valid answer (get, delete,
    delete-by-query). Any other status raises EngineError with the raw
    body; an accepted body that is not JSON raises EncodingError.
    """
    accepted = resp.status_code in SUCCESS_STATUSES or (
        not_found_ok and resp.status_code == NOT_FOUND
    )
    if not accepted:
        raise EngineError(resp.status_code, resp.text)
    if not resp.content.strip():
        return resp.status_code, None
    try:
        return resp.status_code, json.loads(resp.content)
    except ValueError as e:
        raise EncodingError(
            f"Failed to parse response body (HTTP {resp.status_code}): {e}", cause=e
        ) from e


class Client:
    """Synchronous client for the engine's REST API.

    Each API is reached through a method returning an operation builder;
    required parameters are method arguments, optional ones are chained
    ``with_*`` calls and ``send()`` performs the request:

        with Client(ClientConfig(host="localhost", port=9200)) as client:
            result = client.search_uri().with_indexes(["idx"]).with_query("field:value").send()

    A Client is not safe for concurrent use. Share it between threads only
    behind a lock owned by the caller, or create one Client per thread.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._config = config or ClientConfig()
        self._http = httpx.Client(
            headers=self._config.headers,
            timeout=self._config.timeout_seconds,
            transport=transport,
        )

    @classmethod
    def from_host(cls, host: str, port: int) -> Client:
        return cls(ClientConfig(host=host, port=port))

    @property
    def base_url(self) -> str:
        return self._config.base_url

    def full_url(self, path: str) -> str:
        """Prefix an operation path with the configured scheme, host and port."""
        if not path.startswith("/"):
            path = "/" + path
        return f"{self.base_url}{path}"

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def execute(
        self,
        method: str,
        path: str,
        body: Any = None,
        *,
        content_type: str = JSON_CONTENT_TYPE,
        not_found_ok: bool = False,
    ) -> tuple[int, Any | None]:
        """Perform one HTTP round trip.

        ``body`` is JSON encoded unless it is already a ``str``, in which case
        it is sent verbatim. Encoding happens before any network activity.
        ``not_found_ok`` lets a 404 through as a regular response.
        """
        content: bytes | None = None
        headers: dict[str, str] = {}
        if body is not None:
            text = body if isinstance(body, str) else encode_json(body)
            logger.debug("Request body", extra={"body": text})
            content = text.encode("utf-8")
            headers["Content-Type"] = content_type

        url = self.full_url(path)
        logger.info("Doing %s on %s", method, url)
        try:
            resp = self._http.request(method, url, content=content, headers=headers)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(f"{method} {url} failed: {e}", cause=e) from e
        logger.info("Response %s from %s %s", resp.status_code, method, url)
        return classify_response(resp, not_found_ok=not_found_ok)

    def version(self) -> str:
        """Return the engine version reported at ``/``."""
        _, body = self.execute("GET", "/")
        data = require_body(body, "version")
        return require(data, "version", "number", kind=str)

    # Indices APIs

    def refresh(self) -> RefreshOperation:
        return RefreshOperation(self)

    def analyze(self, text: str) -> AnalyzeOperation:
        return AnalyzeOperation(self, text)

    # Document APIs

    def index(self, index: str, doc_type: str) -> IndexOperation:
        return IndexOperation(self, index, doc_type)

    def get(self, index: str, id: str) -> GetOperation:
        return GetOperation(self, index, id)

    def delete(self, index: str, doc_type: str, id: str) -> DeleteOperation:
        return DeleteOperation(self, index, doc_type, id)

    # Multi-document APIs

    def delete_by_query(self, query: Query) -> DeleteByQueryOperation:
        return DeleteByQueryOperation(self, query)

    def bulk(self, actions: Sequence[Action]) -> BulkOperation:
        return BulkOperation(self, actions)

    # Search APIs

    def search_uri(self) -> SearchURIOperation:
        return SearchURIOperation(self)

    def search_query(self) -> SearchQueryOperation:
        return SearchQueryOperation(self)
