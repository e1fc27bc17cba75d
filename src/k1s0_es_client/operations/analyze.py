"""Analyze API."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..decoding import require_body
from ..models import AnalyzeResult
from ._base import Operation, format_query

if TYPE_CHECKING:
    from ..client import Client

TEXT_CONTENT_TYPE = "text/plain; charset=utf-8"


class AnalyzeOperation(Operation[AnalyzeResult]):
    """Run text through an analyser; the text is the raw request body."""

    def __init__(self, client: Client, text: str) -> None:
        super().__init__(client)
        self._text = text
        self._index: str | None = None

    def with_index(self, index: str) -> AnalyzeOperation:
        self._ensure_configurable()
        self._index = index
        return self

    def with_analyzer(self, analyzer: str) -> AnalyzeOperation:
        return self._set_param("analyzer", analyzer)

    def _send(self) -> AnalyzeResult:
        prefix = f"/{self._index}" if self._index else ""
        path = f"{prefix}/_analyze{format_query(self._params)}"
        _, body = self._client.execute(
            "POST", path, self._text, content_type=TEXT_CONTENT_TYPE
        )
        return AnalyzeResult.from_dict(require_body(body, "analyze"))
