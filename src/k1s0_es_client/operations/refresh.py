"""Refresh API."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..decoding import require_body
from ..models import RefreshResult
from ._base import Operation, join_names

if TYPE_CHECKING:
    from ..client import Client


class RefreshOperation(Operation[RefreshResult]):
    def __init__(self, client: Client) -> None:
        super().__init__(client)
        self._indexes: list[str] = []

    def with_indexes(self, indexes: list[str]) -> RefreshOperation:
        self._ensure_configurable()
        self._indexes = list(indexes)
        return self

    def _send(self) -> RefreshResult:
        path = f"/{join_names(self._indexes)}/_refresh" if self._indexes else "/_refresh"
        _, body = self._client.execute("POST", path)
        return RefreshResult.from_dict(require_body(body, "refresh"))
