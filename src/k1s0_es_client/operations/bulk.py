"""Bulk API and its newline-delimited JSON encoding."""

from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from ..decoding import require_body
from ..encoding import encode_json, to_document
from ..exceptions import DecodeShapeError, EsError, EsErrorCodes
from ..models import BulkResult
from ..units import TimeValue, format_time
from ._base import Operation, format_query

if TYPE_CHECKING:
    from ..client import Client

NDJSON_CONTENT_TYPE = "application/x-ndjson"


class ActionType(StrEnum):
    INDEX = "index"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class Action:
    """One line item of a bulk request.

    Index, create and update actions carry a source document and encode to
    two lines; delete encodes to a single metadata line.
    """

    def __init__(self, action_type: ActionType, source: dict[str, Any] | None = None) -> None:
        self.action_type = action_type
        self.source = source
        self._meta: dict[str, Any] = {}

    @classmethod
    def index(cls, doc: Any) -> Action:
        return cls(ActionType.INDEX, to_document(doc))

    @classmethod
    def create(cls, doc: Any) -> Action:
        return cls(ActionType.CREATE, to_document(doc))

    @classmethod
    def update(cls, doc: Any, *, doc_as_upsert: bool = False) -> Action:
        source: dict[str, Any] = {"doc": to_document(doc)}
        if doc_as_upsert:
            source["doc_as_upsert"] = True
        return cls(ActionType.UPDATE, source)

    @classmethod
    def delete(cls, id: str) -> Action:
        return cls(ActionType.DELETE).with_id(id)

    def with_id(self, id: str) -> Action:
        self._meta["_id"] = id
        return self

    def with_index(self, index: str) -> Action:
        self._meta["_index"] = index
        return self

    def with_doc_type(self, doc_type: str) -> Action:
        self._meta["_type"] = doc_type
        return self

    def with_version(self, version: int) -> Action:
        self._meta["_version"] = version
        return self

    def with_routing(self, routing: str) -> Action:
        self._meta["_routing"] = routing
        return self

    def with_parent(self, parent: str) -> Action:
        self._meta["_parent"] = parent
        return self

    def with_ttl(self, ttl: TimeValue) -> Action:
        self._meta["_ttl"] = format_time(ttl)
        return self

    def metadata(self, index: str | None = None, doc_type: str | None = None) -> dict[str, Any]:
        """Metadata object, with defaults filling an absent index or type."""
        meta: dict[str, Any] = {}
        if index is not None:
            meta["_index"] = index
        if doc_type is not None:
            meta["_type"] = doc_type
        meta.update(self._meta)
        return {self.action_type.value: meta}

    def to_lines(self, index: str | None = None, doc_type: str | None = None) -> list[str]:
        lines = [encode_json(self.metadata(index, doc_type))]
        if self.action_type is not ActionType.DELETE:
            lines.append(encode_json(self.source or {}))
        return lines


def encode_actions(
    actions: Sequence[Action],
    index: str | None = None,
    doc_type: str | None = None,
) -> str:
    """Encode actions in order, every line newline-terminated."""
    return "".join(
        line + "\n" for action in actions for line in action.to_lines(index, doc_type)
    )


class BulkOperation(Operation[BulkResult]):
    """Submit many actions in one POST to ``/_bulk``.

    Per-item failures do not raise; they are reported through
    ``BulkResult.errors`` and the positionally aligned ``items``.
    """

    def __init__(self, client: Client, actions: Sequence[Action]) -> None:
        super().__init__(client)
        self._actions = list(actions)
        self._index: str | None = None
        self._doc_type: str | None = None

    def with_index(self, index: str) -> BulkOperation:
        self._ensure_configurable()
        self._index = index
        return self

    def with_doc_type(self, doc_type: str) -> BulkOperation:
        self._ensure_configurable()
        self._doc_type = doc_type
        return self

    def with_refresh(self, refresh: bool) -> BulkOperation:
        return self._set_param("refresh", refresh)

    def with_consistency(self, consistency: str) -> BulkOperation:
        return self._set_param("consistency", consistency)

    def with_timeout(self, timeout: TimeValue) -> BulkOperation:
        return self._set_param("timeout", format_time(timeout))

    def encode(self) -> str:
        return encode_actions(self._actions, self._index, self._doc_type)

    def _send(self) -> BulkResult:
        if not self._actions:
            raise EsError(
                code=EsErrorCodes.INVALID_STATE,
                message="Bulk operation requires at least one action",
            )
        payload = self.encode()
        _, body = self._client.execute(
            "POST",
            "/_bulk" + format_query(self._params),
            payload,
            content_type=NDJSON_CONTENT_TYPE,
        )
        result = BulkResult.from_dict(require_body(body, "bulk"))
        if len(result.items) != len(self._actions):
            raise DecodeShapeError("items", f"array of {len(self._actions)} items", result.items)
        return result
