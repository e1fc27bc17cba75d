"""Typed views over the engine's JSON responses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, TypeVar

from pydantic import BaseModel

from .decoding import optional, require
from .exceptions import DecodeShapeError

T = TypeVar("T")


def decode_source(source: dict[str, Any] | None, cls: type[T]) -> T:
    """Decode a ``_source`` object into ``cls``.

    ``cls`` is either a pydantic model or a class with a ``from_dict``
    classmethod.
    """
    if source is None:
        raise DecodeShapeError("_source", "object")
    if isinstance(cls, type) and issubclass(cls, BaseModel):
        return cls.model_validate(source)
    from_dict = getattr(cls, "from_dict", None)
    if from_dict is None:
        raise TypeError(f"{cls.__name__} must be a pydantic model or define from_dict()")
    return from_dict(source)


@dataclass
class ShardCounts:
    """``_shards`` summary."""

    total: int
    successful: int
    failed: int
    failures: list[dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ShardCounts:
        return cls(
            total=require(data, "total", kind=int),
            successful=require(data, "successful", kind=int),
            failed=optional(data, "failed", kind=int, default=0),
            failures=optional(data, "failures", kind=list, default=[]),
        )


@dataclass
class IndexResult:
    """Result of indexing a single document."""

    created: bool
    index: str
    doc_type: str
    id: str
    version: int

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> IndexResult:
        return cls(
            created=optional(data, "created", kind=bool, default=False),
            index=require(data, "_index", kind=str),
            doc_type=require(data, "_type", kind=str),
            id=require(data, "_id", kind=str),
            version=require(data, "_version", kind=int),
        )


@dataclass
class GetResult:
    """Result of a GET by id. ``found`` is False for a missing document."""

    found: bool
    index: str
    doc_type: str | None
    id: str
    version: int | None = None
    source: dict[str, Any] | None = None
    fields: dict[str, Any] | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GetResult:
        return cls(
            found=require(data, "found", kind=bool),
            index=require(data, "_index", kind=str),
            doc_type=optional(data, "_type", kind=str),
            id=require(data, "_id", kind=str),
            version=optional(data, "_version", kind=int),
            source=optional(data, "_source", kind=dict),
            fields=optional(data, "fields", kind=dict),
        )

    def source_as(self, cls: type[T]) -> T:
        return decode_source(self.source, cls)


@dataclass
class DeleteResult:
    """Result of a delete by id. ``found`` is False when nothing was deleted."""

    found: bool
    index: str
    doc_type: str
    id: str
    version: int | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DeleteResult:
        return cls(
            found=require(data, "found", kind=bool),
            index=require(data, "_index", kind=str),
            doc_type=require(data, "_type", kind=str),
            id=require(data, "_id", kind=str),
            version=optional(data, "_version", kind=int),
        )


@dataclass
class DeleteByQueryResult:
    """Per-index shard outcomes of a delete-by-query.

    A 404 (unknown index) is represented with ``found=False`` and no indices.
    """

    indices: dict[str, ShardCounts] = field(default_factory=dict)
    found: bool = True

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DeleteByQueryResult:
        raw = require(data, "_indices", kind=dict)
        indices = {
            name: ShardCounts.from_dict(require(raw, name, "_shards", kind=dict))
            for name in raw
        }
        return cls(indices=indices)

    @classmethod
    def not_found(cls) -> DeleteByQueryResult:
        return cls(indices={}, found=False)

    def successful(self) -> bool:
        """True only if at least one shard was addressed and none failed."""
        if not self.found:
            return False
        addressed = 0
        for shards in self.indices.values():
            if shards.failed != 0 or shards.successful != shards.total:
                return False
            addressed += shards.total
        return addressed > 0


@dataclass
class BulkItemResult:
    """Outcome of one bulk action, aligned with the submitted action."""

    action: str
    index: str
    doc_type: str | None
    id: str | None
    status: int
    version: int | None = None
    found: bool | None = None
    error: Any = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.status < 300

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BulkItemResult:
        if len(data) != 1:
            raise DecodeShapeError("items[]", "object with one action key", data)
        action, body = next(iter(data.items()))
        if not isinstance(body, dict):
            raise DecodeShapeError(f"items[].{action}", "object", body)
        return cls(
            action=action,
            index=require(body, "_index", kind=str),
            doc_type=optional(body, "_type", kind=str),
            id=optional(body, "_id", kind=str),
            status=require(body, "status", kind=int),
            version=optional(body, "_version", kind=int),
            found=optional(body, "found", kind=bool),
            error=body.get("error"),
        )


@dataclass
class BulkResult:
    """Result of a bulk request. ``errors`` is True if any item failed."""

    took: int
    errors: bool
    items: list[BulkItemResult] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BulkResult:
        return cls(
            took=optional(data, "took", kind=int, default=0),
            errors=require(data, "errors", kind=bool),
            items=[BulkItemResult.from_dict(i) for i in require(data, "items", kind=list)],
        )

    def failures(self) -> list[tuple[int, BulkItemResult]]:
        """Positions and outcomes of the failed items."""
        return [(i, item) for i, item in enumerate(self.items) if not item.ok]


@dataclass
class SearchHit:
    index: str
    doc_type: str | None
    id: str
    score: float | None = None
    source: dict[str, Any] | None = None
    fields: dict[str, Any] | None = None
    sort: list[Any] | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SearchHit:
        return cls(
            index=require(data, "_index", kind=str),
            doc_type=optional(data, "_type", kind=str),
            id=require(data, "_id", kind=str),
            score=optional(data, "_score", kind=float),
            source=optional(data, "_source", kind=dict),
            fields=optional(data, "fields", kind=dict),
            sort=optional(data, "sort", kind=list),
        )

    def source_as(self, cls: type[T]) -> T:
        return decode_source(self.source, cls)


@dataclass
class SearchHits:
    total: int
    max_score: float | None = None
    hits: list[SearchHit] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SearchHits:
        return cls(
            total=require(data, "total", kind=int),
            max_score=optional(data, "max_score", kind=float),
            hits=[SearchHit.from_dict(h) for h in optional(data, "hits", kind=list, default=[])],
        )


@dataclass
class SearchResult:
    """Result of a URI or query-DSL search."""

    took: int
    timed_out: bool
    shards: ShardCounts
    hits: SearchHits

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SearchResult:
        return cls(
            took=optional(data, "took", kind=int, default=0),
            timed_out=optional(data, "timed_out", kind=bool, default=False),
            shards=ShardCounts.from_dict(require(data, "_shards", kind=dict)),
            hits=SearchHits.from_dict(require(data, "hits", kind=dict)),
        )


@dataclass
class AnalyzeToken:
    token: str
    start_offset: int
    end_offset: int
    type: str
    position: int

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AnalyzeToken:
        return cls(
            token=require(data, "token", kind=str),
            start_offset=require(data, "start_offset", kind=int),
            end_offset=require(data, "end_offset", kind=int),
            type=require(data, "type", kind=str),
            position=require(data, "position", kind=int),
        )


@dataclass
class AnalyzeResult:
    tokens: list[AnalyzeToken] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AnalyzeResult:
        return cls(tokens=[AnalyzeToken.from_dict(t) for t in require(data, "tokens", kind=list)])


@dataclass
class RefreshResult:
    shards: ShardCounts

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RefreshResult:
        return cls(shards=ShardCounts.from_dict(require(data, "_shards", kind=dict)))
