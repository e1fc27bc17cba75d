"""レスポンスモデルのデコードのユニットテスト"""

import pytest
from k1s0_es_client.exceptions import DecodeShapeError
from k1s0_es_client.models import (
    BulkItemResult,
    BulkResult,
    DeleteByQueryResult,
    IndexResult,
    SearchResult,
    ShardCounts,
    decode_source,
)


def test_index_result_requires_id() -> None:
    with pytest.raises(DecodeShapeError) as exc_info:
        IndexResult.from_dict({"_index": "i", "_type": "t", "_version": 1, "created": True})
    assert exc_info.value.path == "_id"


def test_index_result_wrong_version_type() -> None:
    with pytest.raises(DecodeShapeError):
        IndexResult.from_dict({"_index": "i", "_type": "t", "_id": "1", "_version": "1"})


def test_shard_counts_defaults() -> None:
    counts = ShardCounts.from_dict({"total": 2, "successful": 2})
    assert counts.failed == 0
    assert counts.failures == []


def test_delete_by_query_zero_shards_not_successful() -> None:
    result = DeleteByQueryResult.from_dict(
        {"_indices": {"empty": {"_shards": {"total": 0, "successful": 0, "failed": 0}}}}
    )
    assert result.successful() is False


def test_delete_by_query_missing_indices_key() -> None:
    with pytest.raises(DecodeShapeError):
        DeleteByQueryResult.from_dict({})


def test_bulk_item_with_error() -> None:
    item = BulkItemResult.from_dict(
        {"index": {"_index": "i", "_type": "t", "_id": "1", "status": 400, "error": "MapperParsingException"}}
    )
    assert item.action == "index"
    assert item.ok is False


def test_bulk_item_shape() -> None:
    with pytest.raises(DecodeShapeError):
        BulkItemResult.from_dict({"index": {}, "delete": {}})


def test_bulk_result_requires_errors_flag() -> None:
    with pytest.raises(DecodeShapeError):
        BulkResult.from_dict({"items": []})


def test_search_result_null_max_score() -> None:
    result = SearchResult.from_dict(
        {
            "took": 1,
            "timed_out": False,
            "_shards": {"total": 1, "successful": 1, "failed": 0},
            "hits": {"total": 0, "max_score": None, "hits": []},
        }
    )
    assert result.hits.max_score is None
    assert result.hits.hits == []


def test_decode_source_rejects_plain_class() -> None:
    class Plain:
        pass

    with pytest.raises(TypeError):
        decode_source({"a": 1}, Plain)
