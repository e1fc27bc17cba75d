"""SearchURIOperation / SearchQueryOperation のユニットテスト"""

import json

import httpx
import pytest
import respx
from k1s0_es_client.client import Client
from k1s0_es_client.config import ClientConfig
from k1s0_es_client.exceptions import EngineError
from k1s0_es_client.query import Filter, Operator, Query
from k1s0_es_client.units import Duration


def make_client() -> Client:
    return Client(ClientConfig(host="es-server", port=9200))


def search_response(total: int, hits: list | None = None) -> dict:
    return {
        "took": 2,
        "timed_out": False,
        "_shards": {"total": 5, "successful": 5, "failed": 0},
        "hits": {"total": total, "max_score": 1.0, "hits": hits or []},
    }


HIT = {
    "_index": "idx",
    "_type": "t",
    "_id": "1",
    "_score": 1.0,
    "_source": {"str_field": "Document A123", "int_field": 1},
}


@respx.mock
def test_search_uri_query_string() -> None:
    route = respx.route(method="GET", path="/idx/_search").mock(
        return_value=httpx.Response(200, json=search_response(1, [HIT]))
    )
    result = make_client().search_uri().with_indexes(["idx"]).with_query("str_field:1ABC").send()
    assert route.calls.last.request.url.params["q"] == "str_field:1ABC"
    assert result.hits.total == 1
    assert result.hits.hits[0].source == {"str_field": "Document A123", "int_field": 1}
    assert result.shards.successful == 5


@respx.mock
def test_search_uri_unset_params_absent() -> None:
    route = respx.route(method="GET", path="/idx/_search").mock(
        return_value=httpx.Response(200, json=search_response(3))
    )
    make_client().search_uri().with_indexes(["idx"]).send()
    assert route.calls.last.request.url.query == b""


@respx.mock
def test_search_uri_options() -> None:
    route = respx.route(method="GET", path="/a,b/t/_search").mock(
        return_value=httpx.Response(200, json=search_response(0))
    )
    (
        make_client()
        .search_uri()
        .with_indexes(["a", "b"])
        .with_doc_types(["t"])
        .with_query("B456")
        .with_df("str_field")
        .with_default_operator(Operator.AND)
        .with_fields(["int_field"])
        .with_sort(["int_field:desc"])
        .with_from(10)
        .with_size(5)
        .with_timeout(Duration.seconds(1))
        .send()
    )
    params = route.calls.last.request.url.params
    assert params["df"] == "str_field"
    assert params["default_operator"] == "AND"
    assert params["fields"] == "int_field"
    assert params["sort"] == "int_field:desc"
    assert params["from"] == "10"
    assert params["size"] == "5"
    assert params["timeout"] == "1s"


@respx.mock
def test_search_uri_types_without_indexes() -> None:
    route = respx.route(method="GET", path="/_all/t/_search").mock(
        return_value=httpx.Response(200, json=search_response(0))
    )
    make_client().search_uri().with_doc_types(["t"]).send()
    assert route.called


@respx.mock
def test_search_uri_everything() -> None:
    route = respx.route(method="GET", path="/_search").mock(
        return_value=httpx.Response(200, json=search_response(0))
    )
    make_client().search_uri().send()
    assert route.called


@respx.mock
def test_search_query_body() -> None:
    route = respx.route(method="POST", path="/idx/_search").mock(
        return_value=httpx.Response(200, json=search_response(3))
    )
    result = (
        make_client()
        .search_query()
        .with_indexes(["idx"])
        .with_query(Query.build_match_all().build())
        .with_size(50)
        .send()
    )
    assert json.loads(route.calls.last.request.content) == {
        "query": {"match_all": {}},
        "size": 50,
    }
    assert result.hits.total == 3


@respx.mock
def test_search_query_without_options_sends_empty_object() -> None:
    route = respx.route(method="POST", path="/idx/_search").mock(
        return_value=httpx.Response(200, json=search_response(0))
    )
    make_client().search_query().with_indexes(["idx"]).send()
    assert json.loads(route.calls.last.request.content) == {}


def test_search_query_request_body_options() -> None:
    operation = (
        make_client()
        .search_query()
        .with_query(Query.build_filtered(Filter.build_exists("a").build()).build())
        .with_from(5)
        .with_fields(["a"])
        .with_sort([{"a": "desc"}])
        .with_timeout("100ms")
        .with_min_score(0.5)
    )
    assert operation.request_body() == {
        "query": {"filtered": {"filter": {"exists": {"field": "a"}}}},
        "from": 5,
        "fields": ["a"],
        "sort": [{"a": "desc"}],
        "timeout": "100ms",
        "min_score": 0.5,
    }


@respx.mock
def test_search_hit_source_as() -> None:
    class Doc:
        def __init__(self, str_field: str, int_field: int) -> None:
            self.str_field = str_field
            self.int_field = int_field

        @classmethod
        def from_dict(cls, data: dict) -> "Doc":
            return cls(**data)

    respx.route(method="POST", path="/idx/_search").mock(
        return_value=httpx.Response(200, json=search_response(1, [HIT]))
    )
    result = make_client().search_query().with_indexes(["idx"]).send()
    doc = result.hits.hits[0].source_as(Doc)
    assert doc.str_field == "Document A123"


@respx.mock
def test_search_uri_missing_index_is_engine_error() -> None:
    respx.route(method="GET", path="/nope/_search").mock(
        return_value=httpx.Response(404, json={"error": "IndexMissingException[[nope] missing]", "status": 404})
    )
    with pytest.raises(EngineError) as exc_info:
        make_client().search_uri().with_indexes(["nope"]).send()
    assert exc_info.value.status_code == 404
    assert "IndexMissingException" in exc_info.value.body


@respx.mock
def test_search_query_missing_index_is_engine_error() -> None:
    respx.route(method="POST", path="/nope/_search").mock(
        return_value=httpx.Response(404, json={"error": "IndexMissingException[[nope] missing]", "status": 404})
    )
    with pytest.raises(EngineError) as exc_info:
        make_client().search_query().with_indexes(["nope"]).with_query(Query.build_match_all().build()).send()
    assert exc_info.value.status_code == 404
