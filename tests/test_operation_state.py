"""Operation の単回使用（Constructed → Configured → Sent）のユニットテスト"""

import httpx
import pytest
import respx
from k1s0_es_client.client import Client
from k1s0_es_client.config import ClientConfig
from k1s0_es_client.exceptions import EsError, EsErrorCodes


def make_client() -> Client:
    return Client(ClientConfig(host="es-server", port=9200))


@respx.mock
def test_operation_cannot_be_sent_twice() -> None:
    route = respx.route(method="POST", path="/_refresh").mock(
        return_value=httpx.Response(200, json={"_shards": {"total": 1, "successful": 1, "failed": 0}})
    )
    operation = make_client().refresh()
    operation.send()
    with pytest.raises(EsError) as exc_info:
        operation.send()
    assert exc_info.value.code == EsErrorCodes.INVALID_STATE
    assert route.call_count == 1


@respx.mock
def test_setter_after_send_rejected() -> None:
    respx.route(method="DELETE", path="/idx/t/1").mock(
        return_value=httpx.Response(200, json={"found": True, "_index": "idx", "_type": "t", "_id": "1"})
    )
    operation = make_client().delete("idx", "t", "1")
    operation.send()
    with pytest.raises(EsError) as exc_info:
        operation.with_refresh(True)
    assert exc_info.value.code == EsErrorCodes.INVALID_STATE


@respx.mock
def test_failed_send_still_consumes_operation() -> None:
    respx.route(method="GET", path="/_search").mock(return_value=httpx.Response(500, text="boom"))
    operation = make_client().search_uri()
    with pytest.raises(EsError):
        operation.send()
    with pytest.raises(EsError) as exc_info:
        operation.with_size(1)
    assert exc_info.value.code == EsErrorCodes.INVALID_STATE
