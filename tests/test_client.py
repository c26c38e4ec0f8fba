import json

import httpx
import pytest

from web_distribution import WebDistribution
from web_distribution.client import WebDistributionClient, encode_query
from web_distribution.config import ClientConfig
from web_distribution.exceptions import (
    BadResponseError,
    RequestFailedError,
    ResponseException,
    TransportError,
)


def _client(handler, **config):
    config.setdefault("base_url", "https://wd.example.com/")
    return WebDistributionClient(ClientConfig(**config), transport=httpx.MockTransport(handler))


def test_encode_query_follows_php_conventions():
    params = encode_query({
        "with": ["company", "line"],
        "transaction_number_exact": True,
        "trashed": "true",
        "page": 2,
        "line": None,
    })

    assert params == [
        ("with[]", "company"),
        ("with[]", "line"),
        ("transaction_number_exact", "1"),
        ("trashed", "true"),
        ("page", "2"),
    ]


def test_get_json_sends_query_and_headers():
    seen = {}

    def handler(request):
        seen["request"] = request
        return httpx.Response(200, json=[{"id": 1}])

    client = _client(handler, api_token="secret")

    assert client.get_json("api/item", {"with": ["company"], "count": 5}) == [{"id": 1}]

    request = seen["request"]
    assert request.url.path == "/api/item"
    assert request.url.params.get_list("with[]") == ["company"]
    assert request.url.params["count"] == "5"
    assert request.headers["Authorization"] == "Bearer secret"
    assert request.headers["Accept"] == "application/json"


def test_no_authorization_header_without_token():
    seen = {}

    def handler(request):
        seen["request"] = request
        return httpx.Response(200, json={})

    _client(handler).get_json("api/company/1")

    assert "Authorization" not in seen["request"].headers


def test_put_and_post_send_json_bodies():
    bodies = []

    def handler(request):
        bodies.append((request.method, request.url.path, request.content))
        return httpx.Response(200, json={"ok": True})

    client = _client(handler)
    client.put_json("api/style/5", {"name": "Velvet"})
    client.post("api/transaction-item/9/reallocate", {5: 2, 7: 3})
    client.post("api/transaction-item/9/unallocate")

    assert bodies[0][:2] == ("PUT", "/api/style/5")
    assert json.loads(bodies[0][2]) == {"name": "Velvet"}
    assert json.loads(bodies[1][2]) == {"5": 2, "7": 3}
    assert bodies[2][2] == b""


def test_empty_body_returns_none():
    client = _client(lambda request: httpx.Response(204))
    assert client.post("api/transaction-item/9/unallocate") is None


def test_error_status_raises_bad_response():
    client = _client(lambda request: httpx.Response(404, json={"message": "Not Found"}))

    with pytest.raises(BadResponseError) as exc:
        client.get_json("api/item/999")

    assert exc.value.status_code == 404
    assert exc.value.payload == {"message": "Not Found"}
    assert isinstance(exc.value, RequestFailedError)


def test_connect_error_raises_transport_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(TransportError) as exc:
        _client(handler).get_json("api/item")

    assert not isinstance(exc.value, RequestFailedError)


def test_non_json_body_raises_response_exception():
    client = _client(lambda request: httpx.Response(200, text="<html>maintenance</html>"))

    with pytest.raises(ResponseException) as exc:
        client.get_json("api/item")

    assert "maintenance" in exc.value.payload


def test_sdk_shares_one_client_and_closes_it():
    config = ClientConfig(base_url="https://wd.example.com")
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json=[{"id": 3, "name": "Acme"}]))

    with WebDistribution.from_config(config, transport=transport) as wd:
        assert wd.products.client is wd.transactions.client is wd.inventory.client
        assert [company.name for company in wd.companies.list()] == ["Acme"]

    assert wd.client._http.is_closed


def test_redirects_are_followed():
    def handler(request):
        if request.url.path == "/api/item":
            return httpx.Response(301, headers={"Location": "https://wd.example.com/v2/api/item"})
        return httpx.Response(200, json=[])

    assert _client(handler).get_json("api/item") == []


def test_redirect_loop_raises_request_failed():
    def handler(request):
        return httpx.Response(302, headers={"Location": str(request.url)})

    with pytest.raises(RequestFailedError) as exc:
        _client(handler).get_json("api/item")

    assert not isinstance(exc.value, BadResponseError)
