import asyncio
import json
import math

import httpx
import pytest

from invoice_dapp.lib import objects
from invoice_dapp.models.invoice import CreateInvoiceMsg
from invoice_dapp.services import (
    ChainClientError,
    Coin,
    DemoChainClient,
    HttpChainClient,
    create_account_provider,
    get_chain_client,
)

RELAY_URL = "http://relay.test"
MESSAGE = CreateInvoiceMsg(
    recipient="xyz2", amount="350.5", description="work", due_date=1735689600000
).to_message()


@pytest.fixture(autouse=True)
def _clear_client_cache() -> None:
    get_chain_client.cache_clear()
    yield
    get_chain_client.cache_clear()


def _http_client(handler) -> HttpChainClient:
    return HttpChainClient(RELAY_URL, token="secret", transport=httpx.MockTransport(handler))


def _run(client: HttpChainClient, msg=MESSAGE, **kwargs):
    async def scenario():
        try:
            return await client.execute("xion1sender", "xion1contract", msg, **kwargs)
        finally:
            await client.close()

    return asyncio.run(scenario())


def test_http_client_posts_execute_request() -> None:
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["auth"] = request.headers.get("Authorization")
        seen["body"] = json.loads(request.content)
        return httpx.Response(
            200,
            json={"transactionHash": "ABC123", "height": 42, "gasUsed": 90000, "gasWanted": 120000},
        )

    result = _run(_http_client(handler), funds=[Coin("uxion", "10")])

    assert seen["url"] == f"{RELAY_URL}/execute"
    assert seen["auth"] == "Bearer secret"
    assert seen["body"] == {
        "sender": "xion1sender",
        "contract": "xion1contract",
        "msg": MESSAGE,
        "fee": "auto",
        "memo": "",
        "funds": [{"denom": "uxion", "amount": "10"}],
    }
    assert result.transaction_hash == "ABC123"
    assert result.height == 42
    assert result.gas_used == 90000


def test_http_client_sends_nan_due_date_as_null() -> None:
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"transactionHash": "ABC"})

    msg = CreateInvoiceMsg("xyz2", "0", "", math.nan).to_message()
    _run(_http_client(handler), msg=msg)

    assert seen["body"]["msg"]["CreateInvoice"]["due_date"] is None


def test_http_client_wraps_error_status() -> None:
    client = _http_client(lambda request: httpx.Response(500, text="boom"))
    with pytest.raises(ChainClientError) as excinfo:
        _run(client)
    assert excinfo.value.status_code == 500
    assert isinstance(excinfo.value.cause, httpx.HTTPStatusError)


def test_http_client_wraps_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(ChainClientError) as excinfo:
        _run(_http_client(handler))
    assert excinfo.value.status_code is None


def test_http_client_rejects_response_without_hash() -> None:
    client = _http_client(lambda request: httpx.Response(200, json={"height": 1}))
    with pytest.raises(ChainClientError):
        _run(client)


def test_http_client_requires_base_url() -> None:
    with pytest.raises(ValueError):
        HttpChainClient("")


def test_demo_client_records_calls_and_hashes_deterministically() -> None:
    first = DemoChainClient()
    second = DemoChainClient()

    result_a = asyncio.run(first.execute("xion1sender", "xion1contract", MESSAGE))
    result_b = asyncio.run(second.execute("xion1sender", "xion1contract", MESSAGE))

    assert result_a.transaction_hash == result_b.transaction_hash
    assert result_a.height == 1
    assert first.calls[0].msg == MESSAGE


def test_to_json_is_strict() -> None:
    text = objects.to_json({"a": math.nan, "b": [math.inf, 1.5], "c": (1, 2)})
    assert json.loads(text) == {"a": None, "b": [None, 1.5], "c": [1, 2]}


def test_get_chain_client_defaults_to_demo(monkeypatch) -> None:
    monkeypatch.delenv("INVOICE_DAPP_CHAIN_CLIENT", raising=False)
    client = get_chain_client()
    assert isinstance(client, DemoChainClient)
    assert get_chain_client() is client


def test_get_chain_client_http(monkeypatch) -> None:
    monkeypatch.setenv("INVOICE_DAPP_RELAY_URL", RELAY_URL)
    assert isinstance(get_chain_client("http"), HttpChainClient)


def test_get_chain_client_unknown_kind() -> None:
    with pytest.raises(ValueError, match="Unknown chain client kind"):
        get_chain_client("ledger")


def test_create_account_provider(monkeypatch) -> None:
    monkeypatch.setenv("INVOICE_DAPP_DEMO_ADDRESS", "xion1custom")
    provider = create_account_provider("demo")
    assert provider.account.is_connected is False
    provider.connect()
    assert provider.account.address == "xion1custom"
    assert create_account_provider("demo") is not provider
    with pytest.raises(ValueError):
        create_account_provider("keplr")


def test_demo_client_keeps_only_recent_calls() -> None:
    client = DemoChainClient(max_calls=2)

    async def scenario():
        for description in ("a", "b", "c"):
            msg = {"CreateInvoice": {**MESSAGE["CreateInvoice"], "description": description}}
            await client.execute("xion1sender", "xion1contract", msg)

    asyncio.run(scenario())

    assert [call.msg["CreateInvoice"]["description"] for call in client.calls] == ["b", "c"]


def test_create_account_provider_restores_connection(monkeypatch) -> None:
    monkeypatch.setenv("INVOICE_DAPP_DEMO_ADDRESS", "xion1custom")
    provider = create_account_provider(connected=True)
    assert provider.account.is_connected is True
    assert provider.account.address == "xion1custom"
