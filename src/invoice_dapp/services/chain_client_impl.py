"""
ChainClient implementation backed by a signing relay.

The relay holds the session key of the connected wallet and exposes the
signing client's execute operation over HTTP:

    POST {base_url}/execute
    {"sender": ..., "contract": ..., "msg": {...}, "fee": "auto",
     "memo": "", "funds": [{"denom": ..., "amount": ...}]}

A 2xx response carries the execute result using the signing client's
field names (transactionHash, height, gasUsed, gasWanted, logs).
"""

from dataclasses import asdict
from typing import Any, Mapping, Optional, Sequence

import httpx

from invoice_dapp.lib import logs, objects
from invoice_dapp.services.chain_client import (
    ChainClient,
    ChainClientError,
    Coin,
    ExecuteResult,
)

LOG = logs.logger(__file__)


class HttpChainClient(ChainClient):
    """Async HTTP client that forwards executions to a signing relay."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 30.0,
        token: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not base_url:
            raise ValueError("HttpChainClient requires a relay base URL")
        self._base_url = str(base_url).rstrip("/")
        self._timeout = timeout
        self._headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if token:
            self._headers["Authorization"] = f"Bearer {token}"
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _build_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            headers=self._headers,
            transport=self._transport,
        )

    def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = self._build_client()
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def execute(
        self,
        sender: str,
        contract: str,
        msg: Mapping[str, Any],
        fee: str = "auto",
        memo: str = "",
        funds: Sequence[Coin] = (),
    ) -> ExecuteResult:
        body = {
            "sender": sender,
            "contract": contract,
            "msg": msg,
            "fee": fee,
            "memo": memo,
            "funds": [asdict(coin) for coin in funds],
        }
        client = self._ensure_client()
        LOG.debug("Relay execute - sender:%s contract:%s", sender, contract)
        try:
            response = await client.post("/execute", content=objects.to_json(body))
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as exc:
            LOG.error("Relay returned error %s", exc.response.status_code)
            raise ChainClientError(
                "Signing relay returned an error response",
                status_code=exc.response.status_code,
                cause=exc,
            ) from exc
        except httpx.RequestError as exc:
            LOG.error("Unable to reach signing relay: %s", exc)
            raise ChainClientError("Unable to reach signing relay", cause=exc) from exc
        except ValueError as exc:
            raise ChainClientError("Signing relay returned invalid JSON", cause=exc) from exc

        return _parse_result(data)


def _parse_result(data: Any) -> ExecuteResult:
    """Build an ExecuteResult from a relay response body."""
    if not isinstance(data, Mapping) or not data.get("transactionHash"):
        raise ChainClientError("Signing relay response has no transaction hash")
    return ExecuteResult(
        transaction_hash=str(data["transactionHash"]),
        height=int(data.get("height") or 0),
        gas_used=int(data.get("gasUsed") or 0),
        gas_wanted=int(data.get("gasWanted") or 0),
        logs=tuple(data.get("logs") or ()),
    )
