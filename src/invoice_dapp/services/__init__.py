"""
Service factories for the Invoice dApp.

Available chain clients:
- demo: In-memory client that records executions (no wallet required)
- http: Forwards executions to a signing relay (requires INVOICE_DAPP_RELAY_URL)

Available account providers:
- demo: Connects instantly to INVOICE_DAPP_DEMO_ADDRESS

The chain client is cached at the module level, so the same instance is
shared by every form session. Account providers hold per-session connection
state and are recreated for each event from the session's stored
connection flag.
"""

import os
from functools import cache
from typing import Callable, Dict

from invoice_dapp.lib import logs
from invoice_dapp.services.account import Account, AccountProvider, DemoAccountProvider
from invoice_dapp.services.chain_client import (
    ChainClient,
    ChainClientError,
    Coin,
    ExecuteResult,
)
from invoice_dapp.services.chain_client_demo import DemoChainClient
from invoice_dapp.services.chain_client_impl import HttpChainClient

LOG = logs.logger(__file__)

DEFAULT_DEMO_ADDRESS = "xion1demo0wallet0address0000000000000000000"


def _http_chain_client() -> ChainClient:
    return HttpChainClient(
        os.getenv("INVOICE_DAPP_RELAY_URL", ""),
        timeout=float(os.getenv("INVOICE_DAPP_RELAY_TIMEOUT", "30")),
        token=os.getenv("INVOICE_DAPP_RELAY_TOKEN") or None,
    )


_CHAIN_CLIENT_REGISTRY: Dict[str, Callable[[], ChainClient]] = {
    "demo": lambda: DemoChainClient(),
    "http": _http_chain_client,
}

_ACCOUNT_PROVIDER_REGISTRY: Dict[str, Callable[[bool], AccountProvider]] = {
    "demo": lambda connected: DemoAccountProvider(
        os.getenv("INVOICE_DAPP_DEMO_ADDRESS", DEFAULT_DEMO_ADDRESS), connected=connected
    ),
}


@cache
def get_chain_client(kind: str | None = None) -> ChainClient:
    """Return the configured chain client implementation."""
    resolved_kind = (kind or os.getenv("INVOICE_DAPP_CHAIN_CLIENT", "demo")).lower()
    LOG.info("get_chain_client - kind:%s resolved_kind:%s", kind, resolved_kind)
    try:
        factory = _CHAIN_CLIENT_REGISTRY[resolved_kind]
    except KeyError as exc:
        msg = f"Unknown chain client kind: {resolved_kind}"
        raise ValueError(msg) from exc
    return factory()


def create_account_provider(
    kind: str | None = None, connected: bool = False
) -> AccountProvider:
    """
    Return a new account provider for one form session.

    Args:
        kind: Provider kind; defaults to INVOICE_DAPP_ACCOUNT_PROVIDER.
        connected: Whether the session was already connected.
    """
    resolved_kind = (kind or os.getenv("INVOICE_DAPP_ACCOUNT_PROVIDER", "demo")).lower()
    try:
        factory = _ACCOUNT_PROVIDER_REGISTRY[resolved_kind]
    except KeyError as exc:
        msg = f"Unknown account provider kind: {resolved_kind}"
        raise ValueError(msg) from exc
    return factory(connected)


__all__ = [
    "Account",
    "AccountProvider",
    "ChainClient",
    "ChainClientError",
    "Coin",
    "DemoAccountProvider",
    "DemoChainClient",
    "ExecuteResult",
    "HttpChainClient",
    "create_account_provider",
    "get_chain_client",
]
