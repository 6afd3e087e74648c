"""
Demo implementation of ChainClient that never leaves the process.

This client is useful for:
- Local development without a wallet or signing relay
- Testing the form workflow with a recorded call history
- Demonstrating failures by switching the client into failing mode
"""

import asyncio
import hashlib
import json
from collections import deque
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from invoice_dapp.lib import logs, objects
from invoice_dapp.services.chain_client import (
    ChainClient,
    ChainClientError,
    Coin,
    ExecuteResult,
)

LOG = logs.logger(__file__)


@dataclass(frozen=True, slots=True)
class ExecuteCall:
    """One recorded call to DemoChainClient.execute()."""

    sender: str
    contract: str
    msg: Mapping[str, Any]
    fee: str
    memo: str
    funds: Sequence[Coin]


class DemoChainClient(ChainClient):
    """
    In-memory chain client that records every execution.

    Transaction hashes are derived from the call contents so identical
    calls produce identical hashes.

    Attributes:
        calls: Most recent executions, oldest first; at most max_calls are kept.
        fail_with: When set, execute() raises this error instead of
            recording a call.
        latency: Seconds to sleep before answering.
    """

    def __init__(
        self,
        fail_with: Exception | None = None,
        latency: float = 0.0,
        max_calls: int = 100,
    ) -> None:
        self.calls: deque[ExecuteCall] = deque(maxlen=max_calls)
        self.fail_with = fail_with
        self.latency = latency
        self._height = 0

    async def execute(
        self,
        sender: str,
        contract: str,
        msg: Mapping[str, Any],
        fee: str = "auto",
        memo: str = "",
        funds: Sequence[Coin] = (),
    ) -> ExecuteResult:
        await asyncio.sleep(self.latency)
        if self.fail_with is not None:
            LOG.info("Demo execute failing for sender %s", sender)
            raise self.fail_with

        self.calls.append(ExecuteCall(sender, contract, msg, fee, memo, tuple(funds)))
        self._height += 1
        tx_hash = _tx_hash(sender, contract, msg, self._height)
        LOG.info("Demo execute %s on %s -> %s", list(msg), contract, tx_hash)
        return ExecuteResult(transaction_hash=tx_hash, height=self._height)

    def fail(self, message: str = "demo chain unavailable") -> None:
        """Make subsequent executions raise ChainClientError."""
        self.fail_with = ChainClientError(message)

    def recover(self) -> None:
        """Undo fail()."""
        self.fail_with = None


def _tx_hash(sender: str, contract: str, msg: Mapping[str, Any], height: int) -> str:
    payload = json.dumps(
        [sender, contract, objects.to_jsonable(msg), height], sort_keys=True
    )
    return hashlib.sha256(payload.encode("utf-8")).hexdigest().upper()
