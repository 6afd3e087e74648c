"""
Abstract base class defining the chain write contract.

The invoice form only ever needs one operation from a signing client:
execute a message against a contract on behalf of a sender. Signing,
broadcasting and fee estimation stay behind this interface.

Implementations:
- DemoChainClient: In-memory client that records executions
- HttpChainClient: Forwards executions to a signing relay over HTTP
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence


class ChainClientError(Exception):
    """Raised when the chain client cannot complete an execution."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        *,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.cause = cause


@dataclass(frozen=True, slots=True)
class Coin:
    """Funds attached to an execution."""

    denom: str
    amount: str


@dataclass(frozen=True, slots=True)
class ExecuteResult:
    """Result of a successful contract execution."""

    transaction_hash: str
    height: int = 0
    gas_used: int = 0
    gas_wanted: int = 0
    logs: Sequence[Mapping[str, Any]] = field(default_factory=tuple)


class ChainClient(ABC):
    """
    Abstract base class for chain write access.

    Subclasses implement execute(); it may take arbitrarily long and may
    raise any error.
    """

    @abstractmethod
    async def execute(
        self,
        sender: str,
        contract: str,
        msg: Mapping[str, Any],
        fee: str = "auto",
        memo: str = "",
        funds: Sequence[Coin] = (),
    ) -> ExecuteResult:
        """
        Execute a message against a contract.

        Args:
            sender: Address of the connected account.
            contract: Address of the target contract.
            msg: Execute message (JSON-compatible mapping).
            fee: Fee setting; "auto" lets the signer estimate gas.
            memo: Transaction memo.
            funds: Coins sent along with the message.
        """

    async def close(self) -> None:
        """Release any held resources. Default implementation does nothing."""
