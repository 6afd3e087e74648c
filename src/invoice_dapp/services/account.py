"""
Account provider contract and the demo implementation.

The form reads the connection state and address of the wallet account; it
never signs or manages keys itself. connect() stands in for showing the
wallet's connect modal.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from invoice_dapp.lib import logs

LOG = logs.logger(__file__)


@dataclass(frozen=True, slots=True)
class Account:
    """Snapshot of the wallet connection."""

    is_connected: bool = False
    address: str | None = None


class AccountProvider(ABC):
    """Abstract base class for wallet account access."""

    @property
    @abstractmethod
    def account(self) -> Account:
        """Return the current connection snapshot."""

    @abstractmethod
    def connect(self) -> None:
        """Request the wallet connect UI."""

    def disconnect(self) -> None:
        """Drop the connection. Default implementation does nothing."""


class DemoAccountProvider(AccountProvider):
    """
    Account provider that connects instantly to a fixed address.

    Attributes:
        demo_address: Address reported once connected.
    """

    def __init__(self, demo_address: str, connected: bool = False) -> None:
        self.demo_address = demo_address
        self._connected = connected

    @property
    def account(self) -> Account:
        if not self._connected:
            return Account()
        return Account(is_connected=True, address=self.demo_address)

    def connect(self) -> None:
        LOG.info("Demo wallet connected: %s", self.demo_address)
        self._connected = True

    def disconnect(self) -> None:
        LOG.info("Demo wallet disconnected")
        self._connected = False
