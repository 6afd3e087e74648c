"""
Invoice form controller.

Owns the draft and the outcome of the latest submit attempt for one form
session. Collaborators (account provider, chain client, router) are passed
in, so the workflow runs without a UI runtime.

Submit workflow:
    InProgress -> client/address check -> address format check -> total
    -> CreateInvoice message -> chain_client.execute() -> Succeeded/Failed
"""

from typing import Callable

from invoice_dapp.lib import logs
from invoice_dapp.models.invoice import (
    MSG_FAILED,
    MSG_INVALID_ADDRESS,
    MSG_MISSING_CLIENT,
    CreateInvoiceMsg,
    InvoiceDraft,
    LineItem,
    SubmissionOutcome,
)
from invoice_dapp.services.account import Account, AccountProvider
from invoice_dapp.services.chain_client import ChainClient
from invoice_dapp.utils import (
    address_query_path,
    compute_total,
    due_date_to_epoch_millis,
    format_amount,
    is_valid_address,
)

LOG = logs.logger(__file__)

Router = Callable[[str], None]

_DRAFT_FIELDS = {
    "payer": "payer",
    "recipient": "recipient",
    "description": "description",
    "due_date": "due_date",
    "dueDate": "due_date",
}
_ITEM_FIELDS = {
    "item_name": "item_name",
    "itemName": "item_name",
    "item_price": "item_price",
    "itemPrice": "item_price",
}


class InvoiceSubmissionError(Exception):
    """A submit attempt was rejected before reaching the chain client."""

    user_message = MSG_FAILED

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.user_message)


class MissingClientError(InvoiceSubmissionError):
    user_message = MSG_MISSING_CLIENT


class InvalidAddressError(InvoiceSubmissionError):
    user_message = MSG_INVALID_ADDRESS


class InvoiceFormController:
    """
    Form state and submission workflow for creating an invoice.

    Attributes:
        draft: The invoice being edited.
        outcome: Result of the latest submit attempt.
        contract_address: Invoice contract that receives CreateInvoice.
        artifact_url: Link shown after a successful submit.
        serialize_submissions: When True, submit() is ignored while a
            previous attempt is still in progress.
        last_account: Last observed (is_connected, address) pair.

    draft, outcome and last_account may be passed in to resume a session
    whose state is stored elsewhere.
    """

    def __init__(
        self,
        account_provider: AccountProvider,
        chain_client: ChainClient | None,
        router: Router | None = None,
        *,
        contract_address: str,
        artifact_url: str | None = None,
        serialize_submissions: bool = False,
        draft: InvoiceDraft | None = None,
        outcome: SubmissionOutcome | None = None,
        last_account: tuple[bool, str | None] | None = None,
    ) -> None:
        self.account_provider = account_provider
        self.chain_client = chain_client
        self.router = router
        self.contract_address = contract_address
        self.artifact_url = artifact_url
        self.serialize_submissions = serialize_submissions
        self.draft = draft if draft is not None else InvoiceDraft()
        self.outcome = outcome if outcome is not None else SubmissionOutcome()
        self.last_account = last_account

    # Field mutation

    def set_field(self, name: str, value: str) -> None:
        """Replace one scalar draft field. Raises KeyError for unknown names."""
        setattr(self.draft, _DRAFT_FIELDS[name], value)

    def set_item_field(self, index: int, field: str, value: str) -> None:
        """Replace the name or price of the line item at index."""
        item = self.draft.items[self._check_index(index)]
        setattr(item, _ITEM_FIELDS[field], value)

    def add_item(self) -> None:
        """Append a blank line item."""
        self.draft.items.append(LineItem())

    def remove_item(self, index: int) -> bool:
        """
        Remove the line item at index.

        Returns:
            False without changing anything when only one item remains.
        """
        self._check_index(index)
        if not self.can_remove_items:
            LOG.debug("remove_item ignored - last remaining item")
            return False
        del self.draft.items[index]
        return True

    @property
    def can_remove_items(self) -> bool:
        return len(self.draft.items) > 1

    def _check_index(self, index: int) -> int:
        if not 0 <= index < len(self.draft.items):
            raise IndexError(f"line item index out of range: {index}")
        return index

    # Derived values

    @property
    def total(self) -> float:
        return compute_total(self.draft.items)

    @property
    def total_display(self) -> str:
        return format_amount(self.total)

    def build_message(self) -> CreateInvoiceMsg:
        """
        Validate the draft and build the CreateInvoice message.

        The payer is validated but not part of the message.

        Raises:
            InvalidAddressError: If recipient or payer fails the format check.
        """
        draft = self.draft
        if not is_valid_address(draft.recipient) or not is_valid_address(draft.payer):
            raise InvalidAddressError()
        return CreateInvoiceMsg(
            recipient=draft.recipient.lower(),
            amount=self.total_display,
            description=draft.description,
            due_date=due_date_to_epoch_millis(draft.due_date),
        )

    # Submission

    @property
    def accepts_submit(self) -> bool:
        """False while a guarded submission is still in progress."""
        return not (self.serialize_submissions and self.outcome.is_pending)

    async def submit(self) -> SubmissionOutcome:
        """
        Run one submit attempt and return its outcome.

        Never raises for user-facing failures; they become a FAILED
        outcome. The draft is left unchanged.
        """
        if not self.accepts_submit:
            LOG.warning("Submit ignored - previous attempt still in progress")
            return self.outcome

        self.outcome = SubmissionOutcome.in_progress()
        try:
            sender = self._require_sender()
            msg = self.build_message()
            LOG.info(
                "Creating invoice - sender:%s contract:%s amount:%s",
                sender,
                self.contract_address,
                msg.amount,
            )
            await self.chain_client.execute(sender, self.contract_address, msg.to_message())
        except InvoiceSubmissionError as exc:
            LOG.warning("Invoice submission rejected: %s", exc)
            self.outcome = SubmissionOutcome.failed(exc.user_message)
        except Exception as exc:
            LOG.error("Error creating invoice: %s", exc, exc_info=True)
            self.outcome = SubmissionOutcome.failed()
        else:
            self.outcome = SubmissionOutcome.succeeded(self.artifact_url)
        return self.outcome

    def _require_sender(self) -> str:
        address = self.account_provider.account.address
        if self.chain_client is None or not address:
            raise MissingClientError()
        return address

    # Account linking

    def request_connect(self) -> None:
        """Ask the account provider to show its connect UI."""
        self.account_provider.connect()

    def sync_account(self, account: Account | None = None) -> bool:
        """
        Observe the account state and navigate on entering a connected state.

        Navigation fires only when the (is_connected, address) pair changes
        and the new pair is connected with an address.

        Returns:
            True if the router was called.
        """
        account = account or self.account_provider.account
        pair = (account.is_connected, account.address)
        if pair == self.last_account:
            return False
        self.last_account = pair
        if not (account.is_connected and account.address):
            return False
        path = address_query_path(account.address)
        LOG.info("Account connected - navigating to %s", path)
        if self.router is not None:
            self.router(path)
        return True
