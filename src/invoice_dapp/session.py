"""
Per-session form data stored in Reflex backend state.

A FormSession holds everything one browser session needs between events:
the draft, the latest outcome, the last observed account pair and the
account snapshot. It holds no live objects, so it can be pickled by any
Reflex state manager. For each event a controller is built from it, run,
and its results written back.
"""

import os
from dataclasses import dataclass, field

from invoice_dapp.controller import InvoiceFormController
from invoice_dapp.lib import logs
from invoice_dapp.models.invoice import InvoiceDraft, SubmissionOutcome
from invoice_dapp.services import Account, create_account_provider, get_chain_client
from invoice_dapp.utils import compute_total, format_amount

LOG = logs.logger(__file__)

# Configuration from environment
CONTRACT_ADDRESS = os.getenv(
    "INVOICE_DAPP_CONTRACT_ADDRESS",
    "xion1invoice0contract0address000000000000000000000000000000",
)
ARTIFACT_URL = os.getenv("INVOICE_DAPP_ARTIFACT_URL", "https://example.com/invoice.pdf")
SERIALIZE_SUBMIT = os.getenv("INVOICE_DAPP_SERIALIZE_SUBMIT", "false").lower() in {
    "1",
    "true",
    "yes",
}


@dataclass
class FormSession:
    """
    Stored state of one invoice form session.

    Attributes:
        draft: Invoice being edited.
        outcome: Result of the latest submit attempt.
        last_account: Last (is_connected, address) pair seen by the controller.
        account: Account snapshot after the latest event.
        redirects: Paths the controller navigated to, not yet sent to the
            browser.
    """

    draft: InvoiceDraft = field(default_factory=InvoiceDraft)
    outcome: SubmissionOutcome = field(default_factory=SubmissionOutcome)
    last_account: tuple[bool, str | None] | None = None
    account: Account = field(default_factory=Account)
    redirects: list[str] = field(default_factory=list)

    @property
    def total_display(self) -> str:
        return format_amount(compute_total(self.draft.items))

    @property
    def can_remove_items(self) -> bool:
        return len(self.draft.items) > 1

    def controller(self) -> InvoiceFormController:
        """Build a controller that works on this session's draft and outcome."""
        return InvoiceFormController(
            create_account_provider(connected=self.account.is_connected),
            get_chain_client(),
            router=self.redirects.append,
            contract_address=CONTRACT_ADDRESS,
            artifact_url=ARTIFACT_URL,
            serialize_submissions=SERIALIZE_SUBMIT,
            draft=self.draft,
            outcome=self.outcome,
            last_account=self.last_account,
        )

    def commit(self, controller: InvoiceFormController) -> None:
        """Write a controller's state back into the session."""
        self.draft = controller.draft
        self.outcome = controller.outcome
        self.last_account = controller.last_account
        self.account = controller.account_provider.account

    def drain_redirects(self) -> list[str]:
        """Return pending redirect paths and clear them."""
        paths = list(self.redirects)
        self.redirects.clear()
        return paths

    # Events

    def on_load(self) -> None:
        controller = self.controller()
        controller.sync_account()
        self.commit(controller)

    def connect_wallet(self) -> None:
        controller = self.controller()
        controller.request_connect()
        controller.sync_account()
        self.commit(controller)

    def set_field(self, name: str, value: str) -> None:
        controller = self.controller()
        controller.set_field(name, value)
        self.commit(controller)

    def set_item_field(self, index: int | str, field_name: str, value: str) -> None:
        # Indexes arrive from the browser as JSON and may be strings.
        controller = self.controller()
        controller.set_item_field(int(index), field_name, value)
        self.commit(controller)

    def add_item(self) -> None:
        controller = self.controller()
        controller.add_item()
        self.commit(controller)

    def remove_item(self, index: int | str) -> None:
        controller = self.controller()
        controller.remove_item(int(index))
        self.commit(controller)

    def begin_submit(self) -> InvoiceFormController | None:
        """
        Start a submit attempt.

        The returned controller still sees the previous outcome; the session
        is marked in progress so the page can show it while the write runs.

        Returns:
            Controller to submit with, or None when a guarded submission is
            already in progress.
        """
        controller = self.controller()
        if not controller.accepts_submit:
            LOG.warning("Submit ignored - previous attempt still in progress")
            return None
        self.outcome = SubmissionOutcome.in_progress()
        return controller

    def finish_submit(self, outcome: SubmissionOutcome) -> None:
        """Record the outcome; draft edits made during the write are kept."""
        self.outcome = outcome
