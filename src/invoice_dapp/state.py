"""
Reflex state management for the Invoice dApp.

InvoiceFormState keeps a FormSession in a backend-only var and projects it
into the vars the page renders from. Every handler works on a copy of the
session and assigns it back, so Reflex sees the change whichever state
manager is in use.
"""

import copy
from typing import Any, Callable

import reflex as rx
from reflex.event import EventSpec

from invoice_dapp.lib import logs
from invoice_dapp.models.invoice import SubmissionOutcome, SubmissionStatus
from invoice_dapp.models.reflex_models import LineItemModel, to_line_item_models
from invoice_dapp.session import SERIALIZE_SUBMIT, FormSession

LOG = logs.logger(__file__)

APP_TITLE = "Create Invoice"


def redirect_events(paths: list[str]) -> list[EventSpec]:
    """Turn controller navigation requests into Reflex redirect events."""
    return [rx.redirect(path) for path in paths]


class InvoiceFormState(rx.State):
    """
    Page state for the invoice form.

    Handles field edits, line item add/remove, wallet connection and the
    submit workflow.
    """

    # Draft projection
    payer: str = ""
    recipient: str = ""
    due_date: str = ""
    description: str = ""
    items: list[LineItemModel] = [LineItemModel()]
    total_display: str = "0"
    can_remove_items: bool = False

    # Outcome projection
    status: str = SubmissionStatus.NONE.value
    status_message: str = ""
    artifact_url: str = ""

    # Account projection
    address: str = ""
    is_connected: bool = False

    serialize_submissions: bool = SERIALIZE_SUBMIT

    _form: FormSession = FormSession()

    @rx.var
    def is_submitting(self) -> bool:
        return self.status == SubmissionStatus.IN_PROGRESS.value

    @rx.var
    def submit_disabled(self) -> bool:
        """Disable the submit button while a guarded submission runs."""
        return self.serialize_submissions and self.is_submitting

    @rx.event
    def on_load(self) -> list[EventSpec]:
        """Observe the account state; navigates if the wallet is connected."""
        return self._update(FormSession.on_load)

    @rx.event
    def set_draft_field(self, name: str, value: str) -> list[EventSpec]:
        return self._update(lambda form: form.set_field(name, value))

    @rx.event
    def set_item_field(self, index: int, field_name: str, value: str) -> list[EventSpec]:
        return self._update(lambda form: form.set_item_field(index, field_name, value))

    @rx.event
    def add_item(self) -> list[EventSpec]:
        return self._update(FormSession.add_item)

    @rx.event
    def remove_item(self, index: int) -> list[EventSpec]:
        return self._update(lambda form: form.remove_item(index))

    @rx.event
    def connect_wallet(self) -> list[EventSpec]:
        """Show the wallet connect UI, then follow the connection if it opens."""
        return self._update(FormSession.connect_wallet)

    @rx.event(background=True)
    async def submit(self, form_data: dict) -> None:
        """
        Event handler for the form submit.

        Runs in the background so the page stays editable while the chain
        client call is awaited. The message is built from the draft as it
        was when the submit started.

        Args:
            form_data: Raw form values; ignored, the draft is already current.
        """
        async with self:
            form = copy.deepcopy(self._form)
            controller = form.begin_submit()
            self._store(form)
        if controller is None:
            return

        outcome = await controller.submit()
        LOG.info("Submit finished - status:%s", outcome.status.value)

        async with self:
            form = copy.deepcopy(self._form)
            form.finish_submit(outcome)
            self._store(form)

    def _update(self, action: Callable[[FormSession], Any]) -> list[EventSpec]:
        """Apply an action to a copy of the session and store the result."""
        form = copy.deepcopy(self._form)
        action(form)
        return redirect_events(self._store(form))

    def _store(self, form: FormSession) -> list[str]:
        """Assign the session, refresh the projection, return pending redirects."""
        paths = form.drain_redirects()
        self._form = form
        draft = form.draft
        self.payer = draft.payer
        self.recipient = draft.recipient
        self.due_date = draft.due_date
        self.description = draft.description
        self.items = to_line_item_models(draft.items)
        self.total_display = form.total_display
        self.can_remove_items = form.can_remove_items
        self._apply_outcome(form.outcome)
        self.is_connected = form.account.is_connected
        self.address = form.account.address or ""
        return paths

    def _apply_outcome(self, outcome: SubmissionOutcome) -> None:
        self.status = outcome.status.value
        self.status_message = outcome.message
        self.artifact_url = outcome.artifact_url or ""
