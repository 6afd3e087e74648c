import asyncio
import copy
import pickle

import pytest
from reflex.event import EventSpec

from invoice_dapp import session as session_module
from invoice_dapp.models.invoice import SubmissionStatus
from invoice_dapp.services import Account, DemoChainClient, get_chain_client
from invoice_dapp.session import FormSession
from invoice_dapp.state import InvoiceFormState, redirect_events

DEMO_ADDRESS = "xion1demo"


@pytest.fixture(autouse=True)
def _demo_services(monkeypatch) -> None:
    monkeypatch.delenv("INVOICE_DAPP_CHAIN_CLIENT", raising=False)
    monkeypatch.delenv("INVOICE_DAPP_ACCOUNT_PROVIDER", raising=False)
    monkeypatch.setenv("INVOICE_DAPP_DEMO_ADDRESS", DEMO_ADDRESS)
    monkeypatch.setattr(session_module, "SERIALIZE_SUBMIT", False)
    get_chain_client.cache_clear()
    yield
    get_chain_client.cache_clear()


def _filled_session() -> FormSession:
    form = FormSession()
    form.connect_wallet()
    form.drain_redirects()
    form.set_field("payer", "abc1")
    form.set_field("recipient", "xyz2")
    form.set_field("description", "work")
    form.set_field("due_date", "2025-01-01")
    form.set_item_field(0, "item_price", "100")
    form.add_item()
    form.set_item_field(1, "item_price", "250.5")
    return form


def test_on_load_while_disconnected_does_not_navigate() -> None:
    form = FormSession()
    form.on_load()
    assert form.drain_redirects() == []
    assert form.account.is_connected is False


def test_connect_wallet_navigates_once() -> None:
    form = FormSession()
    form.on_load()

    form.connect_wallet()
    assert form.drain_redirects() == [f"/?address={DEMO_ADDRESS}"]
    assert form.drain_redirects() == []
    assert form.account.address == DEMO_ADDRESS

    form.on_load()
    form.connect_wallet()
    assert form.drain_redirects() == []


def test_on_load_with_connected_account_navigates() -> None:
    form = FormSession(account=Account(is_connected=True, address=DEMO_ADDRESS))

    form.on_load()

    assert form.drain_redirects() == [f"/?address={DEMO_ADDRESS}"]
    assert form.last_account == (True, DEMO_ADDRESS)


def test_item_indexes_from_the_browser_are_coerced() -> None:
    form = FormSession()
    form.add_item()
    form.set_item_field("1", "item_name", "build")
    assert form.draft.items[1].item_name == "build"
    assert form.can_remove_items is True

    form.remove_item("0")
    assert [item.item_name for item in form.draft.items] == ["build"]

    form.remove_item(0)
    assert len(form.draft.items) == 1
    assert form.can_remove_items is False


def test_total_display_follows_draft() -> None:
    assert _filled_session().total_display == "350.5"


def test_submit_uses_draft_from_start_and_keeps_later_edits() -> None:
    form = _filled_session()
    controller = form.begin_submit()
    assert controller is not None
    assert form.outcome.status is SubmissionStatus.IN_PROGRESS

    edited = copy.deepcopy(form)
    edited.set_field("description", "later")

    outcome = asyncio.run(controller.submit())
    edited.finish_submit(outcome)

    client = get_chain_client()
    assert isinstance(client, DemoChainClient)
    sent = client.calls[-1].msg["CreateInvoice"]
    assert sent["description"] == "work"
    assert sent["amount"] == "350.5"
    assert client.calls[-1].sender == DEMO_ADDRESS
    assert edited.outcome.status is SubmissionStatus.SUCCEEDED
    assert edited.draft.description == "later"


def test_begin_submit_allows_overlap_by_default() -> None:
    form = _filled_session()
    assert form.begin_submit() is not None
    assert form.begin_submit() is not None


def test_begin_submit_guarded_while_in_progress(monkeypatch) -> None:
    monkeypatch.setattr(session_module, "SERIALIZE_SUBMIT", True)
    form = _filled_session()
    assert form.begin_submit() is not None
    assert form.begin_submit() is None


def test_session_survives_pickling() -> None:
    form = _filled_session()
    form.begin_submit()
    restored = pickle.loads(pickle.dumps(form))
    assert restored == form


def test_redirect_events_wrap_each_path() -> None:
    events = redirect_events(["/?address=xion1abc", "/?address=xion1def"])
    assert len(events) == 2
    assert all(isinstance(event, EventSpec) for event in events)
    assert any("xion1abc" in str(value) for _, value in events[0].args)
    assert redirect_events([]) == []


def test_form_session_is_backend_only_state() -> None:
    assert "_form" in InvoiceFormState.backend_vars
