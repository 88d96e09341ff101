"""Invoice Actions — create/update/delete over fake store and cache.

Tests cover:
    - Rejected forms return field errors + summary message and never touch the store
    - Valid create inserts cents + today's date, invalidates once, redirects
    - Valid update writes customer/amount/status for the given id, redirects
    - Store failures become a generic message with no field errors
    - Delete returns a message (no redirect) and never raises
    - Delete of a missing row still invalidates the invoices path
    - Cache is not invalidated when the write fails
"""

from datetime import date

import pytest

from dashboard.core.action_results import ActionState, Redirect, Return
from dashboard.core.domain_types import INVOICES_PATH, InvoiceStatus
from dashboard.core.errors import DatabaseError
from dashboard.services.invoice_actions import (
    CREATE_DATABASE_ERROR,
    CREATE_MISSING_FIELDS,
    DELETE_DATABASE_ERROR,
    DELETE_SUCCESS,
    UPDATE_DATABASE_ERROR,
    UPDATE_MISSING_FIELDS,
    InvoiceActions,
    today_utc,
)

CUSTOMER = "3958dc9e-712f-4377-85e9-fec4b6a6442a"
FIXED_DAY = date(2026, 10, 16)


@pytest.fixture
def actions(fake_repository, fake_cache):
    return InvoiceActions(fake_repository, fake_cache, today=lambda: FIXED_DAY)


# ─── create_invoice ──────────────────────────────────────────────

async def test_create_inserts_cents_and_today_then_redirects(actions, fake_repository, fake_cache):
    outcome = await actions.create_invoice(
        None, {"customerId": CUSTOMER, "amount": "250", "status": "paid"},
    )

    assert outcome == Redirect(INVOICES_PATH)
    fake_repository.insert.assert_awaited_once_with(
        CUSTOMER, 25000, InvoiceStatus.PAID, FIXED_DAY,
    )
    fake_cache.invalidate.assert_awaited_once_with("/dashboard/invoices")


@pytest.mark.parametrize("form, field", [
    ({"amount": "250", "status": "paid"}, "customerId"),
    ({"customerId": "", "amount": "250", "status": "paid"}, "customerId"),
    ({"customerId": CUSTOMER, "amount": "0", "status": "paid"}, "amount"),
    ({"customerId": CUSTOMER, "amount": "-5", "status": "paid"}, "amount"),
    ({"customerId": CUSTOMER, "amount": "ten", "status": "paid"}, "amount"),
    ({"customerId": CUSTOMER, "amount": "1e999999", "status": "paid"}, "amount"),
    ({"customerId": CUSTOMER, "amount": "250", "status": "overdue"}, "status"),
])
async def test_create_rejects_invalid_form_without_store_call(
    actions, fake_repository, fake_cache, form, field,
):
    outcome = await actions.create_invoice(None, form)

    assert isinstance(outcome, Return)
    assert outcome.value.message == CREATE_MISSING_FIELDS
    assert list(outcome.value.errors) == [field]
    fake_repository.insert.assert_not_awaited()
    fake_cache.invalidate.assert_not_awaited()


async def test_create_accepts_one_cent(actions, fake_repository):
    outcome = await actions.create_invoice(
        None, {"customerId": CUSTOMER, "amount": "0.01", "status": "pending"},
    )
    assert isinstance(outcome, Redirect)
    assert fake_repository.insert.await_args.args[1] == 1


async def test_create_store_failure_returns_generic_message(actions, fake_repository, fake_cache):
    fake_repository.insert.side_effect = DatabaseError("Integrity constraint violated", "insert")

    outcome = await actions.create_invoice(
        None, {"customerId": CUSTOMER, "amount": "250", "status": "paid"},
    )

    assert outcome == Return(ActionState(message=CREATE_DATABASE_ERROR))
    assert outcome.value.errors is None
    fake_cache.invalidate.assert_not_awaited()


async def test_create_store_failure_with_opaque_exception_is_caught(actions, fake_repository):
    fake_repository.insert.side_effect = ConnectionResetError("socket closed")

    outcome = await actions.create_invoice(
        None, {"customerId": CUSTOMER, "amount": "250", "status": "paid"},
    )

    assert outcome.value.message == CREATE_DATABASE_ERROR


async def test_create_ignores_previous_state(actions):
    prev = ActionState(message="old", errors={"amount": ["old"]})
    outcome = await actions.create_invoice(
        prev, {"customerId": CUSTOMER, "amount": "1", "status": "paid"},
    )
    assert isinstance(outcome, Redirect)
    assert prev.message == "old"


async def test_create_uses_configured_invoices_path(fake_repository, fake_cache):
    actions = InvoiceActions(fake_repository, fake_cache, invoices_path="/custom/invoices")
    outcome = await actions.create_invoice(
        None, {"customerId": CUSTOMER, "amount": "1", "status": "paid"},
    )
    assert outcome == Redirect("/custom/invoices")
    fake_cache.invalidate.assert_awaited_once_with("/custom/invoices")


def test_default_clock_is_utc_calendar_date():
    assert isinstance(today_utc(), date)


# ─── update_invoice ──────────────────────────────────────────────

async def test_update_writes_fields_for_id_then_redirects(actions, fake_repository, fake_cache):
    outcome = await actions.update_invoice(
        "X", None, {"customerId": "C2", "amount": "10", "status": "pending"},
    )

    assert outcome == Redirect(INVOICES_PATH)
    fake_repository.update.assert_awaited_once_with(
        "X", "C2", 1000, InvoiceStatus.PENDING,
    )
    fake_repository.insert.assert_not_awaited()
    fake_cache.invalidate.assert_awaited_once_with(INVOICES_PATH)


async def test_update_rejects_invalid_form(actions, fake_repository):
    outcome = await actions.update_invoice(
        "X", None, {"customerId": None, "amount": "0", "status": "nope"},
    )

    assert outcome.value.message == UPDATE_MISSING_FIELDS
    assert set(outcome.value.errors) == {"customerId", "amount", "status"}
    fake_repository.update.assert_not_awaited()


async def test_update_rejects_overflowing_amount(actions, fake_repository, fake_cache):
    outcome = await actions.update_invoice(
        "X", None, {"customerId": "C2", "amount": "1e1000000", "status": "paid"},
    )

    assert outcome.value.message == UPDATE_MISSING_FIELDS
    assert list(outcome.value.errors) == ["amount"]
    fake_repository.update.assert_not_awaited()
    fake_cache.invalidate.assert_not_awaited()


async def test_update_store_failure_returns_generic_message(actions, fake_repository, fake_cache):
    fake_repository.update.side_effect = RuntimeError("connection lost")

    outcome = await actions.update_invoice(
        "X", None, {"customerId": "C2", "amount": "10", "status": "pending"},
    )

    assert outcome == Return(ActionState(message=UPDATE_DATABASE_ERROR))
    fake_cache.invalidate.assert_not_awaited()


# ─── delete_invoice ──────────────────────────────────────────────

async def test_delete_returns_message_and_invalidates(actions, fake_repository, fake_cache):
    outcome = await actions.delete_invoice("X")

    assert outcome == Return(ActionState(message=DELETE_SUCCESS))
    fake_repository.delete.assert_awaited_once_with("X")
    fake_cache.invalidate.assert_awaited_once_with(INVOICES_PATH)


async def test_delete_twice_never_raises(actions, fake_repository, fake_cache):
    fake_repository.delete.side_effect = [1, 0]

    first = await actions.delete_invoice("X")
    second = await actions.delete_invoice("X")

    assert first.value.message == DELETE_SUCCESS
    assert second.value.message == DELETE_SUCCESS
    assert fake_cache.invalidate.await_count == 2


async def test_delete_of_missing_row_still_invalidates(actions, fake_repository, fake_cache):
    fake_repository.delete.return_value = 0

    outcome = await actions.delete_invoice("missing")

    assert outcome == Return(ActionState(message=DELETE_SUCCESS))
    fake_cache.invalidate.assert_awaited_once_with(INVOICES_PATH)


async def test_delete_store_failure_returns_generic_message(actions, fake_repository, fake_cache):
    fake_repository.delete.side_effect = DatabaseError("Database driver error", "delete")

    outcome = await actions.delete_invoice("X")

    assert outcome == Return(ActionState(message=DELETE_DATABASE_ERROR))
    fake_cache.invalidate.assert_not_awaited()
