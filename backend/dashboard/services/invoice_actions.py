"""Invoice Actions — create_invoice, update_invoice, delete_invoice.

Invariants:
    - Validation completes before the store is touched; rejected forms never reach it
    - One store statement per call, attempted exactly once (no retries)
    - Store failures are logged and turned into a generic message, never re-raised
    - Cache invalidated exactly once per successful mutation, after the write
    - create/update end in Redirect(invoices path); delete returns a message

Design Decisions:
    - Store and cache injected (InvoiceRepository, ViewCache): routes wire the
      SQL repository and process cache, tests wire fakes
    - `today` injectable: creation date is the UTC calendar date unless overridden
    - prev_state accepted but unused: form actions receive the last state they returned
"""

import logging
from datetime import date, datetime, timezone
from typing import Callable

from dashboard.core.action_results import ActionOutcome, ActionState, Redirect, Return
from dashboard.core.domain_types import INVOICES_PATH
from dashboard.core.forms import FormLike
from dashboard.core.invoice_validation import (
    read_invoice_form, validate_create_invoice, validate_update_invoice,
)
from dashboard.core.money import format_major_units, to_minor_units
from dashboard.core.repository_protocols import InvoiceRepository, ViewCache

logger = logging.getLogger(__name__)

CREATE_MISSING_FIELDS = "missing fields. failed to create invoice."
CREATE_DATABASE_ERROR = "database error: failed to create invoice."
UPDATE_MISSING_FIELDS = "missing fields. failed to update invoice."
UPDATE_DATABASE_ERROR = "database error: failed to update invoice."
DELETE_SUCCESS = "deleted invoice."
DELETE_DATABASE_ERROR = "database error: failed to delete invoice."


def today_utc() -> date:
    return datetime.now(timezone.utc).date()


class InvoiceActions:
    """Invoice form actions over an injected store and view cache."""

    def __init__(
        self,
        repository: InvoiceRepository,
        cache: ViewCache,
        invoices_path: str = INVOICES_PATH,
        today: Callable[[], date] = today_utc,
    ):
        self.repository = repository
        self.cache = cache
        self.invoices_path = invoices_path
        self.today = today

    async def create_invoice(
        self, prev_state: ActionState | None, form: FormLike,
    ) -> ActionOutcome:
        """Validate the form, insert one invoice, then redirect to the list."""
        validated = validate_create_invoice(read_invoice_form(form))
        if not validated.success:
            return Return(ActionState(
                errors=validated.errors, message=CREATE_MISSING_FIELDS,
            ))

        request = validated.data
        amount_in_cents = to_minor_units(request.amount)
        invoice_date = self.today()

        try:
            invoice_id = await self.repository.insert(
                request.customer_id, amount_in_cents,
                request.status, invoice_date,
            )
        except Exception as e:
            logger.error(
                f"Failed to create invoice: {e}", exc_info=True,
                extra={"action": "create_invoice"},
            )
            return Return(ActionState(message=CREATE_DATABASE_ERROR))

        logger.info(
            f"Invoice created for {request.customer_id} "
            f"({format_major_units(amount_in_cents)}, {request.status.value})",
            extra={"action": "create_invoice", "invoice_id": invoice_id},
        )
        await self.cache.invalidate(self.invoices_path)
        return Redirect(self.invoices_path)

    async def update_invoice(
        self, invoice_id: str, prev_state: ActionState | None, form: FormLike,
    ) -> ActionOutcome:
        """Validate the form, update customer/amount/status, then redirect.

        The invoice date is left as it was at creation.
        """
        validated = validate_update_invoice(read_invoice_form(form))
        if not validated.success:
            return Return(ActionState(
                errors=validated.errors, message=UPDATE_MISSING_FIELDS,
            ))

        request = validated.data
        amount_in_cents = to_minor_units(request.amount)

        try:
            rows = await self.repository.update(
                invoice_id, request.customer_id,
                amount_in_cents, request.status,
            )
        except Exception as e:
            logger.error(
                f"Failed to update invoice {invoice_id}: {e}", exc_info=True,
                extra={"action": "update_invoice", "invoice_id": invoice_id},
            )
            return Return(ActionState(message=UPDATE_DATABASE_ERROR))

        logger.info(
            f"Invoice {invoice_id} updated ({rows} row(s))",
            extra={"action": "update_invoice", "invoice_id": invoice_id},
        )
        await self.cache.invalidate(self.invoices_path)
        return Redirect(self.invoices_path)

    async def delete_invoice(self, invoice_id: str) -> Return[ActionState]:
        """Delete one invoice. Inline action: returns a message, never redirects."""
        try:
            rows = await self.repository.delete(invoice_id)
        except Exception as e:
            logger.error(
                f"Failed to delete invoice {invoice_id}: {e}", exc_info=True,
                extra={"action": "delete_invoice", "invoice_id": invoice_id},
            )
            return Return(ActionState(message=DELETE_DATABASE_ERROR))

        if rows == 0:
            logger.warning(
                f"Invoice {invoice_id} already deleted",
                extra={"action": "delete_invoice", "invoice_id": invoice_id},
            )
        await self.cache.invalidate(self.invoices_path)
        return Return(ActionState(message=DELETE_SUCCESS))
