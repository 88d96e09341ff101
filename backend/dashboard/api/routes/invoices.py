"""Invoice Routes — form endpoints for create, update and delete.

Invariants:
    - Redirect outcome → 303 See Other to the invoices list
    - Rejected form → 400 with {errors, message}
    - Store failure → 503 with {errors: null, message}
    - Delete success → 200 with {message}

Design Decisions:
    - Form bodies read via request.form(): handlers get the raw multi-value
      carrier, exactly what the dashboard form posts
    - InvoiceActions built per request from get_db + get_view_cache, overridable in tests
"""

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse, RedirectResponse, Response
from sqlalchemy.ext.asyncio import AsyncSession

from dashboard.config import get_settings
from dashboard.core.action_results import ActionOutcome, Redirect
from dashboard.infrastructure.database import get_db
from dashboard.infrastructure.invoice_repository import SqlInvoiceRepository
from dashboard.infrastructure.view_cache import PathRevisionCache, get_view_cache
from dashboard.schemas.invoice import ActionStateResponse
from dashboard.services.invoice_actions import DELETE_SUCCESS, InvoiceActions

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/invoices", tags=["invoices"])


def get_invoice_actions(
    db: AsyncSession = Depends(get_db),
    cache: PathRevisionCache = Depends(get_view_cache),
) -> InvoiceActions:
    return InvoiceActions(
        SqlInvoiceRepository(db), cache,
        invoices_path=get_settings().invoices_path,
    )


def _outcome_response(outcome: ActionOutcome) -> Response:
    if isinstance(outcome, Redirect):
        return RedirectResponse(outcome.path, status_code=status.HTTP_303_SEE_OTHER)
    state = outcome.value
    status_code = (
        status.HTTP_400_BAD_REQUEST if state.errors
        else status.HTTP_503_SERVICE_UNAVAILABLE
    )
    return JSONResponse(
        status_code=status_code,
        content=ActionStateResponse.from_state(state).model_dump(),
    )


@router.post("")
async def create_invoice(
    request: Request, actions: InvoiceActions = Depends(get_invoice_actions),
):
    """Create an invoice from the posted form."""
    form = await request.form()
    return _outcome_response(await actions.create_invoice(None, form))


@router.put("/{invoice_id}")
async def update_invoice(
    invoice_id: str,
    request: Request,
    actions: InvoiceActions = Depends(get_invoice_actions),
):
    """Update customer, amount and status of an invoice from the posted form."""
    form = await request.form()
    return _outcome_response(
        await actions.update_invoice(invoice_id, None, form),
    )


@router.delete("/{invoice_id}")
async def delete_invoice(
    invoice_id: str, actions: InvoiceActions = Depends(get_invoice_actions),
):
    """Delete an invoice. Returns a message instead of redirecting."""
    state = (await actions.delete_invoice(invoice_id)).value
    status_code = (
        status.HTTP_200_OK if state.message == DELETE_SUCCESS
        else status.HTTP_503_SERVICE_UNAVAILABLE
    )
    return JSONResponse(
        status_code=status_code,
        content=ActionStateResponse.from_state(state).model_dump(),
    )
