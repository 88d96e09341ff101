"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - One method per store statement: each action issues exactly one write,
      no multi-statement transactions cross this boundary
"""

from datetime import date
from typing import Any, Protocol

from dashboard.core.domain_types import (
    AmountInCents, CustomerId, InvoiceId, InvoiceStatus,
)
from dashboard.core.forms import FormLike


class InvoiceRepository(Protocol):
    """Contract for invoice persistence — implemented by shell."""
    async def insert(
        self, customer_id: CustomerId, amount: AmountInCents,
        status: InvoiceStatus, invoice_date: date,
    ) -> InvoiceId: ...
    async def update(
        self, invoice_id: str, customer_id: CustomerId,
        amount: AmountInCents, status: InvoiceStatus,
    ) -> int: ...
    async def delete(self, invoice_id: str) -> int: ...


class ViewCache(Protocol):
    """Contract for rendered-view cache invalidation — implemented by shell."""
    async def invalidate(self, path: str) -> None: ...


class SignIn(Protocol):
    """Contract for the external sign-in mechanism.

    Returns normally on success, raises AuthError (with a `type`) on
    classified failures. Anything else it raises is not ours to interpret.
    """
    async def __call__(self, strategy: str, form: FormLike) -> Any: ...
