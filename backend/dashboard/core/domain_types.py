"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - InvoiceId, CustomerId wrap str — ids are opaque strings issued by the store
    - AmountInCents is always an integer count of minor units
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and bind to SQL parameters without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

InvoiceId = NewType("InvoiceId", str)
CustomerId = NewType("CustomerId", str)


# ─── Value Types ─────────────────────────────────────────────────

AmountInCents = NewType("AmountInCents", int)


# ─── Paths ───────────────────────────────────────────────────────

INVOICES_PATH = "/dashboard/invoices"
DASHBOARD_PATH = "/dashboard"


# ─── Enums ───────────────────────────────────────────────────────

class InvoiceStatus(str, Enum):
    """Invoice payment state — maps to DB `status` column."""
    PENDING = "pending"
    PAID = "paid"


class SignInStrategy(str, Enum):
    """Sign-in providers understood by the authenticate action."""
    CREDENTIALS = "credentials"
