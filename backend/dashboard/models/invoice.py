"""Invoice ORM — persists a customer's invoice.

Invariants:
    - id generated on insert, never supplied by callers, never updated
    - amount is an integer count of cents
    - status is one of InvoiceStatus ("pending" | "paid")
    - date is set at creation and never touched by updates

Design Decisions:
    - String ids over native UUID columns: customer ids arrive as opaque form
      strings and are bound as-is
    - customer_id is an indexed plain column, no foreign key: updates may
      point an invoice at any customer id the form posts
"""

import uuid
import datetime

from sqlalchemy import Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from dashboard.core.domain_types import InvoiceStatus
from dashboard.db.base import Base


def new_id() -> str:
    return str(uuid.uuid4())


class Invoice(Base):
    """Invoice entity — amount in cents, pending or paid."""
    __tablename__ = "invoices"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=new_id,
    )
    customer_id: Mapped[str] = mapped_column(
        String(36), nullable=False, index=True,
    )
    amount: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(
        String(10), nullable=False, default=InvoiceStatus.PENDING.value,
    )
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False)
