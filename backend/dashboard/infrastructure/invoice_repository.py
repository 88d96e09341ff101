"""SQL Invoice Repository — the three parameterized invoice write statements.

Invariants:
    - insert:  INSERT INTO invoices (customer_id, amount, status, date) VALUES (...)
    - update:  UPDATE invoices SET customer_id, amount, status WHERE id = ?  (date untouched)
    - delete:  DELETE FROM invoices WHERE id = ?
    - Each method executes one statement and commits it; on failure it rolls
      back and raises DatabaseError (underlying detail stays in the logs)

Design Decisions:
    - SQLAlchemy Core statements over ORM unit-of-work: one statement per call,
      rowcount available for update/delete
    - id generated by the Invoice.id column default at insert time
"""

import logging
from datetime import date

from sqlalchemy import delete, insert, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from dashboard.core.domain_types import (
    AmountInCents, CustomerId, InvoiceId, InvoiceStatus,
)
from dashboard.infrastructure.database import to_database_error
from dashboard.models.invoice import Invoice

logger = logging.getLogger(__name__)

INVOICES = Invoice.__table__


class SqlInvoiceRepository:
    """InvoiceRepository over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def insert(
        self, customer_id: CustomerId, amount: AmountInCents,
        status: InvoiceStatus, invoice_date: date,
    ) -> InvoiceId:
        stmt = insert(INVOICES).values(
            customer_id=customer_id, amount=amount,
            status=InvoiceStatus(status).value, date=invoice_date,
        )
        result = await self._execute(stmt, "insert")
        return InvoiceId(result.inserted_primary_key[0])

    async def update(
        self, invoice_id: str, customer_id: CustomerId,
        amount: AmountInCents, status: InvoiceStatus,
    ) -> int:
        stmt = (
            update(INVOICES)
            .where(INVOICES.c.id == invoice_id)
            .values(
                customer_id=customer_id, amount=amount,
                status=InvoiceStatus(status).value,
            )
        )
        result = await self._execute(stmt, "update")
        return result.rowcount

    async def delete(self, invoice_id: str) -> int:
        stmt = delete(INVOICES).where(INVOICES.c.id == invoice_id)
        result = await self._execute(stmt, "delete")
        return result.rowcount

    async def _execute(self, stmt, operation: str):
        try:
            result = await self.db.execute(stmt)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(
                f"Invoice {operation} failed: {e}",
                extra={"operation": operation, "error_code": "DATABASE_ERROR"},
            )
            raise to_database_error(e, operation) from e
        return result
