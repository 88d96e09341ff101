"""Customer ORM — read-only reference data invoices point at."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from dashboard.db.base import Base
from dashboard.models.invoice import new_id


class Customer(Base):
    __tablename__ = "customers"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=new_id,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    image_url: Mapped[str] = mapped_column(String(255), nullable=False)
