"""ORM Models — SQLAlchemy declarative models for dashboard entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Ids are 36-char strings (uuid4 text), generated on insert

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all
      or alembic autogenerate runs
"""

from dashboard.models.customer import Customer  # noqa: F401
from dashboard.models.invoice import Invoice  # noqa: F401
from dashboard.models.user import User  # noqa: F401
