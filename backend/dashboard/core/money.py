"""Money Conversion — major-unit amounts to integer minor units (cents).

Invariants:
    - to_minor_units() always returns an int
    - Rounding is half-up at the cent: 10.005 -> 1001, 10.004 -> 1000

Design Decisions:
    - Decimal over float: "0.1 * 100" must be exactly 10, not 10.000000000000002
    - Fixed half-up policy instead of banker's rounding: matches how a person
      reads a price with a stray third decimal
"""

from decimal import Decimal, ROUND_HALF_UP

from dashboard.core.domain_types import AmountInCents

MINOR_UNITS_PER_MAJOR = 100


def to_minor_units(amount: Decimal) -> AmountInCents:
    """Convert a validated major-unit amount to whole cents."""
    cents = (amount * MINOR_UNITS_PER_MAJOR).quantize(
        Decimal("1"), rounding=ROUND_HALF_UP,
    )
    return AmountInCents(int(cents))


def format_major_units(cents: int) -> str:
    """Render stored cents back as a major-unit string, e.g. 25000 -> '250.00'."""
    return str((Decimal(cents) / MINOR_UNITS_PER_MAJOR).quantize(Decimal("0.01")))
