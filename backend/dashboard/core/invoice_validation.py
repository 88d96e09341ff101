"""Invoice Validation — field validators and typed request structs for invoice forms.

Invariants:
    - Pure: no IO, deterministic given input
    - Errors keyed by form field name (customerId, amount, status), only failing fields present
    - CreateInvoiceRequest / UpdateInvoiceRequest never carry id or date (system-supplied)
    - An amount that passes validation converts to at least 1 minor unit

Design Decisions:
    - Two explicit request structs sharing one field-validator library instead of
      one schema with fields omitted at runtime
    - Amount coercion mirrors form semantics: missing or blank counts as 0 (and
      therefore fails the "greater than $0" rule), not as a type error
"""

from dataclasses import dataclass
from decimal import Decimal, DecimalException, InvalidOperation
from typing import Any, Generic, Mapping, TypeVar

from dashboard.core.domain_types import CustomerId, InvoiceStatus
from dashboard.core.errors import InvoiceValidationError
from dashboard.core.forms import FormLike, read_form_value
from dashboard.core.money import to_minor_units

T = TypeVar("T")

# Form field names, as posted by the dashboard's invoice form
CUSTOMER_ID_FIELD = "customerId"
AMOUNT_FIELD = "amount"
STATUS_FIELD = "status"
INVOICE_FORM_FIELDS = (CUSTOMER_ID_FIELD, AMOUNT_FIELD, STATUS_FIELD)

CUSTOMER_ID_MESSAGE = "please select a customer."
AMOUNT_MESSAGE = "please enter an amount greater than $0."
STATUS_MESSAGE = "please select an invoice status."


# ─── Request Structs ─────────────────────────────────────────────

@dataclass(frozen=True)
class CreateInvoiceRequest:
    customer_id: CustomerId
    amount: Decimal
    status: InvoiceStatus


@dataclass(frozen=True)
class UpdateInvoiceRequest:
    customer_id: CustomerId
    amount: Decimal
    status: InvoiceStatus


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    """Either normalized data or a field -> messages mapping, never both."""
    data: T | None = None
    errors: dict[str, list[str]] | None = None

    @property
    def success(self) -> bool:
        return self.errors is None

    def unwrap(self) -> T:
        """Return data or raise InvoiceValidationError with the field errors."""
        if self.errors is not None:
            raise InvoiceValidationError(self.errors)
        return self.data


# ─── Field Validators ────────────────────────────────────────────

def validate_customer_id(value: Any) -> tuple[CustomerId | None, list[str]]:
    if not isinstance(value, str) or not value.strip():
        return None, [CUSTOMER_ID_MESSAGE]
    return CustomerId(value), []


def validate_amount(value: Any) -> tuple[Decimal | None, list[str]]:
    amount = _coerce_decimal(value)
    if amount is None or not amount.is_finite() or amount <= 0:
        return None, [AMOUNT_MESSAGE]
    try:
        cents = to_minor_units(amount)
    except DecimalException:
        # beyond the decimal context: too many digits or exponent overflow
        return None, [AMOUNT_MESSAGE]
    if cents < 1:
        return None, [AMOUNT_MESSAGE]
    return amount, []


def validate_status(value: Any) -> tuple[InvoiceStatus | None, list[str]]:
    if isinstance(value, InvoiceStatus):
        return value, []
    if isinstance(value, str):
        try:
            return InvoiceStatus(value), []
        except ValueError:
            pass
    return None, [STATUS_MESSAGE]


def _coerce_decimal(value: Any) -> Decimal | None:
    """Numeric coercion of a form value. None when it cannot be read as a number."""
    if value is None:
        return Decimal(0)
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, Decimal)):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(str(value))
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return Decimal(0)
        try:
            return Decimal(text)
        except InvalidOperation:
            return None
    return None


# ─── Form Readers ────────────────────────────────────────────────

def read_invoice_form(form: FormLike) -> dict[str, Any]:
    """Extract the invoice fields from a raw form carrier."""
    return {key: read_form_value(form, key) for key in INVOICE_FORM_FIELDS}


# ─── Request Validators ──────────────────────────────────────────

def _validate_invoice_fields(
    raw: Mapping[str, Any],
) -> tuple[dict[str, Any], dict[str, list[str]]]:
    values: dict[str, Any] = {}
    errors: dict[str, list[str]] = {}
    for key, validator in (
        (CUSTOMER_ID_FIELD, validate_customer_id),
        (AMOUNT_FIELD, validate_amount),
        (STATUS_FIELD, validate_status),
    ):
        value, messages = validator(raw.get(key))
        if messages:
            errors[key] = messages
        else:
            values[key] = value
    return values, errors


def validate_create_invoice(
    raw: Mapping[str, Any],
) -> ValidationResult[CreateInvoiceRequest]:
    values, errors = _validate_invoice_fields(raw)
    if errors:
        return ValidationResult(errors=errors)
    return ValidationResult(data=CreateInvoiceRequest(
        customer_id=values[CUSTOMER_ID_FIELD],
        amount=values[AMOUNT_FIELD],
        status=values[STATUS_FIELD],
    ))


def validate_update_invoice(
    raw: Mapping[str, Any],
) -> ValidationResult[UpdateInvoiceRequest]:
    values, errors = _validate_invoice_fields(raw)
    if errors:
        return ValidationResult(errors=errors)
    return ValidationResult(data=UpdateInvoiceRequest(
        customer_id=values[CUSTOMER_ID_FIELD],
        amount=values[AMOUNT_FIELD],
        status=values[STATUS_FIELD],
    ))
