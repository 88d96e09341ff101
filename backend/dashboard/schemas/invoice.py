"""Invoice Schemas — form action state returned to the invoice forms."""

from pydantic import BaseModel

from dashboard.core.action_results import ActionState


class ActionStateResponse(BaseModel):
    """Field errors (keyed customerId/amount/status) plus a summary message."""
    errors: dict[str, list[str]] | None = None
    message: str | None = None

    @classmethod
    def from_state(cls, state: ActionState) -> "ActionStateResponse":
        return cls(errors=state.errors, message=state.message)
