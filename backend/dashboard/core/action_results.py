"""Action Results — the explicit outcome of a form action.

Invariants:
    - A handler returns exactly one of Redirect(path) or Return(value)
    - ActionState.errors is None unless validation rejected the form
    - ActionState is immutable; the previous state passed into a handler is never mutated

Design Decisions:
    - Result variant over raising a redirect: the calling layer (FastAPI route)
      decides how to navigate, and handlers stay testable without catching
      control-flow exceptions
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class ActionState:
    """Form state handed back to the caller: field errors plus a summary message."""
    message: str | None = None
    errors: dict[str, list[str]] | None = None

    def to_dict(self) -> dict:
        return {"errors": self.errors, "message": self.message}


@dataclass(frozen=True)
class Redirect:
    """Navigate the caller to `path`; the handler produced no value."""
    path: str


@dataclass(frozen=True)
class Return(Generic[T]):
    """Hand `value` back to the caller without navigating."""
    value: T


ActionOutcome = Union[Redirect, Return[ActionState]]
