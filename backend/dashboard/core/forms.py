"""Form Carriers — reading values from string-keyed, possibly multi-valued forms.

Invariants:
    - read_form_value returns the FIRST value posted for a key, None when absent

Design Decisions:
    - Structural FormLike protocol: Starlette FormData, werkzeug MultiDict and
      plain dicts all qualify
"""

from typing import Any, Protocol


class FormLike(Protocol):
    """String-keyed, possibly multi-valued form carrier."""
    def get(self, key: str, default: Any = None) -> Any: ...


def read_form_value(form: FormLike, key: str) -> Any:
    """First value posted for `key`, or None when absent."""
    getlist = getattr(form, "getlist", None)
    if getlist is not None:
        values = getlist(key)
        return values[0] if values else None
    return form.get(key)
