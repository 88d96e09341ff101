"""Authenticate Action — credential sign-in with classified failure messages.

Invariants:
    - AuthError(type="CredentialsSignin") -> "invalid credentials."
    - Any other AuthError -> "something went wrong."
    - Non-AuthError exceptions re-raised unchanged (not ours to interpret)
    - Success returns None; the caller decides where to navigate
"""

import logging

from dashboard.core.domain_types import SignInStrategy
from dashboard.core.errors import AuthError
from dashboard.core.forms import FormLike
from dashboard.core.repository_protocols import SignIn

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "invalid credentials."
SOMETHING_WENT_WRONG = "something went wrong."


async def authenticate(
    prev_state: str | None, form: FormLike, sign_in: SignIn,
) -> str | None:
    """Delegate to the credentials sign-in and classify its failures."""
    try:
        await sign_in(SignInStrategy.CREDENTIALS.value, form)
    except AuthError as e:
        logger.warning(
            f"Sign-in rejected: {e.type}",
            extra={"action": "authenticate", "error_code": e.code},
        )
        if e.type == AuthError.CREDENTIALS_SIGNIN:
            return INVALID_CREDENTIALS
        return SOMETHING_WENT_WRONG
    return None
