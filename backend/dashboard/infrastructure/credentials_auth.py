"""Credentials Sign-In — verifies an email/password form against the users table.

Invariants:
    - Only the "credentials" strategy is served; others raise AuthError("ProviderNotFound")
    - Malformed credentials, unknown email and wrong password all raise
      AuthError("CredentialsSignin") — callers cannot tell which one failed
    - Database failures surface as DatabaseError, never as AuthError

Design Decisions:
    - Password hashes checked with werkzeug.security
    - No session issuance: a successful sign-in returns the User and the
      route decides where to send the browser
"""

import logging

from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from dashboard.core.domain_types import SignInStrategy
from dashboard.core.errors import AuthError
from dashboard.core.forms import FormLike, read_form_value
from dashboard.infrastructure.database import to_database_error
from dashboard.models.user import User
from dashboard.schemas.auth import Credentials

logger = logging.getLogger(__name__)

PROVIDER_NOT_FOUND = "ProviderNotFound"


class CredentialsSignIn:
    """SignIn implementation for the credentials strategy."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def __call__(self, strategy: str, form: FormLike) -> User:
        if strategy != SignInStrategy.CREDENTIALS.value:
            raise AuthError(PROVIDER_NOT_FOUND, f"Unknown sign-in provider: {strategy}")

        try:
            credentials = Credentials(
                email=read_form_value(form, "email"),
                password=read_form_value(form, "password"),
            )
        except ValidationError:
            raise AuthError(AuthError.CREDENTIALS_SIGNIN)

        user = await self._get_user(credentials.email)
        if user is None or not user.check_password(credentials.password):
            raise AuthError(AuthError.CREDENTIALS_SIGNIN)

        logger.info(f"User {user.id} signed in", extra={"action": "authenticate"})
        return user

    async def _get_user(self, email: str) -> User | None:
        try:
            result = await self.db.execute(select(User).where(User.email == email))
        except SQLAlchemyError as e:
            raise to_database_error(e, "query") from e
        return result.scalar_one_or_none()
