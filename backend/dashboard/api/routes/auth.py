"""Auth Routes — credential sign-in form endpoint.

Invariants:
    - Success → 303 See Other to the dashboard
    - Classified failure → 401 with {"message": ...}
    - Unclassified errors propagate to the global error handlers
"""

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse, RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from dashboard.config import get_settings
from dashboard.core.repository_protocols import SignIn
from dashboard.infrastructure.credentials_auth import CredentialsSignIn
from dashboard.infrastructure.database import get_db
from dashboard.schemas.auth import LoginFailure
from dashboard.services.authenticate import authenticate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


def get_sign_in(db: AsyncSession = Depends(get_db)) -> SignIn:
    return CredentialsSignIn(db)


@router.post("/login")
async def login(request: Request, sign_in: SignIn = Depends(get_sign_in)):
    """Sign in with email and password."""
    form = await request.form()
    message = await authenticate(None, form, sign_in)
    if message is None:
        return RedirectResponse(
            get_settings().login_redirect_path,
            status_code=status.HTTP_303_SEE_OTHER,
        )
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content=LoginFailure(message=message).model_dump(),
    )
