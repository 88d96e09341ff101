"""Auth Routes — login form endpoint over the credentials sign-in.

Tests cover:
    - Correct credentials → 303 to /dashboard
    - Wrong credentials → 401 "invalid credentials."
    - Non-credentials AuthError → 401 "something went wrong."
    - Database failure during sign-in → 503 from the global DashboardError handler
"""

from unittest.mock import AsyncMock

from dashboard.api.routes.auth import get_sign_in
from dashboard.core.errors import AuthError, DatabaseError
from dashboard.main import app


async def test_login_redirects_to_dashboard(client, seed_user):
    res = await client.post(
        "/api/v1/auth/login",
        data={"email": "user@nextmail.com", "password": "123456"},
    )

    assert res.status_code == 303
    assert res.headers["location"] == "/dashboard"


async def test_login_with_wrong_password_returns_invalid_credentials(client, seed_user):
    res = await client.post(
        "/api/v1/auth/login",
        data={"email": "user@nextmail.com", "password": "wrong-one"},
    )

    assert res.status_code == 401
    assert res.json() == {"message": "invalid credentials."}


async def test_login_other_auth_error_returns_generic_message(client):
    app.dependency_overrides[get_sign_in] = lambda: AsyncMock(
        side_effect=AuthError("AccessDenied"),
    )

    res = await client.post("/api/v1/auth/login", data={})

    assert res.status_code == 401
    assert res.json() == {"message": "something went wrong."}


async def test_login_database_error_propagates_to_error_handler(client):
    app.dependency_overrides[get_sign_in] = lambda: AsyncMock(
        side_effect=DatabaseError("Connection or operational error", "query"),
    )

    res = await client.post(
        "/api/v1/auth/login",
        data={"email": "user@nextmail.com", "password": "123456"},
    )

    assert res.status_code == 503
    assert res.json()["error"]["code"] == "DATABASE_ERROR"
