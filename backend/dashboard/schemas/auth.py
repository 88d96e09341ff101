"""Auth Schemas — sign-in credentials and failure response.

Invariants:
    - email must look like an address; password at least 6 characters
"""

from pydantic import BaseModel, Field


class Credentials(BaseModel):
    """Credentials posted by the login form."""
    email: str = Field(pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$", max_length=255)
    password: str = Field(min_length=6)


class LoginFailure(BaseModel):
    message: str
