# =============================================================================
# core/models/credential.py - Credential Schemas
# =============================================================================
# Username/password pairs checked by POST /login.
# Passwords are compared as stored; they never appear in responses or logs.
# =============================================================================

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Body of POST /login."""

    username: str = Field(..., examples=["admin"])
    password: str = Field(..., repr=False, examples=["secret"])


class Credential(BaseModel):
    """A matched row from the credential table."""

    username: str
    password: str = Field(..., repr=False, exclude=True)


class LoginResponse(BaseModel):
    """Login result when the person listing is switched off."""

    username: str
