# =============================================================================
# app/auth/routes.py - Login Endpoint
# =============================================================================
# POST /login checks a username/password pair against the credential table.
#
# On success the response is, for compatibility, the full person listing
# rather than anything about the caller. Set LOGIN_RETURNS_PERSON_LIST=false
# to return only the authenticated username instead.
# =============================================================================

import logging

from fastapi import APIRouter

from app.config import settings
from app.dependencies import CredentialServiceDep, PersonServiceDep
from app.exceptions import AuthenticationError
from core.models.credential import LoginRequest, LoginResponse
from core.models.person import Person

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/login", response_model=list[Person] | LoginResponse)
def login(
    body: LoginRequest,
    credentials: CredentialServiceDep,
    persons: PersonServiceDep,
):
    """
    Verify a username/password pair.

    Returns:
        Every person (default), or {"username": ...} when the listing is off

    Raises:
        AuthenticationError: 401 if no credential matches; no listing is read
    """
    credential = credentials.find_credential(body.username, body.password)

    if credential is None:
        logger.warning(f"Failed login for {body.username!r}")
        raise AuthenticationError(body.username)

    logger.info(f"Successful login for {credential.username!r}")

    if not settings.LOGIN_RETURNS_PERSON_LIST:
        return LoginResponse(username=credential.username)

    return persons.list_persons()
