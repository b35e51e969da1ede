# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# Tests swap the database by overriding get_engine.
# =============================================================================

from typing import Annotated

from fastapi import Depends
from sqlalchemy.engine import Engine

from app.exceptions import StorageError
from core.services.credential_service import CredentialService
from core.services.person_service import PersonService
from lib.database import Database, DatabaseError


def get_engine() -> Engine:
    """
    Get the shared database engine.

    Returns the singleton pooled engine. A bad URL or missing driver is
    reported like any other storage failure.
    """
    try:
        return Database.get_engine()
    except DatabaseError as e:
        raise StorageError("Could not connect to the database", error=str(e)) from e


EngineDep = Annotated[Engine, Depends(get_engine)]


def get_person_service(engine: EngineDep) -> PersonService:
    """Person data access bound to the shared engine."""
    return PersonService(engine)


def get_credential_service(engine: EngineDep) -> CredentialService:
    """Credential lookup bound to the shared engine."""
    return CredentialService(engine)


# Type aliases for dependency injection
PersonServiceDep = Annotated[PersonService, Depends(get_person_service)]
CredentialServiceDep = Annotated[CredentialService, Depends(get_credential_service)]
