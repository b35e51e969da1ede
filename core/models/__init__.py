# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - person.py: Person request/response schemas
# - credential.py: Login request and credential schemas
#
# These models define the "contract" between API and clients.
# =============================================================================

# -----------------------------------------------------------------------------
# Person Models
# -----------------------------------------------------------------------------
from .person import (
    Person,
    PersonWrite,
)

# -----------------------------------------------------------------------------
# Credential Models
# -----------------------------------------------------------------------------
from .credential import (
    Credential,
    LoginRequest,
    LoginResponse,
)

# -----------------------------------------------------------------------------
# __all__ - Explicit public API
# -----------------------------------------------------------------------------
__all__ = [
    # Person
    "Person",
    "PersonWrite",
    # Credential
    "Credential",
    "LoginRequest",
    "LoginResponse",
]
