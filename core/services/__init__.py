# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .person_service import PersonService
from .credential_service import CredentialService

__all__ = [
    "PersonService",
    "CredentialService",
]
