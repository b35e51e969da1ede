# =============================================================================
# core/services/credential_service.py - Credential Lookup
# =============================================================================
# Exact-match lookup of a username/password pair in the credential table.
# The table stores passwords as-is; comparison happens in SQL with bound
# parameters. Passwords are never logged.
# =============================================================================

import logging

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from app.config import settings
from app.exceptions import StorageError
from core.models.credential import Credential

logger = logging.getLogger(__name__)


class CredentialService:
    """Read-only access to the credential table."""

    def __init__(self, engine: Engine, table: str | None = None):
        self.engine = engine
        self.table = table or settings.CREDENTIAL_TABLE

    def find_credential(self, username: str, password: str) -> Credential | None:
        """
        Look up a credential matching both username and password.

        Returns:
            The matching Credential, or None if no row matches

        Raises:
            StorageError: If the query fails
        """
        query = text(
            f"SELECT username, password FROM {self.table} "
            "WHERE username = :username AND password = :password"
        )

        try:
            with self.engine.connect() as conn:
                row = conn.execute(
                    query, {"username": username, "password": password}
                ).mappings().first()
        except SQLAlchemyError as e:
            logger.error(f"Failed to look up credential for {username!r}: {e}")
            raise StorageError("Could not verify credentials", error=str(e)) from e

        if row is None:
            logger.debug(f"No credential matched for {username!r}")
            return None

        return Credential(username=row["username"], password=row["password"])
