# =============================================================================
# core/services/person_service.py - Person Data Access
# =============================================================================
# Handles person CRUD against the relational database.
# Every operation is one parameterized statement on a pooled connection;
# driver failures are logged and re-raised as StorageError.
# =============================================================================

import logging

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from app.config import settings
from app.exceptions import StorageError
from core.models.person import Person

logger = logging.getLogger(__name__)


class PersonService:
    """
    Service for person record operations.

    Provides a clean interface between API routes and database.
    The engine is shared; connections are borrowed per statement.
    """

    def __init__(self, engine: Engine, table: str | None = None):
        self.engine = engine
        # Identifier comes from validated settings, never from a request
        self.table = table or settings.PERSON_TABLE

    def list_persons(self) -> list[Person]:
        """
        Fetch every person, in whatever order the database returns them.

        Returns:
            List of Person records (empty if the table is empty)

        Raises:
            StorageError: If the query fails
        """
        query = text(f"SELECT id, name, age FROM {self.table}")

        try:
            with self.engine.connect() as conn:
                rows = conn.execute(query).mappings().all()
        except SQLAlchemyError as e:
            logger.error(f"Failed to list persons: {e}")
            raise StorageError("Could not get users", error=str(e)) from e

        logger.debug(f"Fetched {len(rows)} persons")
        return [Person.from_db_row(row) for row in rows]

    def create_person(self, name: str, age: int) -> int:
        """
        Insert a new person and return the database-assigned id.

        No validation beyond the column types: empty names and any age
        the column accepts are stored as given.

        Raises:
            StorageError: If the insert fails
        """
        query = text(
            f"INSERT INTO {self.table} (name, age) VALUES (:name, :age) RETURNING id"
        )

        try:
            with self.engine.begin() as conn:
                person_id = conn.execute(query, {"name": name, "age": age}).scalar_one()
        except SQLAlchemyError as e:
            logger.error(f"Failed to create person: {e}")
            raise StorageError("Could not create user", error=str(e)) from e

        logger.info(f"Created person: {person_id}")
        return person_id

    def update_person(self, person_id: int, name: str, age: int) -> bool:
        """
        Replace name and age of the person with this id.

        Returns:
            True if a row was updated, False if no row has that id

        Raises:
            StorageError: If the update fails
        """
        query = text(f"UPDATE {self.table} SET name = :name, age = :age WHERE id = :id")

        try:
            with self.engine.begin() as conn:
                result = conn.execute(query, {"name": name, "age": age, "id": person_id})
        except SQLAlchemyError as e:
            logger.error(f"Failed to update person {person_id}: {e}")
            raise StorageError("Could not update user", error=str(e)) from e

        matched = result.rowcount > 0
        if matched:
            logger.info(f"Updated person: {person_id}")
        else:
            logger.info(f"Update matched no person: {person_id}")
        return matched

    def delete_person(self, person_id: int) -> bool:
        """
        Delete the person with this id.

        Returns:
            True if a row was deleted, False if no row has that id

        Raises:
            StorageError: If the delete fails
        """
        query = text(f"DELETE FROM {self.table} WHERE id = :id")

        try:
            with self.engine.begin() as conn:
                result = conn.execute(query, {"id": person_id})
        except SQLAlchemyError as e:
            logger.error(f"Failed to delete person {person_id}: {e}")
            raise StorageError("Could not delete user", error=str(e)) from e

        matched = result.rowcount > 0
        if matched:
            logger.info(f"Deleted person: {person_id}")
        else:
            logger.info(f"Delete matched no person: {person_id}")
        return matched
