# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - database.py: Pooled SQLAlchemy engine shared by every request
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.database import Database, DatabaseError, build_engine

__all__ = [
    "Database",
    "DatabaseError",
    "build_engine",
]
