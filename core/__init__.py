# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the data access layer:
# - models/: Pydantic schemas for persons and credentials
# - services/: Parameterized SQL for each operation
#
# Code in this package should NOT touch FastAPI requests or responses.
# This keeps the logic testable and reusable.
# =============================================================================
