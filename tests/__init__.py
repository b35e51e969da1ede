# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Person API:
# - test_models.py: Unit tests for Pydantic model validation
# - test_person_service.py: Data access layer against in-memory SQLite
# - test_users_api.py: /users endpoint tests
# - test_login_api.py: /login endpoint tests
# - test_app.py: Settings, error taxonomy, engine wrapper, health checks
#
# Run tests with: pytest
# =============================================================================
