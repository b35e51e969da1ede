# =============================================================================
# app/auth/__init__.py - Authentication Module
# =============================================================================
# Provides the username/password check behind POST /login.
# No tokens are issued; each login is a one-off lookup.
#
# Usage:
#   from app.auth import routes as auth_routes
#   app.include_router(auth_routes.router, tags=["Auth"])
# =============================================================================

from app.auth import routes

__all__ = ["routes"]
