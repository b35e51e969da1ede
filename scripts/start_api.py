#!/usr/bin/env python3
# =============================================================================
# scripts/start_api.py - API Server Entry Point
# =============================================================================
# Starts uvicorn with the settings from app.config.
#
# Usage:
#   python scripts/start_api.py
#
# TLS is enabled when both TLS_CERT_FILE and TLS_KEY_FILE are set, e.g.:
#   TLS_CERT_FILE=server.crt TLS_KEY_FILE=server.key python scripts/start_api.py
#
# Prerequisites:
#   - PostgreSQL reachable with the person and role tables
#   - Environment variables must be set (.env file)
# =============================================================================

import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import uvicorn

from app.config import settings


def main():
    """Start the API server."""
    print("=" * 60)
    print("Person API")
    print("=" * 60)
    print()
    scheme = "https" if settings.tls_enabled else "http"
    print(f"Listening on {scheme}://{settings.API_HOST}:{settings.API_PORT}")
    print("Press Ctrl+C to stop")
    print()

    ssl_options = {}
    if settings.tls_enabled:
        ssl_options = {
            "ssl_certfile": settings.TLS_CERT_FILE,
            "ssl_keyfile": settings.TLS_KEY_FILE,
        }

    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
        log_level="debug" if settings.DEBUG else "info",
        **ssl_options,
    )


if __name__ == "__main__":
    main()
