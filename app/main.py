# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Person API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   python scripts/start_api.py     # honours TLS_* settings
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.exceptions import (
    PersonApiException,
    person_api_exception_handler,
    validation_exception_handler,
)
from app.routers import health, users
from app.routers.health import API_VERSION
from app.auth import routes as auth_routes
from lib.database import Database

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    The engine is created lazily on first use; shutdown returns every
    pooled connection.
    """
    logger.info(f"Starting Person API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")

    yield

    logger.info("Shutting down Person API")
    Database.dispose()


# Create FastAPI application
app = FastAPI(
    title="Person API",
    description="""
## Person Records API

CRUD over person records (`id`, `name`, `age`) plus a username/password check.

| Method & Path | Body | Success |
|---|---|---|
| `GET /users` | - | 200, list of persons |
| `POST /users` | `{name, age}` | 200, created person |
| `PUT /users/{id}` | `{name, age}` | 200, updated person |
| `DELETE /users/{id}` | - | 204 |
| `POST /login` | `{username, password}` | 200, list of persons |

Errors are returned as `{"error": "<message>"}`.
""",
    version=API_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Users",
            "description": "Create, list, update and delete person records",
        },
        {
            "name": "Auth",
            "description": "Username/password check",
        },
        {
            "name": "Health",
            "description": "API health and readiness checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# CORS middleware - allows cross-origin requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

app.add_exception_handler(PersonApiException, person_api_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error"},
    )


# =============================================================================
# Routers
# =============================================================================

# Person CRUD endpoints
app.include_router(
    users.router,
    prefix="/users",
    tags=["Users"]
)

# Login endpoint
app.include_router(
    auth_routes.router,
    tags=["Auth"]
)

# Health check endpoints
app.include_router(
    health.router,
    tags=["Health"]
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "Person API",
        "version": API_VERSION,
        "docs": "/docs",
        "health": "/health",
    }
