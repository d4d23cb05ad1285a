"""
App-wide constants for route configuration.

This module provides a single source of truth for route prefixes, tags,
and common response definitions for API routes.
"""

from dataclasses import dataclass
from typing import Any

from mentor_match.models.error import ErrorResponse

API_PREFIX = "/api"


@dataclass(frozen=True)
class RouteConfig:
    """Configuration for a route group."""

    prefix: str
    tag: str


class Routes:
    """Route configurations for all API endpoints.

    Prefixes are relative to ``API_PREFIX`` except for HEALTH, which is
    mounted at the application root.
    """

    AUTH = RouteConfig(prefix="", tag="auth")
    USER = RouteConfig(prefix="/users", tag="users")
    MENTOR = RouteConfig(prefix="/mentors", tag="mentors")
    MATCH = RouteConfig(prefix="/match-requests", tag="match-requests")
    HEALTH = RouteConfig(prefix="/health", tag="health")


def _error(description: str) -> dict[str, Any]:
    return {"description": description, "model": ErrorResponse}


# Common response definitions for reuse across routers
# Use these when configuring APIRouter or individual endpoints
class CommonResponses:
    """Standard HTTP error response definitions for OpenAPI documentation."""

    UNAUTHORIZED: dict[int | str, dict[str, Any]] = {
        401: _error("Missing, invalid or expired bearer token")
    }
    FORBIDDEN: dict[int | str, dict[str, Any]] = {
        403: _error("Caller lacks the required role or ownership")
    }
    NOT_FOUND: dict[int | str, dict[str, Any]] = {
        404: _error("Resource not found")
    }
    BAD_REQUEST: dict[int | str, dict[str, Any]] = {
        400: _error("Invalid request data or conflicting resource")
    }
