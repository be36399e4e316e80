"""
App-wide constants for route configuration.

This module provides a single source of truth for route prefixes, tags,
and common response definitions for API routes.
"""

from dataclasses import dataclass
from typing import Any

from rentify.models.error import ErrorResponse


@dataclass(frozen=True)
class RouteConfig:
    """Configuration for a route group."""

    prefix: str
    tag: str


class Routes:
    """Route configurations for all API endpoints."""

    USER = RouteConfig(prefix="/users", tag="users")
    ROLE = RouteConfig(prefix="/roles", tag="roles")
    STATUS = RouteConfig(prefix="/statuses", tag="statuses")
    HEALTH = RouteConfig(prefix="/health", tag="health")


# Common response definitions for reuse across routers
# Use these when configuring APIRouter or individual endpoints
class CommonResponses:
    """Standard HTTP error response definitions for OpenAPI documentation."""

    NOT_FOUND: dict[int | str, dict[str, Any]] = {
        404: {"model": ErrorResponse, "description": "Resource not found"}
    }
    CONFLICT: dict[int | str, dict[str, Any]] = {
        409: {"model": ErrorResponse, "description": "Resource already exists"}
    }
    BAD_REQUEST: dict[int | str, dict[str, Any]] = {
        400: {"model": ErrorResponse, "description": "Invalid request data"}
    }
