"""
token_gateway.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Encapsulate app.state access patterns for shared business services.
"""

from __future__ import annotations

from fastapi import Request

from token_gateway.services.stuff import StuffService


def stuff_service_from_app(request: Request) -> StuffService:
    # The service is chosen once in `token_gateway.api.app.create_app`.
    return request.app.state.stuff_service  # type: ignore[attr-defined]


# --- Module Notes -----------------------------------------------------------
# Auth-specific dependencies live in `token_gateway.auth.deps`.
