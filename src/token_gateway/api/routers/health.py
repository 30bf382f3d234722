"""
token_gateway.api.routers.health

Public health endpoint.

Responsibilities:
- Report service status to load balancers and probes, with no credential checks.
"""

from __future__ import annotations

from fastapi import APIRouter

HEALTH_URL = "/health"

router = APIRouter()


@router.get(HEALTH_URL)
async def health() -> dict[str, str]:
    # Liveness: process is up and serving HTTP.
    return {"status": "UP"}


# --- Module Notes -----------------------------------------------------------
# Reachable regardless of headers; the route is classified PUBLIC in `api.app`.
