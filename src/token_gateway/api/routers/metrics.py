"""Prometheus metrics endpoint, guarded by the static admin credentials."""

from __future__ import annotations

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

METRICS_URL = "/metrics"

router = APIRouter()


@router.get(METRICS_URL)
async def get_metrics() -> Response:
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
