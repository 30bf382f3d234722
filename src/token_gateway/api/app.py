"""
token_gateway.api.app

FastAPI app factory for the token gateway.

Responsibilities:
- Build the FastAPI application and register routers/middleware/error handlers.
- Own the process-wide token store and the route policy table.
- Provide a single composition root where collaborators (verifier, stuff service) are chosen.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI

from token_gateway import __version__
from token_gateway.api.errors import register_exception_handlers
from token_gateway.api.routers.authenticate import AUTHENTICATE_URL
from token_gateway.api.routers.authenticate import router as authenticate_router
from token_gateway.api.routers.health import HEALTH_URL
from token_gateway.api.routers.health import router as health_router
from token_gateway.api.routers.metrics import METRICS_URL
from token_gateway.api.routers.metrics import router as metrics_router
from token_gateway.api.routers.stuff import STUFF_URL
from token_gateway.api.routers.stuff import router as stuff_router
from token_gateway.auth.deps import enforce_access_policy
from token_gateway.auth.policy import AccessPolicy, PolicyKind
from token_gateway.auth.tokens import TokenStore
from token_gateway.auth.verifier import CredentialVerifier, HttpCredentialVerifier
from token_gateway.observability.logging import configure_logging, get_logger
from token_gateway.observability.middleware import RequestContextMiddleware
from token_gateway.services.stuff import SampleStuffService, StuffService
from token_gateway.settings import Settings

log = get_logger(__name__)

ROUTE_POLICIES: dict[str, PolicyKind] = {
    HEALTH_URL: PolicyKind.PUBLIC,
    METRICS_URL: PolicyKind.STATIC_CREDENTIAL,
    AUTHENTICATE_URL: PolicyKind.CREDENTIAL_EXCHANGE,
    STUFF_URL: PolicyKind.TOKEN_REQUIRED,
}


def create_app(
    *,
    settings: Settings,
    verifier: CredentialVerifier | None = None,
    stuff_service: StuffService | None = None,
) -> FastAPI:
    configure_logging(
        service_name=settings.service_name,
        level=settings.log_level,
        json_logs=settings.env != "dev",
    )

    # Only a verifier built here is closed here; injected ones belong to the caller.
    owned_verifier = HttpCredentialVerifier.from_settings(settings) if verifier is None else None
    token_store = TokenStore(token_bytes=settings.token_bytes)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env)
        try:
            yield
        finally:
            token_store.clear()
            if owned_verifier is not None:
                await owned_verifier.aclose()
            log.info("shutdown")

    app = FastAPI(
        title="Token Gateway",
        version=__version__,
        docs_url="/docs" if settings.env != "prod" else None,
        openapi_url="/openapi.json" if settings.env != "prod" else None,
        lifespan=lifespan,
        dependencies=[Depends(enforce_access_policy)],
    )

    app.state.token_store = token_store
    app.state.stuff_service = stuff_service or SampleStuffService()
    app.state.access_policy = AccessPolicy(
        routes=ROUTE_POLICIES,
        token_store=token_store,
        verifier=verifier if verifier is not None else owned_verifier,
        admin_username=settings.admin_username,
        admin_password=settings.admin_password,
    )

    app.add_middleware(RequestContextMiddleware)
    register_exception_handlers(app)
    app.include_router(health_router, tags=["health"])
    app.include_router(metrics_router, tags=["metrics"])
    app.include_router(authenticate_router, tags=["auth"])
    app.include_router(stuff_router, tags=["stuff"])

    return app


# --- Module Notes -----------------------------------------------------------
# Docs/openapi routes are not in ROUTE_POLICIES; FastAPI serves them outside the
# app-wide dependency, and they are disabled in prod.
