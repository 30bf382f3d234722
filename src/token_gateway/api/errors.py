"""
token_gateway.api.errors

Application-wide exception handlers.

Responsibilities:
- Collapse every auth rejection into one indistinguishable 401.
- Turn unexpected exceptions into a generic 500 without leaking internals.
"""

from __future__ import annotations

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.status import HTTP_401_UNAUTHORIZED, HTTP_500_INTERNAL_SERVER_ERROR

from token_gateway.auth.errors import AuthError
from token_gateway.observability.logging import get_logger

log = get_logger(__name__)

# Same challenge for every protected route; it must not hint at the credential form.
_WWW_AUTHENTICATE = 'X-Auth realm="token-gateway"'


async def auth_error_handler(request: Request, exc: Exception) -> JSONResponse:
    # The reason was already logged by the policy engine; the body stays constant.
    return JSONResponse(
        status_code=HTTP_401_UNAUTHORIZED,
        content={"detail": "Unauthorized"},
        headers={"WWW-Authenticate": _WWW_AUTHENTICATE},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    log.exception("unhandled_exception", path=request.url.path, method=request.method)
    return JSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def register_exception_handlers(app) -> None:
    app.add_exception_handler(AuthError, auth_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


# --- Module Notes -----------------------------------------------------------
# Never echo `AuthError.reason` to the caller; it would allow token/user enumeration.
