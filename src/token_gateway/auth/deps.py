"""
token_gateway.auth.deps

FastAPI dependency functions for authentication and authorization.

Responsibilities:
- Read the `X-Auth-*` headers into a typed `RequestCredentials`.
- Enforce the access policy of the matched route before any handler runs.
- Expose the resolved `Identity` to handlers.
"""

from __future__ import annotations

from fastapi import Depends, Request
from fastapi.security import APIKeyHeader

from token_gateway.auth.errors import MissingCredential
from token_gateway.auth.models import Identity, RequestCredentials
from token_gateway.auth.policy import AccessPolicy

X_AUTH_USERNAME = "X-Auth-Username"
X_AUTH_PASSWORD = "X-Auth-Password"
X_AUTH_TOKEN = "X-Auth-Token"

_username_header = APIKeyHeader(name=X_AUTH_USERNAME, auto_error=False)
_password_header = APIKeyHeader(name=X_AUTH_PASSWORD, auto_error=False)
_token_header = APIKeyHeader(name=X_AUTH_TOKEN, auto_error=False)


def access_policy_from_app(request: Request) -> AccessPolicy:
    # Built once in `token_gateway.api.app.create_app`.
    return request.app.state.access_policy  # type: ignore[attr-defined]


def request_credentials(
    username: str | None = Depends(_username_header),
    password: str | None = Depends(_password_header),
    token: str | None = Depends(_token_header),
) -> RequestCredentials:
    return RequestCredentials(username=username, password=password, token=token)


async def enforce_access_policy(
    request: Request,
    credentials: RequestCredentials = Depends(request_credentials),
    policy: AccessPolicy = Depends(access_policy_from_app),
) -> None:
    # Classify by the matched route template so path params cannot dodge the table.
    route = getattr(request.scope.get("route"), "path", request.url.path)
    request.state.identity = policy.authorize(route, credentials)


def current_identity(request: Request) -> Identity:
    identity = getattr(request.state, "identity", None)
    if identity is None:
        # Handler mounted on a route whose policy yields no identity.
        raise MissingCredential()
    return identity


# --- Module Notes -----------------------------------------------------------
# `enforce_access_policy` is installed as an app-wide dependency; handlers only
# declare `current_identity` when they need to know who is calling.
