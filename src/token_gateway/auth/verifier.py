"""
token_gateway.auth.verifier

Credential verifier boundary.

Responsibilities:
- Define the single-method contract the gateway consumes (`CredentialVerifier`).
- Provide the HTTP client implementation that calls the external identity backend.

Note:
- Password checks are entirely the backend's concern; this module only forwards
  the pair and maps the answer to an `Identity` or a `VerificationFailed`.
"""

from __future__ import annotations

from typing import Any, Protocol

import httpx

from token_gateway.auth.errors import CredentialsRejected, VerifierUnavailable
from token_gateway.auth.models import Identity
from token_gateway.settings import Settings


class CredentialVerifier(Protocol):
    async def authenticate(self, username: str, password: str) -> Identity:
        """
        Return the authenticated identity, or raise `VerificationFailed`.
        """
        ...


class HttpCredentialVerifier:
    """
    Verifier backed by an external identity service:
    - POST {"username", "password"} as JSON
    - 200 -> {"principal": str, "authorities": [str]}
    - 401/403 -> credentials rejected; anything else -> backend unavailable
    """

    def __init__(self, *, http: httpx.AsyncClient, path: str = "/authenticate") -> None:
        self._http = http
        self._path = path

    @classmethod
    def from_settings(cls, settings: Settings) -> HttpCredentialVerifier:
        http = httpx.AsyncClient(
            base_url=settings.verifier_url,
            timeout=settings.verifier_timeout_seconds,
        )
        return cls(http=http, path=settings.verifier_path)

    async def authenticate(self, username: str, password: str) -> Identity:
        try:
            r = await self._http.post(
                self._path,
                json={"username": username, "password": password},
            )
        except httpx.HTTPError as e:
            raise VerifierUnavailable(f"identity backend call failed: {type(e).__name__}") from e

        if r.status_code in (401, 403):
            raise CredentialsRejected("identity backend rejected credentials")
        if r.status_code != 200:
            raise VerifierUnavailable(f"identity backend returned {r.status_code}")

        try:
            return _identity_from_payload(r.json())
        except ValueError as e:
            raise VerifierUnavailable("identity backend returned a malformed body") from e

    async def aclose(self) -> None:
        await self._http.aclose()


def _identity_from_payload(payload: Any) -> Identity:
    # json.JSONDecodeError is a ValueError, so every parse problem surfaces the same way.
    if not isinstance(payload, dict):
        raise ValueError("payload is not an object")
    principal = payload.get("principal")
    authorities = payload.get("authorities", [])
    if not isinstance(principal, str) or not principal:
        raise ValueError("missing principal")
    if not isinstance(authorities, list):
        raise ValueError("authorities is not a list")
    return Identity(principal=principal, authorities=frozenset(str(a) for a in authorities))


# --- Module Notes -----------------------------------------------------------
# base_url and timeout come from settings; retries are left to the identity backend.
