"""
tests.test_http_verifier

HTTP credential verifier against a mocked identity backend.
"""

from __future__ import annotations

import json

import httpx
import pytest

from token_gateway.auth.errors import CredentialsRejected, VerifierUnavailable
from token_gateway.auth.verifier import HttpCredentialVerifier
from token_gateway.settings import Settings


def _verifier(handler) -> HttpCredentialVerifier:
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://idp")
    return HttpCredentialVerifier(http=http, path="/authenticate")


@pytest.mark.asyncio
async def test_accepted_credentials_yield_identity() -> None:
    seen: list[dict] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(json.loads(request.content))
        assert request.url.path == "/authenticate"
        return httpx.Response(
            200, json={"principal": "test_user_2", "authorities": ["ROLE_DOMAIN_USER"]}
        )

    verifier = _verifier(handler)
    identity = await verifier.authenticate("test_user_2", "ValidPassword")
    await verifier.aclose()

    assert identity.principal == "test_user_2"
    assert identity.authorities == frozenset({"ROLE_DOMAIN_USER"})
    assert seen == [{"username": "test_user_2", "password": "ValidPassword"}]


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [401, 403])
async def test_rejections_map_to_credentials_rejected(status: int) -> None:
    verifier = _verifier(lambda request: httpx.Response(status))
    with pytest.raises(CredentialsRejected):
        await verifier.authenticate("u", "p")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(500),
        httpx.Response(200, text="not json"),
        httpx.Response(200, json=["principal"]),
        httpx.Response(200, json={"principal": ""}),
        httpx.Response(200, json={"principal": "u", "authorities": "ROLE_X"}),
    ],
    ids=["server-error", "not-json", "not-object", "empty-principal", "bad-authorities"],
)
async def test_backend_failures_map_to_unavailable(response: httpx.Response) -> None:
    verifier = _verifier(lambda request: response)
    with pytest.raises(VerifierUnavailable):
        await verifier.authenticate("u", "p")


@pytest.mark.asyncio
async def test_transport_errors_map_to_unavailable() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(VerifierUnavailable):
        await _verifier(handler).authenticate("u", "p")


@pytest.mark.asyncio
async def test_from_settings_uses_configured_backend() -> None:
    settings = Settings(
        env="test", verifier_url="http://idp.internal:9000", verifier_timeout_seconds=2.5
    )
    verifier = HttpCredentialVerifier.from_settings(settings)
    try:
        assert str(verifier._http.base_url) == "http://idp.internal:9000"
        assert verifier._http.timeout.connect == 2.5
    finally:
        await verifier.aclose()
