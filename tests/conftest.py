"""
tests.conftest

Shared fixtures: a recording fake credential verifier and an in-process HTTP client.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

from token_gateway.api.app import create_app
from token_gateway.auth.errors import CredentialsRejected
from token_gateway.auth.models import ROLE_DOMAIN_USER, Identity
from token_gateway.settings import Settings


class FakeVerifier:
    """
    Accepts only the registered username/password pairs and records every call.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []
        self._accepted: dict[tuple[str, str], Identity] = {}

    def accept(self, username: str, password: str, *authorities: str) -> Identity:
        identity = Identity(
            principal=username,
            authorities=frozenset(authorities or (ROLE_DOMAIN_USER,)),
        )
        self._accepted[(username, password)] = identity
        return identity

    async def authenticate(self, username: str, password: str) -> Identity:
        self.calls.append((username, password))
        identity = self._accepted.get((username, password))
        if identity is None:
            raise CredentialsRejected("Invalid Credentials")
        return identity


@pytest.fixture
def settings() -> Settings:
    return Settings(env="test")


@pytest.fixture
def verifier() -> FakeVerifier:
    return FakeVerifier()


@pytest.fixture
def app(settings: Settings, verifier: FakeVerifier) -> FastAPI:
    return create_app(settings=settings, verifier=verifier)


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
