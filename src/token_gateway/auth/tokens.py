"""
token_gateway.auth.tokens

In-memory token issuer and store.

Responsibilities:
- Mint opaque, unguessable bearer tokens for authenticated identities.
- Resolve a presented token back to its bound `Identity`.

The mapping lives for the lifetime of the process; nothing is persisted.
"""

from __future__ import annotations

import secrets
from threading import Lock

from token_gateway.auth.models import Identity

DEFAULT_TOKEN_BYTES = 32


class TokenStore:
    """
    Thread-safe token -> Identity mapping.

    All access to the underlying dict goes through this class under a single lock,
    so it is safe to share across the event loop and threadpool workers.
    """

    def __init__(self, *, token_bytes: int = DEFAULT_TOKEN_BYTES) -> None:
        self._token_bytes = token_bytes
        self._tokens: dict[str, Identity] = {}
        self._lock = Lock()

    def issue(self, identity: Identity) -> str:
        with self._lock:
            # Collisions are practically impossible with 256 random bits, but the
            # 1:1 binding must hold even then.
            token = secrets.token_urlsafe(self._token_bytes)
            while token in self._tokens:
                token = secrets.token_urlsafe(self._token_bytes)
            self._tokens[token] = identity
        return token

    def lookup(self, token: str) -> Identity | None:
        with self._lock:
            return self._tokens.get(token)

    def clear(self) -> None:
        with self._lock:
            self._tokens.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._tokens)


# --- Module Notes -----------------------------------------------------------
# Tokens never expire and are not revocable; a restart drops every binding.
