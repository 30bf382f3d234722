"""
tests.test_token_store

Token issuance and lookup, including concurrent issuance.
"""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

from token_gateway.auth.models import ROLE_DOMAIN_USER, Identity
from token_gateway.auth.tokens import TokenStore


def _identity(name: str) -> Identity:
    return Identity(principal=name, authorities=frozenset({ROLE_DOMAIN_USER}))


def test_issued_token_resolves_to_identity() -> None:
    store = TokenStore()
    alice = _identity("alice")

    token = store.issue(alice)

    assert store.lookup(token) == alice
    assert store.lookup("not-issued") is None


def test_same_identity_gets_fresh_tokens() -> None:
    store = TokenStore()
    alice = _identity("alice")

    first, second = store.issue(alice), store.issue(alice)

    assert first != second
    assert store.lookup(first) == store.lookup(second) == alice
    assert len(store) == 2


def test_token_length_follows_configured_entropy() -> None:
    # token_urlsafe(n) yields ceil(4n/3) characters without padding.
    assert len(TokenStore(token_bytes=48).issue(_identity("a"))) == 64
    assert len(TokenStore(token_bytes=16).issue(_identity("a"))) == 22


def test_concurrent_issue_never_collides_or_cross_binds() -> None:
    store = TokenStore()
    identities = [_identity(f"user-{i % 10}") for i in range(500)]

    with ThreadPoolExecutor(max_workers=16) as pool:
        tokens = list(pool.map(store.issue, identities))

    assert len(set(tokens)) == len(tokens)
    assert len(store) == len(tokens)
    for token, identity in zip(tokens, identities):
        assert store.lookup(token) == identity


def test_clear_drops_all_bindings() -> None:
    store = TokenStore()
    token = store.issue(_identity("alice"))

    store.clear()

    assert store.lookup(token) is None
    assert len(store) == 0


def test_lookup_runs_safely_alongside_issue() -> None:
    store = TokenStore()
    seeded = {store.issue(_identity(f"seed-{i}")): f"seed-{i}" for i in range(50)}
    seeded_tokens = list(seeded)
    done = threading.Event()

    def issue(i: int) -> tuple[str, Identity]:
        identity = _identity(f"user-{i}")
        return store.issue(identity), identity

    def look_up(_: int) -> list[tuple[str, Identity | None]]:
        seen = []
        while True:
            for token in seeded_tokens:
                seen.append((token, store.lookup(token)))
            seen.append(("never-issued", store.lookup("never-issued")))
            if done.is_set():
                break
        return seen

    with ThreadPoolExecutor(max_workers=12) as pool:
        readers = [pool.submit(look_up, i) for i in range(4)]
        issued = list(pool.map(issue, range(400)))
        done.set()
        observations = [obs for reader in readers for obs in reader.result()]

    assert observations
    for token, identity in observations:
        if token == "never-issued":
            assert identity is None
        else:
            assert identity is not None and identity.principal == seeded[token]
    for token, identity in issued:
        assert store.lookup(token) == identity
    assert len(store) == len(seeded) + len(issued)
