"""
token_gateway.auth.models

Auth domain models.

Responsibilities:
- Define the authenticated identity type (`Identity`) bound to issued tokens.
- Define the per-request credential bundle read from headers.
"""

from __future__ import annotations

from dataclasses import dataclass, field

ROLE_DOMAIN_USER = "ROLE_DOMAIN_USER"


@dataclass(frozen=True, slots=True)
class Identity:
    """
    Authenticated principal plus its granted authorities.

    Produced only by a credential verifier on success; never carries the password.
    The static admin pair is checked separately and never becomes an Identity.
    """

    principal: str
    authorities: frozenset[str]

    def __post_init__(self) -> None:
        if not self.principal:
            raise ValueError("Identity principal must be non-empty")

    def has_authority(self, authority: str) -> bool:
        return authority in self.authorities


@dataclass(frozen=True, slots=True)
class RequestCredentials:
    # Raw header values; any of them may be absent.
    username: str | None = None
    password: str | None = field(default=None, repr=False)
    token: str | None = field(default=None, repr=False)


# --- Module Notes -----------------------------------------------------------
# `RequestCredentials` hides password and token from repr; never log the object itself.
