"""
token_gateway.auth.policy

Access policy engine.

Responsibilities:
- Classify each route into the credential form it requires (`PolicyKind`).
- Enforce the static admin check and the bearer token check.
- Exchange a username/password pair for a freshly issued token.

Static admin credentials and per-user tokens are two independent trust mechanisms;
each has its own method here and they never share state.
"""

from __future__ import annotations

import enum
import hmac
from collections.abc import Mapping

from token_gateway.auth.errors import (
    AuthError,
    InvalidCredential,
    MissingCredential,
    UnknownToken,
    VerificationFailed,
)
from token_gateway.auth.models import Identity, RequestCredentials
from token_gateway.auth.tokens import TokenStore
from token_gateway.auth.verifier import CredentialVerifier
from token_gateway.observability.logging import get_logger
from token_gateway.observability.metrics import AUTH_DECISIONS

log = get_logger(__name__)


class PolicyKind(str, enum.Enum):
    PUBLIC = "public"
    STATIC_CREDENTIAL = "static_credential"
    CREDENTIAL_EXCHANGE = "credential_exchange"
    TOKEN_REQUIRED = "token_required"


class AccessPolicy:
    """
    Per-route access rules.

    Routes missing from the table are treated as `TOKEN_REQUIRED`.
    """

    def __init__(
        self,
        *,
        routes: Mapping[str, PolicyKind],
        token_store: TokenStore,
        verifier: CredentialVerifier,
        admin_username: str,
        admin_password: str,
    ) -> None:
        self._routes = dict(routes)
        self._tokens = token_store
        self._verifier = verifier
        self._admin_username = admin_username
        self._admin_password = admin_password

    def classify(self, route: str) -> PolicyKind:
        return self._routes.get(route, PolicyKind.TOKEN_REQUIRED)

    def authorize(self, route: str, credentials: RequestCredentials) -> Identity | None:
        """
        Enforce the rule for `route`.

        Returns the token-bound identity for TOKEN_REQUIRED routes and None otherwise:
        public routes are anonymous, the static admin pair is not an identity, and the
        credential exchange has no identity until the verifier answers. Raises `AuthError`.
        """
        kind = self.classify(route)
        try:
            if kind is PolicyKind.PUBLIC:
                identity = None
            elif kind is PolicyKind.STATIC_CREDENTIAL:
                self._check_admin(credentials)
                identity = None
            elif kind is PolicyKind.CREDENTIAL_EXCHANGE:
                _require_username_and_password(credentials)
                identity = None
            else:
                identity = self._check_token(credentials)
        except AuthError as e:
            self._record(kind, e.reason)
            raise

        if kind is not PolicyKind.CREDENTIAL_EXCHANGE:
            self._record(kind, "granted", identity)
        return identity

    async def exchange(self, credentials: RequestCredentials) -> tuple[Identity, str]:
        # Presence is checked before the verifier is touched.
        username, password = _require_username_and_password(credentials)

        try:
            identity = await self._verifier.authenticate(username, password)
        except VerificationFailed as e:
            log.info(
                "verifier_rejected",
                username=username,
                error_type=type(e).__name__,
            )
            self._record(PolicyKind.CREDENTIAL_EXCHANGE, InvalidCredential.reason)
            raise InvalidCredential() from e
        except Exception as e:
            # Any other verifier failure still collapses into the uniform rejection.
            log.warning(
                "verifier_failed",
                username=username,
                error_type=type(e).__name__,
            )
            self._record(PolicyKind.CREDENTIAL_EXCHANGE, InvalidCredential.reason)
            raise InvalidCredential() from e

        token = self._tokens.issue(identity)
        self._record(PolicyKind.CREDENTIAL_EXCHANGE, "granted", identity)
        return identity, token

    def _check_admin(self, credentials: RequestCredentials) -> None:
        username, password = _require_username_and_password(credentials)

        # Compare both fields unconditionally so timing does not reveal which one differed.
        username_ok = hmac.compare_digest(username.encode(), self._admin_username.encode())
        password_ok = hmac.compare_digest(password.encode(), self._admin_password.encode())
        if not (username_ok and password_ok):
            raise InvalidCredential()

    def _check_token(self, credentials: RequestCredentials) -> Identity:
        if not credentials.token:
            raise MissingCredential()
        identity = self._tokens.lookup(credentials.token)
        if identity is None:
            raise UnknownToken()
        return identity

    def _record(self, kind: PolicyKind, outcome: str, identity: Identity | None = None) -> None:
        AUTH_DECISIONS.labels(policy=kind.value, outcome=outcome).inc()
        if outcome == "granted":
            log.debug(
                "access_granted",
                policy=kind.value,
                principal=identity.principal if identity else None,
            )
        else:
            log.info("access_denied", policy=kind.value, reason=outcome)


def _require_username_and_password(credentials: RequestCredentials) -> tuple[str, str]:
    if not (credentials.username and credentials.password):
        raise MissingCredential()
    return credentials.username, credentials.password


# --- Module Notes -----------------------------------------------------------
# Passwords and tokens are never passed to the logger; usernames are, for audit.
