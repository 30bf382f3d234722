"""
token_gateway.auth.errors

Auth error taxonomy.

Responsibilities:
- Internal rejection reasons raised by the access policy engine.
- Failure signals raised by credential verifiers.

Every `AuthError` collapses into the same externally-visible 401; the `reason`
is for logs and metrics only.
"""

from __future__ import annotations


class AuthError(Exception):
    reason = "unauthorized"


class MissingCredential(AuthError):
    # Username, password or token header absent.
    reason = "missing_credential"


class InvalidCredential(AuthError):
    # Static admin mismatch or verifier rejection.
    reason = "invalid_credential"


class UnknownToken(AuthError):
    reason = "unknown_token"


class VerificationFailed(Exception):
    """
    Base failure signal of a credential verifier.
    """


class CredentialsRejected(VerificationFailed):
    pass


class VerifierUnavailable(VerificationFailed):
    pass


# --- Module Notes -----------------------------------------------------------
# Verifier failures are a separate hierarchy: the policy engine translates them
# into `InvalidCredential` so callers never learn why verification failed.
