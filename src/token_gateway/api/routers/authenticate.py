from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from token_gateway.auth.deps import access_policy_from_app, request_credentials
from token_gateway.auth.models import RequestCredentials
from token_gateway.auth.policy import AccessPolicy
from token_gateway.observability.logging import get_logger

AUTHENTICATE_URL = "/api/authenticate"

router = APIRouter()
log = get_logger(__name__)


class TokenResponse(BaseModel):
    token: str


@router.post(AUTHENTICATE_URL, response_model=TokenResponse)
async def authenticate(
    credentials: RequestCredentials = Depends(request_credentials),
    policy: AccessPolicy = Depends(access_policy_from_app),
) -> TokenResponse:
    identity, token = await policy.exchange(credentials)
    log.info("token_issued", principal=identity.principal)
    return TokenResponse(token=token)
