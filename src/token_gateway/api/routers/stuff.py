from __future__ import annotations

from fastapi import APIRouter, Depends

from token_gateway.api.deps import stuff_service_from_app
from token_gateway.auth.deps import current_identity
from token_gateway.auth.models import Identity
from token_gateway.services.stuff import Stuff, StuffService

STUFF_URL = "/api/stuff"

router = APIRouter()


@router.get(STUFF_URL, response_model=list[Stuff])
async def get_stuff(
    identity: Identity = Depends(current_identity),
    service: StuffService = Depends(stuff_service_from_app),
) -> list[Stuff]:
    return await service.get_stuff(identity)
