"""
token_gateway.services.stuff

Sample protected resource.

Responsibilities:
- Define the `StuffService` boundary the `/api/stuff` handler calls.
- Provide a static sample implementation used when no real backend is wired in.
"""

from __future__ import annotations

from typing import Protocol

from pydantic import BaseModel

from token_gateway.auth.models import Identity


class Stuff(BaseModel):
    description: str
    details: str


class StuffService(Protocol):
    async def get_stuff(self, identity: Identity) -> list[Stuff]: ...


class SampleStuffService:
    async def get_stuff(self, identity: Identity) -> list[Stuff]:
        return [
            Stuff(description="Sample stuff #1", details=f"Fetched for {identity.principal}"),
            Stuff(description="Sample stuff #2", details="Second item"),
        ]


# --- Module Notes -----------------------------------------------------------
# A real deployment swaps `SampleStuffService` for a client of the downstream system.
