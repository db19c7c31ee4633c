"""
basic_gate.api.routers.me

Protected endpoint reporting the caller authenticated by the gate.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from basic_gate.api.deps import current_principal
from basic_gate.auth.models import Principal

router = APIRouter(tags=["api"])


class MeResponse(BaseModel):
    username: str
    groups: list[str]


@router.get("/me", response_model=MeResponse)
async def me(principal: Principal = Depends(current_principal)) -> MeResponse:
    return MeResponse(username=principal.username, groups=sorted(principal.groups))
