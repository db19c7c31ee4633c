"""
basic_gate.api.routers.health

Health and readiness endpoints (outside the protected prefix).
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from basic_gate.api.deps import db_session

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(session: AsyncSession = Depends(db_session)) -> dict[str, str]:
    # Readiness: the user directory must be reachable for the gate to authenticate anyone.
    await session.execute(text("SELECT 1"))
    return {"status": "ready"}
