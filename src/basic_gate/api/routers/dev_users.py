from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field
from starlette.status import HTTP_201_CREATED, HTTP_404_NOT_FOUND, HTTP_409_CONFLICT

from basic_gate.api.deps import settings_dep, user_directory
from basic_gate.services.directory import SqlUserDirectory
from basic_gate.settings import Settings

router = APIRouter(prefix="/v1/dev", tags=["dev"])


class DevUserRequest(BaseModel):
    # ":" is excluded from usernames since it separates the Basic-Auth pair.
    username: str = Field(min_length=1, max_length=64, pattern=r"^[^:]+$")
    password: str = Field(min_length=1, max_length=256)
    groups: list[str] = Field(default_factory=list)


class DevUserResponse(BaseModel):
    username: str
    groups: list[str]


@router.post("/users", response_model=DevUserResponse, status_code=HTTP_201_CREATED)
async def register_dev_user(
    body: DevUserRequest,
    settings: Settings = Depends(settings_dep),
    directory: SqlUserDirectory = Depends(user_directory),
) -> DevUserResponse:
    if settings.env == "prod":
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Not found")

    if await directory.lookup_user(body.username) is not None:
        raise HTTPException(status_code=HTTP_409_CONFLICT, detail="User already exists")

    principal = await directory.register(
        username=body.username,
        password=body.password,
        groups=body.groups,
    )
    return DevUserResponse(username=principal.username, groups=sorted(principal.groups))
