"""
Auth API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from . import dependencies, schemas, service

router = APIRouter()


@router.get("/auth/me")
async def me(
    current_user: schemas.User | None = Depends(dependencies.get_current_user),
) -> schemas.UserResponse:
    return service.me(current_user)
