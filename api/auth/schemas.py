"""
Caller identity schemas.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    username: str = Field(..., min_length=1)
    credential: str = Field(..., min_length=1, repr=False, exclude=True)
    roles: frozenset[str] = frozenset()


class UserResponse(BaseModel):
    id: int
    username: str
    roles: list[str]
