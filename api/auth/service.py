"""
Caller identity operations.
"""

from __future__ import annotations

from core.errors import UnauthorizedError

from . import schemas


def me(caller: schemas.User | None) -> schemas.UserResponse:
    if caller is None:
        raise UnauthorizedError()
    return schemas.UserResponse(
        id=caller.id,
        username=caller.username,
        roles=sorted(caller.roles),
    )
