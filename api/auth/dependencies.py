"""
Per-request wiring: store access, repositories and caller resolution.

FastAPI caches a dependency per request, so every route sees one
`UserRepository`/`ContentRepository` pair with its own loader caches.
"""

from __future__ import annotations

from fastapi import Depends, Header, Request

from access.acl import ACLEngine
from articles.repository import ContentRepository
from core.store import ContentStore

from .repository import UserRepository, normalize_credential
from .schemas import User

_acl = ACLEngine()


def extract_credential(authorization: str | None) -> str:
    """
    Accepts a raw token or `Bearer <token>`. Missing header gives "".
    """
    raw = normalize_credential(authorization)
    parts = raw.split(" ", 1)
    if len(parts) == 2 and parts[0].strip().lower() == "bearer":
        return parts[1].strip()
    return raw


def get_store(request: Request) -> ContentStore:
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise RuntimeError("Content store is not initialized. Set app.state.store on startup.")
    return store


def get_acl() -> ACLEngine:
    return _acl


def get_user_repository(store: ContentStore = Depends(get_store)) -> UserRepository:
    return UserRepository(store)


def get_content_repository(
    store: ContentStore = Depends(get_store),
    acl: ACLEngine = Depends(get_acl),
) -> ContentRepository:
    return ContentRepository(store, acl)


async def get_credential(authorization: str | None = Header(default=None)) -> str:
    return extract_credential(authorization)


async def get_current_user(
    credential: str = Depends(get_credential),
    users: UserRepository = Depends(get_user_repository),
) -> User | None:
    """
    Resolves the caller once per request; None means anonymous.
    """
    return await users.get_user_for(credential)
