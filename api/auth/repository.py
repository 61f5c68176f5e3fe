"""
Identity lookups against the content store.
"""

from __future__ import annotations

import logging

from core import settings
from core.errors import NotFoundError
from core.loader import BatchLoader
from core.store import ContentStore

from .schemas import User

logger = logging.getLogger(__name__)


def normalize_credential(credential: str | None) -> str:
    return (credential or "").strip()


class UserRepository:
    """
    Request-scoped: the loader cache lives as long as this instance.
    """

    def __init__(self, store: ContentStore) -> None:
        self._store = store
        self.loader: BatchLoader[str, User] = BatchLoader(
            self._fetch_users,
            name="users",
            max_batch_size=settings.loader_max_batch_size(),
        )

    async def _fetch_users(self, credentials: list[str]) -> list[User | None]:
        return self._store.users_by_credentials(credentials)

    async def get_user_for(self, credential: str | None) -> User | None:
        credential = normalize_credential(credential)
        if not credential:
            return None
        try:
            return await self.loader.load(credential)
        except NotFoundError:
            logger.info("unknown_credential")
            return None
