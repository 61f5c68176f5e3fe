"""
Article access: the one place that combines data loading with authorization.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from access.acl import ACLEngine
from auth.schemas import User
from core import settings
from core.errors import NotFoundError
from core.loader import BatchLoader
from core.store import ContentStore

from .schemas import Article, ArticlePatch

logger = logging.getLogger(__name__)


class ContentRepository:
    """
    Request-scoped view over the shared store. Each instance owns its article
    loader, so cached articles never leak across requests.
    """

    def __init__(self, store: ContentStore, acl: ACLEngine) -> None:
        self._store = store
        self._acl = acl
        self.loader: BatchLoader[int, Article] = BatchLoader(
            self._fetch_articles,
            name="articles",
            max_batch_size=settings.loader_max_batch_size(),
        )

    async def _fetch_articles(self, ids: list[int]) -> list[Article | None]:
        return self._store.articles_by_ids(ids)

    def list_articles(self, caller: User | None) -> Iterator[Article]:
        """
        Readable articles in store order, evaluated lazily on every call.
        """
        return (
            article
            for article in self._store.iter_articles()
            if self._acl.has_permission(article, caller, "read")
        )

    async def get_article(self, article_id: int, caller: User | None) -> Article:
        article = await self.loader.load(article_id)
        # Unreadable articles look exactly like missing ones.
        if not self._acl.has_permission(article, caller, "read"):
            raise NotFoundError()
        return article

    async def edit_article(self, patch: ArticlePatch, caller: User) -> Article:
        """
        Apply `patch` to the stored article and return it through the loader.

        The role gate is the caller's job; this only fails for unknown ids.
        """
        article = self._store.find_article(patch.id)
        if article is None:
            raise NotFoundError()

        if patch.title is not None:
            article.title = patch.title
        if patch.content is not None:
            article.content = patch.content
        article.last_edited_by = caller.id

        # Neither call suspends, so no load can slip in between them.
        self.loader.clear(patch.id).prime(patch.id, article)

        logger.info("article_edited article_id=%s user_id=%s", patch.id, caller.id)
        return await self.loader.load(patch.id)
