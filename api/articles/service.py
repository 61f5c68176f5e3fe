"""
Article operations as exposed to clients.

Gates that do not depend on a single article (authenticated caller, editor
role) live here; item-level checks belong to the repository.
"""

from __future__ import annotations

from access.acl import ACLEngine
from auth.schemas import User
from core import settings
from core.errors import ForbiddenError, UnauthorizedError

from . import schemas
from .repository import ContentRepository


def list_articles(repository: ContentRepository, caller: User | None) -> list[schemas.ArticleResponse]:
    return [schemas.ArticleResponse.from_article(a) for a in repository.list_articles(caller)]


async def get_article(
    repository: ContentRepository,
    article_id: int,
    caller: User | None,
) -> schemas.ArticleResponse:
    article = await repository.get_article(article_id, caller)
    return schemas.ArticleResponse.from_article(article)


async def edit_article(
    repository: ContentRepository,
    acl: ACLEngine,
    patch: schemas.ArticlePatch,
    caller: User | None,
) -> schemas.ArticleResponse:
    if caller is None:
        raise UnauthorizedError()
    if not acl.has_role(caller, settings.editor_roles()):
        raise ForbiddenError()

    article = await repository.edit_article(patch, caller)
    return schemas.ArticleResponse.from_article(article)
