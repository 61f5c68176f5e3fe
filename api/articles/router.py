"""
Article API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Path

from access.acl import ACLEngine
from auth import dependencies as auth_dependencies
from auth.schemas import User

from . import schemas, service
from .repository import ContentRepository

router = APIRouter()


@router.get("/articles")
async def list_articles(
    repository: ContentRepository = Depends(auth_dependencies.get_content_repository),
    current_user: User | None = Depends(auth_dependencies.get_current_user),
) -> list[schemas.ArticleResponse]:
    return service.list_articles(repository, current_user)


@router.get("/articles/{article_id}")
async def get_article(
    article_id: int = Path(...),
    repository: ContentRepository = Depends(auth_dependencies.get_content_repository),
    current_user: User | None = Depends(auth_dependencies.get_current_user),
) -> schemas.ArticleResponse:
    return await service.get_article(repository, article_id, current_user)


@router.patch("/articles/{article_id}")
async def edit_article(
    request: schemas.EditArticleRequest,
    article_id: int = Path(...),
    repository: ContentRepository = Depends(auth_dependencies.get_content_repository),
    acl: ACLEngine = Depends(auth_dependencies.get_acl),
    current_user: User | None = Depends(auth_dependencies.get_current_user),
) -> schemas.ArticleResponse:
    patch = schemas.ArticlePatch(id=article_id, title=request.title, content=request.content)
    return await service.edit_article(repository, acl, patch, current_user)
