"""
Article schemas: the stored record, the edit patch and the wire shape.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from access.schemas import AccessPolicy


class Article(BaseModel):
    """
    Stored article. `id` never changes; title/content/last_edited_by change on edit.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: int = Field(..., frozen=True)
    title: str
    content: str
    last_edited_by: int
    access_policy: AccessPolicy | None = None


class ArticlePatch(BaseModel):
    id: int
    title: str | None = None
    content: str | None = None


class EditArticleRequest(BaseModel):
    title: str | None = Field(default=None)
    content: str | None = Field(default=None)


class ArticleResponse(BaseModel):
    """
    Wire shape. The access policy is never exposed.
    """

    title: str
    id: int
    content: str
    lastEditedBy: int

    @classmethod
    def from_article(cls, article: Article) -> ArticleResponse:
        return cls(
            title=article.title,
            id=article.id,
            content=article.content,
            lastEditedBy=article.last_edited_by,
        )
