"""
In-memory dataset shared by all request-scoped repositories.

The store is constructed explicitly (see `build_demo_store`) and handed to the
repositories; nothing here is process-global. Articles are mutable and kept in
seed order; users never change once the store exists.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from access.schemas import AccessPolicy, Permission
from articles.schemas import Article
from auth.schemas import User


class ContentStore:
    def __init__(self, *, users: Iterable[User] = (), articles: Iterable[Article] = ()) -> None:
        self._users: tuple[User, ...] = tuple(users)
        self._articles: list[Article] = list(articles)

        seen: set[int] = set()
        for article in self._articles:
            if article.id in seen:
                raise ValueError(f"Duplicate article id: {article.id}.")
            seen.add(article.id)

        credentials = [u.credential for u in self._users]
        if len(set(credentials)) != len(credentials):
            raise ValueError("User credentials must be unique.")

    @property
    def users(self) -> tuple[User, ...]:
        return self._users

    def iter_articles(self) -> Iterator[Article]:
        return iter(self._articles)

    def find_article(self, article_id: int) -> Article | None:
        for article in self._articles:
            if article.id == article_id:
                return article
        return None

    def articles_by_ids(self, ids: list[int]) -> list[Article | None]:
        by_id = {article.id: article for article in self._articles}
        return [by_id.get(article_id) for article_id in ids]

    def users_by_credentials(self, credentials: list[str]) -> list[User | None]:
        by_credential = {user.credential: user for user in self._users}
        return [by_credential.get(credential) for credential in credentials]


def build_demo_store() -> ContentStore:
    """
    Demo users (admin, alice, bob) and three articles; the third is hidden
    from everyone but admins.
    """
    read_write = Permission(read=True, write=True)

    users = [
        User(id=1, username="admin", credential="adpwd123", roles=frozenset({"admin", "editor"})),
        User(id=2, username="alice", credential="apwd123", roles=frozenset({"editor"})),
        User(id=3, username="bob", credential="bpwd123", roles=frozenset({"reader"})),
    ]
    articles = [
        Article(
            id=1,
            title="AAA",
            content="aaa",
            last_edited_by=2,
            access_policy=AccessPolicy.build(
                Permission(read=True),
                {"editor": read_write, "admin": read_write},
            ),
        ),
        Article(
            id=2,
            title="BBB ",
            content="bbb",
            last_edited_by=2,
            access_policy=AccessPolicy.build(Permission(read=True), {"editor": read_write}),
        ),
        Article(
            id=3,
            title="CCC",
            content="ccc",
            last_edited_by=2,
            access_policy=AccessPolicy.build(Permission(read=False), {"admin": read_write}),
        ),
    ]
    return ContentStore(users=users, articles=articles)
