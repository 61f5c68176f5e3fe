"""Helpers shared by the test modules."""

from access.schemas import AccessPolicy, Permission
from articles.schemas import Article
from auth.schemas import User

ADMIN = User(id=10, username="root", credential="root-token", roles=frozenset({"admin"}))
EDITOR = User(id=11, username="ed", credential="ed-token", roles=frozenset({"editor"}))
READER = User(id=12, username="rita", credential="rita-token", roles=frozenset({"reader"}))
NOBODY = User(id=13, username="nora", credential="nora-token", roles=frozenset())


def make_article(article_id, title, *, everyone_read=True, roles=None, policy=True):
    access_policy = None
    if policy:
        access_policy = AccessPolicy.build(Permission(read=everyone_read), roles or {})
    return Article(
        id=article_id,
        title=title,
        content=title.lower(),
        last_edited_by=0,
        access_policy=access_policy,
    )


def titles(articles):
    return [a.title for a in articles]
