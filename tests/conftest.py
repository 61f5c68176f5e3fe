"""Shared fixtures: every test gets its own store, so edits never leak."""

import httpx
import pytest

from access.acl import ACLEngine
from access.schemas import Permission
from articles.repository import ContentRepository
from core.store import ContentStore, build_demo_store
from main import create_app

from tests.utils import ADMIN, EDITOR, NOBODY, READER, make_article


@pytest.fixture
def abc_store():
    """A and B are public, C is readable by admins only."""
    return ContentStore(
        users=[ADMIN, EDITOR, READER, NOBODY],
        articles=[
            make_article(1, "A"),
            make_article(2, "B"),
            make_article(
                3,
                "C",
                everyone_read=False,
                roles={"admin": Permission(read=True, write=True)},
            ),
        ],
    )


@pytest.fixture
def acl():
    return ACLEngine()


@pytest.fixture
def repository(abc_store, acl):
    return ContentRepository(abc_store, acl)


@pytest.fixture
def demo_store():
    return build_demo_store()


@pytest.fixture
async def client(demo_store):
    app = create_app(demo_store)
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as http:
        yield http
