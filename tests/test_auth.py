"""Caller resolution and store construction."""

import asyncio

import pytest

from auth.dependencies import extract_credential
from auth.repository import UserRepository
from core.store import ContentStore

from tests.utils import ADMIN, make_article


@pytest.mark.parametrize(
    ("header", "expected"),
    [
        (None, ""),
        ("", ""),
        ("  adpwd123 ", "adpwd123"),
        ("Bearer adpwd123", "adpwd123"),
        ("bearer   adpwd123", "adpwd123"),
    ],
)
def test_extract_credential(header, expected):
    assert extract_credential(header) == expected


async def test_get_user_for_known_and_unknown_credentials(demo_store):
    users = UserRepository(demo_store)

    admin, missing, blank = await asyncio.gather(
        users.get_user_for("adpwd123"),
        users.get_user_for("nope"),
        users.get_user_for(""),
    )

    assert admin.username == "admin"
    assert admin.roles == frozenset({"admin", "editor"})
    assert missing is None
    assert blank is None


async def test_concurrent_resolutions_share_one_fetch(demo_store, monkeypatch):
    calls = []
    lookup = demo_store.users_by_credentials

    def counting(credentials):
        calls.append(list(credentials))
        return lookup(credentials)

    monkeypatch.setattr(demo_store, "users_by_credentials", counting)
    users = UserRepository(demo_store)

    await asyncio.gather(
        users.get_user_for("apwd123"), users.get_user_for("bpwd123"), users.get_user_for("apwd123")
    )

    assert calls == [["apwd123", "bpwd123"]]


def test_credential_is_not_serialized():
    assert "credential" not in ADMIN.model_dump()


def test_store_rejects_duplicate_article_ids():
    with pytest.raises(ValueError):
        ContentStore(articles=[make_article(1, "A"), make_article(1, "B")])


def test_store_rejects_duplicate_credentials():
    with pytest.raises(ValueError):
        ContentStore(users=[ADMIN, ADMIN.model_copy(update={"id": 99})])


def test_demo_store_shape(demo_store):
    assert [u.username for u in demo_store.users] == ["admin", "alice", "bob"]
    assert [a.id for a in demo_store.iter_articles()] == [1, 2, 3]
    assert demo_store.find_article(3).access_policy.everyone.read is False
