# tests/unit/test_session.py
import asyncio

import pytest

from trainmock.core.exceptions import SessionError
from trainmock.core.security import SessionCodec, secure_random_str
from trainmock.core.session import CookieSessionStore, MemorySessionStore


def test_secure_random_str_is_hex_and_unique():
    a = secure_random_str()
    b = secure_random_str()
    assert len(a) == 40
    int(a, 16)
    assert a != b


def test_codec_rejects_cookie_from_other_key():
    cookie = SessionCodec().encode({"user_id": 1})
    with pytest.raises(SessionError):
        SessionCodec().decode(cookie)


def test_codec_cookie_needs_no_quoting():
    cookie = SessionCodec().encode({"csrf_token": "x" * 40})
    assert "=" not in cookie


@pytest.mark.asyncio
async def test_cookie_store_new_session_without_cookie():
    store = CookieSessionStore()
    session = await store.get(None)
    assert session.is_new
    assert session.values == {}


@pytest.mark.asyncio
async def test_cookie_store_keeps_attributes_in_cookie():
    store = CookieSessionStore()
    session = await store.get(None)
    store.set(session, "user_id", 1)
    store.set(session, "csrf_token", "abc")
    cookie = await store.save(session)

    again = await store.get(cookie)
    assert not again.is_new
    assert again.user_id == 1
    assert again.csrf_token == "abc"


@pytest.mark.asyncio
@pytest.mark.parametrize("cookie", ["garbage", "gAAAAA", "ünïcode"])
async def test_cookie_store_malformed_cookie(cookie):
    with pytest.raises(SessionError):
        await CookieSessionStore().get(cookie)


@pytest.mark.asyncio
async def test_memory_store_malformed_cookie():
    with pytest.raises(SessionError):
        await MemorySessionStore().get("not-a-session-id")


@pytest.mark.asyncio
async def test_memory_store_unknown_id_starts_fresh_session():
    store = MemorySessionStore()
    session = await store.get("0" * 32)
    assert session.is_new
    assert session.session_id != "0" * 32


@pytest.mark.asyncio
async def test_memory_store_concurrent_callers_do_not_interfere():
    store = MemorySessionStore()

    async def login(user_id: int) -> str:
        session = await store.get(None)
        store.set(session, "user_id", user_id)
        await asyncio.sleep(0)
        return await store.save(session)

    cookies = await asyncio.gather(*(login(i) for i in range(20)))

    assert store.session_count == 20
    for user_id, cookie in enumerate(cookies):
        session = await store.get(cookie)
        assert session.user_id == user_id
