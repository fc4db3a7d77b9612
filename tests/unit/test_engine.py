# tests/unit/test_engine.py
from datetime import datetime, timezone

import pytest

from trainmock.core.exceptions import ValidationError
from trainmock.core.session import MemorySessionStore
from trainmock.services.mock_service import (
    MockEngine,
    MockRequest,
    MockResponse,
    parse_iso8601,
    parse_uint,
)


class CountingNotifier:
    def __init__(self):
        self.calls = []

    async def add_payment_information(self, reservation_id):
        self.calls.append(reservation_id)


def test_parse_iso8601_accepts_utc_suffix():
    assert parse_iso8601("2020-01-01T10:00:00Z") == datetime(2020, 1, 1, 10, tzinfo=timezone.utc)


@pytest.mark.parametrize("value", ["", "2020/01/01", "0001-01-01T00:00:00+00:00"])
def test_parse_iso8601_rejects(value):
    with pytest.raises(ValidationError):
        parse_iso8601(value)


def test_parse_uint():
    assert parse_uint("reservation_id", "0") == 0
    assert parse_uint("reservation_id", "18446744073709551615") == 2**64 - 1
    for bad in [None, "", " 1", "+1", "1_000", "١٢"]:
        with pytest.raises(ValidationError):
            parse_uint("reservation_id", bad)


def test_status_response_bodies():
    assert MockResponse.from_status(400).body == b"Bad Request"
    assert MockResponse.from_status(204).body == b""


@pytest.mark.asyncio
async def test_login_with_memory_store():
    store = MemorySessionStore()
    engine = MockEngine(session_store=store)

    response = await engine.login(
        MockRequest(method="POST", form={"username": "u", "password": "p"})
    )
    assert response.status_code == 202

    session_id = response.cookies["session_isutrain"]
    values = store.peek(session_id)
    assert values["user_id"] == 1
    assert values["csrf_token"]


@pytest.mark.asyncio
async def test_login_reports_form_parse_failure():
    engine = MockEngine()
    response = await engine.login(MockRequest(method="POST", form_error="bad multipart"))
    assert response.status_code == 400
    assert response.cookies == {}


@pytest.mark.asyncio
async def test_login_token_failure_is_internal_error(monkeypatch):
    from trainmock.services import mock_service

    def broken(*args, **kwargs):
        raise mock_service.InternalError("TOKEN_GENERATION_FAILED", "no entropy")

    monkeypatch.setattr(mock_service, "secure_random_str", broken)

    response = await MockEngine().login(
        MockRequest(method="POST", form={"username": "u", "password": "p"})
    )
    assert response.status_code == 500
    assert response.cookies == {}


@pytest.mark.asyncio
async def test_commit_calls_notifier_exactly_once():
    notifier = CountingNotifier()
    engine = MockEngine(payment_notifier=notifier)

    bad = await engine.commit_reservation(MockRequest(path_params={"reservation_id": "abc"}))
    assert bad.status_code == 400
    assert notifier.calls == []

    ok = await engine.commit_reservation(MockRequest(path_params={"reservation_id": "7"}))
    assert ok.status_code == 202
    assert notifier.calls == [7]


@pytest.mark.asyncio
async def test_unexpected_error_maps_to_500():
    class BrokenNotifier:
        async def add_payment_information(self, reservation_id):
            raise KeyError("boom")

    engine = MockEngine(payment_notifier=BrokenNotifier())
    response = await engine.commit_reservation(MockRequest(path_params={"reservation_id": "1"}))
    assert response.status_code == 500


def test_arrival_is_clamped_near_max_datetime():
    from trainmock import fixtures

    use_at = datetime(9999, 12, 31, 23, 59)
    trains = fixtures.search_trains(use_at)

    assert len(trains) == 2
    for train in trains:
        assert train.departure_time == use_at
        assert train.arrival_time == datetime.max
