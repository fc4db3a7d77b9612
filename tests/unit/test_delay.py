# tests/unit/test_delay.py
import asyncio
import time

import pytest

from trainmock.core.delay import DelayController
from trainmock.core.exceptions import ValidationError
from trainmock.models.enums import Operation
from trainmock.services.mock_service import MockEngine, MockRequest


def test_defaults_to_zero_for_every_operation():
    delays = DelayController()
    assert delays.as_dict() == {op.value: 0.0 for op in Operation}


def test_initial_mapping_accepts_names():
    delays = DelayController({"login": 0.5, Operation.RESERVE: 1})
    assert delays.get(Operation.LOGIN) == 0.5
    assert delays.get("reserve") == 1.0


def test_unknown_operation():
    with pytest.raises(ValueError):
        DelayController({"teleport": 1})


def test_negative_delay():
    with pytest.raises(ValidationError):
        DelayController().set("login", -0.1)


def test_reset():
    delays = DelayController({"login": 0.5})
    delays.reset()
    assert delays.get("login") == 0.0


@pytest.mark.asyncio
async def test_handler_waits_for_its_delay():
    engine = MockEngine(delays=DelayController({"list_stations": 0.2}))

    start = time.perf_counter()
    response = await engine.list_stations(MockRequest())
    elapsed = time.perf_counter() - start

    assert response.status_code == 200
    assert elapsed >= 0.2


@pytest.mark.asyncio
async def test_delay_runs_before_validation():
    engine = MockEngine(delays=DelayController({"search_trains": 0.2}))

    start = time.perf_counter()
    response = await engine.search_trains(MockRequest(query={}))
    elapsed = time.perf_counter() - start

    assert response.status_code == 400
    assert elapsed >= 0.2


@pytest.mark.asyncio
async def test_delays_do_not_block_each_other():
    engine = MockEngine(delays=DelayController({"list_reservations": 0.3}))

    start = time.perf_counter()
    responses = await asyncio.gather(
        *(engine.list_reservations(MockRequest()) for _ in range(5))
    )
    elapsed = time.perf_counter() - start

    assert all(r.status_code == 200 for r in responses)
    assert elapsed < 1.0
