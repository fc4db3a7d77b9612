# tests/conftest.py
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from trainmock.main import app
from trainmock.routers.deps import get_engine
from trainmock.services.mock_service import MockEngine
from trainmock.services.payment_service import InMemoryPaymentNotifier


@pytest.fixture()
def payment_notifier() -> InMemoryPaymentNotifier:
    return InMemoryPaymentNotifier()


@pytest.fixture()
def engine(payment_notifier: InMemoryPaymentNotifier) -> MockEngine:
    """
    Fresh engine per test so delays, faults and payments never leak.
    """
    return MockEngine(payment_notifier=payment_notifier)


@pytest.fixture()
def client(engine: MockEngine):
    """
    FastAPI client with the engine dependency overridden.
    """
    app.dependency_overrides[get_engine] = lambda: engine
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
