"""Service layer for the mock endpoints."""

from .mock_service import MockEngine, MockRequest, MockResponse
from .payment_service import PaymentNotifier, InMemoryPaymentNotifier, HttpPaymentNotifier

__all__ = [
    "MockEngine",
    "MockRequest",
    "MockResponse",
    "PaymentNotifier",
    "InMemoryPaymentNotifier",
    "HttpPaymentNotifier",
]
