"""Payment collaborator notified when a reservation is committed."""

import asyncio
import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import List, Optional

import httpx

from ..core.exceptions import PaymentError, get_error_message
from ..models.schemas import PaymentInformation

logger = logging.getLogger(__name__)


class PaymentNotifier(ABC):
    """Receives one notification per committed reservation."""

    @abstractmethod
    async def add_payment_information(self, reservation_id: int) -> None:
        """
        Record payment bookkeeping for a committed reservation.

        Raises:
            PaymentError: If the payment collaborator could not be reached
        """


class InMemoryPaymentNotifier(PaymentNotifier):
    """Keeps payment records in process memory for later inspection."""

    def __init__(self):
        self._payments: List[PaymentInformation] = []
        self._lock = asyncio.Lock()

    async def add_payment_information(self, reservation_id: int) -> None:
        info = PaymentInformation(
            reservation_id=reservation_id,
            recorded_at=datetime.now(timezone.utc),
        )
        async with self._lock:
            self._payments.append(info)
        logger.info(f"Recorded payment for reservation {reservation_id}")

    @property
    def payments(self) -> List[PaymentInformation]:
        return list(self._payments)

    @property
    def count(self) -> int:
        return len(self._payments)

    async def clear(self) -> int:
        """Drop every recorded payment and return how many there were."""
        async with self._lock:
            dropped = len(self._payments)
            self._payments.clear()
        logger.info(f"Cleared {dropped} recorded payments")
        return dropped


class HttpPaymentNotifier(PaymentNotifier):
    """
    Forwards payment notifications to an external payment service.

    Usage:
        notifier = HttpPaymentNotifier("http://payment:5000/payment")
        await notifier.add_payment_information(1111)
    """

    def __init__(
        self,
        url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the HTTP notifier.

        Args:
            url: Endpoint receiving ``{"reservation_id": ...}`` as JSON
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.url = url
        self.timeout = timeout
        self._transport = transport

    async def add_payment_information(self, reservation_id: int) -> None:
        payload = {"reservation_id": reservation_id}

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(self.url, json=payload)
                response.raise_for_status()

        except httpx.TimeoutException as e:
            logger.error("Payment notification timed out")
            raise PaymentError(
                "PAYMENT_NOTIFY_FAILED",
                get_error_message("PAYMENT_NOTIFY_FAILED"),
                {"reservation_id": reservation_id, "original_error": "timeout"},
            ) from e
        except httpx.HTTPStatusError as e:
            logger.error(f"Payment service HTTP error: {e.response.status_code}")
            raise PaymentError(
                "PAYMENT_NOTIFY_FAILED",
                get_error_message("PAYMENT_NOTIFY_FAILED"),
                {"reservation_id": reservation_id, "status_code": e.response.status_code},
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"Payment notification failed: {e}")
            raise PaymentError(
                "PAYMENT_NOTIFY_FAILED",
                get_error_message("PAYMENT_NOTIFY_FAILED"),
                {"reservation_id": reservation_id, "original_error": str(e)},
            ) from e

        logger.info(f"Payment service notified for reservation {reservation_id}")
