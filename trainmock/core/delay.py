"""Per-operation artificial latency."""

import asyncio
import logging
from typing import Dict, Mapping, Optional, Union

from ..models.enums import Operation
from .exceptions import ValidationError, get_error_message

logger = logging.getLogger(__name__)


class DelayController:
    """
    Holds one delay (in seconds) per simulated operation.

    Delays default to zero and are applied with ``asyncio.sleep`` so a
    delayed request only occupies its own task.
    """

    def __init__(self, delays: Optional[Mapping[Union[Operation, str], float]] = None):
        self._delays: Dict[Operation, float] = {op: 0.0 for op in Operation}
        for operation, seconds in (delays or {}).items():
            self.set(operation, seconds)

    def get(self, operation: Union[Operation, str]) -> float:
        return self._delays[Operation(operation)]

    def set(self, operation: Union[Operation, str], seconds: float) -> None:
        """
        Configure the delay for an operation.

        Raises:
            ValueError: If the operation name is unknown
            ValidationError: If seconds is negative
        """
        operation = Operation(operation)
        if seconds < 0:
            raise ValidationError(
                "VALIDATION_NEGATIVE_DELAY",
                get_error_message("VALIDATION_NEGATIVE_DELAY"),
                {"operation": operation.value, "seconds": seconds},
            )
        self._delays[operation] = float(seconds)
        logger.info(f"Delay for {operation.value} set to {seconds:.3f}s")

    def reset(self) -> None:
        for operation in Operation:
            self._delays[operation] = 0.0
        logger.info("All delays reset")

    def as_dict(self) -> Dict[str, float]:
        return {op.value: seconds for op, seconds in self._delays.items()}

    async def apply(self, operation: Operation) -> None:
        """Suspend the current task for the operation's configured delay."""
        seconds = self._delays[operation]
        if seconds > 0:
            await asyncio.sleep(seconds)
