"""Pydantic models for the API."""

from .schemas import (
    Station,
    Train,
    TrainSeat,
    TrainSeatSearchResponse,
    ReservationRequest,
    ReservationResponse,
    SeatReservation,
    PaymentInformation,
    DelayUpdateRequest,
    FaultUpdateRequest,
    HealthResponse,
)
from .enums import Operation, SeatClass, SeatAvailability, PaymentMethod, ReservationStatus

__all__ = [
    "Station",
    "Train",
    "TrainSeat",
    "TrainSeatSearchResponse",
    "ReservationRequest",
    "ReservationResponse",
    "SeatReservation",
    "PaymentInformation",
    "DelayUpdateRequest",
    "FaultUpdateRequest",
    "HealthResponse",
    "Operation",
    "SeatClass",
    "SeatAvailability",
    "PaymentMethod",
    "ReservationStatus",
]
