"""Pydantic schemas for request/response validation."""

from datetime import datetime
from typing import Optional, List, Dict
from pydantic import BaseModel, ConfigDict, Field


# ============ Station Schemas ============


class Station(BaseModel):
    """Station and which train types stop there."""

    id: int
    name: str
    is_stop_express: bool
    is_stop_semi_express: bool
    is_stop_local: bool


# ============ Train Search Schemas ============


class Train(BaseModel):
    """Train search result."""

    train_class: str
    train_name: str
    start: int = Field(..., description="始発駅ID")
    last: int = Field(..., description="終着駅ID")
    departure: str
    destination: str
    departure_time: datetime
    arrival_time: datetime
    seat_availability: Dict[str, str]
    seat_fare: Dict[str, int]


# ============ Seat Schemas ============


class TrainSeat(BaseModel):
    """A single physical seat in a car."""

    model_config = ConfigDict(populate_by_name=True)

    row: int = 0
    column: str = ""
    seat_class: str = Field(default="", alias="class")
    is_smoking_seat: bool = False
    is_occupied: bool = False


class TrainSeatSearchResponse(BaseModel):
    """Seats of one car of a train."""

    date: datetime
    train_class: str
    train_name: str
    car_number: int
    seats: List[TrainSeat]


# ============ Reservation Schemas ============


class ReservationRequest(BaseModel):
    """
    Reservation request body.

    Every field is optional on the wire; the reserve handler checks the
    train identification itself.
    """

    train_class: str = ""
    train_name: str = ""
    seat_class: str = ""
    seats: List[TrainSeat] = []
    adult: int = 0
    child: int = 0
    date: Optional[datetime] = None


class ReservationResponse(BaseModel):
    """Reservation result."""

    reservation_id: str
    is_ok: bool


class SeatReservation(BaseModel):
    """Reservation history entry."""

    id: int
    payment_method: str
    status: str
    reserve_at: datetime


# ============ Payment Schemas ============


class PaymentInformation(BaseModel):
    """Payment bookkeeping recorded when a reservation is committed."""

    reservation_id: int
    recorded_at: datetime


# ============ Control Schemas ============


class DelayUpdateRequest(BaseModel):
    """Per-operation delay update."""

    seconds: float = Field(..., ge=0, description="Delay in seconds")


class FaultUpdateRequest(BaseModel):
    """Fault injector update."""

    fail: bool = Field(..., description="Fail matching requests")
    paths: Optional[List[str]] = Field(
        default=None, description="Request paths to fail; all paths when omitted"
    )


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    fault_injected: bool
