"""Canned response data served by the mock endpoints."""

from datetime import datetime, timedelta, timezone
from typing import List, Optional

from .models.enums import SeatClass, SeatAvailability, PaymentMethod, ReservationStatus
from .models.schemas import (
    Station,
    Train,
    TrainSeat,
    TrainSeatSearchResponse,
    ReservationResponse,
    SeatReservation,
)

STATIONS = [
    Station(id=1, name="東京", is_stop_express=True, is_stop_semi_express=True, is_stop_local=True),
    Station(id=2, name="名古屋", is_stop_express=True, is_stop_semi_express=True, is_stop_local=True),
    Station(id=3, name="京都", is_stop_express=False, is_stop_semi_express=True, is_stop_local=True),
    Station(id=4, name="大阪", is_stop_express=True, is_stop_semi_express=True, is_stop_local=True),
]

SEAT_AVAILABILITY = {
    SeatClass.PREMIUM.value: SeatAvailability.AVAILABLE.value,
    SeatClass.PREMIUM_SMOKE.value: SeatAvailability.SOLD_OUT.value,
    SeatClass.RESERVED.value: SeatAvailability.FEW.value,
    SeatClass.RESERVED_SMOKE.value: SeatAvailability.AVAILABLE.value,
    SeatClass.NON_RESERVED.value: SeatAvailability.AVAILABLE.value,
}

SEAT_FARE = {
    SeatClass.PREMIUM.value: 24000,
    SeatClass.PREMIUM_SMOKE.value: 24500,
    SeatClass.RESERVED.value: 19000,
    SeatClass.RESERVED_SMOKE.value: 19500,
    SeatClass.NON_RESERVED.value: 15000,
}

# (train_class, train_name, start, last, departure, destination, travel time)
TRAIN_TIMETABLE = [
    ("のぞみ", "96号", 1, 2, "東京", "名古屋", timedelta(minutes=100)),
    ("こだま", "96号", 2, 4, "名古屋", "大阪", timedelta(minutes=65)),
]

RESERVATION_ID = "1111111111"

SEAT_RESERVATION_ID = 1111


def _arrival(use_at: datetime, travel_time: timedelta) -> datetime:
    """Arrival time, clamped to the last representable instant."""
    latest = datetime.max.replace(tzinfo=use_at.tzinfo)
    if use_at > latest - travel_time:
        return latest
    return use_at + travel_time


def search_trains(use_at: datetime) -> List[Train]:
    """Trains departing at the requested time, one per timetable row."""
    return [
        Train(
            train_class=train_class,
            train_name=train_name,
            start=start,
            last=last,
            departure=departure,
            destination=destination,
            departure_time=use_at,
            arrival_time=_arrival(use_at, travel_time),
            seat_availability=dict(SEAT_AVAILABILITY),
            seat_fare=dict(SEAT_FARE),
        )
        for train_class, train_name, start, last, departure, destination, travel_time in TRAIN_TIMETABLE
    ]


def train_seats(
    train_class: str,
    train_name: str,
    car_number: int,
    use_at: Optional[datetime] = None,
) -> TrainSeatSearchResponse:
    """A car with a single free reserved seat."""
    return TrainSeatSearchResponse(
        date=use_at or datetime.now(timezone.utc),
        train_class=train_class,
        train_name=train_name,
        car_number=car_number,
        seats=[
            TrainSeat(row=1, column="A", seat_class=SeatClass.RESERVED.value),
        ],
    )


def reservation_response() -> ReservationResponse:
    return ReservationResponse(reservation_id=RESERVATION_ID, is_ok=True)


def seat_reservations() -> List[SeatReservation]:
    return [
        SeatReservation(
            id=SEAT_RESERVATION_ID,
            payment_method=PaymentMethod.CREDIT_CARD.value,
            status=ReservationStatus.PENDING.value,
            reserve_at=datetime.now(timezone.utc),
        ),
    ]
