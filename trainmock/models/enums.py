"""Enumeration types for the API."""

from enum import Enum


class Operation(str, Enum):
    """Simulated endpoints, used as keys for per-operation delays."""

    INITIALIZE = "initialize"
    REGISTER = "register"
    LOGIN = "login"
    LIST_STATIONS = "list_stations"
    SEARCH_TRAINS = "search_trains"
    LIST_TRAIN_SEATS = "list_train_seats"
    RESERVE = "reserve"
    COMMIT_RESERVATION = "commit_reservation"
    CANCEL_RESERVATION = "cancel_reservation"
    LIST_RESERVATIONS = "list_reservations"


class SeatClass(str, Enum):
    """Seat classes used as keys of availability and fare tables."""

    PREMIUM = "premium"
    PREMIUM_SMOKE = "premium_smoke"
    RESERVED = "reserved"
    RESERVED_SMOKE = "reserved_smoke"
    NON_RESERVED = "non_reserved"


class SeatAvailability(str, Enum):
    """Availability symbols shown in search results."""

    AVAILABLE = "○"  # 空席あり
    FEW = "△"  # 残りわずか
    SOLD_OUT = "×"  # 満席


class PaymentMethod(str, Enum):
    """Payment method tags for reservation history."""

    CREDIT_CARD = "credit_card"


class ReservationStatus(str, Enum):
    """Reservation status tags."""

    PENDING = "pending"
    OK = "ok"
    CANCEL = "cancel"
