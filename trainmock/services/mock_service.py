"""Mock endpoint engine for the isutrain reservation API."""

import functools
import logging
import re
from datetime import datetime, timedelta
from http import HTTPStatus
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticSerializationError
from starlette.requests import Request

from .. import fixtures
from ..core.delay import DelayController
from ..core.exceptions import (
    MockError,
    ValidationError,
    InternalError,
    get_error_message,
)
from ..core.fault import FaultFunc, FaultInjector
from ..core.security import secure_random_str
from ..core.session import CSRF_TOKEN_KEY, USER_ID_KEY, CookieSessionStore, SessionStore
from ..models.enums import Operation
from ..models.schemas import (
    ReservationRequest,
    ReservationResponse,
    SeatReservation,
    Station,
    Train,
    TrainSeatSearchResponse,
)
from .payment_service import InMemoryPaymentNotifier, PaymentNotifier

logger = logging.getLogger(__name__)

DEFAULT_SESSION_COOKIE_NAME = "session_isutrain"

# Every logged-in caller is the same canned user.
MOCK_USER_ID = 1

_UINT64_MAX = 2**64 - 1
_DIGITS = re.compile(r"[0-9]+")

_stations_adapter = TypeAdapter(List[Station])
_trains_adapter = TypeAdapter(List[Train])
_seats_adapter = TypeAdapter(TrainSeatSearchResponse)
_reservation_adapter = TypeAdapter(ReservationResponse)
_seat_reservations_adapter = TypeAdapter(List[SeatReservation])


class MockRequest:
    """Router-independent view of an inbound request."""

    def __init__(
        self,
        method: str = "GET",
        path: str = "/",
        path_params: Optional[Mapping[str, str]] = None,
        query: Optional[Mapping[str, str]] = None,
        form: Optional[Mapping[str, str]] = None,
        cookies: Optional[Mapping[str, str]] = None,
        body: bytes = b"",
        form_error: Optional[str] = None,
    ):
        self.method = method
        self.path = path
        self.path_params = dict(path_params or {})
        self.query = dict(query or {})
        self.form = dict(form or {})
        self.cookies = dict(cookies or {})
        self.body = body
        self.form_error = form_error

    @classmethod
    async def from_request(cls, request: Request, parse_form: bool = False) -> "MockRequest":
        """Build a MockRequest from a Starlette request."""
        body = await request.body()
        form: Dict[str, str] = {}
        form_error = None
        if parse_form:
            try:
                async with request.form() as parsed:
                    form = {k: v for k, v in parsed.items() if isinstance(v, str)}
            except Exception as e:
                form_error = str(e) or type(e).__name__

        return cls(
            method=request.method,
            path=request.url.path,
            path_params={k: str(v) for k, v in request.path_params.items()},
            query=request.query_params,
            form=form,
            cookies=request.cookies,
            body=body,
            form_error=form_error,
        )


class MockResponse:
    """Body bytes and status code produced by an engine handler."""

    def __init__(
        self,
        body: bytes,
        status_code: int,
        media_type: str = "text/plain; charset=utf-8",
        cookies: Optional[Dict[str, str]] = None,
    ):
        self.body = body
        self.status_code = status_code
        self.media_type = media_type
        self.cookies = cookies or {}

    @classmethod
    def from_status(cls, status_code: int, cookies: Optional[Dict[str, str]] = None) -> "MockResponse":
        """Response whose body is the standard status phrase."""
        body = b"" if status_code == HTTPStatus.NO_CONTENT else HTTPStatus(status_code).phrase.encode()
        return cls(body, int(status_code), cookies=cookies)

    @classmethod
    def json(cls, body: bytes, status_code: int = HTTPStatus.OK) -> "MockResponse":
        return cls(body, int(status_code), media_type="application/json")


Handler = Callable[["MockEngine", MockRequest], Awaitable[MockResponse]]


def mock_endpoint(operation: Operation) -> Callable[[Handler], Handler]:
    """
    Wrap an engine handler with its configured delay and error mapping.

    The delay always runs to completion before the handler body. Any
    MockError is answered with its status phrase; anything else with 500.
    """

    def decorator(func: Handler) -> Handler:
        @functools.wraps(func)
        async def wrapper(self: "MockEngine", request: MockRequest) -> MockResponse:
            await self.delays.apply(operation)
            try:
                return await func(self, request)
            except ValidationError as e:
                logger.warning(f"{operation.value} rejected: {e.code} {e.details}")
                return MockResponse.from_status(e.status_code)
            except MockError as e:
                logger.warning(f"{operation.value} failed: {e.code} {e.details}")
                return MockResponse.from_status(e.status_code)
            except Exception:
                logger.exception(f"{operation.value} failed unexpectedly")
                return MockResponse.from_status(HTTPStatus.INTERNAL_SERVER_ERROR)

        return wrapper

    return decorator


def _encode(adapter: TypeAdapter, value: Any) -> bytes:
    try:
        return adapter.dump_json(value, by_alias=True)
    except PydanticSerializationError as e:
        raise InternalError(
            "ENCODING_FAILED", get_error_message("ENCODING_FAILED"), {"original_error": str(e)}
        ) from e


def _require(values: Mapping[str, str], *names: str) -> List[str]:
    """Return the named values, rejecting missing or empty ones."""
    missing = [name for name in names if not values.get(name)]
    if missing:
        raise ValidationError(
            "VALIDATION_MISSING_FIELD",
            get_error_message("VALIDATION_MISSING_FIELD"),
            {"fields": missing},
        )
    return [values[name] for name in names]


def _invalid(field: str, value: Any) -> ValidationError:
    return ValidationError(
        "VALIDATION_INVALID_FIELD",
        get_error_message("VALIDATION_INVALID_FIELD"),
        {"field": field, "value": value},
    )


def parse_iso8601(value: str) -> datetime:
    """
    Parse an ISO-8601 date or date-time.

    Raises:
        ValidationError: If unparseable or the zero instant (0001-01-01T00:00:00Z)
    """
    try:
        parsed = datetime.fromisoformat(value)
    except (TypeError, ValueError) as e:
        raise _invalid("use_at", value) from e

    offset = parsed.utcoffset()
    if parsed.replace(tzinfo=None) == datetime.min and offset in (None, timedelta(0)):
        raise _invalid("use_at", value)
    return parsed


def parse_uint(field: str, value: Optional[str]) -> int:
    """Parse an unsigned 64-bit decimal integer."""
    if value is None or not _DIGITS.fullmatch(value):
        raise _invalid(field, value)
    number = int(value)
    if number > _UINT64_MAX:
        raise _invalid(field, value)
    return number


class MockEngine:
    """
    One handler per simulated isutrain operation.

    Features:
    - Per-operation configurable delay (DelayController)
    - Fault injection on Initialize (FaultInjector)
    - Session-backed login simulation (SessionStore)
    - Payment notification on commit (PaymentNotifier)
    """

    def __init__(
        self,
        session_store: Optional[SessionStore] = None,
        payment_notifier: Optional[PaymentNotifier] = None,
        fault_injector: Optional[FaultInjector] = None,
        delays: Optional[DelayController] = None,
        session_cookie_name: str = DEFAULT_SESSION_COOKIE_NAME,
    ):
        self.session_store = session_store or CookieSessionStore()
        self.payment_notifier = payment_notifier or InMemoryPaymentNotifier()
        self.fault_injector = fault_injector or FaultInjector()
        self.delays = delays or DelayController()
        self.session_cookie_name = session_cookie_name

    def inject(self, func: Optional[FaultFunc]) -> None:
        """Replace the fault function consulted by Initialize."""
        self.fault_injector.inject(func)

    @mock_endpoint(Operation.INITIALIZE)
    async def initialize(self, request: MockRequest) -> MockResponse:
        self.fault_injector.check(request.path)
        return MockResponse.from_status(HTTPStatus.ACCEPTED)

    @mock_endpoint(Operation.REGISTER)
    async def register(self, request: MockRequest) -> MockResponse:
        """Accept a user registration with non-empty email and password."""
        if request.form_error:
            raise ValidationError(
                "VALIDATION_INVALID_BODY",
                get_error_message("VALIDATION_INVALID_BODY"),
                {"original_error": request.form_error},
            )
        _require(request.form, "email", "password")
        return MockResponse.from_status(HTTPStatus.ACCEPTED)

    @mock_endpoint(Operation.LOGIN)
    async def login(self, request: MockRequest) -> MockResponse:
        """
        Simulate a login.

        Stores the canned user id and a fresh anti-forgery token in the
        caller's session and hands the session cookie back.
        """
        if request.form_error:
            raise ValidationError(
                "VALIDATION_INVALID_BODY",
                get_error_message("VALIDATION_INVALID_BODY"),
                {"original_error": request.form_error},
            )
        _require(request.form, "username", "password")

        session = await self.session_store.get(request.cookies.get(self.session_cookie_name))
        self.session_store.set(session, USER_ID_KEY, MOCK_USER_ID)
        self.session_store.set(session, CSRF_TOKEN_KEY, secure_random_str())
        cookie = await self.session_store.save(session)

        return MockResponse.from_status(
            HTTPStatus.ACCEPTED, cookies={self.session_cookie_name: cookie}
        )

    @mock_endpoint(Operation.LIST_STATIONS)
    async def list_stations(self, request: MockRequest) -> MockResponse:
        return MockResponse.json(_encode(_stations_adapter, fixtures.STATIONS))

    @mock_endpoint(Operation.SEARCH_TRAINS)
    async def search_trains(self, request: MockRequest) -> MockResponse:
        """Return the canned trains for a use_at/from/to query."""
        (use_at_raw,) = _require(request.query, "use_at")
        use_at = parse_iso8601(use_at_raw)
        _require(request.query, "from", "to")

        return MockResponse.json(_encode(_trains_adapter, fixtures.search_trains(use_at)))

    @mock_endpoint(Operation.LIST_TRAIN_SEATS)
    async def list_train_seats(self, request: MockRequest) -> MockResponse:
        """Return the canned seats of one car."""
        train_class, train_name = _require(request.query, "train_class", "train_name")
        _require(request.query, "from", "to")
        car_number = parse_uint("car_number", request.query.get("car_number"))
        if car_number == 0:
            raise _invalid("car_number", car_number)

        seats = fixtures.train_seats(train_class, train_name, car_number)
        return MockResponse.json(_encode(_seats_adapter, seats))

    @mock_endpoint(Operation.RESERVE)
    async def reserve(self, request: MockRequest) -> MockResponse:
        """Accept any reservation that names a train."""
        try:
            reservation = ReservationRequest.model_validate_json(request.body)
        except PydanticValidationError as e:
            raise ValidationError(
                "VALIDATION_INVALID_BODY",
                get_error_message("VALIDATION_INVALID_BODY"),
                {"errors": e.error_count()},
            ) from e

        if not reservation.train_class or not reservation.train_name:
            raise ValidationError(
                "VALIDATION_MISSING_FIELD",
                get_error_message("VALIDATION_MISSING_FIELD"),
                {"fields": ["train_class", "train_name"]},
            )

        body = _encode(_reservation_adapter, fixtures.reservation_response())
        return MockResponse.json(body, HTTPStatus.ACCEPTED)

    @mock_endpoint(Operation.COMMIT_RESERVATION)
    async def commit_reservation(self, request: MockRequest) -> MockResponse:
        reservation_id = parse_uint("reservation_id", request.path_params.get("reservation_id"))

        await self.payment_notifier.add_payment_information(reservation_id)

        return MockResponse.from_status(HTTPStatus.ACCEPTED)

    @mock_endpoint(Operation.CANCEL_RESERVATION)
    async def cancel_reservation(self, request: MockRequest) -> MockResponse:
        parse_uint("reservation_id", request.path_params.get("reservation_id"))
        return MockResponse.from_status(HTTPStatus.NO_CONTENT)

    @mock_endpoint(Operation.LIST_RESERVATIONS)
    async def list_reservations(self, request: MockRequest) -> MockResponse:
        return MockResponse.json(_encode(_seat_reservations_adapter, fixtures.seat_reservations()))
