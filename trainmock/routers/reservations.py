"""Reservation management router."""

from fastapi import APIRouter, Depends, Request, Response

from ..services.mock_service import MockEngine, MockRequest
from .deps import get_engine, to_response

router = APIRouter(prefix="/api/train", tags=["reservations"])


@router.post("/reserve")
async def reserve(request: Request, engine: MockEngine = Depends(get_engine)) -> Response:
    """Reserve seats (JSON body: ReservationRequest)."""
    return to_response(await engine.reserve(await MockRequest.from_request(request)))


@router.post("/reserve/{reservation_id}/commit")
async def commit_reservation(
    reservation_id: str,
    request: Request,
    engine: MockEngine = Depends(get_engine),
) -> Response:
    """
    Commit a reservation.

    The payment collaborator is notified once per accepted commit.
    """
    return to_response(await engine.commit_reservation(await MockRequest.from_request(request)))


@router.delete("/reserve/")
@router.delete("/reserve/{reservation_id}")
async def cancel_reservation(request: Request, engine: MockEngine = Depends(get_engine)) -> Response:
    """Cancel a reservation; an empty id is answered like a malformed one."""
    return to_response(await engine.cancel_reservation(await MockRequest.from_request(request)))


@router.get("/reservations")
async def list_reservations(request: Request, engine: MockEngine = Depends(get_engine)) -> Response:
    """Reservation history of the logged-in account."""
    return to_response(await engine.list_reservations(await MockRequest.from_request(request)))
