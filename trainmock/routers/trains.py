"""Station listing, train search and seat listing router."""

from fastapi import APIRouter, Depends, Request, Response

from ..services.mock_service import MockEngine, MockRequest
from .deps import get_engine, to_response

router = APIRouter(prefix="/api/train", tags=["trains"])


@router.get("/search/stations")
async def list_stations(request: Request, engine: MockEngine = Depends(get_engine)) -> Response:
    return to_response(await engine.list_stations(await MockRequest.from_request(request)))


@router.get("/search")
async def search_trains(request: Request, engine: MockEngine = Depends(get_engine)) -> Response:
    """
    Search trains (query: use_at, from, to).

    ``use_at`` is an ISO-8601 date-time.
    """
    return to_response(await engine.search_trains(await MockRequest.from_request(request)))


@router.get("/search/seats")
async def list_train_seats(request: Request, engine: MockEngine = Depends(get_engine)) -> Response:
    """List seats of a car (query: train_class, train_name, car_number, from, to)."""
    return to_response(await engine.list_train_seats(await MockRequest.from_request(request)))
