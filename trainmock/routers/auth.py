"""Registration and login router."""

from fastapi import APIRouter, Depends, Request, Response

from ..services.mock_service import MockEngine, MockRequest
from .deps import get_engine, to_response

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/register")
async def register(request: Request, engine: MockEngine = Depends(get_engine)) -> Response:
    """Register a user (form: email, password)."""
    mock_request = await MockRequest.from_request(request, parse_form=True)
    return to_response(await engine.register(mock_request))


@router.post("/login")
async def login(request: Request, engine: MockEngine = Depends(get_engine)) -> Response:
    """
    Login (form: username, password).

    On success the session cookie carries the user id and a fresh
    anti-forgery token.
    """
    mock_request = await MockRequest.from_request(request, parse_form=True)
    return to_response(await engine.login(mock_request))
