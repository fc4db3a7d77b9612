"""Shared router dependencies."""

from fastapi import Request, Response

from ..services.mock_service import MockEngine, MockResponse


def get_engine(request: Request) -> MockEngine:
    """Engine attached to the running application."""
    return request.app.state.engine


def to_response(result: MockResponse) -> Response:
    """Turn an engine result into a FastAPI response."""
    response = Response(
        content=result.body,
        status_code=result.status_code,
        media_type=result.media_type if result.body else None,
    )
    for name, value in result.cookies.items():
        response.set_cookie(name, value, path="/", httponly=True)
    return response
