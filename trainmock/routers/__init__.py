"""API routers."""

from .auth import router as auth_router
from .trains import router as trains_router
from .reservations import router as reservations_router
from .control import router as control_router

__all__ = [
    "auth_router",
    "trains_router",
    "reservations_router",
    "control_router",
]
