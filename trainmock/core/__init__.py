"""Core modules for the API."""

from .exceptions import (
    MockError,
    ValidationError,
    SessionError,
    InternalError,
    InjectedFault,
    PaymentError,
)
from .session import SessionStore, CookieSessionStore, MemorySessionStore, Session
from .security import SessionCodec
from .fault import FaultInjector
from .delay import DelayController

__all__ = [
    "MockError",
    "ValidationError",
    "SessionError",
    "InternalError",
    "InjectedFault",
    "PaymentError",
    "SessionStore",
    "CookieSessionStore",
    "MemorySessionStore",
    "Session",
    "SessionCodec",
    "FaultInjector",
    "DelayController",
]
