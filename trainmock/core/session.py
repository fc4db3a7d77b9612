"""Session stores keyed by the caller's session cookie."""

from abc import ABC, abstractmethod
from typing import Optional, Dict, Any
from uuid import UUID, uuid4
import asyncio
import logging

from .security import SessionCodec
from .exceptions import SessionError, get_error_message

logger = logging.getLogger(__name__)

USER_ID_KEY = "user_id"
CSRF_TOKEN_KEY = "csrf_token"


class Session:
    """Attributes attached to one caller."""

    def __init__(
        self,
        session_id: str,
        values: Optional[Dict[str, Any]] = None,
        is_new: bool = False,
    ):
        self.session_id = session_id
        self.values: Dict[str, Any] = dict(values or {})
        self.is_new = is_new

    @property
    def user_id(self) -> Optional[int]:
        return self.values.get(USER_ID_KEY)

    @property
    def csrf_token(self) -> Optional[str]:
        return self.values.get(CSRF_TOKEN_KEY)


class SessionStore(ABC):
    """
    Maps a session cookie to a :class:`Session`.

    Sessions are created on first access and never destroyed.
    """

    @abstractmethod
    async def get(self, credential: Optional[str]) -> Session:
        """
        Return the session for a cookie value, creating an empty one if needed.

        Raises:
            SessionError: If the cookie value is malformed
        """

    def set(self, session: Session, key: str, value: Any) -> None:
        """Set a single session attribute."""
        session.values[key] = value

    @abstractmethod
    async def save(self, session: Session) -> str:
        """Persist the session and return the cookie value to hand back."""


class CookieSessionStore(SessionStore):
    """Keeps all session attributes inside the encrypted cookie itself."""

    def __init__(self, codec: Optional[SessionCodec] = None):
        self._codec = codec or SessionCodec()

    async def get(self, credential: Optional[str]) -> Session:
        if not credential:
            return Session(session_id="", is_new=True)
        return Session(session_id="", values=self._codec.decode(credential))

    async def save(self, session: Session) -> str:
        session.is_new = False
        return self._codec.encode(session.values)

    def decode(self, credential: str) -> Dict[str, Any]:
        """Return the attributes carried by a cookie value."""
        return self._codec.decode(credential)


class MemorySessionStore(SessionStore):
    """
    Keeps session attributes in process memory.

    The cookie carries only a random session id. All access to the backing
    map goes through a single lock.
    """

    def __init__(self):
        self._sessions: Dict[str, Dict[str, Any]] = {}
        self._lock = asyncio.Lock()

    @staticmethod
    def _parse_id(credential: str) -> str:
        try:
            return UUID(hex=credential).hex
        except ValueError as e:
            raise SessionError(
                "SESSION_INVALID", get_error_message("SESSION_INVALID")
            ) from e

    async def get(self, credential: Optional[str]) -> Session:
        if credential:
            session_id = self._parse_id(credential)
            async with self._lock:
                values = self._sessions.get(session_id)
            if values is not None:
                return Session(session_id=session_id, values=values)
            logger.debug(f"Unknown session {session_id[:8]}..., starting a new one")

        return Session(session_id=uuid4().hex, is_new=True)

    async def save(self, session: Session) -> str:
        async with self._lock:
            self._sessions[session.session_id] = dict(session.values)
        session.is_new = False
        return session.session_id

    def peek(self, session_id: str) -> Optional[Dict[str, Any]]:
        """Return a copy of the stored attributes, if any."""
        values = self._sessions.get(session_id)
        return dict(values) if values is not None else None

    @property
    def session_count(self) -> int:
        return len(self._sessions)
