"""Security utilities for session cookies and anti-forgery tokens."""

import json
import secrets
from typing import Any, Dict, Optional

from cryptography.fernet import Fernet, InvalidToken

from .exceptions import InternalError, SessionError, get_error_message

CSRF_TOKEN_BYTES = 20


def secure_random_str(nbytes: int = CSRF_TOKEN_BYTES) -> str:
    """Return a random hex string suitable for an anti-forgery token."""
    try:
        return secrets.token_hex(nbytes)
    except (OSError, NotImplementedError) as e:
        raise InternalError(
            "TOKEN_GENERATION_FAILED",
            get_error_message("TOKEN_GENERATION_FAILED"),
            {"original_error": str(e)},
        ) from e


class SessionCodec:
    """
    Encrypts session attributes into an opaque cookie value.

    - Attributes are JSON-encoded, then sealed with Fernet (AES-128-CBC + HMAC)
    - Key is generated per server instance unless one is supplied
    - Tampered or foreign cookies fail to decode
    """

    def __init__(self, key: Optional[bytes] = None):
        self._key = key or Fernet.generate_key()
        self._fernet = Fernet(self._key)

    def encode(self, values: Dict[str, Any]) -> str:
        """Seal session attributes into a cookie value."""
        try:
            payload = json.dumps(values, separators=(",", ":")).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise InternalError(
                "ENCODING_FAILED",
                get_error_message("ENCODING_FAILED"),
                {"original_error": str(e)},
            ) from e
        # Padding is dropped so the value never needs cookie quoting
        return self._fernet.encrypt(payload).decode("ascii").rstrip("=")

    def decode(self, cookie: str) -> Dict[str, Any]:
        """Open a cookie value produced by :meth:`encode`."""
        padded = cookie + "=" * (-len(cookie) % 4)
        try:
            values = json.loads(self._fernet.decrypt(padded.encode("ascii")))
        except (InvalidToken, UnicodeError, ValueError) as e:
            raise SessionError(
                "SESSION_INVALID", get_error_message("SESSION_INVALID")
            ) from e
        if not isinstance(values, dict):
            raise SessionError("SESSION_INVALID", get_error_message("SESSION_INVALID"))
        return values
