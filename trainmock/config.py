"""Application configuration."""

from pydantic_settings import BaseSettings
from typing import Dict, Literal, Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server
    DEBUG: bool = False

    # Session
    SESSION_COOKIE_NAME: str = "session_isutrain"
    SESSION_SECRET_KEY: Optional[str] = None  # Fernet key; random per process if unset
    SESSION_BACKEND: Literal["cookie", "memory"] = "cookie"

    # Artificial latency, operation name -> seconds (JSON in the environment)
    OPERATION_DELAYS: Dict[str, float] = {}

    # Payment collaborator; in-memory bookkeeping when unset
    PAYMENT_NOTIFY_URL: Optional[str] = None
    PAYMENT_NOTIFY_TIMEOUT: float = 10.0

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


settings = Settings()
