"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request, Response

from .config import Settings, settings
from .core.delay import DelayController
from .core.fault import FaultInjector
from .core.security import SessionCodec
from .core.session import CookieSessionStore, MemorySessionStore, SessionStore
from .models.schemas import HealthResponse
from .routers import auth_router, trains_router, reservations_router, control_router
from .routers.deps import get_engine, to_response
from .services.mock_service import MockEngine, MockRequest
from .services.payment_service import HttpPaymentNotifier, InMemoryPaymentNotifier, PaymentNotifier

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def build_engine(config: Settings) -> MockEngine:
    """Wire a MockEngine from settings."""
    session_store: SessionStore
    if config.SESSION_BACKEND == "memory":
        session_store = MemorySessionStore()
    else:
        key = config.SESSION_SECRET_KEY.encode() if config.SESSION_SECRET_KEY else None
        session_store = CookieSessionStore(SessionCodec(key))

    payment_notifier: PaymentNotifier
    if config.PAYMENT_NOTIFY_URL:
        payment_notifier = HttpPaymentNotifier(
            config.PAYMENT_NOTIFY_URL, timeout=config.PAYMENT_NOTIFY_TIMEOUT
        )
    else:
        payment_notifier = InMemoryPaymentNotifier()

    return MockEngine(
        session_store=session_store,
        payment_notifier=payment_notifier,
        fault_injector=FaultInjector(),
        delays=DelayController(config.OPERATION_DELAYS),
        session_cookie_name=config.SESSION_COOKIE_NAME,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    logger.info("Starting isutrain mock API...")
    logger.info(f"Configured delays: {app.state.engine.delays.as_dict()}")

    yield

    # Shutdown
    logger.info("isutrain mock API shutdown complete")


# Create FastAPI app
app = FastAPI(
    title="isutrain mock API",
    description="Configurable test double of the isutrain reservation API",
    version="1.0.0",
    lifespan=lifespan,
)
app.state.engine = build_engine(settings)

# Include routers
app.include_router(auth_router)
app.include_router(trains_router)
app.include_router(reservations_router)
app.include_router(control_router)


@app.post("/initialize", tags=["control"])
async def initialize(request: Request, engine: MockEngine = Depends(get_engine)) -> Response:
    """Reset hook called by the harness before a run; subject to fault injection."""
    return to_response(await engine.initialize(await MockRequest.from_request(request)))


# Health check endpoint
@app.get("/health", response_model=HealthResponse)
async def health_check(engine: MockEngine = Depends(get_engine)):
    """Health check endpoint."""
    return HealthResponse(status="healthy", fault_injected=engine.fault_injector.is_active)
