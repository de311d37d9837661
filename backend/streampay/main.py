"""StreamPay API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map StreamPayError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - ClaimableAmountService built once on startup via lifespan, held on app.state

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Service wired explicitly from Settings instead of a module-level default instance
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from streampay.api.error_handlers import register_error_handlers
from streampay.api.routes import claimable, health
from streampay.config import get_settings
from streampay.infrastructure.observability import setup_logging
from streampay.services.claimable_service import ClaimableAmountService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.claimable_service = ClaimableAmountService.from_settings(settings)
    logger.info(
        f"StreamPay API started (claimable cache ttl={settings.claimable_cache_ttl_ms}ms, "
        f"fingerprint={settings.claimable_fingerprint_mode.value})",
    )
    yield
    app.state.claimable_service.clear_cache()
    logger.info("StreamPay API shutting down")


app = FastAPI(
    title="StreamPay Claimable API", version="1.0.0", lifespan=lifespan,
)

# CORS — configured from settings, not hardcoded
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(claimable.router)

register_error_handlers(app)
