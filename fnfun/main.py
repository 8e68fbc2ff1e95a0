"""FnFun API — FastAPI application entry point and wiring code.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map FnFunError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - The enterprise lookup is configured once, on startup, from settings;
      routes receive it without knowing host or port
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fnfun.api.error_handlers import register_error_handlers
from fnfun.api.routes import compositions, enterprises, health, urls
from fnfun.config import get_settings
from fnfun.core.multiple_argument_lists import lookup_enterprise
from fnfun.infrastructure.observability import setup_logging
from fnfun.version import __version__

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.enterprise_lookup = lookup_enterprise(
        settings.enterprise_host, settings.enterprise_port,
    )
    logger.info(
        f"FnFun API started (enterprise directory "
        f"{settings.enterprise_host}:{settings.enterprise_port})",
    )
    yield
    logger.info("FnFun API shutting down")


app = FastAPI(title="FnFun API", version=__version__, lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(urls.router)
app.include_router(enterprises.router)
app.include_router(compositions.router)

register_error_handlers(app)
