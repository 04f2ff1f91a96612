# logitrack/main.py

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from logitrack import __version__
from logitrack.adapters.configuration.config import settings
from logitrack.adapters.outbound.backup.connection_repository import LocalBackupConnectionRepository
from logitrack.adapters.outbound.backup.http_backup_client import HttpBackupClient
from logitrack.adapters.outbound.persistence.factory import build_database_adapter, build_key_value_store
from logitrack.application.use_cases import UserUseCases

# ─── UNIQUE LOGGING CONFIGURATION ─────────────────────────────────────────────────
level = logging.DEBUG if settings.DEBUG else getattr(logging, settings.LOG_LEVEL, logging.INFO)
logging.basicConfig(
    level=level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)


# ────────────────────────────────────────────────────────────────────────────────


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Builds the storage backend on startup and releases it on shutdown.
    """
    logger.info("Application starting up...")

    store = build_key_value_store(settings)
    adapter = build_database_adapter(settings, store)
    await adapter.initialize()

    app.state.store = store
    app.state.adapter = adapter
    app.state.backup_connections = LocalBackupConnectionRepository(store)
    app.state.backup_client = HttpBackupClient(timeout=settings.BACKUP_TIMEOUT_SECONDS)

    await UserUseCases(adapter).seed_admin(
        name=settings.ADMIN_NAME,
        email=settings.ADMIN_EMAIL,
        password=settings.ADMIN_PASSWORD,
    )

    yield

    logger.info("Application shutting down...")
    dispose = getattr(adapter, "dispose", None)
    if dispose is not None:
        await dispose()


# Create FastAPI instance
app = FastAPI(
    title="LogiTrack",
    description="Gestão de corridas, clientes e despesas para transportadoras",
    version=__version__,
    debug=settings.DEBUG,
    lifespan=lifespan,
)

# Middlewares
from logitrack.shared.middleware import AsyncExceptionMiddleware, AsyncRequestLoggingMiddleware

app.add_middleware(AsyncRequestLoggingMiddleware)
app.add_middleware(AsyncExceptionMiddleware)

# Routers
from logitrack.adapters.inbound.api.v1.router import api_router as api_v1_router

app.include_router(api_v1_router, prefix="/api/v1")


@app.get("/", include_in_schema=False)
async def redirect_to_docs():
    return RedirectResponse(url="/docs")
