"""Hauptanwendung für den Helferplaner (Volunteer-Management API)"""
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.middleware.sessions import SessionMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
import logging

from app.config import settings
from app.logging_config import setup_logging
from app.database import init_db
from app.dependencies import open_storage
from app.rate_limit import limiter
from app.routers import auth, events, volunteers, shifts, roles, shift_roles
from app.utils.error_handler import request_validation_exception_handler

# Logging konfigurieren (strukturiert mit Datei-Rotation)
setup_logging(debug=settings.debug, log_file=settings.log_file)
logger = logging.getLogger(__name__)


def prepare_database() -> None:
    """Schema per Alembic (AUTO_MIGRATE) oder create_all anlegen"""
    if settings.auto_migrate:
        from app.utils.migration_checker import check_and_run_migrations
        try:
            check_and_run_migrations(auto_upgrade=True)
        except RuntimeError as e:
            logger.error(f"Migration error on startup: {e}")
            logger.error("Application will NOT start, please check migrations manually")
            raise
        return

    logger.info("Initializing database...")
    init_db()
    logger.info("Database initialized")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan Context Manager für Startup und Shutdown Events.
    """
    # ===== STARTUP =====
    logger.info(f"Starting {settings.app_name} v{settings.app_version} (storage: {settings.storage_backend}, auth: {settings.auth_mode})")

    # Warnung wenn SECRET_KEY nicht gesetzt ist
    if settings.auth_mode == "session" and not settings.is_secret_key_from_env():
        logger.warning("SECRET_KEY is not set in .env, sessions will be lost on every restart")

    if settings.uses_database:
        prepare_database()

    # Demo-Daten nur beim ersten Start (keine Events vorhanden)
    if settings.seed_demo_data:
        from app.utils.seed_helper import create_demo_data
        with open_storage() as storage:
            if create_demo_data(storage):
                logger.info("No events found, demo data created")

    # App läuft...
    yield

    # ===== SHUTDOWN =====
    logger.info(f"Shutting down {settings.app_name}")


# FastAPI App erstellen
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    debug=settings.debug,
    lifespan=lifespan
)

# Rate Limiter zur App hinzufügen
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)

# Validierungsfehler als 400 mit Feldliste
app.add_exception_handler(RequestValidationError, request_validation_exception_handler)

# Session Middleware hinzufügen
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.secret_key
)

# Router registrieren
app.include_router(auth.router)
app.include_router(events.router)
app.include_router(volunteers.router)
app.include_router(shifts.router)
app.include_router(roles.router)
app.include_router(shift_roles.router)


@app.get("/health")
async def health_check():
    """Health-Check-Endpunkt für Docker"""
    return {
        "status": "healthy",
        "app": settings.app_name,
        "version": settings.app_version,
        "storage": settings.storage_backend,
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
