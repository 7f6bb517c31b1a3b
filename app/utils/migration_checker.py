"""
Migration Checker Utility

Prüft beim App-Start ob Alembic-Migrationen ausstehen und führt diese aus
(nur bei STORAGE_BACKEND=database und AUTO_MIGRATE=true).
"""
import logging
from typing import Optional, Tuple

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory

from app.config import settings
from app.database import engine

logger = logging.getLogger(__name__)


def get_alembic_config() -> Config:
    """Alembic-Konfiguration aus alembic.ini im Projektverzeichnis"""
    config = Config(str(settings.base_dir / "alembic.ini"))
    config.set_main_option("script_location", str(settings.base_dir / "migrations"))
    config.set_main_option("sqlalchemy.url", settings.database_url)
    # Logging ist bereits über app.logging_config eingerichtet
    config.attributes["configure_logger"] = False
    return config


def get_current_db_version() -> Optional[str]:
    """
    Gibt die aktuelle Datenbank-Version zurück.

    Returns:
        Revision-ID oder None (noch keine Migration ausgeführt)
    """
    with engine.connect() as connection:
        return MigrationContext.configure(connection).get_current_revision()


def check_migrations_pending(config: Config) -> Tuple[bool, Optional[str]]:
    """
    Prüft ob Alembic-Migrationen ausstehen.

    Returns:
        Tuple (has_pending, current_version)
    """
    head = ScriptDirectory.from_config(config).get_current_head()
    current = get_current_db_version()
    return current != head, current


def check_and_run_migrations(auto_upgrade: bool = True) -> None:
    """
    Prüft und führt Migrationen aus (wenn auto_upgrade=True).

    Raises:
        RuntimeError: Wenn das Upgrade fehlschlägt
    """
    logger.info("Checking Alembic migrations...")
    config = get_alembic_config()

    has_pending, current_version = check_migrations_pending(config)
    if not has_pending:
        logger.info("Database schema is up to date")
        return

    logger.warning(f"Pending migrations found (current version: {current_version or 'none'})")
    if not auto_upgrade:
        logger.warning("Auto upgrade disabled, run manually: alembic upgrade head")
        return

    try:
        command.upgrade(config, "head")
    except Exception as e:
        logger.error(f"Migration upgrade failed: {e}", exc_info=True)
        raise RuntimeError(
            "Migrations-Upgrade fehlgeschlagen! Bitte manuell ausführen: alembic upgrade head"
        ) from e

    logger.info("Migrations applied successfully")
