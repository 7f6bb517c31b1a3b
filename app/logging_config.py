"""Logging-Konfiguration (Konsole plus rotierende Log-Datei)"""
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Auf INFO zu gesprächig, nur Warnungen durchlassen
QUIET_LOGGERS = (
    'sqlalchemy.engine',
    'sqlalchemy.pool',
    'uvicorn.access',
    'httpx',
    'alembic.runtime.migration',
)


def _build_handlers(level: int, log_file: Optional[str]) -> List[logging.Handler]:
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(RotatingFileHandler(
            filename=log_file,
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding='utf-8'
        ))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
    return handlers


def setup_logging(debug: bool = False, log_file: Optional[str] = "helferplaner.log") -> None:
    """
    Konfiguriert das Root-Logging einmal beim Import von app.main.

    Format: "2024-05-01 09:12:45 - app.routers.volunteers - INFO - Volunteer 3 checked in"

    Args:
        debug: DEBUG statt INFO
        log_file: Rotierende Log-Datei (10 MB, 5 Backups), leer = nur Konsole
    """
    level = logging.DEBUG if debug else logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Alte Handler entfernen (z.B. bei Reload)
    root_logger.handlers.clear()
    for handler in _build_handlers(level, log_file):
        root_logger.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    root_logger.info(
        f"Logging initialized (level: {logging.getLevelName(level)}, "
        f"file: {Path(log_file).absolute() if log_file else 'none'})"
    )
