"""Error Handler Utility - Zentralisierte Fehlerbehandlung für die JSON-API"""
import logging
from typing import Any, Dict, List

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError, DataError, OperationalError

logger = logging.getLogger(__name__)

VALIDATION_MESSAGE = "Validierungsfehler"


def format_validation_errors(errors: List[Dict[str, Any]]) -> List[Dict[str, str]]:
    """
    Wandelt Pydantic-Fehler in eine Liste von Feld-Fehlern um.

    Der Ort ("body", "path", "query") wird entfernt, z.B.
    ("body", "startTime") -> "startTime".
    """
    field_errors = []
    for error in errors:
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "path", "query")]
        message = error.get("msg", "Ungültiger Wert")
        # Pydantic stellt eigenen ValueError-Meldungen "Value error, " voran
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        field_errors.append({
            "field": ".".join(location) or "__root__",
            "message": message,
        })
    return field_errors


def validation_error_response(errors: List[Dict[str, Any]]) -> JSONResponse:
    """400-Antwort mit Feld-Fehlern"""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": VALIDATION_MESSAGE, "errors": format_validation_errors(errors)},
    )


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Ersetzt FastAPIs 422-Antwort: ungültige Bodies, Pfad- und Query-Parameter
    werden als 400 mit Feld-Fehlern beantwortet.
    """
    logger.warning(f"Validation error on {request.method} {request.url.path}: {exc.errors()}")
    return validation_error_response(exc.errors())


def handle_db_exception(e: Exception, operation: str) -> JSONResponse:
    """
    Zentralisierte Fehlerbehandlung mit Logging und Error-Codes

    Details landen nur im Log, der Client bekommt eine allgemeine Meldung.

    Args:
        e: Die aufgetretene Exception
        operation: Beschreibung der Operation (für Logging)

    Returns:
        JSONResponse mit Status 400 oder 500
    """
    if isinstance(e, ValidationError):
        logger.warning(f"{operation}: Validation error - {e}")
        return validation_error_response(e.errors())

    if isinstance(e, ValueError):
        logger.warning(f"{operation}: Invalid input - {str(e)}", exc_info=True)
        status_code = status.HTTP_400_BAD_REQUEST
        error_message = str(e) or "Ungültige Eingabe. Bitte überprüfen Sie Ihre Daten."
        error_code = "invalid_input"

    elif isinstance(e, IntegrityError):
        logger.error(f"{operation}: Database integrity error - {str(e)}", exc_info=True)
        status_code = status.HTTP_400_BAD_REQUEST
        error_message = "Datenbankfehler: Diese Daten verletzen eine Integritätsbedingung."
        error_code = "db_integrity"

    elif isinstance(e, DataError):
        logger.error(f"{operation}: Invalid data - {str(e)}", exc_info=True)
        status_code = status.HTTP_400_BAD_REQUEST
        error_message = "Ungültige Daten. Bitte überprüfen Sie Ihre Eingaben."
        error_code = "invalid_data"

    elif isinstance(e, OperationalError):
        logger.error(f"{operation}: Database operational error - {str(e)}", exc_info=True)
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        error_message = "Datenbankverbindungsfehler. Bitte versuchen Sie es später erneut."
        error_code = "db_error"

    else:
        logger.exception(f"{operation}: Unexpected error - {str(e)}")
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        error_message = "Ein unerwarteter Fehler ist aufgetreten."
        error_code = "unexpected"

    return JSONResponse(
        status_code=status_code,
        content={"detail": error_message, "error": error_code},
    )
