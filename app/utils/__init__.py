"""Utilities Package"""
from app.utils.error_handler import handle_db_exception, request_validation_exception_handler
from app.utils.error_decorators import handle_route_errors

__all__ = [
    "handle_db_exception",
    "request_validation_exception_handler",
    "handle_route_errors",
]
