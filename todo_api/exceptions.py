"""
Todo API - Custom Exceptions and Exception Handlers
"""
import structlog
from werkzeug.exceptions import HTTPException

from todo_api.api_responses import error_response

logger = structlog.get_logger('exceptions')

INTERNAL_ERROR_MESSAGE = "Internal server error"


class TodoApiException(Exception):
    """Base exception for the Todo API"""
    status_code = 500

    def __init__(self, message: str, status_code: int = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)

    @property
    def public_message(self):
        return self.message


class ValidationException(TodoApiException):
    """Missing or malformed input"""
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        logger.warning(f"Validation error: {message}")


class DuplicateEmailException(ValidationException):
    """Signup with an email that is already registered"""
    def __init__(self, message: str = "User with this email already exists"):
        super().__init__(message)


class AuthenticationException(TodoApiException):
    """Missing, malformed, tampered or expired token"""
    status_code = 401

    def __init__(self, message: str = "Not authorized"):
        super().__init__(message)


class InvalidCredentialsException(TodoApiException):
    """Login failure, identical for unknown email and wrong password"""
    status_code = 401

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message)


class NotFoundException(TodoApiException):
    """Resource absent or owned by somebody else"""
    status_code = 404

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message)


class DatabaseException(TodoApiException):
    """Storage failure; the detail is logged, never returned"""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        logger.error(f"Database error: {message}")

    @property
    def public_message(self):
        return INTERNAL_ERROR_MESSAGE


def register_exception_handlers(app):
    """Register exception handlers with Flask app"""

    @app.errorhandler(HTTPException)
    def handle_http_exception(e):
        """Handle HTTP exceptions (unknown routes, bad methods, rate limits)"""
        if e.code == 404:
            message = "Route not found"
        elif e.code == 400:
            message = "Malformed request"
        else:
            message = e.description or e.name
        return error_response(message, status_code=e.code)

    @app.errorhandler(TodoApiException)
    def handle_todo_api_exception(e):
        """Handle Todo API exceptions"""
        return error_response(e.public_message, status_code=e.status_code)

    @app.errorhandler(Exception)
    def handle_generic_exception(e):
        """Handle all other exceptions"""
        logger.error(f"Unhandled exception: {e}", exc_info=True)
        return error_response(INTERNAL_ERROR_MESSAGE, status_code=500)
