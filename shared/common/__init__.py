# Shared Common Library for the Maintenance Service
# Request middleware and the API exception handler.

__version__ = "1.0.0"

from .exceptions import (
    custom_exception_handler,
    error_response,
    format_error_response,
)

from .middleware import (
    RequestIDMiddleware,
    LoggingMiddleware,
)

__all__ = [
    'custom_exception_handler',
    'error_response',
    'format_error_response',
    'RequestIDMiddleware',
    'LoggingMiddleware',
]
