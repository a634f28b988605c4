# shared/common/exceptions.py
"""
Exception Handler

Renders every API error in one envelope:

    {"success": false, "error": {"code", "message", "details"?, "request_id"}}
"""

import logging
import traceback
from typing import Any, Dict, Optional

from django.conf import settings
from django.core.exceptions import ValidationError as DjangoValidationError
from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


# DRF exception class -> error code
DRF_ERROR_CODES = {
    exceptions.ValidationError: 'VALIDATION_ERROR',
    exceptions.ParseError: 'BAD_REQUEST',
    exceptions.NotFound: 'NOT_FOUND',
    exceptions.MethodNotAllowed: 'METHOD_NOT_ALLOWED',
    exceptions.UnsupportedMediaType: 'UNSUPPORTED_MEDIA_TYPE',
    exceptions.NotAuthenticated: 'UNAUTHORIZED',
    exceptions.AuthenticationFailed: 'UNAUTHORIZED',
    exceptions.PermissionDenied: 'FORBIDDEN',
    exceptions.Throttled: 'RATE_LIMITED',
}


def error_response(
    code: str,
    message: str,
    http_status: int,
    request_id: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None,
) -> Response:
    error = {
        'code': code,
        'message': message,
        'request_id': request_id,
    }
    if details:
        error['details'] = details
    return Response({'success': False, 'error': error}, status=http_status)


def is_service_error(exc) -> bool:
    """Domain errors carry an error code and an HTTP status of their own."""
    return (
        isinstance(getattr(exc, 'error_code', None), str)
        and isinstance(getattr(exc, 'status_code', None), int)
        and not isinstance(exc, exceptions.APIException)
    )


def custom_exception_handler(exc, context) -> Optional[Response]:
    """
    Custom exception handler for DRF.
    Provides consistent error response format across all services.
    """

    # Get the request ID for tracing
    request = context.get('request')
    request_id = getattr(request, 'request_id', None) if request else None

    if is_service_error(exc):
        if exc.status_code >= 500:
            logger.error(f"Service error {exc.error_code}: {exc}")
        else:
            logger.info(f"Request rejected with {exc.error_code}: {exc}")
        return error_response(
            exc.error_code,
            getattr(exc, 'message', str(exc)),
            exc.status_code,
            request_id,
            getattr(exc, 'details', None),
        )

    # Call DRF's default exception handler first
    response = exception_handler(exc, context)

    # If DRF handled it, format the response
    if response is not None:
        return format_error_response(exc, response, request_id)

    # Handle Django ValidationError
    if isinstance(exc, DjangoValidationError):
        errors = exc.message_dict if hasattr(exc, 'error_dict') else {'detail': exc.messages}
        return error_response(
            'VALIDATION_ERROR', 'Validation error',
            status.HTTP_400_BAD_REQUEST, request_id, errors,
        )

    # Handle Http404
    if isinstance(exc, Http404):
        return error_response(
            'NOT_FOUND', str(exc) or 'Resource not found',
            status.HTTP_404_NOT_FOUND, request_id,
        )

    # Log unexpected exceptions
    logger.exception(
        f"Unhandled exception: {exc}",
        extra={
            'request_id': request_id,
            'exception_type': type(exc).__name__,
        }
    )

    # Return generic error in production, detailed in debug
    if settings.DEBUG:
        return error_response(
            'INTERNAL_ERROR', str(exc),
            status.HTTP_500_INTERNAL_SERVER_ERROR, request_id,
            {
                'type': type(exc).__name__,
                'traceback': traceback.format_exc().split('\n'),
            },
        )

    return error_response(
        'INTERNAL_ERROR', 'An unexpected error occurred. Please try again later.',
        status.HTTP_500_INTERNAL_SERVER_ERROR, request_id,
    )


def format_error_response(exc, response: Response, request_id: str = None) -> Response:
    """Format error response in consistent structure"""

    error_code = 'ERROR'
    for exc_class, code in DRF_ERROR_CODES.items():
        if isinstance(exc, exc_class):
            error_code = code
            break

    error_data = {
        'success': False,
        'error': {
            'code': error_code,
            'message': get_error_message(exc, response),
            'request_id': request_id,
        }
    }

    # Field-level validation errors from DRF
    if isinstance(response.data, dict) and 'detail' not in response.data:
        error_data['error']['details'] = response.data
    elif isinstance(response.data, list):
        error_data['error']['details'] = {'non_field_errors': response.data}

    response.data = error_data
    return response


def get_error_message(exc, response: Response) -> str:
    """Extract error message from exception or response"""

    if isinstance(exc, exceptions.ValidationError):
        return 'Validation error'

    if hasattr(exc, 'detail'):
        if isinstance(exc.detail, str):
            return exc.detail
        if isinstance(exc.detail, list) and exc.detail:
            return str(exc.detail[0])
        if isinstance(exc.detail, dict):
            return exc.detail.get('detail', str(exc.detail))

    if isinstance(response.data, dict):
        return response.data.get('detail', str(response.data))

    return str(response.data)
