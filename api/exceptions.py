"""
Error types and the exception handler for the Horoscope API.

Every error response uses the same envelope:

    {"status": "error", "message": "...", "errors": {...}}

`errors` is only present for field validation failures.
"""
import logging

from django.conf import settings
from django.core.exceptions import PermissionDenied
from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

logger = logging.getLogger(__name__)


class DuplicateResourceError(exceptions.APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Resource already exists.'
    default_code = 'duplicate'


class AuthenticationError(exceptions.APIException):
    """Credentials rejected at login. Token failures use AuthenticationFailed."""
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = 'Invalid email or password.'
    default_code = 'authentication_failed'


def _error_response(message, status_code, headers=None, **extra):
    data = {'status': 'error', 'message': message}
    data.update(extra)
    return Response(data, status=status_code, headers=headers)


def _first_message(detail):
    if isinstance(detail, (list, tuple)) and detail:
        return str(detail[0])
    return str(detail)


def envelope_exception_handler(exc, context):
    """
    Map every exception raised in a view to the error envelope.

    Unexpected exceptions become a 500; their text is only exposed while
    DEBUG is on.
    """
    if isinstance(exc, Http404):
        exc = exceptions.NotFound()
    elif isinstance(exc, PermissionDenied):
        exc = exceptions.PermissionDenied()

    if isinstance(exc, exceptions.APIException):
        # Let DRF compute headers (WWW-Authenticate, Retry-After)
        response = exception_handler(exc, context)
        headers = {
            key: value for key, value in response.headers.items()
            if key in ('WWW-Authenticate', 'Retry-After')
        }

        if isinstance(exc, exceptions.NotAuthenticated):
            return _error_response('Access token required', exc.status_code, headers)

        if isinstance(exc, exceptions.ValidationError):
            if isinstance(exc.detail, dict):
                return _error_response(
                    'Validation failed', exc.status_code, headers, errors=exc.detail
                )
            return _error_response(_first_message(exc.detail), exc.status_code, headers)

        return _error_response(_first_message(exc.detail), exc.status_code, headers)

    view = context.get('view')
    logger.exception(f"Unhandled error in {view.__class__.__name__ if view else 'API'}: {exc}")

    set_rollback()
    extra = {}
    if settings.DEBUG:
        extra['error'] = str(exc)
    return _error_response(
        'Internal server error', status.HTTP_500_INTERNAL_SERVER_ERROR, **extra
    )
