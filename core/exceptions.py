"""
Core — Exception Handling

Domain exceptions and the DRF exception handler that renders every
error as the AssetTrack error envelope.

@file core/exceptions.py
"""

import logging

from django.core.exceptions import PermissionDenied, ValidationError
from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger('assettrack')


# ---------------------------------------------------------------------------
# Domain exceptions
# ---------------------------------------------------------------------------

class BusinessRuleViolation(APIException):
    """Raised when a business rule is violated at the service layer."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Business rule violation.'
    default_code = 'BUSINESS_RULE_VIOLATION'


class ConflictError(APIException):
    """Raised when the request clashes with the current state of a resource."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Request conflicts with the current resource state.'
    default_code = 'CONFLICT'


class InvalidStateTransition(ConflictError):
    """Raised when a lifecycle transition is not allowed from the current status."""
    default_detail = 'Invalid state transition.'
    default_code = 'INVALID_STATE_TRANSITION'


class DuplicateResourceError(ConflictError):
    default_detail = 'Resource already exists.'
    default_code = 'DUPLICATE_RESOURCE'


class ResourceNotFoundError(APIException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'Resource not found.'
    default_code = 'RESOURCE_NOT_FOUND'


class AuthenticationFailedError(APIException):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = 'Authentication failed.'
    default_code = 'AUTHENTICATION_FAILED'


# ---------------------------------------------------------------------------
# Standard exception handler
# ---------------------------------------------------------------------------

def _first_message(errors) -> str:
    """Pick a human-readable message out of a DRF error structure."""
    if isinstance(errors, dict):
        if 'detail' in errors:
            return _first_message(errors['detail'])
        for key, value in errors.items():
            return f'{key}: {_first_message(value)}'
        return ''
    if isinstance(errors, (list, tuple)):
        return _first_message(errors[0]) if errors else ''
    return str(errors)


def standard_exception_handler(exc, context):
    """
    Wraps every error response in the standard envelope:
      { "success": false, "message": "...", "errors": {...}, "code": "ERROR_CODE" }
    """
    if isinstance(exc, Http404):
        exc = ResourceNotFoundError()
    elif isinstance(exc, PermissionDenied):
        exc = APIException(detail='Permission denied.', code='PERMISSION_DENIED')
        exc.status_code = status.HTTP_403_FORBIDDEN
    elif isinstance(exc, ValidationError):
        errors = exc.message_dict if hasattr(exc, 'message_dict') else {'detail': exc.messages}
        data = {
            'success': False,
            'message': _first_message(errors),
            'errors': errors,
            'code': 'VALIDATION_ERROR',
        }
        return Response(data, status=status.HTTP_400_BAD_REQUEST)

    response = exception_handler(exc, context)

    if response is None:
        logger.exception('Unhandled exception in view: %s', exc)
        return Response(
            {
                'success': False,
                'message': 'Internal server error.',
                'errors': {'detail': ['Internal server error.']},
                'code': 'INTERNAL_ERROR',
            },
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, exceptions.ValidationError):
        code = 'VALIDATION_ERROR'
    else:
        code = getattr(exc, 'default_code', 'ERROR')

    if isinstance(response.data, dict):
        errors = response.data
    elif isinstance(response.data, list):
        errors = {'detail': response.data}
    else:
        errors = {'detail': [str(response.data)]}

    response.data = {
        'success': False,
        'message': _first_message(errors),
        'errors': errors,
        'code': str(code).upper(),
    }
    return response
