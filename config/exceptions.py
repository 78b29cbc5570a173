"""
API exception handling.

DRF's default handler covers APIException subclasses (parse errors,
unsupported methods, ...). Everything else reaching a view boundary is an
unexpected failure: it is logged with its traceback and turned into a
generic 500 response so no storage detail leaks to the client.
"""
import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)

DEFAULT_FAILURE_MESSAGE = 'Internal server error'


def api_exception_handler(exc, context):
    """Render every API error as ``{"error": ...}``."""
    response = exception_handler(exc, context)

    if response is not None:
        if isinstance(response.data, dict) and set(response.data) == {'detail'}:
            response.data = {'error': response.data['detail']}
        return response

    view = context.get('view')
    action = getattr(view, 'action', None)
    messages = getattr(view, 'failure_messages', {})
    message = messages.get(action, DEFAULT_FAILURE_MESSAGE)

    logger.exception(
        "Unhandled error in %s.%s: %s",
        view.__class__.__name__ if view else 'unknown', action, message
    )
    return Response(
        {'error': message},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR
    )
