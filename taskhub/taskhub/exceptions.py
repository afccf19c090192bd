import logging

from django.core.exceptions import ObjectDoesNotExist, ValidationError as DjangoValidationError
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)


class InvalidArgument(exceptions.APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid argument."
    default_code = "invalid"


def api_exception_handler(exc, context):
    """
    Map service-layer Django exceptions onto HTTP errors.

    DoesNotExist -> 404, PermissionDenied -> 403, ValidationError -> 400.
    Anything DRF can't handle is logged and returned as a 500.
    """
    if isinstance(exc, ObjectDoesNotExist):
        exc = exceptions.NotFound(str(exc) or None)
    elif isinstance(exc, DjangoValidationError):
        exc = InvalidArgument(" ".join(exc.messages))

    response = drf_exception_handler(exc, context)
    if response is not None:
        return response

    logger.exception("Unhandled API exception", exc_info=exc)

    return Response(
        {"detail": "Internal server error."},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
