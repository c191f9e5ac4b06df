import logging

from django.core.exceptions import PermissionDenied
from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import set_rollback

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "Something went wrong!"
VALIDATION_SEPARATOR = ", "


class ListingNotFound(exceptions.NotFound):
    default_detail = "Listing not found!"
    default_code = "listing_not_found"


class ReviewNotFound(exceptions.NotFound):
    default_detail = "Review not found!"
    default_code = "review_not_found"


def clamp_status(status_code) -> int:
    """Anything that is not an int in [100, 599] becomes 500."""
    if isinstance(status_code, bool) or not isinstance(status_code, int):
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    if status_code < 100 or status_code > 599:
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    return status_code


def flatten_errors(detail, field=None):
    """
    Turn serializer error detail (nested dicts/lists) into flat messages,
    each prefixed with its field name: ["title: Ensure this field ...", ...]
    """
    if isinstance(detail, dict):
        messages = []
        for key, value in detail.items():
            prefix = None if key == "non_field_errors" else key
            if field and prefix:
                prefix = f"{field}.{prefix}"
            messages.extend(flatten_errors(value, prefix or field))
        return messages
    if isinstance(detail, (list, tuple)):
        messages = []
        for item in detail:
            messages.extend(flatten_errors(item, field))
        return messages
    return [f"{field}: {detail}" if field else str(detail)]


def page_exception_handler(exc, context):
    """
    Single place that maps any failure raised inside a DRF view to
    (status, message). PageRenderer turns the result into error.html.
    """
    if isinstance(exc, Http404):
        exc = exceptions.NotFound()
    elif isinstance(exc, PermissionDenied):
        exc = exceptions.PermissionDenied()

    view = context.get("view")
    request = context.get("request")
    path = getattr(request, "path", "-")

    if isinstance(exc, exceptions.ValidationError):
        status_code = status.HTTP_400_BAD_REQUEST
        message = VALIDATION_SEPARATOR.join(flatten_errors(exc.detail)) or "Invalid input."
    elif isinstance(exc, exceptions.APIException):
        status_code = clamp_status(getattr(exc, "status_code", None))
        message = str(exc.detail) if exc.detail else DEFAULT_ERROR_MESSAGE
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        message = DEFAULT_ERROR_MESSAGE

    if status_code >= 500:
        logger.exception(
            "Unhandled error in %s path=%s", type(view).__name__ if view else "-", path, exc_info=exc
        )
        # no internal details on the page
        message = DEFAULT_ERROR_MESSAGE
    else:
        logger.warning("Request failed path=%s status=%s message=%s", path, status_code, message)

    headers = {}
    if isinstance(exc, exceptions.APIException):
        if getattr(exc, "auth_header", None):
            headers["WWW-Authenticate"] = exc.auth_header
        if getattr(exc, "wait", None):
            headers["Retry-After"] = "%d" % exc.wait

    set_rollback()
    return Response({"message": message}, status=status_code, headers=headers)
