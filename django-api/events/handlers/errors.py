"""Map exceptions to the API's error envelope: {"error": message, "code": CODE}."""

import logging

from django.db import DatabaseError
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from events.domain.errors import DomainError, ErrorCode, ValidationError

logger = logging.getLogger(__name__)

STATUS_BY_CODE = {
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_EVENT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EVENT_INACTIVE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.SIGNUPS_CLOSED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EVENT_FULL: status.HTTP_400_BAD_REQUEST,
    ErrorCode.ALREADY_SCHEDULED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.NO_RECIPIENTS: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.SECTION_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.SIGNUP_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.SCHEDULE_ITEM_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.RATE_LIMITED: status.HTTP_429_TOO_MANY_REQUESTS,
    ErrorCode.UPSTREAM_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

CODE_BY_API_EXCEPTION = {
    exceptions.NotAuthenticated: ErrorCode.UNAUTHORIZED,
    exceptions.AuthenticationFailed: ErrorCode.UNAUTHORIZED,
    exceptions.PermissionDenied: ErrorCode.UNAUTHORIZED,
    exceptions.Throttled: ErrorCode.RATE_LIMITED,
}


def domain_error_response(error: DomainError) -> Response:
    body = {"error": error.message, "code": error.code.value}
    if isinstance(error, ValidationError) and error.field:
        body["field"] = error.field
    return Response(body, status=STATUS_BY_CODE.get(error.code, status.HTTP_400_BAD_REQUEST))


def api_exception_handler(exc, context):
    """DRF EXCEPTION_HANDLER that renders every failure in the error envelope.

    Internal details never reach the client; database failures are logged
    and reported as UPSTREAM_ERROR.
    """
    if isinstance(exc, DomainError):
        if exc.code is ErrorCode.UPSTREAM_ERROR:
            logger.error("Upstream failure in %s: %s", _view_name(context), exc.message)
        return domain_error_response(exc)

    if isinstance(exc, DatabaseError):
        logger.exception("Database error in %s", _view_name(context))
        return Response(
            {"error": "Internal server error", "code": ErrorCode.UPSTREAM_ERROR.value},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, exceptions.ValidationError):
        response.data = {
            "error": "Invalid request",
            "code": ErrorCode.VALIDATION_ERROR.value,
            "fields": exc.detail,
        }
        return response

    code = CODE_BY_API_EXCEPTION.get(type(exc), ErrorCode.VALIDATION_ERROR)
    response.data = {"error": str(exc.detail), "code": code.value}
    return response


def _view_name(context) -> str:
    view = context.get("view")
    return type(view).__name__ if view is not None else "unknown view"
