import logging
from typing import Any

from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler
from rest_framework.views import set_rollback

from ippweek.core.headers import create_failure_alert

logger = logging.getLogger(__name__)


class BadRequestAlertException(APIException):
    """400 raised for a request that breaks an entity invariant.

    Carries the entity name and a machine readable ``error_key`` (eg
    ``idexists``) so clients can tell error kinds apart.
    """

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Bad request"
    default_code = "bad_request"

    def __init__(self, default_message: str, entity_name: str, error_key: str):
        super().__init__(detail=default_message, code=error_key)
        self.entity_name = entity_name
        self.error_key = error_key


def api_exception_handler(
    exc: Exception, context: dict[str, Any],
) -> Response | None:
    """Return a uniform JSON error response structure.

    Structure:
    {
        "success": false,
        "code": <HTTP status code>,
        "detail": <primary error message>,
        "errors": <original DRF errors if available>
    }

    BadRequestAlertException adds "entityName", "errorKey", "message",
    "params" and "title" to the body, and the failure alert headers.
    """
    response = drf_exception_handler(exc, context)

    if response is not None:
        detail = None
        # Try to extract a concise detail string
        if isinstance(response.data, dict):
            detail = response.data.get("detail")
        if detail is None:
            # Fallback to stringified response data
            detail = str(response.data)

        body = {
            "success": False,
            "code": response.status_code,
            "detail": detail,
            "errors": response.data,
        }
        headers = dict(response.headers)

        if isinstance(exc, BadRequestAlertException):
            body.update(
                {
                    "entityName": exc.entity_name,
                    "errorKey": exc.error_key,
                    "message": f"error.{exc.error_key}",
                    "params": exc.entity_name,
                    "title": str(exc.detail),
                },
            )
            headers.update(
                create_failure_alert(exc.entity_name, exc.error_key, str(exc.detail)),
            )

        return Response(body, status=response.status_code, headers=headers)

    # Non-DRF exceptions fallback (500)
    logger.error("Unhandled exception in %s", _view_name(context), exc_info=exc)
    set_rollback()
    return Response(
        {
            "success": False,
            "code": status.HTTP_500_INTERNAL_SERVER_ERROR,
            "detail": str(exc) or "Internal Server Error",
            "errors": None,
        },
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def _view_name(context: dict[str, Any]) -> str:
    view = context.get("view")
    return view.__class__.__name__ if view is not None else "unknown view"
