from typing import Any

from rest_framework import status
from rest_framework.response import Response


def wrap_or_not_found(
    maybe_data: Any | None, headers: dict[str, str] | None = None,
) -> Response:
    """Return 200 with ``maybe_data`` or an empty 404 when it is ``None``."""
    if maybe_data is None:
        return Response(status=status.HTTP_404_NOT_FOUND)
    return Response(maybe_data, status=status.HTTP_200_OK, headers=headers)
