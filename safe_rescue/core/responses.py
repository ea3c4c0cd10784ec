"""Response helpers shared by the endpoint modules."""

from typing import Any, Sequence, Union

from fastapi import Response, status


def list_or_no_content(items: Sequence[Any]) -> Union[Sequence[Any], Response]:
    """Return ``items`` or an empty 204 response when there is nothing to list."""
    if not items:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return items
