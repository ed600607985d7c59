"""
Mapping of failed use case results to HTTP errors.

Use cases never raise into the HTTP layer; routers hand a failed result to
`raise_for_result` which picks the status code.
"""

from typing import Any

from fastapi import HTTPException

INTERNAL_ERROR_MESSAGE = "Internal server error. Check server logs."


def raise_for_result(result: Any) -> None:
    """
    Raise HTTPException for an unsuccessful result dataclass.

    - not_found -> 404
    - validation_errors -> 400 with the first message
    - anything else -> 500 with a generic message (details are logged by the use case)
    """
    if result.success:
        return
    if getattr(result, "not_found", False):
        raise HTTPException(status_code=404, detail=result.error or "Not found")
    if result.validation_errors:
        raise HTTPException(status_code=400, detail=result.error or result.validation_errors[0])
    raise HTTPException(status_code=500, detail=INTERNAL_ERROR_MESSAGE)
