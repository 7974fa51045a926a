"""
Translation of repository errors into HTTP responses.

The body is always ``{"error": <message>}``:

* ``NotFound``   -> 404 ``"not found"``
* ``Conflict``   -> 409 ``"conflict"``
* ``Unexpected`` -> 500 with the original diagnostic text
"""

import logging
from typing import Tuple

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from ..repositories.base import Conflict, NotFound, RepoError

logger = logging.getLogger(__name__)


def status_for(exc: RepoError) -> Tuple[int, str]:
    """Return the HTTP status code and message for a repository error."""
    if isinstance(exc, NotFound):
        return status.HTTP_404_NOT_FOUND, "not found"
    if isinstance(exc, Conflict):
        return status.HTTP_409_CONFLICT, "conflict"
    return status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc)


async def repo_error_handler(request: Request, exc: RepoError) -> JSONResponse:
    status_code, message = status_for(exc)
    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, message)
    else:
        logger.info("%s %s -> %s", request.method, request.url.path, message)
    return JSONResponse(status_code=status_code, content={"error": message})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RepoError, repo_error_handler)
