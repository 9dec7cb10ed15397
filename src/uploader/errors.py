"""Error taxonomy and the handlers that turn it into HTTP responses."""

import logging

from fastapi import Request, status
from fastapi.responses import PlainTextResponse

logger = logging.getLogger(__name__)


class UploaderError(Exception):
    """Base class for errors raised by the uploader."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR


class InvalidFilename(UploaderError):
    """A client-supplied filename reduced to nothing usable."""

    def __init__(self, filename: str):
        self.filename = filename
        super().__init__(f"invalid filename: {filename!r}")


class MalformedRequest(UploaderError):
    """The request body could not be parsed as a multipart form."""


class FilesystemError(UploaderError):
    """Creating, writing or reading a file in the store failed."""


class StartupError(UploaderError):
    """Fatal configuration problem detected while building the app."""


async def handle_uploader_errors(request: Request, exc: UploaderError) -> PlainTextResponse:
    """Answer with the error text, the way the request failed."""
    logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    request.state.error = str(exc)
    return PlainTextResponse(str(exc), status_code=exc.status_code)
