import logging
import traceback
from typing import Any

from django.core.files.uploadedfile import UploadedFile


class ContextFilter(logging.Filter):
    """Gives every record a `context` attribute so formatters can print it."""

    def filter(self, record):
        if not hasattr(record, "context"):
            record.context = ""
        return True


def describe_payload(data=None, files=None) -> dict[str, Any]:
    """Flatten request fields for logging. Uploaded files are reduced to their names."""
    payload: dict[str, Any] = {}
    if data is not None:
        for key in data:
            values = data.getlist(key) if hasattr(data, "getlist") else [data[key]]
            payload[key] = values[0] if len(values) == 1 else values
    if files is not None:
        for key in files:
            upload = files[key]
            payload[key] = upload.name if isinstance(upload, UploadedFile) else repr(upload)
    return payload


class ErrorLogger:
    """
    Error log for caught exceptions.

    Every entry carries the failing location, the call parameters merged with
    the request payload, and the stack trace, so a generic 500 returned to the
    client can still be diagnosed from the server log.
    """

    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger("apps.errors")

    def error(
        self,
        exc: BaseException,
        message: str,
        location: str = "",
        params: dict[str, Any] | None = None,
        payload: dict[str, Any] | None = None,
    ) -> None:
        context = {
            "message": str(exc),
            "location": location,
            "params": {**(payload or {}), **(params or {})},
            "trace": "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
        }
        self.logger.error(message, extra={"context": context}, exc_info=exc)

    def warning(self, message: str, *args, **kwargs) -> None:
        self.logger.warning(message, *args, **kwargs)

    def info(self, message: str, *args, **kwargs) -> None:
        self.logger.info(message, *args, **kwargs)
