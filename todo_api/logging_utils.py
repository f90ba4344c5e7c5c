"""Request-correlated logging for the todo API."""

from __future__ import annotations

import contextvars
import logging
import uuid
from typing import Optional

from fastapi import Request

REQUEST_ID_HEADER = "X-Request-ID"
LOG_FORMAT = (
    "%(asctime)s level=%(levelname)s logger=%(name)s "
    "request_id=%(request_id)s message=\"%(message)s\""
)

request_id_var: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar("request_id", default=None)


class RequestIdFilter(logging.Filter):
    """Stamp every record with the id of the request being served, or "-"."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get() or "-"
        return True


def configure_logging(level: str = "INFO") -> None:
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    for handler in root_logger.handlers:
        if not any(isinstance(existing, RequestIdFilter) for existing in handler.filters):
            handler.addFilter(RequestIdFilter())


def resolve_request_id(header_value: Optional[str]) -> str:
    """Use the caller's id when it sent a non-blank one, else a fresh uuid4."""
    if header_value and header_value.strip():
        return header_value.strip()
    return str(uuid.uuid4())


async def request_id_middleware(request: Request, call_next):
    request_id = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
    token = request_id_var.set(request_id)
    try:
        response = await call_next(request)
    finally:
        request_id_var.reset(token)
    response.headers[REQUEST_ID_HEADER] = request_id
    return response
