"""Request correlation for log lines.

Every request gets an id, taken from the ``X-Request-ID`` header when the
client sent a usable one and generated otherwise, and echoed back in the
response. The id and, once the caller is authenticated, their user id are
kept in context variables; ``RequestContextFilter`` copies both onto each
log record so all lines of one request can be grepped together.
"""

import re
import uuid
from contextvars import ContextVar
from logging import Filter, LogRecord
from uuid import UUID

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"
UNSET = "-"

# Client ids end up verbatim in logs and headers
_ACCEPTED_REQUEST_ID = re.compile(r"^[A-Za-z0-9._:-]{1,64}$")

request_id_var: ContextVar[str] = ContextVar("request_id", default=UNSET)
user_id_var: ContextVar[str] = ContextVar("user_id", default=UNSET)


def new_request_id() -> str:
    return uuid.uuid4().hex


def resolve_request_id(header_value: str | None) -> str:
    """The client's id if it is a short printable token, else a fresh one."""
    if header_value and _ACCEPTED_REQUEST_ID.match(header_value):
        return header_value
    return new_request_id()


def bind_user_id(user_id: UUID) -> None:
    """Attach the authenticated caller to the rest of the request's logs."""
    user_id_var.set(str(user_id))


class RequestContextFilter(Filter):
    """Adds ``request_id`` and ``user_id`` attributes to every record."""

    def filter(self, record: LogRecord) -> bool:
        record.request_id = request_id_var.get()
        record.user_id = user_id_var.get()
        return True


class RequestIDMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        request_id = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        request_id_var.set(request_id)
        user_id_var.set(UNSET)
        request.state.request_id = request_id

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
