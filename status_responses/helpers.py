"""Named response helpers, one per status code.

Each helper fixes the status code and forwards the remaining arguments to
:func:`~status_responses.envelope.build_envelope`. Helpers come in four
shapes:

* passthrough: ``helper(message=None)``
* fixed message: ``unauthorized()``
* message and data: ``forbidden(message=None, data=None)``
* keyed default: ``helper(key=None)`` storing ``{"key": key or DEFAULT}``
  as the payload
"""

from __future__ import annotations

import logging
from typing import Any
from typing import Callable
from typing import Dict
from typing import Mapping
from typing import Optional

from .catalog import UnknownStatusError
from .catalog import describe
from .envelope import ResponseEnvelope
from .envelope import build_envelope
from .logging_config import configure_logging
from .status import StatusCode

configure_logging()
logger = logging.getLogger(__name__)

ERROR_MESSAGE = "Oops something went wrong"
UNAUTHORIZED_MESSAGE = "Not Authorized"


def _name(helper: Callable[..., ResponseEnvelope], code: StatusCode) -> None:
    info = describe(code)
    helper.__name__ = helper.__qualname__ = info.helper
    helper.__doc__ = f"{info.code} {info.phrase}: {info.description}"


def _passthrough(code: StatusCode) -> Callable[[Any], ResponseEnvelope]:
    """Return a helper building ``code`` envelopes from an optional message."""
    status = int(code)

    def helper(message: Any = None) -> ResponseEnvelope:
        return build_envelope(status, message)

    _name(helper, code)
    return helper


def _keyed(code: StatusCode, default: str) -> Callable[[Optional[str]], ResponseEnvelope]:
    """Return a helper storing ``{"key": key or default}`` as the payload."""
    status = int(code)

    def helper(key: Optional[str] = None) -> ResponseEnvelope:
        return build_envelope(status, data={"key": key or default})

    _name(helper, code)
    return helper


# Informational 1xx
continue_response = _passthrough(StatusCode.CONTINUE)
switching_protocols = _passthrough(StatusCode.SWITCHING_PROTOCOLS)
processing = _passthrough(StatusCode.PROCESSING)


# Success 2xx
def success(data: Optional[Mapping[str, Any]] = None, key: Any = None) -> ResponseEnvelope:
    """200 OK carrying ``data``.

    ``key`` is stored in the envelope's ``stack`` slot, which callers use for
    trace or correlation identifiers.
    """
    return build_envelope(int(StatusCode.SUCCESS), "", data, key)


def success_message(
    data: Optional[Mapping[str, Any]] = None, message: Any = None, key: Any = None
) -> ResponseEnvelope:
    """200 OK carrying ``data`` and a ``message``.

    ``key`` is accepted for call-site compatibility and ignored.
    """
    return build_envelope(int(StatusCode.SUCCESS), message, data)


created = _keyed(StatusCode.CREATED, "PENDING")
accepted = _keyed(StatusCode.ACCEPTED, "ACCEPTED")
non_authoritative_info = _passthrough(StatusCode.NON_AUTHORITATIVE_INFORMATION)
no_content = _keyed(StatusCode.NO_CONTENT, "NO_CONTENT")
reset_content = _passthrough(StatusCode.RESET_CONTENT)
partial_content = _passthrough(StatusCode.PARTIAL_CONTENT)
multi_status = _passthrough(StatusCode.MULTI_STATUS)
already_reported = _passthrough(StatusCode.ALREADY_REPORTED)
im_used = _passthrough(StatusCode.IM_USED)

# Redirection 3xx
multiple_choices = _passthrough(StatusCode.MULTIPLE_CHOICES)
moved_permanently = _passthrough(StatusCode.MOVED_PERMANENTLY)
found = _passthrough(StatusCode.FOUND)
see_other = _passthrough(StatusCode.SEE_OTHER)
not_modified = _passthrough(StatusCode.NOT_MODIFIED)
temporary_redirect = _passthrough(StatusCode.TEMPORARY_REDIRECT)
permanent_redirect = _passthrough(StatusCode.PERMANENT_REDIRECT)

# Client error 4xx
bad_request = _passthrough(StatusCode.BAD_REQUEST)


def unauthorized() -> ResponseEnvelope:
    """401 Unauthorized with a fixed message."""
    return build_envelope(int(StatusCode.UNAUTHORIZED), UNAUTHORIZED_MESSAGE)


def forbidden(message: Any = None, data: Optional[Mapping[str, Any]] = None) -> ResponseEnvelope:
    """403 Forbidden with an optional message and payload."""
    return build_envelope(int(StatusCode.FORBIDDEN), message, data)


not_found = _keyed(StatusCode.NOT_FOUND, "ERR_NOT_FOUND")
method_not_allowed = _passthrough(StatusCode.METHOD_NOT_ALLOWED)
not_acceptable = _keyed(StatusCode.NOT_ACCEPTABLE, "NOT_ACCEPTABLE")
proxy_authentication_required = _passthrough(StatusCode.PROXY_AUTHENTICATION_REQUIRED)
request_timeout = _passthrough(StatusCode.REQUEST_TIMEOUT)
conflict = _passthrough(StatusCode.CONFLICT)
gone = _passthrough(StatusCode.GONE)
length_required = _passthrough(StatusCode.LENGTH_REQUIRED)
precondition_failed = _passthrough(StatusCode.PRECONDITION_FAILED)
payload_too_large = _passthrough(StatusCode.PAYLOAD_TOO_LARGE)
uri_too_long = _passthrough(StatusCode.URI_TOO_LONG)
unsupported_media_type = _passthrough(StatusCode.UNSUPPORTED_MEDIA_TYPE)
range_not_satisfiable = _passthrough(StatusCode.RANGE_NOT_SATISFIABLE)
expectation_failed = _passthrough(StatusCode.EXPECTATION_FAILED)
teapot = _passthrough(StatusCode.IM_A_TEAPOT)
misdirected_request = _passthrough(StatusCode.MISDIRECTED_REQUEST)
unprocessable_content = _passthrough(StatusCode.UNPROCESSABLE_CONTENT)
locked = _passthrough(StatusCode.LOCKED)
failed_dependency = _passthrough(StatusCode.FAILED_DEPENDENCY)
upgrade_required = _passthrough(StatusCode.UPGRADE_REQUIRED)
precondition_required = _passthrough(StatusCode.PRECONDITION_REQUIRED)
too_many_requests = _passthrough(StatusCode.TOO_MANY_REQUESTS)
request_header_fields_too_large = _passthrough(StatusCode.REQUEST_HEADER_FIELDS_TOO_LARGE)
unavailable_for_legal_reasons = _passthrough(StatusCode.UNAVAILABLE_FOR_LEGAL_REASONS)


# Server error 5xx
def error(err: Any = None) -> ResponseEnvelope:
    """500 Internal Server Error.

    ``err`` is logged and never copied into the envelope, which always
    carries the same generic message.
    """
    if isinstance(err, BaseException):
        logger.error(f"Internal server error: {err!r}", exc_info=err)
    else:
        logger.error(f"Internal server error: {err!r}")
    return build_envelope(int(StatusCode.INTERNAL_SERVER_ERROR), ERROR_MESSAGE)


not_implemented = _passthrough(StatusCode.NOT_IMPLEMENTED)
bad_gateway = _passthrough(StatusCode.BAD_GATEWAY)
service_unavailable = _passthrough(StatusCode.SERVICE_UNAVAILABLE)
gateway_timeout = _passthrough(StatusCode.GATEWAY_TIMEOUT)
http_version_not_supported = _passthrough(StatusCode.HTTP_VERSION_NOT_SUPPORTED)
variant_also_negotiates = _passthrough(StatusCode.VARIANT_ALSO_NEGOTIATES)
insufficient_storage = _passthrough(StatusCode.INSUFFICIENT_STORAGE)
loop_detected = _passthrough(StatusCode.LOOP_DETECTED)
not_extended = _passthrough(StatusCode.NOT_EXTENDED)
network_authentication_required = _passthrough(StatusCode.NETWORK_AUTHENTICATION_REQUIRED)

# AWS Elastic Load Balancer
http460 = _passthrough(StatusCode.ELB_CLIENT_CLOSED_CONNECTION)
http463 = _passthrough(StatusCode.ELB_TOO_MANY_FORWARDED_IPS)
http464 = _passthrough(StatusCode.ELB_INCOMPATIBLE_PROTOCOL)
http561 = _passthrough(StatusCode.ELB_UNAUTHORIZED)


HELPERS: Dict[int, Callable[..., ResponseEnvelope]] = {
    int(code): globals()[describe(code).helper] for code in StatusCode
}


def helper_for(code: int) -> Callable[..., ResponseEnvelope]:
    """Return the helper registered for ``code``.

    Raises:
        UnknownStatusError: If no helper exists for ``code``.
    """
    return HELPERS[describe(code).code]


def respond(code: int, *args: Any, **kwargs: Any) -> ResponseEnvelope:
    """Build an envelope for ``code`` using its helper's signature."""
    return helper_for(code)(*args, **kwargs)


__all__ = [
    "ERROR_MESSAGE",
    "HELPERS",
    "UNAUTHORIZED_MESSAGE",
    "UnknownStatusError",
    "helper_for",
    "respond",
    "continue_response",
    "switching_protocols",
    "processing",
    "success",
    "success_message",
    "created",
    "accepted",
    "non_authoritative_info",
    "no_content",
    "reset_content",
    "partial_content",
    "multi_status",
    "already_reported",
    "im_used",
    "multiple_choices",
    "moved_permanently",
    "found",
    "see_other",
    "not_modified",
    "temporary_redirect",
    "permanent_redirect",
    "bad_request",
    "unauthorized",
    "forbidden",
    "not_found",
    "method_not_allowed",
    "not_acceptable",
    "proxy_authentication_required",
    "request_timeout",
    "conflict",
    "gone",
    "length_required",
    "precondition_failed",
    "payload_too_large",
    "uri_too_long",
    "unsupported_media_type",
    "range_not_satisfiable",
    "expectation_failed",
    "teapot",
    "misdirected_request",
    "unprocessable_content",
    "locked",
    "failed_dependency",
    "upgrade_required",
    "precondition_required",
    "too_many_requests",
    "request_header_fields_too_large",
    "unavailable_for_legal_reasons",
    "error",
    "not_implemented",
    "bad_gateway",
    "service_unavailable",
    "gateway_timeout",
    "http_version_not_supported",
    "variant_also_negotiates",
    "insufficient_storage",
    "loop_detected",
    "not_extended",
    "network_authentication_required",
    "http460",
    "http463",
    "http464",
    "http561",
]
