"""Enumeration of the HTTP status codes covered by the response helpers."""

from enum import Enum
from enum import IntEnum

# 460, 463, 464 and 561 are emitted by AWS Elastic Load Balancers and are not
# part of the IANA registry.


class StatusCode(IntEnum):
    """Standard and load-balancer status codes with a response helper."""

    # Informational 1xx
    CONTINUE = 100
    SWITCHING_PROTOCOLS = 101
    PROCESSING = 102

    # Success 2xx
    SUCCESS = 200
    CREATED = 201
    ACCEPTED = 202
    NON_AUTHORITATIVE_INFORMATION = 203
    NO_CONTENT = 204
    RESET_CONTENT = 205
    PARTIAL_CONTENT = 206
    MULTI_STATUS = 207
    ALREADY_REPORTED = 208
    IM_USED = 226

    # Redirection 3xx
    MULTIPLE_CHOICES = 300
    MOVED_PERMANENTLY = 301
    FOUND = 302
    SEE_OTHER = 303
    NOT_MODIFIED = 304
    TEMPORARY_REDIRECT = 307
    PERMANENT_REDIRECT = 308

    # Client error 4xx
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    METHOD_NOT_ALLOWED = 405
    NOT_ACCEPTABLE = 406
    PROXY_AUTHENTICATION_REQUIRED = 407
    REQUEST_TIMEOUT = 408
    CONFLICT = 409
    GONE = 410
    LENGTH_REQUIRED = 411
    PRECONDITION_FAILED = 412
    PAYLOAD_TOO_LARGE = 413
    URI_TOO_LONG = 414
    UNSUPPORTED_MEDIA_TYPE = 415
    RANGE_NOT_SATISFIABLE = 416
    EXPECTATION_FAILED = 417
    IM_A_TEAPOT = 418
    MISDIRECTED_REQUEST = 421
    UNPROCESSABLE_CONTENT = 422
    LOCKED = 423
    FAILED_DEPENDENCY = 424
    UPGRADE_REQUIRED = 426
    PRECONDITION_REQUIRED = 428
    TOO_MANY_REQUESTS = 429
    REQUEST_HEADER_FIELDS_TOO_LARGE = 431
    UNAVAILABLE_FOR_LEGAL_REASONS = 451

    # Server error 5xx
    INTERNAL_SERVER_ERROR = 500
    NOT_IMPLEMENTED = 501
    BAD_GATEWAY = 502
    SERVICE_UNAVAILABLE = 503
    GATEWAY_TIMEOUT = 504
    HTTP_VERSION_NOT_SUPPORTED = 505
    VARIANT_ALSO_NEGOTIATES = 506
    INSUFFICIENT_STORAGE = 507
    LOOP_DETECTED = 508
    NOT_EXTENDED = 510
    NETWORK_AUTHENTICATION_REQUIRED = 511

    # AWS Elastic Load Balancer
    ELB_CLIENT_CLOSED_CONNECTION = 460
    ELB_TOO_MANY_FORWARDED_IPS = 463
    ELB_INCOMPATIBLE_PROTOCOL = 464
    ELB_UNAUTHORIZED = 561


class StatusCategory(str, Enum):
    """Response classes, plus a bucket for vendor extension codes."""

    INFORMATIONAL = "informational"
    SUCCESS = "success"
    REDIRECTION = "redirection"
    CLIENT_ERROR = "client_error"
    SERVER_ERROR = "server_error"
    VENDOR = "vendor"


VENDOR_CODES = frozenset(
    {
        StatusCode.ELB_CLIENT_CLOSED_CONNECTION,
        StatusCode.ELB_TOO_MANY_FORWARDED_IPS,
        StatusCode.ELB_INCOMPATIBLE_PROTOCOL,
        StatusCode.ELB_UNAUTHORIZED,
    }
)

_CLASS_BY_DIGIT = {
    1: StatusCategory.INFORMATIONAL,
    2: StatusCategory.SUCCESS,
    3: StatusCategory.REDIRECTION,
    4: StatusCategory.CLIENT_ERROR,
    5: StatusCategory.SERVER_ERROR,
}


def category_for(code: int) -> StatusCategory:
    """Return the category a status code belongs to.

    Args:
        code (int): Status code to classify.

    Returns:
        StatusCategory: ``VENDOR`` for the load-balancer codes, otherwise the
        class implied by the hundreds digit.

    Raises:
        ValueError: If ``code`` lies outside the 100-599 range.
    """
    if code in VENDOR_CODES:
        return StatusCategory.VENDOR
    category = _CLASS_BY_DIGIT.get(int(code) // 100)
    if category is None:
        raise ValueError(f"Status code {code} is outside the 100-599 range")
    return category


__all__ = ["StatusCode", "StatusCategory", "VENDOR_CODES", "category_for"]
