"""Descriptive metadata for every status code that has a response helper.

References:
    https://developer.mozilla.org/en-US/docs/Web/HTTP/Status
    https://docs.aws.amazon.com/elasticloadbalancing/latest/application/load-balancer-troubleshooting.html
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import List
from typing import Mapping

from .status import VENDOR_CODES
from .status import StatusCategory
from .status import StatusCode
from .status import category_for


class UnknownStatusError(LookupError):
    """Raised when a status code has no entry in the catalog."""

    def __init__(self, code: int):
        super().__init__(f"No response helper is registered for status {code}")
        self.code = code


@dataclass(frozen=True)
class StatusInfo:
    """Metadata describing one status code and the helper that builds it."""

    code: int
    phrase: str
    helper: str
    category: StatusCategory
    description: str
    vendor: bool = False


_ENTRIES = (
    (
        StatusCode.CONTINUE,
        "Continue",
        "continue_response",
        "The client should continue the request or ignore the response if "
        "the request is already finished.",
    ),
    (
        StatusCode.SWITCHING_PROTOCOLS,
        "Switching Protocols",
        "switching_protocols",
        "Sent in response to an Upgrade request header; indicates the "
        "protocol the server is switching to.",
    ),
    (
        StatusCode.PROCESSING,
        "Processing",
        "processing",
        "The server has received and is processing the request, but no "
        "response is available yet (WebDAV).",
    ),
    (
        StatusCode.SUCCESS,
        "OK",
        "success",
        "The request succeeded. What is transmitted depends on the HTTP method.",
    ),
    (
        StatusCode.CREATED,
        "Created",
        "created",
        "The request succeeded and a new resource was created, typically "
        "after a POST or some PUT requests.",
    ),
    (
        StatusCode.ACCEPTED,
        "Accepted",
        "accepted",
        "The request has been received but not yet acted upon, for example "
        "when another process or a batch job handles it.",
    ),
    (
        StatusCode.NON_AUTHORITATIVE_INFORMATION,
        "Non-Authoritative Information",
        "non_authoritative_info",
        "The returned metadata was collected from a local or third-party "
        "copy rather than the origin server.",
    ),
    (
        StatusCode.NO_CONTENT,
        "No Content",
        "no_content",
        "There is no content to send for this request, but the headers may "
        "be useful.",
    ),
    (
        StatusCode.RESET_CONTENT,
        "Reset Content",
        "reset_content",
        "Tells the user agent to reset the document which sent this request.",
    ),
    (
        StatusCode.PARTIAL_CONTENT,
        "Partial Content",
        "partial_content",
        "Used when the Range header is sent to request only part of a resource.",
    ),
    (
        StatusCode.MULTI_STATUS,
        "Multi-Status",
        "multi_status",
        "Conveys information about multiple resources where multiple status "
        "codes might be appropriate (WebDAV).",
    ),
    (
        StatusCode.ALREADY_REPORTED,
        "Already Reported",
        "already_reported",
        "Members of a DAV binding have already been enumerated in a preceding "
        "part of the response (WebDAV).",
    ),
    (
        StatusCode.IM_USED,
        "IM Used",
        "im_used",
        "The server fulfilled a GET request and the response is a "
        "representation of one or more instance-manipulations (delta "
        "encoding).",
    ),
    (
        StatusCode.MULTIPLE_CHOICES,
        "Multiple Choices",
        "multiple_choices",
        "The request has more than one possible response and the user agent "
        "or user should choose one of them.",
    ),
    (
        StatusCode.MOVED_PERMANENTLY,
        "Moved Permanently",
        "moved_permanently",
        "The URL of the requested resource has been changed permanently.",
    ),
    (
        StatusCode.FOUND,
        "Found",
        "found",
        "The URI of the requested resource has been changed temporarily; "
        "the same URI should be used in future requests.",
    ),
    (
        StatusCode.SEE_OTHER,
        "See Other",
        "see_other",
        "Directs the client to get the requested resource at another URI "
        "with a GET request.",
    ),
    (
        StatusCode.NOT_MODIFIED,
        "Not Modified",
        "not_modified",
        "The response has not been modified, so the client can keep using "
        "its cached version.",
    ),
    (
        StatusCode.TEMPORARY_REDIRECT,
        "Temporary Redirect",
        "temporary_redirect",
        "Like 302 Found, but the user agent must not change the HTTP method "
        "used in the prior request.",
    ),
    (
        StatusCode.PERMANENT_REDIRECT,
        "Permanent Redirect",
        "permanent_redirect",
        "Like 301 Moved Permanently, but the user agent must not change the "
        "HTTP method used in the prior request.",
    ),
    (
        StatusCode.BAD_REQUEST,
        "Bad Request",
        "bad_request",
        "The server cannot or will not process the request due to a "
        "perceived client error.",
    ),
    (
        StatusCode.UNAUTHORIZED,
        "Unauthorized",
        "unauthorized",
        "Semantically \"unauthenticated\": the client must authenticate "
        "itself to get the requested response.",
    ),
    (
        StatusCode.FORBIDDEN,
        "Forbidden",
        "forbidden",
        "The client's identity is known but it does not have access rights "
        "to the content.",
    ),
    (
        StatusCode.NOT_FOUND,
        "Not Found",
        "not_found",
        "The server cannot find the requested resource.",
    ),
    (
        StatusCode.METHOD_NOT_ALLOWED,
        "Method Not Allowed",
        "method_not_allowed",
        "The request method is known by the server but is not supported by "
        "the target resource.",
    ),
    (
        StatusCode.NOT_ACCEPTABLE,
        "Not Acceptable",
        "not_acceptable",
        "Content negotiation found no content matching the criteria given by "
        "the user agent.",
    ),
    (
        StatusCode.PROXY_AUTHENTICATION_REQUIRED,
        "Proxy Authentication Required",
        "proxy_authentication_required",
        "Like 401 Unauthorized, but authentication must be done by a proxy.",
    ),
    (
        StatusCode.REQUEST_TIMEOUT,
        "Request Timeout",
        "request_timeout",
        "The server would like to shut down this unused connection.",
    ),
    (
        StatusCode.CONFLICT,
        "Conflict",
        "conflict",
        "The request conflicts with the current state of the server.",
    ),
    (
        StatusCode.GONE,
        "Gone",
        "gone",
        "The requested content has been permanently deleted from the server "
        "with no forwarding address.",
    ),
    (
        StatusCode.LENGTH_REQUIRED,
        "Length Required",
        "length_required",
        "The server requires the Content-Length header field, which is not "
        "defined.",
    ),
    (
        StatusCode.PRECONDITION_FAILED,
        "Precondition Failed",
        "precondition_failed",
        "The client indicated preconditions in its headers which the server "
        "does not meet.",
    ),
    (
        StatusCode.PAYLOAD_TOO_LARGE,
        "Payload Too Large",
        "payload_too_large",
        "The request entity is larger than the limits defined by the server.",
    ),
    (
        StatusCode.URI_TOO_LONG,
        "URI Too Long",
        "uri_too_long",
        "The URI requested is longer than the server is willing to interpret.",
    ),
    (
        StatusCode.UNSUPPORTED_MEDIA_TYPE,
        "Unsupported Media Type",
        "unsupported_media_type",
        "The media format of the requested data is not supported by the "
        "server.",
    ),
    (
        StatusCode.RANGE_NOT_SATISFIABLE,
        "Range Not Satisfiable",
        "range_not_satisfiable",
        "The range specified by the Range header field cannot be fulfilled.",
    ),
    (
        StatusCode.EXPECTATION_FAILED,
        "Expectation Failed",
        "expectation_failed",
        "The expectation indicated by the Expect request header cannot be "
        "met by the server.",
    ),
    (
        StatusCode.IM_A_TEAPOT,
        "I'm a teapot",
        "teapot",
        "The server refuses the attempt to brew coffee with a teapot.",
    ),
    (
        StatusCode.MISDIRECTED_REQUEST,
        "Misdirected Request",
        "misdirected_request",
        "The request was directed at a server that is not able to produce a "
        "response for that scheme and authority.",
    ),
    (
        StatusCode.UNPROCESSABLE_CONTENT,
        "Unprocessable Content",
        "unprocessable_content",
        "The request was well-formed but could not be followed due to "
        "semantic errors (WebDAV).",
    ),
    (
        StatusCode.LOCKED,
        "Locked",
        "locked",
        "The resource that is being accessed is locked (WebDAV).",
    ),
    (
        StatusCode.FAILED_DEPENDENCY,
        "Failed Dependency",
        "failed_dependency",
        "The request failed due to failure of a previous request (WebDAV).",
    ),
    (
        StatusCode.UPGRADE_REQUIRED,
        "Upgrade Required",
        "upgrade_required",
        "The server refuses to perform the request using the current "
        "protocol but might after the client upgrades.",
    ),
    (
        StatusCode.PRECONDITION_REQUIRED,
        "Precondition Required",
        "precondition_required",
        "The origin server requires the request to be conditional, to "
        "prevent the lost update problem.",
    ),
    (
        StatusCode.TOO_MANY_REQUESTS,
        "Too Many Requests",
        "too_many_requests",
        "The user has sent too many requests in a given amount of time.",
    ),
    (
        StatusCode.REQUEST_HEADER_FIELDS_TOO_LARGE,
        "Request Header Fields Too Large",
        "request_header_fields_too_large",
        "The server is unwilling to process the request because its header "
        "fields are too large.",
    ),
    (
        StatusCode.UNAVAILABLE_FOR_LEGAL_REASONS,
        "Unavailable For Legal Reasons",
        "unavailable_for_legal_reasons",
        "The requested resource cannot legally be provided.",
    ),
    (
        StatusCode.INTERNAL_SERVER_ERROR,
        "Internal Server Error",
        "error",
        "The server has encountered a situation it does not know how to "
        "handle.",
    ),
    (
        StatusCode.NOT_IMPLEMENTED,
        "Not Implemented",
        "not_implemented",
        "The request method is not supported by the server and cannot be "
        "handled.",
    ),
    (
        StatusCode.BAD_GATEWAY,
        "Bad Gateway",
        "bad_gateway",
        "The server, working as a gateway, got an invalid response.",
    ),
    (
        StatusCode.SERVICE_UNAVAILABLE,
        "Service Unavailable",
        "service_unavailable",
        "The server is not ready to handle the request, usually because it "
        "is down for maintenance or overloaded.",
    ),
    (
        StatusCode.GATEWAY_TIMEOUT,
        "Gateway Timeout",
        "gateway_timeout",
        "The server is acting as a gateway and cannot get a response in time.",
    ),
    (
        StatusCode.HTTP_VERSION_NOT_SUPPORTED,
        "HTTP Version Not Supported",
        "http_version_not_supported",
        "The HTTP version used in the request is not supported by the server.",
    ),
    (
        StatusCode.VARIANT_ALSO_NEGOTIATES,
        "Variant Also Negotiates",
        "variant_also_negotiates",
        "The chosen variant resource is itself configured to engage in "
        "transparent content negotiation.",
    ),
    (
        StatusCode.INSUFFICIENT_STORAGE,
        "Insufficient Storage",
        "insufficient_storage",
        "The server is unable to store the representation needed to "
        "complete the request (WebDAV).",
    ),
    (
        StatusCode.LOOP_DETECTED,
        "Loop Detected",
        "loop_detected",
        "The server detected an infinite loop while processing the request "
        "(WebDAV).",
    ),
    (
        StatusCode.NOT_EXTENDED,
        "Not Extended",
        "not_extended",
        "Further extensions to the request are required for the server to "
        "fulfill it.",
    ),
    (
        StatusCode.NETWORK_AUTHENTICATION_REQUIRED,
        "Network Authentication Required",
        "network_authentication_required",
        "The client needs to authenticate to gain network access.",
    ),
    (
        StatusCode.ELB_CLIENT_CLOSED_CONNECTION,
        "Client Closed Connection",
        "http460",
        "The client closed the connection with the load balancer before the "
        "idle timeout period elapsed.",
    ),
    (
        StatusCode.ELB_TOO_MANY_FORWARDED_IPS,
        "Too Many Forwarded Addresses",
        "http463",
        "The load balancer received an X-Forwarded-For request header with "
        "more than 30 IP addresses.",
    ),
    (
        StatusCode.ELB_INCOMPATIBLE_PROTOCOL,
        "Incompatible Protocol Versions",
        "http464",
        "The request protocol version is incompatible with the target group "
        "protocol version (HTTP/1.1, HTTP/2 or gRPC).",
    ),
    (
        StatusCode.ELB_UNAUTHORIZED,
        "Unauthorized",
        "http561",
        "The identity provider returned an error code when the load balancer "
        "authenticated the user.",
    ),
)


STATUS_CATALOG: Mapping[int, StatusInfo] = MappingProxyType(
    {
        int(code): StatusInfo(
            code=int(code),
            phrase=phrase,
            helper=helper,
            category=category_for(code),
            description=description,
            vendor=code in VENDOR_CODES,
        )
        for code, phrase, helper, description in _ENTRIES
    }
)


def describe(code: int) -> StatusInfo:
    """Return the catalog entry for ``code``.

    Raises:
        UnknownStatusError: If ``code`` has no helper.
    """
    try:
        return STATUS_CATALOG[int(code)]
    except (KeyError, TypeError, ValueError):
        raise UnknownStatusError(code) from None


def codes_in(category: StatusCategory) -> List[int]:
    """Return the sorted catalog codes belonging to ``category``."""
    category = StatusCategory(category)
    return sorted(
        code for code, info in STATUS_CATALOG.items() if info.category is category
    )


__all__ = [
    "STATUS_CATALOG",
    "StatusInfo",
    "UnknownStatusError",
    "codes_in",
    "describe",
]
