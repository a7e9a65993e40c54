"""HTTP response-status helpers building a uniform response envelope."""

from .catalog import STATUS_CATALOG
from .catalog import StatusInfo
from .catalog import UnknownStatusError
from .catalog import codes_in
from .catalog import describe
from .codec_msgpack import CodecError
from .controller import APIException
from .controller import exception_to_envelope
from .controller import handle_exceptions
from .envelope import ResponseEnvelope
from .envelope import build_envelope
from .envelope import envelope_from_json
from .envelope import envelope_from_msgpack
from .envelope import envelope_to_json
from .envelope import envelope_to_msgpack
from .envelope import response
from .helpers import ERROR_MESSAGE
from .helpers import HELPERS
from .helpers import UNAUTHORIZED_MESSAGE
from .helpers import helper_for
from .helpers import respond
from .helpers import continue_response
from .helpers import switching_protocols
from .helpers import processing
from .helpers import success
from .helpers import success_message
from .helpers import created
from .helpers import accepted
from .helpers import non_authoritative_info
from .helpers import no_content
from .helpers import reset_content
from .helpers import partial_content
from .helpers import multi_status
from .helpers import already_reported
from .helpers import im_used
from .helpers import multiple_choices
from .helpers import moved_permanently
from .helpers import found
from .helpers import see_other
from .helpers import not_modified
from .helpers import temporary_redirect
from .helpers import permanent_redirect
from .helpers import bad_request
from .helpers import unauthorized
from .helpers import forbidden
from .helpers import not_found
from .helpers import method_not_allowed
from .helpers import not_acceptable
from .helpers import proxy_authentication_required
from .helpers import request_timeout
from .helpers import conflict
from .helpers import gone
from .helpers import length_required
from .helpers import precondition_failed
from .helpers import payload_too_large
from .helpers import uri_too_long
from .helpers import unsupported_media_type
from .helpers import range_not_satisfiable
from .helpers import expectation_failed
from .helpers import teapot
from .helpers import misdirected_request
from .helpers import unprocessable_content
from .helpers import locked
from .helpers import failed_dependency
from .helpers import upgrade_required
from .helpers import precondition_required
from .helpers import too_many_requests
from .helpers import request_header_fields_too_large
from .helpers import unavailable_for_legal_reasons
from .helpers import error
from .helpers import not_implemented
from .helpers import bad_gateway
from .helpers import service_unavailable
from .helpers import gateway_timeout
from .helpers import http_version_not_supported
from .helpers import variant_also_negotiates
from .helpers import insufficient_storage
from .helpers import loop_detected
from .helpers import not_extended
from .helpers import network_authentication_required
from .helpers import http460
from .helpers import http463
from .helpers import http464
from .helpers import http561
from .logging_config import configure_logging
from .settings import LoggingSettings
from .settings import load_logging_settings
from .status import StatusCategory
from .status import StatusCode
from .status import category_for

__all__ = [
    "APIException",
    "CodecError",
    "ERROR_MESSAGE",
    "HELPERS",
    "LoggingSettings",
    "ResponseEnvelope",
    "STATUS_CATALOG",
    "StatusCategory",
    "StatusCode",
    "StatusInfo",
    "UNAUTHORIZED_MESSAGE",
    "UnknownStatusError",
    "build_envelope",
    "category_for",
    "codes_in",
    "configure_logging",
    "describe",
    "envelope_from_json",
    "envelope_from_msgpack",
    "envelope_to_json",
    "envelope_to_msgpack",
    "exception_to_envelope",
    "handle_exceptions",
    "helper_for",
    "load_logging_settings",
    "respond",
    "response",
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
