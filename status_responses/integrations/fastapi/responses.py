"""Render response envelopes as FastAPI responses."""

from __future__ import annotations

import logging
from typing import Any
from typing import Mapping
from typing import Optional

from fastapi import FastAPI
from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from status_responses.controller import APIException
from status_responses.controller import exception_to_envelope
from status_responses.envelope import build_envelope
from status_responses.status import StatusCode


logger = logging.getLogger(__name__)

VALIDATION_MESSAGE = "Validation failed"

# Status codes whose responses must not carry a body.
_BODYLESS = frozenset({StatusCode.NO_CONTENT, StatusCode.NOT_MODIFIED})


def _transport_status(status: Any) -> int:
    """Return an HTTP status usable as a final response for ``status``.

    Informational statuses are interim responses, so they are sent as 200
    with the envelope as body. Anything outside 100-599 is sent as 500.
    """

    try:
        code = int(status)
    except (TypeError, ValueError):
        code = 0
    if 200 <= code <= 599:
        return code
    if 100 <= code < 200:
        logger.warning(f"Envelope status {status!r} is informational; sending 200")
        return StatusCode.SUCCESS
    logger.warning(f"Envelope status {status!r} is not a valid HTTP status; using 500")
    return StatusCode.INTERNAL_SERVER_ERROR


def envelope_response(
    envelope: Mapping[str, Any],
    *,
    mirror_status: bool = True,
    headers: Optional[Mapping[str, str]] = None,
) -> Response:
    """Return a response carrying ``envelope`` as its JSON body.

    Args:
        envelope (Mapping[str, Any]): Envelope built by a response helper.
        mirror_status (bool): Use the envelope status as the HTTP status.
            When ``False`` the HTTP status is always 200.
        headers (Optional[Mapping[str, str]]): Extra response headers, such
            as ``Allow`` for 405 or ``WWW-Authenticate`` for 401.

    Returns:
        Response: A :class:`JSONResponse`, or an empty :class:`Response` for
        204 and 304 statuses.
    """

    status_code = int(
        _transport_status(envelope.get("status")) if mirror_status else StatusCode.SUCCESS
    )
    headers = dict(headers) if headers else None
    if status_code in _BODYLESS:
        return Response(status_code=status_code, headers=headers)
    return JSONResponse(
        content=jsonable_encoder(dict(envelope)), status_code=status_code, headers=headers
    )


def install_exception_handlers(app: FastAPI, *, mirror_status: bool = True) -> None:
    """Register handlers rendering exceptions as envelope responses.

    ``APIException`` keeps its code and message, ``HTTPException`` keeps its
    status, detail and headers, request validation failures become a 422
    envelope listing the errors under ``data["errors"]``, and any other
    exception becomes the generic 500 envelope.
    """

    async def _api_exception(_: Request, exc: APIException) -> Response:
        return envelope_response(exception_to_envelope(exc), mirror_status=mirror_status)

    async def _http_exception(_: Request, exc: StarletteHTTPException) -> Response:
        envelope = build_envelope(exc.status_code, exc.detail)
        return envelope_response(
            envelope, mirror_status=mirror_status, headers=getattr(exc, "headers", None)
        )

    async def _validation_exception(_: Request, exc: RequestValidationError) -> Response:
        envelope = build_envelope(
            StatusCode.UNPROCESSABLE_CONTENT.value,
            VALIDATION_MESSAGE,
            {"errors": jsonable_encoder(exc.errors())},
        )
        return envelope_response(envelope, mirror_status=mirror_status)

    async def _unhandled_exception(_: Request, exc: Exception) -> Response:
        return envelope_response(exception_to_envelope(exc), mirror_status=mirror_status)

    app.add_exception_handler(APIException, _api_exception)
    app.add_exception_handler(StarletteHTTPException, _http_exception)
    app.add_exception_handler(RequestValidationError, _validation_exception)
    app.add_exception_handler(Exception, _unhandled_exception)
