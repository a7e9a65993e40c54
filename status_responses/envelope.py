"""The response envelope and its serialisers.

Every helper in :mod:`status_responses.helpers` funnels into
:func:`build_envelope`, which produces a plain ``dict`` of the shape::

    {"status": int, "message": Any, "data": dict, "stack": Any}

``message`` is left out for ``None``, ``False``, ``""``, numeric zero and NaN.
``stack`` is only present when the caller supplied something other than ``None``.
"""

from __future__ import annotations

import json
import numbers
from typing import Any
from typing import Dict
from typing import Mapping
from typing import Optional
from typing import TypedDict

from .codec_msgpack import CodecError
from .codec_msgpack import canonicalise
from .codec_msgpack import from_bytes as msgpack_from_bytes
from .codec_msgpack import to_canonical_bytes


class ResponseEnvelope(TypedDict, total=False):
    """Uniform response record returned by every helper."""

    status: int
    message: Any
    data: Dict[str, Any]
    stack: Any


def build_envelope(
    status: int,
    message: Any = None,
    data: Optional[Mapping[str, Any]] = None,
    stack: Any = None,
) -> ResponseEnvelope:
    """Build a new response envelope.

    Args:
        status (int): Status code stored verbatim. It is not validated.
        message (Any): Human readable description. ``None``, ``False``,
            ``""``, numeric zero and NaN leave the ``message`` key out; empty
            containers are kept.
        data (Optional[Mapping[str, Any]]): Payload. Falsy values are
            replaced with a new empty ``dict``.
        stack (Any): Diagnostic value such as a trace or correlation id.
            Omitted when ``None``.

    Returns:
        ResponseEnvelope: A freshly allocated envelope.
    """

    envelope: ResponseEnvelope = {"status": status}
    if not _is_falsy(message):
        envelope["message"] = message
    envelope["data"] = data or {}
    if stack is not None:
        envelope["stack"] = stack
    return envelope


def _is_falsy(value: Any) -> bool:
    """Return ``True`` for the values a message is dropped for."""
    if value is None or isinstance(value, bool):
        return value is not True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, numbers.Number):
        return value != value or value == 0
    return False


# Historical name of the builder.
response = build_envelope


def envelope_to_msgpack(envelope: Mapping[str, Any]) -> bytes:
    """Serialise an envelope to canonical MessagePack bytes."""
    return to_canonical_bytes(dict(envelope))


def envelope_from_msgpack(payload: bytes) -> ResponseEnvelope:
    """Decode MessagePack bytes produced by :func:`envelope_to_msgpack`.

    Raises:
        CodecError: If the payload is not a MessagePack map with a ``status``.
    """
    decoded = msgpack_from_bytes(payload)
    return _as_envelope(decoded)


def envelope_to_json(envelope: Mapping[str, Any]) -> bytes:
    """Serialise an envelope to UTF-8 JSON bytes with sorted keys."""
    try:
        text = json.dumps(canonicalise(dict(envelope)), sort_keys=True, default=str)
    except ValueError as exc:
        raise CodecError(f"Unable to encode envelope as JSON: {exc}") from exc
    return text.encode("utf-8")


def envelope_from_json(payload: bytes) -> ResponseEnvelope:
    """Decode JSON bytes produced by :func:`envelope_to_json`."""
    try:
        decoded = json.loads(payload.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise CodecError(f"Invalid JSON payload: {exc}") from exc
    return _as_envelope(decoded)


def _as_envelope(decoded: Any) -> ResponseEnvelope:
    if not isinstance(decoded, dict) or "status" not in decoded:
        raise CodecError("Envelope payload must be a map with a status")
    if not decoded.get("data"):
        decoded["data"] = {}
    return decoded  # type: ignore[return-value]


__all__ = [
    "ResponseEnvelope",
    "build_envelope",
    "response",
    "envelope_to_msgpack",
    "envelope_from_msgpack",
    "envelope_to_json",
    "envelope_from_json",
]
