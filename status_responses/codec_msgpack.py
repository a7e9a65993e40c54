"""
codec_msgpack.py
Canonical MessagePack codec for response envelopes.

Key functions:
- to_canonical_bytes(obj) -> bytes
- from_bytes(b: bytes) -> obj
- canonicalise(obj) -> obj with sorted maps and plain containers

Canonicalization rules
1) Maps: only string keys; keys are sorted by their UTF-8 byte value (ascending).
2) Dataclasses are encoded as maps of their fields.
3) Tuples, sets and frozensets are encoded as arrays (sets sorted when possible).
4) Strings vs Binary: human text as str; opaque bytes as bin.
"""

from dataclasses import asdict
from dataclasses import is_dataclass
from typing import Any

import msgpack


class CodecError(Exception):
    pass


def canonicalise(value: Any) -> Any:
    """Return ``value`` with maps key-sorted and containers made plain."""
    if is_dataclass(value) and not isinstance(value, type):
        return canonicalise(asdict(value))
    if isinstance(value, dict):
        items = []
        for key, item in value.items():
            if not isinstance(key, str):
                raise CodecError("Canonical maps require string keys")
            items.append((key.encode("utf-8"), key, canonicalise(item)))
        items.sort(key=lambda t: t[0])
        return {key: item for _, key, item in items}
    if isinstance(value, (list, tuple)):
        return [canonicalise(item) for item in value]
    if isinstance(value, (set, frozenset)):
        members = [canonicalise(item) for item in value]
        try:
            return sorted(members)
        except TypeError:
            return members
    return value


def to_canonical_bytes(obj: Any) -> bytes:
    """
    Encode obj to canonical MessagePack bytes with the rules above.
    """
    try:
        return msgpack.packb(canonicalise(obj), use_bin_type=True)
    except (TypeError, OverflowError, ValueError) as exc:
        raise CodecError(f"Unable to encode {type(obj).__name__}: {exc}") from exc


def from_bytes(b: bytes) -> Any:
    """
    Decode MessagePack bytes to a Python object.

    Note: Decoding does not preserve map key order; canonicalization applies only to encoding.
    """
    try:
        return msgpack.unpackb(b, raw=False)
    except (TypeError, ValueError) as exc:
        raise CodecError(f"Invalid MessagePack payload: {exc}") from exc
