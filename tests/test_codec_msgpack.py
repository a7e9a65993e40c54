from dataclasses import dataclass

import pytest

from status_responses import codec_msgpack as codec


def test_maps_are_sorted_by_key():
    """Map keys should be emitted in UTF-8 byte order."""
    enc = codec.to_canonical_bytes({"b": 1, "a": 2})
    expected = b"\x82" + b"\xa1a" + b"\x02" + b"\xa1b" + b"\x01"
    assert enc == expected


def test_nested_maps_are_sorted():
    """Nested maps are sorted at every level."""
    first = codec.to_canonical_bytes({"outer": {"y": 1, "x": [{"d": 1, "c": 2}]}})
    second = codec.to_canonical_bytes({"outer": {"x": [{"c": 2, "d": 1}], "y": 1}})
    assert first == second


def test_non_string_keys_rejected():
    """Map keys must be strings."""
    with pytest.raises(codec.CodecError):
        codec.to_canonical_bytes({1: "a"})


def test_unsupported_type_rejected():
    """Values msgpack cannot encode raise a codec error."""
    with pytest.raises(codec.CodecError):
        codec.to_canonical_bytes({"value": object()})


def test_dataclasses_and_containers_are_normalised():
    """Dataclasses, tuples and sets are encoded as plain data."""
    @dataclass
    class Item:
        name: str
        qty: int

    decoded = codec.from_bytes(
        codec.to_canonical_bytes({"item": Item("bolt", 3), "ids": (1, 2), "tags": {"b", "a"}})
    )
    assert decoded == {"item": {"name": "bolt", "qty": 3}, "ids": [1, 2], "tags": ["a", "b"]}


def test_bytes_are_kept_binary():
    """Bytes survive encoding as binary."""
    assert codec.from_bytes(codec.to_canonical_bytes(b"\x01\x02")) == b"\x01\x02"


def test_from_bytes_rejects_garbage():
    """Truncated payloads raise a codec error."""
    with pytest.raises(codec.CodecError):
        codec.from_bytes(b"\x82\xa1a")


@pytest.mark.parametrize("payload", ["not bytes", None, 42])
def test_from_bytes_rejects_non_bytes(payload):
    """Input that is not a bytes-like object raises a codec error."""
    with pytest.raises(codec.CodecError):
        codec.from_bytes(payload)
