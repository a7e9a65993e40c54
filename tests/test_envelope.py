from decimal import Decimal

import pytest

from status_responses import envelope as env


@pytest.mark.parametrize(
    "message", ["", 0, 0.0, -0.0, None, False, float("nan"), Decimal("0")]
)
def test_falsy_message_is_omitted(message):
    """Falsy messages, NaN included, leave the message key out."""
    result = env.build_envelope(400, message)
    assert "message" not in result
    assert result == {"status": 400, "data": {}}


@pytest.mark.parametrize(
    "message", ["bad input", 1, -1, True, {"key": "X"}, ["a"], {}, [], " "]
)
def test_other_messages_are_kept(message):
    """Every non-falsy message, empty containers included, is stored as given."""
    result = env.build_envelope(400, message)
    assert result["message"] == message


def test_empty_structured_messages_are_kept():
    """Empty mappings and lists are real messages, not missing ones."""
    assert env.build_envelope(400, {}) == {"status": 400, "message": {}, "data": {}}
    assert env.build_envelope(400, []) == {"status": 400, "message": [], "data": {}}


@pytest.mark.parametrize("data", [None, {}, 0, "", False])
def test_falsy_data_becomes_empty_mapping(data):
    """A falsy payload is replaced by an empty mapping."""
    result = env.build_envelope(200, "ok", data)
    assert result["data"] == {}


def test_status_only():
    """A bare status yields just the status and an empty payload."""
    assert env.build_envelope(404) == {"status": 404, "data": {}}


def test_status_is_not_validated():
    """Out-of-range statuses pass through unchanged."""
    assert env.build_envelope(999)["status"] == 999
    assert env.build_envelope(-1)["status"] == -1


def test_stack_only_present_when_supplied():
    """The stack key appears only when a value is given."""
    assert "stack" not in env.build_envelope(500, "boom")
    result = env.build_envelope(500, "boom", None, "trace-1")
    assert result == {"status": 500, "message": "boom", "data": {}, "stack": "trace-1"}


def test_data_is_passed_through():
    """A supplied payload is stored by reference."""
    payload = {"id": 1}
    assert env.build_envelope(200, None, payload)["data"] is payload


def test_each_call_returns_a_new_envelope():
    """Envelopes and their default payloads are never shared."""
    first = env.build_envelope(200)
    second = env.build_envelope(200)
    assert first == second
    assert first is not second
    assert first["data"] is not second["data"]


def test_response_alias():
    """The historical name points at the builder."""
    assert env.response is env.build_envelope


def test_msgpack_roundtrip_keeps_fields():
    """MessagePack encoding keeps every envelope field."""
    original = env.build_envelope(201, "made", {"id": 7, "tags": ["a", "b"]}, "trace")
    decoded = env.envelope_from_msgpack(env.envelope_to_msgpack(original))
    assert decoded == original


def test_msgpack_encoding_is_canonical():
    """Key order does not change the encoded bytes."""
    first = env.envelope_to_msgpack({"status": 200, "data": {"b": 1, "a": 2}})
    second = env.envelope_to_msgpack({"data": {"a": 2, "b": 1}, "status": 200})
    assert first == second


def test_json_encoding_sorts_keys():
    """JSON output is key-sorted and decodes back."""
    payload = env.envelope_to_json(env.build_envelope(200, "ok", {"z": 1, "a": 2}))
    assert payload == b'{"data": {"a": 2, "z": 1}, "message": "ok", "status": 200}'
    assert env.envelope_from_json(payload)["data"] == {"a": 2, "z": 1}


def test_decoding_restores_empty_data():
    """A null payload decodes to an empty mapping."""
    decoded = env.envelope_from_json(b'{"status": 204, "data": null}')
    assert decoded == {"status": 204, "data": {}}


@pytest.mark.parametrize("payload", [b"[1, 2]", b'{"data": {}}', b"not json"])
def test_invalid_json_envelopes_are_rejected(payload):
    """Non-envelope JSON raises a codec error."""
    with pytest.raises(env.CodecError):
        env.envelope_from_json(payload)


def test_invalid_msgpack_envelope_is_rejected():
    """A MessagePack map without a status raises a codec error."""
    with pytest.raises(env.CodecError):
        env.envelope_from_msgpack(env.envelope_to_msgpack({"data": {}}))
