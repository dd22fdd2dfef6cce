import pytest

from missive.address import Address
from missive.envelope import Envelope
from missive.serialization import (
    DeserializationError,
    address_from_value,
    address_to_value,
    envelope_from_dict,
    envelope_from_json,
    envelope_to_dict,
    envelope_to_json,
)


def _file_transport_envelope():
    return Envelope.from_headers(
        {
            "From": "NoBody <nobody@example.com>",
            "Reply-To": "Yuin <yuin@example.com>",
            "To": "Hei <hei@example.com>",
        }
    )


def test_envelope_json_matches_file_transport_format():
    assert (
        envelope_to_json(_file_transport_envelope())
        == '{"forward_path":["hei@example.com"],"reverse_path":"nobody@example.com"}'
    )


def test_envelope_json_round_trip():
    envelope = _file_transport_envelope()
    assert envelope_from_json(envelope_to_json(envelope)) == envelope


def test_envelope_dict_without_sender():
    envelope = Envelope(None, [Address.parse("a@example.com")])
    data = envelope_to_dict(envelope)
    assert data == {"forward_path": ["a@example.com"], "reverse_path": None}
    assert envelope_from_dict(data) == envelope


def test_missing_reverse_path_means_no_sender():
    envelope = envelope_from_dict({"forward_path": ["a@example.com"]})
    assert envelope.from_() is None
    assert envelope.to() == (Address.parse("a@example.com"),)


def test_missing_forward_path():
    with pytest.raises(DeserializationError, match="missing field `forward_path`"):
        envelope_from_dict({"reverse_path": "a@example.com"})


def test_empty_forward_path_rejected():
    with pytest.raises(DeserializationError):
        envelope_from_json('{"forward_path":[],"reverse_path":null}')


def test_address_to_value():
    assert address_to_value(Address("user", "example.com")) == "user@example.com"


def test_address_from_string():
    assert address_from_value("user@example.com") == Address("user", "example.com")


def test_address_from_object():
    assert address_from_value({"user": "user", "domain": "example.com"}) == Address(
        "user", "example.com"
    )


def test_address_object_inside_envelope_json():
    envelope = envelope_from_json(
        '{"forward_path":[{"user":"hei","domain":"example.com"}],"reverse_path":null}'
    )
    assert envelope.to() == (Address("hei", "example.com"),)


def test_address_from_invalid_string():
    with pytest.raises(DeserializationError, match="Invalid email user"):
        address_from_value("bad user@example.com")


def test_address_from_string_without_at():
    with pytest.raises(DeserializationError, match="Missing domain or user"):
        address_from_value("example.com")


def test_address_object_missing_domain():
    with pytest.raises(DeserializationError, match="missing field `domain`"):
        address_from_value({"user": "user"})


def test_address_object_missing_user():
    with pytest.raises(DeserializationError, match="missing field `user`"):
        address_from_value({"domain": "example.com"})


def test_address_object_unknown_field():
    with pytest.raises(DeserializationError, match="unknown field `host`"):
        address_from_value({"user": "user", "host": "example.com"})


def test_address_object_invalid_domain():
    with pytest.raises(DeserializationError, match="Invalid email domain"):
        address_from_value({"user": "user", "domain": "-bad-.example"})


def test_address_wrong_type():
    with pytest.raises(DeserializationError, match="expected email address string or object"):
        address_from_value(42)


def test_duplicate_field_in_json():
    text = '{"forward_path":[{"user":"a","user":"b","domain":"example.com"}]}'
    with pytest.raises(DeserializationError, match="duplicate field `user`"):
        envelope_from_json(text)


def test_invalid_json():
    with pytest.raises(DeserializationError):
        envelope_from_json("{not json")