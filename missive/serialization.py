"""Conversion of addresses and envelopes to and from plain data and JSON."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from missive.address import Address, AddressError, check_domain, check_user
from missive.envelope import Envelope
from missive.errors import EmailError

_ADDRESS_FIELDS = ("user", "domain")


class DeserializationError(ValueError):
    """Raised when data does not describe a valid address or envelope."""


def address_to_value(address: Address) -> str:
    """Serialize an address as its ``user@domain`` string."""
    return str(address)


def address_from_value(value: Any) -> Address:
    """Read an address from a string or a ``{"user", "domain"}`` mapping."""
    if isinstance(value, str):
        try:
            return Address.parse(value)
        except AddressError as exc:
            raise DeserializationError(str(exc)) from exc
    if isinstance(value, Mapping):
        fields: dict[str, str] = {}
        for key, field_value in value.items():
            if key not in _ADDRESS_FIELDS:
                raise DeserializationError(
                    f"unknown field `{key}`, expected `user` or `domain`"
                )
            if not isinstance(field_value, str):
                raise DeserializationError(
                    f"invalid type for `{key}`: expected a string"
                )
            try:
                (check_user if key == "user" else check_domain)(field_value)
            except AddressError as exc:
                raise DeserializationError(str(exc)) from exc
            fields[key] = field_value
        for name in _ADDRESS_FIELDS:
            if name not in fields:
                raise DeserializationError(f"missing field `{name}`")
        return Address(fields["user"], fields["domain"])
    raise DeserializationError(
        f"invalid type: {type(value).__name__}, expected email address string or object"
    )


def envelope_to_dict(envelope: Envelope) -> dict[str, Any]:
    """Serialize an envelope to a plain dictionary."""
    sender = envelope.from_()
    return {
        "forward_path": [address_to_value(a) for a in envelope.to()],
        "reverse_path": None if sender is None else address_to_value(sender),
    }


def envelope_from_dict(data: Mapping[str, Any]) -> Envelope:
    """Read an envelope from a dictionary made by :func:`envelope_to_dict`."""
    if not isinstance(data, Mapping):
        raise DeserializationError(
            f"invalid type: {type(data).__name__}, expected struct Envelope"
        )
    if "forward_path" not in data:
        raise DeserializationError("missing field `forward_path`")
    forward = data["forward_path"]
    if isinstance(forward, (str, bytes, Mapping)) or not isinstance(forward, (list, tuple)):
        raise DeserializationError("invalid type for `forward_path`: expected a sequence")
    recipients = [address_from_value(item) for item in forward]
    reverse = data.get("reverse_path")
    sender = None if reverse is None else address_from_value(reverse)
    try:
        return Envelope(sender, recipients)
    except EmailError as exc:
        raise DeserializationError(str(exc)) from exc


def _unique_pairs(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in pairs:
        if key in result:
            raise DeserializationError(f"duplicate field `{key}`")
        result[key] = value
    return result


def envelope_to_json(envelope: Envelope) -> str:
    """Serialize an envelope to compact JSON."""
    return json.dumps(envelope_to_dict(envelope), separators=(",", ":"), ensure_ascii=False)


def envelope_from_json(text: str | bytes) -> Envelope:
    """Read an envelope from JSON made by :func:`envelope_to_json`."""
    try:
        data = json.loads(text, object_pairs_hook=_unique_pairs)
    except json.JSONDecodeError as exc:
        raise DeserializationError(str(exc)) from exc
    return envelope_from_dict(data)