"""SMTP envelopes: the sender and recipients that delivery uses."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from email.utils import getaddresses
from typing import Any

from missive.address import Address
from missive.errors import EmailError, ErrorKind


def _addresses(value: Any) -> list[Address]:
    """Turn a header value into the addresses it names."""
    if isinstance(value, Address):
        return [value]
    if isinstance(value, str):
        return [Address.parse(addr) for _name, addr in getaddresses([value])]
    if isinstance(value, Iterable):
        return [address for item in value for address in _addresses(item)]
    return _addresses(str(value))


def _header_values(headers: Any) -> dict[str, list[Any]]:
    items = headers.items() if hasattr(headers, "items") else headers
    grouped: dict[str, list[Any]] = {}
    for name, value in items:
        grouped.setdefault(str(name).lower(), []).append(value)
    return grouped


class Envelope:
    """The reverse path (sender) and forward path (recipients) of a message.

    Only plain mailboxes are accepted; source routes are not supported.
    """

    __slots__ = ("_forward_path", "_reverse_path")

    def __init__(self, from_: Address | None, to: Iterable[Address]) -> None:
        forward_path = tuple(to)
        if not forward_path:
            raise EmailError(ErrorKind.MISSING_TO)
        self._forward_path = forward_path
        self._reverse_path = from_

    def to(self) -> tuple[Address, ...]:
        """The recipient addresses; never empty."""
        return self._forward_path

    def from_(self) -> Address | None:
        """The sender address, if there is one."""
        return self._reverse_path

    def has_non_ascii_addresses(self) -> bool:
        """Whether any address in the envelope holds non-ASCII characters."""
        addresses = list(self._forward_path)
        if self._reverse_path is not None:
            addresses.append(self._reverse_path)
        return any(not address.is_ascii() for address in addresses)

    @classmethod
    def from_headers(cls, headers: Any) -> "Envelope":
        """Build an envelope from message headers.

        ``headers`` is a mapping (or anything with ``items()``, such as an
        :class:`email.message.Message`) from header names to values. A value
        may be an :class:`Address`, a header string of one or more mailboxes,
        or an iterable of these. The sender comes from ``Sender`` if present,
        else from ``From``, which must then name at most one mailbox. The
        recipients are those of ``To``, ``Cc`` and ``Bcc``, in that order.
        """
        grouped = _header_values(headers)

        sender: Address | None = None
        if "sender" in grouped:
            found = _addresses(grouped["sender"][0])
            sender = found[0] if found else None
        elif "from" in grouped:
            found = _addresses(grouped["from"])
            if len(found) > 1:
                raise EmailError(ErrorKind.TOO_MANY_FROM)
            sender = found[0] if found else None

        recipients = [
            address
            for name in ("to", "cc", "bcc")
            for address in _addresses(grouped.get(name, []))
        ]
        return cls(sender, recipients)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Envelope):
            return NotImplemented
        return (
            self._forward_path == other._forward_path
            and self._reverse_path == other._reverse_path
        )

    def __hash__(self) -> int:
        return hash((self._forward_path, self._reverse_path))

    def __repr__(self) -> str:
        return f"Envelope(from_={self._reverse_path!r}, to={list(self._forward_path)!r})"


def _ensure_mapping(headers: Any) -> Mapping[str, Any]:
    return headers if isinstance(headers, Mapping) else dict(headers)