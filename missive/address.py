"""Email addresses with a validated user and domain."""

from __future__ import annotations

import enum
import functools
import ipaddress
import re

import idna

# Patterns follow the HTML "valid e-mail address" definition; quoted
# local parts and other esoteric forms are rejected.
_USER_RE = re.compile(r"[a-z0-9.!#$%&'*+/=?^_`{|}~-]+", re.IGNORECASE)
_DOMAIN_RE = re.compile(
    r"[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?(?:.[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?)*",
    re.IGNORECASE,
)
# Address literal: an IPv4 or IPv6 address in brackets.
_LITERAL_RE = re.compile(r"\[([A-f0-9:.]+)\]\Z", re.IGNORECASE)


class AddressErrorKind(enum.Enum):
    """Why an address failed to parse."""

    MISSING_PARTS = "Missing domain or user"
    UNBALANCED = "Unbalanced angle bracket"
    INVALID_USER = "Invalid email user"
    INVALID_DOMAIN = "Invalid email domain"
    INVALID_UTF8B = "Invalid UTF8b data"


class AddressError(ValueError):
    """Raised when an email address is malformed."""

    def __init__(self, kind: AddressErrorKind) -> None:
        self.kind = kind
        super().__init__(kind.value)

    def __str__(self) -> str:
        return self.kind.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AddressError):
            return NotImplemented
        return self.kind is other.kind

    def __hash__(self) -> int:
        return hash(self.kind)


def check_user(user: str) -> None:
    """Raise :class:`AddressError` unless ``user`` is a valid local part."""
    if _USER_RE.fullmatch(user) is None:
        raise AddressError(AddressErrorKind.INVALID_USER)


def _check_domain_ascii(domain: str) -> None:
    if _DOMAIN_RE.fullmatch(domain) is not None:
        return
    match = _LITERAL_RE.search(domain)
    if match is not None:
        try:
            ipaddress.ip_address(match.group(1))
        except ValueError:
            pass
        else:
            return
    raise AddressError(AddressErrorKind.INVALID_DOMAIN)


def check_domain(domain: str) -> None:
    """Raise :class:`AddressError` unless ``domain`` is valid, IDNA allowed."""
    try:
        _check_domain_ascii(domain)
        return
    except AddressError:
        pass
    try:
        ascii_domain = idna.encode(domain, uts46=True).decode("ascii")
    except UnicodeError as exc:
        raise AddressError(AddressErrorKind.INVALID_DOMAIN) from exc
    _check_domain_ascii(ascii_domain)


@functools.total_ordering
class Address:
    """An email address made of a user and a domain."""

    __slots__ = ("_serialized", "_at_start")

    def __init__(self, user: str, domain: str) -> None:
        check_user(user)
        check_domain(domain)
        self._serialized = f"{user}@{domain}"
        self._at_start = len(user)

    @classmethod
    def parse(cls, val: str) -> "Address":
        """Parse ``user@domain``, splitting at the last ``@``."""
        user, sep, domain = val.rpartition("@")
        if not sep:
            raise AddressError(AddressErrorKind.MISSING_PARTS)
        return cls(user, domain)

    @property
    def user(self) -> str:
        """The part before the ``@``."""
        return self._serialized[: self._at_start]

    @property
    def domain(self) -> str:
        """The part after the ``@``."""
        return self._serialized[self._at_start + 1 :]

    def is_ascii(self) -> bool:
        """Whether the address holds only ASCII characters."""
        return self._serialized.isascii()

    def _key(self) -> tuple[str, int]:
        return (self._serialized, self._at_start)

    def __str__(self) -> str:
        return self._serialized

    def __repr__(self) -> str:
        return f"Address({self._serialized!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Address):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Address):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())