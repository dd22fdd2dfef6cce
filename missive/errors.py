"""Errors raised while building envelopes and messages."""

from __future__ import annotations

import enum


class ErrorKind(enum.Enum):
    """The kind of failure behind an :class:`EmailError`."""

    MISSING_FROM = enum.auto()
    MISSING_TO = enum.auto()
    TOO_MANY_FROM = enum.auto()
    EMAIL_MISSING_AT = enum.auto()
    EMAIL_MISSING_LOCAL_PART = enum.auto()
    EMAIL_MISSING_DOMAIN = enum.auto()
    CANNOT_PARSE_FILENAME = enum.auto()
    IO = enum.auto()
    NON_ASCII_CHARS = enum.auto()


_MESSAGES = {
    ErrorKind.MISSING_FROM: "missing source address, invalid envelope",
    ErrorKind.MISSING_TO: "missing destination address, invalid envelope",
    ErrorKind.TOO_MANY_FROM: "there can only be one source address",
    ErrorKind.EMAIL_MISSING_AT: "missing @ in email address",
    ErrorKind.EMAIL_MISSING_LOCAL_PART: "missing local part in email address",
    ErrorKind.EMAIL_MISSING_DOMAIN: "missing domain in email address",
    ErrorKind.CANNOT_PARSE_FILENAME: "could not parse attachment filename",
    ErrorKind.NON_ASCII_CHARS: "contains non-ASCII chars",
}


class EmailError(Exception):
    """Error about email content or envelopes."""

    def __init__(self, kind: ErrorKind, cause: BaseException | None = None) -> None:
        self.kind = kind
        self.cause = cause
        super().__init__(str(self))
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        if self.kind is ErrorKind.IO:
            return str(self.cause) if self.cause is not None else ""
        return _MESSAGES[self.kind]

    def __repr__(self) -> str:
        return f"EmailError({self.kind.name}, {self.cause!r})"

    @classmethod
    def from_os_error(cls, err: OSError) -> "EmailError":
        """Wrap an operating-system error."""
        return cls(ErrorKind.IO, err)