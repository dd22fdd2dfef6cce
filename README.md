# missive

Building blocks for email delivery: validated email addresses, SMTP
envelopes, their JSON form, and non-blocking file access for `async` code.

## Installation

```
pip install missive
```

To run the test suite:

```
pip install "missive[test]"
pytest
```

## Addresses

`missive.address.Address` holds an email address as a user and a domain.

- The user part must match the HTML specification's rules for a valid email
  address. Quoted local parts are rejected.
- The domain may be an ASCII host name or an internationalized name. An
  internationalized name is checked after IDNA conversion, but it is kept as
  given. The domain may also be an IP literal such as `[192.0.2.1]` or
  `[::1]`.

```python
from missive.address import Address, AddressError, AddressErrorKind

address = Address("something", "example.com")
assert address.user == "something"
assert address.domain == "example.com"
assert str(address) == "something@example.com"
assert address.is_ascii()

assert Address.parse("something@example.com") == address

try:
    Address.parse("no-at-sign")
except AddressError as err:
    assert err.kind is AddressErrorKind.MISSING_PARTS
    print(err)  # Missing domain or user
```

`Address.parse` splits at the last `@`. `user` and `domain` are read-only
properties. Addresses compare, sort and hash by their full text, so they work
as dictionary keys and in sets.

The checks are also available on their own. `check_user(user)` and
`check_domain(domain)` raise `AddressError` with kind `INVALID_USER` or
`INVALID_DOMAIN`.

## Envelopes

`missive.envelope.Envelope` names the sender and the recipients. The sender
is the reverse path and may be `None`. The recipients are the forward path
and must not be empty; an empty forward path raises `EmailError` with kind
`ErrorKind.MISSING_TO`.

```python
from missive.address import Address
from missive.envelope import Envelope

sender = Address("user", "example.com")
recipient = Address("root", "example.com")

envelope = Envelope(sender, [recipient])
assert envelope.from_() == sender
assert envelope.to() == (recipient,)
assert not envelope.has_non_ascii_addresses()
```

`Envelope.from_headers(headers)` builds an envelope from message headers.
`headers` may be a mapping, an `email.message.Message`, or an iterable of
`(name, value)` pairs. Header names are matched without regard to case. Each
value may be one of:

- an `Address`,
- a header string naming one or more mailboxes, such as
  `"Hei <hei@example.com>, other@example.com"`,
- an iterable of these.

The sender comes from `Sender` if present and otherwise from `From`. If
`From` names more than one mailbox and there is no `Sender`, it raises
`EmailError` with kind `TOO_MANY_FROM`. The recipients are those of `To`,
`Cc` and `Bcc`, in that order.

## Serialization

`missive.serialization` turns addresses and envelopes into plain values and
JSON, and reads them back:

```python
from missive.serialization import envelope_from_json, envelope_to_json

text = envelope_to_json(envelope)
# {"forward_path":["root@example.com"],"reverse_path":"user@example.com"}
assert envelope_from_json(text) == envelope
```

- `address_to_value` / `address_from_value`: `address_from_value` accepts the
  `user@domain` string or a mapping with exactly the keys `user` and `domain`.
- `envelope_to_dict` / `envelope_from_dict`: these work on a dictionary with
  keys `forward_path` (a list) and `reverse_path` (an address or `None`).
- `envelope_to_json` / `envelope_from_json`: JSON is written in compact form.
  Duplicate keys are rejected when reading.

Bad input raises `DeserializationError`, a subclass of `ValueError`.

## Errors

- `missive.address.AddressError` is a `ValueError`. Its `kind` comes from
  `AddressErrorKind`.
- `missive.errors.EmailError` has a `kind` from `ErrorKind` and an optional
  `cause`. It covers envelope problems. `EmailError.from_os_error(err)` wraps
  an `OSError` as kind `IO`.

## File access from async code

`missive.executor.Executor` is the abstract interface, with `fs_read(path)`
and `fs_write(path, contents)`. `ThreadExecutor` implements it by running the
file operation in a worker thread, so the event loop is not blocked:

```python
from missive.executor import ThreadExecutor

executor = ThreadExecutor()
await executor.fs_write(path, b"data")
data = await executor.fs_read(path)
```

## What this package does not do

It does not compose messages. There is no message builder, no MIME support
and no header formatting. It does not deliver mail either: there is no SMTP
client, no command and no file-based mailbox writer. It provides the
address, envelope, serialization and file-access pieces that such tools
are built on.