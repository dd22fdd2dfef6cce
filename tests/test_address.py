import pytest

from missive.address import (
    Address,
    AddressError,
    AddressErrorKind,
    check_domain,
    check_user,
)


def test_parse_address():
    addr = Address.parse("something@example.com")
    addr2 = Address("something", "example.com")
    assert addr == addr2
    assert addr.user == "something"
    assert addr.domain == "example.com"
    assert addr2.user == "something"
    assert addr2.domain == "example.com"


def test_str_round_trip():
    addr = Address("user", "example.com")
    assert str(addr) == "user@example.com"
    assert Address.parse(str(addr)) == addr


def test_missing_at():
    with pytest.raises(AddressError) as info:
        Address.parse("example.com")
    assert info.value.kind is AddressErrorKind.MISSING_PARTS
    assert str(info.value) == "Missing domain or user"


def test_invalid_user():
    with pytest.raises(AddressError) as info:
        Address.parse("us er@example.com")
    assert info.value.kind is AddressErrorKind.INVALID_USER
    assert str(info.value) == "Invalid email user"


def test_empty_user():
    with pytest.raises(AddressError) as info:
        Address.parse("@example.com")
    assert info.value.kind is AddressErrorKind.INVALID_USER


def test_split_at_last_at_sign():
    with pytest.raises(AddressError) as info:
        Address.parse("a@b@example.com")
    assert info.value.kind is AddressErrorKind.INVALID_USER


@pytest.mark.parametrize("domain", ["", "-example.com"])
def test_invalid_domain(domain):
    with pytest.raises(AddressError) as info:
        Address("user", domain)
    assert info.value.kind is AddressErrorKind.INVALID_DOMAIN
    assert str(info.value) == "Invalid email domain"


def test_invalid_ip_literal():
    with pytest.raises(AddressError) as info:
        check_domain("[999.1.1.1]")
    assert info.value.kind is AddressErrorKind.INVALID_DOMAIN


def test_check_user_rejects_space():
    with pytest.raises(AddressError) as info:
        check_user("a b")
    assert info.value.kind is AddressErrorKind.INVALID_USER


def test_unicode_domain_accepted_and_not_ascii():
    addr = Address("user", "bücher.example.com")
    assert addr.domain == "bücher.example.com"
    assert addr.is_ascii() is False


def test_ascii_address_is_ascii():
    assert Address("user", "example.com").is_ascii() is True


def test_special_user_characters():
    addr = Address.parse("first.last+tag@example.com")
    assert addr.user == "first.last+tag"


def test_ordering_and_hash():
    a = Address("alice", "example.com")
    b = Address("bob", "example.com")
    assert sorted([b, a]) == [a, b]
    assert a < b
    assert len({a, Address.parse("alice@example.com"), b}) == 2


@pytest.mark.parametrize(
    "kind, message",
    [
        (AddressErrorKind.UNBALANCED, "Unbalanced angle bracket"),
        (AddressErrorKind.INVALID_UTF8B, "Invalid UTF8b data"),
    ],
)
def test_error_messages(kind, message):
    assert str(AddressError(kind)) == message