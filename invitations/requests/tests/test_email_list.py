"""Unit tests for guest list parsing and validation."""

import pytest

from invitations.requests.dtos import InvitationValidationError, ValidationErrorKind
from invitations.requests.email_list import (
    is_valid_address,
    split_guest_list,
    validate_guest_list,
)


class TestIsValidAddress:
    @pytest.mark.parametrize(
        "address",
        ["a@x.com", "john.doe@example.co.uk", "first+tag@sub.domain.org"],
    )
    def test_accepts_plain_addresses(self, address):
        assert is_valid_address(address)

    @pytest.mark.parametrize(
        "address",
        ["bad", "no-domain@", "@example.com", "a@localhost", "a b@x.com", "a@@x.com", "a@x.com\n"],
    )
    def test_rejects_malformed_addresses(self, address):
        assert not is_valid_address(address)


def test_split_drops_blank_segments():
    assert split_guest_list(" a@x.com,, b@y.com , ") == ["a@x.com", "b@y.com"]


def test_validate_returns_addresses_in_order_stripped():
    raw = "  c@z.org ,a@x.com,   b@y.com"

    assert validate_guest_list(raw) == ["c@z.org", "a@x.com", "b@y.com"]


def test_validate_keeps_duplicates():
    assert validate_guest_list("a@x.com, a@x.com") == ["a@x.com", "a@x.com"]


def test_validate_tolerates_trailing_comma():
    assert validate_guest_list("a@x.com, b@y.com,") == ["a@x.com", "b@y.com"]


@pytest.mark.parametrize("raw", ["", "   ", ",", " , ,, "])
def test_validate_empty_list(raw):
    with pytest.raises(InvitationValidationError) as exc_info:
        validate_guest_list(raw)

    assert exc_info.value.kind == ValidationErrorKind.EMPTY_LIST
    assert exc_info.value.offenders == ()


def test_validate_reports_single_offender():
    with pytest.raises(InvitationValidationError) as exc_info:
        validate_guest_list("bad, b@y.com")

    assert exc_info.value.kind == ValidationErrorKind.MALFORMED_ADDRESS
    assert exc_info.value.offenders == ("bad",)


def test_validate_reports_every_offender():
    with pytest.raises(InvitationValidationError) as exc_info:
        validate_guest_list("bad, a@x.com, nodot@example, also bad@x.com")

    assert exc_info.value.offenders == ("bad", "nodot@example", "also bad@x.com")
    assert "nodot@example" in str(exc_info.value)


def test_validate_is_repeatable():
    raw = "a@x.com, b@y.com"

    assert validate_guest_list(raw) == validate_guest_list(raw)
