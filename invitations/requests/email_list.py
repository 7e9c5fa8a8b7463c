import re

from invitations.requests.dtos import InvitationValidationError, ValidationErrorKind

# local-part@domain.tld, no whitespace and a single "@"
EMAIL_ADDRESS_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def is_valid_address(address: str) -> bool:
    return EMAIL_ADDRESS_RE.fullmatch(address) is not None


def split_guest_list(raw: str) -> list[str]:
    """Split a comma separated guest list, dropping blank segments."""
    segments = (segment.strip() for segment in raw.split(","))
    return [segment for segment in segments if segment]


def validate_guest_list(raw: str) -> list[str]:
    """Parse ``raw`` into an ordered list of guest addresses.

    Raises:
        InvitationValidationError: ``EMPTY_LIST`` when no address remains
            after splitting, ``MALFORMED_ADDRESS`` listing every segment that
            fails the address grammar.
    """
    addresses = split_guest_list(raw)
    if not addresses:
        raise InvitationValidationError(ValidationErrorKind.EMPTY_LIST, field="guest_list")

    offenders = tuple(address for address in addresses if not is_valid_address(address))
    if offenders:
        raise InvitationValidationError(
            ValidationErrorKind.MALFORMED_ADDRESS,
            field="guest_list",
            offenders=offenders,
        )

    return addresses
