"""Build validated invitation requests from raw form fields."""

from dataclasses import fields as dataclass_fields
from datetime import date, time

from invitations.requests.dtos import (
    EventType,
    InvitationFields,
    InvitationRequest,
    InvitationValidationError,
    ValidationErrorKind,
)
from invitations.requests.email_list import validate_guest_list

OPTIONAL_FIELDS = frozenset({"custom_message"})


def parse_event_type(value: str) -> EventType:
    try:
        return EventType(value.strip().lower())
    except ValueError:
        raise InvitationValidationError(
            ValidationErrorKind.UNKNOWN_EVENT_TYPE, field="event_type"
        ) from None


def _parse_date(value: str, field: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise InvitationValidationError(ValidationErrorKind.INVALID_DATE, field=field) from None


def _parse_time(value: str, field: str) -> time:
    try:
        parsed = time.fromisoformat(value)
    except ValueError:
        raise InvitationValidationError(ValidationErrorKind.INVALID_TIME, field=field) from None

    # The backend takes a wall-clock HH:MM; anything finer would be dropped
    if parsed.second or parsed.microsecond or parsed.tzinfo is not None:
        raise InvitationValidationError(ValidationErrorKind.INVALID_TIME, field=field)
    return parsed


def build_invitation_request(
    fields: InvitationFields,
    *,
    enforce_rsvp_deadline: bool = True,
) -> InvitationRequest:
    """Validate raw form fields and build an ``InvitationRequest``.

    Args:
        fields: The raw form input
        enforce_rsvp_deadline: Reject requests whose RSVP deadline falls
            after the event date

    Returns:
        A fully validated InvitationRequest

    Raises:
        InvitationValidationError: describing the first problem found; guest
            list errors come straight from ``validate_guest_list``.
    """
    values = {f.name: getattr(fields, f.name).strip() for f in dataclass_fields(fields)}

    for name, value in values.items():
        if name not in OPTIONAL_FIELDS and not value:
            raise InvitationValidationError(ValidationErrorKind.MISSING_FIELD, field=name)

    event_type = parse_event_type(values["event_type"])
    event_date = _parse_date(values["event_date"], "event_date")
    rsvp_deadline = _parse_date(values["rsvp_deadline"], "rsvp_deadline")
    event_time = _parse_time(values["event_time"], "event_time")

    if enforce_rsvp_deadline and rsvp_deadline > event_date:
        raise InvitationValidationError(
            ValidationErrorKind.RSVP_AFTER_EVENT, field="rsvp_deadline"
        )

    guest_list = validate_guest_list(values["guest_list"])

    return InvitationRequest(
        event_type=event_type,
        host_names=values["host_names"],
        event_date=event_date,
        event_time=event_time,
        venue=values["venue"],
        rsvp_deadline=rsvp_deadline,
        guest_list=tuple(guest_list),
        custom_message=values["custom_message"],
    )
