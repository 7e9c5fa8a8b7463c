from dataclasses import dataclass
from datetime import date, time
from enum import Enum


class EventType(str, Enum):
    WEDDING = "wedding"
    BIRTHDAY = "birthday"
    CORPORATE = "corporate"


class ValidationErrorKind(str, Enum):
    EMPTY_LIST = "empty_list"
    MALFORMED_ADDRESS = "malformed_address"
    UNKNOWN_EVENT_TYPE = "unknown_event_type"
    MISSING_FIELD = "missing_field"
    INVALID_DATE = "invalid_date"
    INVALID_TIME = "invalid_time"
    RSVP_AFTER_EVENT = "rsvp_after_event"


class InvitationValidationError(Exception):
    """Raised when user-supplied event fields cannot form a valid request.

    ``offenders`` lists every rejected guest address for
    ``MALFORMED_ADDRESS``; ``field`` names the offending form field where
    one applies.
    """

    def __init__(
        self,
        kind: ValidationErrorKind,
        field: str | None = None,
        offenders: tuple[str, ...] = (),
    ) -> None:
        self.kind = kind
        self.field = field
        self.offenders = tuple(offenders)
        detail = f"Invalid invitation request: {kind.value}"
        if field:
            detail += f" ({field})"
        if self.offenders:
            detail += f": {', '.join(self.offenders)}"
        super().__init__(detail)


@dataclass(frozen=True)
class InvitationFields:
    """Raw form input, exactly as typed by the user."""

    event_type: str
    host_names: str
    event_date: str
    event_time: str
    venue: str
    rsvp_deadline: str
    guest_list: str
    custom_message: str = ""


@dataclass(frozen=True)
class InvitationRequest:
    """Validated, ready-to-submit invitation request."""

    event_type: EventType
    host_names: str
    event_date: date
    event_time: time
    venue: str
    rsvp_deadline: date
    guest_list: tuple[str, ...]
    custom_message: str = ""

    def to_payload(self) -> dict:
        """JSON body sent to the generation backend."""
        return {
            "eventType": self.event_type.value,
            "hostNames": self.host_names,
            "eventDate": self.event_date.isoformat(),
            "eventTime": self.event_time.strftime("%H:%M"),
            "venue": self.venue,
            "rsvpDeadline": self.rsvp_deadline.isoformat(),
            "customMessage": self.custom_message,
            "guestList": list(self.guest_list),
        }
