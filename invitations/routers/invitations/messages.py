"""Human readable notifications for invitation outcomes."""

from invitations.requests.dtos import InvitationValidationError, ValidationErrorKind
from invitations.submission.states import FailureKind, SubmissionFailure

SUCCESS_MESSAGE = "Invitation created successfully!"

FIELD_LABELS = {
    "event_type": "event type",
    "host_names": "host names",
    "event_date": "event date",
    "event_time": "event time",
    "venue": "venue",
    "rsvp_deadline": "RSVP deadline",
    "guest_list": "guest list",
}

VALIDATION_MESSAGES = {
    ValidationErrorKind.EMPTY_LIST: "Please enter valid email addresses separated by commas",
    ValidationErrorKind.MALFORMED_ADDRESS: "Please enter valid email addresses separated by commas",
    ValidationErrorKind.MISSING_FIELD: "Please fill in the {label}",
    ValidationErrorKind.UNKNOWN_EVENT_TYPE: "Please select a valid event type",
    ValidationErrorKind.INVALID_DATE: "Please enter a valid {label}",
    ValidationErrorKind.INVALID_TIME: "Please enter a valid {label}",
    ValidationErrorKind.RSVP_AFTER_EVENT: "The RSVP deadline must be on or before the event date",
}

FAILURE_MESSAGES = {
    FailureKind.BACKEND_UNAVAILABLE: "Failed to send invitation. Please try again.",
    FailureKind.MALFORMED_RESPONSE: "The invitation service returned an unexpected response.",
    FailureKind.CANCELLED: "The invitation request was cancelled.",
}


def validation_message(error: InvitationValidationError) -> str:
    label = FIELD_LABELS.get(error.field or "", error.field)
    return VALIDATION_MESSAGES[error.kind].format(label=label)


def failure_message(failure: SubmissionFailure) -> str:
    return FAILURE_MESSAGES.get(failure.kind, failure.message)
