from invitations.requests.dtos import InvitationValidationError, ValidationErrorKind
from invitations.routers.invitations.messages import failure_message, validation_message
from invitations.submission.states import FailureKind, SubmissionFailure


def test_every_validation_kind_has_a_message():
    for kind in ValidationErrorKind:
        message = validation_message(InvitationValidationError(kind, field="event_date"))
        assert message
        assert "{label}" not in message


def test_invalid_date_message_names_the_field():
    error = InvitationValidationError(ValidationErrorKind.INVALID_DATE, field="rsvp_deadline")

    assert validation_message(error) == "Please enter a valid RSVP deadline"


def test_cancelled_failure_message():
    failure = SubmissionFailure(kind=FailureKind.CANCELLED, message="cancelled")

    assert failure_message(failure) == "The invitation request was cancelled."
