from .dtos import (
    EventType,
    InvitationFields,
    InvitationRequest,
    InvitationValidationError,
    ValidationErrorKind,
)
from .email_list import validate_guest_list
from .request_model import build_invitation_request

__all__ = [
    "EventType",
    "InvitationFields",
    "InvitationRequest",
    "InvitationValidationError",
    "ValidationErrorKind",
    "build_invitation_request",
    "validate_guest_list",
]
