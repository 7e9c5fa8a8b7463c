from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from invitations.artifacts.dtos import InvitationArtifact, MappingError
from invitations.requests.dtos import InvitationRequest


class SubmissionStatus(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class FailureKind(str, Enum):
    MALFORMED_RESPONSE = "malformed_response"
    BACKEND_UNAVAILABLE = "backend_unavailable"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class SubmissionFailure:
    """Why a submission ended in the Failed state."""

    kind: FailureKind
    message: str
    # Set for MALFORMED_RESPONSE only
    mapping_error: MappingError | None = None


@dataclass(frozen=True)
class Idle:
    status: ClassVar[SubmissionStatus] = SubmissionStatus.IDLE


@dataclass(frozen=True)
class Submitting:
    request: InvitationRequest
    status: ClassVar[SubmissionStatus] = SubmissionStatus.SUBMITTING


@dataclass(frozen=True)
class Succeeded:
    artifact: InvitationArtifact
    status: ClassVar[SubmissionStatus] = SubmissionStatus.SUCCEEDED


@dataclass(frozen=True)
class Failed:
    error: SubmissionFailure
    status: ClassVar[SubmissionStatus] = SubmissionStatus.FAILED


SubmissionState = Idle | Submitting | Succeeded | Failed
