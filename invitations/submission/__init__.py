from .controller import SubmissionController, SubmissionInProgressError
from .states import (
    Failed,
    FailureKind,
    Idle,
    SubmissionFailure,
    SubmissionState,
    SubmissionStatus,
    Submitting,
    Succeeded,
)

__all__ = [
    "Failed",
    "FailureKind",
    "Idle",
    "SubmissionController",
    "SubmissionFailure",
    "SubmissionInProgressError",
    "SubmissionState",
    "SubmissionStatus",
    "Submitting",
    "Succeeded",
]
