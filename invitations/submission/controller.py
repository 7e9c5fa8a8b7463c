"""Submission controller.

Drives one invitation form session through
Idle -> Submitting -> Succeeded | Failed, with at most one backend call in
flight at a time.
"""

import asyncio
import logging

from invitations.artifacts.adapter import ArtifactAdapter
from invitations.artifacts.dtos import MappingError
from invitations.backend.base import BackendUnavailableError, InvitationBackend
from invitations.requests.dtos import InvitationFields, InvitationRequest
from invitations.requests.request_model import build_invitation_request
from invitations.submission.states import (
    Failed,
    FailureKind,
    Idle,
    SubmissionFailure,
    SubmissionState,
    Submitting,
    Succeeded,
)

logger = logging.getLogger(__name__)


class SubmissionInProgressError(Exception):
    """Raised when submitting while another submission is in flight."""

    def __init__(self) -> None:
        super().__init__("An invitation submission is already in progress")


class SubmissionController:
    """Owns the SubmissionState of a single form session."""

    def __init__(
        self,
        backend: InvitationBackend,
        adapter: ArtifactAdapter | None = None,
        enforce_rsvp_deadline: bool = True,
    ) -> None:
        self._backend = backend
        self._adapter = adapter or ArtifactAdapter()
        self._enforce_rsvp_deadline = enforce_rsvp_deadline
        self._state: SubmissionState = Idle()
        self._cancel_event: asyncio.Event | None = None
        # Bumped by every submit and reset; stale backend results are dropped
        self._generation = 0

    @property
    def state(self) -> SubmissionState:
        return self._state

    def _transition(self, state: SubmissionState) -> None:
        logger.info(f"Submission state {self._state.status.value} -> {state.status.value}")
        self._state = state

    def _fail(self, kind: FailureKind, message: str, mapping_error: MappingError | None = None) -> None:
        logger.warning(f"Invitation submission failed ({kind.value}): {message}")
        self._transition(
            Failed(SubmissionFailure(kind=kind, message=message, mapping_error=mapping_error))
        )

    async def submit(
        self,
        submission: InvitationFields | InvitationRequest,
        cancel_event: asyncio.Event | None = None,
    ) -> SubmissionState:
        """Validate and submit an invitation, then wait for the outcome.

        Args:
            submission: Raw form fields, or an already validated request
            cancel_event: Setting this event while the backend call is in
                flight ends the submission as Failed(CANCELLED)

        Returns:
            The terminal state reached: Succeeded or Failed. If the
            controller was reset meanwhile, the current state.

        Raises:
            SubmissionInProgressError: if a submission is already in flight
            InvitationValidationError: if the fields are invalid; the state
                is left untouched and the backend is not called
        """
        if isinstance(self._state, Submitting):
            raise SubmissionInProgressError()

        if isinstance(submission, InvitationRequest):
            request = submission
        else:
            request = build_invitation_request(
                submission, enforce_rsvp_deadline=self._enforce_rsvp_deadline
            )

        self._generation += 1
        generation = self._generation
        self._cancel_event = cancel_event or asyncio.Event()
        self._transition(Submitting(request))

        backend_task = asyncio.ensure_future(self._backend.submit_invitation(request))
        cancel_task = asyncio.ensure_future(self._cancel_event.wait())
        try:
            await asyncio.wait({backend_task, cancel_task}, return_when=asyncio.FIRST_COMPLETED)
        except asyncio.CancelledError:
            backend_task.cancel()
            if generation == self._generation:
                self._fail(FailureKind.CANCELLED, "Invitation submission was cancelled")
            raise
        finally:
            cancel_task.cancel()

        if generation != self._generation:
            self._discard(backend_task)
            logger.info("Discarding result of a submission that was reset")
            return self._state

        if cancel_task.done() and not cancel_task.cancelled():
            self._discard(backend_task)
            self._fail(FailureKind.CANCELLED, "Invitation submission was cancelled")
            return self._state

        self._complete(backend_task)
        return self._state

    @staticmethod
    def _discard(backend_task: asyncio.Future) -> None:
        """Drop a backend call whose outcome no longer matters."""
        if not backend_task.done():
            backend_task.cancel()
        elif not backend_task.cancelled() and backend_task.exception() is not None:
            logger.info(f"Ignoring backend error after cancellation: {backend_task.exception()}")

    def _complete(self, backend_task: asyncio.Future) -> None:
        try:
            raw = backend_task.result()
        except BackendUnavailableError as e:
            self._fail(FailureKind.BACKEND_UNAVAILABLE, str(e))
            return
        except Exception as e:
            logger.exception("Unexpected error from the generation backend")
            self._fail(FailureKind.BACKEND_UNAVAILABLE, str(e) or type(e).__name__)
            return

        try:
            artifact = self._adapter.adapt(raw)
        except MappingError as e:
            self._fail(FailureKind.MALFORMED_RESPONSE, str(e), mapping_error=e)
            return

        self._transition(Succeeded(artifact))

    def cancel(self) -> None:
        """Cancel the in-flight submission, if any."""
        if isinstance(self._state, Submitting) and self._cancel_event is not None:
            self._cancel_event.set()

    def reset(self) -> None:
        """Return to Idle, abandoning any in-flight submission."""
        if isinstance(self._state, Submitting) and self._cancel_event is not None:
            self._cancel_event.set()
        self._generation += 1
        self._cancel_event = None
        self._transition(Idle())
