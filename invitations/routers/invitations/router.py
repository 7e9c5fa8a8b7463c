import logging

from fastapi import APIRouter, Depends, HTTPException

from invitations.backend import get_invitation_backend
from invitations.config.settings import settings
from invitations.requests.dtos import InvitationValidationError
from invitations.routers.invitations.messages import (
    SUCCESS_MESSAGE,
    failure_message,
    validation_message,
)
from invitations.routers.invitations.schemas import (
    InvitationCreate,
    InvitationCreated,
    InvitationOut,
)
from invitations.routers.invitations.urls import CREATE_INVITATION_URL
from invitations.submission.controller import SubmissionController
from invitations.submission.states import Succeeded

logger = logging.getLogger(__name__)

router = APIRouter()


def get_submission_controller() -> SubmissionController:
    """Dependency providing a fresh controller for each form session."""
    return SubmissionController(
        backend=get_invitation_backend(),
        enforce_rsvp_deadline=settings.enforce_rsvp_deadline,
    )


@router.post(
    CREATE_INVITATION_URL,
    response_model=InvitationCreated,
    status_code=201,
)
async def create_invitation(
    invitation: InvitationCreate,
    controller: SubmissionController = Depends(get_submission_controller),
) -> InvitationCreated:
    """
    Generate an invitation from the event form.

    The guest list is a comma separated string of email addresses.
    Returns the invitation text together with the generated image, audio,
    venue location and delivery receipt when the backend provides them.
    """
    try:
        state = await controller.submit(invitation.to_fields())
    except InvitationValidationError as e:
        raise HTTPException(
            status_code=422,
            detail={
                "message": validation_message(e),
                "kind": e.kind.value,
                "field": e.field,
                "offenders": list(e.offenders),
            },
        )

    if isinstance(state, Succeeded):
        return InvitationCreated(
            message=SUCCESS_MESSAGE,
            invitation=InvitationOut.model_validate(state.artifact.to_dict()),
        )

    failure = state.error
    logger.error(f"Invitation generation failed: {failure.message}")
    raise HTTPException(
        status_code=502,
        detail={
            "message": failure_message(failure),
            "kind": failure.kind.value,
        },
    )
