from fastapi import APIRouter, Depends
from pydantic import BaseModel

from invitations.backend import HttpInvitationBackend, InvitationBackend, get_invitation_backend

router = APIRouter()


class HealthCheckResponse(BaseModel):
    status: str
    backend: str
    version: str = "0.1.0"


@router.get("/", response_model=HealthCheckResponse)
async def health_check(
    backend: InvitationBackend = Depends(get_invitation_backend),
) -> HealthCheckResponse:
    """
    Report that the API is up and which generation backend it submits to:
    "http" for a configured backend URL, "stub" for the built-in stand-in.
    """
    backend_mode = "http" if isinstance(backend, HttpInvitationBackend) else "stub"
    return HealthCheckResponse(status="healthy", backend=backend_mode)
