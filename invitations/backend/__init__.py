from invitations.backend.base import BackendUnavailableError, InvitationBackend
from invitations.backend.http_backend import HttpInvitationBackend
from invitations.backend.stub_backend import StubInvitationBackend
from invitations.config.settings import settings


def get_invitation_backend() -> InvitationBackend:
    if settings.backend_url:
        return HttpInvitationBackend(config=settings)
    return StubInvitationBackend(latency_seconds=settings.stub_latency_seconds)


__all__ = [
    "BackendUnavailableError",
    "HttpInvitationBackend",
    "InvitationBackend",
    "StubInvitationBackend",
    "get_invitation_backend",
]
