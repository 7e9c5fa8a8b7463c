from invitations.routers.healthz import router as healthz
from invitations.routers.invitations import router as invitations

__all__ = [
    "healthz",
    "invitations",
]
