from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from invitations.requests.dtos import InvitationRequest


class BackendUnavailableError(Exception):
    """Raised when the generation backend cannot be reached or fails."""


class InvitationBackend(ABC):
    """Abstract base class for invitation generation backends."""

    @abstractmethod
    async def submit_invitation(self, request: InvitationRequest) -> Mapping[str, Any]:
        """Send a validated request to the generation backend.

        Args:
            request: The validated invitation request

        Returns:
            The raw response body, keyed by opaque backend identifiers

        Raises:
            BackendUnavailableError: on any transport or service failure
        """
        raise NotImplementedError
