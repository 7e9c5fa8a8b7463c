import logging
from collections.abc import Mapping
from typing import Any, Protocol

import httpx

from invitations.backend.base import BackendUnavailableError, InvitationBackend
from invitations.requests.dtos import InvitationRequest

logger = logging.getLogger(__name__)


class HttpBackendConfig(Protocol):
    backend_url: str
    backend_api_key: str
    backend_timeout_seconds: float


class HttpInvitationBackend(InvitationBackend):
    """Generation backend reached over HTTP."""

    def __init__(
        self,
        config: HttpBackendConfig,
        http_client_class: type[httpx.AsyncClient] = httpx.AsyncClient,
    ):
        self._config = config
        self._http_client_class = http_client_class

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self._config.backend_api_key:
            headers["Authorization"] = f"Bearer {self._config.backend_api_key}"
        return headers

    async def submit_invitation(self, request: InvitationRequest) -> Mapping[str, Any]:
        try:
            async with self._http_client_class(
                timeout=self._config.backend_timeout_seconds
            ) as client:
                response = await client.post(
                    self._config.backend_url,
                    headers=self._headers(),
                    json=request.to_payload(),
                )
                response.raise_for_status()
                body = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"Generation backend returned {e.response.status_code}")
            raise BackendUnavailableError(
                f"Generation backend returned HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"Generation backend request failed: {e}")
            raise BackendUnavailableError(f"Generation backend request failed: {e}") from e
        except ValueError as e:
            logger.error(f"Generation backend returned a non-JSON body: {e}")
            raise BackendUnavailableError("Generation backend returned a non-JSON body") from e

        logger.info(f"Generation backend answered for {len(request.guest_list)} guest(s)")
        return body
