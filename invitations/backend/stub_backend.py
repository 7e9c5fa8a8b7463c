import asyncio
from collections.abc import Mapping
from typing import Any

from invitations.backend.base import InvitationBackend
from invitations.requests.dtos import InvitationRequest

INVITATION_TEXT = """Front of the Invitation:

Together with their families

**{host_names}**

request the honour of your presence at their {event_type}


Back of the Invitation:

**Date:** {event_date}

**Time:** {event_time}

**Venue:** {venue}


Reception to follow


Kindly RSVP by {rsvp_deadline}


{custom_message}"""

AUDIO_URL = "https://replicate.delivery/yhqm/wtnHXFrV2mZpJ5ix6pky02hc7eWN8tDhCFM5W3E2ew7YlY0TA/out.wav"
IMAGE_URL = "https://replicate.delivery/czjl/Bp2KtYSGOx5cGRijBFIKCz4DJ3bREGLYXzzMhPgQG4TLJG9E/tmpoxy_fc0m.png"


class StubInvitationBackend(InvitationBackend):
    """Deterministic stand-in for the generation backend.

    Answers every request with the same canned media after a simulated
    delay, using the same opaque response keys as the real workflow.
    """

    def __init__(self, latency_seconds: float = 1.5):
        self.latency_seconds = latency_seconds
        self.requests: list[InvitationRequest] = []

    async def submit_invitation(self, request: InvitationRequest) -> Mapping[str, Any]:
        self.requests.append(request)
        if self.latency_seconds > 0:
            await asyncio.sleep(self.latency_seconds)

        payload = request.to_payload()
        return {
            "output": INVITATION_TEXT.format(
                host_names=payload["hostNames"],
                event_type=payload["eventType"],
                event_date=payload["eventDate"],
                event_time=payload["eventTime"],
                venue=payload["venue"],
                rsvp_deadline=payload["rsvpDeadline"],
                custom_message=payload["customMessage"],
            ),
            "output_1732498863574": {"output": AUDIO_URL},
            "19f72370-d1ab-4b25-832f-cfeccedcadec": IMAGE_URL,
            "1f4b5b22-0469-4d68-9250-ea81f8c0be03": {
                "latitude": 42.088313,
                "longitude": -72.57835589999999,
            },
            "5817d4b1-0134-4a52-96d9-7ff0b391b32b": {
                "id": "1936101365e7c6a7",
                "threadId": "1936101365e7c6a7",
                "labelIds": ["SENT"],
            },
        }
