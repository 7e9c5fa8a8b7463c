from dataclasses import dataclass, field
from typing import Any


class MappingError(Exception):
    """Raised when a backend response does not match the expected contract."""

    def __init__(self, field: str, expected_shape: str, actual_value: Any) -> None:
        self.field = field
        self.expected_shape = expected_shape
        self.actual_value = actual_value
        super().__init__(
            f"Field '{field}' expected {expected_shape}, got {actual_value!r}"
        )


@dataclass(frozen=True)
class VenueLocation:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class DeliveryReceipt:
    message_id: str
    thread_id: str
    labels: frozenset[str] = field(default_factory=frozenset)


@dataclass(frozen=True)
class InvitationArtifact:
    """Normalized result of a successful invitation generation."""

    invitation_text: str
    audio_url: str | None = None
    image_url: str | None = None
    venue_location: VenueLocation | None = None
    delivery_receipt: DeliveryReceipt | None = None

    def to_dict(self) -> dict:
        venue_location = None
        if self.venue_location is not None:
            venue_location = {
                "latitude": self.venue_location.latitude,
                "longitude": self.venue_location.longitude,
            }

        delivery_receipt = None
        if self.delivery_receipt is not None:
            delivery_receipt = {
                "messageId": self.delivery_receipt.message_id,
                "threadId": self.delivery_receipt.thread_id,
                "labels": sorted(self.delivery_receipt.labels),
            }

        return {
            "invitationText": self.invitation_text,
            "audioUrl": self.audio_url,
            "imageUrl": self.image_url,
            "venueLocation": venue_location,
            "deliveryReceipt": delivery_receipt,
        }
