from .adapter import DEFAULT_FIELD_MAPPINGS, ArtifactAdapter, FieldMapping
from .dtos import DeliveryReceipt, InvitationArtifact, MappingError, VenueLocation

__all__ = [
    "ArtifactAdapter",
    "DEFAULT_FIELD_MAPPINGS",
    "DeliveryReceipt",
    "FieldMapping",
    "InvitationArtifact",
    "MappingError",
    "VenueLocation",
]
