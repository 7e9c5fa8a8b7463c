"""
Artifact adapter.

Maps the raw generation backend response onto an InvitationArtifact.

The backend keys its response by identifiers generated per pipeline run
(node ids of the generation workflow) rather than by field names. Those
identifiers can change whenever the workflow is redeployed, so they live in
exactly one place: DEFAULT_FIELD_MAPPINGS below.

If the backend workflow changes, only the mapping table needs updating.
"""

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, StrictStr, TypeAdapter, ValidationError

from invitations.artifacts.dtos import (
    DeliveryReceipt,
    InvitationArtifact,
    MappingError,
    VenueLocation,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Payload shapes
# ---------------------------------------------------------------------------

class _AudioPayload(BaseModel):
    model_config = ConfigDict(strict=True)

    output: str


class _LocationPayload(BaseModel):
    model_config = ConfigDict(strict=True, allow_inf_nan=False)

    latitude: float
    longitude: float


class _ReceiptPayload(BaseModel):
    model_config = ConfigDict(strict=True)

    id: str
    threadId: str
    labelIds: list[str]


_text_adapter = TypeAdapter(StrictStr)


def parse_text(value: Any) -> str:
    return _text_adapter.validate_python(value)


def parse_audio(value: Any) -> str:
    return _AudioPayload.model_validate(value).output


def parse_location(value: Any) -> VenueLocation:
    payload = _LocationPayload.model_validate(value)
    return VenueLocation(latitude=payload.latitude, longitude=payload.longitude)


def parse_receipt(value: Any) -> DeliveryReceipt:
    payload = _ReceiptPayload.model_validate(value)
    return DeliveryReceipt(
        message_id=payload.id,
        thread_id=payload.threadId,
        labels=frozenset(payload.labelIds),
    )


# ---------------------------------------------------------------------------
# Mapping table
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class FieldMapping:
    """Where a semantic artifact field lives in the raw response."""

    field: str
    key: str
    expected_shape: str
    parse: Callable[[Any], Any]
    required: bool = False


DEFAULT_FIELD_MAPPINGS: tuple[FieldMapping, ...] = (
    FieldMapping(
        field="invitation_text",
        key="output",
        expected_shape="string",
        parse=parse_text,
        required=True,
    ),
    FieldMapping(
        field="audio_url",
        key="output_1732498863574",
        expected_shape="{output: string}",
        parse=parse_audio,
    ),
    FieldMapping(
        field="image_url",
        key="19f72370-d1ab-4b25-832f-cfeccedcadec",
        expected_shape="string",
        parse=parse_text,
    ),
    FieldMapping(
        field="venue_location",
        key="1f4b5b22-0469-4d68-9250-ea81f8c0be03",
        expected_shape="{latitude: number, longitude: number}",
        parse=parse_location,
    ),
    FieldMapping(
        field="delivery_receipt",
        key="5817d4b1-0134-4a52-96d9-7ff0b391b32b",
        expected_shape="{id: string, threadId: string, labelIds: [string]}",
        parse=parse_receipt,
    ),
)


# ---------------------------------------------------------------------------
# Adapter
# ---------------------------------------------------------------------------

class ArtifactAdapter:
    """Normalizes raw backend responses using a declarative mapping table."""

    def __init__(self, mappings: Sequence[FieldMapping] = DEFAULT_FIELD_MAPPINGS) -> None:
        self.mappings = tuple(mappings)

    def adapt(self, raw: Any) -> InvitationArtifact:
        """
        Convert a raw backend response into an InvitationArtifact.

        Optional fields that are absent (or null) become None. Fields are
        checked in table order, so the outcome does not depend on the key
        order of ``raw``.

        Raises:
            MappingError: if ``raw`` is not a mapping, the mandatory text is
                missing, or any present payload has the wrong shape.
        """
        if not isinstance(raw, Mapping):
            raise MappingError("response", "object keyed by opaque identifiers", raw)

        values: dict[str, Any] = {}
        for mapping in self.mappings:
            value = raw.get(mapping.key)
            if value is None:
                if mapping.required:
                    raise MappingError(mapping.field, mapping.expected_shape, value)
                values[mapping.field] = None
                continue

            try:
                values[mapping.field] = mapping.parse(value)
            except ValidationError:
                logger.debug("adapt: %s rejected payload %r", mapping.field, value)
                raise MappingError(mapping.field, mapping.expected_shape, value) from None

        return InvitationArtifact(**values)
