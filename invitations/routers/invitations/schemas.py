from pydantic import BaseModel, ConfigDict, Field

from invitations.requests.dtos import InvitationFields


class InvitationCreate(BaseModel):
    """Invitation form as posted by the frontend."""

    model_config = ConfigDict(populate_by_name=True)

    event_type: str = Field(alias="eventType")
    host_names: str = Field(alias="hostNames")
    event_date: str = Field(alias="eventDate")
    event_time: str = Field(alias="eventTime")
    venue: str
    rsvp_deadline: str = Field(alias="rsvpDeadline")
    guest_list: str = Field(alias="guestList")
    custom_message: str = Field(default="", alias="customMessage")

    def to_fields(self) -> InvitationFields:
        return InvitationFields(
            event_type=self.event_type,
            host_names=self.host_names,
            event_date=self.event_date,
            event_time=self.event_time,
            venue=self.venue,
            rsvp_deadline=self.rsvp_deadline,
            guest_list=self.guest_list,
            custom_message=self.custom_message,
        )


class VenueLocationOut(BaseModel):
    latitude: float
    longitude: float


class DeliveryReceiptOut(BaseModel):
    messageId: str
    threadId: str
    labels: list[str]


class InvitationOut(BaseModel):
    invitationText: str
    audioUrl: str | None = None
    imageUrl: str | None = None
    venueLocation: VenueLocationOut | None = None
    deliveryReceipt: DeliveryReceiptOut | None = None


class InvitationCreated(BaseModel):
    message: str
    invitation: InvitationOut
