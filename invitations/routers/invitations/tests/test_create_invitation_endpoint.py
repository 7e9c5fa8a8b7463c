"""Tests for the create invitation endpoint."""

import pytest

from invitations.backend.base import BackendUnavailableError, InvitationBackend
from invitations.backend.stub_backend import IMAGE_URL, StubInvitationBackend
from invitations.routers.invitations.router import get_submission_controller
from invitations.routers.invitations.urls import CREATE_INVITATION_URL
from invitations.submission.controller import SubmissionController

FORM = {
    "eventType": "wedding",
    "hostNames": "Alice & Bob",
    "eventDate": "2025-06-01",
    "eventTime": "18:00",
    "venue": "Garden Hall",
    "rsvpDeadline": "2025-05-01",
    "customMessage": "",
    "guestList": "a@x.com, b@y.com",
}


class FailingBackend(InvitationBackend):
    async def submit_invitation(self, request):
        raise BackendUnavailableError("Generation backend request failed: timed out")


class RawBackend(InvitationBackend):
    def __init__(self, response):
        self.response = response

    async def submit_invitation(self, request):
        return self.response


def controller_with(backend: InvitationBackend):
    return {get_submission_controller: lambda: SubmissionController(backend=backend)}


@pytest.mark.asyncio
async def test_create_invitation_success(client_factory):
    backend = StubInvitationBackend(latency_seconds=0)

    async with client_factory(controller_with(backend)) as client:
        response = await client.post(CREATE_INVITATION_URL, json=FORM)

    assert response.status_code == 201
    data = response.json()
    assert data["message"] == "Invitation created successfully!"
    invitation = data["invitation"]
    assert "**Alice & Bob**" in invitation["invitationText"]
    assert invitation["imageUrl"] == IMAGE_URL
    assert invitation["venueLocation"]["latitude"] == 42.088313
    assert invitation["deliveryReceipt"]["labels"] == ["SENT"]
    assert backend.requests[0].guest_list == ("a@x.com", "b@y.com")


@pytest.mark.asyncio
async def test_create_invitation_accepts_snake_case_fields(client_factory):
    backend = StubInvitationBackend(latency_seconds=0)
    form = {
        "event_type": "birthday",
        "host_names": "Carol",
        "event_date": "2025-08-10",
        "event_time": "15:00",
        "venue": "Park",
        "rsvp_deadline": "2025-08-01",
        "guest_list": "c@z.org",
    }

    async with client_factory(controller_with(backend)) as client:
        response = await client.post(CREATE_INVITATION_URL, json=form)

    assert response.status_code == 201
    assert backend.requests[0].custom_message == ""


@pytest.mark.asyncio
async def test_create_invitation_text_only(client_factory):
    async with client_factory(controller_with(RawBackend({"output": "Hello"}))) as client:
        response = await client.post(CREATE_INVITATION_URL, json=FORM)

    assert response.status_code == 201
    invitation = response.json()["invitation"]
    assert invitation["invitationText"] == "Hello"
    assert invitation["audioUrl"] is None
    assert invitation["deliveryReceipt"] is None


@pytest.mark.asyncio
async def test_create_invitation_reports_every_bad_address(client_factory):
    backend = StubInvitationBackend(latency_seconds=0)

    async with client_factory(controller_with(backend)) as client:
        response = await client.post(
            CREATE_INVITATION_URL, json={**FORM, "guestList": "bad, b@y.com, worse"}
        )

    assert response.status_code == 422
    detail = response.json()["detail"]
    assert detail["message"] == "Please enter valid email addresses separated by commas"
    assert detail["kind"] == "malformed_address"
    assert detail["offenders"] == ["bad", "worse"]
    assert backend.requests == []


@pytest.mark.asyncio
async def test_create_invitation_missing_venue(client_factory):
    backend = StubInvitationBackend(latency_seconds=0)

    async with client_factory(controller_with(backend)) as client:
        response = await client.post(CREATE_INVITATION_URL, json={**FORM, "venue": "  "})

    assert response.status_code == 422
    detail = response.json()["detail"]
    assert detail["kind"] == "missing_field"
    assert detail["field"] == "venue"
    assert detail["message"] == "Please fill in the venue"


@pytest.mark.asyncio
async def test_create_invitation_unknown_event_type(client_factory):
    backend = StubInvitationBackend(latency_seconds=0)

    async with client_factory(controller_with(backend)) as client:
        response = await client.post(CREATE_INVITATION_URL, json={**FORM, "eventType": "gala"})

    assert response.status_code == 422
    assert response.json()["detail"]["kind"] == "unknown_event_type"


@pytest.mark.asyncio
async def test_create_invitation_backend_unavailable(client_factory):
    async with client_factory(controller_with(FailingBackend())) as client:
        response = await client.post(CREATE_INVITATION_URL, json=FORM)

    assert response.status_code == 502
    detail = response.json()["detail"]
    assert detail["kind"] == "backend_unavailable"
    assert detail["message"] == "Failed to send invitation. Please try again."


@pytest.mark.asyncio
async def test_create_invitation_malformed_response(client_factory):
    backend = RawBackend({"19f72370-d1ab-4b25-832f-cfeccedcadec": "https://example.com/x.png"})

    async with client_factory(controller_with(backend)) as client:
        response = await client.post(CREATE_INVITATION_URL, json=FORM)

    assert response.status_code == 502
    assert response.json()["detail"]["kind"] == "malformed_response"
