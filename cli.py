"""CLI commands for invitation generation."""

import asyncio

import typer

from invitations.backend import get_invitation_backend
from invitations.config.logging import setup_logging
from invitations.config.settings import settings
from invitations.requests.dtos import InvitationFields, InvitationValidationError
from invitations.requests.email_list import validate_guest_list
from invitations.submission.controller import SubmissionController
from invitations.submission.states import SubmissionState, Succeeded

app = typer.Typer(help="CLI commands for invitation generation")


@app.command()
def check_guests(guest_list: str = typer.Argument(..., help="Comma separated guest emails")):
    """Validate a comma separated guest list."""
    try:
        addresses = validate_guest_list(guest_list)
    except InvitationValidationError as e:
        typer.secho(f"Guest list rejected: {e.kind.value}", fg=typer.colors.RED)
        for offender in e.offenders:
            typer.secho(f"  invalid address: {offender}", fg=typer.colors.YELLOW)
        raise typer.Exit(code=1)

    typer.secho(f"{len(addresses)} valid guest(s):", fg=typer.colors.GREEN)
    for address in addresses:
        typer.secho(f"  {address}", fg=typer.colors.CYAN)


async def _generate(fields: InvitationFields) -> SubmissionState:
    """Async helper running a single submission against the configured backend."""
    controller = SubmissionController(
        backend=get_invitation_backend(),
        enforce_rsvp_deadline=settings.enforce_rsvp_deadline,
    )
    return await controller.submit(fields)


@app.command()
def generate(
    event_type: str = typer.Option(..., help="wedding, birthday or corporate"),
    host_names: str = typer.Option(..., help="Names of the hosts"),
    event_date: str = typer.Option(..., help="Event date (YYYY-MM-DD)"),
    event_time: str = typer.Option(..., help="Event time (HH:MM)"),
    venue: str = typer.Option(..., help="Venue details"),
    rsvp_deadline: str = typer.Option(..., help="RSVP deadline (YYYY-MM-DD)"),
    guests: str = typer.Option(..., help="Comma separated guest emails"),
    message: str = typer.Option("", help="Custom message for the invitation"),
):
    """Generate an invitation and print the result."""
    setup_logging()
    fields = InvitationFields(
        event_type=event_type,
        host_names=host_names,
        event_date=event_date,
        event_time=event_time,
        venue=venue,
        rsvp_deadline=rsvp_deadline,
        guest_list=guests,
        custom_message=message,
    )

    # Typer doesn't support async directly, so use asyncio.run
    try:
        state = asyncio.run(_generate(fields))
    except InvitationValidationError as e:
        typer.secho(str(e), fg=typer.colors.RED)
        raise typer.Exit(code=1)

    if not isinstance(state, Succeeded):
        typer.secho(
            f"Invitation failed ({state.error.kind.value}): {state.error.message}",
            fg=typer.colors.RED,
        )
        raise typer.Exit(code=1)

    artifact = state.artifact
    typer.secho("Invitation created successfully!", fg=typer.colors.GREEN)
    typer.echo(artifact.invitation_text)
    if artifact.image_url:
        typer.secho(f"Image: {artifact.image_url}", fg=typer.colors.CYAN)
    if artifact.audio_url:
        typer.secho(f"Audio: {artifact.audio_url}", fg=typer.colors.CYAN)
    if artifact.venue_location:
        location = artifact.venue_location
        typer.secho(f"Venue: {location.latitude}, {location.longitude}", fg=typer.colors.BLUE)
    if artifact.delivery_receipt:
        receipt = artifact.delivery_receipt
        typer.secho(
            f"Delivered: {receipt.message_id} [{', '.join(sorted(receipt.labels))}]",
            fg=typer.colors.BLUE,
        )


if __name__ == "__main__":
    app()
