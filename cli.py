"""CLI commands for wedding platform administration."""

import asyncio

import typer
from sqlalchemy import select

from src.auth.security import get_password_hash
from src.config.database import async_session_manager
from src.config.logging import setup_logging
from src.email_service import get_email_service
from src.exceptions import WeddingPlatformError
from src.messaging.dtos import MessageStatus
from src.messaging.features.dispatch_broadcasts.write_model import SqlDispatchBroadcastsWriteModel
from src.models.user import User, UserRole
from src.rsvp.features.send_reminders.write_model import SqlReminderWriteModel
from src.tenants.features.create_wedding_site.write_model import SqlWeddingSiteWriteModel
from src.tenants.repository.read_models import SqlSiteReadModel

app = typer.Typer(help="CLI commands for wedding platform administration")


async def _create_admin(email: str, password: str) -> User:
    async with async_session_manager() as session:
        result = await session.execute(select(User).where(User.email == email))
        if result.scalar_one_or_none() is not None:
            raise ValueError(f"User already exists: {email}")
        user = User(
            email=email,
            hashed_password=get_password_hash(password),
            role=UserRole.ADMIN,
            tenant_id=None,
            is_active=True,
        )
        session.add(user)
        await session.flush()
        return user


@app.command()
def create_admin(
    email: str = typer.Argument(
        ...,
        help="Email of the platform admin",
    ),
    password: str = typer.Option(
        ...,
        "--password",
        "-p",
        prompt=True,
        hide_input=True,
        confirmation_prompt=True,
        help="Password of the platform admin",
    ),
):
    """Create a platform admin who can create wedding sites."""
    try:
        user = asyncio.run(_create_admin(email.strip().lower(), password))
    except ValueError as e:
        typer.secho(str(e), fg=typer.colors.RED)
        raise typer.Exit(1)

    typer.secho("Admin created!", fg=typer.colors.GREEN)
    typer.secho(f"  Email: {user.email}", fg=typer.colors.BLUE)
    typer.secho(f"  ID: {user.uuid}", fg=typer.colors.CYAN)


@app.command()
def create_wedding_site(
    subdomain: str = typer.Argument(
        ...,
        help="Subdomain the wedding site is served from",
    ),
    partner1_name: str = typer.Option(..., "--partner1", help="First partner's name"),
    partner2_name: str = typer.Option(..., "--partner2", help="Second partner's name"),
    couple_email: str = typer.Option(..., "--email", "-e", help="Couple login email"),
    couple_password: str = typer.Option(
        ...,
        "--password",
        "-p",
        prompt=True,
        hide_input=True,
        confirmation_prompt=True,
        help="Couple login password",
    ),
):
    """Create a tenant, its wedding and the couple login."""
    try:
        site = asyncio.run(
            SqlWeddingSiteWriteModel().create_wedding_site(
                subdomain=subdomain,
                partner1_name=partner1_name,
                partner2_name=partner2_name,
                couple_email=couple_email,
                couple_password=couple_password,
            )
        )
    except WeddingPlatformError as e:
        typer.secho(e.message, fg=typer.colors.RED)
        raise typer.Exit(1)

    typer.secho("Wedding site created!", fg=typer.colors.GREEN)
    typer.secho(f"  Couple: {site.couple_names}", fg=typer.colors.BLUE)
    typer.secho(f"  Subdomain: {site.subdomain}", fg=typer.colors.BLUE)
    typer.secho(f"  Wedding ID: {site.wedding_id}", fg=typer.colors.CYAN)


@app.command()
def dispatch_broadcasts():
    """Send every scheduled broadcast that is due. Meant to run from cron."""
    write_model = SqlDispatchBroadcastsWriteModel(email_service=get_email_service())
    messages = asyncio.run(write_model.dispatch_due_broadcasts())

    if not messages:
        typer.secho("No broadcasts due", fg=typer.colors.YELLOW)
        return
    for message in messages:
        color = typer.colors.GREEN if message.status is MessageStatus.SENT else typer.colors.RED
        typer.secho(
            f"  {message.subject}: {message.status.value} ({message.recipient_count} recipients)",
            fg=color,
        )


@app.command()
def send_reminders(
    subdomain: str = typer.Argument(
        ...,
        help="Subdomain of the wedding whose pending guests get a reminder",
    ),
):
    """Email an RSVP reminder to every guest with unanswered invitations."""

    async def _send_reminders() -> int:
        site = await SqlSiteReadModel().get_site_by_subdomain(subdomain)
        if site is None:
            raise ValueError(f"Wedding not found: {subdomain}")
        write_model = SqlReminderWriteModel(email_service=get_email_service())
        return await write_model.send_rsvp_reminders(site)

    try:
        sent = asyncio.run(_send_reminders())
    except (ValueError, WeddingPlatformError) as e:
        typer.secho(str(e), fg=typer.colors.RED)
        raise typer.Exit(1)

    typer.secho(f"Sent {sent} reminder(s)", fg=typer.colors.GREEN)


if __name__ == "__main__":
    setup_logging()
    app()
