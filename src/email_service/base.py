import html
from abc import ABC, abstractmethod

from src.email_service.templates import EmailTemplates


class EmailDeliveryError(Exception):
    """The transport refused or failed to deliver a message."""


class EmailServiceBase(ABC):
    """Renders the platform emails and hands them to a transport.

    Subclasses only implement ``_send``; every failure there must surface as
    ``EmailDeliveryError`` so callers can record it.
    """

    @abstractmethod
    async def _send(
        self,
        to_address: str,
        subject: str,
        html_body: str,
        text_body: str,
    ) -> None:
        pass

    async def send_invitation(
        self,
        to_address: str,
        guest_name: str,
        couple_names: str,
        event_name: str,
        event_date: str,
        event_location: str,
        rsvp_url: str,
    ) -> None:
        values = {
            "guest_name": guest_name,
            "couple_names": couple_names,
            "event_name": event_name,
            "event_date": event_date,
            "event_location": event_location,
            "rsvp_url": rsvp_url,
        }
        await self._send(
            to_address=to_address,
            subject=EmailTemplates.INVITATION_SUBJECT.format(**values),
            html_body=EmailTemplates.INVITATION_HTML.format(**_escaped(values)),
            text_body=EmailTemplates.INVITATION_TEXT.format(**values),
        )

    async def send_reminder(
        self,
        to_address: str,
        guest_name: str,
        couple_names: str,
        pending_events: list[str],
        rsvp_url: str,
    ) -> None:
        values = {
            "guest_name": guest_name,
            "couple_names": couple_names,
            "rsvp_url": rsvp_url,
        }
        html_events = "".join(f"<li>{html.escape(name)}</li>" for name in pending_events)
        text_events = "\n".join(f"- {name}" for name in pending_events)
        await self._send(
            to_address=to_address,
            subject=EmailTemplates.REMINDER_SUBJECT.format(**values),
            html_body=EmailTemplates.REMINDER_HTML.format(
                pending_events=html_events, **_escaped(values)
            ),
            text_body=EmailTemplates.REMINDER_TEXT.format(pending_events=text_events, **values),
        )

    async def send_broadcast(
        self,
        to_address: str,
        guest_name: str,
        couple_names: str,
        subject: str,
        content: str,
        cta_text: str | None = None,
        cta_url: str | None = None,
    ) -> None:
        values = {
            "guest_name": guest_name,
            "couple_names": couple_names,
            "content": content,
        }
        escaped = _escaped(values)
        escaped["content"] = escaped["content"].replace("\n", "<br>")
        if cta_text and cta_url:
            html_cta = EmailTemplates.BROADCAST_CTA_HTML.format(
                cta_text=html.escape(cta_text), cta_url=html.escape(cta_url, quote=True)
            )
            text_cta = f"\n{cta_text}: {cta_url}\n"
        else:
            html_cta = ""
            text_cta = ""
        await self._send(
            to_address=to_address,
            subject=subject,
            html_body=EmailTemplates.BROADCAST_HTML.format(cta=html_cta, **escaped),
            text_body=EmailTemplates.BROADCAST_TEXT.format(cta=text_cta, **values),
        )


def _escaped(values: dict[str, str]) -> dict[str, str]:
    return {key: html.escape(value, quote=True) for key, value in values.items()}
