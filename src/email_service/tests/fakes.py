from src.email_service.base import EmailDeliveryError, EmailServiceBase


class RecordingEmailService(EmailServiceBase):
    """Keeps sent emails in memory; addresses in ``failing`` raise EmailDeliveryError."""

    def __init__(self, failing: set[str] | None = None):
        self.sent: list[dict] = []
        self.failing = failing or set()

    async def _send(self, to_address: str, subject: str, html_body: str, text_body: str) -> None:
        if to_address in self.failing:
            raise EmailDeliveryError(f"mailbox unavailable: {to_address}")
        self.sent.append(
            {"to": to_address, "subject": subject, "html": html_body, "text": text_body}
        )

    @property
    def recipients(self) -> list[str]:
        return [email["to"] for email in self.sent]
