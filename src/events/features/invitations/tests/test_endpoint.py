from uuid import uuid4

from src.auth.dependencies import get_current_site
from src.events.dtos import InvitationResultDTO
from src.events.features.invitations.router import get_invitation_write_model
from src.events.features.invitations.write_model import InvitationWriteModel
from src.events.urls import INVITE_GUESTS_URL, SEND_INVITATIONS_URL, UNINVITE_GUESTS_URL


class RecordingInvitationWriteModel(InvitationWriteModel):
    def __init__(self):
        self.calls = []

    async def invite_guests(self, context, event_id, guest_ids) -> int:
        self.calls.append(("invite", event_id, guest_ids))
        return len(guest_ids)

    async def uninvite_guests(self, context, event_id, guest_ids) -> int:
        self.calls.append(("uninvite", event_id, guest_ids))
        return 1

    async def send_event_invitations(
        self, site, event_id, guest_ids=None, resend_to_all=False
    ) -> InvitationResultDTO:
        self.calls.append(("send", site.subdomain, guest_ids, resend_to_all))
        return InvitationResultDTO(sent=2, skipped=1, failed=0)


async def test_invite_and_uninvite(client_factory, site):
    write_model = RecordingInvitationWriteModel()
    overrides = {get_current_site: lambda: site, get_invitation_write_model: lambda: write_model}
    event_id = uuid4()
    guest_ids = [uuid4(), uuid4()]
    body = {"guest_ids": [str(g) for g in guest_ids]}

    async with client_factory(overrides) as client:
        invited = await client.post(INVITE_GUESTS_URL.format(event_id=event_id), json=body)
        removed = await client.post(UNINVITE_GUESTS_URL.format(event_id=event_id), json=body)

    assert invited.json() == {"count": 2}
    assert removed.json() == {"count": 1}
    assert write_model.calls == [
        ("invite", event_id, guest_ids),
        ("uninvite", event_id, guest_ids),
    ]


async def test_send_invitations_uses_couple_site(client_factory, site):
    write_model = RecordingInvitationWriteModel()
    overrides = {get_current_site: lambda: site, get_invitation_write_model: lambda: write_model}

    async with client_factory(overrides) as client:
        response = await client.post(
            SEND_INVITATIONS_URL.format(event_id=uuid4()), json={"resend_to_all": True}
        )

    assert response.status_code == 200
    assert response.json() == {"sent": 2, "skipped": 1, "failed": 0}
    assert write_model.calls == [("send", site.subdomain, None, True)]
