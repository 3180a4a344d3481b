from uuid import UUID

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src.auth.dependencies import get_current_site, get_tenant_context
from src.email_service import get_email_service
from src.events.features.invitations.write_model import (
    InvitationWriteModel,
    SqlInvitationWriteModel,
)
from src.events.urls import INVITE_GUESTS_URL, SEND_INVITATIONS_URL, UNINVITE_GUESTS_URL
from src.tenants.dtos import TenantContext, WeddingSiteDTO

router = APIRouter()


class GuestIdsSubmit(BaseModel):
    guest_ids: list[UUID]


class SendInvitationsSubmit(BaseModel):
    guest_ids: list[UUID] | None = None
    resend_to_all: bool = False


class InvitedResponse(BaseModel):
    count: int


class SendInvitationsResponse(BaseModel):
    sent: int
    skipped: int
    failed: int


def get_invitation_write_model() -> InvitationWriteModel:
    return SqlInvitationWriteModel(email_service=get_email_service())


@router.post(INVITE_GUESTS_URL, response_model=InvitedResponse)
async def invite_guests(
    event_id: UUID,
    request: GuestIdsSubmit,
    context: TenantContext = Depends(get_tenant_context),
    write_model: InvitationWriteModel = Depends(get_invitation_write_model),
) -> InvitedResponse:
    count = await write_model.invite_guests(context, event_id, request.guest_ids)
    return InvitedResponse(count=count)


@router.post(UNINVITE_GUESTS_URL, response_model=InvitedResponse)
async def uninvite_guests(
    event_id: UUID,
    request: GuestIdsSubmit,
    context: TenantContext = Depends(get_tenant_context),
    write_model: InvitationWriteModel = Depends(get_invitation_write_model),
) -> InvitedResponse:
    count = await write_model.uninvite_guests(context, event_id, request.guest_ids)
    return InvitedResponse(count=count)


@router.post(SEND_INVITATIONS_URL, response_model=SendInvitationsResponse)
async def send_event_invitations(
    event_id: UUID,
    request: SendInvitationsSubmit,
    site: WeddingSiteDTO = Depends(get_current_site),
    write_model: InvitationWriteModel = Depends(get_invitation_write_model),
) -> SendInvitationsResponse:
    """
    Email the invitation for an event.
    Guests without an email address, and guests who already got one unless
    ``resend_to_all`` is set, are skipped.
    """
    result = await write_model.send_event_invitations(
        site, event_id, request.guest_ids, request.resend_to_all
    )
    return SendInvitationsResponse(sent=result.sent, skipped=result.skipped, failed=result.failed)
