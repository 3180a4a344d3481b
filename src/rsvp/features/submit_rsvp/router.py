from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src.events.dtos import RsvpStatus
from src.events.features.manage_events.router import EventResponse
from src.exceptions import NotFound
from src.rsvp.dependencies import require_rsvp_access
from src.rsvp.dtos import RsvpResponseDTO, clean_rsvp_submission
from src.rsvp.features.submit_rsvp.read_model import GuestRsvpReadModel, SqlGuestRsvpReadModel
from src.rsvp.features.submit_rsvp.write_model import RsvpWriteModel, SqlRsvpWriteModel
from src.rsvp.urls import RSVP_GUEST_URL, RSVP_SUBMIT_URL
from src.tenants.dtos import WeddingSiteDTO

router = APIRouter()


class RsvpSubmit(BaseModel):
    event_id: UUID
    rsvp_status: str
    plus_one_count: int | None = None
    plus_one_name: str | None = None
    meal_choice: str | None = None
    dietary_notes: str | None = None


class CurrentRsvpResponse(BaseModel):
    rsvp_status: RsvpStatus | None = None
    rsvp_at: datetime | None = None
    plus_one_count: int | None = None
    plus_one_name: str | None = None
    meal_choice: str | None = None
    dietary_notes: str | None = None

    @classmethod
    def from_dto(cls, rsvp: RsvpResponseDTO) -> "CurrentRsvpResponse":
        return cls(
            rsvp_status=rsvp.rsvp_status,
            rsvp_at=rsvp.rsvp_at,
            plus_one_count=rsvp.plus_one_count,
            plus_one_name=rsvp.plus_one_name,
            meal_choice=rsvp.meal_choice,
            dietary_notes=rsvp.dietary_notes,
        )


class GuestEventResponse(BaseModel):
    event: EventResponse
    current_rsvp: CurrentRsvpResponse


class GuestWithEventsResponse(BaseModel):
    id: UUID
    name: str
    allow_plus_one: bool
    couple_names: str
    events: list[GuestEventResponse]


def get_rsvp_write_model() -> RsvpWriteModel:
    return SqlRsvpWriteModel()


def get_guest_rsvp_read_model() -> GuestRsvpReadModel:
    return SqlGuestRsvpReadModel()


@router.get(RSVP_GUEST_URL, response_model=GuestWithEventsResponse)
async def get_guest_with_events(
    guest_id: UUID,
    site: WeddingSiteDTO = Depends(require_rsvp_access),
    read_model: GuestRsvpReadModel = Depends(get_guest_rsvp_read_model),
) -> GuestWithEventsResponse:
    guest = await read_model.get_guest_with_events(site.context, guest_id)
    if guest is None:
        raise NotFound("Guest not found")
    return GuestWithEventsResponse(
        id=guest.id,
        name=guest.name,
        allow_plus_one=guest.allow_plus_one,
        couple_names=site.couple_names,
        events=[
            GuestEventResponse(
                event=EventResponse.from_dto(item.event),
                current_rsvp=CurrentRsvpResponse.from_dto(item.current_rsvp),
            )
            for item in guest.events
        ],
    )


@router.post(RSVP_SUBMIT_URL, response_model=CurrentRsvpResponse)
async def submit_rsvp(
    guest_id: UUID,
    request: RsvpSubmit,
    site: WeddingSiteDTO = Depends(require_rsvp_access),
    write_model: RsvpWriteModel = Depends(get_rsvp_write_model),
) -> CurrentRsvpResponse:
    """Answer the invitation to one event. Submitting again replaces the answer."""
    submission = clean_rsvp_submission(**request.model_dump())
    rsvp = await write_model.submit_rsvp(site.context, guest_id, submission)
    return CurrentRsvpResponse.from_dto(rsvp)
