from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src.auth.dependencies import get_tenant_context
from src.events.dtos import RsvpStatus
from src.rsvp.aggregation import RsvpStats
from src.rsvp.features.rsvp_dashboard.read_model import (
    RsvpDashboardReadModel,
    SqlRsvpDashboardReadModel,
)
from src.rsvp.urls import RSVP_EVENT_STATS_URL, RSVP_GUEST_LIST_URL, RSVP_STATS_URL
from src.tenants.dtos import TenantContext

router = APIRouter()


class RsvpStatsResponse(BaseModel):
    invited: int
    attending: int
    declined: int
    maybe: int
    pending: int
    responded: int
    headcount: int
    meal_counts: dict[str, int]

    @classmethod
    def from_stats(cls, stats: RsvpStats) -> "RsvpStatsResponse":
        return cls(
            invited=stats.invited,
            attending=stats.attending,
            declined=stats.declined,
            maybe=stats.maybe,
            pending=stats.pending,
            responded=stats.responded,
            headcount=stats.headcount,
            meal_counts=stats.meal_counts,
        )


class EventRsvpStatsResponse(BaseModel):
    event_id: UUID
    event_name: str
    event_date: datetime
    stats: RsvpStatsResponse


class EventRsvpResponse(BaseModel):
    event_id: UUID
    event_name: str
    rsvp_status: RsvpStatus | None = None
    plus_one_count: int | None = None
    meal_choice: str | None = None
    dietary_notes: str | None = None


class RsvpGuestResponse(BaseModel):
    id: UUID
    name: str
    party_name: str | None = None
    email: str | None = None
    phone: str | None = None
    event_responses: list[EventRsvpResponse]


def get_rsvp_dashboard_read_model() -> RsvpDashboardReadModel:
    return SqlRsvpDashboardReadModel()


@router.get(RSVP_STATS_URL, response_model=RsvpStatsResponse)
async def get_rsvp_stats(
    context: TenantContext = Depends(get_tenant_context),
    read_model: RsvpDashboardReadModel = Depends(get_rsvp_dashboard_read_model),
) -> RsvpStatsResponse:
    return RsvpStatsResponse.from_stats(await read_model.get_rsvp_stats(context))


@router.get(RSVP_EVENT_STATS_URL, response_model=list[EventRsvpStatsResponse])
async def get_rsvp_stats_per_event(
    context: TenantContext = Depends(get_tenant_context),
    read_model: RsvpDashboardReadModel = Depends(get_rsvp_dashboard_read_model),
) -> list[EventRsvpStatsResponse]:
    return [
        EventRsvpStatsResponse(
            event_id=item.event_id,
            event_name=item.event_name,
            event_date=item.event_date,
            stats=RsvpStatsResponse.from_stats(item.stats),
        )
        for item in await read_model.get_rsvp_stats_per_event(context)
    ]


@router.get(RSVP_GUEST_LIST_URL, response_model=list[RsvpGuestResponse])
async def get_rsvp_guest_list(
    context: TenantContext = Depends(get_tenant_context),
    read_model: RsvpDashboardReadModel = Depends(get_rsvp_dashboard_read_model),
) -> list[RsvpGuestResponse]:
    return [
        RsvpGuestResponse(
            id=guest.id,
            name=guest.name,
            party_name=guest.party_name,
            email=guest.email,
            phone=guest.phone,
            event_responses=[
                EventRsvpResponse(
                    event_id=r.event_id,
                    event_name=r.event_name,
                    rsvp_status=r.rsvp_status,
                    plus_one_count=r.plus_one_count,
                    meal_choice=r.meal_choice,
                    dietary_notes=r.dietary_notes,
                )
                for r in guest.event_responses
            ],
        )
        for guest in await read_model.get_rsvp_guest_list(context)
    ]
