from fastapi import APIRouter, Depends

from src.events.features.manage_events.router import EventResponse
from src.events.features.visible_events.read_model import (
    SqlVisibleEventsReadModel,
    VisibleEventsReadModel,
)
from src.events.urls import SITE_EVENTS_URL
from src.tenants.dependencies import get_site
from src.tenants.dtos import WeddingSiteDTO

router = APIRouter()


def get_visible_events_read_model() -> VisibleEventsReadModel:
    return SqlVisibleEventsReadModel()


@router.get(SITE_EVENTS_URL, response_model=list[EventResponse])
async def list_public_events(
    site: WeddingSiteDTO = Depends(get_site),
    read_model: VisibleEventsReadModel = Depends(get_visible_events_read_model),
) -> list[EventResponse]:
    """Events shown on the public wedding site."""
    events = await read_model.get_visible_events(site.context)
    return [EventResponse.from_dto(event) for event in events]
