from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel

from src.auth.dependencies import get_tenant_context
from src.events.dtos import EventDTO, clean_event_input, clean_meal_options
from src.events.features.manage_events.read_model import EventReadModel, SqlEventReadModel
from src.events.features.manage_events.write_model import EventWriteModel, SqlEventWriteModel
from src.events.urls import EVENT_URL, EVENTS_URL, MEAL_OPTIONS_URL, REORDER_EVENTS_URL
from src.exceptions import NotFound
from src.tenants.dtos import TenantContext

router = APIRouter()


class EventSubmit(BaseModel):
    name: str
    date_time: datetime
    description: str | None = None
    end_time: datetime | None = None
    location: str | None = None
    address: str | None = None
    dress_code: str | None = None
    is_public: bool = True


class MealOption(BaseModel):
    id: str | None = None
    name: str
    description: str | None = None


class MealOptionsSubmit(BaseModel):
    meal_options: list[MealOption]


class ReorderSubmit(BaseModel):
    ordered_ids: list[UUID]


class MealOptionResponse(BaseModel):
    id: str
    name: str
    description: str | None = None


class EventResponse(BaseModel):
    id: UUID
    name: str
    date_time: datetime
    description: str | None = None
    end_time: datetime | None = None
    location: str | None = None
    address: str | None = None
    dress_code: str | None = None
    is_public: bool
    meal_options: list[MealOptionResponse]
    order: int

    @classmethod
    def from_dto(cls, event: EventDTO) -> "EventResponse":
        return cls(
            id=event.id,
            name=event.name,
            date_time=event.date_time,
            description=event.description,
            end_time=event.end_time,
            location=event.location,
            address=event.address,
            dress_code=event.dress_code,
            is_public=event.is_public,
            meal_options=[
                MealOptionResponse(id=o.id, name=o.name, description=o.description)
                for o in event.meal_options
            ],
            order=event.order,
        )


def get_event_write_model() -> EventWriteModel:
    return SqlEventWriteModel()


def get_event_read_model() -> EventReadModel:
    return SqlEventReadModel()


@router.get(EVENTS_URL, response_model=list[EventResponse])
async def list_events(
    context: TenantContext = Depends(get_tenant_context),
    read_model: EventReadModel = Depends(get_event_read_model),
) -> list[EventResponse]:
    return [EventResponse.from_dto(event) for event in await read_model.list_events(context)]


@router.post(EVENTS_URL, response_model=EventResponse, status_code=status.HTTP_201_CREATED)
async def create_event(
    request: EventSubmit,
    context: TenantContext = Depends(get_tenant_context),
    write_model: EventWriteModel = Depends(get_event_write_model),
) -> EventResponse:
    event = await write_model.create_event(context, clean_event_input(**request.model_dump()))
    return EventResponse.from_dto(event)


@router.post(REORDER_EVENTS_URL, status_code=status.HTTP_204_NO_CONTENT)
async def reorder_events(
    request: ReorderSubmit,
    context: TenantContext = Depends(get_tenant_context),
    write_model: EventWriteModel = Depends(get_event_write_model),
) -> Response:
    await write_model.reorder_events(context, request.ordered_ids)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(EVENT_URL, response_model=EventResponse)
async def get_event(
    event_id: UUID,
    context: TenantContext = Depends(get_tenant_context),
    read_model: EventReadModel = Depends(get_event_read_model),
) -> EventResponse:
    event = await read_model.get_event(context, event_id)
    if event is None:
        raise NotFound("Event not found")
    return EventResponse.from_dto(event)


@router.put(EVENT_URL, response_model=EventResponse)
async def update_event(
    event_id: UUID,
    request: EventSubmit,
    context: TenantContext = Depends(get_tenant_context),
    write_model: EventWriteModel = Depends(get_event_write_model),
) -> EventResponse:
    event = await write_model.update_event(
        context, event_id, clean_event_input(**request.model_dump())
    )
    return EventResponse.from_dto(event)


@router.delete(EVENT_URL, status_code=status.HTTP_204_NO_CONTENT)
async def delete_event(
    event_id: UUID,
    context: TenantContext = Depends(get_tenant_context),
    write_model: EventWriteModel = Depends(get_event_write_model),
) -> Response:
    await write_model.delete_event(context, event_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put(MEAL_OPTIONS_URL, response_model=EventResponse)
async def update_meal_options(
    event_id: UUID,
    request: MealOptionsSubmit,
    context: TenantContext = Depends(get_tenant_context),
    write_model: EventWriteModel = Depends(get_event_write_model),
) -> EventResponse:
    options = clean_meal_options([option.model_dump() for option in request.meal_options])
    event = await write_model.update_meal_options(context, event_id, options)
    return EventResponse.from_dto(event)
