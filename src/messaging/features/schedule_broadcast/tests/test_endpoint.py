from datetime import timedelta
from uuid import uuid4

from src.auth.dependencies import get_current_site
from src.exceptions import Conflict
from src.messaging.dtos import BroadcastDTO, MessageStatus, validate_schedule
from src.messaging.features.schedule_broadcast.router import get_schedule_broadcast_write_model
from src.messaging.features.schedule_broadcast.write_model import ScheduleBroadcastWriteModel
from src.messaging.urls import CANCEL_BROADCAST_URL, SCHEDULE_BROADCAST_URL
from src.models.base import utcnow


class InMemoryScheduleWriteModel(ScheduleBroadcastWriteModel):
    def __init__(self):
        self.messages = {}

    async def schedule_broadcast(self, context, data, scheduled_for, now=None):
        message = BroadcastDTO(
            id=uuid4(),
            wedding_id=context.wedding_id,
            subject=data.subject,
            content=data.content,
            status=MessageStatus.PENDING,
            scheduled_for=validate_schedule(scheduled_for, now or utcnow(), 30),
        )
        self.messages[message.id] = message
        return message

    async def cancel_broadcast(self, context, message_id):
        message = self.messages[message_id]
        if message.status is not MessageStatus.PENDING:
            raise Conflict("Only pending messages can be cancelled")
        self.messages[message_id] = BroadcastDTO(
            id=message.id,
            wedding_id=message.wedding_id,
            subject=message.subject,
            content=message.content,
            status=MessageStatus.CANCELLED,
        )
        return self.messages[message_id]


async def test_schedule_and_cancel(client_factory, site):
    write_model = InMemoryScheduleWriteModel()
    overrides = {
        get_current_site: lambda: site,
        get_schedule_broadcast_write_model: lambda: write_model,
    }
    payload = {"subject": "Countdown", "content": "One week to go!"}

    async with client_factory(overrides) as client:
        scheduled = await client.post(
            SCHEDULE_BROADCAST_URL,
            json={**payload, "scheduled_for": (utcnow() + timedelta(days=7)).isoformat()},
        )
        message_id = scheduled.json()["id"]
        cancelled = await client.post(CANCEL_BROADCAST_URL.format(message_id=message_id))
        cancelled_again = await client.post(CANCEL_BROADCAST_URL.format(message_id=message_id))
        in_the_past = await client.post(
            SCHEDULE_BROADCAST_URL,
            json={**payload, "scheduled_for": (utcnow() - timedelta(hours=1)).isoformat()},
        )

    assert scheduled.status_code == 201
    assert scheduled.json()["status"] == "PENDING"
    assert cancelled.json()["status"] == "CANCELLED"
    assert cancelled_again.status_code == 409
    assert in_the_past.status_code == 422
    assert in_the_past.json()["errors"] == {
        "scheduled_for": "Scheduled time must be in the future"
    }
