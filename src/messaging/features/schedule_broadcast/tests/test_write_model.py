from datetime import timedelta
from uuid import uuid4

import pytest
from sqlalchemy import update

from src.exceptions import Conflict, NotFound, ValidationError
from src.messaging.dtos import BroadcastInputDTO, MessageStatus
from src.messaging.features.schedule_broadcast.write_model import SqlScheduleBroadcastWriteModel
from src.messaging.repository.orm_models import BroadcastMessage
from src.models.base import utcnow

MESSAGE = BroadcastInputDTO(subject="Countdown", content="One week to go!")


async def test_schedule_broadcast(db_session, db_site):
    write_model = SqlScheduleBroadcastWriteModel(session_overwrite=db_session)
    scheduled_for = utcnow() + timedelta(days=7)

    broadcast = await write_model.schedule_broadcast(db_site.context, MESSAGE, scheduled_for)

    assert broadcast.status is MessageStatus.PENDING
    assert broadcast.scheduled_for == scheduled_for
    assert broadcast.recipient_count == 0
    assert broadcast.sent_at is None


async def test_schedule_in_the_past(db_session, db_site):
    write_model = SqlScheduleBroadcastWriteModel(session_overwrite=db_session)

    with pytest.raises(ValidationError) as exc_info:
        await write_model.schedule_broadcast(
            db_site.context, MESSAGE, utcnow() - timedelta(minutes=5)
        )

    assert exc_info.value.field_errors == {
        "scheduled_for": "Scheduled time must be in the future"
    }


async def test_cancel_pending_broadcast(db_session, db_site, wedding_factory):
    other_site = await wedding_factory(db_session)
    write_model = SqlScheduleBroadcastWriteModel(session_overwrite=db_session)
    broadcast = await write_model.schedule_broadcast(
        db_site.context, MESSAGE, utcnow() + timedelta(days=1)
    )

    with pytest.raises(NotFound):
        await write_model.cancel_broadcast(other_site.context, broadcast.id)
    cancelled = await write_model.cancel_broadcast(db_site.context, broadcast.id)

    assert cancelled.status is MessageStatus.CANCELLED
    with pytest.raises(Conflict):
        await write_model.cancel_broadcast(db_site.context, broadcast.id)
    with pytest.raises(NotFound):
        await write_model.cancel_broadcast(db_site.context, uuid4())


async def test_cannot_cancel_sent_broadcast(db_session, db_site):
    write_model = SqlScheduleBroadcastWriteModel(session_overwrite=db_session)
    broadcast = await write_model.schedule_broadcast(
        db_site.context, MESSAGE, utcnow() + timedelta(days=1)
    )
    await db_session.execute(
        update(BroadcastMessage)
        .where(BroadcastMessage.uuid == broadcast.id)
        .values(status=MessageStatus.SENT)
    )

    with pytest.raises(Conflict) as exc_info:
        await write_model.cancel_broadcast(db_site.context, broadcast.id)

    assert exc_info.value.message == "Only pending messages can be cancelled"
