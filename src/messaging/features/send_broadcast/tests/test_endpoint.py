from uuid import uuid4

from src.auth.dependencies import get_current_site
from src.exceptions import TransientFailure
from src.messaging.dtos import BroadcastDTO, MessageStatus
from src.messaging.features.send_broadcast.router import get_send_broadcast_write_model
from src.messaging.features.send_broadcast.write_model import SendBroadcastWriteModel
from src.messaging.urls import SEND_BROADCAST_URL


class InMemorySendBroadcastWriteModel(SendBroadcastWriteModel):
    def __init__(self, fail=False):
        self.fail = fail
        self.sent = []

    async def send_broadcast(self, site, data):
        if self.fail:
            raise TransientFailure("Failed to send emails")
        self.sent.append(data)
        return BroadcastDTO(
            id=uuid4(),
            wedding_id=site.wedding_id,
            subject=data.subject,
            content=data.content,
            status=MessageStatus.SENT,
            recipient_count=12,
        )


async def test_send_broadcast(client_factory, site):
    write_model = InMemorySendBroadcastWriteModel()
    overrides = {
        get_current_site: lambda: site,
        get_send_broadcast_write_model: lambda: write_model,
    }

    async with client_factory(overrides) as client:
        response = await client.post(
            SEND_BROADCAST_URL, json={"subject": "Shuttle", "content": "Buses at 5pm"}
        )
        invalid = await client.post(
            SEND_BROADCAST_URL, json={"subject": "Shuttle", "content": "", "cta_url": "nope"}
        )

    assert response.status_code == 201
    assert response.json()["recipient_count"] == 12
    assert invalid.status_code == 422
    assert set(invalid.json()["errors"]) == {"content", "cta_url"}
    assert len(write_model.sent) == 1


async def test_failed_send_is_503(client_factory, site):
    overrides = {
        get_current_site: lambda: site,
        get_send_broadcast_write_model: lambda: InMemorySendBroadcastWriteModel(fail=True),
    }

    async with client_factory(overrides) as client:
        response = await client.post(
            SEND_BROADCAST_URL, json={"subject": "Shuttle", "content": "Buses at 5pm"}
        )

    assert response.status_code == 503
    assert response.json()["detail"] == "Failed to send emails"
