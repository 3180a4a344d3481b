from uuid import uuid4

from src.exceptions import Forbidden
from src.photos.dtos import PhotoDTO, PhotoStatus
from src.photos.features.submit_photo.router import get_photo_submission_write_model
from src.photos.features.submit_photo.write_model import PhotoSubmissionWriteModel
from src.photos.urls import SITE_PHOTOS_URL
from src.tenants.dependencies import get_site


class InMemoryPhotoSubmissionWriteModel(PhotoSubmissionWriteModel):
    def __init__(self):
        self.submitted = []

    async def submit_photo(self, site, data):
        if not site.photo_sharing_enabled:
            raise Forbidden("Photo sharing is not enabled")
        self.submitted.append(data)
        status = PhotoStatus.PENDING if site.photo_moderation_required else PhotoStatus.APPROVED
        return PhotoDTO(
            id=uuid4(),
            url=data.url,
            status=status,
            uploader_name=data.uploader_name,
            caption=data.caption,
        )


async def submit(client_factory, site, payload):
    overrides = {
        get_site: lambda: site,
        get_photo_submission_write_model: InMemoryPhotoSubmissionWriteModel,
    }
    async with client_factory(overrides) as client:
        return await client.post(SITE_PHOTOS_URL.format(subdomain=site.subdomain), json=payload)


async def test_submit_photo(client_factory, site_factory):
    response = await submit(
        client_factory,
        site_factory(),
        {"url": "https://cdn.example.com/1.jpg", "caption": "Cake!"},
    )

    assert response.status_code == 201
    assert response.json()["awaiting_approval"] is True
    assert response.json()["uploader_name"] == "Anonymous"


async def test_submit_photo_without_moderation(client_factory, site_factory):
    response = await submit(
        client_factory,
        site_factory(photo_moderation_required=False),
        {"url": "https://cdn.example.com/1.jpg", "uploader_name": "Bob"},
    )

    assert response.json()["awaiting_approval"] is False


async def test_submit_photo_errors(client_factory, site_factory):
    disabled = await submit(
        client_factory,
        site_factory(photo_sharing_enabled=False),
        {"url": "https://cdn.example.com/1.jpg"},
    )
    invalid = await submit(client_factory, site_factory(), {"url": "cake.jpg"})

    assert disabled.status_code == 403
    assert disabled.json()["detail"] == "Photo sharing is not enabled"
    assert invalid.status_code == 422
    assert invalid.json()["errors"] == {"url": "A valid photo URL is required"}
