from dataclasses import replace
from uuid import uuid4

from src.auth.dependencies import get_current_site
from src.photos.dtos import PhotoDTO, PhotoStatus
from src.photos.features.gallery.read_model import PhotoReadModel
from src.photos.features.gallery.router import get_photo_read_model
from src.photos.urls import PHOTOS_URL, SITE_PHOTOS_URL
from src.tenants.dependencies import get_site

PHOTOS = [
    PhotoDTO(id=uuid4(), url="https://cdn.example.com/1.jpg", status=PhotoStatus.APPROVED),
    PhotoDTO(id=uuid4(), url="https://cdn.example.com/2.jpg", status=PhotoStatus.PENDING),
]


class InMemoryPhotoReadModel(PhotoReadModel):
    async def list_photos(self, context, status=None):
        return [photo for photo in PHOTOS if status is None or photo.status is status]


async def test_public_gallery_shows_approved_photos(client_factory, site_factory):
    site = site_factory(photo_sharing_enabled=True)
    overrides = {get_site: lambda: site, get_photo_read_model: InMemoryPhotoReadModel}

    async with client_factory(overrides) as client:
        response = await client.get(SITE_PHOTOS_URL.format(subdomain=site.subdomain))

    assert response.status_code == 200
    assert [photo["url"] for photo in response.json()] == ["https://cdn.example.com/1.jpg"]
    assert "status" not in response.json()[0]


async def test_public_gallery_empty_when_sharing_disabled(client_factory, site_factory):
    site = site_factory(photo_sharing_enabled=False)
    overrides = {get_site: lambda: site, get_photo_read_model: InMemoryPhotoReadModel}

    async with client_factory(overrides) as client:
        response = await client.get(SITE_PHOTOS_URL.format(subdomain=site.subdomain))

    assert response.json() == []


async def test_dashboard_filters_by_status(client_factory, site):
    overrides = {
        get_current_site: lambda: replace(site, photo_sharing_enabled=False),
        get_photo_read_model: InMemoryPhotoReadModel,
    }

    async with client_factory(overrides) as client:
        everything = await client.get(PHOTOS_URL)
        pending = await client.get(PHOTOS_URL, params={"status": "PENDING"})

    assert len(everything.json()) == 2
    assert [photo["status"] for photo in pending.json()] == ["PENDING"]
