"""Tests for SqlWeddingSiteWriteModel."""

import pytest
from sqlalchemy import select

from src.auth.security import verify_password
from src.exceptions import Conflict, ValidationError
from src.models.user import User, UserRole
from src.tenants.features.create_wedding_site.write_model import SqlWeddingSiteWriteModel
from src.tenants.repository.orm_models import Wedding


async def test_create_wedding_site(db_session):
    write_model = SqlWeddingSiteWriteModel(session_overwrite=db_session)

    site = await write_model.create_wedding_site(
        subdomain="Anna-Ben",
        partner1_name=" Anna ",
        partner2_name="Ben",
        couple_email="Couple@Example.com",
        couple_password="long-enough",
    )

    assert site.subdomain == "anna-ben"
    assert site.couple_names == "Anna & Ben"

    wedding = (
        await db_session.execute(select(Wedding).where(Wedding.uuid == site.wedding_id))
    ).scalar_one()
    assert wedding.tenant_id == site.tenant_id
    assert wedding.photo_sharing_enabled is True
    assert wedding.photo_moderation_required is True

    user = (
        await db_session.execute(select(User).where(User.email == "couple@example.com"))
    ).scalar_one()
    assert user.role == UserRole.COUPLE
    assert user.tenant_id == site.tenant_id
    assert verify_password("long-enough", user.hashed_password)


async def test_create_wedding_site_duplicate_subdomain(db_session):
    write_model = SqlWeddingSiteWriteModel(session_overwrite=db_session)
    await write_model.create_wedding_site(
        subdomain="taken-site",
        partner1_name="Anna",
        partner2_name="Ben",
        couple_email="first@example.com",
        couple_password="long-enough",
    )

    with pytest.raises(Conflict):
        await write_model.create_wedding_site(
            subdomain="taken-site",
            partner1_name="Cleo",
            partner2_name="Dan",
            couple_email="second@example.com",
            couple_password="long-enough",
        )


@pytest.mark.parametrize(
    "subdomain,password,field",
    [
        ("ab", "long-enough", "subdomain"),
        ("has_underscore", "long-enough", "subdomain"),
        ("valid-site", "short", "couple_password"),
    ],
)
async def test_create_wedding_site_validation(db_session, subdomain, password, field):
    write_model = SqlWeddingSiteWriteModel(session_overwrite=db_session)

    with pytest.raises(ValidationError) as exc_info:
        await write_model.create_wedding_site(
            subdomain=subdomain,
            partner1_name="Anna",
            partner2_name="Ben",
            couple_email="valid@example.com",
            couple_password=password,
        )

    assert field in exc_info.value.field_errors
