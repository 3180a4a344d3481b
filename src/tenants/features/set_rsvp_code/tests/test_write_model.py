"""Tests for SqlRsvpCodeWriteModel."""

import pytest
from sqlalchemy import select

from src.exceptions import Conflict, ValidationError
from src.tenants.features.set_rsvp_code.write_model import SqlRsvpCodeWriteModel
from src.tenants.repository.orm_models import Wedding


async def test_set_rsvp_code(db_session, db_site):
    write_model = SqlRsvpCodeWriteModel(session_overwrite=db_session)

    code = await write_model.set_rsvp_code(db_site.context, " LOVE2026 ")

    assert code == "LOVE2026"
    stored = await db_session.scalar(
        select(Wedding.rsvp_code).where(Wedding.uuid == db_site.wedding_id)
    )
    assert stored == "LOVE2026"


async def test_set_same_code_again_on_own_wedding(db_session, db_site):
    write_model = SqlRsvpCodeWriteModel(session_overwrite=db_session)
    await write_model.set_rsvp_code(db_site.context, "SAME1234")

    assert await write_model.set_rsvp_code(db_site.context, "SAME1234") == "SAME1234"


async def test_code_used_by_other_wedding_conflicts(db_session, db_site, wedding_factory):
    other_site = await wedding_factory(db_session)
    write_model = SqlRsvpCodeWriteModel(session_overwrite=db_session)
    await write_model.set_rsvp_code(db_site.context, "SHARED01")

    with pytest.raises(Conflict):
        await write_model.set_rsvp_code(other_site.context, "SHARED01")

    # the losing wedding keeps its previous code
    stored = await db_session.scalar(
        select(Wedding.rsvp_code).where(Wedding.uuid == other_site.wedding_id)
    )
    assert stored is None


@pytest.mark.parametrize("code", ["abc", "a" * 21, "with space", "dash-code"])
async def test_invalid_codes_are_rejected(db_session, db_site, code):
    write_model = SqlRsvpCodeWriteModel(session_overwrite=db_session)

    with pytest.raises(ValidationError):
        await write_model.set_rsvp_code(db_site.context, code)
