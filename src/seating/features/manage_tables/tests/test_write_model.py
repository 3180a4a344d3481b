from uuid import uuid4

import pytest
from sqlalchemy import select

from src.exceptions import NotFound, ValidationError
from src.guests.dtos import GuestInputDTO
from src.guests.features.manage_guests.write_model import SqlGuestWriteModel
from src.guests.repository.orm_models import Guest
from src.seating.dtos import TableInputDTO
from src.seating.features.assign_guest.write_model import SqlSeatAssignmentWriteModel
from src.seating.features.manage_tables.write_model import SqlTableWriteModel
from src.seating.repository.orm_models import SeatingTable


async def test_create_tables_in_order(db_session, db_site):
    write_model = SqlTableWriteModel(session_overwrite=db_session)

    first = await write_model.create_table(db_site.context, TableInputDTO("Table 1", 8))
    second = await write_model.create_table(db_site.context, TableInputDTO("Table 2", 10))

    assert (first.order, second.order) == (1, 2)
    assert second.capacity == 10


async def test_update_table_can_lower_capacity(db_session, db_site):
    write_model = SqlTableWriteModel(session_overwrite=db_session)
    table = await write_model.create_table(db_site.context, TableInputDTO("Table 1", 8))

    updated = await write_model.update_table(
        db_site.context, table.id, TableInputDTO("Family", 1)
    )

    assert updated.name == "Family"
    assert updated.capacity == 1


async def test_other_wedding_table_not_found(db_session, db_site, wedding_factory):
    other_site = await wedding_factory(db_session)
    write_model = SqlTableWriteModel(session_overwrite=db_session)
    table = await write_model.create_table(other_site.context, TableInputDTO("Table 1", 8))

    with pytest.raises(NotFound):
        await write_model.update_table(db_site.context, table.id, TableInputDTO("Mine", 2))
    with pytest.raises(NotFound):
        await write_model.delete_table(db_site.context, table.id)


async def test_delete_table_unassigns_guests(db_session, db_site):
    write_model = SqlTableWriteModel(session_overwrite=db_session)
    table = await write_model.create_table(db_site.context, TableInputDTO("Table 1", 8))
    guest = await SqlGuestWriteModel(session_overwrite=db_session).create_guest(
        db_site.context, GuestInputDTO(name="Alice")
    )
    await SqlSeatAssignmentWriteModel(session_overwrite=db_session).assign_guest_to_table(
        db_site.context, guest.id, table.id
    )

    await write_model.delete_table(db_site.context, table.id)

    table_id = await db_session.scalar(select(Guest.table_id).where(Guest.uuid == guest.id))
    assert table_id is None


async def test_reorder_tables(db_session, db_site):
    write_model = SqlTableWriteModel(session_overwrite=db_session)
    first = await write_model.create_table(db_site.context, TableInputDTO("Table 1", 8))
    second = await write_model.create_table(db_site.context, TableInputDTO("Table 2", 8))

    await write_model.reorder_tables(db_site.context, [second.id, first.id])

    result = await db_session.execute(
        select(SeatingTable.uuid)
        .where(SeatingTable.wedding_id == db_site.wedding_id)
        .order_by(SeatingTable.order)
    )
    assert result.scalars().all() == [second.id, first.id]

    with pytest.raises(ValidationError):
        await write_model.reorder_tables(db_site.context, [second.id])
    with pytest.raises(ValidationError):
        await write_model.reorder_tables(db_site.context, [second.id, first.id, uuid4()])
