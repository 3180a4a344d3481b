from decimal import Decimal
from uuid import uuid4

import pytest

from src.exceptions import NotFound, ValidationError
from src.registry.dtos import GiftInputDTO
from src.registry.features.manage_gifts.write_model import SqlGiftWriteModel


async def test_create_and_update_gift(db_session, db_site):
    write_model = SqlGiftWriteModel(session_overwrite=db_session)

    toaster = await write_model.create_gift(
        db_site.context, GiftInputDTO(name="Toaster", target_amount=Decimal("49.90"))
    )
    vase = await write_model.create_gift(
        db_site.context, GiftInputDTO(name="Vase", target_amount=Decimal("30"))
    )
    updated = await write_model.update_gift(
        db_site.context,
        toaster.id,
        GiftInputDTO(name="Espresso machine", target_amount=Decimal("250"), description="Red"),
    )

    assert (toaster.order, vase.order) == (1, 2)
    assert toaster.is_claimed is False
    assert updated.name == "Espresso machine"
    assert updated.target_amount == Decimal("250")
    assert updated.description == "Red"


async def test_gift_of_other_wedding(db_session, db_site, wedding_factory):
    other_site = await wedding_factory(db_session)
    write_model = SqlGiftWriteModel(session_overwrite=db_session)
    gift = await write_model.create_gift(
        other_site.context, GiftInputDTO(name="Toaster", target_amount=Decimal("50"))
    )

    with pytest.raises(NotFound):
        await write_model.delete_gift(db_site.context, gift.id)
    with pytest.raises(NotFound):
        await write_model.update_gift(
            db_site.context, gift.id, GiftInputDTO(name="Mine", target_amount=Decimal("1"))
        )


async def test_reorder_gifts(db_session, db_site):
    write_model = SqlGiftWriteModel(session_overwrite=db_session)
    first = await write_model.create_gift(
        db_site.context, GiftInputDTO(name="Toaster", target_amount=Decimal("50"))
    )
    second = await write_model.create_gift(
        db_site.context, GiftInputDTO(name="Vase", target_amount=Decimal("30"))
    )

    await write_model.reorder_gifts(db_site.context, [second.id, first.id])
    await write_model.delete_gift(db_site.context, first.id)

    with pytest.raises(ValidationError):
        await write_model.reorder_gifts(db_site.context, [second.id, uuid4()])
