from src.guests.dtos import GuestInputDTO
from src.guests.features.manage_guests.write_model import SqlGuestWriteModel
from src.rsvp.features.rsvp_access.read_model import SqlRsvpAccessReadModel
from src.tenants.features.set_rsvp_code.write_model import SqlRsvpCodeWriteModel


async def test_search_guests(committed_site, wedding_factory):
    context = committed_site.context
    guests = SqlGuestWriteModel()
    for name in ["Alice Smith", "alicia Keys", "Bob 100%", "Carol"]:
        await guests.create_guest(context, GuestInputDTO(name=name))
    read_model = SqlRsvpAccessReadModel()

    assert [g.name for g in await read_model.search_guests(context, "ALI")] == [
        "Alice Smith",
        "alicia Keys",
    ]
    assert [g.name for g in await read_model.search_guests(context, "0%")] == ["Bob 100%"]
    assert await read_model.search_guests(context, "a") == []
    assert await read_model.search_guests(context, "  ") == []


async def test_rsvp_code(committed_site):
    read_model = SqlRsvpAccessReadModel()
    assert await read_model.get_rsvp_code(committed_site.context) is None

    code = await SqlRsvpCodeWriteModel().set_rsvp_code(
        committed_site.context, f"CODE{committed_site.wedding_id.hex[:8]}"
    )

    assert await read_model.get_rsvp_code(committed_site.context) == code
