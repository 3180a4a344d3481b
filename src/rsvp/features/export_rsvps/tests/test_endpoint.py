from src.auth.dependencies import get_current_site
from src.rsvp.features.export_rsvps.read_model import RsvpExportReadModel, RsvpExportRowDTO
from src.rsvp.features.export_rsvps.router import get_rsvp_export_read_model
from src.rsvp.urls import RSVP_EXPORT_URL


class StaticExportReadModel(RsvpExportReadModel):
    async def get_export_rows(self, context):
        return [
            RsvpExportRowDTO(
                guest_name="Alice",
                email=None,
                phone=None,
                party_name=None,
                event_name="Ceremony",
                rsvp_status="DECLINED",
                plus_one_count=None,
                plus_one_name=None,
                meal_choice=None,
                dietary_notes=None,
                responded_at=None,
            )
        ]


async def test_export_download(client_factory, site):
    overrides = {
        get_current_site: lambda: site,
        get_rsvp_export_read_model: StaticExportReadModel,
    }

    async with client_factory(overrides) as client:
        response = await client.get(RSVP_EXPORT_URL)

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert response.headers["content-disposition"].startswith(
        'attachment; filename="rsvp-export-'
    )
    lines = response.text.splitlines()
    assert lines[0].startswith("Guest Name,Email")
    assert lines[1].startswith("Alice,")
    assert ",DECLINED," in lines[1]
