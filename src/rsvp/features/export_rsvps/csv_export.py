import pandas as pd

from src.rsvp.features.export_rsvps.read_model import RsvpExportRowDTO

EXPORT_COLUMNS = [
    "Guest Name",
    "Email",
    "Phone",
    "Party",
    "Event",
    "Status",
    "Plus Ones",
    "Plus One Name",
    "Meal Choice",
    "Dietary Notes",
    "Responded At",
]


def build_rsvp_dataframe(rows: list[RsvpExportRowDTO]) -> pd.DataFrame:
    records = [
        {
            "Guest Name": row.guest_name,
            "Email": row.email or "",
            "Phone": row.phone or "",
            "Party": row.party_name or "",
            "Event": row.event_name,
            "Status": row.rsvp_status or "Pending",
            "Plus Ones": row.plus_one_count or 0,
            "Plus One Name": row.plus_one_name or "",
            "Meal Choice": row.meal_choice or "",
            "Dietary Notes": row.dietary_notes or "",
            "Responded At": row.responded_at.isoformat() if row.responded_at else "",
        }
        for row in rows
    ]
    return pd.DataFrame.from_records(records, columns=EXPORT_COLUMNS)


def export_rsvps_csv(rows: list[RsvpExportRowDTO]) -> str:
    return build_rsvp_dataframe(rows).to_csv(index=False)
