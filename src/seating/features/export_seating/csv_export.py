import pandas as pd

from src.seating.features.export_seating.read_model import SeatingExportRowDTO

EXPORT_COLUMNS = [
    "Table",
    "Guest Name",
    "Party Name",
    "Headcount",
    "Meal Choice",
    "Dietary Notes",
]


def build_seating_dataframe(rows: list[SeatingExportRowDTO]) -> pd.DataFrame:
    records = [
        {
            "Table": row.table_name,
            "Guest Name": row.guest_name,
            "Party Name": row.party_name or "",
            "Headcount": row.headcount,
            "Meal Choice": row.meal_choice or "",
            "Dietary Notes": row.dietary_notes or "",
        }
        for row in rows
    ]
    return pd.DataFrame.from_records(records, columns=EXPORT_COLUMNS)


def export_seating_csv(rows: list[SeatingExportRowDTO]) -> str:
    return build_seating_dataframe(rows).to_csv(index=False)
