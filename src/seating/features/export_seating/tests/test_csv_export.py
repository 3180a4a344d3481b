import csv
import io

from src.seating.features.export_seating.csv_export import EXPORT_COLUMNS, export_seating_csv
from src.seating.features.export_seating.read_model import SeatingExportRowDTO


def test_export_rows():
    rows = [
        SeatingExportRowDTO("Table 1", "Zoe", "Smiths", 2, "fish", "No shellfish"),
        SeatingExportRowDTO("Table 2", "Bob", None, 1, None, None),
    ]

    records = list(csv.DictReader(io.StringIO(export_seating_csv(rows))))

    assert records[0] == {
        "Table": "Table 1",
        "Guest Name": "Zoe",
        "Party Name": "Smiths",
        "Headcount": "2",
        "Meal Choice": "fish",
        "Dietary Notes": "No shellfish",
    }
    assert records[1]["Party Name"] == ""
    assert records[1]["Meal Choice"] == ""


def test_empty_export_has_header():
    assert export_seating_csv([]).splitlines() == [",".join(EXPORT_COLUMNS)]
