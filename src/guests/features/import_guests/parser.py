"""
Guest list import from CSV or Excel spreadsheets.

Column headers are matched case-insensitively against the aliases couples
actually use ("Guest Name", "Household", "E-mail", ...). Rows with problems
are reported back with their spreadsheet row number (header is row 1) and do
not stop the valid rows from being imported.
"""

import io
import zipfile
from dataclasses import dataclass, field

import pandas as pd

from src.exceptions import ValidationError
from src.guests.dtos import GuestInputDTO, empty_to_none, is_valid_email

COLUMN_MAPPINGS = {
    # name
    "name": "name",
    "guest name": "name",
    "first name": "name",
    "full name": "name",
    "guest": "name",
    # party / family
    "family name": "party_name",
    "family": "party_name",
    "household": "party_name",
    "party name": "party_name",
    "party": "party_name",
    "last name": "party_name",
    "surname": "party_name",
    # email
    "email": "email",
    "email address": "email",
    "e-mail": "email",
    # phone
    "phone": "phone",
    "phone number": "phone",
    "mobile": "phone",
}

EXCEL_EXTENSIONS = (".xlsx", ".xls")


@dataclass(frozen=True)
class ImportRowError:
    row: int
    message: str


@dataclass
class ParseResult:
    guests: list[GuestInputDTO] = field(default_factory=list)
    errors: list[ImportRowError] = field(default_factory=list)


def normalize_column_name(header: str) -> str | None:
    return COLUMN_MAPPINGS.get(str(header).strip().lower())


def read_spreadsheet(content: bytes, filename: str) -> pd.DataFrame:
    buffer = io.BytesIO(content)
    try:
        if filename.lower().endswith(EXCEL_EXTENSIONS):
            return pd.read_excel(
                buffer, dtype=str, keep_default_na=False, engine="openpyxl"
            ).fillna("")
        return pd.read_csv(buffer, dtype=str, keep_default_na=False, skip_blank_lines=True)
    except (ValueError, KeyError, zipfile.BadZipFile, pd.errors.ParserError) as e:
        raise ValidationError(field_errors={"file": f"Could not read file: {e}"}) from e


def parse_guest_dataframe(df: pd.DataFrame) -> ParseResult:
    result = ParseResult()

    column_map = {}
    for header in df.columns:
        target = normalize_column_name(header)
        # first matching column wins, "First Name" and "Guest Name" may both be present
        if target and target not in column_map.values():
            column_map[header] = target

    if "name" not in column_map.values():
        result.errors.append(
            ImportRowError(
                row=1,
                message='No "Name" column found. Please include a column with guest names.',
            )
        )
        return result

    for index, record in enumerate(df.to_dict(orient="records")):
        row_number = index + 2
        values = {
            target: empty_to_none(str(record.get(header, "")))
            for header, target in column_map.items()
        }
        if not any(values.values()):
            continue

        if values.get("name") is None:
            result.errors.append(ImportRowError(row=row_number, message="Name is required"))
            continue

        email = values.get("email")
        if email is not None and not is_valid_email(email):
            result.errors.append(
                ImportRowError(row=row_number, message=f'Invalid email address: "{email}"')
            )
            email = None

        result.guests.append(
            GuestInputDTO(
                name=values["name"],
                party_name=values.get("party_name"),
                email=email.lower() if email else None,
                phone=values.get("phone"),
            )
        )

    return result


def parse_guest_file(content: bytes, filename: str) -> ParseResult:
    return parse_guest_dataframe(read_spreadsheet(content, filename))
