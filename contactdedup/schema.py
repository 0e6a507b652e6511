from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping

# source column -> Contact attribute
COLUMN_MAP = {
    "name": "first_name",
    "name1": "last_name",
    "email": "email",
    "postalZip": "zip_code",
    "address": "address",
}
REQUIRED_COLUMNS = list(COLUMN_MAP)


class ContactSchemaError(ValueError):
    """Raised when a contact table cannot be mapped onto contacts."""

    def __init__(self, errors: List[str]):
        self.errors = errors
        super().__init__("; ".join(errors))


@dataclass(frozen=True)
class Contact:
    """A contact record. An empty string means the value is unknown."""

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    zip_code: str = ""
    address: str = ""


def validate_columns(columns: Iterable[Any]) -> List[str]:
    """
    Returns a list of validation error messages. Empty list means valid.
    Extra columns are allowed and ignored.
    """
    errors: List[str] = []
    seen = [str(c) for c in columns]

    for col in REQUIRED_COLUMNS:
        if col not in seen:
            errors.append(f"Missing required column: {col}")

    return errors


def contact_from_row(row: Mapping[str, Any]) -> Contact:
    """Build a Contact from a source row keyed by column name."""
    values: Dict[str, str] = {}
    for col, attr in COLUMN_MAP.items():
        value = row.get(col)
        if value is None:
            value = ""
        elif not isinstance(value, str):
            raise ContactSchemaError([f"Column '{col}' must hold text, got {type(value).__name__}"])
        values[attr] = value
    return Contact(**values)
