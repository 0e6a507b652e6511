"""
CSV loading for contact tables.

Reads the source table with pandas and maps its columns onto Contact
records, assigning sequential IDs from 0 in row order.
"""

from pathlib import Path
from typing import Dict, IO, Union

import pandas as pd

from .logger import get_logger
from .schema import REQUIRED_COLUMNS, Contact, ContactSchemaError, contact_from_row, validate_columns


def read_table(source: Union[str, Path, IO[str]]) -> pd.DataFrame:
    """
    Read a contact table with every cell as text.

    NA detection is off so that empty cells stay "" (unknown) and values
    such as "NA" or "null" are kept verbatim.

    The header is parsed as an ordinary row so that its field count binds
    every data row: a row with surplus fields is rejected instead of pandas
    turning the first column into an index and shifting the rest.
    """
    try:
        raw = pd.read_csv(
            source,
            header=None,
            index_col=False,
            dtype=str,
            keep_default_na=False,
            na_filter=False,
        )
    except pd.errors.EmptyDataError:
        raise ContactSchemaError(["Input has no header row"]) from None
    except pd.errors.ParserError as e:
        raise ContactSchemaError([f"Unreadable input: {e}"]) from e

    df = raw.iloc[1:].reset_index(drop=True)
    df.columns = [str(col) for col in raw.iloc[0]]
    return df


def load_contacts(source: Union[str, Path, IO[str]]) -> Dict[int, Contact]:
    """
    Load contacts from a CSV path or text stream.

    Returns:
        Mapping of contact ID to Contact

    Raises:
        ContactSchemaError: on missing columns or malformed rows
    """
    logger = get_logger()
    df = read_table(source)

    errors = validate_columns(df.columns)
    if errors:
        logger.error("Contact table rejected", errors=errors)
        raise ContactSchemaError(errors)

    contacts: Dict[int, Contact] = {}
    for i, row in enumerate(df[REQUIRED_COLUMNS].to_dict("records")):
        try:
            contacts[i] = contact_from_row(row)
        except ContactSchemaError as e:
            raise ContactSchemaError([f"Row {i + 1}: {err}" for err in e.errors]) from e

    logger.record_contacts_loaded(len(contacts))
    logger.info("Contacts loaded", count=len(contacts))
    return contacts
