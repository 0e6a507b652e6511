"""
Pytest configuration and shared fixtures.
"""

import pytest
from pathlib import Path
from typing import Dict

from contactdedup.logger import get_logger, reset_logger
from contactdedup.schema import Contact

CSV_HEADER = "name,name1,email,postalZip,address"


@pytest.fixture(autouse=True)
def quiet_logger():
    """Fresh global logger without console output, so metrics start at zero."""
    reset_logger()
    logger = get_logger(enable_console=False)
    yield logger
    reset_logger()


@pytest.fixture
def example_contacts() -> Dict[int, Contact]:
    """Three contacts: #1 and #2 share an email, #3 only shares initials."""
    return {
        1: Contact(first_name="C", last_name="F", email="mollis.lectus.pede@outlook.net", address="449-6990 Tellus. Rd."),
        2: Contact(
            first_name="C",
            last_name="French",
            email="mollis.lectus.pede@outlook.net",
            zip_code="39746",
            address="449-6990 Tellus. Rd.",
        ),
        3: Contact(first_name="Ciara", last_name="F", email="non.lacinia.at@zoho.ca", zip_code="39746"),
    }


@pytest.fixture
def contacts_csv(tmp_path) -> Path:
    """CSV file holding the example contacts as rows 0, 1 and 2."""
    csv_file = tmp_path / "contacts.csv"
    csv_file.write_text(
        "\n".join([
            CSV_HEADER,
            "C,F,mollis.lectus.pede@outlook.net,,449-6990 Tellus. Rd.",
            "C,French,mollis.lectus.pede@outlook.net,39746,449-6990 Tellus. Rd.",
            "Ciara,F,non.lacinia.at@zoho.ca,39746,",
        ]) + "\n",
        encoding="utf-8",
    )
    return csv_file
