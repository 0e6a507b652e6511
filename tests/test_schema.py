"""
Tests for schema validation.
"""

import pytest
from contactdedup.schema import COLUMN_MAP, Contact, ContactSchemaError, contact_from_row, validate_columns


class TestValidateColumns:
    """Test header validation."""

    def test_valid_columns(self):
        assert validate_columns(["name", "name1", "email", "postalZip", "address"]) == []

    def test_extra_columns_allowed(self):
        assert validate_columns(["id", "name", "name1", "email", "postalZip", "address", "phone"]) == []

    def test_missing_column(self):
        errors = validate_columns(["name", "name1", "email", "address"])
        assert errors == ["Missing required column: postalZip"]

    def test_column_names_case_sensitive(self):
        errors = validate_columns(["Name", "name1", "email", "postalZip", "address"])
        assert any("name" in err for err in errors)


class TestContactFromRow:
    """Test building contacts from rows."""

    def test_full_row(self):
        row = {"name": "Ann", "name1": "Lee", "email": "a@b.c", "postalZip": "1000", "address": "Main St"}
        assert contact_from_row(row) == Contact("Ann", "Lee", "a@b.c", "1000", "Main St")

    def test_missing_values_are_unknown(self):
        assert contact_from_row({"name": "Ann"}) == Contact(first_name="Ann")

    def test_none_is_unknown(self):
        assert contact_from_row({"email": None}).email == ""

    def test_non_text_value(self):
        with pytest.raises(ContactSchemaError) as exc_info:
            contact_from_row({"postalZip": 1000})
        assert "postalZip" in exc_info.value.errors[0]

    def test_every_column_maps_to_a_field(self):
        fields = set(Contact.__dataclass_fields__)
        assert set(COLUMN_MAP.values()) == fields


class TestContact:
    """Test the contact record."""

    def test_defaults_unknown(self):
        c = Contact()
        assert (c.first_name, c.last_name, c.email, c.zip_code, c.address) == ("", "", "", "", "")

    def test_immutable(self):
        with pytest.raises(AttributeError):
            Contact().email = "a@b.c"
