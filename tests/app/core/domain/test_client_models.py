"""Tests for client domain models and request schemas."""
from datetime import date

import pytest
from pydantic import ValidationError

from src.app.core.domain.models import Client, ClientSearchCriteria, ExportFormat, validate_phone
from src.client.schemas import ClientSearchRequest, CreateClientRequest
from src.shared.exceptions import InvalidInput


class TestValidatePhone:

    def test_none_is_allowed(self):
        assert validate_phone(None) is None

    def test_ten_digits(self):
        assert validate_phone("0123456789") == "0123456789"

    @pytest.mark.parametrize("phone", ["123456789", "12345678901", "123-456-7890", "12345abcde", " 0123456789", ""])
    def test_anything_else_is_rejected(self, phone):
        with pytest.raises(ValueError, match="10 digits"):
            validate_phone(phone)


class TestCreateClientRequest:

    def test_accepts_camel_case_payload(self):
        request = CreateClientRequest.model_validate(
            {"id": "c-1", "sharedKey": "ignored", "name": "Ada", "email": "ada@example.com", "phone": "0123456789"}
        )

        assert request.id == "c-1"
        assert request.shared_key == "ignored"
        assert request.phone == "0123456789"

    def test_optional_fields_default_to_none(self):
        request = CreateClientRequest(name="Ada", email="ada@example.com")

        assert request.id is None
        assert request.shared_key is None
        assert request.phone is None

    def test_name_is_stripped(self):
        assert CreateClientRequest(name="  Ada  ", email="ada@example.com").name == "Ada"

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name_is_rejected(self, name):
        with pytest.raises(ValidationError, match="Name is required"):
            CreateClientRequest(name=name, email="ada@example.com")

    def test_invalid_email_is_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            CreateClientRequest(name="Ada", email="not-an-email")

        assert exc_info.value.errors()[0]["loc"] == ("email",)

    def test_bad_phone_is_rejected(self):
        with pytest.raises(ValidationError, match="Phone number must be 10 digits"):
            CreateClientRequest(name="Ada", email="ada@example.com", phone="555-1234")


class TestClient:

    def test_created_at_defaults_to_aware_now(self):
        client = Client(id="1", shared_key="ada", name="Ada", email="ada@example.com")

        assert client.created_at.tzinfo is not None

    def test_phone_rule_applies_to_domain_model(self):
        with pytest.raises(ValidationError):
            Client(id="1", shared_key="ada", name="Ada", email="ada@example.com", phone="12")


class TestClientSearchCriteria:

    def test_blank_strings_become_missing(self):
        criteria = ClientSearchCriteria(name=" ", email="", phone="\t", export_format="")

        assert criteria.name is None
        assert criteria.email is None
        assert criteria.phone is None
        assert criteria.export_format is None
        assert criteria.is_empty

    def test_export_format_does_not_count_as_filter(self):
        assert ClientSearchCriteria(export_format="CSV").is_empty

    def test_any_filter_makes_it_non_empty(self):
        assert not ClientSearchCriteria(end_date=date(2024, 1, 1)).is_empty
        assert not ClientSearchCriteria(phone="1").is_empty

    def test_search_request_reads_camel_case_dates(self):
        request = ClientSearchRequest.model_validate(
            {"startDate": "2024-01-01", "endDate": "2024-01-31", "exportFormat": "EXCEL"}
        )

        assert request.start_date == date(2024, 1, 1)
        assert request.end_date == date(2024, 1, 31)
        assert request.export_format == "EXCEL"


class TestExportFormat:

    @pytest.mark.parametrize("value, expected", [
        ("CSV", ExportFormat.CSV),
        ("csv", ExportFormat.CSV),
        ("Excel", ExportFormat.EXCEL),
        (" EXCEL ", ExportFormat.EXCEL),
    ])
    def test_parse_ignores_case(self, value, expected):
        assert ExportFormat.parse(value) is expected

    @pytest.mark.parametrize("value", [None, "", "PDF", "xlsx"])
    def test_parse_rejects_unknown(self, value):
        with pytest.raises(InvalidInput, match="Unsupported export format"):
            ExportFormat.parse(value)

    def test_media_types(self):
        assert ExportFormat.CSV.media_type == "text/csv"
        assert ExportFormat.EXCEL.media_type.endswith("spreadsheetml.sheet")
