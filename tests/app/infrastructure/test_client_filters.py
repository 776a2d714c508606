"""Tests for translating search criteria into filter clauses."""
from datetime import date, datetime, UTC

from sqlalchemy.dialects import postgresql

from src.app.core.domain.models import ClientSearchCriteria
from src.app.infrastructure.client_filters import build_client_filters, start_of_day


def compile_clause(clause) -> str:
    return str(clause.compile(dialect=postgresql.dialect()))


class TestBuildClientFilters:
    """One clause per populated field, none for missing ones."""

    def test_empty_criteria_yields_no_clauses(self):
        assert build_client_filters(ClientSearchCriteria()) == []

    def test_blank_strings_yield_no_clauses(self):
        criteria = ClientSearchCriteria(name="", email="   ", phone="")

        assert build_client_filters(criteria) == []

    def test_export_format_is_not_a_filter(self):
        assert build_client_filters(ClientSearchCriteria(export_format="CSV")) == []

    def test_every_field_contributes_one_clause(self):
        criteria = ClientSearchCriteria(
            name="ann",
            email="acme",
            phone="555",
            start_date=date(2024, 1, 1),
            end_date=date(2024, 1, 31),
        )

        assert len(build_client_filters(criteria)) == 5

    def test_name_clause_is_case_insensitive_like(self):
        [clause] = build_client_filters(ClientSearchCriteria(name="Ann"))

        sql = compile_clause(clause)
        assert "lower(clients.name)" in sql
        assert "LIKE" in sql

    def test_phone_clause_is_case_sensitive_like(self):
        [clause] = build_client_filters(ClientSearchCriteria(phone="555"))

        sql = compile_clause(clause)
        assert "clients.phone LIKE" in sql
        assert "lower" not in sql

    def test_start_date_only_gives_lower_bound(self):
        [clause] = build_client_filters(ClientSearchCriteria(start_date=date(2024, 3, 1)))

        assert ">=" in compile_clause(clause)

    def test_end_date_only_gives_exclusive_next_day_bound(self):
        [clause] = build_client_filters(ClientSearchCriteria(end_date=date(2024, 3, 1)))

        assert "<" in compile_clause(clause)
        assert clause.right.value == datetime(2024, 3, 2, tzinfo=UTC)


def test_start_of_day_is_utc_midnight():
    assert start_of_day(date(2024, 5, 17)) == datetime(2024, 5, 17, 0, 0, tzinfo=UTC)
