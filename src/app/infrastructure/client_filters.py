"""Translate client search criteria into SQL filter clauses."""
from datetime import date, datetime, time, timedelta, UTC

from sqlalchemy import ColumnElement

from src.app.core.domain.models import ClientSearchCriteria
from src.app.infrastructure.entities.client_entity import ClientEntity


def start_of_day(day: date) -> datetime:
    """Midnight UTC at the start of ``day``."""
    return datetime.combine(day, time.min, tzinfo=UTC)


def name_contains(name: str | None) -> ColumnElement[bool] | None:
    if name is None:
        return None
    return ClientEntity.name.icontains(name, autoescape=True)


def email_contains(email: str | None) -> ColumnElement[bool] | None:
    if email is None:
        return None
    return ClientEntity.email.icontains(email, autoescape=True)


def phone_contains(phone: str | None) -> ColumnElement[bool] | None:
    if phone is None:
        return None
    return ClientEntity.phone.contains(phone, autoescape=True)


def created_on_or_after(start_date: date | None) -> ColumnElement[bool] | None:
    if start_date is None:
        return None
    return ClientEntity.created_at >= start_of_day(start_date)


def created_on_or_before(end_date: date | None) -> ColumnElement[bool] | None:
    # The whole end day is included, so compare against the next midnight.
    if end_date is None:
        return None
    return ClientEntity.created_at < start_of_day(end_date + timedelta(days=1))


def build_client_filters(criteria: ClientSearchCriteria) -> list[ColumnElement[bool]]:
    """
    Build one clause per populated criteria field.

    The clauses are meant to be combined with AND (``select().where(*clauses)``).
    Fields left empty contribute nothing, so empty criteria yield an empty list,
    which filters nothing out.

    Args:
        criteria: Search criteria with any subset of fields set

    Returns:
        List of boolean SQL expressions over ClientEntity columns
    """
    clauses = [
        name_contains(criteria.name),
        email_contains(criteria.email),
        phone_contains(criteria.phone),
        created_on_or_after(criteria.start_date),
        created_on_or_before(criteria.end_date),
    ]
    return [clause for clause in clauses if clause is not None]
