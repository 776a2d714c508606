"""Domain models used in business logic."""
import re
from datetime import date, datetime, UTC
from enum import StrEnum

from pydantic import BaseModel, EmailStr, Field, field_validator

from src.shared.exceptions import InvalidInput

PHONE_PATTERN = re.compile(r"[0-9]{10}")


def validate_phone(value: str | None) -> str | None:
    """Allow a missing phone, otherwise require exactly 10 ASCII digits."""
    if value is None:
        return None
    if not PHONE_PATTERN.fullmatch(value):
        raise ValueError("Phone number must be 10 digits")
    return value


class Client(BaseModel):
    """Domain model for Client used in business logic."""
    id: str = Field(..., min_length=1, max_length=64, description="Unique client ID")
    shared_key: str = Field(..., min_length=1, description="Lower-cased local part of the email")
    name: str = Field(..., min_length=1, max_length=255, description="Name cannot be blank")
    email: EmailStr = Field(..., description="Email address is required")
    phone: str | None = Field(default=None, description="Ten digit phone number")
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC), description="Creation timestamp")

    model_config = {"from_attributes": True}

    @field_validator("phone")
    @classmethod
    def validate_phone_digits(cls, v: str | None) -> str | None:
        return validate_phone(v)


class ExportFormat(StrEnum):
    """Supported export encodings."""
    CSV = "CSV"
    EXCEL = "EXCEL"

    @property
    def media_type(self) -> str:
        if self is ExportFormat.CSV:
            return "text/csv"
        return "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

    @classmethod
    def parse(cls, value: str | None) -> "ExportFormat":
        """
        Resolve a requested export format, ignoring case.

        Raises:
            InvalidInput: If the value names no supported format
        """
        normalized = (value or "").strip().upper()
        try:
            return cls(normalized)
        except ValueError:
            raise InvalidInput(f"Unsupported export format: {value}") from None


class ClientSearchCriteria(BaseModel):
    """
    Optional filters narrowing a client search.

    Every field is independent; a missing field places no constraint on the
    result. Blank strings count as missing.
    """
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    export_format: str | None = None

    @field_validator("name", "email", "phone", "export_format")
    @classmethod
    def blank_as_missing(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        return v

    @property
    def is_empty(self) -> bool:
        """True when no filter field is set (export_format is not a filter)."""
        return all(
            value is None
            for value in (self.name, self.email, self.phone, self.start_date, self.end_date)
        )


class ExportedFile(BaseModel):
    """Rendered export ready to be sent as an attachment."""
    content: bytes
    filename: str
    media_type: str
