"""API schemas for client requests and responses."""
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel

from src.app.core.domain.models import validate_phone

API_MODEL_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateClientRequest(BaseModel):
    """
    Request schema for creating a new client.

    ``shared_key`` is accepted for compatibility but always replaced by the
    key derived from ``email``. ``created_at`` is never accepted.
    """
    id: str | None = Field(default=None, max_length=64, description="Optional caller-chosen ID")
    shared_key: str | None = Field(default=None, description="Ignored, derived from email")
    name: str = Field(..., max_length=255, description="Name cannot be blank")
    email: EmailStr = Field(..., description="Email address is required")
    phone: str | None = Field(default=None, description="Exactly 10 digits when present")

    model_config = API_MODEL_CONFIG

    @field_validator("name")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Ensure name is not just whitespace."""
        if not v or not v.strip():
            raise ValueError("Name is required")
        return v.strip()

    @field_validator("phone")
    @classmethod
    def validate_phone_digits(cls, v: str | None) -> str | None:
        return validate_phone(v)


class ClientResponse(BaseModel):
    """Response schema for client data returned by the API."""
    id: str
    shared_key: str
    name: str
    email: EmailStr = Field(..., description="Email address")
    phone: str | None = None
    created_at: datetime

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class ClientSearchRequest(BaseModel):
    """
    Search criteria body for advanced search and export.

    All fields are optional. ``export_format`` is only read by the export
    endpoint and must be CSV or EXCEL there.
    """
    name: str | None = Field(default=None, description="Case-insensitive substring of the name")
    email: str | None = Field(default=None, description="Case-insensitive substring of the email")
    phone: str | None = Field(default=None, description="Substring of the phone number")
    start_date: date | None = Field(default=None, description="Earliest creation date, inclusive")
    end_date: date | None = Field(default=None, description="Latest creation date, inclusive")
    export_format: str | None = Field(default=None, description="CSV or EXCEL")

    model_config = API_MODEL_CONFIG
