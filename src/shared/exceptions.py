"""Custom exceptions for the application."""
from typing import Any


class EntityNotFound(Exception):
    """Raised when a lookup yields no entity."""

    def __init__(self, entity_name: str, entity_id: Any, field_name: str = "ID"):
        """
        Initialize the exception.

        Args:
            entity_name: Name of the entity that was not found
            entity_id: Value that was looked up
            field_name: Name of the field the lookup was made on
        """
        super().__init__(f"{entity_name} with {field_name} '{entity_id}' not found")
        self.entity_name = entity_name
        self.entity_id = entity_id
        self.field_name = field_name


class ConflictingEntityFound(Exception):
    """Raised when an entity with a conflicting field already exists."""

    def __init__(self, entity_name: str, field_name: str, field_value: Any, hint: str | None = None):
        """
        Initialize the exception.

        Args:
            entity_name: Name of the entity
            field_name: Name of the conflicting field
            field_value: Value of the conflicting field
            hint: Optional suggestion appended to the message
        """
        message = f"{entity_name} with {field_name} '{field_value}' already exists"
        if hint:
            message = f"{message}. {hint}"
        super().__init__(message)
        self.entity_name = entity_name
        self.field_name = field_name
        self.field_value = field_value


class InvalidInput(ValueError):
    """Raised when input passes field validation but is rejected by business rules."""


class ExportFailure(Exception):
    """Raised when rendering an export file fails."""

    def __init__(self, export_format: str, reason: str):
        super().__init__(f"Failed to export clients as {export_format}: {reason}")
        self.export_format = export_format
        self.reason = reason
