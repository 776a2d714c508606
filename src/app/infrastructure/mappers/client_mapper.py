from datetime import UTC

from src.shared.database.base_mapper import BaseEntityMapper
from src.app.core.domain.models import Client
from src.app.infrastructure.entities.client_entity import ClientEntity


class ClientMapper(BaseEntityMapper[Client, ClientEntity]):
    """Mapper for converting between Client domain model and ClientEntity."""

    @staticmethod
    def to_entity(model_instance: Client) -> ClientEntity:
        """Convert a Client (domain model) to ClientEntity (database entity)."""
        return ClientEntity(
            id=model_instance.id,
            shared_key=model_instance.shared_key,
            name=model_instance.name,
            email=str(model_instance.email),
            phone=model_instance.phone,
            created_at=model_instance.created_at,
        )

    @staticmethod
    def to_model(entity: ClientEntity) -> Client:
        """Convert a ClientEntity (database entity) to Client (domain model)."""
        created_at = entity.created_at
        # Engines without timezone support hand back naive values; they are stored as UTC.
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=UTC)
        return Client(
            id=entity.id,
            shared_key=entity.shared_key,
            name=entity.name,
            email=entity.email,
            phone=entity.phone,
            created_at=created_at,
        )
