from typing import Optional
from sqlalchemy import ColumnElement, and_, select, exists

from src.app.core.domain.models import Client
from src.shared.database.base_repo import BaseRepository
from src.shared.database.database import Database

from src.app.infrastructure.entities.client_entity import ClientEntity
from src.app.infrastructure.mappers.client_mapper import ClientMapper


class ClientRepository(BaseRepository[ClientEntity, Client]):
    """Repository for Client read operations. Writes go through the UnitOfWork."""

    def __init__(self, db: Database, mapper: ClientMapper):
        super().__init__(db, mapper)

    @staticmethod
    def _ordered():
        return select(ClientEntity).order_by(ClientEntity.created_at, ClientEntity.id)

    async def get_by_id(self, client_id: str) -> Optional[Client]:
        """Get a client by ID."""
        return await self.find_one(
            select(ClientEntity).where(ClientEntity.id == client_id)
        )

    async def list_all(self) -> list[Client]:
        """Get every client, oldest first."""
        return await self.find_all(self._ordered())

    async def search(self, filters: list[ColumnElement[bool]]) -> list[Client]:
        """
        Get the clients matching every filter clause.

        Args:
            filters: Boolean clauses over ClientEntity, combined with AND.
                An empty list matches all clients.

        Returns:
            Matching clients, oldest first
        """
        statement = self._ordered()
        if filters:
            statement = statement.where(and_(*filters))
        return await self.find_all(statement)

    async def find_by_shared_key_containing(self, fragment: str) -> list[Client]:
        """Get clients whose shared key contains ``fragment``, ignoring case."""
        return await self.find_all(
            self._ordered().where(ClientEntity.shared_key.icontains(fragment, autoescape=True))
        )

    async def exists_by_shared_key(self, shared_key: str) -> bool:
        """Check whether a client already holds ``shared_key``."""
        return await self.check_exists(
            select(exists().where(ClientEntity.shared_key == shared_key))
        )
