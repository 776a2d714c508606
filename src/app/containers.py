"""Dependency injection container using dependency-injector library."""
from dependency_injector import containers, providers

from src.app.config import Settings
from src.shared.database.database import Database, DatabaseSettings
from src.shared.database.unit_of_work import UnitOfWork
from src.shared.database.entity_mapper import EntityMapper

from src.app.infrastructure.mappers.client_mapper import ClientMapper
from src.app.infrastructure.client_repository import ClientRepository

from src.app.core.services.client_exporter import ClientExporter
from src.app.core.services.client_service import ClientService

from src.app.core.domain.models import Client


def create_entity_mapper(client_mapper: ClientMapper) -> EntityMapper:
    """Factory function to create EntityMapper with proper mappings."""
    return EntityMapper(
        entity_mappings={
            Client: client_mapper.to_entity,
        }
    )


class Container(containers.DeclarativeContainer):
    """Main application dependency injection container."""

    wiring_config = containers.WiringConfiguration(
        modules=[
            "src.app.api.v1.clients",
        ]
    )

    # =========================================================================
    # CONFIGURATION - Singleton (loaded once, cached)
    # =========================================================================
    config = providers.Singleton(Settings)

    # =========================================================================
    # SINGLETONS - Stateless Mappers and Encoders (reusable across all requests)
    # =========================================================================
    client_mapper = providers.Singleton(ClientMapper)

    entity_mapper = providers.Singleton(
        create_entity_mapper,
        client_mapper=client_mapper,
    )

    client_exporter = providers.Singleton(
        ClientExporter,
        columns=config.provided.export.columns,
        sheet_name=config.provided.export.sheet_name,
    )

    # =========================================================================
    # SINGLETON - Database (shared connection pool)
    # =========================================================================
    database_settings = providers.Singleton(
        DatabaseSettings,
        db_url=config.provided.database_url,
    )

    database = providers.Singleton(
        Database,
        db_settings=database_settings,
    )

    # =========================================================================
    # FACTORIES - Repositories (per-request, share database singleton)
    # =========================================================================
    client_repository = providers.Factory(
        ClientRepository,
        db=database,
        mapper=client_mapper,
    )

    # =========================================================================
    # FACTORY - Unit of Work (per-request, holds its own session)
    # =========================================================================
    unit_of_work = providers.Factory(
        UnitOfWork,
        db=database,
        entity_mapper=entity_mapper,
    )

    # =========================================================================
    # FACTORIES - Services
    # =========================================================================
    client_service = providers.Factory(
        ClientService,
        repository=client_repository,
        unit_of_work=unit_of_work,
        exporter=client_exporter,
    )
