import logging
from uuid import uuid4
from datetime import datetime, UTC

from sqlalchemy.exc import IntegrityError

from src.app.core.domain.models import Client, ClientSearchCriteria, ExportFormat, ExportedFile
from src.app.core.services.client_exporter import ClientExporter
from src.shared.database.unit_of_work import UnitOfWork
from src.client.schemas import CreateClientRequest

from src.app.infrastructure.client_filters import build_client_filters
from src.app.infrastructure.client_repository import ClientRepository


from src.shared.exceptions import EntityNotFound, ConflictingEntityFound, InvalidInput

logger = logging.getLogger(__name__)

DUPLICATE_KEY_HINT = "Please use a different email."


def derive_shared_key(email: str | None) -> str:
    """
    Derive the shared key from an email: its local part, lower-cased.

    Raises:
        InvalidInput: If the email is missing or has no '@'
    """
    if not email or "@" not in email:
        raise InvalidInput("Email is not valid for generating a shared key")
    return email.split("@", 1)[0].lower()


class ClientService:
    """Service for handling Client business logic."""

    def __init__(self, repository: ClientRepository, unit_of_work: UnitOfWork, exporter: ClientExporter):
        self.repository = repository
        self.unit_of_work = unit_of_work
        self.exporter = exporter

    async def list_clients(self) -> list[Client]:
        """Get every client."""
        logger.info("Fetching all clients")
        return await self.repository.list_all()

    async def search_by_shared_key(self, fragment: str) -> list[Client]:
        """
        Get clients whose shared key contains ``fragment``, ignoring case.

        Raises:
            EntityNotFound: If no client matches
        """
        logger.info("Searching clients with shared key: %s", fragment)
        clients = await self.repository.find_by_shared_key_containing(fragment)
        if not clients:
            raise EntityNotFound("Client", fragment, field_name="sharedKey")
        return clients

    async def create_client(self, request: CreateClientRequest) -> Client:
        """
        Create a new client.

        The shared key is always derived from the email, replacing any value in
        the request. An ID is generated when the request carries none.

        Raises:
            InvalidInput: If no shared key can be derived from the email
            ConflictingEntityFound: If the shared key or email is already taken
        """
        logger.info("Creating new client with email: %s", request.email)
        shared_key = derive_shared_key(request.email)

        # The unique constraints still decide on insert.
        if await self.repository.exists_by_shared_key(shared_key):
            raise ConflictingEntityFound("Client", "sharedKey", shared_key, hint=DUPLICATE_KEY_HINT)

        client = Client(
            id=request.id or str(uuid4()),
            shared_key=shared_key,
            name=request.name,
            email=request.email,
            phone=request.phone,
            created_at=datetime.now(UTC),
        )

        try:
            async with self.unit_of_work:
                self.unit_of_work.add(client)
        except IntegrityError as e:
            logger.error("Integrity violation when saving client %s: %s", client.id, e.orig)
            if request.id and await self.repository.get_by_id(request.id) is not None:
                raise ConflictingEntityFound("Client", "ID", request.id) from e
            raise ConflictingEntityFound("Client", "sharedKey", shared_key, hint=DUPLICATE_KEY_HINT) from e

        persisted = await self.repository.get_by_id(client.id)
        return persisted or client

    async def search_clients(self, criteria: ClientSearchCriteria) -> list[Client]:
        """Get clients matching every populated criteria field. No match is an empty list."""
        if criteria.is_empty:
            logger.info("Searching clients without criteria, returning all")
        else:
            logger.info("Searching clients with criteria: %s", criteria.model_dump(exclude_none=True))
        return await self.repository.search(build_client_filters(criteria))

    async def export_clients(self, criteria: ClientSearchCriteria) -> ExportedFile:
        """
        Export clients matching the criteria in the requested format.

        Raises:
            InvalidInput: If ``export_format`` is missing or not CSV/EXCEL
            ExportFailure: If encoding the file fails
        """
        export_format = ExportFormat.parse(criteria.export_format)
        clients = await self.search_clients(criteria)
        content = self.exporter.export(clients, export_format)
        logger.info("Exported %d clients as %s (%d bytes)", len(clients), export_format, len(content))
        return ExportedFile(
            content=content,
            filename=f"clients.{export_format.lower()}",
            media_type=export_format.media_type,
        )
