"""HTTP client for consuming the Client Registry API."""
from typing import Optional
from httpx import AsyncClient, Response

from src.client.schemas import (
    CreateClientRequest,
    ClientResponse,
    ClientSearchRequest,
)


class ClientRegistryClient:
    """HTTP client for interacting with the Client Registry API."""

    def __init__(self, base_url: str, client: Optional[AsyncClient] = None):
        """
        Initialize the registry client.

        Args:
            base_url: Base URL of the API (e.g., "http://localhost:8000")
            client: Optional httpx.AsyncClient instance. If not provided, a new one will be created.
        """
        self.base_url = base_url.rstrip("/")
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self):
        """Async context manager entry."""
        if self._owns_client:
            self._client = AsyncClient(base_url=self.base_url)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        if self._owns_client and self._client:
            await self._client.aclose()

    @property
    def client(self) -> AsyncClient:
        """Get the underlying httpx client."""
        if self._client is None:
            raise RuntimeError("Client not initialized. Use async context manager.")
        return self._client

    async def list_clients(self) -> list[ClientResponse]:
        """
        List every registered client.

        Raises:
            httpx.HTTPStatusError: If the request fails
        """
        response: Response = await self.client.get("/api/v1/clients/")
        response.raise_for_status()
        return [ClientResponse(**item) for item in response.json()]

    async def search_by_shared_key(self, shared_key: str) -> list[ClientResponse]:
        """
        Find clients whose shared key contains the given fragment.

        Args:
            shared_key: Fragment matched case-insensitively

        Returns:
            Matching clients

        Raises:
            httpx.HTTPStatusError: If the request fails (404 when nothing matches)
        """
        response: Response = await self.client.get(
            "/api/v1/clients/search",
            params={"sharedKey": shared_key},
        )
        response.raise_for_status()
        return [ClientResponse(**item) for item in response.json()]

    async def create_client(self, request: CreateClientRequest) -> ClientResponse:
        """
        Create a new client.

        Args:
            request: Client creation request

        Returns:
            Created client response

        Raises:
            httpx.HTTPStatusError: If the request fails
        """
        response: Response = await self.client.post(
            "/api/v1/clients/",
            json=request.model_dump(mode="json", by_alias=True, exclude_none=True),
        )
        response.raise_for_status()
        return ClientResponse(**response.json())

    async def search_clients(self, criteria: ClientSearchRequest) -> list[ClientResponse]:
        """
        Search clients by optional criteria.

        Raises:
            httpx.HTTPStatusError: If the request fails
        """
        response: Response = await self.client.post(
            "/api/v1/clients/search/advanced",
            json=criteria.model_dump(mode="json", by_alias=True, exclude_none=True),
        )
        response.raise_for_status()
        return [ClientResponse(**item) for item in response.json()]

    async def export_clients(self, criteria: ClientSearchRequest) -> Response:
        """
        Export clients matching the criteria.

        Args:
            criteria: Search criteria including ``export_format``

        Returns:
            The raw response; ``content`` holds the file and the
            Content-Disposition header carries its name.

        Raises:
            httpx.HTTPStatusError: If the request fails
        """
        response: Response = await self.client.post(
            "/api/v1/clients/export",
            json=criteria.model_dump(mode="json", by_alias=True, exclude_none=True),
        )
        response.raise_for_status()
        return response
