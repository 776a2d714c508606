"""HTTP client and schemas for the Client Registry API."""
from src.client.registry_client import ClientRegistryClient
from src.client.schemas import ClientResponse, ClientSearchRequest, CreateClientRequest

__all__ = [
    "ClientRegistryClient",
    "ClientResponse",
    "ClientSearchRequest",
    "CreateClientRequest",
]
