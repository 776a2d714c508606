"""Mappers for converting between domain models and API schemas."""
from src.app.core.domain.models import Client, ClientSearchCriteria
from src.client.schemas import ClientResponse, ClientSearchRequest


def to_client_response(client: Client) -> ClientResponse:
    """
    Convert a Client domain model to ClientResponse API schema.

    Args:
        client: Domain model

    Returns:
        API response schema
    """
    return ClientResponse(
        id=client.id,
        shared_key=client.shared_key,
        name=client.name,
        email=client.email,
        phone=client.phone,
        created_at=client.created_at,
    )


def to_search_criteria(request: ClientSearchRequest) -> ClientSearchCriteria:
    """Convert a search request body to the domain criteria object."""
    return ClientSearchCriteria(
        name=request.name,
        email=request.email,
        phone=request.phone,
        start_date=request.start_date,
        end_date=request.end_date,
        export_format=request.export_format,
    )
