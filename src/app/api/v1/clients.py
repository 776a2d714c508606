from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from dependency_injector.wiring import Provide, inject

from src.app.containers import Container
from src.app.core.services.client_service import ClientService
from src.client.schemas import CreateClientRequest, ClientResponse, ClientSearchRequest
from src.app.api.mappers import to_client_response, to_search_criteria
from src.shared.exceptions import EntityNotFound, ConflictingEntityFound, ExportFailure, InvalidInput
from src.app.logging import get_logger

router = APIRouter(prefix="/clients", tags=["clients"])
logger = get_logger(__name__)


@router.get("/", response_model=list[ClientResponse])
@inject
async def list_clients(
    service: ClientService = Depends(Provide[Container.client_service]),
) -> list[ClientResponse]:
    """Get all registered clients."""
    clients = await service.list_clients()
    return [to_client_response(client) for client in clients]


@router.get("/search", response_model=list[ClientResponse])
@inject
async def search_by_shared_key(
    shared_key: Annotated[str, Query(alias="sharedKey", description="Fragment of the shared key")],
    service: ClientService = Depends(Provide[Container.client_service]),
) -> list[ClientResponse]:
    """
    Find clients whose shared key contains the given fragment, ignoring case.

    Raises:
        HTTPException 404: If no client matches
    """
    try:
        clients = await service.search_by_shared_key(shared_key)
    except EntityNotFound as e:
        logger.warning(f"No clients for shared key search: {e}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return [to_client_response(client) for client in clients]


@router.post("/", response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
@inject
async def create_client(
    request: CreateClientRequest,
    service: ClientService = Depends(Provide[Container.client_service]),
) -> ClientResponse:
    """Create a new client."""
    try:
        client = await service.create_client(request)
        return to_client_response(client)
    except ConflictingEntityFound as e:
        logger.error(f"Failed to create client: {e}")
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except InvalidInput as e:
        logger.error(f"Failed to create client due to validation error: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post("/search/advanced", response_model=list[ClientResponse])
@inject
async def search_clients(
    request: ClientSearchRequest,
    service: ClientService = Depends(Provide[Container.client_service]),
) -> list[ClientResponse]:
    """Search clients by any combination of name, email, phone and creation dates."""
    clients = await service.search_clients(to_search_criteria(request))
    return [to_client_response(client) for client in clients]


@router.post(
    "/export",
    response_class=Response,
    responses={
        200: {
            "content": {
                "text/csv": {},
                "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet": {},
            },
            "description": "The exported file as an attachment",
        }
    },
)
@inject
async def export_clients(
    request: ClientSearchRequest,
    service: ClientService = Depends(Provide[Container.client_service]),
) -> Response:
    """
    Export clients matching the criteria as CSV or EXCEL.

    Raises:
        HTTPException 400: If the export format is missing or unsupported
        HTTPException 500: If the file cannot be rendered
    """
    try:
        exported = await service.export_clients(to_search_criteria(request))
    except InvalidInput as e:
        logger.error(f"Rejected export request: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except ExportFailure as e:
        logger.error(f"Error exporting clients: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))

    return Response(
        content=exported.content,
        media_type=exported.media_type,
        headers={"Content-Disposition": f'attachment; filename="{exported.filename}"'},
    )
