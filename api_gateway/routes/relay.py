"""
Relay routes

Bodies are forwarded to the store without validation; the store decides
what is acceptable.
"""

from fastapi import APIRouter, Depends, Request, Response, status
import structlog

from api_gateway.utils.store_client import RelayedResponse, StoreServiceClient

logger = structlog.get_logger(__name__)

router = APIRouter()

RELAY_RESPONSES = {
    status.HTTP_201_CREATED: {"description": "Record created by the store"},
    status.HTTP_502_BAD_GATEWAY: {"description": "The relayed call failed"},
}


def get_store_client(request: Request) -> StoreServiceClient:
    """Dependency to get the shared store client"""
    return request.app.state.store_client


def _relayed(relayed: RelayedResponse) -> Response:
    return Response(
        content=relayed.content,
        status_code=relayed.status_code,
        media_type=relayed.content_type
    )


@router.post("/accounts", responses=RELAY_RESPONSES)
async def relay_create_account(
    request: Request,
    store_client: StoreServiceClient = Depends(get_store_client)
):
    """Forward an account creation request to the store"""
    body = await request.body()
    relayed = await store_client.relay_create_account(body, request.headers.get("content-type"))
    logger.info("Account creation relayed", status_code=relayed.status_code)
    return _relayed(relayed)


@router.post("/files", responses=RELAY_RESPONSES)
async def relay_create_file_reference(
    request: Request,
    store_client: StoreServiceClient = Depends(get_store_client)
):
    """Forward a file reference creation request to the store"""
    body = await request.body()
    relayed = await store_client.relay_create_file_reference(body, request.headers.get("content-type"))
    logger.info("File reference creation relayed", status_code=relayed.status_code)
    return _relayed(relayed)
