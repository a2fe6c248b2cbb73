"""
File reference routes
"""

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from shared.schemas import FileReferenceCreateSchema, FileReferenceResponseSchema, ErrorResponseSchema
from store_service.db.database import get_session
from store_service.exceptions import StoreError
from store_service.services.store_service import StoreService

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=FileReferenceResponseSchema,
    status_code=status.HTTP_201_CREATED,
    responses={404: {"model": ErrorResponseSchema}}
)
async def create_file_reference(
    file_data: FileReferenceCreateSchema,
    request: Request,
    session: AsyncSession = Depends(get_session)
):
    """
    Register a file reference

    The storage path is derived from the display name; the owner must be
    an existing account.
    """
    try:
        file_reference = await StoreService.create_file_reference(
            session,
            file_data,
            storage_root=request.app.state.settings.storage_root
        )
        return FileReferenceResponseSchema(**file_reference.to_dict())

    except StoreError:
        raise
    except Exception as e:
        logger.error("Failed to create file reference", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create file reference"
        )
