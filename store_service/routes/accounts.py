"""
Account routes
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from shared.schemas import AccountCreateSchema, AccountResponseSchema, ErrorResponseSchema
from store_service.db.database import get_session
from store_service.exceptions import StoreError
from store_service.services.store_service import StoreService

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=AccountResponseSchema,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponseSchema}}
)
async def create_account(
    account_data: AccountCreateSchema,
    session: AsyncSession = Depends(get_session)
):
    """Create a new account; the email must not be registered yet"""
    try:
        account = await StoreService.create_account(session, account_data)
        return AccountResponseSchema(**account.to_dict())

    except StoreError:
        raise
    except Exception as e:
        logger.error("Failed to create account", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create account"
        )
