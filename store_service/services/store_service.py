"""
Store operations for accounts and file references
"""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from shared.schemas import AccountCreateSchema, FileReferenceCreateSchema
from store_service.exceptions import DuplicateEmail, OwnerNotFound
from store_service.models import Account, FileReference
from store_service.utils.storage import build_storage_path

logger = structlog.get_logger(__name__)


class StoreService:
    """Create operations against the store database"""

    @staticmethod
    async def create_account(session: AsyncSession, account_data: AccountCreateSchema) -> Account:
        """
        Create a new account

        Uniqueness is decided by the single INSERT: two concurrent requests
        for the same email cannot both commit.

        Raises:
            DuplicateEmail: if the email is already registered
        """
        account = Account(email=account_data.email, credential=account_data.credential)
        session.add(account)

        try:
            await session.commit()
        except IntegrityError as e:
            await session.rollback()
            logger.warning("Duplicate email rejected", email=account_data.email, error=str(e.orig))
            raise DuplicateEmail(account_data.email) from e

        logger.info("Account created", account_id=str(account.id))
        return account

    @staticmethod
    async def create_file_reference(
        session: AsyncSession,
        file_data: FileReferenceCreateSchema,
        storage_root: str
    ) -> FileReference:
        """
        Register a file reference owned by an existing account

        Raises:
            OwnerNotFound: if owner_id does not name an account
        """
        owner = await session.get(Account, file_data.owner_id)
        if owner is None:
            logger.warning("File reference owner not found", owner_id=str(file_data.owner_id))
            raise OwnerNotFound(file_data.owner_id)

        file_reference = FileReference(
            display_name=file_data.display_name,
            storage_path=build_storage_path(file_data.display_name, storage_root),
            owner_id=owner.id
        )
        session.add(file_reference)
        await session.commit()

        logger.info(
            "File reference created",
            file_id=str(file_reference.id),
            owner_id=str(owner.id),
            storage_path=file_reference.storage_path
        )
        return file_reference
