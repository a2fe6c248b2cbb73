from datetime import datetime, timezone
import uuid

from sqlalchemy import Column, String, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Account(Base):
    __tablename__ = "accounts"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    # Unique constraint is the only guard against duplicate emails
    email = Column(String(255), unique=True, nullable=False, index=True)
    credential = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    def to_dict(self) -> dict:
        """Public representation, credential excluded"""
        return {
            "id": str(self.id),
            "email": self.email,
            "created_at": self.created_at
        }


class FileReference(Base):
    __tablename__ = "file_references"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    display_name = Column(String(255), nullable=False)
    storage_path = Column(String(512), nullable=False)
    owner_id = Column(Uuid(as_uuid=True), ForeignKey("accounts.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "display_name": self.display_name,
            "storage_path": self.storage_path,
            "owner_id": str(self.owner_id),
            "created_at": self.created_at
        }
