"""
File reference data schemas

Pydantic models for file reference creation requests and responses.
"""

from datetime import datetime
from uuid import UUID
from pydantic import BaseModel, ConfigDict, Field, field_validator


class FileReferenceCreateSchema(BaseModel):
    """Schema for registering a file reference against an account"""
    display_name: str = Field(..., min_length=1, max_length=255)
    owner_id: UUID = Field(..., description="Account ID that owns the file")

    @field_validator('display_name')
    @classmethod
    def validate_display_name(cls, v):
        if not v.strip():
            raise ValueError('Display name must not be blank')
        return v


class FileReferenceResponseSchema(BaseModel):
    """Schema for file reference API responses"""
    id: str
    display_name: str
    storage_path: str
    owner_id: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
