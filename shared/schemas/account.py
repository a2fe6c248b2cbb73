"""
Account data schemas

Pydantic models for account creation requests and responses.
"""

from datetime import datetime
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class AccountCreateSchema(BaseModel):
    """Schema for creating a new account"""
    email: EmailStr
    credential: str = Field(..., min_length=1, max_length=255)

    @field_validator('email')
    @classmethod
    def normalize_email(cls, v):
        """Store emails lower-cased so uniqueness ignores case"""
        return v.lower()


class AccountResponseSchema(BaseModel):
    """Schema for account API responses"""
    id: str
    email: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
