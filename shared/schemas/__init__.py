"""
Shared data schemas for the relay services

Wire formats used by the store, the gateway and the frontend.
"""

from .account import AccountCreateSchema, AccountResponseSchema
from .file_reference import FileReferenceCreateSchema, FileReferenceResponseSchema
from .errors import ErrorResponseSchema, error_body, error_code

__all__ = [
    "AccountCreateSchema",
    "AccountResponseSchema",
    "FileReferenceCreateSchema",
    "FileReferenceResponseSchema",
    "ErrorResponseSchema",
    "error_body",
    "error_code",
]

__version__ = "1.0.0"
