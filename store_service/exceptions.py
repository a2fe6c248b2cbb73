"""
Store domain errors

Raised by the service layer and mapped to HTTP responses in store_service.main.
"""

from fastapi import status


class StoreError(Exception):
    """Base class for store failures reported to callers"""
    code = "store_error"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DuplicateEmail(StoreError):
    """An account with this email already exists"""
    code = "duplicate_email"
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, email: str):
        super().__init__(f"An account with email '{email}' already exists")
        self.email = email


class OwnerNotFound(StoreError):
    """The owning account of a file reference does not exist"""
    code = "owner_not_found"
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, owner_id):
        super().__init__(f"Owner account '{owner_id}' not found")
        self.owner_id = owner_id
