"""
Error payload schema shared by all services
"""

from typing import Optional
from pydantic import BaseModel


class ErrorResponseSchema(BaseModel):
    """Body returned with every non-2xx response"""
    error: bool = True
    code: str
    message: str
    status_code: int


def error_body(code: str, message: str, status_code: int) -> dict:
    """Build an error response body"""
    return ErrorResponseSchema(
        code=code,
        message=message,
        status_code=status_code
    ).model_dump()


def error_code(body: Optional[dict]) -> Optional[str]:
    """Extract the error code from a response body, if it is one"""
    if isinstance(body, dict) and body.get('error'):
        return body.get('code')
    return None
