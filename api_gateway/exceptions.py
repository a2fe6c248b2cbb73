"""
Relay failures

Every failure to complete a relayed call becomes a RelayFailure. The cause
is kept for logging; callers only ever see the stable relay_failure body.
"""

from enum import Enum
from typing import Optional


class RelayCause(str, Enum):
    """Why a relayed call failed"""
    TRANSPORT = "transport"
    UPSTREAM_STATUS = "upstream_status"
    INVALID_RESPONSE = "invalid_response"


class RelayFailure(Exception):
    """A relayed call to the store did not succeed"""
    code = "relay_failure"
    public_message = "The request could not be completed"

    def __init__(
        self,
        cause: RelayCause,
        detail: str,
        endpoint: str,
        upstream_status: Optional[int] = None,
        upstream_code: Optional[str] = None
    ):
        super().__init__(f"{cause.value} on {endpoint}: {detail}")
        self.cause = cause
        self.detail = detail
        self.endpoint = endpoint
        self.upstream_status = upstream_status
        self.upstream_code = upstream_code

    def to_log_context(self) -> dict:
        """Structured cause for log lines"""
        return {
            "cause": self.cause.value,
            "detail": self.detail,
            "endpoint": self.endpoint,
            "upstream_status": self.upstream_status,
            "upstream_code": self.upstream_code,
        }
