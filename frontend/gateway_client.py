"""
Gateway HTTP client used by the frontend
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import requests
import structlog

from shared.schemas import error_code

logger = structlog.get_logger(__name__)


@dataclass
class GatewayResult:
    """Outcome of one call through the gateway"""
    ok: bool
    status_code: Optional[int]
    data: Dict[str, Any] = field(default_factory=dict)

    @property
    def error_code(self) -> Optional[str]:
        return error_code(self.data)


class GatewayClient:
    """Synchronous client for the gateway's create operations"""

    def __init__(self, base_url: str, timeout: float = 10.0):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = requests.Session()

    def _post(self, endpoint: str, payload: Dict[str, Any]) -> GatewayResult:
        url = f"{self.base_url}{endpoint}"
        try:
            response = self.session.post(url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error("Gateway unreachable", url=url, error=str(e))
            return GatewayResult(ok=False, status_code=None)

        try:
            data = response.json()
        except ValueError:
            data = {}

        if not response.ok:
            logger.warning("Gateway request failed", url=url, status_code=response.status_code)
        return GatewayResult(ok=response.ok, status_code=response.status_code, data=data)

    def create_account(self, email: str, credential: str) -> GatewayResult:
        return self._post("/api/v1/accounts", {"email": email, "credential": credential})

    def create_file_reference(self, display_name: str, owner_id: str) -> GatewayResult:
        return self._post("/api/v1/files", {"display_name": display_name, "owner_id": owner_id})
