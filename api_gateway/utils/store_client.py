"""
Store Service HTTP Client
Relays client requests to the store service API

Single shared AsyncClient initialized at app startup, with pool limits
and a pool timeout so exhaustion fails fast instead of queueing forever.
"""

from dataclasses import dataclass
from typing import Optional

import httpx
import structlog

from api_gateway.config import Settings
from api_gateway.exceptions import RelayCause, RelayFailure
from shared.schemas import error_code

logger = structlog.get_logger(__name__)

ACCOUNTS_ENDPOINT = "/api/v1/accounts"
FILES_ENDPOINT = "/api/v1/files"


@dataclass(frozen=True)
class RelayedResponse:
    """A successful store response, passed back to the caller as is"""
    status_code: int
    content: bytes
    content_type: Optional[str]


class StoreServiceClient:
    """
    HTTP client for store service operations.

    Lifecycle:
        - Call start() during app startup (FastAPI lifespan)
        - Call stop() during app shutdown
        - If not initialized, falls back to per-request client
    """

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings
        self.base_url = settings.store_service_url.rstrip('/')
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _build_client(self) -> httpx.AsyncClient:
        limits = httpx.Limits(
            max_connections=self.settings.max_connections,
            max_keepalive_connections=self.settings.max_keepalive,
            keepalive_expiry=self.settings.keepalive_expiry
        )
        timeout = httpx.Timeout(
            connect=self.settings.connect_timeout,
            read=self.settings.read_timeout,
            write=self.settings.write_timeout,
            pool=self.settings.pool_timeout
        )
        return httpx.AsyncClient(
            base_url=self.base_url,
            limits=limits,
            timeout=timeout,
            transport=self._transport
        )

    async def start(self):
        """Initialize the shared HTTP client"""
        if self._client is not None:
            logger.warning("StoreServiceClient already started")
            return

        self._client = self._build_client()
        logger.info(
            "StoreServiceClient started",
            base_url=self.base_url,
            max_connections=self.settings.max_connections,
            pool_timeout=self.settings.pool_timeout
        )

    async def stop(self):
        """Close the HTTP client and release resources"""
        if self._client:
            await self._client.aclose()
            self._client = None
            logger.info("StoreServiceClient stopped")

    @property
    def started(self) -> bool:
        return self._client is not None

    async def _send(self, method: str, endpoint: str, **kwargs) -> httpx.Response:
        if self._client:
            return await self._client.request(method, endpoint, **kwargs)

        logger.warning("StoreServiceClient not initialized, using per-request client")
        async with self._build_client() as client:
            return await client.request(method, endpoint, **kwargs)

    async def relay(
        self,
        method: str,
        endpoint: str,
        content: bytes,
        content_type: Optional[str] = None
    ) -> RelayedResponse:
        """
        Forward a request body verbatim and return the store's response

        Raises:
            RelayFailure: on transport errors, non-2xx responses and
                responses that are not JSON
        """
        headers = {"Content-Type": content_type} if content_type else {}

        try:
            response = await self._send(method, endpoint, content=content, headers=headers)
        except httpx.PoolTimeout as e:
            raise RelayFailure(RelayCause.TRANSPORT, "connection pool exhausted", endpoint) from e
        except httpx.RequestError as e:
            raise RelayFailure(
                RelayCause.TRANSPORT,
                f"{type(e).__name__}: {e}",
                endpoint
            ) from e

        if not response.is_success:
            raise RelayFailure(
                RelayCause.UPSTREAM_STATUS,
                response.text[:500],
                endpoint,
                upstream_status=response.status_code,
                upstream_code=_upstream_error_code(response)
            )

        try:
            response.json()
        except ValueError as e:
            raise RelayFailure(
                RelayCause.INVALID_RESPONSE,
                "store returned a non-JSON body",
                endpoint,
                upstream_status=response.status_code
            ) from e

        return RelayedResponse(
            status_code=response.status_code,
            content=response.content,
            content_type=response.headers.get("content-type")
        )

    async def relay_create_account(self, content: bytes, content_type: Optional[str] = None) -> RelayedResponse:
        """Forward a create-account request to the store"""
        return await self.relay("POST", ACCOUNTS_ENDPOINT, content, content_type)

    async def relay_create_file_reference(self, content: bytes, content_type: Optional[str] = None) -> RelayedResponse:
        """Forward a create-file-reference request to the store"""
        return await self.relay("POST", FILES_ENDPOINT, content, content_type)

    async def health_check(self) -> str:
        """Check if store service is healthy"""
        try:
            response = await self._send("GET", "/health")
            if response.status_code == 200:
                return "healthy"
            return "unhealthy"
        except httpx.HTTPError:
            return "unreachable"


def _upstream_error_code(response: httpx.Response) -> Optional[str]:
    try:
        return error_code(response.json())
    except ValueError:
        return None
