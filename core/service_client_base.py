"""
Base Service Client for Remote HTTP APIs

Base class for clients that talk to remote JSON APIs (advertising platform
marketing APIs). Handles HTTP client lifecycle, default headers, timeouts and
translation of httpx failures into a small error hierarchy.
"""

import httpx
import logging
from typing import Optional, Dict, Any
from abc import ABC

logger = logging.getLogger(__name__)


class ServiceClientError(Exception):
    """Base exception for remote API client errors"""

    def __init__(self, message: str, service_name: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.service_name = service_name
        # Objects the failing client call had already created remotely
        self.created_resources: Dict[str, Any] = {}


class ServiceRequestError(ServiceClientError):
    """The remote API answered but rejected the request"""

    def __init__(
        self,
        message: str,
        service_name: Optional[str] = None,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
    ):
        super().__init__(message, service_name)
        self.status_code = status_code
        self.error_code = error_code


class ServiceTransportError(ServiceClientError):
    """Network failure or timeout; the remote outcome is unknown"""
    pass


class BaseServiceClient(ABC):
    """
    Remote API client base class

    Subclasses set ``service_name`` and usually override
    ``_build_default_headers`` to add authentication, and
    ``_extract_error`` to read the remote API's error envelope.

    Example:
        class GraphClient(BaseServiceClient):
            service_name = "facebook_graph"

            async def create_campaign(self, account: str, payload: dict):
                return await self.request_json("POST", f"/{account}/campaigns", json=payload)
    """

    service_name: str = None

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            base_url: API base URL including any version segment
            timeout: per-request timeout in seconds
            headers: extra headers merged over the defaults
            transport: optional httpx transport (tests use httpx.MockTransport)
        """
        if not self.service_name:
            raise ValueError(f"{self.__class__.__name__} must define 'service_name'")

        self.base_url = base_url.rstrip('/')

        default_headers = self._build_default_headers()
        if headers:
            default_headers.update(headers)

        self.client = httpx.AsyncClient(
            timeout=timeout,
            headers=default_headers,
            transport=transport,
        )

        logger.debug(f"Initialized {self.service_name} client: {self.base_url}")

    def _build_default_headers(self) -> Dict[str, str]:
        """Headers sent with every request"""
        return {
            "Content-Type": "application/json",
            "User-Agent": f"ad-distribution-client/{self.service_name}",
        }

    def _extract_error(self, response: httpx.Response) -> Dict[str, Any]:
        """
        Read an error description out of a failed response.

        Returns:
            dict with optional ``message`` and ``code`` keys
        """
        try:
            body = response.json()
        except ValueError:
            return {"message": response.text[:500] or response.reason_phrase}
        if isinstance(body, dict):
            error = body.get("error")
            if isinstance(error, dict):
                return {"message": error.get("message"), "code": error.get("code")}
            if isinstance(error, str):
                return {"message": error}
            return {"message": body.get("message")}
        return {"message": str(body)[:500]}

    async def close(self):
        """Close the HTTP client"""
        await self.client.aclose()
        logger.debug(f"Closed {self.service_name} client")

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    # ========================================
    # HTTP helpers
    # ========================================

    async def request(
        self,
        method: str,
        path: str,
        json: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        """Send a request, translating network failures into ServiceTransportError"""
        url = f"{self.base_url}{path}"
        try:
            return await self.client.request(method, url, json=json, params=params, headers=headers)
        except httpx.TimeoutException as e:
            logger.warning(f"{self.service_name} request timed out: {method} {path}")
            raise ServiceTransportError(
                f"{self.service_name} request timed out: {method} {path}",
                service_name=self.service_name,
            ) from e
        except httpx.TransportError as e:
            logger.warning(f"{self.service_name} transport error on {method} {path}: {type(e).__name__}")
            raise ServiceTransportError(
                f"{self.service_name} transport error: {type(e).__name__}",
                service_name=self.service_name,
            ) from e

    async def request_json(
        self,
        method: str,
        path: str,
        json: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        """
        Send a request and decode a JSON object body.

        Raises:
            ServiceRequestError: non-2xx status
            ServiceTransportError: network failure or timeout
        """
        response = await self.request(method, path, json=json, params=params, headers=headers)

        if response.is_error:
            error = self._extract_error(response)
            message = error.get("message") or f"HTTP {response.status_code}"
            raise ServiceRequestError(
                message,
                service_name=self.service_name,
                status_code=response.status_code,
                error_code=str(error["code"]) if error.get("code") is not None else None,
            )

        if not response.content:
            return {}
        try:
            data = response.json()
        except ValueError as e:
            raise ServiceRequestError(
                "Response body is not valid JSON",
                service_name=self.service_name,
                status_code=response.status_code,
            ) from e
        return data if isinstance(data, dict) else {"data": data}

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """GET returning decoded JSON"""
        return await self.request_json("GET", path, params=params)

    async def post(self, path: str, json: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """POST returning decoded JSON"""
        return await self.request_json("POST", path, json=json)


__all__ = [
    "BaseServiceClient",
    "ServiceClientError",
    "ServiceRequestError",
    "ServiceTransportError",
]
