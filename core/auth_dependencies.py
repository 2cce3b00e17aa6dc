"""
FastAPI Authentication Dependencies for Microservices

Header-based caller identity. The gateway in front of the services verifies
the session and forwards the user id; this module only trusts that fact.
"""

from fastapi import Header, HTTPException, status, Request
from typing import Optional
import logging
import os

logger = logging.getLogger(__name__)

# Internal service authentication
INTERNAL_SERVICE_SECRET = os.getenv(
    "INTERNAL_SERVICE_SECRET",
    "dev-internal-secret-change-in-production"
)

INTERNAL_SERVICE_USER = "internal-service"


async def require_auth_or_internal_service(
    request: Request,
    user_id: Optional[str] = Header(None, alias="user-id"),
    x_user_id: Optional[str] = Header(None, alias="X-User-Id"),
    x_internal_service: Optional[str] = Header(None, alias="X-Internal-Service"),
    x_internal_service_secret: Optional[str] = Header(None, alias="X-Internal-Service-Secret"),
) -> str:
    """
    Require either an authenticated user or a trusted internal service.

    Priority:
    1. Internal service (X-Internal-Service + X-Internal-Service-Secret)
    2. User id (user-id or X-User-Id)

    Returns:
        The user id, or "internal-service"

    Raises:
        HTTPException 401: no verified caller identity
    """
    if x_internal_service == "true" and x_internal_service_secret:
        if x_internal_service_secret == INTERNAL_SERVICE_SECRET:
            logger.debug(f"Internal service request to {request.url.path}")
            return INTERNAL_SERVICE_USER
        client_host = request.client.host if request.client else "unknown"
        logger.warning(f"Invalid internal service secret from {client_host}")

    user_id_value = user_id or x_user_id
    if user_id_value:
        return user_id_value

    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="User authentication required"
    )


def is_internal_service_request(user_id: str) -> bool:
    """True when the caller authenticated as an internal service"""
    return user_id == INTERNAL_SERVICE_USER


__all__ = [
    "require_auth_or_internal_service",
    "is_internal_service_request",
    "INTERNAL_SERVICE_USER",
]
