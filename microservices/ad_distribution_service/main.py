"""
Ad Distribution Service Main Application

FastAPI application for distributing campaigns to advertising platforms.
Port: 8260
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from core.auth_dependencies import is_internal_service_request, require_auth_or_internal_service
from core.config import get_settings

from .factory import AdDistributionServiceFactory
from .models import (
    CampaignPreview,
    CampaignRequest,
    ConnectionStatusResponse,
    DistributeRequest,
    DistributionResult,
    HealthResponse,
    LivenessResponse,
    Platform,
    ReadinessResponse,
    ValidationResult,
)
from .protocols import InvalidDistributionRequestError, UnsupportedPlatformError
from .routes_registry import SERVICE_METADATA, get_route_metadata

settings = get_settings()

# Configure logging
log_handlers = [logging.StreamHandler()]
if settings.logging.log_file:
    log_handlers.append(logging.FileHandler(settings.logging.log_file))
logging.basicConfig(
    level=settings.logging.level,
    format=settings.logging.log_format,
    handlers=log_handlers,
)
logger = logging.getLogger(__name__)

# Service configuration
SERVICE_NAME = settings.service_name
SERVICE_PORT = settings.service_port
SERVICE_VERSION = settings.service_version

# Track startup time for uptime calculation
startup_time = time.time()

# Global factory instance
factory: Optional[AdDistributionServiceFactory] = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    global factory

    logger.info(f"Starting {SERVICE_NAME} on port {SERVICE_PORT}")

    factory = AdDistributionServiceFactory(settings)
    await factory.initialize()

    yield

    logger.info(f"Shutting down {SERVICE_NAME}")
    await factory.close()


# Create FastAPI application
app = FastAPI(
    title="Ad Distribution Service",
    description="Distributes one unified campaign to Google Ads, Facebook, TikTok and LinkedIn",
    version=SERVICE_VERSION,
    lifespan=lifespan,
)


# ====================
# Exception Handlers
# ====================


@app.exception_handler(InvalidDistributionRequestError)
async def invalid_request_handler(request: Request, exc: InvalidDistributionRequestError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": str(exc)},
    )


@app.exception_handler(UnsupportedPlatformError)
async def unsupported_platform_handler(request: Request, exc: UnsupportedPlatformError):
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": str(exc)},
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Structurally invalid body; report locations and messages, never the input"""
    errors = [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", ""), "type": error.get("type", "")}
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid request", "errors": errors},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Catch-all; the response never carries exception text, which may hold credentials"""
    logger.exception(f"Unhandled exception on {request.method} {request.url.path}: {type(exc).__name__}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


# ====================
# Dependencies
# ====================


def get_service():
    """Get ad distribution service from factory"""
    if factory is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Service not initialized",
        )
    return factory.service


# ====================
# Health Endpoints
# ====================


@app.get("/api/v1/distribution/health")
@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """Health check endpoint"""
    dependencies = {}
    if factory:
        for platform in factory.registry.platforms:
            dependencies[platform.value] = "registered"

    return HealthResponse(
        status="healthy",
        service=SERVICE_NAME,
        port=SERVICE_PORT,
        version=SERVICE_VERSION,
        dependencies=dependencies,
    )


@app.get("/health/ready", response_model=ReadinessResponse, tags=["Health"])
async def readiness_check():
    """Readiness check endpoint"""
    checks = {}
    details = {}

    if factory:
        registered = factory.registry.platforms
        checks["distributors"] = len(registered) == len(Platform)
        details["distributors"] = ", ".join(p.value for p in registered)
        checks["credential_store"] = True
        details["credential_store"] = type(factory.credential_store).__name__
    else:
        checks["factory"] = False
        details["factory"] = "Factory not initialized"

    return ReadinessResponse(
        ready=bool(checks) and all(checks.values()),
        checks=checks,
        details=details,
    )


@app.get("/health/live", response_model=LivenessResponse, tags=["Health"])
async def liveness_check():
    """Liveness check endpoint"""
    return LivenessResponse(
        alive=True,
        uptime_seconds=time.time() - startup_time,
    )


@app.get("/api/v1/distribution/info", tags=["Health"])
async def service_info():
    """Service metadata and route summary"""
    return {**SERVICE_METADATA, **get_route_metadata()}


# ====================
# Distribution Endpoints
# ====================


@app.post(
    "/api/v1/distribution/distribute",
    response_model=DistributionResult,
    tags=["Distribution"],
)
async def distribute_campaign(
    request: DistributeRequest,
    service=Depends(get_service),
    user_id: str = Depends(require_auth_or_internal_service),
):
    """
    Distribute one campaign to every platform listed in ``credentials``.

    Per-platform validation failures come back inside the results; only a
    missing campaign or missing credentials is rejected outright.
    """
    if request.campaign_data is None or not request.credentials:
        raise InvalidDistributionRequestError("campaignData and credentials are required")

    logger.info(
        f"User {user_id} distributing '{request.campaign_data.name}' to "
        f"{', '.join(p.value for p in request.credentials)}"
    )
    return await service.distribute_to_all(request.campaign_data, request.credentials)


@app.get(
    "/api/v1/distribution/{platform}/status",
    response_model=ConnectionStatusResponse,
    tags=["Distribution"],
)
async def connection_status(
    platform: Platform,
    service=Depends(get_service),
    user_id: str = Depends(require_auth_or_internal_service),
):
    """Whether usable credentials for the platform are on file"""
    owner = None if is_internal_service_request(user_id) else user_id
    return await service.get_connection_status(owner, platform)


@app.post(
    "/api/v1/distribution/{platform}/validate",
    response_model=ValidationResult,
    tags=["Distribution"],
)
async def validate_campaign(
    platform: Platform,
    request: CampaignRequest,
    service=Depends(get_service),
    user_id: str = Depends(require_auth_or_internal_service),
):
    """Validate a campaign against one platform's rules"""
    return service.validate_campaign(platform, request.campaign_data)


@app.post(
    "/api/v1/distribution/{platform}/preview",
    response_model=CampaignPreview,
    tags=["Distribution"],
)
async def preview_campaign(
    platform: Platform,
    request: CampaignRequest,
    service=Depends(get_service),
    user_id: str = Depends(require_auth_or_internal_service),
):
    """Preview how a campaign would render on one platform"""
    return service.preview_campaign(platform, request.campaign_data)


def main():
    """Run the service"""
    import uvicorn

    uvicorn.run(
        "microservices.ad_distribution_service.main:app",
        host="0.0.0.0",
        port=SERVICE_PORT,
        log_level=settings.logging.log_level.lower(),
    )


if __name__ == "__main__":
    main()
