"""
Ad Distribution Service Routes Registry

Defines service metadata and routes for service discovery.
"""

SERVICE_METADATA = {
    "service_name": "ad_distribution_service",
    "version": "1.0.0",
    "tags": ['advertising', 'distribution', 'marketing', 'v1'],
    "capabilities": ['campaign_distribution', 'campaign_validation', 'connection_status'],
}

ROUTES = [
    {"path": "/health", "methods": ["GET"], "description": "Health check"},
    {"path": "/health/ready", "methods": ["GET"], "description": "Readiness check"},
    {"path": "/health/live", "methods": ["GET"], "description": "Liveness check"},
    {"path": "/api/v1/distribution/distribute", "methods": ["POST"], "description": "Distribute a campaign to platforms"},
    {"path": "/api/v1/distribution/{platform}/status", "methods": ["GET"], "description": "Platform connection status"},
    {"path": "/api/v1/distribution/{platform}/validate", "methods": ["POST"], "description": "Validate a campaign for one platform"},
    {"path": "/api/v1/distribution/{platform}/preview", "methods": ["POST"], "description": "Preview a campaign on one platform"},
]


def get_route_metadata():
    """Get route metadata for service discovery"""
    return {
        "route_count": str(len(ROUTES)),
        "routes": ",".join([r["path"] for r in ROUTES]),
        "api_version": "v1",
        "base_path": "/api/v1/distribution",
    }


__all__ = ["SERVICE_METADATA", "ROUTES", "get_route_metadata"]
