"""
Ad Distribution Service Protocols

Defines interfaces for dependency injection and testing, and the
exception taxonomy shared by distributors, clients and the API layer.
"""

from typing import Any, Dict, List, Optional, Protocol

from .models import (
    CampaignObjective,
    CampaignPreview,
    DistributionErrorCode,
    DistributionStage,
    Platform,
    PlatformCampaignResult,
    PlatformCredentials,
    UnifiedCampaignData,
    ValidationResult,
)


# ====================
# Platform API Client Protocol
# ====================


class PlatformApiClientProtocol(Protocol):
    """Creates the three-level hierarchy on one advertising platform"""

    async def create_campaign(self, payload: Dict[str, Any]) -> str:
        """Create the top-level campaign, return its platform id"""
        ...

    async def create_ad_group(self, campaign_id: str, payload: Dict[str, Any]) -> str:
        """Create the ad group / ad set under a campaign, return its id"""
        ...

    async def create_ads(self, ad_group_id: str, payloads: List[Dict[str, Any]]) -> List[str]:
        """Create one or more ads under an ad group, return their ids"""
        ...

    async def close(self) -> None:
        """Release transport resources"""
        ...


# ====================
# Distributor Protocol
# ====================


class DistributorProtocol(Protocol):
    """Per-platform validation and distribution contract"""

    platform: Platform

    @property
    def required_credentials(self) -> List[str]:
        """Credential fields the platform needs"""
        ...

    def validate_campaign_data(self, campaign: UnifiedCampaignData) -> ValidationResult:
        """Check a campaign against this platform's rules (no I/O)"""
        ...

    async def distribute(
        self, campaign: UnifiedCampaignData, credentials: PlatformCredentials
    ) -> PlatformCampaignResult:
        """Validate, map and create the campaign hierarchy on the platform"""
        ...

    def preview_campaign(self, campaign: UnifiedCampaignData) -> CampaignPreview:
        """Describe how the campaign would render on the platform"""
        ...

    def get_campaign_recommendations(self, campaign: UnifiedCampaignData) -> List[str]:
        """Platform-specific tips for the campaign"""
        ...


# ====================
# Credential Store Protocol
# ====================


class CredentialStoreProtocol(Protocol):
    """Supplies per-user, per-platform access material"""

    async def get_credentials(
        self, user_id: Optional[str], platform: Platform
    ) -> Optional[PlatformCredentials]:
        """Get credentials on file for a user (None = service-wide account)"""
        ...

    async def save_credentials(
        self, user_id: Optional[str], platform: Platform, credentials: PlatformCredentials
    ) -> None:
        """Store credentials for a user"""
        ...

    async def remove_credentials(self, user_id: Optional[str], platform: Platform) -> bool:
        """Forget credentials, return whether any were stored"""
        ...


# ====================
# Custom Exceptions
# ====================


class AdDistributionServiceError(Exception):
    """Base exception for ad distribution service errors"""
    pass


class InvalidDistributionRequestError(AdDistributionServiceError):
    """Raised when a distribution request is structurally incomplete"""
    pass


class UnsupportedPlatformError(AdDistributionServiceError):
    """Raised when no distributor is registered for a platform"""

    def __init__(self, platform: Platform):
        super().__init__(f"No distributor registered for platform: {platform.value}")
        self.platform = platform


class ObjectiveMappingError(AdDistributionServiceError):
    """Raised when an objective has no native equivalent on a platform"""

    def __init__(self, platform: Platform, objective: CampaignObjective):
        super().__init__(
            f"Objective '{objective.value}' is not supported on {platform.display_name}"
        )
        self.platform = platform
        self.objective = objective


class DistributionStageError(AdDistributionServiceError):
    """A create call failed at one stage of the hierarchy"""

    error_code = DistributionErrorCode.INTERNAL_ERROR

    def __init__(
        self,
        message: str,
        stage: DistributionStage,
        platform_error_code: Optional[str] = None,
        status_code: Optional[int] = None,
        created_resources: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.stage = stage
        self.platform_error_code = platform_error_code
        self.status_code = status_code
        self.created_resources = dict(created_resources or {})


class RemoteCreateError(DistributionStageError):
    """The platform API rejected a create call"""

    error_code = DistributionErrorCode.REMOTE_CREATE_ERROR


class PlatformTransportError(DistributionStageError):
    """Network failure or timeout; the remote state is unknown"""

    error_code = DistributionErrorCode.TRANSPORT_ERROR


__all__ = [
    "PlatformApiClientProtocol",
    "DistributorProtocol",
    "CredentialStoreProtocol",
    "AdDistributionServiceError",
    "InvalidDistributionRequestError",
    "UnsupportedPlatformError",
    "ObjectiveMappingError",
    "DistributionStageError",
    "RemoteCreateError",
    "PlatformTransportError",
]
