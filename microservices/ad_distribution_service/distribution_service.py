"""
Ad Distribution Service Business Logic

Fans one unified campaign out to the requested platform distributors,
isolates their failures, and aggregates the per-platform results.
"""

import asyncio
import logging
from typing import Dict, List, Optional

from .models import (
    CampaignPreview,
    ConnectionStatusResponse,
    DistributionErrorCode,
    DistributionResult,
    Platform,
    PlatformCampaignResult,
    PlatformCredentials,
    UnifiedCampaignData,
    ValidationResult,
)
from .protocols import (
    CredentialStoreProtocol,
    InvalidDistributionRequestError,
    UnsupportedPlatformError,
)
from .distributors.registry import DistributorRegistry

logger = logging.getLogger(__name__)


def aggregate_results(results: List[PlatformCampaignResult]) -> DistributionResult:
    """
    Merge per-platform results into one summary.

    Pure; result order is preserved. Duplicate platform tags are rejected by
    DistributionResult itself.
    """
    successful = sum(1 for result in results if result.success)
    return DistributionResult(
        total_platforms=len(results),
        successful=successful,
        failed=len(results) - successful,
        results=list(results),
    )


class AdDistributionService:
    """Distribution orchestrator"""

    def __init__(
        self,
        registry: DistributorRegistry,
        credential_store: Optional[CredentialStoreProtocol] = None,
    ):
        self.registry = registry
        self.credential_store = credential_store

    # ====================
    # Distribution
    # ====================

    async def distribute_to_all(
        self,
        campaign: UnifiedCampaignData,
        credentials_by_platform: Dict[Platform, PlatformCredentials],
    ) -> DistributionResult:
        """
        Distribute a campaign to every platform in ``credentials_by_platform``.

        Platforms run concurrently; results follow the order the platforms
        were supplied in. One platform failing never stops or alters the
        others.
        """
        if not credentials_by_platform:
            raise InvalidDistributionRequestError("At least one platform with credentials is required")

        platforms = list(credentials_by_platform)
        logger.info(
            f"Distributing campaign '{campaign.name}' to {len(platforms)} platform(s): "
            f"{', '.join(p.value for p in platforms)}"
        )

        results = await asyncio.gather(*[
            self._distribute_one(platform, campaign, credentials_by_platform[platform])
            for platform in platforms
        ])

        distribution = aggregate_results(results)
        logger.info(
            f"Distribution of '{campaign.name}' finished: "
            f"{distribution.successful} succeeded, {distribution.failed} failed"
        )
        return distribution

    async def _distribute_one(
        self,
        platform: Platform,
        campaign: UnifiedCampaignData,
        credentials: PlatformCredentials,
    ) -> PlatformCampaignResult:
        """Run one distributor; anything it raises becomes a failure result"""
        try:
            distributor = self.registry.get(platform)
        except UnsupportedPlatformError as e:
            logger.warning(str(e))
            return PlatformCampaignResult.failure(
                platform, DistributionErrorCode.UNSUPPORTED_PLATFORM, str(e)
            )

        try:
            # each distributor gets its own copy
            result = await distributor.distribute(campaign.model_copy(deep=True), credentials)
        except Exception as e:
            logger.exception(f"Unexpected error distributing to {platform.value}: {type(e).__name__}")
            return PlatformCampaignResult.failure(
                platform,
                DistributionErrorCode.INTERNAL_ERROR,
                f"Unexpected error while distributing to {platform.display_name}",
                details={"error_type": type(e).__name__},
            )

        if result.platform != platform:
            logger.error(f"Distributor for {platform.value} reported platform {result.platform.value}")
            return PlatformCampaignResult.failure(
                platform,
                DistributionErrorCode.INTERNAL_ERROR,
                f"Distributor for {platform.display_name} returned a mismatched result",
            )
        return result

    # ====================
    # Single-platform helpers
    # ====================

    def validate_campaign(self, platform: Platform, campaign: UnifiedCampaignData) -> ValidationResult:
        return self.registry.get(platform).validate_campaign_data(campaign)

    def preview_campaign(self, platform: Platform, campaign: UnifiedCampaignData) -> CampaignPreview:
        return self.registry.get(platform).preview_campaign(campaign)

    async def get_connection_status(
        self, user_id: Optional[str], platform: Platform
    ) -> ConnectionStatusResponse:
        """
        Report whether usable credentials for a platform are on file.

        Connected means an access token plus every account identifier the
        platform's distributor requires.
        """
        distributor = self.registry.get(platform)
        not_connected = ConnectionStatusResponse(
            platform=platform,
            connected=False,
            message=f"{platform.display_name} account not connected. Please connect your account first.",
        )

        if self.credential_store is None:
            return not_connected

        credentials = await self.credential_store.get_credentials(user_id, platform)
        if credentials is None:
            return not_connected

        missing = credentials.missing_fields(distributor.required_credentials)
        if missing:
            return ConnectionStatusResponse(
                platform=platform,
                connected=False,
                message=f"{platform.display_name} account is missing: {', '.join(missing)}",
            )

        return ConnectionStatusResponse(
            platform=platform,
            connected=True,
            message=f"{platform.display_name} account connected",
        )


__all__ = ["AdDistributionService", "aggregate_results"]
