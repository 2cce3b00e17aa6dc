"""
Base Distributor

Shared contract and template for the per-platform distributors.

A distribution attempt runs Validating -> Mapping -> Creating(campaign) ->
Creating(ad group) -> Creating(ad). Validation failures are returned as
data; a failure at a create stage is reported with the stage and the ids
obtained so far. Nothing is retried or rolled back here.
"""

import logging
from abc import ABC, abstractmethod
from datetime import date, datetime, timedelta, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Callable, Dict, List, Optional, Tuple
from urllib.parse import urlparse

from core.service_client_base import ServiceRequestError, ServiceTransportError

from ..mappings.call_to_action import map_call_to_action, normalize_cta
from ..mappings.objectives import OBJECTIVE_MAPPINGS, map_objective, supports_objective
from ..models import (
    BiddingStrategy,
    BudgetType,
    CampaignPreview,
    DistributionErrorCode,
    DistributionStage,
    Platform,
    PlatformCampaignResult,
    PlatformCredentials,
    UnifiedCampaignData,
    UnifiedCreative,
    UnifiedLocation,
    ValidationResult,
)
from ..protocols import (
    DistributionStageError,
    ObjectiveMappingError,
    PlatformApiClientProtocol,
    PlatformTransportError,
    RemoteCreateError,
)

logger = logging.getLogger(__name__)

ClientFactory = Callable[[PlatformCredentials], PlatformApiClientProtocol]


def to_minor_units(amount: Decimal, factor: int = 100) -> int:
    """12.345 -> 1235 cents (factor 100) or micros (factor 1_000_000)"""
    return int((amount * factor).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def is_valid_url(url: str) -> bool:
    parsed = urlparse(url or "")
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


class BaseDistributor(ABC):
    """Validates a unified campaign and creates it on one platform"""

    platform: Platform

    # Budget floors in major currency units
    MIN_DAILY_BUDGET = Decimal("1")
    MIN_LIFETIME_BUDGET = Decimal("1")

    MIN_AGE = 13
    MAX_AGE = 100
    MAX_HEADLINE_LENGTH = 255
    MAX_PRIMARY_TEXT_LENGTH: Optional[int] = None
    REQUIRES_PRIMARY_TEXT = True
    MIN_MEDIA_COUNT = 1

    # How many days in the past a start date may be
    START_DATE_GRACE_DAYS = 1

    REQUIRED_CREDENTIALS: Tuple[str, ...] = ("access_token",)

    PLACEMENT = ""
    CREATIVE_SPECIFICATIONS: Tuple[str, ...] = ()

    def __init__(self, client_factory: ClientFactory):
        self.client_factory = client_factory

    @property
    def display_name(self) -> str:
        return self.platform.display_name

    @property
    def required_credentials(self) -> List[str]:
        return list(self.REQUIRED_CREDENTIALS)

    # ====================
    # Validation
    # ====================

    def validate_campaign_data(
        self, campaign: UnifiedCampaignData, today: Optional[date] = None
    ) -> ValidationResult:
        """
        Check a campaign against this platform's rules.

        Every violated rule is reported; nothing short-circuits. Warnings
        never make a campaign invalid.
        """
        today = today or datetime.now(timezone.utc).date()
        errors: List[str] = []
        warnings: List[str] = []

        if not campaign.name or not campaign.name.strip():
            errors.append("Campaign name is required")

        if not supports_objective(self.platform, campaign.objective):
            errors.append(
                f"Objective '{campaign.objective.value}' is not supported on {self.display_name}"
            )

        self._check_budget(campaign, errors)
        self._check_schedule(campaign, today, errors)
        self._check_targeting(campaign, errors, warnings)
        self._check_creative(campaign.creative, errors)
        self._check_bidding(campaign, errors)
        self._validate_platform(campaign, errors, warnings)

        return ValidationResult(valid=not errors, errors=errors, warnings=warnings)

    def _check_budget(self, campaign: UnifiedCampaignData, errors: List[str]) -> None:
        budget = campaign.budget
        floor = self.MIN_DAILY_BUDGET if budget.type == BudgetType.DAILY else self.MIN_LIFETIME_BUDGET
        if budget.amount < floor:
            errors.append(
                f"{self.display_name} requires a minimum {budget.type.value} budget of "
                f"{floor} {budget.currency}"
            )

    def _check_schedule(self, campaign: UnifiedCampaignData, today: date, errors: List[str]) -> None:
        schedule = campaign.schedule
        earliest = today - timedelta(days=self.START_DATE_GRACE_DAYS)
        if schedule.start_date < earliest:
            errors.append("Start date cannot be in the past")
        if schedule.end_date <= schedule.start_date:
            errors.append("End date must be after start date")

    def _check_targeting(
        self, campaign: UnifiedCampaignData, errors: List[str], warnings: List[str]
    ) -> None:
        targeting = campaign.targeting
        if targeting.age_min < self.MIN_AGE:
            errors.append(f"{self.display_name} requires a minimum age of {self.MIN_AGE}")
        if targeting.age_max > self.MAX_AGE:
            errors.append(f"{self.display_name} supports a maximum age of {self.MAX_AGE}")

        if not targeting.locations:
            errors.append("At least one location is required")
            return

        unresolved = [loc.name for loc in targeting.locations if self.resolve_location(loc) is None]
        if len(unresolved) == len(targeting.locations):
            errors.append(f"None of the locations can be targeted on {self.display_name}")
        elif unresolved:
            warnings.append(
                f"Locations without a {self.display_name} mapping will be skipped: "
                f"{', '.join(unresolved)}"
            )

    def _check_creative(self, creative: UnifiedCreative, errors: List[str]) -> None:
        if not creative.headline.strip():
            errors.append("Headline is required")
        elif len(creative.headline) > self.MAX_HEADLINE_LENGTH:
            errors.append(
                f"Headline must be {self.MAX_HEADLINE_LENGTH} characters or less for {self.display_name}"
            )

        if self.REQUIRES_PRIMARY_TEXT and not creative.primary_text.strip():
            errors.append("Primary text is required")
        if self.MAX_PRIMARY_TEXT_LENGTH and len(creative.primary_text) > self.MAX_PRIMARY_TEXT_LENGTH:
            errors.append(
                f"Primary text must be {self.MAX_PRIMARY_TEXT_LENGTH} characters or less "
                f"for {self.display_name}"
            )

        if len(creative.media) < self.MIN_MEDIA_COUNT:
            errors.append("At least one image or video is required")

        if map_call_to_action(self.platform, creative.call_to_action) is None:
            errors.append(
                f"Call to action '{creative.call_to_action}' is not supported on {self.display_name}"
            )

        if not is_valid_url(creative.destination_url):
            errors.append("A valid destination URL is required")

    def _check_bidding(self, campaign: UnifiedCampaignData, errors: List[str]) -> None:
        bidding = campaign.bidding
        if bidding and bidding.strategy != BiddingStrategy.LOWEST_COST and bidding.cap_amount is None:
            errors.append(f"A cap amount is required for the {bidding.strategy.value} bidding strategy")

    def _validate_platform(
        self, campaign: UnifiedCampaignData, errors: List[str], warnings: List[str]
    ) -> None:
        """Platform-specific rules; override to append to errors/warnings"""

    @abstractmethod
    def resolve_location(self, location: UnifiedLocation) -> Optional[Any]:
        """Platform location id for a unified location, None if unknown"""

    # ====================
    # Distribution
    # ====================

    async def distribute(
        self, campaign: UnifiedCampaignData, credentials: PlatformCredentials
    ) -> PlatformCampaignResult:
        """Validate, map and create the campaign hierarchy on the platform"""
        logger.info(f"Distributing campaign '{campaign.name}' to {self.platform.value}")

        validation = self.validate_campaign_data(campaign)
        if not validation.valid:
            unmapped = not supports_objective(self.platform, campaign.objective)
            logger.warning(
                f"{self.platform.value} validation failed for '{campaign.name}': {validation.errors}"
            )
            return PlatformCampaignResult.failure(
                self.platform,
                DistributionErrorCode.MAPPING_ERROR if unmapped else DistributionErrorCode.VALIDATION_ERROR,
                "Campaign validation failed: " + "; ".join(validation.errors),
                stage=DistributionStage.MAPPING if unmapped else DistributionStage.VALIDATING,
                details={"errors": validation.errors, "warnings": validation.warnings},
            )

        missing = credentials.missing_fields(self.required_credentials)
        if missing:
            logger.warning(f"{self.platform.value} credentials incomplete: missing {missing}")
            return PlatformCampaignResult.failure(
                self.platform,
                DistributionErrorCode.CREDENTIALS_ERROR,
                f"Missing {self.display_name} credentials: {', '.join(missing)}",
                stage=DistributionStage.VALIDATING,
                details={"missing_fields": missing},
            )

        try:
            native_objective = map_objective(self.platform, campaign.objective)
        except ObjectiveMappingError as e:
            return PlatformCampaignResult.failure(
                self.platform,
                DistributionErrorCode.MAPPING_ERROR,
                str(e),
                stage=DistributionStage.MAPPING,
            )

        campaign_payload = self.build_campaign_payload(campaign, native_objective, credentials)
        ad_group_payload = self.build_ad_group_payload(campaign, native_objective, credentials)
        ad_payloads = self.build_ad_payloads(campaign, native_objective, credentials)

        campaign_id: Optional[str] = None
        ad_group_id: Optional[str] = None
        client = self.client_factory(credentials)
        try:
            campaign_id = await self._run_stage(
                DistributionStage.CAMPAIGN, client.create_campaign, campaign_payload
            )
            ad_group_id = await self._run_stage(
                DistributionStage.AD_GROUP, client.create_ad_group, campaign_id, ad_group_payload
            )
            ad_ids = await self._run_stage(
                DistributionStage.AD, client.create_ads, ad_group_id, ad_payloads
            )
            if not ad_ids:
                raise RemoteCreateError("Platform returned no ad identifiers", DistributionStage.AD)
        except DistributionStageError as e:
            logger.error(
                f"{self.platform.value} distribution failed at {e.stage.value} stage: {e.message}"
            )
            created = dict(e.created_resources)
            # ids created inside the failing stage before it broke off
            ad_group_id = ad_group_id or created.pop("ad_group_id", None)
            partial_ad_ids = created.pop("ad_ids", [])
            details: Dict[str, Any] = {}
            if created:
                details["created_resources"] = created
            if e.platform_error_code:
                details["platform_error_code"] = e.platform_error_code
            if e.status_code:
                details["status_code"] = e.status_code
            if isinstance(e, PlatformTransportError):
                # created-but-response-lost cannot be told apart from not created
                details["requires_verification"] = True
            return PlatformCampaignResult.failure(
                self.platform,
                e.error_code,
                e.message,
                stage=e.stage,
                details=details or None,
                campaign_id=campaign_id,
                ad_group_id=ad_group_id,
                ad_ids=partial_ad_ids,
            )
        finally:
            await client.close()

        logger.info(
            f"{self.platform.value} campaign created: campaign={campaign_id} "
            f"ad_group={ad_group_id} ads={ad_ids}"
        )
        return PlatformCampaignResult(
            platform=self.platform,
            success=True,
            campaign_id=campaign_id,
            ad_group_id=ad_group_id,
            ad_ids=ad_ids,
        )

    async def _run_stage(self, stage: DistributionStage, operation, *args):
        """Await one create call, tagging client errors with the stage"""
        try:
            return await operation(*args)
        except ServiceRequestError as e:
            raise RemoteCreateError(
                e.message, stage, platform_error_code=e.error_code, status_code=e.status_code,
                created_resources=e.created_resources,
            ) from e
        except ServiceTransportError as e:
            raise PlatformTransportError(e.message, stage, created_resources=e.created_resources) from e

    # ====================
    # Payload builders
    # ====================

    @abstractmethod
    def build_campaign_payload(
        self, campaign: UnifiedCampaignData, native_objective: str, credentials: PlatformCredentials
    ) -> Dict[str, Any]:
        """Native create-campaign payload"""

    @abstractmethod
    def build_ad_group_payload(
        self, campaign: UnifiedCampaignData, native_objective: str, credentials: PlatformCredentials
    ) -> Dict[str, Any]:
        """Native ad group / ad set payload, including targeting"""

    @abstractmethod
    def build_ad_payloads(
        self, campaign: UnifiedCampaignData, native_objective: str, credentials: PlatformCredentials
    ) -> List[Dict[str, Any]]:
        """Native ad payloads, one per ad to create"""

    def resolve_locations(self, campaign: UnifiedCampaignData) -> List[Any]:
        ids = []
        for location in campaign.targeting.locations:
            location_id = self.resolve_location(location)
            if location_id is not None and location_id not in ids:
                ids.append(location_id)
        return ids

    def native_call_to_action(self, creative: UnifiedCreative) -> str:
        return map_call_to_action(self.platform, creative.call_to_action) or normalize_cta(
            creative.call_to_action
        )

    # ====================
    # Preview / recommendations
    # ====================

    def ad_text(self, creative: UnifiedCreative) -> str:
        return creative.headline

    @property
    def ad_text_limit(self) -> int:
        return self.MAX_HEADLINE_LENGTH

    def preview_campaign(self, campaign: UnifiedCampaignData) -> CampaignPreview:
        """Describe how the campaign would render on this platform"""
        creative = campaign.creative
        text = self.ad_text(creative)
        return CampaignPreview(
            platform=self.platform,
            native_objective=OBJECTIVE_MAPPINGS[self.platform].get(campaign.objective),
            placement=self.PLACEMENT,
            media_kind=creative.media[0].type if creative.media else None,
            ad_text=text,
            ad_text_length=len(text),
            ad_text_limit=self.ad_text_limit,
            call_to_action=self.native_call_to_action(creative),
            landing_url=creative.destination_url,
            specifications=list(self.CREATIVE_SPECIFICATIONS),
            recommendations=self.get_campaign_recommendations(campaign),
        )

    def get_campaign_recommendations(self, campaign: UnifiedCampaignData) -> List[str]:
        recommendations = []
        budget = campaign.budget
        floor = self.MIN_DAILY_BUDGET if budget.type == BudgetType.DAILY else self.MIN_LIFETIME_BUDGET
        if budget.amount < floor * 2:
            recommendations.append(
                f"Budget is close to the {self.display_name} minimum; "
                f"consider at least {floor * 2} {budget.currency} for better delivery"
            )
        if not campaign.targeting.interests:
            recommendations.append("Add interests to help the platform find relevant audiences")
        return recommendations


__all__ = ["BaseDistributor", "ClientFactory", "to_minor_units", "is_valid_url"]
