"""
Ad Distribution Service Data Contract

Test data factories for the Ad Distribution Service. The models themselves
live in microservices.ad_distribution_service.models and are re-exported
here so every test layer builds its data the same way.

All tests SHOULD use these factories instead of hand-built dictionaries.
"""

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from typing import Any, Dict, List, Optional
from uuid import uuid4

from microservices.ad_distribution_service.models import (
    BiddingStrategy,
    BudgetType,
    CampaignBidding,
    CampaignBudget,
    CampaignObjective,
    CampaignSchedule,
    DistributionErrorCode,
    DistributionStage,
    FacebookTargetingExtension,
    Gender,
    GoogleTargetingExtension,
    LinkedInTargetingExtension,
    LocationType,
    MediaType,
    Platform,
    PlatformCampaignResult,
    PlatformCredentials,
    TikTokTargetingExtension,
    UnifiedCampaignData,
    UnifiedCreative,
    UnifiedLocation,
    UnifiedMedia,
    UnifiedTargeting,
)


class AdDistributionTestDataFactory:
    """Factory for generating test data for ad distribution tests

    Usage:
        factory = AdDistributionTestDataFactory()
        campaign = factory.make_campaign()
        credentials = factory.make_credentials(Platform.GOOGLE)
    """

    @staticmethod
    def make_id(prefix: str = "id") -> str:
        """Generate a unique ID with prefix"""
        return f"{prefix}_{uuid4().hex[:16]}"

    @staticmethod
    def make_user_id() -> str:
        return f"usr_{uuid4().hex[:16]}"

    @staticmethod
    def today() -> date:
        return datetime.now(timezone.utc).date()

    # ====================
    # Campaign pieces
    # ====================

    @staticmethod
    def make_location(
        name: str = "United States",
        code: Optional[str] = "US",
        type: LocationType = LocationType.COUNTRY,
        **overrides,
    ) -> UnifiedLocation:
        return UnifiedLocation(type=type, name=name, code=code, **overrides)

    @staticmethod
    def make_image(url: str = "https://cdn.example.com/ad-1200x628.jpg") -> UnifiedMedia:
        return UnifiedMedia(url=url, type=MediaType.IMAGE, width=1200, height=628)

    @staticmethod
    def make_video(url: str = "https://cdn.example.com/ad.mp4") -> UnifiedMedia:
        return UnifiedMedia(
            url=url,
            type=MediaType.VIDEO,
            width=1080,
            height=1920,
            duration=15,
            thumbnail="https://cdn.example.com/ad-thumb.jpg",
        )

    @staticmethod
    def make_targeting(**overrides) -> UnifiedTargeting:
        data: Dict[str, Any] = {
            "age_min": 18,
            "age_max": 65,
            "genders": [Gender.ALL],
            "locations": [AdDistributionTestDataFactory.make_location()],
        }
        data.update(overrides)
        return UnifiedTargeting(**data)

    @staticmethod
    def make_creative(**overrides) -> UnifiedCreative:
        data: Dict[str, Any] = {
            "headline": "Try our new product",
            "primary_text": "The best product for your daily routine.",
            "description": "Free shipping on every order",
            "call_to_action": "Learn More",
            "destination_url": "https://example.com",
            "media": [AdDistributionTestDataFactory.make_image()],
        }
        data.update(overrides)
        return UnifiedCreative(**data)

    @staticmethod
    def make_budget(
        amount: str = "20",
        type: BudgetType = BudgetType.DAILY,
        currency: str = "USD",
    ) -> CampaignBudget:
        return CampaignBudget(type=type, amount=Decimal(amount), currency=currency)

    @staticmethod
    def make_schedule(start_in_days: int = 7, end_in_days: int = 14) -> CampaignSchedule:
        today = AdDistributionTestDataFactory.today()
        return CampaignSchedule(
            start_date=today + timedelta(days=start_in_days),
            end_date=today + timedelta(days=end_in_days),
        )

    # ====================
    # Campaign
    # ====================

    @staticmethod
    def make_campaign(**overrides) -> UnifiedCampaignData:
        """Minimal campaign valid on every platform"""
        factory = AdDistributionTestDataFactory
        data: Dict[str, Any] = {
            "name": "Test",
            "objective": CampaignObjective.TRAFFIC,
            "budget": factory.make_budget(),
            "schedule": factory.make_schedule(),
            "targeting": factory.make_targeting(),
            "creative": factory.make_creative(),
        }
        data.update(overrides)
        return UnifiedCampaignData(**data)

    @staticmethod
    def make_full_campaign(**overrides) -> UnifiedCampaignData:
        """Campaign using every optional dimension, including all extensions"""
        factory = AdDistributionTestDataFactory
        data: Dict[str, Any] = {
            "name": "Spring Launch",
            "objective": CampaignObjective.CONVERSIONS,
            "budget": factory.make_budget("150", BudgetType.LIFETIME),
            "schedule": factory.make_schedule(2, 30),
            "bidding": CampaignBidding(strategy=BiddingStrategy.COST_CAP, cap_amount=Decimal("2.50")),
            "targeting": factory.make_targeting(
                age_min=25,
                age_max=44,
                genders=[Gender.FEMALE],
                locations=[
                    factory.make_location(),
                    factory.make_location("London", None, LocationType.CITY, radius=15),
                ],
                interests=["Technology", "Marketing"],
                languages=["EN"],
                extensions=[
                    GoogleTargetingExtension(keywords=["crm software", "sales tools"]),
                    FacebookTargetingExtension(relationship_statuses=[1]),
                    TikTokTargetingExtension(operating_systems=["IOS"], connection_types=["wifi"]),
                    LinkedInTargetingExtension(
                        job_titles=["urn:li:title:123"], seniorities=["manager"], company_sizes=["C"]
                    ),
                ],
            ),
            "creative": factory.make_creative(media=[factory.make_video(), factory.make_image()]),
        }
        data.update(overrides)
        return UnifiedCampaignData(**data)

    @staticmethod
    def make_campaign_payload(**overrides) -> Dict[str, Any]:
        """camelCase JSON body as a client would send it"""
        payload = AdDistributionTestDataFactory.make_campaign().model_dump(mode="json", by_alias=True)
        payload.update(overrides)
        return payload

    # ====================
    # Credentials
    # ====================

    @staticmethod
    def make_credentials(platform: Platform, **overrides) -> PlatformCredentials:
        """Complete credentials for one platform"""
        data: Dict[str, Any] = {
            Platform.GOOGLE: {
                "access_token": "ya29.google-token",
                "customer_id": "123-456-7890",
                "developer_token": "dev-token-abc",
            },
            Platform.FACEBOOK: {
                "access_token": "EAAB-facebook-token",
                "account_id": "1234567890",
                "page_id": "987654321",
            },
            Platform.TIKTOK: {
                "access_token": "tiktok-token",
                "advertiser_id": "7000000000000",
            },
            Platform.LINKEDIN: {
                "access_token": "AQX-linkedin-token",
                "account_id": "509876543",
            },
        }[platform]
        data.update(overrides)
        return PlatformCredentials(**data)

    @staticmethod
    def make_all_credentials(
        platforms: Optional[List[Platform]] = None,
    ) -> Dict[Platform, PlatformCredentials]:
        platforms = platforms or list(Platform)
        return {p: AdDistributionTestDataFactory.make_credentials(p) for p in platforms}

    @staticmethod
    def make_credentials_payload(platforms: Optional[List[Platform]] = None) -> Dict[str, Any]:
        """camelCase credentials map keyed by platform tag"""
        creds = AdDistributionTestDataFactory.make_all_credentials(platforms)
        payload = {}
        for platform, credentials in creds.items():
            body = {
                "accessToken": PlatformCredentials.reveal(credentials.access_token),
                "accountId": credentials.account_id,
                "customerId": credentials.customer_id,
                "developerToken": PlatformCredentials.reveal(credentials.developer_token),
                "advertiserId": credentials.advertiser_id,
                "pageId": credentials.page_id,
            }
            payload[platform.value] = {k: v for k, v in body.items() if v is not None}
        return payload

    # ====================
    # Results
    # ====================

    @staticmethod
    def make_success(platform: Platform) -> PlatformCampaignResult:
        return PlatformCampaignResult(
            platform=platform,
            success=True,
            campaign_id=f"{platform.value}_camp_1",
            ad_group_id=f"{platform.value}_adgroup_1",
            ad_ids=[f"{platform.value}_ad_1"],
        )

    @staticmethod
    def make_failure(
        platform: Platform,
        code: DistributionErrorCode = DistributionErrorCode.VALIDATION_ERROR,
        stage: Optional[DistributionStage] = DistributionStage.VALIDATING,
    ) -> PlatformCampaignResult:
        return PlatformCampaignResult.failure(platform, code, "failed", stage=stage)


__all__ = [
    "AdDistributionTestDataFactory",
    "BiddingStrategy",
    "BudgetType",
    "CampaignBidding",
    "CampaignBudget",
    "CampaignObjective",
    "CampaignSchedule",
    "DistributionErrorCode",
    "DistributionStage",
    "FacebookTargetingExtension",
    "Gender",
    "GoogleTargetingExtension",
    "LinkedInTargetingExtension",
    "LocationType",
    "MediaType",
    "Platform",
    "PlatformCampaignResult",
    "PlatformCredentials",
    "TikTokTargetingExtension",
    "UnifiedCampaignData",
    "UnifiedCreative",
    "UnifiedLocation",
    "UnifiedMedia",
    "UnifiedTargeting",
]
