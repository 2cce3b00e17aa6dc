"""
TikTok Distributor

Maps a unified campaign onto the TikTok Business API: campaign, ad group
(placement, audience, schedule, bidding) and a single ad.
"""

import logging
from decimal import Decimal
from typing import Any, Dict, List, Optional

from ..mappings.interests import map_interests
from ..mappings.locations import get_tiktok_location_id
from ..mappings.objectives import TIKTOK_OPTIMIZATION
from ..models import (
    BiddingStrategy,
    BudgetType,
    Gender,
    MediaType,
    Platform,
    PlatformCredentials,
    UnifiedCampaignData,
    UnifiedCreative,
    UnifiedLocation,
)
from .base import BaseDistributor

logger = logging.getLogger(__name__)

AGE_GROUPS = [
    ("AGE_13_17", 13, 17),
    ("AGE_18_24", 18, 24),
    ("AGE_25_34", 25, 34),
    ("AGE_35_44", 35, 44),
    ("AGE_45_54", 45, 54),
    ("AGE_55_100", 55, 100),
]

NETWORK_TYPES = {"wifi": "WIFI", "cellular": "4G"}

RECOMMENDED_DAILY_BUDGET = Decimal("50")


def age_groups(age_min: int, age_max: int) -> List[str]:
    return [name for name, low, high in AGE_GROUPS if low <= age_max and high >= age_min]


def budget_mode(campaign: UnifiedCampaignData) -> str:
    return "BUDGET_MODE_DAY" if campaign.budget.type == BudgetType.DAILY else "BUDGET_MODE_TOTAL"


class TikTokDistributor(BaseDistributor):
    platform = Platform.TIKTOK

    MIN_DAILY_BUDGET = Decimal("20")
    MIN_LIFETIME_BUDGET = Decimal("50")
    MIN_AGE = 13
    MAX_AD_TEXT_LENGTH = 100
    # Headline feeds the ad text, limited below
    MAX_HEADLINE_LENGTH = 100
    REQUIRES_PRIMARY_TEXT = False
    START_DATE_GRACE_DAYS = 0
    REQUIRED_CREDENTIALS = ("access_token", "advertiser_id")

    PLACEMENT = "TikTok For You feed"
    CREATIVE_SPECIFICATIONS = (
        "Video: 9:16 aspect ratio, 5-60 seconds",
        "Image: 9:16 aspect ratio (1080x1920)",
        "File size: 500KB - 500MB",
        "Format: MP4, MOV (video) or JPG, PNG (image)",
    )

    def resolve_location(self, location: UnifiedLocation) -> Optional[int]:
        return get_tiktok_location_id(location)

    def ad_text(self, creative: UnifiedCreative) -> str:
        return (creative.description or creative.headline or "").strip()

    @property
    def ad_text_limit(self) -> int:
        return self.MAX_AD_TEXT_LENGTH

    def _validate_platform(self, campaign, errors, warnings) -> None:
        text = self.ad_text(campaign.creative)
        if len(text) > self.MAX_AD_TEXT_LENGTH:
            errors.append(f"Ad text must be {self.MAX_AD_TEXT_LENGTH} characters or less for TikTok")

        budget = campaign.budget
        if budget.type == BudgetType.DAILY and budget.amount < RECOMMENDED_DAILY_BUDGET:
            warnings.append(
                f"Daily budget below {RECOMMENDED_DAILY_BUDGET} {budget.currency} may limit TikTok delivery"
            )

    # ====================
    # Payloads
    # ====================

    def build_campaign_payload(
        self, campaign: UnifiedCampaignData, native_objective: str, credentials: PlatformCredentials
    ) -> Dict[str, Any]:
        return {
            "campaign_name": campaign.name,
            "objective_type": native_objective,
            "budget_mode": budget_mode(campaign),
            "budget": float(campaign.budget.amount),
            "operation_status": "DISABLE",
        }

    def build_ad_group_payload(
        self, campaign: UnifiedCampaignData, native_objective: str, credentials: PlatformCredentials
    ) -> Dict[str, Any]:
        targeting = campaign.targeting
        optimization_goal, billing_event = TIKTOK_OPTIMIZATION[native_objective]

        if targeting.targets_all_genders:
            gender = "GENDER_UNLIMITED"
        else:
            gender = "GENDER_MALE" if Gender.MALE in targeting.genders else "GENDER_FEMALE"

        payload: Dict[str, Any] = {
            "adgroup_name": f"{campaign.name} Ad Group",
            "placement_type": "PLACEMENT_TYPE_NORMAL",
            "placements": ["PLACEMENT_TIKTOK"],
            "location_ids": self.resolve_locations(campaign),
            "age_groups": age_groups(targeting.age_min, targeting.age_max),
            "gender": gender,
            "languages": targeting.languages,
            "interest_category_ids": map_interests(self.platform, targeting.interests),
            "budget_mode": budget_mode(campaign),
            "budget": float(campaign.budget.amount),
            "schedule_type": "SCHEDULE_START_END",
            "schedule_start_time": f"{campaign.schedule.start_date.isoformat()} 00:00:00",
            "schedule_end_time": f"{campaign.schedule.end_date.isoformat()} 00:00:00",
            "optimization_goal": optimization_goal,
            "billing_event": billing_event,
            "bid_type": "BID_TYPE_NO_BIAS",
            "operation_status": "DISABLE",
        }

        bidding = campaign.bidding
        if bidding and bidding.cap_amount is not None:
            payload["bid_type"] = "BID_TYPE_CUSTOM"
            if bidding.strategy == BiddingStrategy.COST_CAP:
                payload["conversion_bid_price"] = float(bidding.cap_amount)
            else:
                payload["bid_price"] = float(bidding.cap_amount)

        extension = targeting.extension_for(self.platform)
        if extension:
            if extension.operating_systems:
                payload["operating_systems"] = extension.operating_systems
            if extension.connection_types:
                payload["network_types"] = [NETWORK_TYPES[c] for c in extension.connection_types]
            if extension.device_models:
                payload["device_model_ids"] = extension.device_models
            if extension.hashtags:
                payload["interest_keywords"] = [tag.lstrip("#") for tag in extension.hashtags]
        return payload

    def build_ad_payloads(
        self, campaign: UnifiedCampaignData, native_objective: str, credentials: PlatformCredentials
    ) -> List[Dict[str, Any]]:
        creative = campaign.creative
        primary = creative.media[0] if creative.media else None
        ad: Dict[str, Any] = {
            "ad_name": f"{campaign.name} Ad",
            "ad_text": self.ad_text(creative),
            "call_to_action": self.native_call_to_action(creative),
            "landing_page_url": creative.destination_url,
        }
        if primary and primary.type == MediaType.VIDEO:
            ad["ad_format"] = "SINGLE_VIDEO"
            ad["video_url"] = primary.url
            if primary.thumbnail:
                ad["image_urls"] = [primary.thumbnail]
        else:
            ad["ad_format"] = "SINGLE_IMAGE"
            ad["image_urls"] = [m.url for m in creative.media if m.type == MediaType.IMAGE]
        return [ad]

    def get_campaign_recommendations(self, campaign: UnifiedCampaignData) -> List[str]:
        recommendations = super().get_campaign_recommendations(campaign)
        primary = campaign.creative.media[0] if campaign.creative.media else None
        if not primary or primary.type != MediaType.VIDEO:
            recommendations.append("TikTok performs best with video content; consider adding a video")
        recommendations.append("Use 9:16 vertical video or images for optimal TikTok display")
        recommendations.append("Keep videos between 9 and 15 seconds for best performance")
        recommendations.append("Include captions; most TikTok users watch with sound off")
        if campaign.targeting.age_min > 35:
            recommendations.append("TikTok's primary audience is 18-34; check that the age range fits")
        if campaign.budget.amount < RECOMMENDED_DAILY_BUDGET:
            recommendations.append(
                f"Consider a budget of at least {RECOMMENDED_DAILY_BUDGET} {campaign.budget.currency} "
                "per day for better reach"
            )
        return recommendations
