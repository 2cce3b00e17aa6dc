"""
Facebook Distributor

Maps a unified campaign onto the Facebook/Instagram Marketing API:
campaign, ad set (budget, schedule, targeting) and one ad built from an
ad creative.
"""

import logging
from datetime import datetime, time, timezone
from decimal import Decimal
from typing import Any, Dict, List, Optional

from ..mappings.interests import map_interests
from ..mappings.locations import get_facebook_location_key
from ..mappings.objectives import FACEBOOK_OPTIMIZATION_GOALS
from ..models import (
    BiddingStrategy,
    BudgetType,
    Gender,
    LocationType,
    MediaType,
    Platform,
    PlatformCredentials,
    UnifiedCampaignData,
    UnifiedLocation,
)
from .base import BaseDistributor, to_minor_units

logger = logging.getLogger(__name__)

BID_STRATEGIES = {
    BiddingStrategy.LOWEST_COST: "LOWEST_COST_WITHOUT_CAP",
    BiddingStrategy.COST_CAP: "COST_CAP",
    BiddingStrategy.BID_CAP: "LOWEST_COST_WITH_BID_CAP",
}

GENDER_CODES = {Gender.MALE: 1, Gender.FEMALE: 2}

RECOMMENDED_HEADLINE_LENGTH = 40


class FacebookDistributor(BaseDistributor):
    platform = Platform.FACEBOOK

    MIN_DAILY_BUDGET = Decimal("1")
    MIN_LIFETIME_BUDGET = Decimal("10")
    MIN_AGE = 13
    MAX_AGE = 65
    MAX_HEADLINE_LENGTH = 255
    MAX_PRIMARY_TEXT_LENGTH = 2200
    REQUIRED_CREDENTIALS = ("access_token", "account_id", "page_id")

    PLACEMENT = "Facebook and Instagram feeds"
    CREATIVE_SPECIFICATIONS = (
        "Image: 1080x1080 (1:1) or 1200x628 (1.91:1), JPG or PNG",
        "Video: 1:1 or 4:5, up to 240 minutes, MP4 or MOV",
        "Primary text: 125 characters shown before truncation",
        "Headline: 40 characters recommended",
    )

    def resolve_location(self, location: UnifiedLocation) -> Optional[str]:
        return get_facebook_location_key(location)

    def _validate_platform(self, campaign, errors, warnings) -> None:
        if len(campaign.creative.headline) > RECOMMENDED_HEADLINE_LENGTH:
            warnings.append(
                f"Headlines over {RECOMMENDED_HEADLINE_LENGTH} characters may be truncated on Facebook"
            )

    # ====================
    # Payloads
    # ====================

    def build_campaign_payload(
        self, campaign: UnifiedCampaignData, native_objective: str, credentials: PlatformCredentials
    ) -> Dict[str, Any]:
        return {
            "name": campaign.name,
            "objective": native_objective,
            "status": "PAUSED",
            "special_ad_categories": [],
            "buying_type": "AUCTION",
        }

    def build_targeting(self, campaign: UnifiedCampaignData) -> Dict[str, Any]:
        targeting = campaign.targeting
        spec: Dict[str, Any] = {
            "age_min": targeting.age_min,
            "age_max": targeting.age_max,
            "publisher_platforms": ["facebook", "instagram"],
        }
        if not targeting.targets_all_genders:
            spec["genders"] = sorted(GENDER_CODES[g] for g in targeting.genders if g in GENDER_CODES)

        geo: Dict[str, List[Any]] = {}
        for location in targeting.locations:
            key = self.resolve_location(location)
            if key is None:
                continue
            if location.type == LocationType.COUNTRY:
                geo.setdefault("countries", []).append(key)
            elif location.type == LocationType.CITY:
                geo.setdefault("cities", []).append(
                    {"key": key, "radius": int(location.radius or 10), "distance_unit": "mile"}
                )
            elif location.type == LocationType.REGION:
                geo.setdefault("regions", []).append({"key": key})
            else:
                geo.setdefault("zips", []).append({"key": key})
        spec["geo_locations"] = geo

        interest_ids = map_interests(self.platform, targeting.interests)
        if interest_ids:
            spec["interests"] = [{"id": interest_id} for interest_id in interest_ids]

        extension = targeting.extension_for(self.platform)
        if extension:
            if extension.life_events:
                spec["life_events"] = [{"id": event} for event in extension.life_events]
            if extension.relationship_statuses:
                spec["relationship_statuses"] = extension.relationship_statuses
            if extension.education and extension.education.education_statuses:
                spec["education_statuses"] = extension.education.education_statuses
            if extension.work and extension.work.employers:
                spec["work_employers"] = [{"name": employer} for employer in extension.work.employers]
        return spec

    def build_ad_group_payload(
        self, campaign: UnifiedCampaignData, native_objective: str, credentials: PlatformCredentials
    ) -> Dict[str, Any]:
        bidding = campaign.bidding
        schedule = campaign.schedule
        payload: Dict[str, Any] = {
            "name": f"{campaign.name} Ad Set",
            "optimization_goal": FACEBOOK_OPTIMIZATION_GOALS[native_objective],
            "billing_event": "IMPRESSIONS",
            "bid_strategy": BID_STRATEGIES[bidding.strategy if bidding else BiddingStrategy.LOWEST_COST],
            "start_time": datetime.combine(schedule.start_date, time.min, timezone.utc).isoformat(),
            "end_time": datetime.combine(schedule.end_date, time.min, timezone.utc).isoformat(),
            "targeting": self.build_targeting(campaign),
            "status": "PAUSED",
        }

        budget_cents = to_minor_units(campaign.budget.amount)
        if campaign.budget.type == BudgetType.DAILY:
            payload["daily_budget"] = budget_cents
        else:
            payload["lifetime_budget"] = budget_cents

        if bidding and bidding.cap_amount is not None:
            payload["bid_amount"] = to_minor_units(bidding.cap_amount)
        return payload

    def build_ad_payloads(
        self, campaign: UnifiedCampaignData, native_objective: str, credentials: PlatformCredentials
    ) -> List[Dict[str, Any]]:
        creative = campaign.creative
        call_to_action = {
            "type": self.native_call_to_action(creative),
            "value": {"link": creative.destination_url},
        }
        video = creative.media[0] if creative.media and creative.media[0].type == MediaType.VIDEO else None

        if video:
            story: Dict[str, Any] = {
                "page_id": credentials.page_id,
                "video_data": {
                    "video_url": video.url,
                    "image_url": video.thumbnail,
                    "title": creative.headline,
                    "message": creative.primary_text,
                    "link_description": creative.description,
                    "call_to_action": call_to_action,
                },
            }
        else:
            image = creative.first_image
            story = {
                "page_id": credentials.page_id,
                "link_data": {
                    "link": creative.destination_url,
                    "message": creative.primary_text,
                    "name": creative.headline,
                    "description": creative.description,
                    "picture": image.url if image else None,
                    "call_to_action": call_to_action,
                },
            }

        return [{
            "creative": {"name": f"{campaign.name} Creative", "object_story_spec": story},
            "ad": {"name": f"{campaign.name} Ad", "status": "PAUSED"},
        }]

    def get_campaign_recommendations(self, campaign: UnifiedCampaignData) -> List[str]:
        recommendations = super().get_campaign_recommendations(campaign)
        if not campaign.creative.first_video:
            recommendations.append("Video creatives usually get more reach in Facebook and Instagram feeds")
        if len(campaign.creative.primary_text) > 125:
            recommendations.append("Keep primary text under 125 characters to avoid truncation")
        return recommendations
