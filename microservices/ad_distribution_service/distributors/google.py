"""
Google Ads Distributor

Maps a unified campaign onto Google Ads: campaign budget + campaign, ad
group with location/language/age/gender/keyword criteria, then a
responsive search ad and, when the creative carries an image, a
responsive display ad.
"""

import logging
from decimal import Decimal
from typing import Any, Dict, List, Optional

from ..mappings.interests import map_interests
from ..mappings.locations import get_google_location_id
from ..models import (
    BiddingStrategy,
    BudgetType,
    CampaignObjective,
    Gender,
    Platform,
    PlatformCredentials,
    UnifiedCampaignData,
    UnifiedCreative,
    UnifiedLocation,
)
from .base import BaseDistributor, to_minor_units

logger = logging.getLogger(__name__)

MICROS = 1_000_000

# Language criterion ids
LANGUAGE_CONSTANTS: Dict[str, int] = {
    "en": 1000,
    "de": 1001,
    "fr": 1002,
    "es": 1003,
    "it": 1004,
    "ja": 1005,
    "nl": 1010,
    "pt": 1014,
    "zh": 1017,
    "ko": 1012,
}

AGE_RANGES = [
    ("AGE_RANGE_18_24", 18, 24),
    ("AGE_RANGE_25_34", 25, 34),
    ("AGE_RANGE_35_44", 35, 44),
    ("AGE_RANGE_45_54", 45, 54),
    ("AGE_RANGE_55_64", 55, 64),
    ("AGE_RANGE_65_UP", 65, 200),
]

DEFAULT_BIDDING = {
    CampaignObjective.AWARENESS: "MAXIMIZE_CONVERSIONS",
    CampaignObjective.TRAFFIC: "MAXIMIZE_CLICKS",
    CampaignObjective.LEADS: "TARGET_CPA",
    CampaignObjective.CONVERSIONS: "TARGET_CPA",
}

AD_GROUP_TYPES = {
    "SEARCH": "SEARCH_STANDARD",
    "DISPLAY": "DISPLAY_STANDARD",
    "SHOPPING": "SHOPPING_PRODUCT_ADS",
}

DEFAULT_CPC_BID_MICROS = 1 * MICROS


def age_range_types(age_min: int, age_max: int) -> List[str]:
    """Google age buckets overlapping [age_min, age_max]"""
    return [name for name, low, high in AGE_RANGES if low <= age_max and high >= age_min]


class GoogleDistributor(BaseDistributor):
    platform = Platform.GOOGLE

    MIN_DAILY_BUDGET = Decimal("5")
    MIN_LIFETIME_BUDGET = Decimal("35")
    MIN_AGE = 18
    MAX_HEADLINE_LENGTH = 30
    MAX_DESCRIPTION_LENGTH = 90
    REQUIRES_PRIMARY_TEXT = False
    REQUIRED_CREDENTIALS = ("access_token", "customer_id", "developer_token")

    PLACEMENT = "Google Search and Display Network"
    CREATIVE_SPECIFICATIONS = (
        "Headlines: up to 30 characters",
        "Descriptions: up to 90 characters",
        "Display images: 1200x628 (1.91:1) and 1200x1200 (1:1)",
    )

    def resolve_location(self, location: UnifiedLocation) -> Optional[int]:
        return get_google_location_id(location)

    def _description(self, creative: UnifiedCreative) -> str:
        return (creative.description or creative.primary_text or "").strip()

    def _validate_platform(self, campaign, errors, warnings) -> None:
        description = self._description(campaign.creative)
        if not description:
            errors.append("Description is required for Google Ads")
        elif len(description) > self.MAX_DESCRIPTION_LENGTH:
            errors.append(
                f"Description must be {self.MAX_DESCRIPTION_LENGTH} characters or less for Google Ads"
            )

        if not age_range_types(campaign.targeting.age_min, campaign.targeting.age_max):
            errors.append("Google Ads requires at least one targetable age range")

        unknown_languages = [
            code for code in campaign.targeting.languages if code not in LANGUAGE_CONSTANTS
        ]
        if unknown_languages:
            warnings.append(f"Languages without a Google Ads mapping will be skipped: {', '.join(unknown_languages)}")

        extension = campaign.targeting.extension_for(self.platform)
        if campaign.objective in (CampaignObjective.TRAFFIC, CampaignObjective.LEADS) and not (
            extension and extension.keywords
        ):
            warnings.append("Search campaigns perform better with keywords")

    # ====================
    # Payloads
    # ====================

    def bidding_strategy(self, campaign: UnifiedCampaignData) -> str:
        bidding = campaign.bidding
        if bidding and bidding.strategy == BiddingStrategy.COST_CAP:
            return "TARGET_CPA"
        if bidding and bidding.strategy == BiddingStrategy.BID_CAP:
            return "MAXIMIZE_CLICKS"
        return DEFAULT_BIDDING.get(campaign.objective, "MAXIMIZE_CLICKS")

    def _bidding_fields(self, campaign: UnifiedCampaignData) -> Dict[str, Any]:
        strategy = self.bidding_strategy(campaign)
        cap = campaign.bidding.cap_amount if campaign.bidding else None
        if strategy == "TARGET_CPA":
            return {"targetCpa": {"targetCpaMicros": str(to_minor_units(cap, MICROS))} if cap else {}}
        if strategy == "MAXIMIZE_CLICKS":
            return {"targetSpend": {"cpcBidCeilingMicros": str(to_minor_units(cap, MICROS))} if cap else {}}
        return {"maximizeConversions": {}}

    def build_campaign_payload(
        self, campaign: UnifiedCampaignData, native_objective: str, credentials: PlatformCredentials
    ) -> Dict[str, Any]:
        budget_micros = str(to_minor_units(campaign.budget.amount, MICROS))
        budget: Dict[str, Any] = {
            "name": f"{campaign.name} Budget",
            "deliveryMethod": "STANDARD",
            "explicitlyShared": False,
        }
        if campaign.budget.type == BudgetType.DAILY:
            budget["amountMicros"] = budget_micros
        else:
            budget["totalAmountMicros"] = budget_micros
            budget["period"] = "CUSTOM_PERIOD"

        extension = campaign.targeting.extension_for(self.platform)
        network = extension.network_settings if extension and extension.network_settings else None
        network_settings = {
            "targetGoogleSearch": network.google_search if network else True,
            "targetSearchNetwork": network.search_partners if network else False,
            "targetContentNetwork": network.display_network if network else native_objective == "DISPLAY",
            "targetPartnerSearchNetwork": False,
        }

        campaign_body: Dict[str, Any] = {
            "name": campaign.name,
            "status": "PAUSED",
            "advertisingChannelType": native_objective,
            "startDate": campaign.schedule.start_date.isoformat(),
            "endDate": campaign.schedule.end_date.isoformat(),
            "networkSettings": network_settings,
        }
        campaign_body.update(self._bidding_fields(campaign))
        return {"budget": budget, "campaign": campaign_body}

    def build_ad_group_payload(
        self, campaign: UnifiedCampaignData, native_objective: str, credentials: PlatformCredentials
    ) -> Dict[str, Any]:
        targeting = campaign.targeting
        cap = campaign.bidding.cap_amount if campaign.bidding else None
        ad_group = {
            "name": f"{campaign.name} Ad Group",
            "status": "ENABLED",
            "type": AD_GROUP_TYPES.get(native_objective, "SEARCH_STANDARD"),
            "cpcBidMicros": str(to_minor_units(cap, MICROS) if cap else DEFAULT_CPC_BID_MICROS),
        }

        criteria: List[Dict[str, Any]] = []
        for location_id in self.resolve_locations(campaign):
            criteria.append({"location": {"geoTargetConstant": f"geoTargetConstants/{location_id}"}})
        for code in targeting.languages:
            if code in LANGUAGE_CONSTANTS:
                criteria.append(
                    {"language": {"languageConstant": f"languageConstants/{LANGUAGE_CONSTANTS[code]}"}}
                )
        for age_range in age_range_types(targeting.age_min, targeting.age_max):
            criteria.append({"ageRange": {"type": age_range}})
        if not targeting.targets_all_genders:
            for gender in targeting.genders:
                criteria.append({"gender": {"type": "MALE" if gender == Gender.MALE else "FEMALE"}})

        customer = (credentials.customer_id or "").replace("-", "")
        for interest_id in map_interests(self.platform, targeting.interests):
            criteria.append(
                {"userInterest": {"userInterestCategory": f"customers/{customer}/userInterests/{interest_id}"}}
            )

        extension = targeting.extension_for(self.platform)
        if extension:
            for keyword in extension.keywords:
                criteria.append({"keyword": {"text": keyword, "matchType": "BROAD"}})
            for user_list in extension.remarketing_lists:
                criteria.append({"userList": {"userList": f"customers/{customer}/userLists/{user_list}"}})
            for placement in extension.placements:
                criteria.append({"placement": {"url": placement}})

        return {"ad_group": ad_group, "criteria": criteria}

    def build_ad_payloads(
        self, campaign: UnifiedCampaignData, native_objective: str, credentials: PlatformCredentials
    ) -> List[Dict[str, Any]]:
        creative = campaign.creative
        description = self._description(creative)
        headlines = []
        for text in (creative.headline, campaign.name, creative.call_to_action):
            text = text.strip()[: self.MAX_HEADLINE_LENGTH]
            if text and text not in headlines:
                headlines.append(text)
        descriptions = []
        for text in (description, creative.primary_text):
            text = text.strip()[: self.MAX_DESCRIPTION_LENGTH]
            if text and text not in descriptions:
                descriptions.append(text)

        ads = [{
            "status": "ENABLED",
            "ad": {
                "finalUrls": [creative.destination_url],
                "responsiveSearchAd": {
                    "headlines": [{"text": h} for h in headlines],
                    "descriptions": [{"text": d} for d in descriptions],
                },
            },
        }]

        image = creative.first_image
        if image:
            ads.append({
                "status": "ENABLED",
                "ad": {
                    "finalUrls": [creative.destination_url],
                    "responsiveDisplayAd": {
                        "headlines": [{"text": headlines[0]}],
                        "longHeadline": {"text": (creative.primary_text or creative.headline)[:90]},
                        "descriptions": [{"text": d} for d in descriptions],
                        "businessName": campaign.name[:25],
                        "marketingImages": [{"asset": image.url}],
                        "callToActionText": self.native_call_to_action(creative),
                    },
                },
            })
        return ads

    def get_campaign_recommendations(self, campaign: UnifiedCampaignData) -> List[str]:
        recommendations = super().get_campaign_recommendations(campaign)
        extension = campaign.targeting.extension_for(self.platform)
        if not extension or len(extension.keywords) < 5:
            recommendations.append("Add at least 5 relevant keywords for Search campaigns")
        if not campaign.creative.first_image:
            recommendations.append("Add an image so a responsive display ad can be created")
        return recommendations
