"""
LinkedIn Distributor

Maps a unified campaign onto LinkedIn's campaign group -> campaign ->
creative hierarchy with URN-based professional targeting.
"""

import logging
from datetime import datetime, time, timezone
from decimal import Decimal
from typing import Any, Dict, List, Optional

from ..mappings.interests import map_interests
from ..mappings.locations import get_country_code, get_linkedin_location_urn
from ..models import (
    BudgetType,
    CampaignObjective,
    Gender,
    Platform,
    PlatformCredentials,
    UnifiedCampaignData,
    UnifiedLocation,
)
from .base import BaseDistributor

logger = logging.getLogger(__name__)

FACET = "urn:li:adTargetingFacet"

AGE_RANGES = [
    ("urn:li:ageRange:(18,24)", 18, 24),
    ("urn:li:ageRange:(25,34)", 25, 34),
    ("urn:li:ageRange:(35,54)", 35, 54),
    ("urn:li:ageRange:(55,2147483647)", 55, 200),
]

COMPANY_SIZES = {
    "A": "urn:li:staffCountRange:(1,1)",
    "B": "urn:li:staffCountRange:(2,10)",
    "C": "urn:li:staffCountRange:(11,50)",
    "D": "urn:li:staffCountRange:(51,200)",
    "E": "urn:li:staffCountRange:(201,500)",
    "F": "urn:li:staffCountRange:(501,1000)",
    "G": "urn:li:staffCountRange:(1001,5000)",
    "H": "urn:li:staffCountRange:(5001,10000)",
    "I": "urn:li:staffCountRange:(10001,2147483647)",
}

SENIORITIES = {
    "unpaid": 1,
    "training": 2,
    "entry": 3,
    "senior": 4,
    "manager": 5,
    "director": 6,
    "vp": 7,
    "cxo": 8,
    "partner": 9,
    "owner": 10,
}


def facet_urns(values: List[str], kind: str) -> List[str]:
    """Keep URNs, turn numeric ids into ``urn:li:<kind>:<id>``, drop the rest"""
    urns = []
    for value in values:
        value = value.strip()
        if value.startswith("urn:li:"):
            urns.append(value)
        elif value.isdigit():
            urns.append(f"urn:li:{kind}:{value}")
    return urns


def epoch_millis(day) -> int:
    return int(datetime.combine(day, time.min, timezone.utc).timestamp() * 1000)


class LinkedInDistributor(BaseDistributor):
    platform = Platform.LINKEDIN

    MIN_DAILY_BUDGET = Decimal("10")
    MIN_LIFETIME_BUDGET = Decimal("100")
    MIN_AGE = 18
    MAX_HEADLINE_LENGTH = 200
    MAX_PRIMARY_TEXT_LENGTH = 600
    REQUIRED_CREDENTIALS = ("access_token", "account_id")

    PLACEMENT = "LinkedIn feed (Sponsored Content)"
    CREATIVE_SPECIFICATIONS = (
        "Image: 1200x627 (1.91:1) or 1080x1080 (1:1)",
        "Video: 3 seconds to 30 minutes, MP4",
        "Intro text: 150 characters shown before truncation",
        "Headline: 70 characters recommended",
    )

    def resolve_location(self, location: UnifiedLocation) -> Optional[str]:
        return get_linkedin_location_urn(location)

    def _validate_platform(self, campaign, errors, warnings) -> None:
        extension = campaign.targeting.extension_for(self.platform)
        if not extension or not extension.has_professional_targeting:
            warnings.append(
                "Add job titles, functions, industries, seniorities or company sizes "
                "to make use of LinkedIn's professional targeting"
            )
        else:
            unknown_sizes = [s for s in extension.company_sizes if s.upper() not in COMPANY_SIZES]
            if unknown_sizes:
                errors.append(f"Unknown LinkedIn company sizes: {', '.join(unknown_sizes)}")

    # ====================
    # Payloads
    # ====================

    def _account_urn(self, credentials: PlatformCredentials) -> str:
        return f"urn:li:sponsoredAccount:{credentials.account_id}"

    def _money(self, campaign: UnifiedCampaignData, amount: Decimal) -> Dict[str, str]:
        return {"amount": str(amount), "currencyCode": campaign.budget.currency}

    def build_campaign_payload(
        self, campaign: UnifiedCampaignData, native_objective: str, credentials: PlatformCredentials
    ) -> Dict[str, Any]:
        return {
            "account": self._account_urn(credentials),
            "name": campaign.name,
            "status": "DRAFT",
            "runSchedule": {
                "start": epoch_millis(campaign.schedule.start_date),
                "end": epoch_millis(campaign.schedule.end_date),
            },
        }

    def build_targeting(self, campaign: UnifiedCampaignData) -> Dict[str, Any]:
        targeting = campaign.targeting
        clauses: List[Dict[str, Any]] = [
            {"or": {f"{FACET}:locations": self.resolve_locations(campaign)}},
        ]

        ages = [urn for urn, low, high in AGE_RANGES if low <= targeting.age_max and high >= targeting.age_min]
        if ages and not (targeting.age_min <= 18 and targeting.age_max >= 55):
            clauses.append({"or": {f"{FACET}:ageRanges": ages}})

        if not targeting.targets_all_genders:
            genders = ["urn:li:gender:MALE" if g == Gender.MALE else "urn:li:gender:FEMALE"
                       for g in targeting.genders]
            clauses.append({"or": {f"{FACET}:genders": genders}})

        interests = map_interests(self.platform, targeting.interests)
        if interests:
            clauses.append({"or": {f"{FACET}:interests": interests}})

        extension = targeting.extension_for(self.platform)
        if extension:
            facets = {
                "titles": facet_urns(extension.job_titles, "title"),
                "jobFunctions": facet_urns(extension.job_functions, "function"),
                "employers": facet_urns(extension.companies, "organization"),
                "industries": facet_urns(extension.industries, "industry"),
                "skills": facet_urns(extension.skills, "skill"),
                "degrees": facet_urns(extension.degrees, "degree"),
                "fieldsOfStudy": facet_urns(extension.fields_of_study, "fieldOfStudy"),
                "staffCountRanges": [
                    COMPANY_SIZES[s.upper()] for s in extension.company_sizes if s.upper() in COMPANY_SIZES
                ],
                "seniorities": [
                    f"urn:li:seniority:{SENIORITIES[s.lower()]}"
                    for s in extension.seniorities if s.lower() in SENIORITIES
                ],
            }
            for facet, urns in facets.items():
                if urns:
                    clauses.append({"or": {f"{FACET}:{facet}": urns}})

        return {"include": {"and": clauses}}

    def build_ad_group_payload(
        self, campaign: UnifiedCampaignData, native_objective: str, credentials: PlatformCredentials
    ) -> Dict[str, Any]:
        locale_country = "US"
        for location in campaign.targeting.locations:
            code = get_country_code(location)
            if code:
                locale_country = code
                break
        language = campaign.targeting.languages[0] if campaign.targeting.languages else "en"

        payload: Dict[str, Any] = {
            "account": self._account_urn(credentials),
            "name": f"{campaign.name} Campaign",
            "objectiveType": native_objective,
            "type": "SPONSORED_UPDATES",
            "costType": "CPM" if campaign.objective == CampaignObjective.AWARENESS else "CPC",
            "locale": {"country": locale_country, "language": language},
            "targetingCriteria": self.build_targeting(campaign),
            "status": "DRAFT",
        }
        if campaign.budget.type == BudgetType.DAILY:
            payload["dailyBudget"] = self._money(campaign, campaign.budget.amount)
        else:
            payload["totalBudget"] = self._money(campaign, campaign.budget.amount)
        if campaign.bidding and campaign.bidding.cap_amount is not None:
            payload["unitCost"] = self._money(campaign, campaign.bidding.cap_amount)
        return payload

    def build_ad_payloads(
        self, campaign: UnifiedCampaignData, native_objective: str, credentials: PlatformCredentials
    ) -> List[Dict[str, Any]]:
        creative = campaign.creative
        return [{
            "intendedStatus": "DRAFT",
            "content": {
                "headline": creative.headline,
                "introText": creative.primary_text,
                "description": creative.description,
                "landingPage": creative.destination_url,
                "callToAction": self.native_call_to_action(creative),
                "media": [m.url for m in creative.media],
            },
        }]

    def get_campaign_recommendations(self, campaign: UnifiedCampaignData) -> List[str]:
        recommendations = super().get_campaign_recommendations(campaign)
        extension = campaign.targeting.extension_for(self.platform)
        if not extension or not extension.job_titles:
            recommendations.append("Target specific job titles to reach decision makers")
        if len(campaign.creative.primary_text) > 150:
            recommendations.append("Keep intro text under 150 characters to avoid truncation")
        return recommendations
