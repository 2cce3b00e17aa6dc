"""
Objective Mappings

Fixed lookup tables from the unified objective to each platform's native
objective enum. A missing entry means the platform cannot run that
objective; lookups never fall back to a nearby objective.
"""

from typing import Dict

from ..models import CampaignObjective, Platform
from ..protocols import ObjectiveMappingError

GOOGLE_OBJECTIVES: Dict[CampaignObjective, str] = {
    CampaignObjective.AWARENESS: "DISPLAY",
    CampaignObjective.TRAFFIC: "SEARCH",
    CampaignObjective.LEADS: "SEARCH",
    CampaignObjective.CONVERSIONS: "SHOPPING",
}

FACEBOOK_OBJECTIVES: Dict[CampaignObjective, str] = {
    CampaignObjective.AWARENESS: "OUTCOME_AWARENESS",
    CampaignObjective.TRAFFIC: "OUTCOME_TRAFFIC",
    CampaignObjective.ENGAGEMENT: "OUTCOME_ENGAGEMENT",
    CampaignObjective.LEADS: "OUTCOME_LEADS",
    CampaignObjective.CONVERSIONS: "OUTCOME_SALES",
    CampaignObjective.APP_PROMOTION: "OUTCOME_APP_PROMOTION",
}

TIKTOK_OBJECTIVES: Dict[CampaignObjective, str] = {
    CampaignObjective.AWARENESS: "REACH",
    CampaignObjective.TRAFFIC: "TRAFFIC",
    CampaignObjective.LEADS: "LEAD_GENERATION",
    CampaignObjective.CONVERSIONS: "CONVERSIONS",
}

LINKEDIN_OBJECTIVES: Dict[CampaignObjective, str] = {
    CampaignObjective.AWARENESS: "BRAND_AWARENESS",
    CampaignObjective.TRAFFIC: "WEBSITE_VISITS",
    CampaignObjective.ENGAGEMENT: "ENGAGEMENT",
    CampaignObjective.LEADS: "LEAD_GENERATION",
    CampaignObjective.CONVERSIONS: "WEBSITE_CONVERSIONS",
}

OBJECTIVE_MAPPINGS: Dict[Platform, Dict[CampaignObjective, str]] = {
    Platform.GOOGLE: GOOGLE_OBJECTIVES,
    Platform.FACEBOOK: FACEBOOK_OBJECTIVES,
    Platform.TIKTOK: TIKTOK_OBJECTIVES,
    Platform.LINKEDIN: LINKEDIN_OBJECTIVES,
}

# Ad set optimization goal per native Facebook objective
FACEBOOK_OPTIMIZATION_GOALS: Dict[str, str] = {
    "OUTCOME_AWARENESS": "REACH",
    "OUTCOME_TRAFFIC": "LINK_CLICKS",
    "OUTCOME_ENGAGEMENT": "POST_ENGAGEMENT",
    "OUTCOME_LEADS": "LEAD_GENERATION",
    "OUTCOME_SALES": "OFFSITE_CONVERSIONS",
    "OUTCOME_APP_PROMOTION": "APP_INSTALLS",
}

# (optimization_goal, billing_event) per native TikTok objective
TIKTOK_OPTIMIZATION: Dict[str, tuple] = {
    "REACH": ("REACH", "CPM"),
    "TRAFFIC": ("CLICK", "CPC"),
    "LEAD_GENERATION": ("LEAD_GENERATION", "OCPM"),
    "CONVERSIONS": ("CONVERT", "OCPM"),
}


def supports_objective(platform: Platform, objective: CampaignObjective) -> bool:
    return objective in OBJECTIVE_MAPPINGS.get(platform, {})


def map_objective(platform: Platform, objective: CampaignObjective) -> str:
    """
    Translate a unified objective into the platform's native objective.

    Raises:
        ObjectiveMappingError: the platform has no entry for the objective
    """
    try:
        return OBJECTIVE_MAPPINGS[platform][objective]
    except KeyError:
        raise ObjectiveMappingError(platform, objective) from None
