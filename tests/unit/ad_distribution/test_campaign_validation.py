"""
Unit Tests for Per-Platform Campaign Validation

validate_campaign_data is pure: no I/O, every violated rule reported,
warnings never invalidate. Each platform enforces its own floors and
limits independently of the others.

Usage:
    pytest tests/unit/ad_distribution/test_campaign_validation.py -v
"""

import pytest
from datetime import timedelta
from decimal import Decimal

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../../.."))

from tests.contracts.ad_distribution.data_contract import (
    AdDistributionTestDataFactory,
    BiddingStrategy,
    BudgetType,
    CampaignBidding,
    CampaignObjective,
    CampaignSchedule,
    LinkedInTargetingExtension,
    LocationType,
    Platform,
)
from microservices.ad_distribution_service.distributors import (
    FacebookDistributor,
    GoogleDistributor,
    LinkedInDistributor,
    TikTokDistributor,
)

pytestmark = [pytest.mark.unit]


def _no_client(credentials):
    raise AssertionError("validation must not create a platform client")


@pytest.fixture
def distributors():
    return {
        Platform.GOOGLE: GoogleDistributor(_no_client),
        Platform.FACEBOOK: FacebookDistributor(_no_client),
        Platform.TIKTOK: TikTokDistributor(_no_client),
        Platform.LINKEDIN: LinkedInDistributor(_no_client),
    }


def _schedule(start_offset: int, end_offset: int) -> CampaignSchedule:
    today = AdDistributionTestDataFactory.today()
    return CampaignSchedule(
        start_date=today + timedelta(days=start_offset),
        end_date=today + timedelta(days=end_offset),
    )


# ====================
# Shared rules
# ====================


class TestMinimalCampaign:
    """The factory's minimal campaign passes everywhere"""

    @pytest.mark.parametrize("platform", list(Platform))
    def test_minimal_campaign_valid(self, distributors, factory, platform):
        result = distributors[platform].validate_campaign_data(factory.make_campaign())

        assert result.valid, result.errors
        assert result.errors == []

    @pytest.mark.parametrize("platform", list(Platform))
    def test_full_campaign_valid(self, distributors, factory, platform):
        result = distributors[platform].validate_campaign_data(factory.make_full_campaign())

        assert result.valid, result.errors

    @pytest.mark.parametrize("platform", list(Platform))
    def test_validation_is_idempotent(self, distributors, factory, platform):
        campaign = factory.make_campaign(budget=factory.make_budget("0.50"))
        distributor = distributors[platform]

        assert distributor.validate_campaign_data(campaign) == distributor.validate_campaign_data(campaign)


class TestCollectsEveryError:
    """Validation reports every violated rule"""

    def test_multiple_errors_reported(self, distributors, factory):
        # Given: Blank name, bad URL and no media
        campaign = factory.make_campaign(
            name=" ",
            creative=factory.make_creative(destination_url="not a url", media=[]),
        )

        # When: Validating for Facebook
        result = distributors[Platform.FACEBOOK].validate_campaign_data(campaign)

        # Then: All three problems are listed
        assert not result.valid
        assert "Campaign name is required" in result.errors
        assert "A valid destination URL is required" in result.errors
        assert "At least one image or video is required" in result.errors

    def test_missing_locations(self, distributors, factory):
        campaign = factory.make_campaign(targeting=factory.make_targeting(locations=[]))

        result = distributors[Platform.LINKEDIN].validate_campaign_data(campaign)

        assert "At least one location is required" in result.errors

    def test_unresolvable_locations(self, distributors, factory):
        atlantis = factory.make_location("Atlantis", None, LocationType.CITY)
        campaign = factory.make_campaign(targeting=factory.make_targeting(locations=[atlantis]))

        result = distributors[Platform.GOOGLE].validate_campaign_data(campaign)

        assert "None of the locations can be targeted on Google Ads" in result.errors

    def test_partially_resolvable_locations_warn(self, distributors, factory):
        atlantis = factory.make_location("Atlantis", None, LocationType.CITY)
        campaign = factory.make_campaign(
            targeting=factory.make_targeting(locations=[factory.make_location(), atlantis])
        )

        result = distributors[Platform.TIKTOK].validate_campaign_data(campaign)

        assert result.valid
        assert any("Atlantis" in w for w in result.warnings)

    def test_end_date_before_start(self, distributors, factory):
        campaign = factory.make_campaign(schedule=_schedule(10, 5))

        result = distributors[Platform.FACEBOOK].validate_campaign_data(campaign)

        assert "End date must be after start date" in result.errors

    def test_cap_required_for_capped_bidding(self, distributors, factory):
        campaign = factory.make_campaign(bidding=CampaignBidding(strategy=BiddingStrategy.BID_CAP))

        result = distributors[Platform.FACEBOOK].validate_campaign_data(campaign)

        assert "A cap amount is required for the bid_cap bidding strategy" in result.errors


# ====================
# Budget floors
# ====================


class TestBudgetFloors:
    """Each platform enforces its own minimum budget"""

    def test_floors_are_independent(self, distributors, factory):
        # Given: A 3 USD daily budget
        campaign = factory.make_campaign(budget=factory.make_budget("3"))

        # When: Validating for Google and Facebook
        google = distributors[Platform.GOOGLE].validate_campaign_data(campaign)
        facebook = distributors[Platform.FACEBOOK].validate_campaign_data(campaign)

        # Then: Below Google's floor, above Facebook's
        assert not google.valid
        assert "Google Ads requires a minimum daily budget of 5 USD" in google.errors
        assert facebook.valid

    @pytest.mark.parametrize(
        "platform,budget_type,below,at",
        [
            (Platform.GOOGLE, BudgetType.DAILY, "4.99", "5"),
            (Platform.FACEBOOK, BudgetType.LIFETIME, "9.99", "10"),
            (Platform.TIKTOK, BudgetType.DAILY, "19.99", "20"),
            (Platform.TIKTOK, BudgetType.LIFETIME, "49", "50"),
            (Platform.LINKEDIN, BudgetType.DAILY, "9.50", "10"),
            (Platform.LINKEDIN, BudgetType.LIFETIME, "99", "100"),
        ],
    )
    def test_floor_boundaries(self, distributors, factory, platform, budget_type, below, at):
        distributor = distributors[platform]

        below_result = distributor.validate_campaign_data(
            factory.make_campaign(budget=factory.make_budget(below, budget_type))
        )
        at_result = distributor.validate_campaign_data(
            factory.make_campaign(budget=factory.make_budget(at, budget_type))
        )

        assert any("minimum" in e and "budget" in e for e in below_result.errors)
        assert at_result.valid, at_result.errors


# ====================
# Schedule grace window
# ====================


class TestStartDate:
    """Start dates may lag today by a platform-specific grace window"""

    def test_yesterday_allowed_on_google(self, distributors, factory):
        campaign = factory.make_campaign(schedule=_schedule(-1, 7))

        assert distributors[Platform.GOOGLE].validate_campaign_data(campaign).valid

    def test_yesterday_rejected_on_tiktok(self, distributors, factory):
        campaign = factory.make_campaign(schedule=_schedule(-1, 7))

        result = distributors[Platform.TIKTOK].validate_campaign_data(campaign)

        assert "Start date cannot be in the past" in result.errors

    def test_two_days_ago_rejected_everywhere(self, distributors, factory):
        campaign = factory.make_campaign(schedule=_schedule(-2, 7))

        for distributor in distributors.values():
            assert "Start date cannot be in the past" in distributor.validate_campaign_data(campaign).errors

    def test_explicit_today(self, distributors, factory):
        # Given: A campaign checked as of a date after its start
        campaign = factory.make_campaign()
        later = campaign.schedule.start_date + timedelta(days=3)

        result = distributors[Platform.FACEBOOK].validate_campaign_data(campaign, today=later)

        assert "Start date cannot be in the past" in result.errors


# ====================
# Google
# ====================


class TestGoogleValidation:
    """Google Ads specific rules"""

    def test_headline_limit(self, distributors, factory):
        campaign = factory.make_campaign(creative=factory.make_creative(headline="x" * 31))

        result = distributors[Platform.GOOGLE].validate_campaign_data(campaign)

        assert "Headline must be 30 characters or less for Google Ads" in result.errors

    def test_description_required(self, distributors, factory):
        campaign = factory.make_campaign(
            creative=factory.make_creative(description=None, primary_text="")
        )

        result = distributors[Platform.GOOGLE].validate_campaign_data(campaign)

        assert "Description is required for Google Ads" in result.errors

    def test_minimum_age(self, distributors, factory):
        campaign = factory.make_campaign(targeting=factory.make_targeting(age_min=13))

        result = distributors[Platform.GOOGLE].validate_campaign_data(campaign)

        assert "Google Ads requires a minimum age of 18" in result.errors

    def test_unsupported_objective(self, distributors, factory):
        campaign = factory.make_campaign(objective=CampaignObjective.APP_PROMOTION)

        result = distributors[Platform.GOOGLE].validate_campaign_data(campaign)

        assert "Objective 'app_promotion' is not supported on Google Ads" in result.errors

    def test_search_without_keywords_warns(self, distributors, factory):
        result = distributors[Platform.GOOGLE].validate_campaign_data(factory.make_campaign())

        assert result.valid
        assert "Search campaigns perform better with keywords" in result.warnings


# ====================
# Facebook
# ====================


class TestFacebookValidation:
    """Facebook specific rules"""

    def test_maximum_age(self, distributors, factory):
        campaign = factory.make_campaign(targeting=factory.make_targeting(age_max=70))

        result = distributors[Platform.FACEBOOK].validate_campaign_data(campaign)

        assert "Facebook supports a maximum age of 65" in result.errors

    def test_teen_audience_allowed(self, distributors, factory):
        campaign = factory.make_campaign(targeting=factory.make_targeting(age_min=13, age_max=17))

        assert distributors[Platform.FACEBOOK].validate_campaign_data(campaign).valid

    def test_primary_text_required(self, distributors, factory):
        campaign = factory.make_campaign(creative=factory.make_creative(primary_text=""))

        result = distributors[Platform.FACEBOOK].validate_campaign_data(campaign)

        assert "Primary text is required" in result.errors

    def test_long_headline_warns(self, distributors, factory):
        campaign = factory.make_campaign(creative=factory.make_creative(headline="x" * 60))

        result = distributors[Platform.FACEBOOK].validate_campaign_data(campaign)

        assert result.valid
        assert result.warnings


# ====================
# TikTok
# ====================


class TestTikTokValidation:
    """TikTok specific rules"""

    def test_ad_text_limit(self, distributors, factory):
        campaign = factory.make_campaign(creative=factory.make_creative(description="y" * 101))

        result = distributors[Platform.TIKTOK].validate_campaign_data(campaign)

        assert "Ad text must be 100 characters or less for TikTok" in result.errors

    def test_low_daily_budget_warns(self, distributors, factory):
        campaign = factory.make_campaign(budget=factory.make_budget("30"))

        result = distributors[Platform.TIKTOK].validate_campaign_data(campaign)

        assert result.valid
        assert any("may limit TikTok delivery" in w for w in result.warnings)

    def test_engagement_not_supported(self, distributors, factory):
        campaign = factory.make_campaign(objective=CampaignObjective.ENGAGEMENT)

        assert not distributors[Platform.TIKTOK].validate_campaign_data(campaign).valid


# ====================
# LinkedIn
# ====================


class TestLinkedInValidation:
    """LinkedIn specific rules"""

    def test_without_professional_targeting_warns(self, distributors, factory):
        result = distributors[Platform.LINKEDIN].validate_campaign_data(factory.make_campaign())

        assert result.valid
        assert any("professional targeting" in w for w in result.warnings)

    def test_unknown_company_size(self, distributors, factory):
        extension = LinkedInTargetingExtension(company_sizes=["C", "Z"])
        campaign = factory.make_campaign(targeting=factory.make_targeting(extensions=[extension]))

        result = distributors[Platform.LINKEDIN].validate_campaign_data(campaign)

        assert "Unknown LinkedIn company sizes: Z" in result.errors

    def test_unsupported_call_to_action(self, distributors, factory):
        campaign = factory.make_campaign(creative=factory.make_creative(call_to_action="Shop Now"))

        result = distributors[Platform.LINKEDIN].validate_campaign_data(campaign)

        assert "Call to action 'Shop Now' is not supported on LinkedIn" in result.errors

    def test_intro_text_limit(self, distributors, factory):
        campaign = factory.make_campaign(creative=factory.make_creative(primary_text="z" * 601))

        result = distributors[Platform.LINKEDIN].validate_campaign_data(campaign)

        assert not result.valid
