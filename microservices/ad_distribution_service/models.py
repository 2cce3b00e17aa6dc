"""
Ad Distribution Service Models

Unified campaign, targeting and creative model shared by every platform
distributor, plus the per-platform and aggregate result models and the
HTTP request/response schemas.

Python attributes are snake_case; the wire format is camelCase and both
spellings are accepted on input.
"""

from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SecretStr,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel


class BaseContract(BaseModel):
    """Base model with camelCase aliases"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# =============================================================================
# ENUMS
# =============================================================================


class Platform(str, Enum):
    """Supported advertising platforms"""
    GOOGLE = "google"
    FACEBOOK = "facebook"
    TIKTOK = "tiktok"
    LINKEDIN = "linkedin"

    @property
    def display_name(self) -> str:
        return {
            Platform.GOOGLE: "Google Ads",
            Platform.FACEBOOK: "Facebook",
            Platform.TIKTOK: "TikTok",
            Platform.LINKEDIN: "LinkedIn",
        }[self]


class CampaignObjective(str, Enum):
    """Platform-agnostic campaign goal"""
    AWARENESS = "awareness"
    TRAFFIC = "traffic"
    ENGAGEMENT = "engagement"
    LEADS = "leads"
    CONVERSIONS = "conversions"
    APP_PROMOTION = "app_promotion"


class BudgetType(str, Enum):
    DAILY = "daily"
    LIFETIME = "lifetime"


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    ALL = "all"


class LocationType(str, Enum):
    COUNTRY = "country"
    CITY = "city"
    REGION = "region"
    ZIP = "zip"


class MediaType(str, Enum):
    IMAGE = "image"
    VIDEO = "video"


class BiddingStrategy(str, Enum):
    LOWEST_COST = "lowest_cost"
    COST_CAP = "cost_cap"
    BID_CAP = "bid_cap"


class DistributionStage(str, Enum):
    """Stage of a single platform distribution attempt"""
    VALIDATING = "validating"
    MAPPING = "mapping"
    CAMPAIGN = "campaign"
    AD_GROUP = "ad_group"
    AD = "ad"


class DistributionErrorCode(str, Enum):
    """Error codes carried by failed platform results"""
    VALIDATION_ERROR = "VALIDATION_ERROR"
    MAPPING_ERROR = "MAPPING_ERROR"
    CREDENTIALS_ERROR = "CREDENTIALS_ERROR"
    REMOTE_CREATE_ERROR = "REMOTE_CREATE_ERROR"
    TRANSPORT_ERROR = "TRANSPORT_ERROR"
    UNSUPPORTED_PLATFORM = "UNSUPPORTED_PLATFORM"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# =============================================================================
# TARGETING
# =============================================================================


class UnifiedLocation(BaseContract):
    """Typed location descriptor"""
    type: LocationType = LocationType.COUNTRY
    name: str = Field(..., min_length=1)
    code: Optional[str] = Field(None, description="ISO country code where known")
    radius: Optional[float] = Field(None, gt=0, description="Radius in miles")
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)

    @model_validator(mode="after")
    def coordinates_only_for_points(self) -> "UnifiedLocation":
        has_coordinates = self.latitude is not None or self.longitude is not None
        if has_coordinates and self.type not in (LocationType.CITY, LocationType.ZIP):
            raise ValueError("latitude/longitude are only allowed on city or zip locations")
        if (self.latitude is None) != (self.longitude is None):
            raise ValueError("latitude and longitude must be given together")
        return self


class GoogleNetworkSettings(BaseContract):
    google_search: bool = True
    search_partners: bool = False
    display_network: bool = True


class GoogleTargetingExtension(BaseContract):
    """Google-only targeting dimensions"""
    platform: Literal["google"] = "google"
    keywords: List[str] = Field(default_factory=list)
    topics: List[str] = Field(default_factory=list)
    placements: List[str] = Field(default_factory=list)
    remarketing_lists: List[str] = Field(default_factory=list)
    custom_affinity: List[str] = Field(default_factory=list)
    custom_intent: List[str] = Field(default_factory=list)
    device_types: List[Literal["desktop", "mobile", "tablet"]] = Field(default_factory=list)
    network_settings: Optional[GoogleNetworkSettings] = None


class FacebookEducation(BaseContract):
    schools: List[str] = Field(default_factory=list)
    education_statuses: List[int] = Field(default_factory=list)
    majors: List[str] = Field(default_factory=list)


class FacebookWork(BaseContract):
    employers: List[str] = Field(default_factory=list)
    job_titles: List[str] = Field(default_factory=list)
    industries: List[str] = Field(default_factory=list)


class FacebookTargetingExtension(BaseContract):
    """Facebook/Instagram-only targeting dimensions"""
    platform: Literal["facebook"] = "facebook"
    life_events: List[str] = Field(default_factory=list)
    relationship_statuses: List[int] = Field(default_factory=list)
    education: Optional[FacebookEducation] = None
    work: Optional[FacebookWork] = None


class TikTokTargetingExtension(BaseContract):
    """TikTok-only targeting dimensions"""
    platform: Literal["tiktok"] = "tiktok"
    hashtags: List[str] = Field(default_factory=list)
    video_categories: List[str] = Field(default_factory=list)
    device_models: List[str] = Field(default_factory=list)
    operating_systems: List[Literal["ANDROID", "IOS"]] = Field(default_factory=list)
    connection_types: List[Literal["wifi", "cellular"]] = Field(default_factory=list)


class LinkedInTargetingExtension(BaseContract):
    """LinkedIn-only professional targeting dimensions"""
    platform: Literal["linkedin"] = "linkedin"
    job_titles: List[str] = Field(default_factory=list)
    job_functions: List[str] = Field(default_factory=list)
    companies: List[str] = Field(default_factory=list)
    company_sizes: List[str] = Field(default_factory=list)
    industries: List[str] = Field(default_factory=list)
    seniorities: List[str] = Field(default_factory=list)
    skills: List[str] = Field(default_factory=list)
    degrees: List[str] = Field(default_factory=list)
    fields_of_study: List[str] = Field(default_factory=list)

    @property
    def has_professional_targeting(self) -> bool:
        return any([
            self.job_titles, self.job_functions, self.companies, self.company_sizes,
            self.industries, self.seniorities, self.skills,
        ])


PlatformTargetingExtension = Annotated[
    Union[
        GoogleTargetingExtension,
        FacebookTargetingExtension,
        TikTokTargetingExtension,
        LinkedInTargetingExtension,
    ],
    Field(discriminator="platform"),
]


class UnifiedTargeting(BaseContract):
    """Platform-agnostic audience definition"""
    age_min: int = Field(18, ge=13, le=100)
    age_max: int = Field(65, ge=13, le=100)
    genders: List[Gender] = Field(default_factory=lambda: [Gender.ALL], min_length=1)
    locations: List[UnifiedLocation] = Field(default_factory=list)
    interests: List[str] = Field(default_factory=list)
    behaviors: List[str] = Field(default_factory=list)
    languages: List[str] = Field(default_factory=list, description="ISO 639-1 codes")
    extensions: List[PlatformTargetingExtension] = Field(default_factory=list)

    @field_validator("languages")
    @classmethod
    def normalize_languages(cls, v: List[str]) -> List[str]:
        return [code.strip().lower() for code in v if code.strip()]

    @model_validator(mode="after")
    def check_ranges(self) -> "UnifiedTargeting":
        if self.age_min > self.age_max:
            raise ValueError("ageMin must be less than or equal to ageMax")
        seen = set()
        for extension in self.extensions:
            if extension.platform in seen:
                raise ValueError(f"Duplicate targeting extension for platform: {extension.platform}")
            seen.add(extension.platform)
        return self

    def extension_for(self, platform: Platform) -> Optional[PlatformTargetingExtension]:
        """Return the targeting extension for one platform, or None"""
        for extension in self.extensions:
            if extension.platform == platform.value:
                return extension
        return None

    @property
    def targets_all_genders(self) -> bool:
        return Gender.ALL in self.genders or {Gender.MALE, Gender.FEMALE} <= set(self.genders)


# =============================================================================
# CREATIVE
# =============================================================================


class UnifiedMedia(BaseContract):
    url: str = Field(..., min_length=1)
    type: MediaType
    width: Optional[int] = Field(None, gt=0)
    height: Optional[int] = Field(None, gt=0)
    duration: Optional[float] = Field(None, gt=0, description="Video length in seconds")
    thumbnail: Optional[str] = None


class UnifiedCreative(BaseContract):
    """Assets a distributor maps into platform creative objects"""
    headline: str = ""
    primary_text: str = ""
    description: Optional[str] = None
    call_to_action: str = "Learn More"
    destination_url: str = ""
    media: List[UnifiedMedia] = Field(default_factory=list)

    @property
    def first_image(self) -> Optional[UnifiedMedia]:
        return next((m for m in self.media if m.type == MediaType.IMAGE), None)

    @property
    def first_video(self) -> Optional[UnifiedMedia]:
        return next((m for m in self.media if m.type == MediaType.VIDEO), None)


# =============================================================================
# CAMPAIGN
# =============================================================================


class CampaignBudget(BaseContract):
    type: BudgetType = BudgetType.DAILY
    amount: Decimal = Field(..., gt=0, description="Major currency units")
    currency: str = Field("USD", min_length=3, max_length=3)

    @field_validator("currency")
    @classmethod
    def upper_currency(cls, v: str) -> str:
        return v.upper()


class CampaignSchedule(BaseContract):
    """Start/end dates; ordering is checked by distributor validation"""
    start_date: date
    end_date: date

    @property
    def duration_days(self) -> int:
        return (self.end_date - self.start_date).days


class CampaignBidding(BaseContract):
    strategy: BiddingStrategy = BiddingStrategy.LOWEST_COST
    cap_amount: Optional[Decimal] = Field(None, gt=0)


class UnifiedCampaignData(BaseContract):
    """Platform-agnostic campaign; the sole input to every distributor"""
    name: str
    objective: CampaignObjective
    budget: CampaignBudget
    schedule: CampaignSchedule
    targeting: UnifiedTargeting = Field(default_factory=UnifiedTargeting)
    creative: UnifiedCreative = Field(default_factory=UnifiedCreative)
    bidding: Optional[CampaignBidding] = None


# =============================================================================
# CREDENTIALS
# =============================================================================


class PlatformCredentials(BaseContract):
    """
    Per-platform access material supplied by the credential store.

    Which identifiers are required depends on the platform:
    Google needs customer_id and developer_token, Facebook account_id and
    page_id, TikTok advertiser_id, LinkedIn account_id.
    """
    access_token: Optional[SecretStr] = None
    account_id: Optional[str] = None
    customer_id: Optional[str] = None
    developer_token: Optional[SecretStr] = None
    advertiser_id: Optional[str] = None
    page_id: Optional[str] = None

    @staticmethod
    def reveal(value: Optional[SecretStr]) -> Optional[str]:
        return value.get_secret_value() if value is not None else None

    def missing_fields(self, required: List[str]) -> List[str]:
        """Names of required fields that are absent or blank"""
        missing = []
        for name in required:
            value = getattr(self, name)
            if isinstance(value, SecretStr):
                value = value.get_secret_value()
            if not value or not str(value).strip():
                missing.append(name)
        return missing


# =============================================================================
# RESULTS
# =============================================================================


class ValidationResult(BaseContract):
    valid: bool
    errors: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)


class PlatformError(BaseContract):
    code: DistributionErrorCode
    message: str
    stage: Optional[DistributionStage] = None
    details: Optional[Dict[str, Any]] = None


class PlatformCampaignResult(BaseContract):
    """Outcome of distributing one campaign to one platform"""
    platform: Platform
    success: bool
    campaign_id: Optional[str] = None
    ad_group_id: Optional[str] = None
    ad_ids: List[str] = Field(default_factory=list)
    error: Optional[PlatformError] = None

    @model_validator(mode="after")
    def check_outcome(self) -> "PlatformCampaignResult":
        if self.success:
            if not (self.campaign_id and self.ad_group_id and self.ad_ids):
                raise ValueError("Successful result requires campaign, ad group and ad identifiers")
            if self.error is not None:
                raise ValueError("Successful result cannot carry an error")
        elif self.error is None:
            raise ValueError("Failed result requires an error")
        return self

    @property
    def created_ids(self) -> Dict[str, Any]:
        """Identifiers created on the platform so far"""
        ids: Dict[str, Any] = {}
        if self.campaign_id:
            ids["campaign_id"] = self.campaign_id
        if self.ad_group_id:
            ids["ad_group_id"] = self.ad_group_id
        if self.ad_ids:
            ids["ad_ids"] = list(self.ad_ids)
        return ids

    @classmethod
    def failure(
        cls,
        platform: Platform,
        code: DistributionErrorCode,
        message: str,
        stage: Optional[DistributionStage] = None,
        details: Optional[Dict[str, Any]] = None,
        campaign_id: Optional[str] = None,
        ad_group_id: Optional[str] = None,
        ad_ids: Optional[List[str]] = None,
    ) -> "PlatformCampaignResult":
        return cls(
            platform=platform,
            success=False,
            campaign_id=campaign_id,
            ad_group_id=ad_group_id,
            ad_ids=ad_ids or [],
            error=PlatformError(code=code, message=message, stage=stage, details=details),
        )


class DistributionResult(BaseContract):
    """Aggregate of per-platform results, one per requested platform"""
    total_platforms: int = Field(..., ge=0)
    successful: int = Field(..., ge=0)
    failed: int = Field(..., ge=0)
    results: List[PlatformCampaignResult] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_counts(self) -> "DistributionResult":
        if self.successful + self.failed != self.total_platforms:
            raise ValueError("successful + failed must equal totalPlatforms")
        if self.total_platforms != len(self.results):
            raise ValueError("totalPlatforms must equal the number of results")
        if sum(1 for r in self.results if r.success) != self.successful:
            raise ValueError("successful does not match the results")
        platforms = [r.platform for r in self.results]
        if len(platforms) != len(set(platforms)):
            raise ValueError("Each platform may appear only once in the results")
        return self


class CampaignPreview(BaseContract):
    """How the campaign would render on one platform"""
    platform: Platform
    native_objective: Optional[str] = None
    placement: str
    media_kind: Optional[MediaType] = None
    ad_text: str
    ad_text_length: int
    ad_text_limit: int
    call_to_action: str
    landing_url: str
    specifications: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)


# =============================================================================
# API REQUEST / RESPONSE
# =============================================================================


class DistributeRequest(BaseContract):
    """Body of POST /distribute; platforms follow credential order"""
    campaign_data: Optional[UnifiedCampaignData] = None
    credentials: Optional[Dict[Platform, PlatformCredentials]] = None


class CampaignRequest(BaseContract):
    """Body of the per-platform validate/preview endpoints"""
    campaign_data: UnifiedCampaignData


class ConnectionStatusResponse(BaseContract):
    platform: Platform
    connected: bool
    message: str


class HealthResponse(BaseModel):
    status: str
    service: str
    port: int
    version: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    dependencies: Dict[str, str] = Field(default_factory=dict)


class ReadinessResponse(BaseModel):
    ready: bool
    checks: Dict[str, bool] = Field(default_factory=dict)
    details: Dict[str, str] = Field(default_factory=dict)


class LivenessResponse(BaseModel):
    alive: bool
    uptime_seconds: float


__all__ = [
    "Platform",
    "CampaignObjective",
    "BudgetType",
    "Gender",
    "LocationType",
    "MediaType",
    "BiddingStrategy",
    "DistributionStage",
    "DistributionErrorCode",
    "UnifiedLocation",
    "GoogleNetworkSettings",
    "GoogleTargetingExtension",
    "FacebookEducation",
    "FacebookWork",
    "FacebookTargetingExtension",
    "TikTokTargetingExtension",
    "LinkedInTargetingExtension",
    "PlatformTargetingExtension",
    "UnifiedTargeting",
    "UnifiedMedia",
    "UnifiedCreative",
    "CampaignBudget",
    "CampaignSchedule",
    "CampaignBidding",
    "UnifiedCampaignData",
    "PlatformCredentials",
    "ValidationResult",
    "PlatformError",
    "PlatformCampaignResult",
    "DistributionResult",
    "CampaignPreview",
    "DistributeRequest",
    "CampaignRequest",
    "ConnectionStatusResponse",
    "HealthResponse",
    "ReadinessResponse",
    "LivenessResponse",
]
