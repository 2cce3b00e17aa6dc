"""
Google Ads Client

REST client for the Google Ads API mutate endpoints. Creates the campaign
budget and campaign, the ad group with its targeting criteria, then the
ad group ads.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from core.service_client_base import BaseServiceClient, ServiceClientError, ServiceRequestError

from ..models import PlatformCredentials

logger = logging.getLogger(__name__)


def resource_id(resource_name: str) -> str:
    """customers/123/campaigns/456 -> 456"""
    return resource_name.rsplit("/", 1)[-1]


class GoogleAdsClient(BaseServiceClient):
    """Client for the Google Ads REST API"""

    service_name = "google_ads"

    def __init__(
        self,
        credentials: PlatformCredentials,
        base_url: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.customer_id = (credentials.customer_id or "").replace("-", "")
        self._access_token = PlatformCredentials.reveal(credentials.access_token) or ""
        self._developer_token = PlatformCredentials.reveal(credentials.developer_token) or ""
        super().__init__(base_url, timeout=timeout, transport=transport)

    def _build_default_headers(self) -> Dict[str, str]:
        headers = super()._build_default_headers()
        headers["Authorization"] = f"Bearer {self._access_token}"
        headers["developer-token"] = self._developer_token
        return headers

    async def _mutate(self, resource: str, operations: List[Dict[str, Any]]) -> List[str]:
        """Run a mutate call and return the created resource names"""
        data = await self.post(
            f"/customers/{self.customer_id}/{resource}:mutate",
            json={"operations": operations},
        )
        results = data.get("results") or []
        if len(results) != len(operations) or not all(r.get("resourceName") for r in results):
            raise ServiceRequestError(
                f"Unexpected {resource} mutate response",
                service_name=self.service_name,
            )
        return [r["resourceName"] for r in results]

    async def create_campaign(self, payload: Dict[str, Any]) -> str:
        """Create the campaign budget, then the campaign bound to it"""
        budget_names = await self._mutate("campaignBudgets", [{"create": payload["budget"]}])
        campaign = dict(payload["campaign"], campaignBudget=budget_names[0])
        try:
            campaign_names = await self._mutate("campaigns", [{"create": campaign}])
        except ServiceClientError as e:
            e.created_resources["campaign_budget"] = budget_names[0]
            raise
        logger.info(f"Created Google Ads campaign {campaign_names[0]}")
        return resource_id(campaign_names[0])

    async def create_ad_group(self, campaign_id: str, payload: Dict[str, Any]) -> str:
        """Create the ad group and attach its targeting criteria"""
        campaign_name = f"customers/{self.customer_id}/campaigns/{campaign_id}"
        ad_group = dict(payload["ad_group"], campaign=campaign_name)
        ad_group_name = (await self._mutate("adGroups", [{"create": ad_group}]))[0]

        criteria = [dict(c, adGroup=ad_group_name) for c in payload.get("criteria", [])]
        if criteria:
            try:
                await self._mutate("adGroupCriteria", [{"create": c} for c in criteria])
            except ServiceClientError as e:
                e.created_resources["ad_group_id"] = resource_id(ad_group_name)
                raise
            logger.debug(f"Attached {len(criteria)} criteria to {ad_group_name}")

        return resource_id(ad_group_name)

    async def create_ads(self, ad_group_id: str, payloads: List[Dict[str, Any]]) -> List[str]:
        ad_group_name = f"customers/{self.customer_id}/adGroups/{ad_group_id}"
        names = await self._mutate(
            "adGroupAds",
            [{"create": dict(p, adGroup=ad_group_name)} for p in payloads],
        )
        return [resource_id(name) for name in names]


__all__ = ["GoogleAdsClient", "resource_id"]
