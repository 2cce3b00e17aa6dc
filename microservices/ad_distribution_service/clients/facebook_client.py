"""
Facebook Graph Client

Client for the Facebook Marketing API (Graph API). Campaign, ad set,
ad creative and ad are created as edges of the ad account.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from core.service_client_base import BaseServiceClient, ServiceClientError, ServiceRequestError

from ..models import PlatformCredentials

logger = logging.getLogger(__name__)


def ad_account_path(account_id: str) -> str:
    """Graph API ad account node, always act_ prefixed"""
    account_id = account_id.strip()
    return account_id if account_id.startswith("act_") else f"act_{account_id}"


class FacebookGraphClient(BaseServiceClient):
    """Client for the Facebook Graph Marketing API"""

    service_name = "facebook_graph"

    def __init__(
        self,
        credentials: PlatformCredentials,
        base_url: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.ad_account = ad_account_path(credentials.account_id or "")
        self._access_token = PlatformCredentials.reveal(credentials.access_token) or ""
        super().__init__(base_url, timeout=timeout, transport=transport)

    def _build_default_headers(self) -> Dict[str, str]:
        headers = super()._build_default_headers()
        headers["Authorization"] = f"Bearer {self._access_token}"
        return headers

    async def _create(self, edge: str, payload: Dict[str, Any]) -> str:
        data = await self.post(f"/{self.ad_account}/{edge}", json=payload)
        object_id = data.get("id")
        if not object_id:
            raise ServiceRequestError(
                f"Graph API {edge} response did not include an id",
                service_name=self.service_name,
            )
        return str(object_id)

    async def create_campaign(self, payload: Dict[str, Any]) -> str:
        campaign_id = await self._create("campaigns", payload)
        logger.info(f"Created Facebook campaign {campaign_id} in {self.ad_account}")
        return campaign_id

    async def create_ad_group(self, campaign_id: str, payload: Dict[str, Any]) -> str:
        return await self._create("adsets", dict(payload, campaign_id=campaign_id))

    async def create_ads(self, ad_group_id: str, payloads: List[Dict[str, Any]]) -> List[str]:
        """Each payload holds a ``creative`` and an ``ad``; the creative is created first"""
        ad_ids: List[str] = []
        creative_ids: List[str] = []
        try:
            for payload in payloads:
                creative_ids.append(await self._create("adcreatives", payload["creative"]))
                ad = dict(payload["ad"], adset_id=ad_group_id, creative={"creative_id": creative_ids[-1]})
                ad_ids.append(await self._create("ads", ad))
        except ServiceClientError as e:
            if ad_ids:
                e.created_resources["ad_ids"] = ad_ids
            # creatives not yet attached to an ad
            if creative_ids[len(ad_ids):]:
                e.created_resources["creative_ids"] = creative_ids[len(ad_ids):]
            raise
        return ad_ids


__all__ = ["FacebookGraphClient", "ad_account_path"]
