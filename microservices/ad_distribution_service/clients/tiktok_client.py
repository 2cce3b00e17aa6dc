"""
TikTok Business Client

Client for the TikTok Business (Marketing) API. Every response is wrapped
in a ``{code, message, data}`` envelope where ``code == 0`` means success,
so HTTP 200 alone does not mean the call worked.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from core.service_client_base import BaseServiceClient, ServiceRequestError

from ..models import PlatformCredentials

logger = logging.getLogger(__name__)


class TikTokBusinessClient(BaseServiceClient):
    """Client for the TikTok Business API"""

    service_name = "tiktok_business"

    def __init__(
        self,
        credentials: PlatformCredentials,
        base_url: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.advertiser_id = credentials.advertiser_id or ""
        self._access_token = PlatformCredentials.reveal(credentials.access_token) or ""
        super().__init__(base_url, timeout=timeout, transport=transport)

    def _build_default_headers(self) -> Dict[str, str]:
        headers = super()._build_default_headers()
        headers["Access-Token"] = self._access_token
        return headers

    async def _call(self, path: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """POST and unwrap the response envelope"""
        body = await self.post(path, json=dict(payload, advertiser_id=self.advertiser_id))
        if body.get("code") != 0:
            raise ServiceRequestError(
                body.get("message") or "TikTok API error",
                service_name=self.service_name,
                error_code=str(body.get("code")),
            )
        return body.get("data") or {}

    def _require(self, data: Dict[str, Any], field: str) -> str:
        value = data.get(field)
        if not value:
            raise ServiceRequestError(
                f"TikTok response did not include {field}",
                service_name=self.service_name,
            )
        return str(value)

    async def create_campaign(self, payload: Dict[str, Any]) -> str:
        data = await self._call("/campaign/create/", payload)
        campaign_id = self._require(data, "campaign_id")
        logger.info(f"Created TikTok campaign {campaign_id}")
        return campaign_id

    async def create_ad_group(self, campaign_id: str, payload: Dict[str, Any]) -> str:
        data = await self._call("/adgroup/create/", dict(payload, campaign_id=campaign_id))
        return self._require(data, "adgroup_id")

    async def create_ads(self, ad_group_id: str, payloads: List[Dict[str, Any]]) -> List[str]:
        data = await self._call("/ad/create/", {"adgroup_id": ad_group_id, "creatives": payloads})
        ad_ids = data.get("ad_ids") or ([data["ad_id"]] if data.get("ad_id") else [])
        if not ad_ids:
            raise ServiceRequestError(
                "TikTok response did not include ad ids",
                service_name=self.service_name,
            )
        return [str(ad_id) for ad_id in ad_ids]


__all__ = ["TikTokBusinessClient"]
