"""
Simulated Platform Client

Stand-in transport for platforms without a live API integration. Waits a
fixed delay per call and returns fabricated identifiers, behind the same
interface as the live clients so swapping in a real one needs no
distributor change.
"""

import asyncio
import logging
from typing import Any, Dict, List, Tuple
from uuid import uuid4

from ..models import Platform

logger = logging.getLogger(__name__)


class SimulatedPlatformClient:
    """Fake three-step create sequence for one platform"""

    def __init__(self, platform: Platform, delay_seconds: float = 1.0):
        self.platform = platform
        self.delay_seconds = delay_seconds
        self.requests: List[Tuple[str, Dict[str, Any]]] = []

    async def _simulate(self, operation: str, payload: Dict[str, Any]) -> None:
        self.requests.append((operation, payload))
        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)

    def _make_id(self, kind: str) -> str:
        return f"{self.platform.value}_{kind}_{uuid4().hex[:16]}"

    async def create_campaign(self, payload: Dict[str, Any]) -> str:
        await self._simulate("create_campaign", payload)
        campaign_id = self._make_id("camp")
        logger.info(f"Simulated {self.platform.value} campaign {campaign_id}")
        return campaign_id

    async def create_ad_group(self, campaign_id: str, payload: Dict[str, Any]) -> str:
        await self._simulate("create_ad_group", dict(payload, campaign_id=campaign_id))
        return self._make_id("adgroup")

    async def create_ads(self, ad_group_id: str, payloads: List[Dict[str, Any]]) -> List[str]:
        ad_ids = []
        for payload in payloads:
            await self._simulate("create_ad", dict(payload, ad_group_id=ad_group_id))
            ad_ids.append(self._make_id("ad"))
        return ad_ids

    async def close(self) -> None:
        pass


__all__ = ["SimulatedPlatformClient"]
