"""
Component Test Fixtures for Ad Distribution Service

Provides a scriptable fake platform client and distributors wired to it.
Uses AdDistributionTestDataFactory from the data contract.
"""

import pytest
from typing import Any, Dict, List, Optional

import sys
import os

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../../.."))

from core.service_client_base import ServiceRequestError, ServiceTransportError
from microservices.ad_distribution_service.clients.credential_store import InMemoryCredentialStore
from microservices.ad_distribution_service.distributors import (
    DistributorRegistry,
    FacebookDistributor,
    GoogleDistributor,
    LinkedInDistributor,
    TikTokDistributor,
)
from microservices.ad_distribution_service.distribution_service import AdDistributionService
from microservices.ad_distribution_service.models import Platform


# ====================
# Fake Platform Client
# ====================


class FakePlatformClient:
    """In-memory platform client; ``fail_at`` picks the create call that errors"""

    def __init__(
        self,
        platform: Platform,
        fail_at: Optional[str] = None,
        error: Optional[Exception] = None,
        ad_ids: Optional[List[str]] = None,
    ):
        self.platform = platform
        self.fail_at = fail_at
        self.error = error or ServiceRequestError(
            "Rejected by platform", service_name=platform.value, status_code=400, error_code="100"
        )
        self.ad_ids = ad_ids
        self.calls: List[str] = []
        self.payloads: Dict[str, Any] = {}
        self.closed = False

    def _maybe_fail(self, operation: str) -> None:
        self.calls.append(operation)
        if self.fail_at == operation:
            raise self.error

    async def create_campaign(self, payload: Dict[str, Any]) -> str:
        self.payloads["campaign"] = payload
        self._maybe_fail("campaign")
        return f"{self.platform.value}-campaign-1"

    async def create_ad_group(self, campaign_id: str, payload: Dict[str, Any]) -> str:
        self.payloads["ad_group"] = payload
        self._maybe_fail("ad_group")
        return f"{self.platform.value}-adgroup-1"

    async def create_ads(self, ad_group_id: str, payloads: List[Dict[str, Any]]) -> List[str]:
        self.payloads["ads"] = payloads
        self._maybe_fail("ad")
        if self.ad_ids is not None:
            return self.ad_ids
        return [f"{self.platform.value}-ad-{i + 1}" for i in range(len(payloads))]

    async def close(self) -> None:
        self.closed = True


class FakeClientFactory:
    """Client factory handing out FakePlatformClients and remembering them"""

    def __init__(self, platform: Platform, **client_kwargs):
        self.platform = platform
        self.client_kwargs = client_kwargs
        self.clients: List[FakePlatformClient] = []
        self.credentials_seen = []

    def __call__(self, credentials):
        self.credentials_seen.append(credentials)
        client = FakePlatformClient(self.platform, **self.client_kwargs)
        self.clients.append(client)
        return client

    @property
    def last(self) -> FakePlatformClient:
        return self.clients[-1]


DISTRIBUTOR_CLASSES = {
    Platform.GOOGLE: GoogleDistributor,
    Platform.FACEBOOK: FacebookDistributor,
    Platform.TIKTOK: TikTokDistributor,
    Platform.LINKEDIN: LinkedInDistributor,
}


def make_distributor(platform: Platform, **client_kwargs):
    """Distributor for a platform wired to a FakeClientFactory"""
    client_factory = FakeClientFactory(platform, **client_kwargs)
    return DISTRIBUTOR_CLASSES[platform](client_factory), client_factory


# ====================
# Fixtures
# ====================


@pytest.fixture
def build_distributor():
    """Callable: build_distributor(platform, fail_at=..., error=...) -> (distributor, client_factory)"""
    return make_distributor


@pytest.fixture
def transport_error():
    return ServiceTransportError("google_ads request timed out: POST /x", service_name="google_ads")


@pytest.fixture
def client_factories():
    """One FakeClientFactory per platform"""
    return {platform: FakeClientFactory(platform) for platform in Platform}


@pytest.fixture
def fake_registry(client_factories):
    """Registry where every platform succeeds through a fake client"""
    registry = DistributorRegistry()
    for platform, client_factory in client_factories.items():
        registry.register(DISTRIBUTOR_CLASSES[platform](client_factory))
    return registry


@pytest.fixture
def credential_store():
    return InMemoryCredentialStore()


@pytest.fixture
def service(fake_registry, credential_store):
    return AdDistributionService(fake_registry, credential_store)
