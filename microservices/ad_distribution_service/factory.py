"""
Ad Distribution Service Factory

Factory for creating ad distribution service instances with proper dependency injection.
"""

import logging
from typing import Dict, Optional

import httpx

from core.config import DistributionConfig, PlatformApiConfig

from .clients.credential_store import InMemoryCredentialStore
from .clients.facebook_client import FacebookGraphClient
from .clients.google_ads_client import GoogleAdsClient
from .clients.simulated_client import SimulatedPlatformClient
from .clients.tiktok_client import TikTokBusinessClient
from .distribution_service import AdDistributionService
from .distributors import (
    DistributorRegistry,
    FacebookDistributor,
    GoogleDistributor,
    LinkedInDistributor,
    TikTokDistributor,
)
from .models import Platform, PlatformCredentials
from .protocols import CredentialStoreProtocol

logger = logging.getLogger(__name__)


def build_registry(
    config: PlatformApiConfig,
    transports: Optional[Dict[Platform, httpx.AsyncBaseTransport]] = None,
) -> DistributorRegistry:
    """
    Register one distributor per platform with its client factory.

    ``transports`` lets callers (tests) route a platform's HTTP traffic
    through a custom httpx transport.
    """
    transports = transports or {}
    timeout = config.request_timeout_seconds

    def google_client(credentials: PlatformCredentials):
        return GoogleAdsClient(
            credentials, config.google_ads_url, timeout=timeout,
            transport=transports.get(Platform.GOOGLE),
        )

    def facebook_client(credentials: PlatformCredentials):
        return FacebookGraphClient(
            credentials, config.facebook_graph_url, timeout=timeout,
            transport=transports.get(Platform.FACEBOOK),
        )

    def tiktok_client(credentials: PlatformCredentials):
        if config.tiktok_live_api_enabled:
            return TikTokBusinessClient(
                credentials, config.tiktok_url, timeout=timeout,
                transport=transports.get(Platform.TIKTOK),
            )
        return SimulatedPlatformClient(Platform.TIKTOK, config.simulated_delay_seconds)

    def linkedin_client(credentials: PlatformCredentials):
        return SimulatedPlatformClient(Platform.LINKEDIN, config.simulated_delay_seconds)

    registry = DistributorRegistry()
    registry.register(GoogleDistributor(google_client))
    registry.register(FacebookDistributor(facebook_client))
    registry.register(TikTokDistributor(tiktok_client))
    registry.register(LinkedInDistributor(linkedin_client))
    return registry


class AdDistributionServiceFactory:
    """Factory for creating ad distribution service components"""

    def __init__(
        self,
        config: Optional[DistributionConfig] = None,
        credential_store: Optional[CredentialStoreProtocol] = None,
        transports: Optional[Dict[Platform, httpx.AsyncBaseTransport]] = None,
    ):
        self.config = config or DistributionConfig.from_env()
        self._transports = transports
        self._credential_store: Optional[CredentialStoreProtocol] = credential_store
        self._registry: Optional[DistributorRegistry] = None
        self._service: Optional[AdDistributionService] = None

    async def initialize(self) -> None:
        """Initialize all components"""
        logger.info("Initializing Ad Distribution Service components...")

        if self._credential_store is None:
            if self.config.load_shared_credentials:
                self._credential_store = InMemoryCredentialStore.from_env()
            else:
                self._credential_store = InMemoryCredentialStore()

        self._registry = build_registry(self.config.platforms, self._transports)

        self._service = AdDistributionService(
            registry=self._registry,
            credential_store=self._credential_store,
        )

        logger.info(
            f"Ad Distribution Service components initialized "
            f"(platforms: {', '.join(p.value for p in self._registry.platforms)})"
        )

    async def close(self) -> None:
        """Close all components"""
        # Platform clients are opened and closed per distribution
        logger.info("Closing Ad Distribution Service components...")
        self._service = None
        logger.info("Ad Distribution Service components closed")

    @property
    def registry(self) -> DistributorRegistry:
        """Get distributor registry"""
        if self._registry is None:
            raise RuntimeError("Factory not initialized. Call initialize() first.")
        return self._registry

    @property
    def service(self) -> AdDistributionService:
        """Get ad distribution service"""
        if self._service is None:
            raise RuntimeError("Factory not initialized. Call initialize() first.")
        return self._service

    @property
    def credential_store(self) -> CredentialStoreProtocol:
        """Get credential store"""
        if self._credential_store is None:
            raise RuntimeError("Factory not initialized. Call initialize() first.")
        return self._credential_store


# Global factory instance
_factory: Optional[AdDistributionServiceFactory] = None


async def get_factory() -> AdDistributionServiceFactory:
    """Get or create factory instance"""
    global _factory
    if _factory is None:
        _factory = AdDistributionServiceFactory()
        await _factory.initialize()
    return _factory


async def close_factory() -> None:
    """Close factory instance"""
    global _factory
    if _factory:
        await _factory.close()
        _factory = None


__all__ = [
    "AdDistributionServiceFactory",
    "build_registry",
    "get_factory",
    "close_factory",
]
