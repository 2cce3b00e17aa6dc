#!/usr/bin/env python3
"""Advertising platform API configuration

Endpoints, API versions and transport settings for the remote marketing
APIs the distributors talk to (Google Ads, Facebook Graph, TikTok Business).
LinkedIn has no live integration and always uses the simulated transport.
"""
import os
from dataclasses import dataclass

def _bool(val: str) -> bool:
    return val.lower() == "true"

def _float(val: str, default: float) -> float:
    try:
        return float(val) if val else default
    except ValueError:
        return default


@dataclass
class PlatformApiConfig:
    """Remote advertising platform endpoints"""

    # ===========================================
    # Google Ads REST
    # ===========================================
    google_ads_base_url: str = "https://googleads.googleapis.com"
    google_ads_api_version: str = "v14"

    # ===========================================
    # Facebook Graph (Marketing API)
    # ===========================================
    facebook_graph_base_url: str = "https://graph.facebook.com"
    facebook_graph_api_version: str = "v18.0"

    # ===========================================
    # TikTok Business API
    # ===========================================
    tiktok_base_url: str = "https://business-api.tiktok.com/open_api"
    tiktok_api_version: str = "v1.3"
    tiktok_live_api_enabled: bool = False

    # ===========================================
    # Transport
    # ===========================================
    # Per remote call, not per distribution
    request_timeout_seconds: float = 30.0
    # Stand-in latency for platforms without a live client
    simulated_delay_seconds: float = 1.0

    @property
    def google_ads_url(self) -> str:
        return f"{self.google_ads_base_url.rstrip('/')}/{self.google_ads_api_version}"

    @property
    def facebook_graph_url(self) -> str:
        return f"{self.facebook_graph_base_url.rstrip('/')}/{self.facebook_graph_api_version}"

    @property
    def tiktok_url(self) -> str:
        return f"{self.tiktok_base_url.rstrip('/')}/{self.tiktok_api_version}"

    @classmethod
    def from_env(cls) -> 'PlatformApiConfig':
        """Load platform API configuration from environment variables"""
        return cls(
            google_ads_base_url=os.getenv("GOOGLE_ADS_BASE_URL", "https://googleads.googleapis.com"),
            google_ads_api_version=os.getenv("GOOGLE_ADS_API_VERSION", "v14"),
            facebook_graph_base_url=os.getenv("FACEBOOK_GRAPH_BASE_URL", "https://graph.facebook.com"),
            facebook_graph_api_version=os.getenv("FACEBOOK_GRAPH_API_VERSION", "v18.0"),
            tiktok_base_url=os.getenv("TIKTOK_BASE_URL", "https://business-api.tiktok.com/open_api"),
            tiktok_api_version=os.getenv("TIKTOK_API_VERSION", "v1.3"),
            tiktok_live_api_enabled=_bool(os.getenv("TIKTOK_LIVE_API_ENABLED", "false")),
            request_timeout_seconds=_float(os.getenv("PLATFORM_REQUEST_TIMEOUT", "30"), 30.0),
            simulated_delay_seconds=_float(os.getenv("SIMULATED_PLATFORM_DELAY", "1.0"), 1.0),
        )
