"""
Ad Distribution Service Clients

Platform API clients and the credential store.
"""

from .credential_store import InMemoryCredentialStore
from .facebook_client import FacebookGraphClient
from .google_ads_client import GoogleAdsClient
from .simulated_client import SimulatedPlatformClient
from .tiktok_client import TikTokBusinessClient

__all__ = [
    "InMemoryCredentialStore",
    "FacebookGraphClient",
    "GoogleAdsClient",
    "SimulatedPlatformClient",
    "TikTokBusinessClient",
]
