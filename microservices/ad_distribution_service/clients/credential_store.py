"""
Credential Store

In-memory credential store keyed by (user id, platform). A ``None`` user id
holds the service-wide account, used when a user has nothing of their own
on file. Credentials live only in process memory and are never written out.
"""

import logging
import os
from typing import Dict, Optional, Tuple

from ..models import Platform, PlatformCredentials

logger = logging.getLogger(__name__)

# Environment variable per credential field, per platform
ENV_CREDENTIALS: Dict[Platform, Dict[str, str]] = {
    Platform.GOOGLE: {
        "access_token": "GOOGLE_ADS_ACCESS_TOKEN",
        "customer_id": "GOOGLE_ADS_CUSTOMER_ID",
        "developer_token": "GOOGLE_ADS_DEVELOPER_TOKEN",
    },
    Platform.FACEBOOK: {
        "access_token": "FACEBOOK_ACCESS_TOKEN",
        "account_id": "FACEBOOK_AD_ACCOUNT_ID",
        "page_id": "FACEBOOK_PAGE_ID",
    },
    Platform.TIKTOK: {
        "access_token": "TIKTOK_ACCESS_TOKEN",
        "advertiser_id": "TIKTOK_ADVERTISER_ID",
    },
    Platform.LINKEDIN: {
        "access_token": "LINKEDIN_ACCESS_TOKEN",
        "account_id": "LINKEDIN_AD_ACCOUNT_ID",
    },
}


class InMemoryCredentialStore:
    """Process-local credential store"""

    def __init__(self):
        self._credentials: Dict[Tuple[Optional[str], Platform], PlatformCredentials] = {}

    async def get_credentials(
        self, user_id: Optional[str], platform: Platform
    ) -> Optional[PlatformCredentials]:
        credentials = self._credentials.get((user_id, platform))
        if credentials is None and user_id is not None:
            credentials = self._credentials.get((None, platform))
        return credentials

    async def save_credentials(
        self, user_id: Optional[str], platform: Platform, credentials: PlatformCredentials
    ) -> None:
        self._credentials[(user_id, platform)] = credentials
        logger.info(f"Stored {platform.value} credentials for {user_id or 'service account'}")

    async def remove_credentials(self, user_id: Optional[str], platform: Platform) -> bool:
        removed = self._credentials.pop((user_id, platform), None) is not None
        if removed:
            logger.info(f"Removed {platform.value} credentials for {user_id or 'service account'}")
        return removed

    @classmethod
    def from_env(cls) -> "InMemoryCredentialStore":
        """Seed service-wide accounts from environment variables"""
        store = cls()
        for platform, fields in ENV_CREDENTIALS.items():
            values = {name: os.getenv(env_key) for name, env_key in fields.items()}
            if not values.get("access_token"):
                continue
            store._credentials[(None, platform)] = PlatformCredentials(
                **{k: v for k, v in values.items() if v}
            )
            logger.info(f"Loaded service-wide {platform.value} credentials from environment")
        return store


__all__ = ["InMemoryCredentialStore", "ENV_CREDENTIALS"]
