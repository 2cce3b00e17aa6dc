#!/usr/bin/env python3
"""Ad distribution service main configuration

Combines the logging and platform API sub-configs with service identity
and the environment-seeded credential store settings.
"""
import os
from dataclasses import dataclass, field

from .logging_config import LoggingConfig
from .service_config import PlatformApiConfig


def _bool(val: str) -> bool:
    return val.lower() == "true"

def _int(val: str, default: int) -> int:
    try:
        return int(val) if val else default
    except ValueError:
        return default


@dataclass
class DistributionConfig:
    """Top-level configuration for the ad distribution service"""

    service_name: str = "ad_distribution_service"
    service_port: int = 8260
    service_version: str = "1.0.0"
    environment: str = "development"
    debug: bool = False

    # Seed the credential store with service-wide platform accounts
    # (FACEBOOK_ACCESS_TOKEN, GOOGLE_ADS_CUSTOMER_ID, ...)
    load_shared_credentials: bool = True

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    platforms: PlatformApiConfig = field(default_factory=PlatformApiConfig)

    @classmethod
    def from_env(cls) -> 'DistributionConfig':
        """Load configuration from environment variables"""
        env = os.getenv("ENV") or os.getenv("ENVIRONMENT", "development")
        return cls(
            service_name=os.getenv("SERVICE_NAME", "ad_distribution_service"),
            service_port=_int(os.getenv("SERVICE_PORT", "8260"), 8260),
            service_version=os.getenv("SERVICE_VERSION", "1.0.0"),
            environment=env,
            debug=_bool(os.getenv("DEBUG", "false")),
            load_shared_credentials=_bool(os.getenv("LOAD_SHARED_CREDENTIALS", "true")),
            logging=LoggingConfig.from_env(),
            platforms=PlatformApiConfig.from_env(),
        )
