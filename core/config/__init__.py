#!/usr/bin/env python3
"""Modular configuration system for the ad distribution service

Configuration hierarchy:
- distribution_config: service identity, combines the sub-configs
- service_config: remote advertising platform endpoints and transport settings
- logging_config: Logging configuration
"""
import os
from dotenv import load_dotenv
from .logging_config import LoggingConfig
from .service_config import PlatformApiConfig
from .distribution_config import DistributionConfig

# Load environment file based on ENV
env = os.getenv("ENV") or os.getenv("ENVIRONMENT", "development")
env_files = {
    "development": "deployment/environments/dev.env",
    "dev": "deployment/environments/dev.env",
    "testing": "deployment/environments/test.env",
    "test": "deployment/environments/test.env",
    "staging": "deployment/environments/staging.env",
    "production": "deployment/environments/production.env",
}
env_file = env_files.get(env, "deployment/environments/dev.env")
load_dotenv(env_file, override=False)

# Create global settings instance
settings = DistributionConfig.from_env()

def get_settings() -> DistributionConfig:
    """Get global settings instance"""
    return settings

def reload_settings() -> DistributionConfig:
    """Reload settings from environment"""
    global settings
    settings = DistributionConfig.from_env()
    return settings

__all__ = [
    'DistributionConfig',
    'get_settings',
    'reload_settings',
    'settings',
    'LoggingConfig',
    'PlatformApiConfig',
]
