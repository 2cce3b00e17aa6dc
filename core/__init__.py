#!/usr/bin/env python3
"""
Core Module for Microservices Architecture

Shared infrastructure used by the ad distribution service.

COMPONENTS:
    - config/: dataclass configuration loaded from environment (+ .env files)
    - auth_dependencies.py: FastAPI authentication dependencies
    - service_client_base.py: httpx base client for remote HTTP APIs

USAGE:
    from core.config import get_settings
    from core.service_client_base import BaseServiceClient

    settings = get_settings()
"""
