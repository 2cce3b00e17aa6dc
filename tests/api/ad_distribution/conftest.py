"""
API Test Fixtures for Ad Distribution Service

Swaps the module-level factory in ``main`` for one whose Google and
Facebook clients talk to httpx mock transports. TikTok and LinkedIn use
the simulated client with no delay.
"""

import asyncio
import json
from typing import List
from unittest.mock import patch

import httpx
import pytest
from fastapi.testclient import TestClient

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../../.."))

from core.auth_dependencies import INTERNAL_SERVICE_SECRET
from core.config import DistributionConfig, PlatformApiConfig
from microservices.ad_distribution_service.clients.credential_store import InMemoryCredentialStore
from microservices.ad_distribution_service.factory import AdDistributionServiceFactory
from microservices.ad_distribution_service.main import app
from microservices.ad_distribution_service.models import Platform


class GoogleAdsHandler:
    """Answers every mutate call with one resource name per operation"""

    def __init__(self):
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        collection = request.url.path.rsplit("/", 1)[-1].split(":")[0]
        operations = json.loads(request.content)["operations"]
        results = [
            {"resourceName": f"customers/1234567890/{collection}/{index + 1}"}
            for index in range(len(operations))
        ]
        return httpx.Response(200, json={"results": results})


class GraphApiHandler:
    """Answers every Graph API create call with a fresh id"""

    def __init__(self):
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(200, json={"id": f"1202000000{len(self.requests)}"})


@pytest.fixture
def google_handler():
    return GoogleAdsHandler()


@pytest.fixture
def graph_handler():
    return GraphApiHandler()


@pytest.fixture
def service_factory(google_handler, graph_handler):
    """Initialized factory with an empty credential store"""
    config = DistributionConfig(
        load_shared_credentials=False,
        platforms=PlatformApiConfig(simulated_delay_seconds=0),
    )
    service_factory = AdDistributionServiceFactory(
        config,
        credential_store=InMemoryCredentialStore(),
        transports={
            Platform.GOOGLE: httpx.MockTransport(google_handler),
            Platform.FACEBOOK: httpx.MockTransport(graph_handler),
        },
    )
    asyncio.run(service_factory.initialize())
    return service_factory


@pytest.fixture
def client(service_factory):
    """TestClient without lifespan so the patched factory stays in place"""
    with patch("microservices.ad_distribution_service.main.factory", service_factory):
        yield TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def auth_headers():
    return {"user-id": "usr_api_test"}


@pytest.fixture
def internal_headers():
    return {
        "X-Internal-Service": "true",
        "X-Internal-Service-Secret": INTERNAL_SERVICE_SECRET,
    }
