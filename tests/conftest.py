"""
Root conftest.py - Global fixtures and configuration for all test layers.

Test Layers (Top-Down TDD):
    - api/        : HTTP contract tests against the FastAPI app
    - component/  : Component tests (fake platform clients, mocked HTTP transports)
    - unit/       : Unit tests (pure functions, no I/O)
"""
import os
import sys
from typing import Any, Dict, List

import pytest

# Set testing environment BEFORE any service imports
os.environ.setdefault("ENV", "testing")
os.environ.setdefault("LOAD_SHARED_CREDENTIALS", "false")

# Add project root to path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

from tests.contracts.ad_distribution.data_contract import AdDistributionTestDataFactory


# =============================================================================
# Test Data
# =============================================================================

@pytest.fixture
def factory() -> AdDistributionTestDataFactory:
    """Provide the ad distribution test data factory"""
    return AdDistributionTestDataFactory()


# =============================================================================
# Assertion Helpers
# =============================================================================

class AssertionHelpers:
    """Common assertion helpers"""

    @staticmethod
    def assert_http_success(response, expected_status: int = 200):
        assert response.status_code == expected_status, (
            f"Expected {expected_status}, got {response.status_code}: {response.text}"
        )

    @staticmethod
    def assert_has_fields(data: Dict[str, Any], fields: List[str]):
        missing = [f for f in fields if f not in data]
        assert not missing, f"Missing fields: {missing}"


@pytest.fixture
def assertions() -> AssertionHelpers:
    return AssertionHelpers()


# =============================================================================
# Markers
# =============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line("markers", "api: API contract tests")
    config.addinivalue_line("markers", "component: Component tests")
    config.addinivalue_line("markers", "unit: Unit tests")
