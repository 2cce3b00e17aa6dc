"""
API Test Layer Configuration (Layer 1)

HTTP contract tests against the FastAPI application, with the service
factory swapped for one wired to simulated platform transports.

Usage:
    pytest tests/api -v                    # Run all API tests
    pytest tests/api -v -k "status"        # Run status endpoint tests
    pytest tests/api -v --tb=short         # Short traceback
"""

import os
import sys

import pytest

os.environ.setdefault("ENV", "testing")
os.environ.setdefault("LOAD_SHARED_CREDENTIALS", "false")

# Add project root
sys.path.insert(
    0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
)


def pytest_configure(config):
    """Configure custom markers"""
    config.addinivalue_line(
        "markers", "api: marks tests as API contract tests"
    )
