"""
Component Test Layer Configuration (Layer 2)

Structure:
    tests/component/
    └── ad_distribution/   Distributors, clients and orchestrator with fakes

Usage:
    pytest tests/component -v
    pytest tests/component/ad_distribution -v
"""
import os
import sys

import pytest

# Set testing environment BEFORE any imports
os.environ["ENV"] = "testing"
os.environ["ENVIRONMENT"] = "testing"
os.environ["LOAD_SHARED_CREDENTIALS"] = "false"

# Add project root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))


def pytest_configure(config):
    """Configure custom markers"""
    config.addinivalue_line(
        "markers", "component: marks tests as component tests"
    )


def pytest_collection_modifyitems(config, items):
    """Tag everything under tests/component with the component marker"""
    for item in items:
        if "tests/component" in str(item.fspath).replace(os.sep, "/"):
            item.add_marker(pytest.mark.component)
