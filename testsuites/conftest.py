"""
================================================================================
Root Pytest Configuration
================================================================================

This module provides the root pytest configuration for the entire test suite.
It registers common markers and configures logging once per session.

================================================================================
"""

import pytest

from ui_toolkit.common import init_logger


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    init_logger()

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "ui: Tests that drive a real browser"
    )
    config.addinivalue_line(
        "markers", "unit: Tests that run against in-memory fakes"
    )

    # Feature markers
    config.addinivalue_line(
        "markers", "table: Tests related to web table lookups"
    )
    config.addinivalue_line(
        "markers", "forms: Tests related to form field interactions"
    )


def pytest_collection_modifyitems(config, items):
    """
    Modify collected test items.

    Adds the domain marker from the directory a test lives in.
    """
    for item in items:
        if "ui_testing/" in item.nodeid:
            item.add_marker(pytest.mark.ui)

        if "testsuites/unit/" in item.nodeid:
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "Web Table & User Action Helpers",
        "=" * 60,
        "",
    ]
