"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For standard test utilities, see tests/__init__.py
"""

import pytest


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "db: marks tests as requiring database (deselect with '-m \"not db\"')"
    )


@pytest.fixture(scope="session")
def test_database_url():
    """URL of an external test database, or skip."""
    from tests import TEST_DB_URL, is_database_available

    if not is_database_available():
        pytest.skip("Test database not available (set TEST_DATABASE_URL)")
    return TEST_DB_URL
