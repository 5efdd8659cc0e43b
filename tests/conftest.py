"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For standard test utilities, see tests/__init__.py
"""

import os
import pytest


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "db: marks tests as requiring database (deselect with '-m \"not db\"')"
    )


@pytest.fixture(scope="session")
def test_database():
    """
    Session-scoped fixture that provides a PostgreSQL database URL with the
    schema created.

    Uses TEST_DATABASE_URL when set, otherwise starts a container with
    testcontainers. Skips when neither is possible.
    """
    from tests import SKIP_DB_TESTS, check_db_available

    if SKIP_DB_TESTS:
        pytest.skip("Database tests disabled (SKIP_DB_TESTS=true)")

    from sqlalchemy import create_engine
    from database.models import Base

    external_url = os.environ.get("TEST_DATABASE_URL")
    if external_url:
        if not check_db_available(external_url):
            pytest.skip("External database not available")
        engine = create_engine(external_url)
        Base.metadata.create_all(engine)
        engine.dispose()
        yield external_url
        return

    try:
        from testcontainers.postgres import PostgresContainer

        postgres = PostgresContainer(
            image="postgres:16-alpine",
            username="testuser",
            password="testpass",
            dbname="trustsignal_test"
        )
        postgres.start()
    except Exception as e:
        pytest.skip(f"Could not start test database container: {e}")

    try:
        db_url = postgres.get_connection_url()
        engine = create_engine(db_url)
        Base.metadata.create_all(engine)
        engine.dispose()

        print(f"\n✓ Test database started: {db_url}")
        yield db_url
    finally:
        postgres.stop()
        print("\n✓ Test database stopped")
