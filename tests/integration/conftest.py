"""
Integration test configuration fixtures.
"""

import pytest

from apiharness.api_client import AccountClient
from apiharness.core.identity import generate_user_data
from apiharness.core.lifecycle import close_session, open_session


# Fixture Scope:
# - account_client: one HTTP session for the whole run
# - user_data / session: fresh per test, so every test owns its account

@pytest.fixture(scope="session")
def account_client(settings):
    with AccountClient(base_url=settings.account_api_url, timeout=settings.http_timeout) as client:
        yield client


@pytest.fixture
def user_data():
    return generate_user_data()


@pytest.fixture
def session(account_client, user_data):
    """Created and authenticated before the test, deleted after it whatever happened."""
    live_session = open_session(account_client, user_data)
    yield live_session
    close_session(account_client, live_session)
