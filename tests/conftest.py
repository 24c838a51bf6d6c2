"""
Shared fixtures and the switch for the live-API suite.
"""

import pytest
import responses

from apiharness.api_client import AccountClient, ProfileClient
from apiharness.config import HarnessSettings, configure_logging
from apiharness.mocks.profile_stubs import MockFixture


def pytest_addoption(parser):
    parser.addoption("--run-live", action="store_true", default=False, help="run tests marked 'live'")


def pytest_configure(config):
    configure_logging()


def pytest_collection_modifyitems(config, items):
    if config.getoption("--run-live") or HarnessSettings.from_env().run_live_tests:
        return
    skip_live = pytest.mark.skip(reason="live API tests disabled (use --run-live or RUN_LIVE_TESTS=true)")
    for item in items:
        if "live" in item.keywords:
            item.add_marker(skip_live)


@pytest.fixture(scope="session")
def settings():
    return HarnessSettings.from_env()


@pytest.fixture
def stub_account_url():
    return "https://accounts.test/Account/v1"


@pytest.fixture
def stubbed_account_client(stub_account_url):
    """AccountClient pointed at a host that only exists inside ``responses``."""
    with AccountClient(base_url=stub_account_url, timeout=5) as client:
        yield client


@pytest.fixture
def http_mock():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


@pytest.fixture
def profile_api(http_mock, settings):
    """Clear every stub, then install the canned profile responses for this test."""
    MockFixture(settings.profile_api_url).install(http_mock)
    return http_mock


@pytest.fixture
def profile_client(settings):
    with ProfileClient(base_url=settings.profile_api_url, timeout=5) as client:
        yield client
