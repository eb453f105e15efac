"""Pytest configuration and shared fixtures."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from lookup.config import UpstreamConfig
from relay.dependencies import get_config
from relay.main import app

IL_HOST = "data.illinois.gov"
IL_PATH = "/api/3/action/datastore_search"
CO_HOST = "data.colorado.gov"
CO_PATH = "/resource/7s5z-vewr.json"
CA_HOST = "iservices.dca.ca.gov"
CA_PATH = "/api/search/v1/licenseSearchService/getLicenseSearch"

# base64("relay:secret")
TEST_CALI_AUTH = "cmVsYXk6c2VjcmV0"
TEST_CO_TOKEN = "test-app-token"


@pytest.fixture
def upstream_config() -> UpstreamConfig:
    """Upstream configuration with test credentials and default URLs."""
    return UpstreamConfig(
        co_app_token=TEST_CO_TOKEN,
        cali_api_auth=TEST_CALI_AUTH,
        cali_client_codes=("800", "7500"),
        timeout=5.0,
    )


@pytest.fixture
def client(upstream_config: UpstreamConfig) -> Iterator[TestClient]:
    """Test client with the lifespan running and test configuration injected.

    Upstream HTTP calls are intercepted with the respx_mock fixture.
    """
    app.dependency_overrides[get_config] = lambda: upstream_config
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def colorado_record() -> dict[str, object]:
    """A Colorado dataset row as Socrata returns it."""
    return {
        "lastname": "Smith",
        "firstname": "John",
        "city": "Denver",
        "state": "CO",
        "licensetype": "RN",
        "licensenumber": "RN.0012345",
        "licensestatusdescription": "Active",
        "licensefirstissuedate": "2014-05-13T00:00:00.000",
        "licenselastreneweddate": "2022-09-30T00:00:00.000",
        "licenseexpirationdate": "2024-09-30T00:00:00.000",
        "linktoverifylicense": {"url": "https://apps.colorado.gov/dora/licensing/"},
    }
