"""
Shared fixtures.

External services are simulated with httpx.MockTransport so no test
touches the network.
"""

from pathlib import Path

import httpx
import pytest

from company_risk.config import Settings


class FakeServices:
    """
    Request handler standing in for Sayari, OFAC, World Bank and positionstack.

    Attributes:
        entities: Company name -> Sayari entity dict (missing = no match)
        search_failures: Company names whose Sayari search returns HTTP 500
        search_payloads: Company name -> raw JSON body served for its Sayari search
        locations: Company name -> positionstack result dict
        corruption: Country code -> World Bank indicator value
        sdn_csv: Body served as the OFAC SDN list
        fail: Services that fail outright: "token", "ofac", "worldbank", "geolocation"
        requests: Every request received, in order
    """

    def __init__(
        self,
        entities: dict | None = None,
        search_failures: set[str] | None = None,
        search_payloads: dict | None = None,
        locations: dict | None = None,
        corruption: dict | None = None,
        sdn_csv: str = "",
        fail: set[str] | None = None,
    ):
        self.entities = entities or {}
        self.search_failures = search_failures or set()
        self.search_payloads = search_payloads or {}
        self.locations = locations or {}
        self.corruption = corruption or {}
        self.sdn_csv = sdn_csv
        self.fail = fail or set()
        self.requests: list[httpx.Request] = []

    def paths(self, host: str) -> list[str]:
        """Paths requested from one host."""
        return [r.url.path for r in self.requests if r.url.host == host]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        host, path = request.url.host, request.url.path

        if host == "api.sayari.com" and path == "/oauth/token":
            if "token" in self.fail:
                return httpx.Response(401, json={"error": "access_denied"})
            return httpx.Response(200, json={"access_token": "test-token", "expires_in": 3600})

        if host == "api.sayari.com" and path == "/v1/search/entity":
            query = request.url.params["q"]
            if query in self.search_failures:
                return httpx.Response(500, json={"error": "internal error"})
            if query in self.search_payloads:
                return httpx.Response(200, json=self.search_payloads[query])
            entity = self.entities.get(query)
            return httpx.Response(200, json={"data": [entity] if entity else []})

        if host == "www.treasury.gov":
            if "ofac" in self.fail:
                raise httpx.ConnectError("connection refused", request=request)
            return httpx.Response(200, text=self.sdn_csv)

        if host == "api.worldbank.org":
            if "worldbank" in self.fail:
                return httpx.Response(502, text="Bad Gateway")
            country = path.split("/")[3]
            value = self.corruption.get(country)
            return httpx.Response(200, json=[{"page": 1, "pages": 1}, [{"value": value}]])

        if host == "api.positionstack.com":
            if "geolocation" in self.fail:
                raise httpx.ReadTimeout("timed out", request=request)
            location = self.locations.get(request.url.params["query"])
            return httpx.Response(200, json={"data": [location] if location else []})

        return httpx.Response(404)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings with test credentials and all files under tmp_path."""
    return Settings(
        _env_file=None,
        input_file=tmp_path / "companies.csv",
        output_file=tmp_path / "out" / "enriched.csv",
        report_file=tmp_path / "out" / "risk_report.txt",
        sayari_client_id="test-id",
        sayari_client_secret="test-secret",
        geolocation_api_key="test-key",
        company_limit=5,
    )


@pytest.fixture
def services() -> FakeServices:
    return FakeServices()


@pytest.fixture
def http_client(services: FakeServices):
    """HTTP client routed to the fake services."""
    client = httpx.Client(transport=httpx.MockTransport(services))
    yield client
    client.close()
