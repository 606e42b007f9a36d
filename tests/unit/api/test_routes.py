from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from price_proxy.api.routes.search import get_price_service
from price_proxy.models.api import TierSearchResponse
from price_proxy.models.pricing import ExtractionStatus, PriceTier
from price_proxy.server import app
from price_proxy.utils.errors import FetchError, PriceDataNotFoundError, UpstreamStatusError


@pytest.fixture
def service():
    mock = MagicMock()
    mock.lookup_text = AsyncMock(return_value="10+US$ 0.1234 100+US$ 0.0987")
    mock.lookup = AsyncMock(
        return_value=TierSearchResponse(
            part="C85934",
            url="https://lcsc.test/product-detail/C85934.html",
            status=ExtractionStatus.FOUND,
            tiers=[PriceTier(tier="10+", price="0.1234")],
            formatted="10+US$ 0.1234",
        )
    )
    app.dependency_overrides[get_price_service] = lambda: mock
    yield mock
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_search_returns_plain_text(client, service):
    response = client.get("/search-lcsc", params={"part": "C85934"})

    assert response.status_code == 200
    assert response.headers["content-type"] == "text/plain; charset=utf-8"
    assert response.text == "10+US$ 0.1234 100+US$ 0.0987"
    service.lookup_text.assert_awaited_once_with("C85934")


def test_search_requires_part(client, service):
    response = client.get("/search-lcsc")

    assert response.status_code == 400
    assert response.json()["detail"] == "'part' query parameter is required"
    service.lookup_text.assert_not_awaited()


def test_search_blank_part(client, service):
    assert client.get("/search-lcsc", params={"part": "  "}).status_code == 400


def test_search_not_found(client, service):
    service.lookup_text.side_effect = PriceDataNotFoundError(
        "Price data not found or empty", status="not_found"
    )
    response = client.get("/search-lcsc", params={"part": "C1"})

    assert response.status_code == 404
    assert response.json()["detail"] == "Price data not found or empty"


def test_search_fetch_failure(client, service):
    service.lookup_text.side_effect = FetchError("boom")
    response = client.get("/search-lcsc", params={"part": "C1"})

    assert response.status_code == 502
    assert response.json()["detail"] == "Failed to fetch data from LCSC"


def test_search_upstream_status_passed_through(client, service):
    service.lookup_text.side_effect = UpstreamStatusError("LCSC returned status 403", status_code=403)
    response = client.get("/search-lcsc", params={"part": "C1"})

    assert response.status_code == 403
    assert response.json()["detail"] == "LCSC returned status 403"


def test_tiers_returns_json(client, service):
    response = client.get("/search-lcsc/tiers", params={"part": "C85934"})

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "found"
    assert body["tiers"] == [{"tier": "10+", "price": "0.1234"}]
    assert body["formatted"] == "10+US$ 0.1234"


def test_lifespan_configures_logging():
    with TestClient(app) as client:
        assert client.get("/health").json()["version"] == app.version


def test_search_upstream_non_error_status_is_bad_gateway(client, service):
    service.lookup_text.side_effect = UpstreamStatusError("LCSC returned status 304", status_code=304)
    response = client.get("/search-lcsc", params={"part": "C1"})

    assert response.status_code == 502
    assert response.json()["detail"] == "LCSC returned status 304"


def test_tiers_upstream_error_status_passed_through(client, service):
    service.lookup.side_effect = UpstreamStatusError("LCSC returned status 404", status_code=404)
    assert client.get("/search-lcsc/tiers", params={"part": "C1"}).status_code == 404
