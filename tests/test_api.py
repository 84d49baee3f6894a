import pytest
from fastapi.testclient import TestClient

from conftest import CONTRACT_TEXT, StubProvider
from risk_radar.api.main import app, get_provider
from risk_radar.domain.errors import ConfigurationError, GENERIC_FAILURE_NOTICE, TransportError


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


def _use(provider):
    app.dependency_overrides[get_provider] = lambda: provider


def test_health(client):
    body = client.get("/health").json()
    assert body["status"] == "ok"
    assert "provider_configured" in body


def test_regions_listing_and_detail(client):
    codes = [row["code"] for row in client.get("/regions").json()]
    assert codes == ["IN", "SG", "MY", "AE", "HK"]

    detail = client.get("/regions/sg").json()
    assert detail["name"] == "Singapore"
    assert detail["laws"][1] == "PDPA 2012"


def test_unknown_region_is_404(client):
    assert client.get("/regions/US").status_code == 404


def test_status_banner_entries(client):
    rows = client.get("/status").json()
    assert len(rows) == 5
    assert {row["status"] for row in rows} <= {"active", "syncing"}


def test_analyze_returns_result(client, sg_result):
    provider = StubProvider(result=sg_result)
    _use(provider)

    response = client.post("/analyze", json={"region": "SG", "contract_text": CONTRACT_TEXT})

    assert response.status_code == 200
    assert response.json()["risk_score"] == 85
    assert provider.calls[0][1].name == "Singapore"


def test_analyze_rejects_short_text_without_calling_provider(client, sg_result):
    provider = StubProvider(result=sg_result)
    _use(provider)

    response = client.post("/analyze", json={"region": "SG", "contract_text": "too short"})

    assert response.status_code == 400
    assert provider.calls == []


def test_analyze_unknown_region(client, sg_result):
    _use(StubProvider(result=sg_result))
    response = client.post("/analyze", json={"region": "ZZ", "contract_text": CONTRACT_TEXT})
    assert response.status_code == 404


@pytest.mark.parametrize(
    "error, status",
    [(ConfigurationError("no key"), 503), (TransportError("reset"), 502)],
)
def test_analyze_failures_use_generic_message(client, error, status):
    _use(StubProvider(error=error))
    response = client.post("/analyze", json={"region": "IN", "contract_text": CONTRACT_TEXT})
    assert response.status_code == status
    assert response.json()["detail"] == GENERIC_FAILURE_NOTICE
