"""Unit tests for postal code lookup (network calls are faked)."""

import pytest
import requests

from rireki.contexts.intake import Address, format_postal_code, lookup_address, normalize_postal_code
from rireki.contexts.intake import postal_code as postal_module


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


@pytest.fixture
def fake_service(monkeypatch):
    """Replace requests.get; returns a dict to set the next response and inspect calls."""
    state = {"response": None, "calls": []}

    def fake_get(url, params=None, timeout=None):
        state["calls"].append({"url": url, "params": params, "timeout": timeout})
        response = state["response"]
        if isinstance(response, Exception):
            raise response
        return response

    monkeypatch.setattr(postal_module.requests, "get", fake_get)
    return state


@pytest.mark.unit
def test_normalize_postal_code():
    """Test hyphen stripping and the seven-digit requirement."""
    assert normalize_postal_code("100-0001") == "1000001"
    assert normalize_postal_code("1000001") == "1000001"
    assert normalize_postal_code("100-000") is None
    assert normalize_postal_code("100-00011") is None
    assert normalize_postal_code("abc-defg") is None


@pytest.mark.unit
def test_format_postal_code():
    """Test XXX-XXXX formatting."""
    assert format_postal_code("1000001") == "100-0001"
    assert format_postal_code("〒150-0002") == "150-0002"
    assert format_postal_code("1500") == "150-0"
    assert format_postal_code("150") == "150"


@pytest.mark.unit
def test_lookup_uses_service_result(fake_service):
    """Test that the first service result is returned."""
    fake_service["response"] = FakeResponse(
        {
            "status": 200,
            "results": [{"address1": "北海道", "address2": "札幌市北区", "address3": "北七条西"}],
        }
    )

    address = lookup_address("060-0807")

    assert address == Address("0600807", "北海道", "札幌市北区", "北七条西")
    assert fake_service["calls"][0]["params"] == {"zipcode": "0600807"}
    assert fake_service["calls"][0]["timeout"] == postal_module.POSTAL_LOOKUP_TIMEOUT_S


@pytest.mark.unit
@pytest.mark.parametrize(
    "response",
    [
        requests.ConnectionError("offline"),
        requests.Timeout("slow"),
        FakeResponse({}, status_code=500),
        FakeResponse(ValueError("not json")),
        FakeResponse({"status": 200, "results": None}),
        FakeResponse({"status": 400, "message": "パラメータ不正"}),
        FakeResponse({"status": 200, "results": [{"unexpected": "shape"}]}),
    ],
)
def test_lookup_falls_back_to_table(fake_service, response):
    """Test the built-in table on every kind of service failure."""
    fake_service["response"] = response

    address = lookup_address("100-0001")

    assert address == Address("1000001", "東京都", "千代田区", "千代田")


@pytest.mark.unit
def test_lookup_unknown_code_returns_none(fake_service):
    """Test None when neither the service nor the table knows the code."""
    fake_service["response"] = FakeResponse({"status": 200, "results": None})

    assert lookup_address("9999999") is None


@pytest.mark.unit
def test_malformed_code_skips_service(fake_service):
    """Test that malformed codes return None without a request."""
    assert lookup_address("12-34") is None
    assert fake_service["calls"] == []
