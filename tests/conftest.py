import pytest

from routing import routed_client
from routing.models import GeoPoint
from tests.fakes import FakeResponse, RecordingGet


@pytest.fixture
def sample_points():
    # (lat, lon)
    return [GeoPoint(35.0, 139.0), GeoPoint(35.1, 139.1)]


@pytest.fixture
def fake_get(monkeypatch):
    """requests.get replaced by a recorder returning an empty JSON object."""
    fake = RecordingGet(FakeResponse(b"{}"))
    monkeypatch.setattr(routed_client.requests, "get", fake)
    return fake
