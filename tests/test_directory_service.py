import pytest
import requests

from therapick.services.directory_service import StaticDirectory, TherapAPIDirectory
from therapick.utils.errors import AppError, DirectoryUnavailableError


class FakeResponse:
    def __init__(self, status_code=200, body=None, reason="OK"):
        self.status_code = status_code
        self._body = body
        self.reason = reason

    def json(self):
        if self._body is None:
            raise ValueError("no JSON")
        return self._body


class FakeSession:
    def __init__(self, response=None, exc=None):
        self.headers = {}
        self.response = response
        self.exc = exc
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        if self.exc:
            raise self.exc
        return self.response


def make_client(**kwargs):
    session = FakeSession(**kwargs)
    client = TherapAPIDirectory(base_url="https://therapapi.test/v1/", api_key="k3y", timeout=3, session=session)
    return client, session


def test_search_builds_query_and_maps_response():
    body = {"data": [{"id": "t1", "name": "Dr. One"}], "total": 41, "hasMore": True}
    client, session = make_client(response=FakeResponse(body=body))

    result = client.search(specialties=["Anxiety", "CBT"], location="Boston, MA", radius=10,
                           insurance=["Aetna"], gender="female", language="Spanish", limit=5, offset=10)

    call = session.calls[0]
    assert call["url"] == "https://therapapi.test/v1/therapists"
    assert call["timeout"] == 3
    assert call["params"] == {
        "location": "Boston, MA",
        "radius": 10,
        "specialties": "Anxiety,CBT",
        "insurance": "Aetna",
        "gender": "female",
        "language": "Spanish",
        "limit": 5,
        "offset": 10,
    }
    assert session.headers["Authorization"] == "Bearer k3y"
    assert result == {"therapists": body["data"], "total": 41, "has_more": True}


def test_search_with_coordinates_ranks_by_distance():
    body = {"data": [
        {"id": "far", "coordinates": {"lat": 41.0, "lng": -74.0}},
        {"id": "near", "coordinates": {"lat": 40.72, "lng": -74.0}},
    ]}
    client, session = make_client(response=FakeResponse(body=body))

    result = client.search(latitude=40.71, longitude=-74.0)

    assert session.calls[0]["params"]["lat"] == 40.71
    assert [t["id"] for t in result["therapists"]] == ["near", "far"]
    assert result["total"] == 0
    assert result["has_more"] is False


def test_transport_failure_maps_to_directory_unavailable():
    client, _ = make_client(exc=requests.exceptions.ConnectionError("boom"))
    with pytest.raises(DirectoryUnavailableError) as info:
        client.search(specialties=["Anxiety"])
    assert info.value.status_code == 503


def test_timeout_maps_to_directory_unavailable():
    client, _ = make_client(exc=requests.exceptions.Timeout("slow"))
    with pytest.raises(DirectoryUnavailableError):
        client.get_by_id("t1")


def test_upstream_5xx_maps_to_directory_unavailable():
    client, _ = make_client(response=FakeResponse(status_code=502, body={"message": "bad gateway"}))
    with pytest.raises(DirectoryUnavailableError):
        client.get_specialties()


def test_upstream_4xx_keeps_status_and_message():
    client, _ = make_client(response=FakeResponse(status_code=422, body={"message": "radius too large"}))
    with pytest.raises(AppError) as info:
        client.search(radius=5000)
    assert info.value.status_code == 422
    assert info.value.message == "radius too large"


def test_get_by_id_unwraps_data_and_handles_404():
    client, _ = make_client(response=FakeResponse(body={"data": {"id": "t1"}}))
    assert client.get_by_id("t1") == {"id": "t1"}

    client, _ = make_client(response=FakeResponse(body={"id": "t2"}))
    assert client.get_by_id("t2") == {"id": "t2"}

    client, _ = make_client(response=FakeResponse(status_code=404, body={"message": "nope"}))
    assert client.get_by_id("missing") is None


def test_non_json_body_maps_to_directory_unavailable():
    client, _ = make_client(response=FakeResponse(body=None))
    with pytest.raises(DirectoryUnavailableError):
        client.get_reviews("t1")


def test_static_directory_filters_and_paginates():
    directory = StaticDirectory()
    result = directory.search(specialties=["Anxiety"], limit=20)
    assert result["total"] >= 1
    assert all(any("anxiety" in tag.lower() for tag in t["tags"]) for t in result["therapists"])

    first = directory.search(limit=3, offset=0)
    second = directory.search(limit=3, offset=3)
    assert first["has_more"] is True
    assert not {t["id"] for t in first["therapists"]} & {t["id"] for t in second["therapists"]}


def test_static_directory_filters_by_insurance_gender_language():
    directory = StaticDirectory()
    result = directory.search(insurance=["medicaid"], gender="female", language="spanish")
    assert [t["name"] for t in result["therapists"]] == ["Maria Rodriguez, LMFT"]


def test_static_directory_radius_keeps_therapists_without_coordinates():
    directory = StaticDirectory()
    result = directory.search(latitude=40.7128, longitude=-74.0060, radius=1)
    distances = [t["distance"] for t in result["therapists"]]
    assert all(d is None or d <= 1 for d in distances)
    assert None in distances


def test_static_directory_lookup_by_string_id():
    directory = StaticDirectory()
    assert directory.get_by_id("1")["name"] == "Dr. Sarah Mitchell"
    assert directory.get_by_id(999) is None
    assert directory.get_reviews("1")
    assert directory.get_reviews("999") == []
    assert "Anxiety" in directory.get_specialties()
