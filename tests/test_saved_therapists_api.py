from datetime import timedelta

from therapick.models.saved_therapist import SavedTherapist
from therapick.models.user import User
from therapick.schemas.saved_therapist_schemas import SaveTherapistRequest
from therapick.services import saved_therapist_service
from therapick.services.directory_service import StaticDirectory
from therapick.utils.time_utils import utcnow


def save(client, headers, **body):
    return client.post("/api/saved-therapists", json=body, headers=headers)


def test_save_snapshots_directory_data(client, auth_headers):
    res = save(client, auth_headers, therapistId=1, moods=["Anxious"], notes="Seems great")
    assert res.status_code == 201
    saved = res.json()["data"]["savedTherapist"]
    assert saved["therapistId"] == "1"
    assert saved["therapistData"] == {
        "name": "Dr. Sarah Mitchell",
        "specialty": "Anxiety & Depression",
        "rating": 4.9,
        "location": "Manhattan, New York, NY",
    }
    assert saved["moods"] == ["Anxious"]
    assert saved["notes"] == "Seems great"
    assert saved["savedAt"].endswith("+00:00")


def test_saving_twice_keeps_one_record(client, auth_headers, db):
    first = save(client, auth_headers, therapistId=1, moods=["Anxious"], notes="first")
    second = save(client, auth_headers, therapistId="1", notes="second")
    assert first.status_code == 201
    assert second.status_code == 200
    assert second.json()["message"] == "Saved therapist updated successfully"

    saved = second.json()["data"]["savedTherapist"]
    assert saved["notes"] == "second"
    # moods omitted on re-save keep the earlier selection
    assert saved["moods"] == ["Anxious"]
    assert db.query(SavedTherapist).count() == 1


def test_resave_can_clear_moods_and_notes(client, auth_headers):
    save(client, auth_headers, therapistId=1, moods=["Anxious"], notes="call back")

    res = save(client, auth_headers, therapistId=1, moods=[], notes=None)
    saved = res.json()["data"]["savedTherapist"]
    assert saved["moods"] == []
    assert saved["notes"] is None


def test_missing_therapist_id(client, auth_headers):
    res = save(client, auth_headers, moods=["Lonely"])
    assert res.status_code == 400
    assert res.json()["message"] == "Please provide therapist ID"


def test_directory_outage_falls_back_to_request_data(offline_client):
    res = offline_client.post("/api/auth/register",
                              json={"name": "Jane", "email": "jane@example.com", "password": "secret123"})
    headers = {"Authorization": f"Bearer {res.json()['data']['token']}"}

    res = save(offline_client, headers, therapistId="ext-77", therapistName="Dr. Offline", therapistRating=4.2)
    assert res.status_code == 201
    assert res.json()["data"]["savedTherapist"]["therapistData"] == {
        "name": "Dr. Offline",
        "specialty": "Unknown",
        "rating": 4.2,
        "location": "Unknown",
    }


def test_unknown_therapist_uses_request_data(client, auth_headers):
    res = save(client, auth_headers, therapistId="not-listed")
    assert res.json()["data"]["savedTherapist"]["therapistData"]["name"] == "Unknown"


def test_list_newest_first_and_check(client, auth_headers, other_headers):
    save(client, auth_headers, therapistId=1)
    save(client, auth_headers, therapistId=2)
    save(client, other_headers, therapistId=3)

    data = client.get("/api/saved-therapists", headers=auth_headers).json()["data"]
    assert data["count"] == 2
    assert [s["therapistId"] for s in data["savedTherapists"]] == ["2", "1"]

    check = client.get("/api/saved-therapists/check/1", headers=auth_headers).json()["data"]
    assert check["isSaved"] is True
    assert check["savedTherapist"]["therapistId"] == "1"

    check = client.get("/api/saved-therapists/check/3", headers=auth_headers).json()["data"]
    assert check == {"isSaved": False, "savedTherapist": None}


def test_resave_moves_to_front(client, auth_headers, db):
    user_id = client.get("/api/auth/me", headers=auth_headers).json()["data"]["user"]["id"]
    user = db.get(User, user_id)
    directory = StaticDirectory()
    now = utcnow()

    saved_therapist_service.save_therapist(db, user, SaveTherapistRequest(therapistId=1), directory, now=now)
    saved_therapist_service.save_therapist(db, user, SaveTherapistRequest(therapistId=2), directory,
                                           now=now + timedelta(seconds=1))
    saved_therapist_service.save_therapist(db, user, SaveTherapistRequest(therapistId=1), directory,
                                           now=now + timedelta(seconds=2))

    assert [s.therapist_id for s in saved_therapist_service.list_saved(db, user)] == ["1", "2"]


def test_remove_saved(client, auth_headers):
    save(client, auth_headers, therapistId=1)

    res = client.delete("/api/saved-therapists/1", headers=auth_headers)
    assert res.status_code == 200
    assert client.get("/api/saved-therapists/check/1", headers=auth_headers).json()["data"]["isSaved"] is False

    res = client.delete("/api/saved-therapists/1", headers=auth_headers)
    assert res.status_code == 404
    assert res.json()["message"] == "Saved therapist not found"
