from datetime import timedelta

import pytest

from therapick.models.mood_entry import MoodEntry
from therapick.utils.time_utils import utcnow


def day(offset=0):
    return (utcnow() - timedelta(days=offset)).date().isoformat()


def log(client, headers, **body):
    return client.post("/api/moods", json=body, headers=headers)


def test_same_day_logs_upsert_into_one_entry(client, auth_headers, db):
    first = log(client, auth_headers, mood="sad", date=day(), notes="rough morning", triggers=["work"])
    assert first.status_code == 201

    second = log(client, auth_headers, mood="happy", date=day(), activities=["exercise"])
    assert second.status_code == 200
    entry = second.json()["data"]["moodEntry"]
    assert entry["id"] == first.json()["data"]["moodEntry"]["id"]
    assert entry["mood"] == "happy"
    # fields not sent keep their earlier values
    assert entry["notes"] == "rough morning"
    assert entry["triggers"] == ["work"]
    assert entry["activities"] == ["exercise"]

    assert db.query(MoodEntry).count() == 1


def test_dates_are_normalized_to_midnight(client, auth_headers):
    a = log(client, auth_headers, mood="okay", date=f"{day(1)}T08:15:00Z")
    b = log(client, auth_headers, mood="great", date=f"{day(1)}T21:45:00")
    assert a.status_code == 201
    assert b.status_code == 200
    assert b.json()["data"]["moodEntry"]["date"].endswith("T00:00:00+00:00")


def test_default_date_is_today(client, auth_headers):
    res = log(client, auth_headers, mood="okay")
    assert res.status_code == 201
    assert res.json()["data"]["moodEntry"]["date"].startswith(day())


def test_explicit_null_notes_clears_them(client, auth_headers):
    log(client, auth_headers, mood="sad", notes="keep?")
    res = log(client, auth_headers, mood="sad", notes=None)
    assert res.json()["data"]["moodEntry"]["notes"] is None


@pytest.mark.parametrize("body,message", [
    ({}, "Please provide a mood"),
    ({"mood": "ecstatic"}, "Invalid mood 'ecstatic'"),
    ({"mood": "okay", "triggers": ["weather"]}, "Invalid triggers: weather"),
    ({"mood": "okay", "activities": ["gaming"]}, "Invalid activities: gaming"),
])
def test_invalid_input_is_rejected(client, auth_headers, body, message):
    res = log(client, auth_headers, **body)
    assert res.status_code == 400
    assert res.json()["message"].startswith(message)


def test_entries_are_per_user(client, auth_headers, other_headers):
    log(client, auth_headers, mood="sad")
    res = log(client, other_headers, mood="great")
    assert res.status_code == 201

    mine = client.get("/api/moods", headers=auth_headers).json()["data"]
    assert [e["mood"] for e in mine["moodEntries"]] == ["sad"]


def test_list_newest_first_with_range_and_limit(client, auth_headers):
    for offset, mood in [(3, "sad"), (2, "okay"), (1, "happy"), (0, "great")]:
        log(client, auth_headers, mood=mood, date=day(offset))

    res = client.get("/api/moods", headers=auth_headers)
    assert [e["mood"] for e in res.json()["data"]["moodEntries"]] == ["great", "happy", "okay", "sad"]

    res = client.get("/api/moods", params={"limit": 2}, headers=auth_headers)
    assert res.json()["data"]["count"] == 2

    res = client.get("/api/moods", params={"startDate": day(2), "endDate": day(1)}, headers=auth_headers)
    assert [e["mood"] for e in res.json()["data"]["moodEntries"]] == ["happy", "okay"]


def test_inverted_range_yields_empty_results(client, auth_headers):
    log(client, auth_headers, mood="great", date=day(3))

    res = client.get("/api/moods/stats", params={"startDate": day(1), "endDate": day(5)}, headers=auth_headers)
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["totalEntries"] == 0
    assert data["averageScore"] == 3

    res = client.get("/api/moods", params={"startDate": day(1), "endDate": day(5)}, headers=auth_headers)
    assert res.status_code == 200
    assert res.json()["data"]["moodEntries"] == []


def test_end_date_alone_older_than_default_window(client, auth_headers):
    res = client.get("/api/moods/stats", params={"endDate": "2024-01-01"}, headers=auth_headers)
    assert res.status_code == 200
    assert res.json()["data"]["totalEntries"] == 0
    assert res.json()["data"]["averageScore"] == 3


def test_stats_for_empty_range(client, auth_headers):
    res = client.get("/api/moods/stats", headers=auth_headers)
    data = res.json()["data"]
    assert data["averageScore"] == 3
    assert data["totalEntries"] == 0
    assert data["stats"] == []
    assert data["topTriggers"] == []
    assert data["topActivities"] == []


def test_stats_average_and_counts(client, auth_headers):
    log(client, auth_headers, mood="great", date=day(2))
    log(client, auth_headers, mood="sad", date=day(1))
    log(client, auth_headers, mood="happy", date=day(0))

    data = client.get("/api/moods/stats", headers=auth_headers).json()["data"]
    assert data["totalEntries"] == 3
    assert data["averageScore"] == pytest.approx(3.33)
    assert sorted((s["mood"], s["count"]) for s in data["stats"]) == [("great", 1), ("happy", 1), ("sad", 1)]
    assert set(data["dateRange"]) == {"start", "end"}
    assert data["dateRange"]["end"].endswith("+00:00")


def test_stats_top_lists_are_capped_and_ties_keep_first_seen_order(client, auth_headers):
    log(client, auth_headers, mood="okay", date=day(3), triggers=["family", "work"],
        activities=["rest", "hobbies", "exercise"])
    log(client, auth_headers, mood="okay", date=day(2), triggers=["health", "work"],
        activities=["meditation", "therapy", "socializing"])
    log(client, auth_headers, mood="okay", date=day(1), triggers=["financial", "relationships", "other"])

    data = client.get("/api/moods/stats", headers=auth_headers).json()["data"]
    assert data["topTriggers"] == [
        {"trigger": "work", "count": 2},
        {"trigger": "family", "count": 1},
        {"trigger": "health", "count": 1},
        {"trigger": "financial", "count": 1},
        {"trigger": "relationships", "count": 1},
    ]
    assert [a["activity"] for a in data["topActivities"]] == ["rest", "hobbies", "exercise", "meditation", "therapy"]


def test_delete_entry_ownership(client, auth_headers, other_headers):
    entry = log(client, auth_headers, mood="sad").json()["data"]["moodEntry"]
    url = f"/api/moods/{entry['id']}"

    assert client.delete(url, headers=other_headers).status_code == 403
    assert client.delete(url, headers=auth_headers).status_code == 200
    assert client.delete(url, headers=auth_headers).status_code == 404
