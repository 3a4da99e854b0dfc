# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the Therapick project.
# Licensed under the MIT License - see the LICENSE file for details.

"""
Offline demo mode.

Mirrors saved matches, mood history, appointments and the session user on
top of a key-value store, under the same keys the web client uses for
local storage. Stores are injected so a server-backed store can replace
the in-memory or JSON-file ones.
"""

import copy
import json
import threading
import uuid
from pathlib import Path
from typing import Any, List, Optional

from therapick.models.appointment import CANCELLATION_WINDOW
from therapick.utils.errors import NotFoundError, PolicyViolationError, ValidationError
from therapick.utils.mood_mappings_utils import JOURNAL_MOODS
from therapick.utils.time_utils import parse_datetime, start_of_day, utcnow


MATCHES_KEY = "therapick-matches"
MOOD_HISTORY_KEY = "therapick-mood-history"
APPOINTMENTS_KEY = "therapick-appointments"
USER_KEY = "therapick-user"


class KeyValueStore:
    """Minimal storage interface: JSON-serialisable values by string key."""

    def get(self, key: str, default: Any = None) -> Any:
        raise NotImplementedError

    def set(self, key: str, value: Any) -> None:
        raise NotImplementedError

    def remove(self, key: str) -> None:
        raise NotImplementedError


class InMemoryKeyValueStore(KeyValueStore):
    def __init__(self):
        self._data = {}

    def get(self, key, default=None):
        if key not in self._data:
            return default
        return copy.deepcopy(self._data[key])

    def set(self, key, value):
        self._data[key] = copy.deepcopy(value)

    def remove(self, key):
        self._data.pop(key, None)


class JsonFileKeyValueStore(KeyValueStore):
    """Whole store kept in one JSON file, rewritten on every change."""

    def __init__(self, path):
        self.path = Path(path)
        self._lock = threading.Lock()

    def _load(self) -> dict:
        if not self.path.exists():
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            return json.load(f)

    def _save(self, data: dict) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
        tmp.replace(self.path)

    def get(self, key, default=None):
        with self._lock:
            return self._load().get(key, default)

    def set(self, key, value):
        with self._lock:
            data = self._load()
            data[key] = value
            self._save(data)

    def remove(self, key):
        with self._lock:
            data = self._load()
            if key in data:
                del data[key]
                self._save(data)


def _iso(dt) -> str:
    return dt.isoformat() + "Z"


class OfflineSavedMatches:
    def __init__(self, store: KeyValueStore):
        self.store = store

    def _all(self) -> List[dict]:
        return self.store.get(MATCHES_KEY, [])

    def save(self, therapist: dict) -> dict:
        # Drop any earlier snapshot so the pair stays unique
        matches = [m for m in self._all() if str(m.get("id")) != str(therapist["id"])]
        entry = {**therapist, "savedDate": _iso(utcnow())}
        matches.append(entry)
        self.store.set(MATCHES_KEY, matches)
        return entry

    def remove(self, therapist_id) -> None:
        matches = self._all()
        remaining = [m for m in matches if str(m.get("id")) != str(therapist_id)]
        if len(remaining) != len(matches):
            self.store.set(MATCHES_KEY, remaining)

    def list(self) -> List[dict]:
        # Appended in save order, so newest is last
        return list(reversed(self._all()))

    def is_saved(self, therapist_id) -> bool:
        return any(str(m.get("id")) == str(therapist_id) for m in self._all())


class OfflineMoodHistory:
    def __init__(self, store: KeyValueStore):
        self.store = store

    def log(self, mood: str, date: Optional[str] = None) -> dict:
        if mood not in JOURNAL_MOODS:
            raise ValidationError(f"Invalid mood '{mood}'")
        try:
            day = start_of_day(parse_datetime(date) or utcnow())
        except ValueError:
            raise ValidationError("Invalid date")
        key = day.date().isoformat()

        history = [m for m in self.store.get(MOOD_HISTORY_KEY, []) if m.get("date") != key]
        entry = {"date": key, "mood": mood, "timestamp": _iso(utcnow())}
        history.append(entry)
        self.store.set(MOOD_HISTORY_KEY, history)
        return entry

    def history(self) -> List[dict]:
        return sorted(self.store.get(MOOD_HISTORY_KEY, []), key=lambda m: m["date"])

    def mood_for(self, date: str) -> Optional[str]:
        for m in self.store.get(MOOD_HISTORY_KEY, []):
            if m.get("date") == date:
                return m.get("mood")
        return None


class OfflineAppointments:
    def __init__(self, store: KeyValueStore):
        self.store = store

    def _all(self) -> List[dict]:
        return self.store.get(APPOINTMENTS_KEY, [])

    def book(self, therapist: dict, date: str, time: str, notes: str = "", now=None) -> dict:
        now = now or utcnow()
        if not date or not time:
            raise ValidationError("Please select both date and time")
        try:
            when = parse_datetime(date)
        except ValueError:
            raise ValidationError("Invalid appointment date")
        if when <= now:
            raise ValidationError("Appointment date must be in the future")

        appointment = {
            "id": uuid.uuid4().hex,
            "therapistId": therapist["id"],
            "therapistName": therapist.get("name"),
            "therapistSpecialty": therapist.get("specialty"),
            "date": date,
            "time": time,
            "notes": notes,
            "status": "upcoming",
            "bookedAt": _iso(now),
        }
        appointments = self._all()
        appointments.append(appointment)
        self.store.set(APPOINTMENTS_KEY, appointments)
        return appointment

    def cancel(self, appointment_id, reason: Optional[str] = None, now=None) -> dict:
        now = now or utcnow()
        appointments = self._all()
        for a in appointments:
            if a["id"] != appointment_id:
                continue
            if a["status"] not in ("upcoming", "rescheduled"):
                raise PolicyViolationError(f"Cannot cancel a {a['status']} appointment")
            if parse_datetime(a["date"]) - now <= CANCELLATION_WINDOW:
                raise PolicyViolationError("Appointments must be cancelled at least 24 hours in advance")
            a["status"] = "cancelled"
            a["cancellationReason"] = reason
            a["cancelledAt"] = _iso(now)
            self.store.set(APPOINTMENTS_KEY, appointments)
            return a
        raise NotFoundError("Appointment not found")

    def list(self) -> List[dict]:
        return sorted(self._all(), key=lambda a: parse_datetime(a["date"]))


class OfflineSession:
    """Demo session: no credentials are checked, the user is just stored."""

    def __init__(self, store: KeyValueStore):
        self.store = store

    def current_user(self) -> Optional[dict]:
        return self.store.get(USER_KEY)

    def login(self, email: str, password: str) -> dict:
        user = {"id": 1, "name": "Demo User", "email": email, "avatar": None}
        self.store.set(USER_KEY, user)
        return user

    def signup(self, name: str, email: str, password: str) -> dict:
        user = {"id": uuid.uuid4().hex, "name": name, "email": email, "avatar": None}
        self.store.set(USER_KEY, user)
        return user

    def logout(self) -> None:
        self.store.remove(USER_KEY)
