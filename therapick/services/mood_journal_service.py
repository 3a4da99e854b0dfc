# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the Therapick project.
# Licensed under the MIT License - see the LICENSE file for details.

import logging
from collections import Counter
from datetime import datetime, timedelta
from typing import List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.orm import Session

from therapick.models.mood_entry import MoodEntry
from therapick.models.user import User
from therapick.schemas.mood_schemas import MoodLogRequest
from therapick.utils.errors import AuthorizationError, NotFoundError, ValidationError
from therapick.utils.mood_mappings_utils import (
    JOURNAL_MOOD_SCORES,
    JOURNAL_MOODS,
    MOOD_ACTIVITIES,
    MOOD_TRIGGERS,
    NEUTRAL_MOOD_SCORE,
)
from therapick.utils.time_utils import as_utc, parse_datetime, start_of_day, utcnow
from therapick.utils.upsert_utils import upsert

logger = logging.getLogger(__name__)

DEFAULT_WINDOW_DAYS = 30
TOP_N = 5


def _parse(value, field: str) -> Optional[datetime]:
    try:
        return parse_datetime(value)
    except ValueError:
        raise ValidationError(f"Invalid {field}. Use an ISO date such as 2025-01-31")


def _check_choices(values: Optional[List[str]], allowed: List[str], field: str) -> None:
    if values is None:
        return
    invalid = [v for v in values if v not in allowed]
    if invalid:
        raise ValidationError(f"Invalid {field}: {', '.join(invalid)}. Allowed: {', '.join(allowed)}")


def log_mood(db: Session, user: User, payload: MoodLogRequest, now: datetime = None) -> Tuple[MoodEntry, bool]:
    """
    Upsert the user's entry for the payload's calendar day.
    Returns (entry, created).
    """
    if not payload.mood:
        raise ValidationError("Please provide a mood")
    if payload.mood not in JOURNAL_MOODS:
        raise ValidationError(f"Invalid mood '{payload.mood}'. Allowed: {', '.join(JOURNAL_MOODS)}")
    _check_choices(payload.triggers, MOOD_TRIGGERS, "triggers")
    _check_choices(payload.activities, MOOD_ACTIVITIES, "activities")

    now = now or utcnow()
    day = start_of_day(_parse(payload.date, "date") or now)

    existed = db.query(MoodEntry.id).filter_by(user_id=user.id, date=day).first() is not None

    # Only fields the caller sent overwrite an existing entry
    updates = {"mood": payload.mood, "updated_at": now}
    if "notes" in payload.model_fields_set:
        updates["notes"] = payload.notes
    if payload.triggers is not None:
        updates["triggers"] = payload.triggers
    if payload.activities is not None:
        updates["activities"] = payload.activities

    entry = upsert(
        db,
        MoodEntry,
        keys={"user_id": user.id, "date": day},
        insert_values={
            "mood": payload.mood,
            "notes": payload.notes,
            "triggers": payload.triggers or [],
            "activities": payload.activities or [],
            "created_at": now,
            "updated_at": now,
        },
        update_values=updates,
    )
    logger.info("😊 User %s logged mood '%s' for %s", user.id, entry.mood, day.date())
    return entry, not existed


def _default_range(start_date, end_date, now: datetime) -> Tuple[datetime, datetime]:
    start = _parse(start_date, "startDate") or now - timedelta(days=DEFAULT_WINDOW_DAYS)
    end = _parse(end_date, "endDate") or now
    # An inverted range simply matches nothing
    return start, end


def list_entries(db: Session, user: User, start_date: Optional[str] = None, end_date: Optional[str] = None,
                 limit: int = 30, now: datetime = None) -> List[MoodEntry]:
    now = now or utcnow()
    start, end = _default_range(start_date, end_date, now)
    return (
        db.query(MoodEntry)
        .filter(MoodEntry.user_id == user.id, MoodEntry.date >= start, MoodEntry.date <= end)
        .order_by(MoodEntry.date.desc())
        .limit(limit)
        .all()
    )


def _top(counter: Counter, key: str) -> List[dict]:
    # most_common keeps insertion order among equal counts
    return [{key: name, "count": count} for name, count in counter.most_common(TOP_N)]


def get_stats(db: Session, user: User, start_date: Optional[str] = None, end_date: Optional[str] = None,
              now: datetime = None) -> dict:
    now = now or utcnow()
    start, end = _default_range(start_date, end_date, now)

    in_range = (MoodEntry.user_id == user.id, MoodEntry.date >= start, MoodEntry.date <= end)

    counts = (
        db.query(MoodEntry.mood, func.count(MoodEntry.id))
        .filter(*in_range)
        .group_by(MoodEntry.mood)
        .all()
    )
    stats = [{"mood": mood, "count": count} for mood, count in counts]

    entries = db.query(MoodEntry).filter(*in_range).order_by(MoodEntry.date.asc()).all()

    if entries:
        total = sum(JOURNAL_MOOD_SCORES.get(e.mood, NEUTRAL_MOOD_SCORE) for e in entries)
        average = total / len(entries)
    else:
        average = NEUTRAL_MOOD_SCORE

    triggers = Counter()
    activities = Counter()
    for e in entries:
        triggers.update(e.triggers or [])
        activities.update(e.activities or [])

    return {
        "stats": stats,
        "averageScore": round(average, 2),
        "totalEntries": len(entries),
        "dateRange": {"start": as_utc(start), "end": as_utc(end)},
        "topTriggers": _top(triggers, "trigger"),
        "topActivities": _top(activities, "activity"),
    }


def delete_entry(db: Session, user: User, entry_id: int) -> None:
    entry = db.query(MoodEntry).filter(MoodEntry.id == entry_id).first()
    if not entry:
        raise NotFoundError("Mood entry not found")
    if entry.user_id != user.id:
        raise AuthorizationError("Not authorized to delete this mood entry")
    db.delete(entry)
    db.commit()
