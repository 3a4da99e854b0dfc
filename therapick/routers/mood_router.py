# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the Therapick project.
# Licensed under the MIT License - see the LICENSE file for details.


from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from therapick.auth import get_current_user
from therapick.models.database import get_db
from therapick.models.user import User
from therapick.schemas.mood_schemas import MoodLogRequest
from therapick.services import mood_journal_service
from therapick.utils.responses import success_response

router = APIRouter(prefix="/api/moods", tags=["Mood Journal"])


@router.post("")
def log_mood(payload: MoodLogRequest, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    entry, created = mood_journal_service.log_mood(db, user, payload)
    return success_response("Mood logged successfully", {"moodEntry": entry.to_dict()},
                            status_code=201 if created else 200)


@router.get("")
def list_moods(
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    limit: int = Query(30, ge=1, le=366),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    entries = mood_journal_service.list_entries(db, user, start_date, end_date, limit)
    return success_response("Mood entries retrieved successfully", {
        "moodEntries": [e.to_dict() for e in entries],
        "count": len(entries),
    })


@router.get("/stats")
def mood_stats(
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Mood counts, average score and most common triggers/activities
    over the date range (last 30 days by default).
    """
    stats = mood_journal_service.get_stats(db, user, start_date, end_date)
    return success_response("Mood statistics retrieved successfully", stats)


@router.delete("/{entry_id}")
def delete_mood(entry_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    mood_journal_service.delete_entry(db, user, entry_id)
    return success_response("Mood entry deleted successfully")
