# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the Therapick project.
# Licensed under the MIT License - see the LICENSE file for details.

import logging
from datetime import datetime
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from therapick.models.saved_therapist import SavedTherapist
from therapick.models.user import User
from therapick.schemas.saved_therapist_schemas import SaveTherapistRequest
from therapick.utils.errors import AppError, NotFoundError, ValidationError
from therapick.utils.time_utils import utcnow
from therapick.utils.upsert_utils import upsert

logger = logging.getLogger(__name__)


def snapshot_from_directory(therapist: dict) -> dict:
    specialties = therapist.get("specialties") or []
    return {
        "name": therapist.get("name"),
        "specialty": therapist.get("specialty") or (specialties[0] if specialties else None),
        "rating": therapist.get("rating"),
        "location": therapist.get("location") or therapist.get("city"),
    }


def snapshot_from_payload(payload: SaveTherapistRequest) -> dict:
    return {
        "name": payload.therapist_name or "Unknown",
        "specialty": payload.therapist_specialty or "Unknown",
        "rating": payload.therapist_rating or 0,
        "location": payload.therapist_location or "Unknown",
    }


def build_snapshot(directory, payload: SaveTherapistRequest) -> dict:
    """Fresh directory data when reachable, otherwise what the caller sent."""
    try:
        therapist = directory.get_by_id(payload.therapist_id)
    except AppError as e:
        logger.warning("⚠️ Directory lookup for therapist %s failed, using request data: %s",
                       payload.therapist_id, e.message)
        therapist = None
    if not therapist:
        return snapshot_from_payload(payload)
    return snapshot_from_directory(therapist)


def save_therapist(db: Session, user: User, payload: SaveTherapistRequest, directory,
                   now: datetime = None) -> Tuple[SavedTherapist, bool]:
    if not payload.therapist_id:
        raise ValidationError("Please provide therapist ID")

    now = now or utcnow()
    therapist_id = str(payload.therapist_id)
    snapshot = build_snapshot(directory, payload)

    existed = is_saved(db, user, therapist_id)

    updates = {"therapist_data": snapshot, "saved_at": now}
    # Only fields the caller sent overwrite the saved row
    if "moods" in payload.model_fields_set:
        updates["moods"] = payload.moods or []
    if "notes" in payload.model_fields_set:
        updates["notes"] = payload.notes

    saved = upsert(
        db,
        SavedTherapist,
        keys={"user_id": user.id, "therapist_id": therapist_id},
        insert_values={
            "therapist_data": snapshot,
            "moods": payload.moods or [],
            "notes": payload.notes,
            "saved_at": now,
            "created_at": now,
        },
        update_values=updates,
    )
    return saved, not existed


def list_saved(db: Session, user: User) -> List[SavedTherapist]:
    return (
        db.query(SavedTherapist)
        .filter(SavedTherapist.user_id == user.id)
        .order_by(SavedTherapist.saved_at.desc(), SavedTherapist.id.desc())
        .all()
    )


def get_saved(db: Session, user: User, therapist_id: str) -> Optional[SavedTherapist]:
    return (
        db.query(SavedTherapist)
        .filter(SavedTherapist.user_id == user.id, SavedTherapist.therapist_id == str(therapist_id))
        .first()
    )


def is_saved(db: Session, user: User, therapist_id: str) -> bool:
    return get_saved(db, user, therapist_id) is not None


def remove_saved(db: Session, user: User, therapist_id: str) -> None:
    saved = get_saved(db, user, therapist_id)
    if not saved:
        raise NotFoundError("Saved therapist not found")
    db.delete(saved)
    db.commit()
