# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the Therapick project.
# Licensed under the MIT License - see the LICENSE file for details.


from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from therapick.auth import get_current_user
from therapick.models.database import get_db
from therapick.models.user import User
from therapick.schemas.saved_therapist_schemas import SaveTherapistRequest
from therapick.services import saved_therapist_service
from therapick.services.directory_service import get_directory
from therapick.utils.responses import success_response

router = APIRouter(prefix="/api/saved-therapists", tags=["Saved Therapists"])


@router.post("")
def save_therapist(payload: SaveTherapistRequest, user: User = Depends(get_current_user),
                   db: Session = Depends(get_db), directory=Depends(get_directory)):
    saved, created = saved_therapist_service.save_therapist(db, user, payload, directory)
    if created:
        return success_response("Therapist saved successfully", {"savedTherapist": saved.to_dict()},
                                status_code=201)
    return success_response("Saved therapist updated successfully", {"savedTherapist": saved.to_dict()})


@router.get("")
def list_saved(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    saved = saved_therapist_service.list_saved(db, user)
    return success_response("Saved therapists retrieved successfully", {
        "savedTherapists": [s.to_dict() for s in saved],
        "count": len(saved),
    })


@router.get("/check/{therapist_id}")
def check_saved(therapist_id: str, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    saved = saved_therapist_service.get_saved(db, user, therapist_id)
    return success_response("Check completed", {
        "isSaved": saved is not None,
        "savedTherapist": saved.to_dict() if saved else None,
    })


@router.delete("/{therapist_id}")
def remove_saved(therapist_id: str, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    saved_therapist_service.remove_saved(db, user, therapist_id)
    return success_response("Therapist removed from saved list")
