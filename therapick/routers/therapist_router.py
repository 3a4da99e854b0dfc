# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the Therapick project.
# Licensed under the MIT License - see the LICENSE file for details.


from typing import List, Optional
from fastapi import APIRouter, Depends, Query

from therapick.services.directory_service import DEFAULT_LOCATION, DEFAULT_RADIUS, get_directory
from therapick.utils.errors import NotFoundError
from therapick.utils.mood_mappings_utils import MOOD_SPECIALTY_MAP, specialties_for
from therapick.utils.responses import success_response

router = APIRouter(prefix="/api/therapists", tags=["Therapists"])


@router.get("/search")
def search_therapists(
    moods: Optional[List[str]] = Query(None, alias="moods[]"),
    mood: Optional[List[str]] = Query(None, alias="moods"),
    location: Optional[str] = None,
    latitude: Optional[float] = Query(None, ge=-90, le=90),
    longitude: Optional[float] = Query(None, ge=-180, le=180),
    radius: Optional[int] = Query(None, ge=1),
    insurance: Optional[List[str]] = Query(None, alias="insurance[]"),
    insurance_plain: Optional[List[str]] = Query(None, alias="insurance"),
    gender: Optional[str] = None,
    language: Optional[str] = None,
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    directory=Depends(get_directory),
):
    """
    Search the directory for therapists matching the selected moods.
    Accepts both `moods[]=A&moods[]=B` and `moods=A&moods=B`.
    """
    selected = (moods or []) + (mood or [])
    insurance_list = (insurance or []) + (insurance_plain or [])
    specialties = specialties_for(selected)

    # A named location wins over coordinates; with neither, fall back to the default city
    if location:
        latitude = longitude = None
    elif latitude is None or longitude is None:
        latitude = longitude = None
        location = DEFAULT_LOCATION
    effective_radius = radius or DEFAULT_RADIUS

    result = directory.search(
        specialties=specialties,
        location=location,
        latitude=latitude,
        longitude=longitude,
        radius=effective_radius,
        insurance=insurance_list,
        gender=gender,
        language=language,
        limit=limit,
        offset=offset,
    )

    return success_response("Therapists retrieved successfully", {
        "therapists": result["therapists"],
        "total": result["total"],
        "hasMore": result["has_more"],
        "filters": {
            "moods": selected,
            "specialties": specialties,
            "location": location,
            "radius": effective_radius,
        },
    })


@router.get("/specialties")
def get_specialties(directory=Depends(get_directory)):
    return success_response("Specialties retrieved successfully", {
        "specialties": directory.get_specialties(),
        "moodMap": MOOD_SPECIALTY_MAP,
    })


@router.get("/{therapist_id}")
def get_therapist(therapist_id: str, directory=Depends(get_directory)):
    therapist = directory.get_by_id(therapist_id)
    if not therapist:
        raise NotFoundError("Therapist not found")
    return success_response("Therapist retrieved successfully", {"therapist": therapist})


@router.get("/{therapist_id}/reviews")
def get_therapist_reviews(therapist_id: str, directory=Depends(get_directory)):
    return success_response("Reviews retrieved successfully", {"reviews": directory.get_reviews(therapist_id)})
